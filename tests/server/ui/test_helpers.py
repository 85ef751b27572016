"""Tests for the built-in formatting helpers."""

from __future__ import annotations

import pytest

import webbed_table.server.ui.helpers as helpers_mod
from webbed_table.server.ui.helpers import (
    default_helpers,
    number_to_human_size,
    number_with_delimiter,
    number_with_precision,
    register_helper,
    round_to,
    truncate,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0 Bytes"),
        (1, "1 Byte"),
        (1023, "1023 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1234567, "1.18 MB"),
        (5 * 1024**3, "5 GB"),
        (3 * 1024**4, "3 TB"),
        (None, None),
    ],
)
def test_number_to_human_size(value, expected) -> None:
    assert number_to_human_size(value) == expected


def test_number_to_human_size_precision() -> None:
    assert number_to_human_size(1234567, precision=2) == "1.2 MB"


def test_truncate() -> None:
    assert truncate("short", 10) == "short"
    assert truncate("a long sentence here", 10) == "a long ..."
    assert truncate("abcdef", 4, omission="~") == "abc~"
    assert truncate(None) is None


def test_number_formatters() -> None:
    assert number_with_precision(3.14159, 2) == "3.14"
    assert number_with_precision(2) == "2.000"
    assert number_with_delimiter(1234567) == "1,234,567"
    assert number_with_delimiter(1234567.5, ".") == "1.234.567.5"
    assert number_with_delimiter("1234567") == "1,234,567"
    assert number_with_delimiter(" 9876543.25 ", " ") == "9 876 543.25"
    assert number_with_delimiter("n/a") == "n/a"
    assert round_to(3.14159, 2) == 3.14


def test_register_helper_adds_to_defaults(monkeypatch) -> None:
    monkeypatch.setattr(helpers_mod, "_REGISTRY", dict(helpers_mod._REGISTRY), raising=False)

    @register_helper("shout")
    def _shout(value: object) -> str:
        return str(value).upper()

    available = default_helpers()
    assert available["shout"] is _shout
    assert "number_to_human_size" in available


def test_default_helpers_returns_a_copy() -> None:
    available = default_helpers()
    available.pop("truncate")
    assert "truncate" in default_helpers()
