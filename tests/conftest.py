from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

try:
    from hypothesis import HealthCheck, settings
except ImportError:  # pragma: no cover - hypothesis is optional in some environments
    HealthCheck = None  # type: ignore[assignment]
    settings = None  # type: ignore[assignment]

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests._records import FileEntry, Person  # noqa: E402
from webbed_table.server.context import ViewContext  # noqa: E402


@pytest.fixture
def people() -> list[Person]:
    return [
        Person("Ada", "Lovelace", 36),
        Person("Grace", "Hopper", 85),
        Person("Alan", "Turing", 41),
    ]


@pytest.fixture
def files() -> list[FileEntry]:
    return [
        FileEntry("report.pdf", 1536),
        FileEntry("notes-with-a-rather-long-name.txt", 12),
    ]


@pytest.fixture
def view_context() -> ViewContext:
    return ViewContext()


def pytest_configure(config: pytest.Config) -> None:
    """Declare pytest markers and configure Hypothesis defaults."""

    config.addinivalue_line(
        "markers", "integration: Tests that exercise the FastAPI host end to end."
    )

    default_profile = _configure_hypothesis_profiles()
    if settings is None:
        return

    # The option itself is registered by the Hypothesis pytest plugin.
    selected = config.getoption("hypothesis_profile", default=None)
    if selected:
        settings.load_profile(selected)
    elif os.getenv("CI"):
        settings.load_profile("ci")
    else:
        settings.load_profile(default_profile)


_HYPOTHESIS_PROFILES_REGISTERED = False


def _configure_hypothesis_profiles() -> str:
    """Register Hypothesis profiles and return the default profile name."""

    global _HYPOTHESIS_PROFILES_REGISTERED
    if settings is None:
        return "dev"

    if not _HYPOTHESIS_PROFILES_REGISTERED:
        suppress_checks = (HealthCheck.filter_too_much,) if HealthCheck else ()
        settings.register_profile(
            "dev",
            settings(
                max_examples=25,
                deadline=500,
                suppress_health_check=suppress_checks,
            ),
        )
        settings.register_profile(
            "ci",
            settings(
                max_examples=75,
                deadline=750,
                print_blob=True,
                suppress_health_check=suppress_checks,
            ),
        )
        settings.register_profile(
            "stress",
            settings(
                max_examples=150,
                deadline=None,
                print_blob=True,
                suppress_health_check=suppress_checks,
            ),
        )
        _HYPOTHESIS_PROFILES_REGISTERED = True
    return "dev"
