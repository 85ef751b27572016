"""Declarative column builder handed to ``table_for`` populate callables."""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Protocol, Sequence

from .columns import Column, HelperColumn, ProcColumn, SimpleColumn
from .errors import HelperResolutionError
from .inflection import humanize

logger = logging.getLogger(__name__)


class HelperSource(Protocol):
    def helper(self, name: str) -> Callable[..., object]: ...


class TableDefinition:
    """Ordered, append-only collection of column declarations.

    Columns are declared explicitly::

        t.column("First Name", "first_name")
        t.column("Full Name", callback=lambda p: f"{p.first} {p.last}")
        t.column("Size", "size", helper_method="number_to_human_size")
        t.column("File Name", "file_name", helper_method=["truncate", 80])

    or through the accessor shorthand, where any unknown public attribute
    declares a column reading that accessor::

        t.size(helper_method="number_to_human_size", html={"class": "numeric"})
        t.file_name("File", helper_method=["truncate", 80])
    """

    def __init__(self, context: HelperSource | None = None) -> None:
        self.context = context
        self.columns: list[Column] = []

    def column(
        self,
        name: object,
        method: str | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        callback: Callable[[Any], object] | None = None,
        **extra: Any,
    ) -> None:
        merged: dict[str, Any] = dict(options or {})
        merged.update(extra)

        if method is None:
            method = str(name)
            label = humanize(name)
        else:
            label = str(name)

        column: Column
        if callback is not None:
            column = ProcColumn(label, callback, merged)
        elif merged.get("helper_method"):
            helper, args = self._resolve_helper(merged["helper_method"])
            column = HelperColumn(label, method, helper, tuple(args), merged)
        else:
            column = SimpleColumn(label, method, merged)

        logger.debug("Declared %s %r", type(column).__name__, label)
        self.columns.append(column)

    def _resolve_helper(self, option: object) -> tuple[Callable[..., object], Sequence[object]]:
        if isinstance(option, (list, tuple)):
            if not option:
                raise HelperResolutionError("helper_method list must start with a helper name")
            reference, *args = option
        else:
            reference, args = option, []

        if callable(reference):
            return reference, args
        if not isinstance(reference, str) or not reference.strip():
            raise HelperResolutionError(
                f"helper_method must name a helper, got {reference!r}"
            )
        if self.context is None:
            raise HelperResolutionError(
                f"Helper '{reference}' cannot be resolved without a view context"
            )
        helper = self.context.helper(reference.strip())
        logger.debug("Resolved helper %r with %d extra argument(s)", reference, len(args))
        return helper, args

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name.startswith("_"):
            raise AttributeError(name)

        def declare(
            label: object = None,
            options: Mapping[str, Any] | None = None,
            *,
            callback: Callable[[Any], object] | None = None,
            **extra: Any,
        ) -> None:
            if isinstance(label, Mapping) and options is None:
                label, options = None, label
            column_name = label if label is not None else humanize(name)
            self.column(column_name, name, options, callback=callback, **extra)

        declare.__name__ = name
        return declare


__all__ = ["HelperSource", "TableDefinition"]
