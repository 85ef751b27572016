"""Column variants declared through :class:`~webbed_table.core.definition.TableDefinition`."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence, Union


def read_accessor(record: object, name: str) -> object:
    """Read accessor ``name`` from ``record``.

    Mappings (plain dicts, Arrow rows) are read by key. Other records are read
    with :func:`getattr`; callable attributes such as bound methods are
    invoked without arguments.
    """

    if isinstance(record, Mapping):
        try:
            return record[name]
        except KeyError as error:
            raise AttributeError(
                f"Record has no key '{name}'"
            ) from error
    value = getattr(record, name)
    if callable(value):
        return value()
    return value


@dataclass(frozen=True, slots=True)
class SimpleColumn:
    name: str
    method: str
    options: Mapping[str, Any] = field(default_factory=dict)

    def format(self, record: object) -> object:
        return read_accessor(record, self.method)


@dataclass(frozen=True, slots=True)
class HelperColumn:
    """Passes the accessor value, then ``args``, to ``helper``."""

    name: str
    method: str
    helper: Callable[..., object]
    args: Sequence[object] = ()
    options: Mapping[str, Any] = field(default_factory=dict)

    def format(self, record: object) -> object:
        return self.helper(read_accessor(record, self.method), *self.args)


@dataclass(frozen=True, slots=True)
class ProcColumn:
    name: str
    callback: Callable[[Any], object]
    options: Mapping[str, Any] = field(default_factory=dict)

    def format(self, record: object) -> object:
        return self.callback(record)


Column = Union[SimpleColumn, HelperColumn, ProcColumn]


def html_attributes(column: Column) -> Mapping[str, object]:
    attrs = column.options.get("html")
    if isinstance(attrs, Mapping):
        return attrs
    return {}


__all__ = [
    "Column",
    "HelperColumn",
    "ProcColumn",
    "SimpleColumn",
    "html_attributes",
    "read_accessor",
]
