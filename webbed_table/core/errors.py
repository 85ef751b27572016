"""Exception taxonomy for table rendering."""
from __future__ import annotations


class TableError(Exception):
    """Base class for all table rendering failures."""


class TableUsageError(TableError, TypeError):
    """Raised when ``table_for`` is called without a populate callable."""


class HelperResolutionError(TableError, LookupError):
    """Raised when a ``helper_method`` reference cannot be resolved."""


class RecordAccessError(TableError, RuntimeError):
    """Raised when a column cannot format a record.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, row_index: int, column_name: str) -> None:
        super().__init__(message)
        self.row_index = row_index
        self.column_name = column_name


__all__ = [
    "HelperResolutionError",
    "RecordAccessError",
    "TableError",
    "TableUsageError",
]
