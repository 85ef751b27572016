"""Shared utilities for server-side UI rendering."""
from __future__ import annotations

from typing import Iterable

import pyarrow as pa


def table_to_records(table: pa.Table) -> list[dict[str, object]]:
    return [dict(row) for row in table.to_pylist()]


def as_records(collection: Iterable[object] | pa.Table | pa.RecordBatch) -> Iterable[object]:
    """Return ``collection`` as an iterable of records.

    Arrow tables and record batches are expanded into one mapping per row;
    every other iterable is passed through untouched.
    """

    if isinstance(collection, pa.RecordBatch):
        return table_to_records(pa.Table.from_batches([collection]))
    if isinstance(collection, pa.Table):
        return table_to_records(collection)
    return collection


__all__ = ["as_records", "table_to_records"]
