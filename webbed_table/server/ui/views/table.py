"""HTML fragments for the table view."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Protocol, Sequence

from ....config import Config
from ....core.columns import Column, html_attributes
from ....core.definition import TableDefinition
from ....core.errors import RecordAccessError, TableUsageError
from ....core.markup import SafeHTML, content_tag, join_markup, merge_attributes
from ..utils import as_records

logger = logging.getLogger(__name__)


class RenderContext(Protocol):
    config: Config

    def helper(self, name: str) -> Callable[..., object]: ...

    def concat(self, fragment: object) -> None: ...


def render_head(columns: Sequence[Column]) -> SafeHTML:
    cells = join_markup(
        content_tag("th", column.name, html_attributes(column)) for column in columns
    )
    return content_tag("thead", content_tag("tr", cells))


def render_body(
    columns: Sequence[Column],
    collection: Iterable[object],
    *,
    cell_separator: str = "\n",
) -> SafeHTML:
    rows: list[SafeHTML] = []
    for row_index, record in enumerate(as_records(collection)):
        cells = [
            content_tag("td", _format_cell(column, record, row_index), html_attributes(column))
            for column in columns
        ]
        rows.append(content_tag("tr", join_markup(cells, cell_separator)))
    logger.debug("Rendered %d body row(s) across %d column(s)", len(rows), len(columns))
    return content_tag("tbody", join_markup(rows))


def _format_cell(column: Column, record: object, row_index: int) -> object:
    try:
        return column.format(record)
    except Exception as error:
        raise RecordAccessError(
            f"Column '{column.name}' could not format row {row_index}: {error}",
            row_index=row_index,
            column_name=column.name,
        ) from error


def render_table(
    columns: Sequence[Column],
    collection: Iterable[object],
    options: Mapping[str, Any] | None = None,
    *,
    cell_separator: str = "\n",
    default_html: Mapping[str, object] | None = None,
) -> SafeHTML:
    """Render ``collection`` as a ``<table>`` with one column per declaration.

    Only the ``html`` entry of ``options`` is used; it becomes the attributes
    of the ``<table>`` tag, layered over ``default_html``.
    """

    table_html = (options or {}).get("html")
    attrs = merge_attributes(
        default_html,
        table_html if isinstance(table_html, Mapping) else None,
    )
    head = render_head(columns)
    body = render_body(columns, collection, cell_separator=cell_separator)
    return content_tag("table", head + body, attrs)


def table_for(
    context: RenderContext,
    collection: Iterable[object],
    options: Mapping[str, Any] | None = None,
    populate: Callable[[TableDefinition], object] | None = None,
) -> None:
    """Declare columns through ``populate`` and write the table into ``context``.

    ``populate`` receives a fresh :class:`TableDefinition` and is required.
    Nothing is written when declaration or rendering fails.
    """

    if populate is None:
        raise TableUsageError("table_for requires a populate callable")

    definition = TableDefinition(context)
    populate(definition)

    table_config = context.config.table
    markup = render_table(
        definition.columns,
        collection,
        options,
        cell_separator=table_config.cell_separator,
        default_html=table_config.default_html,
    )
    context.concat(markup)


__all__ = [
    "RenderContext",
    "render_body",
    "render_head",
    "render_table",
    "table_for",
]
