"""Column declarations, escaping and inflection shared by the renderers."""

from .columns import Column, HelperColumn, ProcColumn, SimpleColumn
from .definition import TableDefinition
from .errors import HelperResolutionError, RecordAccessError, TableError, TableUsageError
from .inflection import humanize
from .markup import SafeHTML, content_tag, escape, mark_safe

__all__ = [
    "Column",
    "HelperColumn",
    "HelperResolutionError",
    "ProcColumn",
    "RecordAccessError",
    "SafeHTML",
    "SimpleColumn",
    "TableDefinition",
    "TableError",
    "TableUsageError",
    "content_tag",
    "escape",
    "humanize",
    "mark_safe",
]
