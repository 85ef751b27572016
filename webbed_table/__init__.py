"""Declarative HTML tables for server-rendered views."""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config, ConfigError, load_config
from .core import (
    HelperResolutionError,
    RecordAccessError,
    SafeHTML,
    TableDefinition,
    TableError,
    TableUsageError,
    mark_safe,
)
from .server.context import ViewContext
from .server.ui.views.table import render_table, table_for

__all__ = [
    "Config",
    "ConfigError",
    "HelperResolutionError",
    "RecordAccessError",
    "SafeHTML",
    "TableDefinition",
    "TableError",
    "TableUsageError",
    "ViewContext",
    "__version__",
    "load_config",
    "mark_safe",
    "render_table",
    "table_for",
]
