"""Configuration loading for webbed_table."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    import tomli as tomllib  # type: ignore


class ConfigError(ValueError):
    """Raised when a configuration value has the wrong shape."""


@dataclass(slots=True)
class TableConfig:
    """Rendering knobs applied to every ``table_for`` call."""

    cell_separator: str = "\n"
    default_html: Mapping[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class HelpersConfig:
    """Helper name to ``module:attr`` references loaded into each view context."""

    references: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class UIConfig:
    """Document shell used by the HTTP host."""

    wrap_document: bool = True
    title: str = "webbed_table"


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    table: TableConfig = field(default_factory=TableConfig)
    helpers: HelpersConfig = field(default_factory=HelpersConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def _load_toml(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from ``path`` if provided, otherwise defaults.

    Parameters
    ----------
    path:
        Path to a ``config.toml`` file. When ``None`` or missing the default
        configuration is used.
    """

    cfg = Config()
    if path is None:
        return cfg

    data = _load_toml(Path(path))
    table_data = data.get("table")
    if isinstance(table_data, Mapping):
        cfg.table = _parse_table(table_data, base=cfg.table)
    helpers_data = data.get("helpers")
    if isinstance(helpers_data, Mapping):
        cfg.helpers = _parse_helpers(helpers_data, base=cfg.helpers)
    ui_data = data.get("ui")
    if isinstance(ui_data, Mapping):
        cfg.ui = _parse_ui(ui_data, base=cfg.ui)
    return cfg


def _parse_table(data: Mapping[str, Any], base: TableConfig) -> TableConfig:
    overrides: MutableMapping[str, Any] = {}
    if "cell_separator" in data:
        if not isinstance(data["cell_separator"], str):
            raise ConfigError("table.cell_separator must be a string")
        overrides["cell_separator"] = data["cell_separator"]
    if "default_html" in data:
        if not isinstance(data["default_html"], Mapping):
            raise ConfigError("table.default_html must be a table of attributes")
        overrides["default_html"] = dict(data["default_html"])
    if not overrides:
        return base
    return replace(base, **overrides)


def _parse_helpers(data: Mapping[str, Any], base: HelpersConfig) -> HelpersConfig:
    if "references" not in data:
        return base
    references = data["references"]
    if not isinstance(references, Mapping):
        raise ConfigError("helpers.references must map helper names to 'module:attr' strings")
    parsed: dict[str, str] = {}
    for name, reference in references.items():
        if not isinstance(reference, str):
            raise ConfigError(f"helpers.references.{name} must be a string")
        parsed[str(name)] = reference
    return replace(base, references=parsed)


def _parse_ui(data: Mapping[str, Any], base: UIConfig) -> UIConfig:
    overrides: MutableMapping[str, Any] = {}
    if "wrap_document" in data:
        if not isinstance(data["wrap_document"], bool):
            raise ConfigError("ui.wrap_document must be a boolean")
        overrides["wrap_document"] = data["wrap_document"]
    if "title" in data:
        if not isinstance(data["title"], str):
            raise ConfigError("ui.title must be a string")
        overrides["title"] = data["title"]
    if not overrides:
        return base
    return replace(base, **overrides)


__all__ = [
    "Config",
    "ConfigError",
    "HelpersConfig",
    "TableConfig",
    "UIConfig",
    "load_config",
]
