"""Helpers for resolving configured helper references to callables."""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Callable, Mapping

from ..core.errors import HelperResolutionError

logger = logging.getLogger(__name__)


def normalize_helper_path(path: str | None) -> tuple[str, str]:
    """Normalize ``path`` to ``(module, attribute)`` with whitespace trimmed.

    The path must include a module and attribute separated by ``:`` or ``.``.
    :class:`HelperResolutionError` is raised when the format is invalid.
    """

    if path is None or not path.strip():
        raise HelperResolutionError("Helper path must not be empty")

    trimmed = path.strip()
    if ":" in trimmed:
        module_part, attr_part = trimmed.split(":", 1)
    else:
        if "." not in trimmed:
            raise HelperResolutionError(
                f"Helper path '{trimmed}' must include a module and a callable name"
            )
        module_part, attr_part = trimmed.rsplit(".", 1)

    module_name = module_part.strip()
    attr_name = attr_part.strip()
    if not module_name or not attr_name:
        raise HelperResolutionError(
            f"Helper path '{trimmed}' must include both module and attribute names"
        )
    return module_name, attr_name


def load_helper(reference: str) -> Callable[..., object]:
    """Import and return the callable named by ``reference``."""

    module_name, attr = normalize_helper_path(reference)
    try:
        module = import_module(module_name)
    except ModuleNotFoundError as error:
        raise HelperResolutionError(
            f"Module '{module_name}' could not be imported"
        ) from error
    try:
        target = getattr(module, attr)
    except AttributeError as error:
        raise HelperResolutionError(
            f"Helper '{attr}' not found in '{module_name}'"
        ) from error
    if not callable(target):
        raise HelperResolutionError(
            f"Resolved object '{attr}' from '{module_name}' is not callable"
        )
    return target


def load_helpers(references: Mapping[str, str]) -> dict[str, Callable[..., object]]:
    helpers: dict[str, Callable[..., object]] = {}
    for name, reference in references.items():
        helpers[name] = load_helper(reference)
        logger.debug("Loaded helper %r from %s", name, reference)
    return helpers


__all__ = ["load_helper", "load_helpers", "normalize_helper_path"]
