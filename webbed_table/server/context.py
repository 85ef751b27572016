"""Per-render view context: helper lookup plus an output buffer."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from ..config import Config, load_config
from ..core.definition import TableDefinition
from ..core.errors import HelperResolutionError
from ..core.markup import SafeHTML, escape, join_markup
from .helper_loader import load_helpers
from .ui.helpers import default_helpers
from .ui.views.table import table_for as _table_for


class ViewContext:
    """Binds helpers and output for one rendered view.

    Helpers resolve in this order, later sources overriding earlier ones:
    built-in helpers, ``config.helpers.references``, then ``helpers``.
    Public methods defined on subclasses are also resolvable by name.
    """

    def __init__(
        self,
        helpers: Mapping[str, Callable[..., object]] | None = None,
        *,
        config: Config | None = None,
    ) -> None:
        self.config = config if config is not None else load_config(None)
        self.helpers: dict[str, Callable[..., object]] = default_helpers()
        self.helpers.update(load_helpers(self.config.helpers.references))
        if helpers:
            self.helpers.update(helpers)
        self._output: list[SafeHTML] = []

    def helper(self, name: str) -> Callable[..., object]:
        registered = self.helpers.get(name)
        if registered is not None:
            return registered
        if not name.startswith("_"):
            attribute = getattr(self, name, None)
            if callable(attribute):
                return attribute
        raise HelperResolutionError(f"Helper '{name}' not found on the view context")

    def concat(self, fragment: object) -> None:
        self._output.append(escape(fragment))

    def render(self) -> SafeHTML:
        return join_markup(self._output)

    def table_for(
        self,
        collection: Iterable[object],
        options: Mapping[str, Any] | None = None,
        populate: Callable[[TableDefinition], object] | None = None,
    ) -> None:
        _table_for(self, collection, options, populate)


__all__ = ["ViewContext"]
