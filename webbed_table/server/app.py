from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from .. import __version__ as PACKAGE_VERSION
from ..config import Config, load_config
from .context import ViewContext

logger = logging.getLogger(__name__)

_BASE_STYLES = (
    "body{font-family:system-ui,sans-serif;margin:1.5rem;color:#0f172a;}"
    "table{border-collapse:collapse;}"
    "th,td{padding:0.35rem 0.75rem;border-bottom:1px solid #e2e8f0;text-align:left;}"
    "th{font-weight:600;}"
    "td.numeric,th.numeric{text-align:right;}"
)


@dataclass(frozen=True, slots=True)
class TableView:
    """A page rendered by calling ``render`` with a fresh :class:`ViewContext`."""

    path: str
    render: Callable[[ViewContext], object]
    title: str | None = None


def render_document(body: str, *, title: str) -> str:
    return (
        "<!DOCTYPE html><html><head><meta charset='utf-8'>"
        f"<title>{html.escape(title)}</title>"
        f"<style>{_BASE_STYLES}</style>"
        "</head><body>"
        + body
        + "</body></html>"
    )


def html_response(
    context: ViewContext,
    *,
    title: str | None = None,
    config: Config | None = None,
) -> HTMLResponse:
    cfg = config if config is not None else context.config
    body = str(context.render())
    if cfg.ui.wrap_document:
        body = render_document(body, title=title or cfg.ui.title)
    return HTMLResponse(body)


def create_app(views: Sequence[TableView], config: Config | None = None) -> FastAPI:
    if not views:
        raise ValueError("At least one view must be provided to create the application")

    cfg = config if config is not None else load_config(None)
    app = FastAPI(title="webbed_table", version=PACKAGE_VERSION)
    app.state.config = cfg
    app.state.views = list(views)

    for view in views:
        app.add_api_route(
            view.path,
            endpoint=_make_endpoint(view, cfg),
            methods=["GET"],
            response_class=HTMLResponse,
            summary=view.title,
        )
        logger.debug("Registered table view at %s", view.path)
    return app


def _make_endpoint(view: TableView, config: Config) -> Callable[[], HTMLResponse]:
    def endpoint() -> HTMLResponse:
        context = ViewContext(config=config)
        view.render(context)
        return html_response(context, title=view.title, config=config)

    return endpoint


__all__ = ["TableView", "create_app", "html_response", "render_document"]
