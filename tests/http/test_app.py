from __future__ import annotations

import pytest

from tests._records import Person
from webbed_table.config import load_config
from webbed_table.core.errors import RecordAccessError
from webbed_table.server.app import TableView, create_app, html_response
from webbed_table.server.context import ViewContext

try:  # pragma: no cover - optional dependency guard
    from fastapi.testclient import TestClient
except ModuleNotFoundError:  # pragma: no cover
    TestClient = None  # type: ignore

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(TestClient is None, reason="fastapi is required for HTTP integration tests"),
]

PEOPLE = [Person("Ada", "Lovelace", 36), Person("Grace", "Hopper", 85)]


def _people_view(context: ViewContext) -> None:
    def populate(t):
        t.column("Full Name", callback=lambda person: person.full_name())
        t.age(html={"class": "numeric"})

    context.table_for(PEOPLE, {"html": {"id": "people_table"}}, populate)


def test_create_app_requires_views() -> None:
    with pytest.raises(ValueError, match="At least one view"):
        create_app([])


def test_view_renders_inside_document() -> None:
    client = TestClient(create_app([TableView("/people", _people_view, title="People")]))

    response = client.get("/people")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    body = response.text
    assert body.startswith("<!DOCTYPE html>")
    assert "<title>People</title>" in body
    assert '<table id="people_table">' in body
    assert "<td>Grace Hopper</td>" in body
    assert '<td class="numeric">85</td>' in body


def test_each_request_gets_a_fresh_context() -> None:
    client = TestClient(create_app([TableView("/people", _people_view)]))

    first = client.get("/people").text
    second = client.get("/people").text

    assert first == second
    assert second.count("<table") == 1


def test_wrap_document_can_be_disabled(tmp_path) -> None:
    config = load_config(None)
    config.ui.wrap_document = False
    client = TestClient(create_app([TableView("/people", _people_view)], config))

    body = client.get("/people").text

    assert body.startswith('<table id="people_table">')
    assert body.endswith("</table>")


def test_render_errors_propagate() -> None:
    def broken(context: ViewContext) -> None:
        context.table_for(PEOPLE, populate=lambda t: t.shoe_size())

    client = TestClient(create_app([TableView("/broken", broken)]))

    with pytest.raises(RecordAccessError):
        client.get("/broken")


def test_html_response_uses_config_title() -> None:
    context = ViewContext()
    context.table_for([], populate=lambda t: t.name())

    response = html_response(context)

    assert b"<title>webbed_table</title>" in response.body
    assert b"<tbody></tbody>" in response.body
