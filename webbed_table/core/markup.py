"""Escaping and tag building for server-rendered HTML fragments."""
from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class SafeHTML:
    """Markup that has already been escaped and must be emitted verbatim."""

    html: str = ""

    def __str__(self) -> str:
        return self.html

    def __add__(self, other: object) -> "SafeHTML":
        return SafeHTML(self.html + escape(other).html)

    def __radd__(self, other: object) -> "SafeHTML":
        return SafeHTML(escape(other).html + self.html)

    def __bool__(self) -> bool:
        return bool(self.html)


def mark_safe(text: object) -> SafeHTML:
    if isinstance(text, SafeHTML):
        return text
    return SafeHTML("" if text is None else str(text))


def escape(value: object) -> SafeHTML:
    """Escape ``value`` unless it is already tagged as :class:`SafeHTML`.

    ``None`` renders as the empty string. Any other object is converted with
    :func:`str` before escaping.
    """

    if isinstance(value, SafeHTML):
        return value
    if value is None:
        return SafeHTML("")
    return SafeHTML(html.escape(str(value), quote=True))


def attribute_name(key: object) -> str:
    name = str(key)
    if name.endswith("_") and len(name) > 1:
        return name[:-1]
    return name


def merge_attributes(*layers: Mapping[str, object] | None) -> dict[str, object]:
    """Merge attribute mappings by normalized name, later layers winning.

    ``{"class": "a"}`` followed by ``{"class_": "b"}`` yields ``{"class": "b"}``.
    """

    merged: dict[str, object] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            merged[attribute_name(key)] = value
    return merged


def render_attributes(attrs: Mapping[str, object] | None) -> str:
    """Render ``attrs`` as ``name="value"`` pairs in insertion order.

    ``None`` and ``False`` values are dropped, ``True`` renders the boolean
    form (``disabled="disabled"``) and sequences are joined with spaces. A
    trailing underscore is stripped from keys so ``class_`` maps to ``class``.
    """

    if not attrs:
        return ""
    parts: list[str] = []
    for name, value in merge_attributes(attrs).items():
        if value is None or value is False:
            continue
        if value is True:
            value = name
        elif isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value if item is not None)
        parts.append(f' {html.escape(name, quote=True)}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


def content_tag(
    name: str,
    content: object = None,
    attrs: Mapping[str, object] | None = None,
) -> SafeHTML:
    return SafeHTML(f"<{name}{render_attributes(attrs)}>{escape(content).html}</{name}>")


def join_markup(fragments: Iterable[object], separator: str = "") -> SafeHTML:
    return SafeHTML(separator.join(escape(fragment).html for fragment in fragments))


__all__ = [
    "SafeHTML",
    "attribute_name",
    "content_tag",
    "escape",
    "join_markup",
    "mark_safe",
    "merge_attributes",
    "render_attributes",
]
