"""Identifier to label conversion."""
from __future__ import annotations


def humanize(identifier: object) -> str:
    """Turn ``identifier`` into a display label.

    >>> humanize("first_name")
    'First name'
    >>> humanize("author_id")
    'Author'
    """

    text = str(identifier).lstrip("_")
    if text.endswith("_id") and len(text) > 3:
        text = text[:-3]
    text = text.replace("_", " ").strip().lower()
    if not text:
        return ""
    return text[0].upper() + text[1:]


__all__ = ["humanize"]
