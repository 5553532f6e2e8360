"""HTML helpers shared by the renderers."""

from __future__ import annotations

from html import escape
from typing import Optional


def escape_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` in text content. Quotes are left as is."""
    return escape(text, quote=False)


def escape_attribute(value: object) -> str:
    """Make a value safe inside a double-quoted attribute."""
    return str(value).replace('"', "&quot;")


def has_label(label: Optional[str]) -> bool:
    return bool(label)


def class_attribute(label: Optional[str]) -> str:
    """Return `` class="label"`` for a non-empty label, else an empty string."""
    if not has_label(label):
        return ""
    return f' class="{escape_attribute(label)}"'


def convert_line_breaks(html: str, line_break: str = "<br/>") -> str:
    """Replace literal newlines with line-break elements."""
    return html.replace("\n", line_break)
