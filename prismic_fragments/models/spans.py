"""Span models: character-range annotations over a text block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .links import Link


@dataclass(frozen=True)
class Em:
    """Emphasis over ``[start, end)``."""

    start: int
    end: int


@dataclass(frozen=True)
class Strong:
    """Strong emphasis over ``[start, end)``."""

    start: int
    end: int


@dataclass(frozen=True)
class Label:
    """Custom label over ``[start, end)``, rendered as a CSS class."""

    start: int
    end: int
    label: str


@dataclass(frozen=True)
class Hyperlink:
    """Link over ``[start, end)``."""

    start: int
    end: int
    link: "Link"


Span = Union[Em, Strong, Label, Hyperlink]

SPAN_TYPES = (Em, Strong, Label, Hyperlink)
