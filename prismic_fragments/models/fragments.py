"""
Fragment models for document fields.

A fragment is the typed value of one document field: plain text, numbers,
dates, images, embeds, groups of sub-documents and slice zones. Structured
text lives in ``blocks.py`` and links in ``links.py``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple, Union

from .with_fragments import WithFragments, frozen_mapping

if TYPE_CHECKING:
    from .links import Link


@dataclass(frozen=True)
class Text:
    """Plain text value; also used for ``Select`` fields."""

    value: str


@dataclass(frozen=True)
class Number:
    """Numeric value, always held as a float."""

    value: float

    def as_text(self, pattern: str) -> str:
        """
        Format the number with a ``format()`` specification.

        Args:
            pattern: Format specification, for example ``".2f"``

        Returns:
            Formatted number
        """
        return format(self.value, pattern)


@dataclass(frozen=True)
class Color:
    """CSS colour in hexadecimal notation (``#RRGGBB``)."""

    hex_value: str


@dataclass(frozen=True)
class Date:
    """Calendar date without time. For date and time, see Timestamp."""

    value: date

    def as_text(self, pattern: str) -> str:
        return self.value.strftime(pattern)


@dataclass(frozen=True)
class Timestamp:
    """Date with time and offset."""

    value: datetime

    def as_text(self, pattern: str) -> str:
        return self.value.strftime(pattern)


@dataclass(frozen=True)
class GeoPoint:
    """Geographical point; either coordinate may be missing."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class Embed:
    """Object embedded from a third party service (oEmbed), e.g. a video."""

    type: str
    url: str
    html: str
    provider: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    oembed: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "oembed", frozen_mapping(self.oembed))


@dataclass(frozen=True)
class ImageView:
    """One concrete rendition of an image."""

    url: str
    width: int
    height: int
    alt: Optional[str] = None
    copyright: Optional[str] = None
    link_to: Optional["Link"] = None

    @property
    def ratio(self) -> float:
        """Width over height; 0.0 when the height is unknown."""
        if not self.height:
            return 0.0
        return self.width / self.height


@dataclass(frozen=True)
class Image:
    """Image fragment made of a main view plus named alternate views."""

    main: ImageView
    views: Mapping[str, ImageView] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "views", frozen_mapping(self.views))

    def get_view(self, name: str) -> Optional[ImageView]:
        """
        Get a specific rendition of the image.

        Args:
            name: ``"main"`` or a view name defined in the repository
                ("icon", "small", ...)

        Returns:
            The view, or None when the image has no such view
        """
        if name == "main":
            return self.main
        return self.views.get(name)

    @property
    def url(self) -> str:
        return self.main.url

    @property
    def width(self) -> int:
        return self.main.width

    @property
    def height(self) -> int:
        return self.main.height

    @property
    def alt(self) -> Optional[str]:
        return self.main.alt

    @property
    def copyright(self) -> Optional[str]:
        return self.main.copyright


@dataclass(frozen=True)
class GroupDoc(WithFragments):
    """One entry of a group: a map of field name to fragment."""

    fragments: Mapping[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class Group:
    """Repeatable group of sub-documents."""

    docs: Tuple[GroupDoc, ...] = ()

    def __iter__(self):
        return iter(self.docs)

    def __len__(self) -> int:
        return len(self.docs)


@dataclass(frozen=True)
class SimpleSlice:
    """Slice wrapping a single fragment value."""

    slice_type: str
    value: Any
    label: Optional[str] = None


@dataclass(frozen=True)
class CompositeSlice:
    """Slice with a repeatable group and a non-repeatable field map."""

    slice_type: str
    repeat: Group = field(default_factory=Group)
    non_repeat: Optional[GroupDoc] = None
    label: Optional[str] = None


Slice = Union[SimpleSlice, CompositeSlice]


@dataclass(frozen=True)
class SliceZone:
    """Ordered sequence of slices used to compose flexible layouts."""

    slices: Tuple[Slice, ...] = ()

    def __iter__(self):
        return iter(self.slices)

    def __len__(self) -> int:
        return len(self.slices)


@dataclass(frozen=True)
class Raw:
    """Fragment of an unrecognised type, kept as its decoded JSON value."""

    value: Any

    def as_text(self) -> str:
        return json.dumps(self.value)
