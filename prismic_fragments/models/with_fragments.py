"""
Field access shared by documents, document links and group entries.

Anything holding a ``fragments`` mapping (field name to fragment) gets the
typed getters, text extraction and HTML rendering defined here.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, List, Mapping, Optional


def frozen_mapping(mapping: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return a read-only copy of ``mapping``."""
    return MappingProxyType(dict(mapping or {}))


class WithFragments:
    """
    Mixin for objects exposing a ``fragments`` mapping.

    Dataclasses using it get their ``fragments`` replaced by a read-only copy
    on construction.
    """

    fragments: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fragments", frozen_mapping(self.fragments))

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------
    def get(self, field: str) -> Optional[Any]:
        """
        Get the fragment stored under ``field``.

        Falls back to the first entry of a multi-valued field
        (``field[0]``, ``field[1]``, ...) when no single value exists.
        """
        single = self.fragments.get(field)
        if single is None:
            multi = self.get_all(field)
            if multi:
                single = multi[0]
        return single

    def get_all(self, field: str) -> List[Any]:
        """Get every value of a multi-valued field, in document order."""
        pattern = re.compile(re.escape(field) + r"\[\d+\]")
        return [value for name, value in self.fragments.items() if pattern.fullmatch(name)]

    def _get_typed(self, field: str, fragment_type) -> Optional[Any]:
        fragment = self.get(field)
        if isinstance(fragment, fragment_type):
            return fragment
        return None

    # ------------------------------------------------------------------
    # Typed getters
    # ------------------------------------------------------------------
    def get_structured_text(self, field: str):
        from .blocks import StructuredText

        return self._get_typed(field, StructuredText)

    def get_link(self, field: str):
        from .links import LINK_TYPES

        return self._get_typed(field, LINK_TYPES)

    def get_embed(self, field: str):
        from .fragments import Embed

        return self._get_typed(field, Embed)

    def get_color(self, field: str):
        from .fragments import Color

        return self._get_typed(field, Color)

    def get_number(self, field: str):
        from .fragments import Number

        return self._get_typed(field, Number)

    def get_date(self, field: str):
        from .fragments import Date

        return self._get_typed(field, Date)

    def get_timestamp(self, field: str):
        from .fragments import Timestamp

        return self._get_typed(field, Timestamp)

    def get_geo_point(self, field: str):
        from .fragments import GeoPoint

        return self._get_typed(field, GeoPoint)

    def get_group(self, field: str):
        from .fragments import Group

        return self._get_typed(field, Group)

    def get_slice_zone(self, field: str):
        from .fragments import SliceZone

        return self._get_typed(field, SliceZone)

    def get_image(self, field: str, view: Optional[str] = None):
        """
        Get an image fragment, or one of its views.

        A structured text field yields its first image block. With ``view``
        set, the matching ImageView is returned instead of the Image.
        """
        image = self._image_from(self.get(field))
        if image is None or view is None:
            return image
        return image.get_view(view)

    def get_all_images(self, field: str, view: Optional[str] = None) -> List[Any]:
        """Get every image of a multi-valued field, or one view of each."""
        from .blocks import ImageBlock, StructuredText
        from .fragments import Image

        images = []
        for fragment in self.get_all(field):
            if isinstance(fragment, Image):
                images.append(fragment)
            elif isinstance(fragment, StructuredText):
                images.extend(Image(block.view) for block in fragment.blocks if isinstance(block, ImageBlock))
        if view is None:
            return images
        views = [image.get_view(view) for image in images]
        return [image_view for image_view in views if image_view is not None]

    @staticmethod
    def _image_from(fragment: Any):
        from .blocks import StructuredText
        from .fragments import Image

        if isinstance(fragment, Image):
            return fragment
        if isinstance(fragment, StructuredText):
            first = fragment.get_first_image()
            if first is not None:
                return Image(first.view)
        return None

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def get_text(self, field: str) -> str:
        """Get a plain text rendition of a field; empty for non-textual kinds."""
        from .blocks import StructuredText
        from .fragments import Color, Date, Number, Text

        fragment = self.get(field)
        if isinstance(fragment, StructuredText):
            return fragment.as_text()
        if isinstance(fragment, Number):
            return str(fragment.value)
        if isinstance(fragment, Color):
            return fragment.hex_value
        if isinstance(fragment, Text):
            return fragment.value
        if isinstance(fragment, Date):
            return fragment.value.isoformat()
        return ""

    def get_date_text(self, field: str, pattern: str) -> Optional[str]:
        date_fragment = self.get_date(field)
        if date_fragment is None:
            return None
        return date_fragment.as_text(pattern)

    def get_number_text(self, field: str, pattern: str) -> Optional[str]:
        number = self.get_number(field)
        if number is None:
            return None
        return number.as_text(pattern)

    def get_boolean(self, field: str) -> bool:
        """True when a text field holds ``yes`` or ``true`` (any case)."""
        from .fragments import Text

        fragment = self.get(field)
        if isinstance(fragment, Text):
            return fragment.value.lower() in ("yes", "true")
        return False

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------
    def get_linked_documents(self) -> List[Any]:
        """
        Collect document links held by this object.

        Looks at direct link fields, hyperlink spans of structured text fields
        and, recursively, at the entries of groups.
        """
        from .blocks import TEXT_BLOCK_TYPES, StructuredText
        from .fragments import Group
        from .links import DocumentLink
        from .spans import Hyperlink

        result = []
        for fragment in self.fragments.values():
            if isinstance(fragment, DocumentLink):
                result.append(fragment)
            elif isinstance(fragment, Group):
                for doc in fragment.docs:
                    result.extend(doc.get_linked_documents())
            elif isinstance(fragment, StructuredText):
                for block in fragment.blocks:
                    if not isinstance(block, TEXT_BLOCK_TYPES):
                        continue
                    for span in block.spans:
                        if isinstance(span, Hyperlink) and isinstance(span.link, DocumentLink):
                            result.append(span.link)
        return result

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------
    def get_html(self, field: str, link_resolver: Any = None, html_serializer: Any = None) -> str:
        from ..renderers.fragment_renderer import FragmentRenderer

        renderer = FragmentRenderer(link_resolver=link_resolver, html_serializer=html_serializer)
        return renderer.render(self.get(field))

    def as_html(self, link_resolver: Any = None, html_serializer: Any = None) -> str:
        """Render every field as ``<section data-field="...">``, one per line."""
        from ..renderers.fragment_renderer import FragmentRenderer

        renderer = FragmentRenderer(link_resolver=link_resolver, html_serializer=html_serializer)
        return renderer.render_fields(self)
