"""
HTML rendering of field fragments, groups and slice zones.

Structured text is handed to ``StructuredTextRenderer``; the other fragment
kinds have small fixed templates. Group entries and documents render each
field as ``<section data-field="name">``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..models.blocks import StructuredText
from ..models.fragments import (
    Color,
    CompositeSlice,
    Date,
    Embed,
    Group,
    GroupDoc,
    Image,
    Number,
    SimpleSlice,
    SliceZone,
    Text,
    Timestamp,
)
from ..models.links import DocumentLink, FileLink, ImageLink, WebLink
from ..utils.html_utils import escape_attribute, escape_text, has_label
from .config import DEFAULT_CONFIG, HTMLRenderConfig
from .link_resolver import LinkResolverLike, link_href
from .media_renderer import embed_html, image_view_html
from .span_renderer import HtmlSerializer
from .structured_text_renderer import StructuredTextRenderer

logger = logging.getLogger(__name__)


class FragmentRenderer:
    """Render any fragment kind to HTML."""

    def __init__(
        self,
        link_resolver: Optional[LinkResolverLike] = None,
        html_serializer: Optional[HtmlSerializer] = None,
        config: Optional[HTMLRenderConfig] = None,
    ) -> None:
        """
        Initialize fragment renderer.

        Args:
            link_resolver: Resolver for document links
            html_serializer: Optional override hook for structured text blocks and spans
            config: Rendering settings
        """
        self.link_resolver = link_resolver
        self.html_serializer = html_serializer
        self.config = config or DEFAULT_CONFIG
        self.structured_text_renderer = StructuredTextRenderer(link_resolver, html_serializer, self.config)

    def render(self, fragment: Any) -> str:
        """
        Render one fragment.

        Kinds without an HTML form (geo points, raw values, missing fields)
        render as an empty string.
        """
        if fragment is None:
            return ""
        if isinstance(fragment, StructuredText):
            return self.structured_text_renderer.render(fragment.blocks)
        if isinstance(fragment, Number):
            return f'<span class="number">{fragment.value}</span>'
        if isinstance(fragment, Color):
            return f'<span class="color">{fragment.hex_value}</span>'
        if isinstance(fragment, Text):
            return f'<span class="text">{escape_text(fragment.value)}</span>'
        if isinstance(fragment, (Date, Timestamp)):
            return f"<time>{fragment.value.isoformat()}</time>"
        if isinstance(fragment, Embed):
            return embed_html(fragment)
        if isinstance(fragment, Image):
            return image_view_html(fragment.main, self.link_resolver, self.config)
        if isinstance(fragment, (WebLink, ImageLink)):
            return f'<a href="{escape_attribute(fragment.url)}">{escape_text(fragment.url)}</a>'
        if isinstance(fragment, FileLink):
            return f'<a href="{escape_attribute(fragment.url)}">{escape_text(fragment.filename)}</a>'
        if isinstance(fragment, DocumentLink):
            href = link_href(fragment, self.link_resolver, self.config)
            return f'<a href="{escape_attribute(href)}">{escape_text(fragment.slug)}</a>'
        if isinstance(fragment, Group):
            return self.render_group(fragment)
        if isinstance(fragment, SliceZone):
            return self.render_slice_zone(fragment)
        logger.debug(f"No HTML rendition for {type(fragment).__name__}")
        return ""

    def render_fields(self, holder: Any) -> str:
        """
        Render every field of a document or group entry.

        Each field becomes ``<section data-field="name">html</section>``;
        sections are joined with newlines and the result is trimmed.
        """
        sections: List[str] = []
        for name, fragment in holder.fragments.items():
            sections.append(f'<section data-field="{escape_attribute(name)}">{self.render(fragment)}</section>\n')
        return "".join(sections).strip()

    def render_group(self, group: Group) -> str:
        return "".join(self.render_fields(doc) for doc in group.docs)

    def render_slice_zone(self, slice_zone: SliceZone) -> str:
        return "".join(self.render_slice(slice_) for slice_ in slice_zone.slices)

    def render_slice(self, slice_: Any) -> str:
        """
        Render one slice in its ``data-slicetype`` wrapper.

        A composite slice renders its non-repeatable fields (as a one-entry
        group) followed by the entries of its repeatable group.
        """
        css_class = self.config.slice_class
        if has_label(slice_.label):
            css_class += f" {slice_.label}"

        if isinstance(slice_, CompositeSlice):
            non_repeat = Group((slice_.non_repeat,)) if slice_.non_repeat is not None else None
            inner = self.render(non_repeat) + self.render(slice_.repeat)
        elif isinstance(slice_, SimpleSlice):
            inner = self.render(slice_.value)
        else:
            logger.debug(f"Skipping unknown slice kind {type(slice_).__name__}")
            return ""

        return (
            f'<div data-slicetype="{escape_attribute(slice_.slice_type)}" '
            f'class="{escape_attribute(css_class)}">{inner}</div>'
        )


def render_fragment(
    fragment: Any,
    link_resolver: Optional[LinkResolverLike] = None,
    html_serializer: Optional[HtmlSerializer] = None,
) -> str:
    """Shortcut for ``FragmentRenderer(...).render(fragment)``."""
    return FragmentRenderer(link_resolver, html_serializer).render(fragment)
