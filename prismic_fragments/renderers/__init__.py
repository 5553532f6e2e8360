"""
Renderers module for HTML output.

This module turns parsed fragments into HTML: inline spans, structured text
blocks, image views and embeds, groups and slice zones.
"""

from .config import HTMLRenderConfig, DEFAULT_CONFIG
from .link_resolver import (
    LinkResolver,
    LinkResolverLike,
    PatternLinkResolver,
    resolve_document_link,
    link_href,
)
from .span_renderer import SpanRenderer, HtmlSerializer, render_spans
from .media_renderer import image_view_html, embed_html
from .structured_text_renderer import (
    StructuredTextRenderer,
    BlockGroup,
    group_blocks,
    render_structured_text,
)
from .fragment_renderer import FragmentRenderer, render_fragment

__all__ = [
    "HTMLRenderConfig",
    "DEFAULT_CONFIG",
    "LinkResolver",
    "LinkResolverLike",
    "PatternLinkResolver",
    "resolve_document_link",
    "link_href",
    "SpanRenderer",
    "HtmlSerializer",
    "render_spans",
    "image_view_html",
    "embed_html",
    "StructuredTextRenderer",
    "BlockGroup",
    "group_blocks",
    "render_structured_text",
    "FragmentRenderer",
    "render_fragment",
]
