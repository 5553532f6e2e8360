"""
Block-level HTML rendering of structured text.

Adjacent list items sharing the same ``ordered`` flag are grouped into a
single ``<ul>`` or ``<ol>``. Every other block is rendered on its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..exceptions import RenderingError
from ..models.blocks import (
    Block,
    BLOCK_TYPES,
    EmbedBlock,
    Heading,
    ImageBlock,
    ListItem,
    Paragraph,
    Preformatted,
    TEXT_BLOCK_TYPES,
)
from ..utils.html_utils import class_attribute, escape_attribute, has_label
from .config import DEFAULT_CONFIG, HTMLRenderConfig
from .link_resolver import LinkResolverLike
from .media_renderer import embed_html, image_view_html
from .span_renderer import HtmlSerializer, SpanRenderer

logger = logging.getLogger(__name__)


@dataclass
class BlockGroup:
    """Consecutive blocks sharing a container tag (``ul``, ``ol``), or a lone block (tag None)."""

    tag: Optional[str]
    blocks: List[Block] = field(default_factory=list)


def _list_tag(block: Block) -> Optional[str]:
    if isinstance(block, ListItem):
        return "ol" if block.ordered else "ul"
    return None


def group_blocks(blocks: Iterable[Block]) -> List[BlockGroup]:
    """
    Split blocks into render groups.

    A list item joins the previous group when that group is a list of the
    same kind; anything else starts a new group.
    """
    groups: List[BlockGroup] = []
    for block in blocks:
        tag = _list_tag(block)
        last = groups[-1] if groups else None
        if tag is not None and last is not None and last.tag == tag:
            last.blocks.append(block)
        else:
            groups.append(BlockGroup(tag, [block]))
    return groups


class StructuredTextRenderer:
    """
    Render structured text blocks to HTML.

    A custom ``html_serializer(element, content)`` is consulted for every
    block and span; a non-None return value replaces the default markup.
    """

    def __init__(
        self,
        link_resolver: Optional[LinkResolverLike] = None,
        html_serializer: Optional[HtmlSerializer] = None,
        config: Optional[HTMLRenderConfig] = None,
    ) -> None:
        self.link_resolver = link_resolver
        self.html_serializer = html_serializer
        self.config = config or DEFAULT_CONFIG
        self.span_renderer = SpanRenderer(link_resolver, html_serializer, self.config)

    def render(self, blocks: Iterable[Block]) -> str:
        """
        Render a block sequence.

        Args:
            blocks: Blocks in document order

        Returns:
            HTML string
        """
        html_parts: List[str] = []
        for group in group_blocks(blocks):
            if group.tag is not None:
                html_parts.append(f"<{group.tag}>")
            html_parts.extend(self.render_block(block) for block in group.blocks)
            if group.tag is not None:
                html_parts.append(f"</{group.tag}>")
        return "".join(html_parts)

    def render_block(self, block: Block) -> str:
        """Render one block, honouring the custom serializer."""
        if not isinstance(block, BLOCK_TYPES):
            raise RenderingError("Unsupported block kind", type(block).__name__)

        content = ""
        if isinstance(block, TEXT_BLOCK_TYPES):
            content = self.span_renderer.render(block.text, block.spans)

        if self.html_serializer is not None:
            custom = self.html_serializer(block, content)
            if custom is not None:
                return custom

        classes = class_attribute(block.label)
        if isinstance(block, Heading):
            return f"<h{block.level}{classes}>{content}</h{block.level}>"
        if isinstance(block, Paragraph):
            return f"<p{classes}>{content}</p>"
        if isinstance(block, Preformatted):
            return f"<pre{classes}>{content}</pre>"
        if isinstance(block, ListItem):
            return f"<li{classes}>{content}</li>"
        if isinstance(block, ImageBlock):
            css_class = self.config.image_block_class
            if has_label(block.label):
                css_class += f" {block.label}"
            view_html = image_view_html(block.view, self.link_resolver, self.config)
            return f'<p class="{escape_attribute(css_class)}">{view_html}</p>'
        if isinstance(block, EmbedBlock):
            return embed_html(block.embed, block.label)
        raise RenderingError("Unsupported block kind", type(block).__name__)


def render_structured_text(
    blocks: Iterable[Block],
    link_resolver: Optional[LinkResolverLike] = None,
    html_serializer: Optional[HtmlSerializer] = None,
) -> str:
    """Shortcut for ``StructuredTextRenderer(...).render(blocks)``."""
    return StructuredTextRenderer(link_resolver, html_serializer).render(blocks)
