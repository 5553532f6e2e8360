"""Block models and the StructuredText fragment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from .fragments import Embed, ImageView
from .spans import Span


@dataclass(frozen=True)
class Heading:
    """Heading of level 1 to 9."""

    text: str
    spans: Tuple[Span, ...] = ()
    level: int = 1
    label: Optional[str] = None


@dataclass(frozen=True)
class Paragraph:
    """Regular paragraph."""

    text: str
    spans: Tuple[Span, ...] = ()
    label: Optional[str] = None


@dataclass(frozen=True)
class Preformatted:
    """Preformatted text, rendered as ``<pre>``."""

    text: str
    spans: Tuple[Span, ...] = ()
    label: Optional[str] = None


@dataclass(frozen=True)
class ListItem:
    """List item, typically an ``li`` within ``ul`` or ``ol`` depending on ``ordered``."""

    text: str
    spans: Tuple[Span, ...] = ()
    ordered: bool = False
    label: Optional[str] = None


@dataclass(frozen=True)
class ImageBlock:
    """Image placed between text blocks."""

    view: ImageView
    label: Optional[str] = None

    @property
    def url(self) -> str:
        return self.view.url

    @property
    def width(self) -> int:
        return self.view.width

    @property
    def height(self) -> int:
        return self.view.height


@dataclass(frozen=True)
class EmbedBlock:
    """Embedded third party object placed between text blocks."""

    embed: Embed
    label: Optional[str] = None


TextBlock = Union[Heading, Paragraph, Preformatted, ListItem]
Block = Union[Heading, Paragraph, Preformatted, ListItem, ImageBlock, EmbedBlock]

TEXT_BLOCK_TYPES = (Heading, Paragraph, Preformatted, ListItem)
BLOCK_TYPES = TEXT_BLOCK_TYPES + (ImageBlock, EmbedBlock)


@dataclass(frozen=True)
class StructuredText:
    """
    Rich text as created in the writing room.

    An ordered, immutable sequence of blocks. Rendering is delegated to
    ``renderers.structured_text_renderer``.
    """

    blocks: Tuple[Block, ...] = ()

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def _first(self, block_type):
        for block in self.blocks:
            if isinstance(block, block_type):
                return block
        return None

    def get_title(self) -> Optional[Heading]:
        """Return the first heading, if any."""
        return self._first(Heading)

    def get_first_paragraph(self) -> Optional[Paragraph]:
        return self._first(Paragraph)

    def get_first_preformatted(self) -> Optional[Preformatted]:
        return self._first(Preformatted)

    def get_first_image(self) -> Optional[ImageBlock]:
        return self._first(ImageBlock)

    def as_text(self) -> str:
        """Return the text of all text blocks, one per line."""
        parts = [block.text for block in self.blocks if isinstance(block, TEXT_BLOCK_TYPES)]
        return "\n".join(parts).strip()

    def as_html(self, link_resolver: Any = None, html_serializer: Any = None) -> str:
        """
        Render the blocks to HTML.

        Args:
            link_resolver: Callable (or object with ``resolve``) turning a
                DocumentLink into a URL
            html_serializer: Optional ``(element, content) -> Optional[str]`` hook

        Returns:
            HTML string
        """
        from ..renderers.structured_text_renderer import StructuredTextRenderer

        renderer = StructuredTextRenderer(link_resolver=link_resolver, html_serializer=html_serializer)
        return renderer.render(self.blocks)
