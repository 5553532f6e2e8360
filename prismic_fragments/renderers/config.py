"""Configuration for the HTML renderers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HTMLRenderConfig:
    """
    Rendering settings shared by the span, block and fragment renderers.

    Attributes:
        broken_link_href: ``href`` used for document links the API reported
            as broken. The link resolver is never called for those.
        line_break: Markup substituted for newlines in text blocks.
        image_block_class: CSS class of the paragraph wrapping image blocks.
        slice_class: CSS class of the slice wrapper ``div``.
        link_rel: ``rel`` value added next to a web link ``target``.
    """

    broken_link_href: str = "#broken"
    line_break: str = "<br/>"
    image_block_class: str = "block-img"
    slice_class: str = "slice"
    link_rel: str = "noopener"


DEFAULT_CONFIG = HTMLRenderConfig()
