"""Rendering routines for image views and embeds."""

from __future__ import annotations

from typing import Optional

from ..models.fragments import Embed, ImageView
from ..utils.html_utils import escape_attribute, has_label
from .config import DEFAULT_CONFIG, HTMLRenderConfig
from .link_resolver import LinkResolverLike, link_href, link_target


def image_view_html(
    view: ImageView,
    link_resolver: Optional[LinkResolverLike] = None,
    config: HTMLRenderConfig = DEFAULT_CONFIG,
) -> str:
    """
    Render an image view as ``<img>``, wrapped in an anchor when it links somewhere.

    Args:
        view: Image view to render
        link_resolver: Resolver used when the view links to a document
        config: Rendering settings

    Returns:
        HTML string
    """
    img_tag = (
        f'<img alt="{escape_attribute(view.alt or "")}" src="{escape_attribute(view.url)}" '
        f'width="{view.width}" height="{view.height}" />'
    )
    if view.link_to is None:
        return img_tag

    href = link_href(view.link_to, link_resolver, config)
    attributes = " ".join((f'href="{escape_attribute(href)}"',) + link_target(view.link_to, config))
    return f"<a {attributes}>{img_tag}</a>"


def embed_html(embed: Embed, label: Optional[str] = None) -> str:
    """Render an embed: its raw oEmbed HTML inside a ``data-oembed`` div."""
    attributes = [
        f'data-oembed="{escape_attribute(embed.url)}"',
        f'data-oembed-type="{escape_attribute(embed.type.lower())}"',
    ]
    if embed.provider is not None:
        attributes.append(f'data-oembed-provider="{escape_attribute(embed.provider.lower())}"')
    if has_label(label):
        attributes.append(f'class="{escape_attribute(label)}"')
    return f"<div {' '.join(attributes)}>{embed.html}</div>"
