"""Parsers for image views, image fragments and embeds."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..exceptions import ParsingError
from ..models.fragments import Embed, Image, ImageView
from .json_utils import get_dict, get_text, to_int
from .link_parser import parse_link

logger = logging.getLogger(__name__)


def parse_image_view(node: Dict[str, Any]) -> ImageView:
    """
    Parse one image rendition.

    Missing dimensions read as 0. A ``linkTo`` that cannot be parsed leaves
    the view unlinked.
    """
    dimensions = get_dict(node, "dimensions")
    try:
        link_to = parse_link(node.get("linkTo")) if isinstance(node, dict) else None
    except ParsingError as e:
        logger.debug(f"Dropping image link: {e}")
        link_to = None
    return ImageView(
        url=get_text(node, "url"),
        width=to_int(dimensions.get("width")) or 0,
        height=to_int(dimensions.get("height")) or 0,
        alt=get_text(node, "alt", None),
        copyright=get_text(node, "copyright", None),
        link_to=link_to,
    )


def parse_image(node: Dict[str, Any]) -> Image:
    """Parse an image fragment: ``main`` plus named ``views``."""
    views = {name: parse_image_view(view) for name, view in get_dict(node, "views").items() if isinstance(view, dict)}
    return Image(main=parse_image_view(get_dict(node, "main")), views=views)


def parse_embed(node: Dict[str, Any]) -> Embed:
    """Parse the ``oembed`` object of an embed fragment or block."""
    oembed = get_dict(node, "oembed")
    return Embed(
        type=get_text(oembed, "type"),
        provider=get_text(oembed, "provider_name", None),
        url=get_text(oembed, "embed_url"),
        width=to_int(oembed.get("width")) if isinstance(oembed.get("width"), (int, float)) else None,
        height=to_int(oembed.get("height")) if isinstance(oembed.get("height"), (int, float)) else None,
        html=get_text(oembed, "html"),
        oembed=dict(oembed),
    )
