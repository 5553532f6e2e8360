"""
Link parser for API link descriptors.

A link descriptor looks like ``{"type": "Link.web", "value": {...}}``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from ..exceptions import ParsingError
from ..models.links import DocumentLink, FileLink, ImageLink, Link, WebLink
from .json_utils import get_dict, get_list, get_text, to_int

logger = logging.getLogger(__name__)


def parse_web_link(value: Dict[str, Any]) -> WebLink:
    return WebLink(url=get_text(value, "url"), target=get_text(value, "target", None))


def parse_file_link(value: Dict[str, Any]) -> FileLink:
    """
    Parse a media library file link.

    Raises:
        ParsingError: The file size is not an integer
    """
    file_json = get_dict(value, "file")
    size = to_int(file_json.get("size"))
    if size is None:
        raise ParsingError("Invalid file link size", repr(file_json.get("size")))
    return FileLink(
        url=get_text(file_json, "url"),
        kind=get_text(file_json, "kind"),
        size=size,
        filename=get_text(file_json, "name"),
    )


def parse_image_link(value: Dict[str, Any]) -> ImageLink:
    return ImageLink(url=get_text(get_dict(value, "image"), "url"))


def parse_document_link(value: Dict[str, Any]) -> DocumentLink:
    """
    Parse a link to a document of the same repository.

    Fragments fetched along with the link are read from
    ``document.data.<type>``.
    """
    from .fragment_parser import parse_fragments

    document = get_dict(value, "document")
    doc_type = get_text(document, "type")
    data = get_dict(get_dict(document, "data"), doc_type)
    return DocumentLink(
        id=get_text(document, "id"),
        uid=get_text(document, "uid", None),
        type=doc_type,
        tags=tuple(str(tag) for tag in get_list(document, "tags")),
        slug=get_text(document, "slug"),
        lang=get_text(document, "lang"),
        fragments=parse_fragments(data, doc_type),
        broken=bool(value.get("isBroken", False)),
    )


LINK_PARSERS: Dict[str, Callable[[Dict[str, Any]], Link]] = {
    "Link.web": parse_web_link,
    "Link.document": parse_document_link,
    "Link.file": parse_file_link,
    "Link.image": parse_image_link,
}


def parse_link_value(link_type: str, value: Any) -> Link:
    """
    Parse the ``value`` part of a link of a known type.

    Raises:
        ParsingError: Unknown link type or malformed value
    """
    parser = LINK_PARSERS.get(link_type)
    if parser is None:
        raise ParsingError("Unknown link type", repr(link_type))
    if not isinstance(value, dict):
        raise ParsingError("Link value must be an object", link_type)
    return parser(value)


def parse_link(node: Any) -> Optional[Link]:
    """
    Parse a ``{"type": ..., "value": ...}`` link descriptor.

    Returns:
        The link, or None when the node is missing or its type is unknown

    Raises:
        ParsingError: The link type is known but its value is malformed
    """
    if not isinstance(node, dict) or not node:
        return None
    link_type = get_text(node, "type")
    if link_type not in LINK_PARSERS:
        logger.debug(f"Unknown link type {link_type!r}")
        return None
    return parse_link_value(link_type, node.get("value") if isinstance(node.get("value"), dict) else {})
