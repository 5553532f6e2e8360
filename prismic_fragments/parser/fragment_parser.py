"""
Fragment and document parser.

Each document field is a ``{"type": ..., "value": ...}`` pair; the type
selects the fragment parser. Unknown field types are kept as ``Raw``.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import unquote

from ..exceptions import ParsingError
from ..models.document import AlternateLanguage, Document
from ..models.fragments import (
    Color,
    CompositeSlice,
    Date,
    GeoPoint,
    Group,
    GroupDoc,
    Number,
    Raw,
    SimpleSlice,
    Slice,
    SliceZone,
    Text,
    Timestamp,
)
from .json_utils import get_dict, get_list, get_text, load_json, to_float
from .link_parser import LINK_PARSERS, parse_link_value
from .media_parser import parse_embed, parse_image
from .structured_text_parser import parse_structured_text

logger = logging.getLogger(__name__)

COLOR_PATTERN = re.compile(r"#[a-fA-F0-9]{6}")
DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def parse_text_fragment(value: Any) -> Optional[Text]:
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Text(str(value))
    return None


def parse_number(value: Any) -> Optional[Number]:
    number = to_float(value)
    return Number(number) if number is not None else None


def parse_color(value: Any) -> Optional[Color]:
    if isinstance(value, str) and COLOR_PATTERN.fullmatch(value):
        return Color(value)
    logger.debug(f"Invalid colour {value!r}")
    return None


def parse_date(value: Any) -> Optional[Date]:
    if not isinstance(value, str):
        return None
    try:
        return Date(datetime.strptime(value, DATE_FORMAT).date())
    except ValueError:
        logger.debug(f"Invalid date {value!r}")
        return None


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an API timestamp such as ``2013-08-17T13:10:00+0000``."""
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        logger.debug(f"Invalid timestamp {value!r}")
        return None


def parse_timestamp(value: Any) -> Optional[Timestamp]:
    parsed = parse_datetime(value)
    return Timestamp(parsed) if parsed is not None else None


def parse_geo_point(value: Any) -> GeoPoint:
    if not isinstance(value, dict):
        return GeoPoint()
    return GeoPoint(latitude=to_float(value.get("latitude")), longitude=to_float(value.get("longitude")))


def parse_group_doc(value: Any) -> GroupDoc:
    """Parse one group entry: a map of field name to typed fragment."""
    fragments: Dict[str, Any] = {}
    if isinstance(value, dict):
        for name, field_json in value.items():
            fragment = parse_field(field_json)
            if fragment is not None:
                fragments[name] = fragment
    return GroupDoc(fragments)


def parse_group(value: Any) -> Group:
    if not isinstance(value, list):
        logger.debug(f"Group value is not an array: {type(value).__name__}")
        return Group()
    return Group(tuple(parse_group_doc(item) for item in value))


def parse_slice(node: Any) -> Optional[Slice]:
    """
    Parse one slice.

    Slices carrying a ``non-repeat`` key are composite; the others wrap a
    single typed fragment under ``value``.
    """
    if not isinstance(node, dict):
        return None
    slice_type = get_text(node, "slice_type")
    label = get_text(node, "slice_label", None)

    if "non-repeat" in node:
        return CompositeSlice(
            slice_type=slice_type,
            repeat=parse_group(node.get("repeat", [])),
            non_repeat=parse_group_doc(node.get("non-repeat")),
            label=label,
        )

    value_node = node.get("value")
    value = parse_field(value_node) if isinstance(value_node, dict) else None
    if value is None:
        logger.debug(f"Omitting slice {slice_type!r} without a usable value")
        return None
    return SimpleSlice(slice_type=slice_type, value=value, label=label)


def parse_slice_zone(value: Any) -> SliceZone:
    if not isinstance(value, list):
        logger.debug(f"Slice zone value is not an array: {type(value).__name__}")
        return SliceZone()
    slices = (parse_slice(item) for item in value)
    return SliceZone(tuple(slice_ for slice_ in slices if slice_ is not None))


FRAGMENT_PARSERS: Dict[str, Callable[[Any], Any]] = {
    "StructuredText": parse_structured_text,
    "Image": parse_image,
    "Text": parse_text_fragment,
    "Select": parse_text_fragment,
    "Number": parse_number,
    "Color": parse_color,
    "Date": parse_date,
    "Timestamp": parse_timestamp,
    "GeoPoint": parse_geo_point,
    "Embed": parse_embed,
    "Group": parse_group,
    "SliceZone": parse_slice_zone,
}


def parse_fragment(fragment_type: str, value: Any) -> Any:
    """
    Parse a field value of the given API type.

    Args:
        fragment_type: API type name, such as ``StructuredText`` or ``Link.web``
        value: Decoded JSON value

    Returns:
        The fragment; None for a malformed scalar; ``Raw`` for unknown types

    Raises:
        ParsingError: A structured text value is not an array
    """
    if fragment_type in LINK_PARSERS:
        try:
            return parse_link_value(fragment_type, value)
        except ParsingError as e:
            logger.debug(f"Invalid {fragment_type} value: {e}")
            return None
    parser = FRAGMENT_PARSERS.get(fragment_type)
    if parser is None:
        return Raw(value)
    if fragment_type in ("Image", "Embed") and not isinstance(value, dict):
        logger.debug(f"Invalid {fragment_type} value: {type(value).__name__}")
        return None
    return parser(value)


def parse_field(node: Any) -> Any:
    """Parse a ``{"type": ..., "value": ...}`` pair; other shapes are kept raw."""
    if not isinstance(node, dict) or "type" not in node:
        return Raw(node)
    return parse_fragment(get_text(node, "type"), node.get("value"))


def parse_fragments(data: Dict[str, Any], doc_type: str) -> Dict[str, Any]:
    """
    Parse the fields of ``data.<type>``.

    Keys are qualified as ``type.field``; array-valued fields are spread
    over ``type.field[0]``, ``type.field[1]`` and so on.
    """
    fragments: Dict[str, Any] = {}
    for name, field_json in data.items():
        key = f"{doc_type}.{name}"
        if isinstance(field_json, list):
            for index, item in enumerate(field_json):
                fragment = parse_field(item)
                if fragment is not None:
                    fragments[f"{key}[{index}]"] = fragment
        else:
            fragment = parse_field(field_json)
            if fragment is not None:
                fragments[key] = fragment
    return fragments


def parse_document(node: Any) -> Document:
    """
    Parse one document of an API response.

    Raises:
        ParsingError: The document is not an object or a field is structurally invalid
    """
    if not isinstance(node, dict):
        raise ParsingError("Document must be an object", type(node).__name__)

    doc_type = get_text(node, "type")
    alternate_languages = tuple(
        AlternateLanguage(
            id=get_text(item, "id"),
            type=get_text(item, "type"),
            lang=get_text(item, "lang"),
            uid=get_text(item, "uid", None),
        )
        for item in get_list(node, "alternate_languages")
        if isinstance(item, dict)
    )
    document = Document(
        id=get_text(node, "id"),
        type=doc_type,
        href=get_text(node, "href"),
        uid=get_text(node, "uid", None),
        tags=tuple(str(tag) for tag in get_list(node, "tags")),
        slugs=tuple(unquote(str(slug)) for slug in get_list(node, "slugs")),
        lang=get_text(node, "lang"),
        alternate_languages=alternate_languages,
        first_publication_date=parse_datetime(node.get("first_publication_date")),
        last_publication_date=parse_datetime(node.get("last_publication_date")),
        fragments=parse_fragments(get_dict(get_dict(node, "data"), doc_type), doc_type),
    )
    logger.debug(f"Parsed {document} with {len(document.fragments)} fields")
    return document


def parse_documents(node: Any) -> List[Document]:
    """
    Parse a single document or a search response.

    Args:
        node: Either one document object or ``{"results": [...]}``

    Raises:
        ParsingError: Neither shape matches
    """
    if isinstance(node, dict) and isinstance(node.get("results"), list):
        return [parse_document(item) for item in node["results"]]
    if isinstance(node, list):
        return [parse_document(item) for item in node]
    return [parse_document(node)]


def parse_documents_json(raw: Union[str, bytes]) -> List[Document]:
    """Decode and parse a JSON payload with ``parse_documents``."""
    return parse_documents(load_json(raw))
