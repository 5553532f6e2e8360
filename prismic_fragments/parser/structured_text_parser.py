"""
Structured text parser.

Reads the API's JSON array of blocks into ``StructuredText``. Parsing is
lenient at the block and span level: anything malformed or of an unknown
kind is omitted (and logged at debug level) instead of failing the whole
field. Only a payload that is not an array at all is rejected.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional, Tuple, Union

from ..exceptions import ParsingError
from ..models.blocks import (
    Block,
    EmbedBlock,
    Heading,
    ImageBlock,
    ListItem,
    Paragraph,
    Preformatted,
    StructuredText,
)
from ..models.spans import Em, Hyperlink, Label, Span, Strong
from .json_utils import get_dict, get_text, load_json, to_int
from .link_parser import parse_link
from .media_parser import parse_embed, parse_image_view

logger = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^heading(\d)$")


def parse_span(node: Any) -> Optional[Span]:
    """
    Parse one span.

    Returns:
        The span, or None when it has to be omitted: non-integer or
        out-of-order offsets, unknown type, or an unusable link
    """
    if not isinstance(node, dict):
        logger.debug(f"Omitting non-object span {node!r}")
        return None

    span_type = get_text(node, "type")
    start = to_int(node.get("start"))
    end = to_int(node.get("end"))
    if start is None or end is None or start < 0 or end <= start:
        logger.debug(f"Omitting {span_type} span with invalid range {node.get('start')!r}-{node.get('end')!r}")
        return None

    data = get_dict(node, "data")
    if span_type == "strong":
        return Strong(start, end)
    if span_type == "em":
        return Em(start, end)
    if span_type == "label":
        return Label(start, end, get_text(data, "label"))
    if span_type == "hyperlink":
        try:
            link = parse_link(data)
        except ParsingError as e:
            logger.debug(f"Omitting hyperlink span {start}-{end}: {e}")
            return None
        if link is None:
            logger.debug(f"Omitting hyperlink span {start}-{end} without a usable link")
            return None
        return Hyperlink(start, end, link)

    logger.debug(f"Omitting span of unknown type {span_type!r}")
    return None


def parse_text(node: Any) -> Tuple[str, Tuple[Span, ...]]:
    """Read the ``text`` and ``spans`` of a text block."""
    text = get_text(node, "text")
    raw_spans = node.get("spans") if isinstance(node, dict) else None
    if not isinstance(raw_spans, list):
        raw_spans = []
    spans = tuple(span for span in (parse_span(item) for item in raw_spans) if span is not None)
    return text, spans


def parse_block(node: Any) -> Optional[Block]:
    """
    Parse one block.

    Returns:
        The block, or None for non-object entries and unknown block types
    """
    if not isinstance(node, dict):
        logger.debug(f"Omitting non-object block {node!r}")
        return None

    block_type = get_text(node, "type")
    label = get_text(node, "label", None)

    heading = HEADING_PATTERN.match(block_type)
    if heading:
        level = int(heading.group(1))
        if level < 1:
            logger.debug(f"Omitting heading with level {level}")
            return None
        text, spans = parse_text(node)
        return Heading(text, spans, level=level, label=label)
    if block_type == "paragraph":
        text, spans = parse_text(node)
        return Paragraph(text, spans, label=label)
    if block_type == "preformatted":
        text, spans = parse_text(node)
        return Preformatted(text, spans, label=label)
    if block_type in ("list-item", "o-list-item"):
        text, spans = parse_text(node)
        return ListItem(text, spans, ordered=block_type == "o-list-item", label=label)
    if block_type == "image":
        return ImageBlock(parse_image_view(node), label=label)
    if block_type == "embed":
        return EmbedBlock(parse_embed(node), label=label)

    logger.debug(f"Omitting block of unknown type {block_type!r}")
    return None


def parse_structured_text(node: Any) -> StructuredText:
    """
    Parse a structured text field value.

    Args:
        node: Decoded JSON array of blocks

    Returns:
        StructuredText with the blocks that could be parsed, in input order

    Raises:
        ParsingError: The value is not an array
    """
    if not isinstance(node, list):
        raise ParsingError("Structured text must be an array of blocks", type(node).__name__)

    blocks: List[Block] = []
    for item in node:
        block = parse_block(item)
        if block is not None:
            blocks.append(block)

    logger.debug(f"Parsed {len(blocks)} of {len(node)} structured text blocks")
    return StructuredText(tuple(blocks))


def parse_structured_text_json(raw: Union[str, bytes]) -> StructuredText:
    """
    Parse a structured text field from its JSON source.

    Raises:
        ParsingError: Invalid JSON or not an array
    """
    return parse_structured_text(load_json(raw))
