"""
Parser module for the content API JSON format.

This module reads structured text, links, fragments and whole documents
from decoded JSON into the models of ``prismic_fragments.models``.
"""

from .json_utils import load_json
from .link_parser import parse_link
from .media_parser import parse_image_view, parse_image, parse_embed
from .structured_text_parser import (
    parse_span,
    parse_block,
    parse_structured_text,
    parse_structured_text_json,
)
from .fragment_parser import (
    parse_fragment,
    parse_fragments,
    parse_group,
    parse_slice_zone,
    parse_document,
    parse_documents,
    parse_documents_json,
)

__all__ = [
    "load_json",
    "parse_link",
    "parse_image_view",
    "parse_image",
    "parse_embed",
    "parse_span",
    "parse_block",
    "parse_structured_text",
    "parse_structured_text_json",
    "parse_fragment",
    "parse_fragments",
    "parse_group",
    "parse_slice_zone",
    "parse_document",
    "parse_documents",
    "parse_documents_json",
]
