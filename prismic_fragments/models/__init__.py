"""
Models module for API document fragments.

This module contains the immutable model classes produced by the parser:
links, spans, blocks, field fragments and documents.
"""

from .links import Link, WebLink, FileLink, ImageLink, DocumentLink
from .spans import Span, Em, Strong, Label, Hyperlink
from .fragments import (
    Text,
    Number,
    Color,
    Date,
    Timestamp,
    GeoPoint,
    Embed,
    ImageView,
    Image,
    GroupDoc,
    Group,
    SimpleSlice,
    CompositeSlice,
    Slice,
    SliceZone,
    Raw,
)
from .blocks import (
    Block,
    TextBlock,
    Heading,
    Paragraph,
    Preformatted,
    ListItem,
    ImageBlock,
    EmbedBlock,
    StructuredText,
)
from .with_fragments import WithFragments
from .document import Document, AlternateLanguage

__all__ = [
    "Link",
    "WebLink",
    "FileLink",
    "ImageLink",
    "DocumentLink",
    "Span",
    "Em",
    "Strong",
    "Label",
    "Hyperlink",
    "Text",
    "Number",
    "Color",
    "Date",
    "Timestamp",
    "GeoPoint",
    "Embed",
    "ImageView",
    "Image",
    "GroupDoc",
    "Group",
    "SimpleSlice",
    "CompositeSlice",
    "Slice",
    "SliceZone",
    "Raw",
    "Block",
    "TextBlock",
    "Heading",
    "Paragraph",
    "Preformatted",
    "ListItem",
    "ImageBlock",
    "EmbedBlock",
    "StructuredText",
    "WithFragments",
    "Document",
    "AlternateLanguage",
]
