"""
prismic_fragments - Structured text and document fragments of a headless CMS.

This package reads the JSON documents returned by the content API and
renders their fields to HTML:

- Parser: JSON to immutable models (structured text, links, fragments, documents)
- Models: blocks, spans, links, images, embeds, groups and slice zones
- Renderers: span nesting, list grouping, slices and link resolution
- CLI: ``prismic-fragments render|text|info``
"""

from .exceptions import (
    FragmentsError,
    ParsingError,
    LinkResolutionError,
    RenderingError,
)
from .models import (
    Document,
    DocumentLink,
    StructuredText,
)
from .parser import (
    parse_document,
    parse_documents,
    parse_structured_text,
    parse_structured_text_json,
)
from .renderers import (
    HTMLRenderConfig,
    LinkResolver,
    PatternLinkResolver,
    FragmentRenderer,
    StructuredTextRenderer,
    render_fragment,
    render_structured_text,
)

__version__ = "1.0.0"

__all__ = [
    "FragmentsError",
    "ParsingError",
    "LinkResolutionError",
    "RenderingError",
    "Document",
    "DocumentLink",
    "StructuredText",
    "parse_document",
    "parse_documents",
    "parse_structured_text",
    "parse_structured_text_json",
    "HTMLRenderConfig",
    "LinkResolver",
    "PatternLinkResolver",
    "FragmentRenderer",
    "StructuredTextRenderer",
    "render_fragment",
    "render_structured_text",
    "__version__",
]
