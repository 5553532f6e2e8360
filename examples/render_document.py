#!/usr/bin/env python3
"""
Example: parse a document and render its fields.

Usage:
    python examples/render_document.py tests/fixtures/document.json
"""

import sys
from pathlib import Path

from prismic_fragments import PatternLinkResolver, parse_document
from prismic_fragments.models import Paragraph, Strong
from prismic_fragments.parser import load_json
from prismic_fragments.utils import setup_logging


def html_serializer(element, content):
    """Render bold text as <b> and leave everything else to the defaults."""
    if isinstance(element, Strong):
        return f"<b>{content}</b>"
    if isinstance(element, Paragraph) and element.label == "note":
        return f'<aside>{content}</aside>'
    return None


def main():
    setup_logging("INFO")

    path = Path(sys.argv[1] if len(sys.argv) > 1 else "tests/fixtures/document.json")
    document = parse_document(load_json(path.read_text(encoding="utf-8")))
    resolver = PatternLinkResolver("/{lang}/{type}/{uid}")

    print(f"📄 {document}")
    print(f"   Title: {document.get_text(f'{document.type}.title')}")
    print(f"   Linked documents: {len(document.get_linked_documents())}")
    print()
    print(document.as_html(resolver, html_serializer))


if __name__ == "__main__":
    main()
