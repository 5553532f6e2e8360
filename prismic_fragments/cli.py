"""
Command-line interface for prismic_fragments.

Usage:
    prismic-fragments render document.json --link-pattern "/{type}/{uid}"
    prismic-fragments render response.json --field article.body -o body.html
    prismic-fragments text document.json --field article.title
    prismic-fragments info document.json --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .exceptions import FragmentsError
from .models.document import Document
from .parser.fragment_parser import parse_documents_json
from .renderers.link_resolver import PatternLinkResolver
from .utils.rich_logger import print_table, setup_logging

logger = logging.getLogger(__name__)

DEFAULT_LINK_PATTERN = "/{type}/{id}"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="prismic-fragments",
        description="Render content API documents to HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  prismic-fragments render document.json
  prismic-fragments render response.json --field article.body --link-pattern "/{lang}/{uid}"
  prismic-fragments text document.json --field article.title
  prismic-fragments info document.json --json
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render documents or one field to HTML")
    render_parser.add_argument("input", help="JSON file: one document or an API response with results")
    render_parser.add_argument(
        "--field",
        help="Qualified field name, e.g. article.body (default: every field)"
    )
    render_parser.add_argument(
        "--link-pattern",
        default=DEFAULT_LINK_PATTERN,
        help=f"URL pattern for document links (default: {DEFAULT_LINK_PATTERN})"
    )
    render_parser.add_argument(
        "-o", "--output",
        help="Output HTML file (default: stdout)"
    )

    text_parser = subparsers.add_parser("text", help="Print the plain text of a field")
    text_parser.add_argument("input", help="JSON file: one document or an API response with results")
    text_parser.add_argument("--field", required=True, help="Qualified field name")

    info_parser = subparsers.add_parser("info", help="Show document fields and their kinds")
    info_parser.add_argument("input", help="JSON file: one document or an API response with results")
    info_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    return parser


def load_documents(input_path: Path) -> List[Document]:
    """
    Read and parse an input file.

    Raises:
        ParsingError: The file is not a valid document or response
    """
    logger.debug(f"Reading {input_path}")
    return parse_documents_json(input_path.read_text(encoding="utf-8"))


def cmd_render(args) -> int:
    """Handle render command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        resolver = PatternLinkResolver(args.link_pattern)
        documents = load_documents(input_path)
        if args.field:
            parts = [doc.get_html(args.field, resolver) for doc in documents]
        else:
            parts = [doc.as_html(resolver) for doc in documents]
    except (FragmentsError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    html = "\n".join(parts)
    if args.output:
        output_path = Path(args.output)
        output_path.write_text(html, encoding="utf-8")
        logger.info(f"Saved {len(documents)} document(s) to {output_path}")
    else:
        print(html)
    return 0


def cmd_text(args) -> int:
    """Handle text command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        documents = load_documents(input_path)
    except (FragmentsError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for doc in documents:
        print(doc.get_text(args.field))
    return 0


def describe_document(doc: Document) -> dict:
    """Summarize a document: metadata plus field name to fragment kind."""
    return {
        "id": doc.id,
        "type": doc.type,
        "uid": doc.uid,
        "lang": doc.lang,
        "tags": list(doc.tags),
        "slug": doc.slug,
        "fields": {name: type(fragment).__name__ for name, fragment in doc.fragments.items()},
    }


def cmd_info(args) -> int:
    """Handle info command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        documents = load_documents(input_path)
    except (FragmentsError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    info = [describe_document(doc) for doc in documents]
    if args.json:
        print(json.dumps(info, indent=2, ensure_ascii=False))
        return 0

    console = Console()
    for doc, summary in zip(documents, info):
        fields = summary.pop("fields")
        print_table(console, str(doc), summary)
        print_table(console, "Fields", fields)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    if args.command == "render":
        return cmd_render(args)
    elif args.command == "text":
        return cmd_text(args)
    elif args.command == "info":
        return cmd_info(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
