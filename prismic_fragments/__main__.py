"""
Entry point for running prismic_fragments as a module.

Usage:
    python -m prismic_fragments render document.json --link-pattern "/{type}/{uid}"
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
