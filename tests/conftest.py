"""
Pytest configuration for prismic_fragments
"""

import json
import logging
import sys
from pathlib import Path

import pytest

from prismic_fragments.models import DocumentLink

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests; keep debug output of the package quiet."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()
    package_logger = logging.getLogger("prismic_fragments")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


class RecordingResolver:
    """Link resolver that remembers every link it was asked about."""

    def __init__(self):
        self.calls = []

    def __call__(self, link: DocumentLink) -> str:
        self.calls.append(link)
        return f"/{link.id}/{link.slug}"


@pytest.fixture
def resolver():
    """Resolver producing ``/<id>/<slug>`` URLs."""
    return RecordingResolver()


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def load_fixture():
    """Load a JSON fixture by file name."""
    def _load(name: str):
        return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))
    return _load
