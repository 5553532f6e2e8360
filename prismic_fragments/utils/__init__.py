"""
Utility helpers: HTML escaping and rich logging setup.
"""

from .html_utils import escape_text, escape_attribute, class_attribute, convert_line_breaks
from .rich_logger import setup_logging, print_table

__all__ = [
    "escape_text",
    "escape_attribute",
    "class_attribute",
    "convert_line_breaks",
    "setup_logging",
    "print_table",
]
