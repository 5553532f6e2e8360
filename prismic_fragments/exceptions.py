"""
Exceptions raised by prismic_fragments.

Parsing is lenient below the field level, so ``ParsingError`` only signals
input that cannot be read at all. Rendering fails with
``LinkResolutionError`` when a document link has no usable URL and with
``RenderingError`` when a model of an unknown kind reaches a renderer.
"""

from typing import Any, Optional


class FragmentsError(Exception):
    """
    Base exception for fragment parsing and rendering errors.

    Attributes:
        message: Short description of what failed
        details: Optional context, e.g. the offending type name or document id
    """

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(FragmentsError):
    """
    Input is structurally corrupt.

    Raised for text that is not JSON, a structured text value that is not an
    array, or a document that is not an object. Malformed blocks, spans and
    scalar fields are dropped instead.
    """


class LinkResolutionError(FragmentsError):
    """
    A link could not be turned into an ``href``.

    Attributes:
        link: The link being resolved, when one was at hand
    """

    def __init__(self, message: str, details: Optional[str] = None, link: Any = None):
        super().__init__(message, details)
        self.link = link


class RenderingError(FragmentsError):
    """A block, span or fragment of an unsupported kind reached a renderer."""
