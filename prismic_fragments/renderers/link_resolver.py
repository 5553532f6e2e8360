"""
Link resolution for rendering.

Web, file and image links carry their URL. Document links point inside the
repository and need a caller-supplied resolver to become URLs: either a
plain callable ``resolve(link) -> str`` or a ``LinkResolver`` instance.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple, Union

from ..exceptions import LinkResolutionError
from ..models.links import DocumentLink, FileLink, ImageLink, WebLink
from ..utils.html_utils import escape_attribute
from .config import DEFAULT_CONFIG, HTMLRenderConfig

logger = logging.getLogger(__name__)


class LinkResolver(ABC):
    """Base class for link resolvers."""

    @abstractmethod
    def resolve(self, link: DocumentLink) -> str:
        """Return the URL of the linked document."""

    def resolve_document(self, document: Any) -> str:
        """Resolve a whole document through its document link."""
        return self.resolve(document.as_document_link())

    def __call__(self, link: DocumentLink) -> str:
        return self.resolve(link)


class PatternLinkResolver(LinkResolver):
    """
    Resolve document links by formatting a URL pattern.

    The pattern may reference ``{id}``, ``{uid}``, ``{type}``, ``{slug}`` and
    ``{lang}``, e.g. ``"/{type}/{uid}"``. Missing values format as empty
    strings.
    """

    def __init__(self, pattern: str):
        if not pattern:
            raise ValueError("Link pattern must be a non-empty string")
        self.pattern = pattern

    def resolve(self, link: DocumentLink) -> str:
        try:
            return self.pattern.format(
                id=link.id,
                uid=link.uid or "",
                type=link.type,
                slug=link.slug or "",
                lang=link.lang or "",
            )
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            raise LinkResolutionError(f"Invalid link pattern {self.pattern!r}", str(e), link=link) from e


LinkResolverLike = Union[LinkResolver, Callable[[DocumentLink], str]]


def resolve_document_link(link: DocumentLink, link_resolver: Optional[LinkResolverLike]) -> str:
    """
    Resolve a document link with a resolver callable or object.

    Raises:
        LinkResolutionError: No resolver was given, or it did not return a string
    """
    if link_resolver is None:
        raise LinkResolutionError("A link resolver is required to render document links", f"document {link.id}", link=link)

    if isinstance(link_resolver, LinkResolver) or not callable(link_resolver):
        resolve = getattr(link_resolver, "resolve", None)
    else:
        resolve = link_resolver
    if not callable(resolve):
        raise LinkResolutionError("Link resolver is not callable", type(link_resolver).__name__, link=link)

    url = resolve(link)
    if not isinstance(url, str):
        raise LinkResolutionError(
            "Link resolver must return a string", f"got {type(url).__name__} for document {link.id}",
            link=link,
        )
    logger.debug(f"Resolved document {link.id} to {url}")
    return url


def link_href(link: Any, link_resolver: Optional[LinkResolverLike], config: HTMLRenderConfig = DEFAULT_CONFIG) -> str:
    """
    Compute the ``href`` of any link kind.

    Broken document links get ``config.broken_link_href`` and never reach the
    resolver.
    """
    if isinstance(link, DocumentLink):
        if link.broken:
            return config.broken_link_href
        return resolve_document_link(link, link_resolver)
    if isinstance(link, (WebLink, FileLink, ImageLink)):
        return link.url
    raise LinkResolutionError("Unsupported link kind", type(link).__name__, link=link)


def link_target(link: Any, config: HTMLRenderConfig = DEFAULT_CONFIG) -> Tuple[str, ...]:
    """Return the extra anchor attributes (``target``, ``rel``) of a link."""
    if isinstance(link, WebLink) and link.target:
        return (f'target="{escape_attribute(link.target)}"', f'rel="{escape_attribute(config.link_rel)}"')
    return ()
