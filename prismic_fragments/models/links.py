"""Link models: web, file, image and same-repository document links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

from .with_fragments import WithFragments


@dataclass(frozen=True)
class WebLink:
    """Link to an arbitrary URL."""

    url: str
    content_type: Optional[str] = None
    target: Optional[str] = None

    def get_url(self, link_resolver: Any = None) -> str:
        return self.url


@dataclass(frozen=True)
class FileLink:
    """Link to a file uploaded to the media library, for example a PDF."""

    url: str
    kind: str
    size: int
    filename: str

    @property
    def target(self) -> Optional[str]:
        return None

    def get_url(self, link_resolver: Any = None) -> str:
        return self.url


@dataclass(frozen=True)
class ImageLink:
    """Link to an image uploaded to the media library."""

    url: str

    @property
    def target(self) -> Optional[str]:
        return None

    def get_url(self, link_resolver: Any = None) -> str:
        return self.url


@dataclass(frozen=True)
class DocumentLink(WithFragments):
    """
    Link to a document of the same repository.

    Fragments are only present when the query asked the API to fetch them
    alongside the link. ``broken`` is set when the API could not resolve the
    target document; such links are never passed to a link resolver.
    """

    id: str
    type: str
    slug: str = ""
    uid: Optional[str] = None
    tags: Tuple[str, ...] = ()
    lang: str = ""
    fragments: Mapping[str, Any] = field(default_factory=dict, hash=False)
    broken: bool = False

    @property
    def target(self) -> Optional[str]:
        return None

    def get_url(self, link_resolver: Any) -> str:
        from ..renderers.link_resolver import resolve_document_link

        return resolve_document_link(self, link_resolver)


Link = Union[WebLink, FileLink, ImageLink, DocumentLink]

LINK_TYPES = (WebLink, FileLink, ImageLink, DocumentLink)
