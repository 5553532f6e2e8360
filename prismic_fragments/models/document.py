"""Document model: one result returned by the content API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple

from .links import DocumentLink
from .with_fragments import WithFragments


@dataclass(frozen=True)
class AlternateLanguage:
    """Translation of a document in another locale."""

    id: str
    type: str
    lang: str
    uid: Optional[str] = None


@dataclass(frozen=True)
class Document(WithFragments):
    """
    A document with its metadata and field fragments.

    Field names are qualified with the document type (``article.title``);
    multi-valued fields are stored as ``article.gallery[0]``,
    ``article.gallery[1]`` and so on.
    """

    id: str
    type: str
    href: str = ""
    uid: Optional[str] = None
    tags: Tuple[str, ...] = ()
    slugs: Tuple[str, ...] = ()
    lang: str = ""
    alternate_languages: Tuple[AlternateLanguage, ...] = ()
    first_publication_date: Optional[datetime] = None
    last_publication_date: Optional[datetime] = None
    fragments: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @property
    def slug(self) -> Optional[str]:
        """The current slug, i.e. the first one."""
        if self.slugs:
            return self.slugs[0]
        return None

    def as_document_link(self) -> DocumentLink:
        """Build a non-broken link pointing to this document."""
        return DocumentLink(
            id=self.id,
            uid=self.uid,
            type=self.type,
            tags=self.tags,
            slug=self.slug or "",
            lang=self.lang,
            fragments=self.fragments,
            broken=False,
        )

    def __str__(self) -> str:
        return f"Document#{self.id} [{self.type}]"
