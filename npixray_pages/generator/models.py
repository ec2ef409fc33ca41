"""Shared dataclasses used by the answer page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class AnswerNotFoundError(LookupError):
    """Raised when a slug has no record in the catalog."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"No answer record for slug '{slug}'.")


@dc.dataclass(slots=True, frozen=True)
class PageMetadata:
    """SEO metadata emitted into the document ``<head>``.

    Attributes
    ----------
    title : str
        Document ``<title>``.
    description : str | None
        Meta description; ``None`` omits the tag.
    canonical_url : str | None
        Canonical link target.
    open_graph : dict[str, str]
        ``og:*`` properties keyed without the prefix.
    twitter : dict[str, str]
        ``twitter:*`` properties keyed without the prefix.
    keywords : tuple[str, ...]
        Optional keywords list.
    """

    title: str
    description: str | None = None
    canonical_url: str | None = None
    open_graph: dict[str, str] = dc.field(default_factory=dict)
    twitter: dict[str, str] = dc.field(default_factory=dict)
    keywords: tuple[str, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class SectionModel:
    """Structured data passed to the answer section template.

    Attributes
    ----------
    anchor : str
        Fragment identifier (``section-<index>``) targeted by the ToC.
    heading : str
        Section heading.
    paragraphs : list[str]
        Plain-text paragraphs split from the section content.
    """

    anchor: str
    heading: str
    paragraphs: list[str]


@dc.dataclass(slots=True, frozen=True)
class TocEntry:
    """Numbered table-of-contents link."""

    number: str
    label: str
    anchor: str


@dc.dataclass(slots=True, frozen=True)
class RenderedAnswer:
    """Output of generating one answer page."""

    slug: str
    html: str
    metadata: PageMetadata
    structured_data: list[dict[str, typ.Any]]


__all__ = [
    "AnswerNotFoundError",
    "PageMetadata",
    "RenderedAnswer",
    "SectionModel",
    "TocEntry",
]
