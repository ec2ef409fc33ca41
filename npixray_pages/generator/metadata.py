"""Derive page ``<head>`` metadata from answer records and site config."""

from __future__ import annotations

import typing as typ

from npixray_pages._constants import NOT_FOUND_TITLE

from .models import PageMetadata

if typ.TYPE_CHECKING:
    from npixray_pages.catalog import AnswerRecord
    from npixray_pages.config import SiteConfig


def build_answer_metadata(
    slug: str, record: AnswerRecord, site: SiteConfig
) -> PageMetadata:
    """Map a record's meta fields 1:1 into title, description, OG and Twitter.

    Examples
    --------
    >>> from npixray_pages.catalog import AnswerRecord
    >>> from npixray_pages.config import SiteConfig
    >>> site = SiteConfig(shard_paths=[], categories=[], registry=[])
    >>> record = AnswerRecord("Q?", "Title", "Desc", "Cat", "A.")
    >>> build_answer_metadata("q", record, site).canonical_url
    'https://npixray.com/answers/q'
    """
    url = site.canonical_url(slug)
    return PageMetadata(
        title=record.meta_title,
        description=record.meta_description,
        canonical_url=url,
        open_graph={
            "title": record.meta_title,
            "description": record.meta_description,
            "type": "article",
            "url": url,
        },
        twitter={
            "card": "summary_large_image",
            "title": record.meta_title,
            "description": record.meta_description,
        },
    )


def build_index_metadata(site: SiteConfig) -> PageMetadata:
    """Return metadata for the answers listing page."""
    index = site.index
    return PageMetadata(
        title=index.title,
        description=index.description or None,
        canonical_url=site.answers_url,
        open_graph={
            "title": index.og_title or index.title,
            "description": index.og_description or index.description,
            "url": site.answers_url,
        },
        keywords=tuple(index.keywords),
    )


def not_found_metadata() -> PageMetadata:
    """Return the metadata used when a slug does not resolve."""
    return PageMetadata(title=NOT_FOUND_TITLE)


__all__ = ["build_answer_metadata", "build_index_metadata", "not_found_metadata"]
