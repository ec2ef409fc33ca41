"""Typed dataclasses describing the answers site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from npixray_pages._constants import (
    ANSWER_PATH_TEMPLATE,
    ANSWERS_PATH,
    DEFAULT_ORIGIN,
)

ConflictPolicy = typ.Literal["error", "last-wins"]
CONFLICT_POLICIES: tuple[str, ...] = ("error", "last-wins")


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class CategoryConfig:
    """One positional category bucket of the slug registry."""

    key: str
    label: str
    description: str = ""


@dc.dataclass(slots=True)
class IndexPageConfig:
    """Copy and SEO metadata for the answers listing page."""

    title: str = "Medicare Billing Answers"
    description: str = ""
    keywords: list[str] = dc.field(default_factory=list)
    og_title: str | None = None
    og_description: str | None = None
    heading: str = "Medicare Billing Answers"
    intro: str = ""


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved answers site configuration.

    Attributes
    ----------
    origin : str
        Canonical scheme and host without a trailing slash.
    site_name : str
        Brand name used in page chrome and titles.
    output_dir : Path
        Root directory receiving the generated ``answers/`` tree and sitemap.
    shard_paths : list[Path]
        Content shard files in merge order.
    shard_conflicts : {"error", "last-wins"}
        Policy applied when two shards define the same slug.
    strict : bool
        Whether error-severity catalog issues abort the build.
    bucket_size : int
        Number of registry slugs per category bucket.
    categories : list[CategoryConfig]
        Ordered category buckets.
    registry : list[str]
        Ordered slugs eligible for publication.
    index : IndexPageConfig
        Listing page copy and metadata.
    admin_api_base : str
        Base URL for the admin social endpoints.
    """

    shard_paths: list[Path]
    categories: list[CategoryConfig]
    registry: list[str]
    origin: str = DEFAULT_ORIGIN
    site_name: str = "NPIxray"
    output_dir: Path = Path("public")
    shard_conflicts: ConflictPolicy = "error"
    strict: bool = True
    bucket_size: int = 10
    index: IndexPageConfig = dc.field(default_factory=IndexPageConfig)
    admin_api_base: str = DEFAULT_ORIGIN

    @property
    def answers_url(self) -> str:
        """Return the absolute URL of the answers index page."""
        return f"{self.origin}{ANSWERS_PATH}"

    def canonical_url(self, slug: str) -> str:
        """Return the canonical URL of the answer page for ``slug``."""
        return self.origin + ANSWER_PATH_TEMPLATE.format(slug=slug)


__all__ = [
    "CONFLICT_POLICIES",
    "CategoryConfig",
    "ConflictPolicy",
    "IndexPageConfig",
    "SiteConfig",
    "SiteConfigError",
]
