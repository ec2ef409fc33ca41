"""Sitemap covering the answers index and every registered answer page."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import SITEMAP_FILENAME
from .templating import build_environment, write_text

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .catalog import SlugRegistry
    from .config import SiteConfig

INDEX_CHANGEFREQ = "weekly"
INDEX_PRIORITY = "0.9"
ANSWER_CHANGEFREQ = "monthly"
ANSWER_PRIORITY = "0.8"


@dc.dataclass(slots=True, frozen=True)
class SitemapEntry:
    """One ``<url>`` element of the sitemap."""

    loc: str
    changefreq: str
    priority: str


class SitemapBuilder:
    """Render ``sitemap-answers.xml`` from the slug registry.

    The sitemap lists registered slugs whether or not a record exists, so it
    mirrors the set of routes the site promises to serve.
    """

    def __init__(
        self,
        site: SiteConfig,
        registry: SlugRegistry,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        self.site = site
        self.registry = registry
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("sitemap.xml.jinja")

    def entries(self) -> list[SitemapEntry]:
        """Return the index entry followed by one entry per registry slug."""
        return [
            SitemapEntry(self.site.answers_url, INDEX_CHANGEFREQ, INDEX_PRIORITY),
            *(
                SitemapEntry(
                    self.site.canonical_url(slug), ANSWER_CHANGEFREQ, ANSWER_PRIORITY
                )
                for slug in self.registry
            ),
        ]

    def render(self) -> str:
        return self.template.render(entries=self.entries())

    def run(self, *, output_dir: Path | None = None) -> Path:
        """Write the sitemap under the output root and return its path."""
        return write_text(
            (output_dir or self.site.output_dir) / SITEMAP_FILENAME, self.render()
        )


__all__ = ["SitemapBuilder", "SitemapEntry"]
