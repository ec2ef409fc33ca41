"""Build and render the answers index landing page.

This module takes the resolved :class:`~npixray_pages.config.SiteConfig`, the
merged catalog and the slug registry, and produces ``answers/index.html``
listing every published answer grouped by category bucket. Categories appear
in registry order, cards keep the order of their bucket, and a registered
slug without a record is left out of the listing.

>>> from pathlib import Path
>>> from npixray_pages.config import load_site_config
>>> from npixray_pages.catalog import SlugRegistry, load_catalog
>>> site = load_site_config(Path("config/answers.yaml"))  # doctest: +SKIP
>>> builder = AnswersIndexBuilder(
...     site, load_catalog(site), SlugRegistry.from_config(site)
... )  # doctest: +SKIP
>>> print(builder.run())  # doctest: +SKIP
public/answers/index.html
"""

from __future__ import annotations

import logging
import typing as typ

from .generator import build_index_metadata
from .templating import build_environment, write_text

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .catalog import Catalog, SlugRegistry
    from .config import SiteConfig

logger = logging.getLogger(__name__)


class AnswersIndexBuilder:
    """Render a landing page enumerating answers by category."""

    def __init__(
        self,
        site: SiteConfig,
        catalog: Catalog,
        registry: SlugRegistry,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        self.site = site
        self.catalog = catalog
        self.registry = registry
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("answers_index.jinja")

    def render(self) -> str:
        """Return the index HTML without touching the filesystem."""
        return self.template.render(
            site=self.site,
            index=self.site.index,
            metadata=build_index_metadata(self.site),
            groups=self._gather_groups(),
        )

    def run(self, *, output_dir: Path | None = None) -> Path:
        """Render the index HTML file and return its path."""
        output_path = (output_dir or self.site.output_dir) / "answers" / "index.html"
        return write_text(output_path, self.render())

    def _gather_groups(self) -> list[dict[str, typ.Any]]:
        """Collect category dictionaries with their resolvable answer cards."""
        groups: list[dict[str, typ.Any]] = []
        for bucket in self.registry.buckets():
            cards: list[dict[str, str]] = []
            for slug in bucket.slugs:
                record = self.catalog.get(slug)
                if record is None:
                    logger.debug("Index omits '%s': no record", slug)
                    continue
                cards.append(
                    {
                        "slug": slug,
                        "question": record.question,
                        "summary": record.meta_description,
                    }
                )
            groups.append(
                {
                    "key": bucket.key,
                    "label": bucket.label,
                    "description": bucket.category.description,
                    "cards": cards,
                }
            )
        return groups


__all__ = ["AnswersIndexBuilder"]
