"""High-level orchestration for answer page generation.

This module turns one catalog record at a time into a static HTML page with
SEO metadata and three embedded JSON-LD documents. It exposes
:class:`AnswerPageGenerator`, which consumes the merged
:class:`~npixray_pages.catalog.Catalog` and the
:class:`~npixray_pages.catalog.SlugRegistry`, and writes
``<output_dir>/answers/<slug>/index.html`` for every registered slug plus a
shared ``answers/404.html``.

Generation is a pure function of ``(slug, catalog)``: the rendered HTML holds
no timestamps and JSON is emitted with stable key order, so building the same
slug twice yields byte-identical output.

Example
-------
>>> from pathlib import Path
>>> from npixray_pages.config import load_site_config
>>> from npixray_pages.catalog import SlugRegistry, load_catalog
>>> site = load_site_config(Path("config/answers.yaml"))  # doctest: +SKIP
>>> generator = AnswerPageGenerator(
...     site, load_catalog(site), SlugRegistry.from_config(site)
... )  # doctest: +SKIP
>>> generator.generate("what-is-npi-number").metadata.canonical_url  # doctest: +SKIP
'https://npixray.com/answers/what-is-npi-number'
"""

from __future__ import annotations

import logging
import typing as typ

from npixray_pages._constants import NOT_FOUND_FILENAME
from npixray_pages.templating import build_environment, write_text

from .metadata import build_answer_metadata, not_found_metadata
from .models import AnswerNotFoundError, RenderedAnswer
from .renderer import build_section_models, build_toc_entries
from .structured_data import build_structured_data, serialize_json_ld

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from npixray_pages.catalog import Catalog, SlugRegistry
    from npixray_pages.config import SiteConfig

logger = logging.getLogger(__name__)


class AnswerPageGenerator:
    """Render catalog records into themed answer pages."""

    def __init__(
        self,
        site: SiteConfig,
        catalog: Catalog,
        registry: SlugRegistry,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with content and template context.

        Parameters
        ----------
        site : SiteConfig
            Site configuration supplying the origin, brand and output folder.
        catalog : Catalog
            Merged, read-only slug to record mapping.
        registry : SlugRegistry
            Ordered registry driving path enumeration and category badges.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.site = site
        self.catalog = catalog
        self.registry = registry
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("answer_page.jinja")
        self.not_found_template = self.env.get_template("not_found.jinja")

    def static_params(self) -> list[dict[str, str]]:
        """Return the route parameters of every page to pre-render."""
        return self.registry.static_params()

    def generate(self, slug: str) -> RenderedAnswer:
        """Render the answer page for ``slug``.

        Raises
        ------
        AnswerNotFoundError
            If ``slug`` has no record in the catalog.
        """
        record = self.catalog.get(slug)
        if record is None:
            logger.warning("No answer record for slug '%s'", slug)
            raise AnswerNotFoundError(slug)

        metadata = build_answer_metadata(slug, record, self.site)
        structured_data = build_structured_data(slug, record, self.site.origin)
        category = self.registry.category_of(slug)
        related = self.catalog.resolve_related(record, self.registry)
        skipped = len(record.related_questions) - len(related)
        if skipped:
            logger.debug("Skipping %d unresolved related links on '%s'", skipped, slug)

        html = self.template.render(
            site=self.site,
            slug=slug,
            record=record,
            metadata=metadata,
            json_ld=[serialize_json_ld(doc) for doc in structured_data],
            category_label=category.label if category else record.category,
            sections=build_section_models(record),
            toc_entries=build_toc_entries(record),
            related=related,
        )
        if not html.endswith("\n"):
            html += "\n"
        return RenderedAnswer(
            slug=slug, html=html, metadata=metadata, structured_data=structured_data
        )

    def render_not_found(self) -> str:
        """Render the shared not-found page served for unknown slugs."""
        return self.not_found_template.render(
            site=self.site, metadata=not_found_metadata()
        )

    def output_path(self, slug: str, *, output_dir: Path | None = None) -> Path:
        """Return where the page for ``slug`` is written."""
        return (output_dir or self.site.output_dir) / "answers" / slug / "index.html"

    def run(
        self,
        slugs: cabc.Iterable[str] | None = None,
        *,
        output_dir: Path | None = None,
    ) -> list[Path]:
        """Write answer pages to disk and return their paths in render order.

        Parameters
        ----------
        slugs : Iterable[str], optional
            Subset of slugs to render. Defaults to the full registry, in which
            case the not-found page is written as well.
        output_dir : Path, optional
            Override for the site output directory.

        Notes
        -----
        A slug without a record is logged and skipped so one missing page does
        not abort the rest of the build.
        """
        full_build = slugs is None
        answers_dir = (output_dir or self.site.output_dir) / "answers"
        targets = list(self.registry.all_slugs() if slugs is None else slugs)

        written: list[Path] = []
        for slug in targets:
            try:
                rendered = self.generate(slug)
            except AnswerNotFoundError:
                continue
            path = write_text(
                self.output_path(slug, output_dir=output_dir), rendered.html
            )
            logger.debug("Rendered %s", path)
            written.append(path)
        if full_build:
            written.append(
                write_text(answers_dir / NOT_FOUND_FILENAME, self.render_not_found())
            )
        return written


__all__ = ["AnswerPageGenerator"]
