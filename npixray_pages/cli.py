"""Cyclopts CLI entrypoint for building the answers section of the site.

The ``pages`` console script defined here merges the content shards, lints
the catalog, renders every answer page together with the index page and the
sitemap, and can list the admin dashboard's pre-written social posts.

Examples
--------
Build the full answers section with the default configuration:

>>> from npixray_pages.cli import main
>>> main()  # doctest: +SKIP

Rebuild one answer into a scratch directory:

>>> from npixray_pages.cli import app
>>> app.run(
...     ["generate", "--slug", "what-is-npi-number", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import NOT_FOUND_TITLE
from .admin import (
    POST_CATEGORIES,
    AdminAuthenticationRequired,
    SocialAdminClient,
    SocialAdminError,
    group_posts,
)
from .catalog import (
    CatalogError,
    CatalogIntegrityError,
    SlugRegistry,
    enforce_integrity,
    load_catalog,
    validate_catalog,
)
from .config import SiteConfigError, load_site_config
from .generator import AnswerNotFoundError, AnswerPageGenerator
from .index_page import AnswersIndexBuilder
from .sitemap import SitemapBuilder
from .templating import write_text

if typ.TYPE_CHECKING:
    from .admin import SocialFeed
    from .catalog import Catalog
    from .config import SiteConfig

DEFAULT_CONFIG = Path("config/answers.yaml")
LOG_LEVEL_ENV = "PAGES_LOG_LEVEL"

logger = logging.getLogger(__name__)

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_content(site_config: SiteConfig) -> tuple[Catalog, SlugRegistry]:
    """Merge shards and build the registry, exiting on content errors."""
    try:
        return load_catalog(site_config), SlugRegistry.from_config(site_config)
    except (CatalogError, SiteConfigError) as exc:
        print(f"error: {exc}")
        raise SystemExit(1) from exc


@app.command(help="Render every answer page, the answers index and the sitemap.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    slug: typ.Annotated[
        str | None, Parameter(help="Render only this answer", env_var="INPUT_SLUG")
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Build the answers section for the requested site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``answers.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    slug : str or None, optional
        Single answer to render; when ``None`` (default) every registered
        answer and the not-found page are rendered.
    output_dir : Path or None, optional
        Override for ``defaults.output_dir``.

    Raises
    ------
    SystemExit
        With status 1 when the content or registry cannot be loaded, when the
        catalog fails its integrity check in strict mode, or when ``slug`` is
        unregistered or has no answer record.
    """
    site_config = load_site_config(config)
    catalog, registry = _load_content(site_config)
    try:
        enforce_integrity(
            validate_catalog(catalog, registry), strict=site_config.strict
        )
    except CatalogIntegrityError as exc:
        print(f"error: {exc}")
        raise SystemExit(1) from exc

    generator = AnswerPageGenerator(site_config, catalog, registry)
    if slug:
        if slug not in registry:
            print(f"{NOT_FOUND_TITLE}: '{slug}' is not in the slug registry")
            raise SystemExit(1)
        try:
            rendered = generator.generate(slug)
        except AnswerNotFoundError as exc:
            print(f"{NOT_FOUND_TITLE}: no answer record for '{slug}'")
            raise SystemExit(1) from exc
        page_path = generator.output_path(slug, output_dir=output_dir)
        written = [write_text(page_path, rendered.html)]
    else:
        written = generator.run(output_dir=output_dir)
    written.append(
        AnswersIndexBuilder(site_config, catalog, registry).run(output_dir=output_dir)
    )
    written.append(SitemapBuilder(site_config, registry).run(output_dir=output_dir))
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Lint the merged answer catalog against the slug registry.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Report catalog integrity issues and exit non-zero on any error.

    Warnings are printed but never change the exit status, whatever the
    ``strict`` setting.
    """
    site_config = load_site_config(config)
    catalog, registry = _load_content(site_config)
    issues = validate_catalog(catalog, registry)
    for issue in issues:
        print(issue)
    errors = sum(1 for issue in issues if issue.severity == "error")
    print(
        f"{len(catalog)} answers, {len(registry)} registered: "
        f"{errors} error(s), {len(issues) - errors} warning(s)"
    )
    if errors:
        raise SystemExit(1)


@app.command(help="List the admin dashboard's pre-written social posts.")
def social(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    api_base: typ.Annotated[
        str | None,
        Parameter(help="Override the admin API base URL", env_var="INPUT_API_BASE"),
    ] = None,
    password: typ.Annotated[
        str | None,
        Parameter(
            help="Admin password (falls back to ADMIN_PASSWORD)",
            env_var="INPUT_PASSWORD",
        ),
    ] = None,
    category: typ.Annotated[
        str | None,
        Parameter(help="Only show national, state or specialty posts"),
    ] = None,
) -> None:
    """Fetch the social feed and print it grouped by category.

    Parameters
    ----------
    config : Path, optional
        Site config used for ``defaults.admin_api_base`` when ``api_base`` is
        not given.
    api_base : str or None, optional
        Base URL of the admin endpoints.
    password : str or None, optional
        Used to log in once when the endpoint answers HTTP 401.
    category : str or None, optional
        Restrict output to one category.

    Raises
    ------
    SystemExit
        With status 1 when the feed cannot be fetched. Nothing is printed from
        the feed in that case.
    """
    if category is not None and category not in POST_CATEGORIES:
        msg = f"Unknown post category '{category}'; expected one of {POST_CATEGORIES}"
        raise ValueError(msg)

    base = api_base or load_site_config(config).admin_api_base
    client = SocialAdminClient(base)
    try:
        feed = _fetch_feed(client, password or os.getenv("ADMIN_PASSWORD"))
    except SocialAdminError as exc:
        print(f"social feed unavailable: {exc}")
        raise SystemExit(1) from exc

    counts = feed.counts
    print(
        f"{counts.national} national, {counts.states} state, "
        f"{counts.specialties} specialty posts"
    )
    for key, posts in group_posts(feed.posts).items():
        if category and key != category:
            continue
        print(f"\n== {key} ({len(posts)}) ==")
        for post in posts:
            print(f"[{post.id}] {post.label}")
            print(f"  twitter ({post.twitter_chars} chars): {post.twitter}")
            print(f"  linkedin ({post.linkedin_chars} chars):")
            for line in post.linkedin.splitlines():
                print(f"    {line}")


def _fetch_feed(client: SocialAdminClient, password: str | None) -> SocialFeed:
    """Fetch the feed, logging in once if the endpoint demands it."""
    try:
        return client.fetch_feed()
    except AdminAuthenticationRequired:
        if not password:
            raise
        logger.info("Admin session required; logging in")
        if not client.login(password):
            msg = "Admin password was rejected"
            raise AdminAuthenticationRequired(msg) from None
    return client.fetch_feed()


def main() -> None:
    """Configure logging and invoke the ``pages`` Cyclopts application.

    The log level is read from ``PAGES_LOG_LEVEL`` and defaults to ``INFO``.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(
        level=os.getenv(LOG_LEVEL_ENV, "INFO").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
