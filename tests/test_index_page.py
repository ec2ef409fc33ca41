"""Unit tests for the answers index page builder."""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from npixray_pages.catalog import SlugRegistry, load_catalog
from npixray_pages.config import load_site_config
from npixray_pages.index_page import AnswersIndexBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path

SiteWriter = typ.Callable[..., "Path"]
AnswerFactory = typ.Callable[..., dict[str, typ.Any]]


def _build_index(config_path: Path, output_dir: Path) -> BeautifulSoup:
    site = load_site_config(config_path)
    builder = AnswersIndexBuilder(
        site, load_catalog(site), SlugRegistry.from_config(site)
    )
    index_path = builder.run(output_dir=output_dir)
    assert index_path == output_dir / "answers" / "index.html", (
        f"unexpected index output path {index_path!r}"
    )
    return BeautifulSoup(index_path.read_text(encoding="utf-8"), "html.parser")


def test_index_groups_cards_by_bucket_and_skips_missing(
    write_site: SiteWriter, make_answer: AnswerFactory, tmp_path: Path
) -> None:
    """Categories keep config order and unresolved slugs leave no card."""
    config_path = write_site(
        shards={
            "main": {
                "b": make_answer("B?"),
                "a": make_answer("A?"),
                "d": make_answer("D?"),
            }
        },
        registry=["a", "b", "c", "d"],
        defaults={"strict": False},
    )

    soup = _build_index(config_path, tmp_path / "site")

    sections = soup.select("section.answers-category")
    assert [s["data-category"] for s in sections] == ["basics", "money"], (
        "expected category sections in configured order"
    )
    first_cards = [a["href"] for a in sections[0].select("a.answers-card")]
    second_cards = [a["href"] for a in sections[1].select("a.answers-card")]
    assert first_cards == ["/answers/a", "/answers/b"], (
        f"expected registry order inside a bucket, got {first_cards!r}"
    )
    assert second_cards == ["/answers/d"], (
        f"expected missing slug to be skipped, got {second_cards!r}"
    )
    summary = sections[0].select_one(".answers-card__summary")
    assert summary is not None, "expected a summary on each card"
    assert summary.get_text() == "Description of A?", "expected meta description"
    description = sections[1].select_one(".answers-category__description")
    assert description is not None, "expected category description"
    assert description.get_text() == "Revenue questions.", "unexpected description"


def test_index_metadata_comes_from_config(
    write_site: SiteWriter, make_answer: AnswerFactory, tmp_path: Path
) -> None:
    config_path = write_site(
        shards={"main": {"a": make_answer("A?"), "b": make_answer("B?")}},
        registry=["a", "b"],
        categories=[{"key": "one", "label": "One"}],
        index={
            "title": "All Answers",
            "description": "Every answer we have.",
            "keywords": ["billing", "npi"],
            "og_title": "All Answers | Example",
        },
    )

    soup = _build_index(config_path, tmp_path / "site")

    assert soup.title is not None, "expected a title element"
    assert soup.title.get_text() == "All Answers", "expected configured title"
    canonical = soup.select_one("link[rel='canonical']")
    assert canonical is not None, "expected canonical link"
    assert canonical["href"] == "https://example.com/answers", "expected index URL"
    keywords = soup.select_one("meta[name='keywords']")
    assert keywords is not None, "expected keywords meta tag"
    assert keywords["content"] == "billing, npi", "expected joined keywords"
    og_title = soup.select_one("meta[property='og:title']")
    assert og_title is not None, "expected og:title"
    assert og_title["content"] == "All Answers | Example", "expected OG override"
    og_description = soup.select_one("meta[property='og:description']")
    assert og_description is not None, "expected og:description"
    assert og_description["content"] == "Every answer we have.", (
        "expected OG description to fall back to the description"
    )
