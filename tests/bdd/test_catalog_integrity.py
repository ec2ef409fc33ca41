"""Behaviour tests for merging and linting the answer catalog.

These scenarios are backed by ``features/catalog_integrity.feature``. They
exercise :func:`~npixray_pages.catalog.merge_shards` and
:func:`~npixray_pages.catalog.validate_catalog` on in-memory shards, so no
files are touched.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from npixray_pages.catalog import (
    Catalog,
    CatalogIntegrityError,
    DuplicateSlugError,
    SlugRegistry,
    build_shard,
    enforce_integrity,
    merge_shards,
    validate_catalog,
)
from npixray_pages.config import CategoryConfig

if typ.TYPE_CHECKING:
    from npixray_pages.catalog import CatalogIssue, ContentShard

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "catalog_integrity.feature"
)
scenarios(FEATURE_FILE)

AnswerFactory = typ.Callable[..., dict[str, typ.Any]]


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _shards(scenario_state: dict[str, object]) -> list[ContentShard]:
    return typ.cast("list[ContentShard]", scenario_state["shards"])


def _issues(scenario_state: dict[str, object]) -> list[CatalogIssue]:
    return typ.cast("list[CatalogIssue]", scenario_state["issues"])


@given(parsers.parse('two shards that both define "{slug}"'))
def given_colliding_shards(
    slug: str, make_answer: AnswerFactory, scenario_state: dict[str, object]
) -> None:
    scenario_state["slug"] = slug
    scenario_state["shards"] = [
        build_shard("early", {slug: make_answer("Early version?")}),
        build_shard("late", {slug: make_answer("Late version?")}),
    ]


@given(parsers.parse('a catalog whose answer links to "{target}"'))
def given_dangling_catalog(
    target: str, make_answer: AnswerFactory, scenario_state: dict[str, object]
) -> None:
    records = {
        "linked": make_answer("Linked?", related=[(target, "Ghost")]),
        "plain": make_answer("Plain?"),
    }
    scenario_state["catalog"] = merge_shards([build_shard("only", records)])
    scenario_state["registry"] = SlugRegistry(
        ["linked", "plain"], [CategoryConfig("basics", "Basics")], bucket_size=2
    )


@when("I merge the shards")
def when_merge(scenario_state: dict[str, object]) -> None:
    try:
        scenario_state["catalog"] = merge_shards(_shards(scenario_state))
    except DuplicateSlugError as exc:
        scenario_state["error"] = exc


@when("I merge the shards keeping the last definition")
def when_merge_last_wins(scenario_state: dict[str, object]) -> None:
    scenario_state["catalog"] = merge_shards(
        _shards(scenario_state), on_conflict="last-wins"
    )


@when("I validate the catalog")
def when_validate(scenario_state: dict[str, object]) -> None:
    scenario_state["issues"] = validate_catalog(
        typ.cast("Catalog", scenario_state["catalog"]),
        typ.cast("SlugRegistry", scenario_state["registry"]),
    )


@then("the merge fails naming both shards")
def then_merge_fails(scenario_state: dict[str, object]) -> None:
    error = scenario_state.get("error")
    assert isinstance(error, DuplicateSlugError), "expected a DuplicateSlugError"
    assert error.slug == scenario_state["slug"], "expected the colliding slug"
    assert "'early'" in str(error), "expected the first shard in the message"
    assert "'late'" in str(error), "expected the second shard in the message"
    assert "catalog" not in scenario_state, "expected no catalog to be produced"


@then("the catalog holds the second shard's record")
def then_last_wins(scenario_state: dict[str, object]) -> None:
    catalog = scenario_state["catalog"]
    assert isinstance(catalog, Catalog), "expected a merged catalog"
    slug = typ.cast("str", scenario_state["slug"])
    assert catalog[slug].question == "Late version?", "expected the later record"
    assert catalog.overwritten == ((slug, "early", "late"),), (
        "expected the overwrite to be recorded"
    )


@then(parsers.parse('a "{code}" error is reported'))
def then_issue_reported(code: str, scenario_state: dict[str, object]) -> None:
    issues = _issues(scenario_state)
    matching = [
        issue for issue in issues if issue.code == code and issue.severity == "error"
    ]
    assert matching, f"expected a {code!r} error, got {issues!r}"


@then("the strict build is refused")
def then_strict_refused(scenario_state: dict[str, object]) -> None:
    with pytest.raises(CatalogIntegrityError):
        enforce_integrity(_issues(scenario_state), strict=True)
