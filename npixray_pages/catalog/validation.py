"""Build-time integrity checks for the merged answer catalog.

Rendering tolerates dangling references by skipping them, so this module is
where content bugs surface: every registry slug must resolve, every related
link must point at a published answer, and softer drift (tables of contents,
authored categories) is reported as warnings.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .models import CatalogError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import AnswerRecord, Catalog
    from .registry import SlugRegistry

logger = logging.getLogger(__name__)

Severity = typ.Literal["error", "warning"]

MISSING_RECORD = "missing-record"
DANGLING_RELATED = "dangling-related"
UNREGISTERED_RECORD = "unregistered-record"
TOC_MISMATCH = "toc-mismatch"
CATEGORY_DRIFT = "category-drift"


@dc.dataclass(slots=True, frozen=True)
class CatalogIssue:
    """One finding reported by :func:`validate_catalog`."""

    code: str
    slug: str
    message: str
    severity: Severity = "error"

    def __str__(self) -> str:
        return f"{self.severity}: [{self.code}] {self.slug}: {self.message}"


class CatalogIntegrityError(CatalogError):
    """Raised when error-severity issues are found in strict mode."""

    def __init__(self, issues: cabc.Sequence[CatalogIssue]) -> None:
        self.issues = tuple(issues)
        errors = [issue for issue in self.issues if issue.severity == "error"]
        super().__init__(
            f"Catalog integrity check failed with {len(errors)} error(s): "
            + "; ".join(str(issue) for issue in errors[:5])
        )


def validate_catalog(catalog: Catalog, registry: SlugRegistry) -> list[CatalogIssue]:
    """Return every integrity issue found between ``catalog`` and ``registry``.

    Missing records come first, then unpublished records, then per-record
    findings in registry order, so repeated runs report identically.
    """
    issues: list[CatalogIssue] = [
        CatalogIssue(
            MISSING_RECORD,
            slug,
            "registered slug has no answer record in any shard",
        )
        for slug in registry
        if slug not in catalog
    ]

    for slug in catalog:
        if slug not in registry:
            issues.append(
                CatalogIssue(
                    UNREGISTERED_RECORD,
                    slug,
                    f"record from shard '{catalog.shard_of(slug)}' is never published",
                    "warning",
                )
            )

    for slug in [*registry, *(s for s in catalog if s not in registry)]:
        record = catalog.get(slug)
        if record is None:
            continue
        issues.extend(_related_issues(slug, record, catalog, registry))
        issues.extend(_toc_issues(slug, record))
        category = registry.category_of(slug)
        if category is not None and category.label != record.category:
            issues.append(
                CatalogIssue(
                    CATEGORY_DRIFT,
                    slug,
                    f"authored category '{record.category}' differs from "
                    f"registry bucket '{category.label}'",
                    "warning",
                )
            )

    for issue in issues:
        level = logging.ERROR if issue.severity == "error" else logging.WARNING
        logger.log(level, "%s", issue)
    return issues


def enforce_integrity(
    issues: cabc.Sequence[CatalogIssue], *, strict: bool = True
) -> None:
    """Raise :class:`CatalogIntegrityError` for errors when ``strict`` is set."""
    has_errors = any(issue.severity == "error" for issue in issues)
    if has_errors and strict:
        raise CatalogIntegrityError(issues)
    if has_errors:
        logger.warning("Continuing despite catalog errors (strict mode is off)")


def _related_issues(
    slug: str, record: AnswerRecord, catalog: Catalog, registry: SlugRegistry
) -> list[CatalogIssue]:
    issues: list[CatalogIssue] = []
    for related in record.related_questions:
        if related.slug not in registry or related.slug not in catalog:
            issues.append(
                CatalogIssue(
                    DANGLING_RELATED,
                    slug,
                    f"related question points at unknown slug '{related.slug}'",
                )
            )
    return issues


def _toc_issues(slug: str, record: AnswerRecord) -> list[CatalogIssue]:
    headings = tuple(section.heading for section in record.sections)
    if headings == record.table_of_contents:
        return []
    return [
        CatalogIssue(
            TOC_MISMATCH,
            slug,
            f"table of contents has {len(record.table_of_contents)} entries "
            f"that do not match {len(headings)} section headings",
            "warning",
        )
    ]


__all__ = [
    "CATEGORY_DRIFT",
    "DANGLING_RELATED",
    "MISSING_RECORD",
    "TOC_MISMATCH",
    "UNREGISTERED_RECORD",
    "CatalogIntegrityError",
    "CatalogIssue",
    "Severity",
    "enforce_integrity",
    "validate_catalog",
]
