"""Immutable content records and the merged answer catalog."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from types import MappingProxyType

if typ.TYPE_CHECKING:
    from pathlib import Path


class CatalogError(ValueError):
    """Base class for content shard and catalog problems."""


class ShardFormatError(CatalogError):
    """Raised when a shard file or one of its records is malformed."""


class DuplicateSlugError(CatalogError):
    """Raised when two shards define the same slug under the ``error`` policy."""

    def __init__(self, slug: str, first_shard: str, second_shard: str) -> None:
        self.slug = slug
        self.first_shard = first_shard
        self.second_shard = second_shard
        super().__init__(
            f"Slug '{slug}' is defined in both '{first_shard}' and "
            f"'{second_shard}'."
        )


@dc.dataclass(slots=True, frozen=True)
class AnswerSection:
    """One prose section; ``content`` separates paragraphs with blank lines."""

    heading: str
    content: str


@dc.dataclass(slots=True, frozen=True)
class AnswerFAQ:
    """Question and answer pair feeding the FAQ block and FAQPage JSON-LD."""

    question: str
    answer: str


@dc.dataclass(slots=True, frozen=True)
class RelatedQuestion:
    """Denormalized edge to another answer; ``question`` is a cached title."""

    slug: str
    question: str


@dc.dataclass(slots=True, frozen=True)
class AnswerRecord:
    """The atomic content unit published at ``/answers/<slug>``.

    Attributes
    ----------
    question : str
        Canonical title rendered as the page H1.
    meta_title : str
        Title used for ``<title>`` and social previews.
    meta_description : str
        Description used for search and social previews.
    category : str
        Authored category label. Grouping uses the registry position instead.
    answer : str
        Direct answer paragraph, used verbatim in the QAPage structured data.
    sections : tuple[AnswerSection, ...]
        Ordered prose sections.
    table_of_contents : tuple[str, ...]
        Ordered headings; expected to mirror ``sections``.
    related_questions : tuple[RelatedQuestion, ...]
        Ordered links into the same catalog.
    data_points : tuple[str, ...]
        Short statistics rendered as a grid.
    faqs : tuple[AnswerFAQ, ...]
        Ordered FAQ pairs.
    """

    question: str
    meta_title: str
    meta_description: str
    category: str
    answer: str
    sections: tuple[AnswerSection, ...] = ()
    table_of_contents: tuple[str, ...] = ()
    related_questions: tuple[RelatedQuestion, ...] = ()
    data_points: tuple[str, ...] = ()
    faqs: tuple[AnswerFAQ, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class ContentShard:
    """A named, authored partition of the slug to record mapping."""

    name: str
    path: Path | None
    records: cabc.Mapping[str, AnswerRecord]

    def __len__(self) -> int:
        return len(self.records)


class Catalog(cabc.Mapping[str, AnswerRecord]):
    """Read-only slug to :class:`AnswerRecord` mapping merged from shards.

    The catalog is built once per build and never mutated afterwards. Besides
    the mapping protocol it remembers where each slug came from and which
    slugs were overwritten under the ``last-wins`` policy.
    """

    __slots__ = ("_origins", "_records", "overwritten")

    def __init__(
        self,
        records: cabc.Mapping[str, AnswerRecord],
        *,
        origins: cabc.Mapping[str, str] | None = None,
        overwritten: cabc.Sequence[tuple[str, str, str]] = (),
    ) -> None:
        self._records = MappingProxyType(dict(records))
        self._origins = MappingProxyType(dict(origins or {}))
        self.overwritten: tuple[tuple[str, str, str], ...] = tuple(overwritten)

    def __getitem__(self, slug: str) -> AnswerRecord:
        return self._records[slug]

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} answers)"

    def shard_of(self, slug: str) -> str | None:
        """Return the name of the shard that supplied ``slug``, if known."""
        return self._origins.get(slug)

    def resolve_related(
        self,
        record: AnswerRecord,
        published: cabc.Container[str] | None = None,
    ) -> list[RelatedQuestion]:
        """Return related entries whose slug exists in the catalog, in order.

        When ``published`` is given (usually the slug registry), entries whose
        slug it does not contain are dropped as well, since no page is written
        for them.
        """
        return [
            related
            for related in record.related_questions
            if related.slug in self
            and (published is None or related.slug in published)
        ]


__all__ = [
    "AnswerFAQ",
    "AnswerRecord",
    "AnswerSection",
    "Catalog",
    "CatalogError",
    "ContentShard",
    "DuplicateSlugError",
    "RelatedQuestion",
    "ShardFormatError",
]
