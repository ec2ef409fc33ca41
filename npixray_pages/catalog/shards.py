"""Read authored YAML content shards into :class:`ContentShard` objects.

Each shard is a YAML mapping of slug to answer record. Shards exist purely
for authoring convenience; :mod:`npixray_pages.catalog.merger` combines them
into one catalog. ``ruamel.yaml`` already rejects a slug repeated inside a
single file, so the merger only has to police collisions across files.
"""

from __future__ import annotations

import logging
import typing as typ

from ruamel.yaml import YAML

from .models import (
    AnswerFAQ,
    AnswerRecord,
    AnswerSection,
    ContentShard,
    RelatedQuestion,
    ShardFormatError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = (
    "question",
    "meta_title",
    "meta_description",
    "category",
    "answer",
)


def load_shard(path: Path) -> ContentShard:
    """Parse ``path`` into a :class:`ContentShard` named after the file stem.

    Raises
    ------
    FileNotFoundError
        If the shard file does not exist.
    ShardFormatError
        If the top level is not a mapping or any record is malformed.
    """
    if not path.exists():
        msg = f"Content shard '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    return build_shard(path.stem, loaded, path=path)


def load_shards(paths: cabc.Iterable[Path]) -> list[ContentShard]:
    """Load every shard in ``paths``, preserving order."""
    shards = [load_shard(path) for path in paths]
    logger.debug(
        "Loaded %d shards with %d records",
        len(shards),
        sum(len(shard) for shard in shards),
    )
    return shards


def build_shard(
    name: str, payload: object, *, path: Path | None = None
) -> ContentShard:
    """Build a shard from an already parsed mapping of slug to record payload."""
    if not isinstance(payload, dict):
        msg = f"Shard '{name}' must be a mapping of slug to answer record."
        raise ShardFormatError(msg)

    records: dict[str, AnswerRecord] = {}
    for slug, entry in payload.items():
        records[str(slug)] = _build_record(name, str(slug), entry)
    return ContentShard(name=name, path=path, records=records)


def _build_record(shard: str, slug: str, payload: object) -> AnswerRecord:
    """Validate one record payload and convert it into an :class:`AnswerRecord`."""
    if not isinstance(payload, dict):
        msg = f"Record '{slug}' in shard '{shard}' must be a mapping."
        raise ShardFormatError(msg)

    missing = [field for field in REQUIRED_FIELDS if not payload.get(field)]
    if missing:
        msg = (
            f"Record '{slug}' in shard '{shard}' is missing "
            f"{', '.join(missing)}."
        )
        raise ShardFormatError(msg)

    where = f"'{slug}' in shard '{shard}'"
    return AnswerRecord(
        question=str(payload["question"]),
        meta_title=str(payload["meta_title"]),
        meta_description=str(payload["meta_description"]),
        category=str(payload["category"]),
        answer=str(payload["answer"]),
        sections=tuple(
            AnswerSection(heading=heading, content=content)
            for heading, content in _pairs(
                payload.get("sections"), ("heading", "content"), where, "sections"
            )
        ),
        table_of_contents=_strings(
            payload.get("table_of_contents"), where, "table_of_contents"
        ),
        related_questions=tuple(
            RelatedQuestion(slug=target, question=question)
            for target, question in _pairs(
                payload.get("related_questions"),
                ("slug", "question"),
                where,
                "related_questions",
            )
        ),
        data_points=_strings(payload.get("data_points"), where, "data_points"),
        faqs=tuple(
            AnswerFAQ(question=question, answer=answer)
            for question, answer in _pairs(
                payload.get("faqs"), ("question", "answer"), where, "faqs"
            )
        ),
    )


def _strings(value: object, where: str, field: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings, treating ``None`` as empty."""
    match value:
        case None:
            return ()
        case list() as items:
            return tuple(str(item) for item in items)
        case _:
            msg = f"Field '{field}' of {where} must be a list."
            raise ShardFormatError(msg)


def _pairs(
    value: object, keys: tuple[str, str], where: str, field: str
) -> list[tuple[str, str]]:
    """Return ``(first, second)`` string pairs from a list of two-key mappings."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Field '{field}' of {where} must be a list."
        raise ShardFormatError(msg)

    first_key, second_key = keys
    pairs: list[tuple[str, str]] = []
    for position, entry in enumerate(value, start=1):
        match entry:
            case {**fields} if first_key in fields and second_key in fields:
                pairs.append((str(fields[first_key]), str(fields[second_key])))
            case _:
                msg = (
                    f"Entry #{position} of '{field}' in {where} requires "
                    f"'{first_key}' and '{second_key}'."
                )
                raise ShardFormatError(msg)
    return pairs


__all__ = ["REQUIRED_FIELDS", "build_shard", "load_shard", "load_shards"]
