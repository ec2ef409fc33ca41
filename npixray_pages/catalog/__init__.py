"""Content shards, the merged answer catalog, and the slug registry."""

from .merger import load_catalog, merge_shards
from .models import (
    AnswerFAQ,
    AnswerRecord,
    AnswerSection,
    Catalog,
    CatalogError,
    ContentShard,
    DuplicateSlugError,
    RelatedQuestion,
    ShardFormatError,
)
from .registry import CategoryBucket, SlugRegistry
from .shards import build_shard, load_shard, load_shards
from .validation import (
    CatalogIntegrityError,
    CatalogIssue,
    enforce_integrity,
    validate_catalog,
)

__all__ = [
    "AnswerFAQ",
    "AnswerRecord",
    "AnswerSection",
    "Catalog",
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogIssue",
    "CategoryBucket",
    "ContentShard",
    "DuplicateSlugError",
    "RelatedQuestion",
    "ShardFormatError",
    "SlugRegistry",
    "build_shard",
    "enforce_integrity",
    "load_catalog",
    "load_shard",
    "load_shards",
    "merge_shards",
    "validate_catalog",
]
