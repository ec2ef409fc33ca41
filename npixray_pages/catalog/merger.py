"""Merge content shards into one immutable answer catalog.

The merge is an explicit build step: shards are combined in the configured
order and a slug defined by two shards is treated as a build failure unless
the site opts into the ``last-wins`` compatibility policy, in which case the
later shard replaces the earlier record and a warning is logged.

Examples
--------
>>> from npixray_pages.catalog import build_shard, merge_shards
>>> first = build_shard("a", {})
>>> second = build_shard("b", {})
>>> len(merge_shards([first, second]))
0
"""

from __future__ import annotations

import logging
import typing as typ

from .models import AnswerRecord, Catalog, DuplicateSlugError
from .shards import load_shards

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from npixray_pages.config import ConflictPolicy, SiteConfig

    from .models import ContentShard

logger = logging.getLogger(__name__)


def merge_shards(
    shards: cabc.Iterable[ContentShard],
    *,
    on_conflict: ConflictPolicy = "error",
) -> Catalog:
    """Combine ``shards`` into a :class:`Catalog`.

    Parameters
    ----------
    shards : Iterable[ContentShard]
        Shards in merge order.
    on_conflict : {"error", "last-wins"}, optional
        ``"error"`` (default) raises on the first slug defined twice.
        ``"last-wins"`` keeps the later record and records the overwrite in
        :attr:`Catalog.overwritten`.

    Returns
    -------
    Catalog
        Read-only mapping of every slug to its record.

    Raises
    ------
    DuplicateSlugError
        If two shards define the same slug and ``on_conflict`` is ``"error"``.
    """
    records: dict[str, AnswerRecord] = {}
    origins: dict[str, str] = {}
    overwritten: list[tuple[str, str, str]] = []
    for shard in shards:
        for slug, record in shard.records.items():
            previous = origins.get(slug)
            if previous is not None:
                if on_conflict == "error":
                    raise DuplicateSlugError(slug, previous, shard.name)
                logger.warning(
                    "Shard '%s' overwrites slug '%s' from shard '%s'",
                    shard.name,
                    slug,
                    previous,
                )
                overwritten.append((slug, previous, shard.name))
            records[slug] = record
            origins[slug] = shard.name
    return Catalog(records, origins=origins, overwritten=overwritten)


def load_catalog(site_config: SiteConfig) -> Catalog:
    """Load every configured shard and merge them with the site's policy."""
    shards = load_shards(site_config.shard_paths)
    catalog = merge_shards(shards, on_conflict=site_config.shard_conflicts)
    logger.info("Merged %d shards into %r", len(shards), catalog)
    return catalog


__all__ = ["load_catalog", "merge_shards"]
