"""Ordered slug registry and its positional category partition."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from npixray_pages.config import CategoryConfig, SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from npixray_pages.config import SiteConfig


@dc.dataclass(slots=True, frozen=True)
class CategoryBucket:
    """A contiguous slice of the registry labelled with one category."""

    category: CategoryConfig
    slugs: tuple[str, ...]

    @property
    def key(self) -> str:
        return self.category.key

    @property
    def label(self) -> str:
        return self.category.label


class SlugRegistry:
    """Compile-time list of publishable slugs, sliced into category buckets.

    Membership in a category is purely positional: the first ``bucket_size``
    slugs belong to the first category, the next ``bucket_size`` to the
    second, and so on. Moving a slug moves its category regardless of the
    record's authored ``category`` field.

    Examples
    --------
    >>> from npixray_pages.config import CategoryConfig
    >>> registry = SlugRegistry(
    ...     ["a", "b", "c", "d"],
    ...     [CategoryConfig("one", "One"), CategoryConfig("two", "Two")],
    ...     bucket_size=2,
    ... )
    >>> [bucket.slugs for bucket in registry.buckets()]
    [('a', 'b'), ('c', 'd')]
    >>> registry.category_of("c").label
    'Two'
    """

    def __init__(
        self,
        slugs: cabc.Sequence[str],
        categories: cabc.Sequence[CategoryConfig],
        *,
        bucket_size: int,
    ) -> None:
        ordered = tuple(slugs)
        duplicates = sorted({slug for slug in ordered if ordered.count(slug) > 1})
        if duplicates:
            msg = f"Registry lists slugs more than once: {', '.join(duplicates)}"
            raise SiteConfigError(msg)
        expected = bucket_size * len(categories)
        if len(ordered) != expected:
            msg = (
                f"Registry has {len(ordered)} slugs but {len(categories)} "
                f"categories of {bucket_size} require exactly {expected}."
            )
            raise SiteConfigError(msg)

        self._slugs = ordered
        self._buckets = tuple(
            CategoryBucket(
                category=category,
                slugs=ordered[index * bucket_size : (index + 1) * bucket_size],
            )
            for index, category in enumerate(categories)
        )
        self._category_by_slug = {
            slug: bucket.category for bucket in self._buckets for slug in bucket.slugs
        }

    @classmethod
    def from_config(cls, site_config: SiteConfig) -> SlugRegistry:
        """Build the registry declared in ``site_config``."""
        return cls(
            site_config.registry,
            site_config.categories,
            bucket_size=site_config.bucket_size,
        )

    def __contains__(self, slug: object) -> bool:
        return slug in self._category_by_slug

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._slugs)

    def __len__(self) -> int:
        return len(self._slugs)

    def all_slugs(self) -> tuple[str, ...]:
        """Return every registered slug in registry order."""
        return self._slugs

    def buckets(self) -> list[CategoryBucket]:
        """Return the category buckets in their fixed order."""
        return list(self._buckets)

    def category_of(self, slug: str) -> CategoryConfig | None:
        """Return the positional category for ``slug`` or ``None``."""
        return self._category_by_slug.get(slug)

    def static_params(self) -> list[dict[str, str]]:
        """Return one route parameter mapping per slug for static generation."""
        return [{"slug": slug} for slug in self._slugs]


__all__ = ["CategoryBucket", "SlugRegistry"]
