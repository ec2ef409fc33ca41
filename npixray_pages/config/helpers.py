"""Utility helpers shared by the answers configuration loader."""

from __future__ import annotations

import typing as typ

from .models import CategoryConfig, IndexPageConfig, SiteConfigError

DEFAULT_CONTENT_DIR = "../content/answers"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_origin(value: object | None, fallback: str) -> str:
    """Return ``value`` as an origin without trailing slashes."""
    text = _optional_str(value) or fallback
    return text.rstrip("/")


def _string_list(value: object | None, *, field: str) -> list[str]:
    """Coerce a YAML sequence into a list of non-empty strings."""
    match value:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = f"'{field}' must be a list."
            raise SiteConfigError(msg)
    normalized: list[str] = []
    for item in items:
        text = _optional_str(item)
        if text:
            normalized.append(text)
    return normalized


def _build_categories(payload: typ.Mapping[str, typ.Any]) -> list[CategoryConfig]:
    """Build the ordered category buckets from the ``categories`` block."""
    entries = payload.get("buckets")
    if not isinstance(entries, list) or not entries:
        msg = "'categories.buckets' must list at least one category."
        raise SiteConfigError(msg)

    categories: list[CategoryConfig] = []
    for position, entry in enumerate(entries, start=1):
        match entry:
            case {"key": key, "label": label, **rest}:
                pass
            case _:
                msg = f"Category #{position} requires 'key' and 'label'."
                raise SiteConfigError(msg)
        categories.append(
            CategoryConfig(
                key=str(key),
                label=str(label),
                description=_optional_str(rest.get("description")) or "",
            )
        )
    keys = [category.key for category in categories]
    if len(set(keys)) != len(keys):
        msg = f"Category keys must be unique: {', '.join(keys)}"
        raise SiteConfigError(msg)
    return categories


def _build_index_config(payload: typ.Mapping[str, typ.Any] | None) -> IndexPageConfig:
    """Build the listing page config, falling back to defaults per field."""
    base = IndexPageConfig()
    if not payload:
        return base
    if not isinstance(payload, dict):
        msg = "'index' configuration must be a mapping."
        raise SiteConfigError(msg)
    return IndexPageConfig(
        title=_optional_str(payload.get("title")) or base.title,
        description=_optional_str(payload.get("description")) or base.description,
        keywords=_string_list(payload.get("keywords"), field="index.keywords"),
        og_title=_optional_str(payload.get("og_title")),
        og_description=_optional_str(payload.get("og_description")),
        heading=_optional_str(payload.get("heading")) or base.heading,
        intro=_optional_str(payload.get("intro")) or base.intro,
    )


__all__ = [
    "DEFAULT_CONTENT_DIR",
    "_build_categories",
    "_build_index_config",
    "_normalize_origin",
    "_optional_str",
    "_string_list",
]
