"""Load the answers site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from npixray_pages._constants import DEFAULT_ORIGIN

from .helpers import (
    DEFAULT_CONTENT_DIR,
    _build_categories,
    _build_index_config,
    _normalize_origin,
    _optional_str,
    _string_list,
)
from .models import CONFLICT_POLICIES, ConflictPolicy, SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing content shards and the registry.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/answers.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with shard paths resolved against
        ``defaults.content_dir`` (itself relative to the config file).

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections are missing or invalid (for example, an empty
        registry or an unknown shard conflict policy).

    Examples
    --------
    >>> from pathlib import Path
    >>> from npixray_pages.config import load_site_config
    >>> site = load_site_config(Path("config/answers.yaml"))  # doctest: +SKIP
    >>> site.canonical_url("what-is-npi-number")  # doctest: +SKIP
    'https://npixray.com/answers/what-is-npi-number'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    origin = _normalize_origin(defaults.get("origin"), DEFAULT_ORIGIN)
    content_dir = path.parent / str(defaults.get("content_dir", DEFAULT_CONTENT_DIR))

    shard_conflicts = str(defaults.get("shard_conflicts", "error"))
    if shard_conflicts not in CONFLICT_POLICIES:
        allowed = ", ".join(CONFLICT_POLICIES)
        msg = f"Unknown shard_conflicts policy '{shard_conflicts}' (use {allowed})."
        raise SiteConfigError(msg)

    shard_names = _string_list(raw.get("shards"), field="shards")
    if not shard_names:
        msg = "No content shards defined in configuration."
        raise SiteConfigError(msg)

    registry = _string_list(raw.get("registry"), field="registry")
    if not registry:
        msg = "The slug registry is empty."
        raise SiteConfigError(msg)

    categories_raw = raw.get("categories") or {}
    if not isinstance(categories_raw, dict):
        msg = "'categories' configuration must be a mapping."
        raise SiteConfigError(msg)
    try:
        bucket_size = int(categories_raw.get("bucket_size", 10))
    except (TypeError, ValueError) as exc:
        msg = "'categories.bucket_size' must be an integer."
        raise SiteConfigError(msg) from exc
    if bucket_size < 1:
        msg = "'categories.bucket_size' must be positive."
        raise SiteConfigError(msg)

    return SiteConfig(
        shard_paths=[_shard_path(content_dir, name) for name in shard_names],
        categories=_build_categories(categories_raw),
        registry=registry,
        origin=origin,
        site_name=_optional_str(defaults.get("site_name")) or "NPIxray",
        output_dir=Path(defaults.get("output_dir", "public")),
        shard_conflicts=typ.cast("ConflictPolicy", shard_conflicts),
        strict=bool(defaults.get("strict", True)),
        bucket_size=bucket_size,
        index=_build_index_config(raw.get("index")),
        admin_api_base=_normalize_origin(defaults.get("admin_api_base"), origin),
    )


def _shard_path(content_dir: Path, name: str) -> Path:
    """Resolve a shard name (or explicit ``.yaml`` file) under ``content_dir``."""
    filename = name if name.endswith((".yaml", ".yml")) else f"{name}.yaml"
    return content_dir / filename


__all__ = ["load_site_config"]
