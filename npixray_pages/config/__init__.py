"""Load and validate the answers site configuration YAML.

This subpackage parses the project's ``answers.yaml`` file, applies defaults,
resolves content shard paths, and produces typed dataclasses
(:class:`SiteConfig`, :class:`CategoryConfig`, :class:`IndexPageConfig`) that
the catalog loader and page builders consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from npixray_pages.config import load_site_config
>>> site = load_site_config(Path("config/answers.yaml"))  # doctest: +SKIP
>>> [category.label for category in site.categories][:1]  # doctest: +SKIP
['Medicare Billing']
"""

from .loader import load_site_config
from .models import (
    CONFLICT_POLICIES,
    CategoryConfig,
    ConflictPolicy,
    IndexPageConfig,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "CONFLICT_POLICIES",
    "CategoryConfig",
    "ConflictPolicy",
    "IndexPageConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
