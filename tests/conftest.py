"""Shared fixtures for building throwaway answer sites under ``tmp_path``.

Shards and configs are written as JSON, which is a subset of YAML 1.2, so the
production ``ruamel.yaml`` loaders read them unchanged.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

SiteWriter = typ.Callable[..., "Path"]

DEFAULT_CATEGORIES: list[dict[str, str]] = [
    {"key": "basics", "label": "Basics", "description": "Getting started."},
    {"key": "money", "label": "Money", "description": "Revenue questions."},
]


def answer_payload(
    question: str,
    *,
    category: str = "Basics",
    sections: cabc.Sequence[tuple[str, str]] = (("Overview", "Body text."),),
    table_of_contents: cabc.Sequence[str] | None = None,
    related: cabc.Sequence[tuple[str, str]] = (),
    data_points: cabc.Sequence[str] = (),
    faqs: cabc.Sequence[tuple[str, str]] = (),
) -> dict[str, typ.Any]:
    """Return a record payload with sensible defaults for every field."""
    headings = [heading for heading, _ in sections]
    return {
        "question": question,
        "meta_title": f"{question} | Meta",
        "meta_description": f"Description of {question}",
        "category": category,
        "answer": f"Direct answer to {question}",
        "sections": [
            {"heading": heading, "content": content} for heading, content in sections
        ],
        "table_of_contents": list(
            headings if table_of_contents is None else table_of_contents
        ),
        "related_questions": [
            {"slug": slug, "question": title} for slug, title in related
        ],
        "data_points": list(data_points),
        "faqs": [{"question": q, "answer": a} for q, a in faqs],
    }


@pytest.fixture
def write_site(tmp_path: Path) -> SiteWriter:
    """Return a factory writing shards plus ``config/answers.yaml``.

    The factory accepts ``shards`` (name to slug to payload, in merge order),
    ``registry``, and optional ``categories``, ``bucket_size``, ``defaults``
    and ``index`` overrides. It returns the config path.
    """

    def _write(
        *,
        shards: cabc.Mapping[str, cabc.Mapping[str, typ.Any]],
        registry: cabc.Sequence[str],
        categories: cabc.Sequence[cabc.Mapping[str, str]] = DEFAULT_CATEGORIES,
        bucket_size: int = 2,
        defaults: cabc.Mapping[str, typ.Any] | None = None,
        index: cabc.Mapping[str, typ.Any] | None = None,
    ) -> Path:
        content_dir = tmp_path / "content"
        content_dir.mkdir(exist_ok=True)
        for name, records in shards.items():
            (content_dir / f"{name}.yaml").write_text(
                json.dumps(dict(records), indent=2), encoding="utf-8"
            )

        config_dir = tmp_path / "config"
        config_dir.mkdir(exist_ok=True)
        payload: dict[str, typ.Any] = {
            "defaults": {
                "origin": "https://example.com",
                "output_dir": str(tmp_path / "public"),
                "content_dir": "../content",
                **(defaults or {}),
            },
            "shards": list(shards),
            "categories": {"bucket_size": bucket_size, "buckets": list(categories)},
            "registry": list(registry),
        }
        if index is not None:
            payload["index"] = dict(index)
        config_path = config_dir / "answers.yaml"
        config_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def make_answer() -> typ.Callable[..., dict[str, typ.Any]]:
    """Expose :func:`answer_payload` to tests as a fixture."""
    return answer_payload
