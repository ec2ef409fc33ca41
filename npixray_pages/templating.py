"""Jinja environment shared by the answer, index and sitemap builders."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return an autoescaping environment rooted at ``templates_dir``.

    Templates use the ``.jinja`` suffix, so autoescape is forced on rather
    than selected by extension.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def write_text(output_path: Path, text: str) -> Path:
    """Write ``text`` as UTF-8, creating parents and ending with a newline."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if not text.endswith("\n"):
        text += "\n"
    output_path.write_text(text, encoding="utf-8")
    return output_path


__all__ = ["DEFAULT_TEMPLATES_DIR", "build_environment", "write_text"]
