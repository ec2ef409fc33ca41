"""Plain-text prose helpers for answer sections.

Answer content is hand-authored prose with paragraph breaks encoded as blank
lines. Nothing else is interpreted: there is no Markdown pass, and HTML
escaping is left to Jinja autoescape when the paragraphs are rendered.
"""

from __future__ import annotations

import typing as typ

from npixray_pages._constants import PARAGRAPH_DELIMITER

from .models import SectionModel, TocEntry

if typ.TYPE_CHECKING:
    from npixray_pages.catalog import AnswerRecord

TOC_MIN_ENTRIES = 2


def split_paragraphs(content: str) -> list[str]:
    """Split ``content`` on the literal blank-line delimiter.

    Examples
    --------
    >>> split_paragraphs("One.\\n\\nTwo.")
    ['One.', 'Two.']
    >>> split_paragraphs("Single line\\nwith a soft break.")
    ['Single line\\nwith a soft break.']
    """
    return content.split(PARAGRAPH_DELIMITER)


def section_anchor(index: int) -> str:
    """Return the fragment id for the zero-based section ``index``."""
    return f"section-{index}"


def build_section_models(record: AnswerRecord) -> list[SectionModel]:
    """Return one :class:`SectionModel` per section, preserving order."""
    return [
        SectionModel(
            anchor=section_anchor(index),
            heading=section.heading,
            paragraphs=split_paragraphs(section.content),
        )
        for index, section in enumerate(record.sections)
    ]


def build_toc_entries(record: AnswerRecord) -> list[TocEntry]:
    """Return numbered ToC entries, or an empty list for fewer than two."""
    if len(record.table_of_contents) < TOC_MIN_ENTRIES:
        return []
    return [
        TocEntry(number=f"{index + 1:02d}", label=label, anchor=section_anchor(index))
        for index, label in enumerate(record.table_of_contents)
    ]


__all__ = [
    "TOC_MIN_ENTRIES",
    "build_section_models",
    "build_toc_entries",
    "section_anchor",
    "split_paragraphs",
]
