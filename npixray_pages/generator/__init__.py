"""Utilities for rendering answer pages, metadata, and structured data."""

from .metadata import build_answer_metadata, build_index_metadata, not_found_metadata
from .models import (
    AnswerNotFoundError,
    PageMetadata,
    RenderedAnswer,
    SectionModel,
    TocEntry,
)
from .page_generator import AnswerPageGenerator
from .renderer import build_section_models, build_toc_entries, split_paragraphs
from .structured_data import (
    build_breadcrumb_list,
    build_faq_page,
    build_qa_page,
    build_structured_data,
    serialize_json_ld,
)

__all__ = [
    "AnswerNotFoundError",
    "AnswerPageGenerator",
    "PageMetadata",
    "RenderedAnswer",
    "SectionModel",
    "TocEntry",
    "build_answer_metadata",
    "build_breadcrumb_list",
    "build_faq_page",
    "build_index_metadata",
    "build_qa_page",
    "build_section_models",
    "build_structured_data",
    "build_toc_entries",
    "not_found_metadata",
    "serialize_json_ld",
    "split_paragraphs",
]
