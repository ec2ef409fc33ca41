"""Schema.org JSON-LD documents derived from a single answer record.

Each answer page embeds three independent documents: a ``QAPage`` wrapping
the direct answer, a ``FAQPage`` mirroring the FAQ list, and a fixed
three-level ``BreadcrumbList``. None of them references the others, so each
can be serialised on its own. Field names follow Schema.org exactly because
search engines match them literally.

Examples
--------
>>> from npixray_pages.catalog import AnswerFAQ, AnswerRecord
>>> record = AnswerRecord(
...     "What is X?", "X", "About X", "Cat", "X is a thing.",
...     faqs=(AnswerFAQ("Is X new?", "No."),),
... )
>>> build_faq_page(record)["mainEntity"][0]["name"]
'Is X new?'
>>> build_qa_page("x", record, "https://example.com")["mainEntity"]["answerCount"]
1
"""

from __future__ import annotations

import json
import typing as typ

from npixray_pages._constants import (
    ANSWER_PATH_TEMPLATE,
    ANSWERS_PATH,
    SCHEMA_CONTEXT,
)

if typ.TYPE_CHECKING:
    from npixray_pages.catalog import AnswerRecord

JsonLd = dict[str, typ.Any]

_SCRIPT_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def build_qa_page(slug: str, record: AnswerRecord, origin: str) -> JsonLd:
    """Return the ``QAPage`` document with exactly one accepted answer."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "QAPage",
        "mainEntity": {
            "@type": "Question",
            "name": record.question,
            "text": record.question,
            "answerCount": 1,
            "acceptedAnswer": {
                "@type": "Answer",
                "text": record.answer,
                "url": origin + ANSWER_PATH_TEMPLATE.format(slug=slug),
            },
        },
    }


def build_faq_page(record: AnswerRecord) -> JsonLd:
    """Return the ``FAQPage`` document, one ``Question`` per FAQ in order."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
            for faq in record.faqs
        ],
    }


def build_breadcrumb_list(record: AnswerRecord, origin: str) -> JsonLd:
    """Return Home → Answers → question; the current page carries no ``item``."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": 1, "name": "Home", "item": origin},
            {
                "@type": "ListItem",
                "position": 2,
                "name": "Answers",
                "item": origin + ANSWERS_PATH,
            },
            {"@type": "ListItem", "position": 3, "name": record.question},
        ],
    }


def build_structured_data(slug: str, record: AnswerRecord, origin: str) -> list[JsonLd]:
    """Return the QAPage, FAQPage and BreadcrumbList documents in that order."""
    return [
        build_qa_page(slug, record, origin),
        build_faq_page(record),
        build_breadcrumb_list(record, origin),
    ]


def serialize_json_ld(document: JsonLd) -> str:
    """Serialise ``document`` compactly for an ``application/ld+json`` script.

    ``<``, ``>`` and ``&`` are emitted as unicode escapes so prose containing
    ``</script>`` cannot terminate the enclosing tag; JSON parsers decode the
    escapes back to the original characters.
    """
    text = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _SCRIPT_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


__all__ = [
    "JsonLd",
    "build_breadcrumb_list",
    "build_faq_page",
    "build_qa_page",
    "build_structured_data",
    "serialize_json_ld",
]
