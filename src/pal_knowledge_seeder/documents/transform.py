"""
Document transformer - turn FAQ intents into embeddable documents.

Single responsibility: pure mapping from SourceIntent to CandidateDocument.
No I/O, no embedding, no store access.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from pal_knowledge_seeder.core import CandidateDocument, SourceIntent

# Conversational intents that carry no knowledge worth retrieving.
# "salutaion" is spelled the way the dataset spells it.
EXCLUDED_INTENTS = frozenset({
    "greeting",
    "goodbye",
    "creator",
    "name",
    "random",
    "swear",
    "salutaion",
    "salutation",
    "task",
})

DOCUMENT_TYPE = "faq"


def compose_content(intent: SourceIntent) -> str:
    """Build the three-line Topic / Common questions / Answer block."""
    patterns = ", ".join(intent.text)
    answer = " ".join(intent.responses)
    return f"Topic: {intent.intent}\nCommon questions: {patterns}\nAnswer: {answer}"


def category_for(intent: SourceIntent) -> str:
    return intent.context_out or intent.intent


def make_document_id(intent_name: str, content: str) -> str:
    """Stable id: same intent and content always give the same id."""
    digest = hashlib.sha256(content.encode()).hexdigest()[:16]
    return f"dataset_{intent_name}_{digest}"


def build_documents(
    intents: Iterable[SourceIntent],
    source: str = "dataset.json",
) -> list[CandidateDocument]:
    """
    Convert intents to documents, skipping EXCLUDED_INTENTS.

    Order follows the input. Every retained intent yields exactly one
    document, even with no patterns or responses.
    """
    documents: list[CandidateDocument] = []
    seen: dict[str, int] = {}

    for intent in intents:
        if intent.intent in EXCLUDED_INTENTS:
            continue

        content = compose_content(intent)
        doc_id = make_document_id(intent.intent, content)

        # Exact duplicates in the dataset still need distinct ids
        seen[doc_id] = seen.get(doc_id, 0) + 1
        if seen[doc_id] > 1:
            doc_id = f"{doc_id}-{seen[doc_id]}"

        documents.append(
            CandidateDocument(
                id=doc_id,
                content=content,
                metadata={
                    "title": intent.intent,
                    "source": source,
                    "documentType": DOCUMENT_TYPE,
                    "category": category_for(intent),
                },
            )
        )

    return documents
