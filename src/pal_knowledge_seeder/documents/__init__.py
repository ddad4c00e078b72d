"""
Documents module - intent to document transformation.
"""

from pal_knowledge_seeder.documents.transform import (
    EXCLUDED_INTENTS,
    build_documents,
    category_for,
    compose_content,
    make_document_id,
)

__all__ = [
    "EXCLUDED_INTENTS",
    "build_documents",
    "category_for",
    "compose_content",
    "make_document_id",
]
