"""Static clinical knowledge base for ESAS screening."""

from esas_triage.knowledge.base import (
    KnowledgeBase,
    KnowledgeEntry,
    get_knowledge_base,
    load_knowledge_base,
)
from esas_triage.knowledge.loader import (
    KnowledgeBaseError,
    compute_document_hash,
    load_document,
)

__all__ = [
    "KnowledgeBase",
    "KnowledgeEntry",
    "KnowledgeBaseError",
    "get_knowledge_base",
    "load_knowledge_base",
    "compute_document_hash",
    "load_document",
]
