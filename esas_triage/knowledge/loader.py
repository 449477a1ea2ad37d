"""YAML knowledge base loader with integrity hashing."""

import hashlib
from pathlib import Path
from typing import Any

import yaml

# Packaged knowledge base documents
KNOWLEDGE_BASE_DIR = Path(__file__).parent / "data"


class KnowledgeBaseError(Exception):
    """Knowledge base document is missing, unreadable or incomplete."""


def compute_document_hash(content: str) -> str:
    """Compute SHA256 hash of knowledge base content.

    Stamped onto screening records so a recommendation can be traced back to
    the exact tables that produced it.

    Args:
        content: Raw YAML content string

    Returns:
        SHA256 hex digest
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def load_document(
    filename: str,
    data_dir: Path | None = None,
) -> tuple[dict[str, Any], str]:
    """Load a knowledge base YAML file and compute its hash.

    Args:
        filename: Name of the document (e.g., "esas-palliative-v1.0.0.yaml")
        data_dir: Directory containing documents (defaults to packaged data)

    Returns:
        Tuple of (parsed document dict, SHA256 hash)

    Raises:
        KnowledgeBaseError: If the file doesn't exist or isn't a YAML mapping
    """
    if data_dir is None:
        data_dir = KNOWLEDGE_BASE_DIR

    filepath = data_dir / filename

    if not filepath.exists():
        raise KnowledgeBaseError(f"Knowledge base not found: {filepath}")

    content = filepath.read_text(encoding="utf-8")
    document_hash = compute_document_hash(content)

    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise KnowledgeBaseError(f"Invalid knowledge base YAML in {filepath}: {e}") from e

    if not isinstance(document, dict):
        raise KnowledgeBaseError(f"Knowledge base {filepath} must be a mapping")

    return document, document_hash


def list_documents(data_dir: Path | None = None) -> list[str]:
    """List available knowledge base documents."""
    return sorted(f.name for f in (data_dir or KNOWLEDGE_BASE_DIR).glob("*.yaml"))
