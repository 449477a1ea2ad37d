"""Read-only diagnosis, intervention and frequency tables.

The tables are built once from a versioned YAML document and never mutate:
entries are frozen dataclasses holding tuples, and the lookup maps are
exposed through ``MappingProxyType``. Any number of concurrent screenings
can read them without coordination.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from esas_triage.core.config import settings
from esas_triage.knowledge.loader import KnowledgeBaseError, load_document
from esas_triage.scoring.esas import SYMPTOM_IDS
from esas_triage.scoring.risk import RiskLevel

logger = logging.getLogger(__name__)

DEFAULT_FREQUENCY_KEY = "default"


@dataclass(frozen=True)
class KnowledgeEntry:
    """Authored clinical content for one ESAS symptom."""

    diagnosis: str
    therapy_type: str
    intervention_steps: tuple[str, ...]
    references: tuple[str, ...]


def _mapping_section(document: dict[str, Any], name: str) -> Mapping[Any, Any]:
    """Return a top-level section, which must be a mapping when present."""
    section = document.get(name) or {}
    if not isinstance(section, Mapping):
        raise KnowledgeBaseError(
            f"Knowledge base section {name!r} must be a mapping, "
            f"got {type(section).__name__}"
        )
    return section


class KnowledgeBase:
    """Lookup tables keyed by symptom id and therapy type."""

    def __init__(
        self,
        entries: Mapping[int, KnowledgeEntry],
        frequencies: Mapping[str, Mapping[str, str]],
        version: str = "unknown",
        document_id: str = "unknown",
        description: str = "",
        document_hash: str = "",
    ) -> None:
        for therapy, levels in frequencies.items():
            if not isinstance(levels, Mapping):
                raise KnowledgeBaseError(
                    f"Frequency row for {therapy!r} must be a mapping of risk levels"
                )

        self._entries = MappingProxyType(dict(entries))
        self._frequencies = MappingProxyType(
            {
                therapy: MappingProxyType(dict(levels))
                for therapy, levels in frequencies.items()
            }
        )
        self.version = version
        self.document_id = document_id
        self.description = description
        self.document_hash = document_hash

        self._check_complete()

    @classmethod
    def from_document(
        cls, document: dict[str, Any], document_hash: str = ""
    ) -> "KnowledgeBase":
        """Build tables from a parsed knowledge base document.

        Raises:
            KnowledgeBaseError: If a section or symptom entry is malformed
        """
        symptoms = _mapping_section(document, "symptoms")
        frequencies = _mapping_section(document, "frequencies")

        entries: dict[int, KnowledgeEntry] = {}

        for raw_id, raw_entry in symptoms.items():
            try:
                symptom_id = int(raw_id)
                entries[symptom_id] = KnowledgeEntry(
                    diagnosis=str(raw_entry["diagnosis"]),
                    therapy_type=str(raw_entry["therapy_type"]),
                    intervention_steps=tuple(raw_entry.get("intervention_steps") or ()),
                    references=tuple(raw_entry.get("references") or ()),
                )
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise KnowledgeBaseError(
                    f"Malformed knowledge base entry for symptom {raw_id!r}: {e}"
                ) from e

        return cls(
            entries=entries,
            frequencies=frequencies,
            version=str(document.get("version", "unknown")),
            document_id=str(document.get("id", "unknown")),
            description=str(document.get("description", "")),
            document_hash=document_hash,
        )

    def _check_complete(self) -> None:
        missing = [i for i in SYMPTOM_IDS if i not in self._entries]
        if missing:
            raise KnowledgeBaseError(
                f"Knowledge base has no entry for symptom(s) {missing}"
            )

        default = self._frequencies.get(DEFAULT_FREQUENCY_KEY)
        if default is None:
            raise KnowledgeBaseError("Knowledge base has no default frequency row")

        missing_levels = [lvl.value for lvl in RiskLevel if lvl.value not in default]
        if missing_levels:
            raise KnowledgeBaseError(
                f"Default frequency row is missing level(s) {missing_levels}"
            )

    def entry(self, symptom_id: int) -> KnowledgeEntry:
        """Get the knowledge entry for a symptom id.

        Raises:
            KeyError: If the symptom id is not an ESAS item
        """
        try:
            return self._entries[symptom_id]
        except KeyError:
            raise KeyError(f"No knowledge base entry for symptom {symptom_id}") from None

    def diagnosis(self, symptom_id: int) -> str:
        """Get the nursing diagnosis label for a symptom id."""
        return self.entry(symptom_id).diagnosis

    def intervention(self, symptom_id: int) -> KnowledgeEntry:
        """Get the intervention protocol for a symptom id."""
        return self.entry(symptom_id)

    def frequency(self, therapy_type: str, risk_level: RiskLevel | str) -> str:
        """Get the recommended frequency for a therapy at a risk level.

        Therapy types without their own row (or without that level) use the
        default row.
        """
        level = RiskLevel(risk_level).value
        row = self._frequencies.get(therapy_type)
        if row is not None and level in row:
            return row[level]
        return self._frequencies[DEFAULT_FREQUENCY_KEY][level]

    @property
    def frequencies(self) -> Mapping[str, Mapping[str, str]]:
        return self._frequencies

    def info(self) -> dict[str, str]:
        """Get metadata about the loaded document."""
        return {
            "id": self.document_id,
            "version": self.version,
            "description": self.description,
            "hash": self.document_hash,
        }


def load_knowledge_base(
    filename: str | None = None,
    data_dir: Path | None = None,
) -> KnowledgeBase:
    """Load and validate a knowledge base document.

    Args:
        filename: Document filename (defaults to settings)
        data_dir: Directory containing documents (defaults to settings, then
                  the packaged data directory)
    """
    filename = filename or settings.knowledge_base_file
    data_dir = data_dir or settings.knowledge_base_dir

    document, document_hash = load_document(filename, data_dir)
    knowledge_base = KnowledgeBase.from_document(document, document_hash)

    logger.info(
        f"Loaded knowledge base {knowledge_base.document_id} "
        f"v{knowledge_base.version} (hash={document_hash[:12]})"
    )
    return knowledge_base


@lru_cache
def get_knowledge_base() -> KnowledgeBase:
    """Get the process-wide knowledge base, loading it on first use."""
    return load_knowledge_base()
