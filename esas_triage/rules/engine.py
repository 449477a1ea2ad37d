"""Deterministic ESAS screening engine.

Turns nine ESAS item scores into a triage decision. All decisions are:
- Deterministic (same input = same output)
- Explainable (primary symptom, priority rank and band are all reported)
- Auditable (tables come from a hashed, versioned knowledge base)

Pipeline, single pass and stateless:
    validate -> aggregate -> resolve priority -> classify -> lookup -> assemble

Invalid input stops the pipeline before any scoring step runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from esas_triage.knowledge.base import KnowledgeBase, get_knowledge_base
from esas_triage.scoring.esas import (
    ESASValidationError,
    aggregate_scores,
    get_priority_level,
    normalize_assessment,
    resolve_primary_symptom,
    validate_esas,
)
from esas_triage.scoring.risk import RiskLevel, classify_risk

logger = logging.getLogger(__name__)


@dataclass
class ScreeningResult:
    """Complete result of an ESAS screening.

    A plain record: list and dict fields are copies owned by the result, so
    callers may change them without touching the shared tables.
    """

    highest_score: int
    primary_symptom_id: int
    risk_level: RiskLevel
    action_required: str
    diagnosis: str
    therapy_type: str
    intervention_steps: list[str]
    references: list[str]
    priority_level: int
    all_scores: dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "highest_score": self.highest_score,
            "primary_symptom_id": self.primary_symptom_id,
            "risk_level": self.risk_level.value,
            "action_required": self.action_required,
            "diagnosis": self.diagnosis,
            "therapy_type": self.therapy_type,
            "intervention_steps": list(self.intervention_steps),
            "references": list(self.references),
            "priority_level": self.priority_level,
            "all_scores": {str(k): v for k, v in self.all_scores.items()},
        }


def assemble_result(
    highest_score: int,
    primary_symptom_id: int,
    risk_level: RiskLevel,
    action_required: str,
    *,
    all_scores: Mapping[int, int] | None = None,
    knowledge_base: KnowledgeBase | None = None,
) -> ScreeningResult:
    """Compose the screening result from the pipeline outputs.

    Diagnosis and intervention content come from the knowledge base entry
    for the primary symptom. List fields are fresh copies, so callers can't
    reach the shared tables through a result.
    """
    kb = knowledge_base or get_knowledge_base()
    entry = kb.intervention(primary_symptom_id)

    return ScreeningResult(
        highest_score=highest_score,
        primary_symptom_id=primary_symptom_id,
        risk_level=RiskLevel(risk_level),
        action_required=action_required,
        diagnosis=entry.diagnosis,
        therapy_type=entry.therapy_type,
        intervention_steps=list(entry.intervention_steps),
        references=list(entry.references),
        priority_level=get_priority_level(primary_symptom_id),
        all_scores=dict(all_scores or {}),
    )


def process_esas_screening(
    answers: Mapping[Any, Any],
    knowledge_base: KnowledgeBase | None = None,
) -> ScreeningResult:
    """Run a full ESAS screening.

    Args:
        answers: Item scores keyed "1" through "9", values 0-10.
                 Unrecognized keys are ignored.
        knowledge_base: Tables to use (defaults to the process-wide one)

    Returns:
        ScreeningResult for the primary symptom

    Raises:
        ESASValidationError: If any item is missing, non-numeric or out of
            range. Carries every violation; no scoring is attempted.
    """
    validation = validate_esas(answers)
    if not validation.is_valid:
        logger.warning(
            f"Rejected ESAS answers with {len(validation.issues)} error(s): "
            f"{'; '.join(validation.errors)}"
        )
        raise ESASValidationError(validation.issues)

    assessment = normalize_assessment(answers, validation)

    aggregate = aggregate_scores(assessment)
    primary_symptom_id = resolve_primary_symptom(aggregate.tied_ids)
    classification = classify_risk(aggregate.highest_score)

    result = assemble_result(
        aggregate.highest_score,
        primary_symptom_id,
        classification.risk_level,
        classification.action_required,
        all_scores=assessment,
        knowledge_base=knowledge_base,
    )

    logger.debug(
        f"ESAS screening: highest={aggregate.highest_score} "
        f"tied={sorted(aggregate.tied_ids)} primary={primary_symptom_id} "
        f"risk={result.risk_level.value}"
    )
    return result
