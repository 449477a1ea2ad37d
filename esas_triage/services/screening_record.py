"""Screening record formatting.

Reshapes a screening result and patient identity into the nested record the
storage layer keeps. Per-item severity text comes from the same band table
the risk classifier uses, so a record can't label an answer differently from
the triage decision it sits next to.
"""

from typing import Any, Mapping

from esas_triage.knowledge.base import KnowledgeBase, get_knowledge_base
from esas_triage.rules.engine import ScreeningResult
from esas_triage.schemas.screening import (
    ESASData,
    KnowledgeBaseStamp,
    PatientIdentity,
    QuestionScore,
    Recommendation,
    ScreeningRecord,
    ScreeningType,
)
from esas_triage.scoring.esas import get_esas_item
from esas_triage.scoring.risk import get_score_level

# Alternate identity field names sent by older intake forms
LEGACY_IDENTITY_FIELDS = {
    "patient_name": "name",
    "patient_age": "age",
    "patient_gender": "gender",
}


def identity_from_payload(payload: Mapping[str, Any] | None) -> PatientIdentity:
    """Build a canonical identity from a loosely-shaped payload.

    Canonical names win over their legacy aliases when both are present.
    """
    if not payload:
        return PatientIdentity()

    data = {
        field_name: payload.get(field_name)
        for field_name in PatientIdentity.model_fields
    }
    for legacy, canonical in LEGACY_IDENTITY_FIELDS.items():
        if data.get(canonical) in (None, "") and payload.get(legacy) not in (None, ""):
            data[canonical] = payload[legacy]

    return PatientIdentity(**data)


def annotate_scores(all_scores: Mapping[int, int]) -> dict[str, QuestionScore]:
    """Attach the item label and severity tier to every answer."""
    questions: dict[str, QuestionScore] = {}
    for symptom_id in sorted(all_scores):
        score = all_scores[symptom_id]
        questions[str(symptom_id)] = QuestionScore(
            score=score,
            text=get_esas_item(symptom_id).text,
            description=get_score_level(score).level.lower(),
        )
    return questions


def format_screening_record(
    result: ScreeningResult,
    identity: PatientIdentity | None = None,
    screening_type: ScreeningType | str = ScreeningType.INITIAL,
    knowledge_base: KnowledgeBase | None = None,
) -> ScreeningRecord:
    """Format a screening result for storage.

    Args:
        result: Output of the screening engine
        identity: Patient identity (empty if omitted)
        screening_type: "initial" or "follow_up"
        knowledge_base: Tables used for frequency lookup and the audit stamp

    Returns:
        ScreeningRecord ready to be persisted by the caller
    """
    kb = knowledge_base or get_knowledge_base()

    return ScreeningRecord(
        esas_data=ESASData(
            identity=identity or PatientIdentity(),
            questions=annotate_scores(result.all_scores),
        ),
        highest_score=result.highest_score,
        primary_question=result.primary_symptom_id,
        risk_level=result.risk_level.value,
        recommendation=Recommendation(
            diagnosis=result.diagnosis,
            intervention_steps=list(result.intervention_steps),
            references=list(result.references),
            action_required=result.action_required,
            priority=result.priority_level,
            therapy_type=result.therapy_type,
            frequency=kb.frequency(result.therapy_type, result.risk_level),
        ),
        screening_type=ScreeningType(screening_type),
        knowledge_base=KnowledgeBaseStamp(
            id=kb.document_id,
            version=kb.version,
            hash=kb.document_hash,
        ),
    )
