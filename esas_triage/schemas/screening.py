"""Pydantic schemas for ESAS screening operations."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ScreeningType(str, Enum):
    """Whether a screening is the first one or a follow-up."""

    INITIAL = "initial"
    FOLLOW_UP = "follow_up"


class PatientIdentity(BaseModel):
    """Canonical patient identity attached to a screening record.

    Values are passed through as given; identity validation belongs to the
    intake form, not the screening engine.
    """

    # Any: intake forms send free text ("54 tahun") as readily as numbers
    name: Any = None
    age: Any = None
    gender: Any = Field(None, description="L (laki-laki) or P (perempuan)")
    facility_name: Any = None


# =============================================================================
# Screening Record Schemas
# =============================================================================


class QuestionScore(BaseModel):
    """One annotated ESAS answer in a screening record."""

    score: int
    text: str
    description: str = Field(..., description="Severity tier, e.g. ringan, sedang")


class ESASData(BaseModel):
    """Identity and annotated answers."""

    identity: PatientIdentity
    questions: dict[str, QuestionScore]


class Recommendation(BaseModel):
    """Recommendation bundle derived from the primary symptom."""

    diagnosis: str
    intervention_steps: list[str]
    references: list[str]
    action_required: str
    priority: int
    therapy_type: str
    frequency: str


class KnowledgeBaseStamp(BaseModel):
    """Knowledge base version that produced a recommendation."""

    id: str
    version: str
    hash: str


class ScreeningRecord(BaseModel):
    """Storage-ready screening record."""

    esas_data: ESASData
    highest_score: int
    primary_question: int
    risk_level: str
    recommendation: Recommendation
    screening_type: ScreeningType
    status: str = "completed"
    knowledge_base: KnowledgeBaseStamp | None = None


# =============================================================================
# API Schemas
# =============================================================================


class ScreeningEvaluateRequest(BaseModel):
    """Schema for evaluating ESAS answers."""

    answers: dict[str, Any] = Field(..., description="ESAS item scores keyed 1-9")
    identity: dict[str, Any] | None = Field(
        None, description="Patient identity (name/age/gender/facility_name)"
    )
    screening_type: ScreeningType | None = None


class ScreeningResultRead(BaseModel):
    """Schema for reading a screening result."""

    highest_score: int
    primary_symptom_id: int
    risk_level: str
    action_required: str
    diagnosis: str
    therapy_type: str
    intervention_steps: list[str]
    references: list[str]
    priority_level: int
    all_scores: dict[str, int]


class ScreeningEvaluateResponse(BaseModel):
    """Result of an evaluation plus the record a caller would store."""

    result: ScreeningResultRead
    record: ScreeningRecord


class ESASItemRead(BaseModel):
    """Schema for an ESAS questionnaire item."""

    number: int
    text: str
    description: str


class ScoreLevelRead(BaseModel):
    """Schema for one row of the score legend."""

    min_score: int
    max_score: int
    level: str
    description: str
    risk_level: str


class ESASQuestionsResponse(BaseModel):
    """Questionnaire items and the score legend."""

    items: list[ESASItemRead]
    score_levels: list[ScoreLevelRead]
    min_score: int
    max_score: int


class KnowledgeBaseInfo(BaseModel):
    """Metadata about the loaded knowledge base."""

    id: str
    version: str
    description: str
    hash: str
