"""Scoring modules for the ESAS instrument."""

from esas_triage.scoring.esas import (
    ESAS_ITEMS,
    PRIORITY_ORDER,
    ESASValidation,
    ESASValidationError,
    ScoreAggregate,
    ValidationErrorCode,
    ValidationIssue,
    aggregate_scores,
    get_priority_level,
    normalize_assessment,
    resolve_primary_symptom,
    validate_esas,
)
from esas_triage.scoring.risk import (
    SCORE_BANDS,
    RiskClassification,
    RiskLevel,
    classify_risk,
    get_score_level,
)

__all__ = [
    "ESAS_ITEMS",
    "PRIORITY_ORDER",
    "ESASValidation",
    "ESASValidationError",
    "ScoreAggregate",
    "ValidationErrorCode",
    "ValidationIssue",
    "aggregate_scores",
    "get_priority_level",
    "normalize_assessment",
    "resolve_primary_symptom",
    "validate_esas",
    "SCORE_BANDS",
    "RiskClassification",
    "RiskLevel",
    "classify_risk",
    "get_score_level",
]
