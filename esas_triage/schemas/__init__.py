"""Pydantic schemas for API request/response validation."""

from esas_triage.schemas.screening import (
    PatientIdentity,
    ScreeningRecord,
    ScreeningType,
)

__all__ = [
    "PatientIdentity",
    "ScreeningRecord",
    "ScreeningType",
]
