"""Deterministic ESAS screening engine.

Triage decisions are rule based and explainable - no AI/ML is used.
"""

from esas_triage.rules.engine import (
    ScreeningResult,
    assemble_result,
    process_esas_screening,
)

__all__ = [
    "ScreeningResult",
    "assemble_result",
    "process_esas_screening",
]
