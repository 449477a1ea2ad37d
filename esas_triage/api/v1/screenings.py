"""ESAS screening endpoints.

Stateless: answers in, triage result and storage-ready record out. Storing
the record is the caller's job.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from esas_triage.core.config import settings
from esas_triage.core.logging import screening_audit_logger
from esas_triage.knowledge import get_knowledge_base
from esas_triage.rules.engine import process_esas_screening
from esas_triage.schemas.screening import (
    ESASItemRead,
    ESASQuestionsResponse,
    KnowledgeBaseInfo,
    ScoreLevelRead,
    ScreeningEvaluateRequest,
    ScreeningEvaluateResponse,
    ScreeningResultRead,
)
from esas_triage.scoring.esas import (
    ESAS_ITEMS,
    MAX_ITEM_SCORE,
    MIN_ITEM_SCORE,
    ESASValidationError,
)
from esas_triage.scoring.risk import SCORE_BANDS
from esas_triage.services.screening_record import (
    format_screening_record,
    identity_from_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/screenings", tags=["screenings"])


@router.get("/questions", response_model=ESASQuestionsResponse)
async def get_questions() -> ESASQuestionsResponse:
    """Get the nine ESAS items and the score legend."""
    return ESASQuestionsResponse(
        items=[
            ESASItemRead(number=item.number, text=item.text, description=item.description)
            for item in ESAS_ITEMS
        ],
        score_levels=[
            ScoreLevelRead(
                min_score=band.low,
                max_score=band.high,
                level=band.severity_label,
                description=band.severity_description,
                risk_level=band.risk_level.value,
            )
            for band in SCORE_BANDS
        ],
        min_score=MIN_ITEM_SCORE,
        max_score=MAX_ITEM_SCORE,
    )


@router.get("/knowledge-base", response_model=KnowledgeBaseInfo)
async def get_knowledge_base_info() -> KnowledgeBaseInfo:
    """Get metadata about the loaded knowledge base."""
    return KnowledgeBaseInfo(**get_knowledge_base().info())


@router.post(
    "/evaluate",
    response_model=ScreeningEvaluateResponse,
    status_code=status.HTTP_200_OK,
)
async def evaluate_screening(
    request: ScreeningEvaluateRequest,
) -> ScreeningEvaluateResponse:
    """Evaluate ESAS answers.

    Returns the triage result and the record to store. Invalid answers are
    rejected with every violation listed; nothing is scored.
    """
    try:
        result = process_esas_screening(request.answers)
    except ESASValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "Invalid ESAS data", "errors": e.errors},
        ) from e

    screening_type = request.screening_type or settings.default_screening_type
    knowledge_base = get_knowledge_base()
    record = format_screening_record(
        result,
        identity=identity_from_payload(request.identity),
        screening_type=screening_type,
        knowledge_base=knowledge_base,
    )

    screening_audit_logger.log(
        screening_type=record.screening_type.value,
        primary_symptom_id=result.primary_symptom_id,
        highest_score=result.highest_score,
        risk_level=result.risk_level.value,
        knowledge_base_version=knowledge_base.version,
        knowledge_base_hash=knowledge_base.document_hash,
    )

    return ScreeningEvaluateResponse(
        result=ScreeningResultRead(**result.to_dict()),
        record=record,
    )
