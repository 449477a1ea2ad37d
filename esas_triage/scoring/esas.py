"""ESAS (Edmonton Symptom Assessment System) scoring module.

The ESAS is a 9-item patient-reported symptom severity questionnaire.
Each item is scored 0-10:
- 0 = No symptom
- 10 = Worst possible

Unlike summed instruments, triage is driven by the single highest item.
When several items share the highest score, a fixed clinical urgency order
picks the primary symptom:

    6 (breathing) > 1 (pain) > 4 (nausea) > 5 (appetite) > 3 (sleep)
    > 2 (fatigue) > 8 (anxiety) > 7 (sadness) > 9 (overall wellbeing)
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

MIN_ITEM_SCORE = 0
MAX_ITEM_SCORE = 10

SYMPTOM_IDS: tuple[int, ...] = tuple(range(1, 10))


@dataclass(frozen=True)
class ESASItem:
    """One ESAS questionnaire item."""

    number: int
    text: str
    description: str


ESAS_ITEMS: tuple[ESASItem, ...] = (
    ESASItem(1, "Nyeri", "Keluhan nyeri yang dialami saat ini"),
    ESASItem(2, "Lelah/Kekurangan Tenaga", "Keluhan lelah atau kekurangan tenaga"),
    ESASItem(3, "Kantuk/Gangguan Tidur", "Rasa kantuk atau sulit menahan kantuk"),
    ESASItem(4, "Mual/Nausea", "Keluhan mual atau rasa ingin muntah"),
    ESASItem(5, "Nafsu Makan", "Penurunan nafsu makan"),
    ESASItem(6, "Sesak/Pola Napas", "Keluhan sesak saat bernapas"),
    ESASItem(7, "Sedih/Keputusasaan", "Perasaan sedih, murung, atau kehilangan semangat"),
    ESASItem(8, "Cemas/Ansietas", "Perasaan cemas atau khawatir"),
    ESASItem(9, "Perasaan Keseluruhan", "Perasaan keseluruhan saat ini"),
)

_ITEMS_BY_NUMBER = {item.number: item for item in ESAS_ITEMS}

# Descending clinical urgency, consulted only to break ties
PRIORITY_ORDER: tuple[int, ...] = (
    6,  # Sesak/Pola Napas
    1,  # Nyeri
    4,  # Mual/Nausea
    5,  # Nafsu Makan
    3,  # Kantuk/Gangguan Tidur
    2,  # Lelah/Kekurangan Tenaga
    8,  # Cemas/Ansietas
    7,  # Sedih/Keputusasaan
    9,  # Perasaan Keseluruhan
)

# symptom id -> 1-based priority rank
PRIORITY_RANK: dict[int, int] = {
    symptom_id: rank for rank, symptom_id in enumerate(PRIORITY_ORDER, start=1)
}


class ValidationErrorCode(str, Enum):
    """Kinds of ESAS answer violations."""

    MISSING_FIELD = "missing_field"
    NON_NUMERIC = "non_numeric"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class ValidationIssue:
    """A single invalid ESAS item."""

    item: int
    code: ValidationErrorCode
    message: str


@dataclass
class ESASValidation:
    """Outcome of validating a set of ESAS answers."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> list[str]:
        return [issue.message for issue in self.issues]


class ESASValidationError(ValueError):
    """Raised when ESAS answers fail validation.

    Carries every violation, not just the first one.
    """

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = list(issues)
        super().__init__(f"Invalid ESAS data: {', '.join(self.errors)}")

    @property
    def errors(self) -> list[str]:
        return [issue.message for issue in self.issues]


@dataclass(frozen=True)
class ScoreAggregate:
    """Highest item score and every item that reached it."""

    highest_score: int
    tied_ids: frozenset[int]


_MISSING = object()


def _lookup_answer(answers: Mapping[Any, Any], item: int) -> Any:
    """Find the answer for ``item`` under any of the accepted key formats."""
    key_formats = [
        str(item),
        item,
        f"item{item}",
        f"q{item}",
        f"esas_{item}",
    ]
    for key in key_formats:
        if key in answers:
            return answers[key]
    return _MISSING


def _check_item(item: int, value: Any) -> ValidationIssue | None:
    if value is _MISSING:
        return ValidationIssue(
            item, ValidationErrorCode.MISSING_FIELD, f"item {item} is missing"
        )

    # bool is an int subclass but not an answer
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ValidationIssue(
            item, ValidationErrorCode.NON_NUMERIC, f"item {item} must be a number"
        )

    if isinstance(value, float):
        if math.isnan(value):
            return ValidationIssue(
                item, ValidationErrorCode.NON_NUMERIC, f"item {item} must be a number"
            )
        if math.isfinite(value) and not value.is_integer():
            return ValidationIssue(
                item,
                ValidationErrorCode.NON_NUMERIC,
                f"item {item} must be a whole number",
            )

    if value < MIN_ITEM_SCORE or value > MAX_ITEM_SCORE:
        return ValidationIssue(
            item,
            ValidationErrorCode.OUT_OF_RANGE,
            f"item {item} must be between {MIN_ITEM_SCORE} and {MAX_ITEM_SCORE}",
        )

    return None


def validate_esas(answers: Mapping[Any, Any]) -> ESASValidation:
    """Validate ESAS answers, collecting every violation.

    Args:
        answers: Dictionary with keys "1" through "9" (or "item1", "q1",
                 "esas_1", or int keys), values 0-10. Other keys are ignored.

    Returns:
        ESASValidation listing one issue per invalid item. Never raises.
    """
    validation = ESASValidation()

    for item in SYMPTOM_IDS:
        issue = _check_item(item, _lookup_answer(answers, item))
        if issue is not None:
            validation.issues.append(issue)

    return validation


def normalize_assessment(
    answers: Mapping[Any, Any],
    validation: ESASValidation | None = None,
) -> dict[int, int]:
    """Convert validated answers into an ``{symptom_id: score}`` assessment.

    Args:
        answers: Raw answers, in any accepted key format
        validation: Result of validate_esas for these answers, if the caller
                    already has one

    Raises:
        ESASValidationError: If the answers are not valid.
    """
    if validation is None:
        validation = validate_esas(answers)
    if not validation.is_valid:
        raise ESASValidationError(validation.issues)

    return {item: int(_lookup_answer(answers, item)) for item in SYMPTOM_IDS}


def aggregate_scores(assessment: Mapping[int, int]) -> ScoreAggregate:
    """Find the highest item score and all items tied at it.

    Raises:
        ValueError: If the assessment is empty.
    """
    if not assessment:
        raise ValueError("Cannot aggregate an empty ESAS assessment")

    highest_score = max(assessment.values())
    tied_ids = frozenset(
        symptom_id
        for symptom_id, score in assessment.items()
        if score == highest_score
    )

    return ScoreAggregate(highest_score=highest_score, tied_ids=tied_ids)


def get_priority_level(symptom_id: int) -> int:
    """Return the 1-based urgency rank of a symptom (1 = most urgent)."""
    try:
        return PRIORITY_RANK[symptom_id]
    except KeyError:
        raise ValueError(f"Unknown ESAS symptom id: {symptom_id}") from None


def resolve_primary_symptom(tied_ids: frozenset[int] | set[int] | list[int]) -> int:
    """Pick the primary symptom among items tied at the highest score.

    A single candidate wins outright. Otherwise the candidate ranked most
    urgent in PRIORITY_ORDER wins, whatever order the candidates come in.

    Raises:
        ValueError: If there are no candidates or one is not an ESAS item.
    """
    candidates = set(tied_ids)
    if not candidates:
        raise ValueError("Cannot resolve a primary symptom from no candidates")

    if len(candidates) == 1:
        only = next(iter(candidates))
        if only not in PRIORITY_RANK:
            raise ValueError(f"Unknown ESAS symptom id: {only}")
        return only

    return min(candidates, key=get_priority_level)


def get_esas_item(symptom_id: int) -> ESASItem:
    """Return the questionnaire item for a symptom id."""
    try:
        return _ITEMS_BY_NUMBER[symptom_id]
    except KeyError:
        raise ValueError(f"Unknown ESAS symptom id: {symptom_id}") from None
