"""ESAS risk banding.

Every ESAS item is scored 0-10. The same band boundaries drive both the
triage decision (from the highest item score) and the per-item severity
label shown next to each answer:

- 0: no complaint, low risk, continue routine monitoring
- 1-3: mild, low risk, complementary intervention per diagnosis
- 4-6: moderate, medium risk, refer for further evaluation
- 7-10: severe, high risk, immediate referral

Score 0 and scores 1-3 share the ``low`` risk level but carry different
action text. Downstream display and export key off the action text, so the
two rows stay separate.
"""

from dataclasses import dataclass
from enum import Enum


class RiskLevel(str, Enum):
    """Triage risk level derived from the highest ESAS item score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


ACTION_ROUTINE_MONITORING = "Lanjutkan monitoring rutin"
ACTION_COMPLEMENTARY_INTERVENTION = (
    "Intervensi terapi komplementer sesuai diagnosa keperawatan"
)
ACTION_FURTHER_EVALUATION = (
    "Hubungi/Temukan fasilitas kesehatan terdekat untuk evaluasi lebih lanjut"
)
ACTION_IMMEDIATE_REFERRAL = (
    "Segera rujuk ke Fasilitas Kesehatan atau Profesional untuk Penanganan Segera"
)


@dataclass(frozen=True)
class ScoreBand:
    """One row of the ESAS band table."""

    low: int
    high: int
    risk_level: RiskLevel
    action_required: str
    severity_label: str
    severity_description: str

    def contains(self, score: int) -> bool:
        return self.low <= score <= self.high


SCORE_BANDS: tuple[ScoreBand, ...] = (
    ScoreBand(
        0, 0, RiskLevel.LOW, ACTION_ROUTINE_MONITORING,
        "Tidak ada keluhan",
        "Pasien tidak mengalami keluhan pada gejala ini",
    ),
    ScoreBand(
        1, 3, RiskLevel.LOW, ACTION_COMPLEMENTARY_INTERVENTION,
        "Ringan",
        "Keluhan ringan yang tidak mengganggu aktivitas sehari-hari",
    ),
    ScoreBand(
        4, 6, RiskLevel.MEDIUM, ACTION_FURTHER_EVALUATION,
        "Sedang",
        "Keluhan sedang yang mulai mengganggu aktivitas",
    ),
    ScoreBand(
        7, 10, RiskLevel.HIGH, ACTION_IMMEDIATE_REFERRAL,
        "Berat",
        "Keluhan berat yang memerlukan perhatian segera",
    ),
)

INVALID_SCORE_LABEL = "Tidak valid"
INVALID_SCORE_DESCRIPTION = "Skor tidak valid"


@dataclass(frozen=True)
class RiskClassification:
    """Risk level and the action it calls for."""

    risk_level: RiskLevel
    action_required: str


@dataclass(frozen=True)
class ScoreLevel:
    """Severity label for a single item score."""

    level: str
    description: str


def find_score_band(score: int) -> ScoreBand | None:
    """Return the band containing ``score``, or None when outside 0-10."""
    for band in SCORE_BANDS:
        if band.contains(score):
            return band
    return None


def classify_risk(highest_score: int) -> RiskClassification:
    """Map the highest ESAS item score to a risk level and action.

    Scores outside 0-10 cannot come out of a validated assessment; they fall
    back to the score-0 row.
    """
    band = find_score_band(highest_score) or SCORE_BANDS[0]
    return RiskClassification(
        risk_level=band.risk_level,
        action_required=band.action_required,
    )


def get_score_level(score: int) -> ScoreLevel:
    """Describe the severity of a single item score."""
    band = find_score_band(score)
    if band is None:
        return ScoreLevel(INVALID_SCORE_LABEL, INVALID_SCORE_DESCRIPTION)
    return ScoreLevel(band.severity_label, band.severity_description)
