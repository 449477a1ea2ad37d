"""Tests for screening record formatting."""

import pytest

from esas_triage.rules.engine import process_esas_screening
from esas_triage.schemas.screening import PatientIdentity, ScreeningType
from esas_triage.services.screening_record import (
    annotate_scores,
    format_screening_record,
    identity_from_payload,
)


@pytest.fixture
def identity() -> PatientIdentity:
    return PatientIdentity(name="Siti", age=54, gender="P", facility_name="RS Harapan")


class TestFormatScreeningRecord:
    """Tests for the storage-ready record."""

    def test_sections(self, make_answers, knowledge_base, identity) -> None:
        result = process_esas_screening(make_answers({1: 9}), knowledge_base)
        record = format_screening_record(
            result, identity, ScreeningType.FOLLOW_UP, knowledge_base
        )

        assert record.esas_data.identity == identity
        assert set(record.esas_data.questions) == {str(i) for i in range(1, 10)}
        assert record.highest_score == 9
        assert record.primary_question == 1
        assert record.risk_level == "high"
        assert record.screening_type == ScreeningType.FOLLOW_UP
        assert record.status == "completed"

    def test_recommendation(self, make_answers, knowledge_base) -> None:
        result = process_esas_screening(make_answers({1: 9}), knowledge_base)
        recommendation = format_screening_record(
            result, knowledge_base=knowledge_base
        ).recommendation

        assert recommendation.diagnosis == "1. Diagnosa: Nyeri Kronis"
        assert recommendation.therapy_type == "Akupresur"
        assert recommendation.priority == 2
        assert recommendation.frequency == "4-5 kali sehari rutin"
        assert recommendation.action_required == result.action_required
        assert recommendation.intervention_steps == result.intervention_steps

    def test_default_frequency(self, make_answers, knowledge_base) -> None:
        result = process_esas_screening(make_answers({8: 5}), knowledge_base)
        record = format_screening_record(result, knowledge_base=knowledge_base)

        assert record.recommendation.frequency == "2-3 kali seminggu"

    def test_question_annotations(self, make_answers, knowledge_base) -> None:
        result = process_esas_screening(
            make_answers({1: 2, 2: 5, 3: 8}), knowledge_base
        )
        questions = format_screening_record(
            result, knowledge_base=knowledge_base
        ).esas_data.questions

        assert questions["1"].text == "Nyeri"
        assert questions["1"].description == "ringan"
        assert questions["2"].description == "sedang"
        assert questions["3"].description == "berat"
        assert questions["4"].description == "tidak ada keluhan"
        assert questions["3"].score == 8

    def test_knowledge_base_stamp(self, make_answers, knowledge_base) -> None:
        result = process_esas_screening(make_answers(), knowledge_base)
        stamp = format_screening_record(result, knowledge_base=knowledge_base).knowledge_base

        assert stamp.version == knowledge_base.version
        assert stamp.hash == knowledge_base.document_hash

    def test_screening_type_from_string(self, make_answers, knowledge_base) -> None:
        result = process_esas_screening(make_answers(), knowledge_base)
        record = format_screening_record(
            result, screening_type="follow_up", knowledge_base=knowledge_base
        )

        assert record.screening_type == ScreeningType.FOLLOW_UP
        assert record.model_dump(mode="json")["screening_type"] == "follow_up"

    def test_identity_defaults_to_empty(self, make_answers, knowledge_base) -> None:
        result = process_esas_screening(make_answers(), knowledge_base)
        record = format_screening_record(result, knowledge_base=knowledge_base)

        assert record.esas_data.identity.name is None


class TestAnnotateScores:
    """Tests for per-item severity text."""

    @pytest.mark.parametrize(
        "score,description",
        [(0, "tidak ada keluhan"), (3, "ringan"), (4, "sedang"), (7, "berat")],
    )
    def test_band_boundaries(self, score, description) -> None:
        annotated = annotate_scores({5: score})

        assert annotated["5"].description == description
        assert annotated["5"].text == "Nafsu Makan"


class TestIdentityFromPayload:
    """Tests for the legacy identity field shim."""

    def test_canonical_fields(self) -> None:
        identity = identity_from_payload(
            {"name": "Budi", "age": 60, "gender": "L", "facility_name": "Puskesmas"}
        )

        assert identity == PatientIdentity(
            name="Budi", age=60, gender="L", facility_name="Puskesmas"
        )

    def test_legacy_fields(self) -> None:
        identity = identity_from_payload(
            {"patient_name": "Budi", "patient_age": 60, "patient_gender": "L"}
        )

        assert identity.name == "Budi"
        assert identity.age == 60
        assert identity.gender == "L"
        assert identity.facility_name is None

    def test_canonical_wins_over_legacy(self) -> None:
        identity = identity_from_payload({"name": "Budi", "patient_name": "Other"})

        assert identity.name == "Budi"

    def test_free_text_values_kept(self) -> None:
        """Test non-numeric ages and numeric names pass through unchanged."""
        identity = identity_from_payload({"patient_age": "enam puluh", "name": 7})

        assert identity.age == "enam puluh"
        assert identity.name == 7

    def test_empty_payload(self) -> None:
        assert identity_from_payload(None) == PatientIdentity()
        assert identity_from_payload({}) == PatientIdentity()
