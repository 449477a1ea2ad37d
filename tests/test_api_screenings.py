"""Tests for the screening and health endpoints."""

from fastapi.testclient import TestClient


class TestHealthEndpoints:
    """Tests for health checks."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_ready_reports_knowledge_base(self, client: TestClient) -> None:
        response = client.get("/api/v1/health/ready")

        assert response.status_code == 200
        assert response.json()["knowledge_base_version"] == "1.0.0"


class TestScreeningCatalog:
    """Tests for questionnaire metadata endpoints."""

    def test_questions(self, client: TestClient) -> None:
        response = client.get("/api/v1/screenings/questions")

        assert response.status_code == 200
        data = response.json()
        assert [item["number"] for item in data["items"]] == list(range(1, 10))
        assert data["items"][5]["text"] == "Sesak/Pola Napas"
        assert [lvl["level"] for lvl in data["score_levels"]] == [
            "Tidak ada keluhan",
            "Ringan",
            "Sedang",
            "Berat",
        ]
        assert data["min_score"] == 0
        assert data["max_score"] == 10

    def test_knowledge_base_info(self, client: TestClient) -> None:
        response = client.get("/api/v1/screenings/knowledge-base")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "esas-palliative"
        assert len(data["hash"]) == 64


class TestEvaluateScreening:
    """Tests for POST /screenings/evaluate."""

    def test_evaluate_valid_answers(self, client: TestClient, make_answers) -> None:
        response = client.post(
            "/api/v1/screenings/evaluate",
            json={
                "answers": make_answers({1: 2, 6: 2}),
                "identity": {"name": "Siti", "age": 54, "gender": "P"},
                "screening_type": "initial",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["primary_symptom_id"] == 6
        assert data["result"]["risk_level"] == "low"
        assert data["result"]["priority_level"] == 1
        assert data["record"]["esas_data"]["identity"]["name"] == "Siti"
        assert data["record"]["esas_data"]["questions"]["6"]["description"] == "ringan"
        assert data["record"]["screening_type"] == "initial"
        assert data["record"]["status"] == "completed"

    def test_legacy_identity_fields(self, client: TestClient, make_answers) -> None:
        response = client.post(
            "/api/v1/screenings/evaluate",
            json={
                "answers": make_answers({1: 9}),
                "identity": {"patient_name": "Budi", "patient_age": 61},
            },
        )

        assert response.status_code == 200
        identity = response.json()["record"]["esas_data"]["identity"]
        assert identity["name"] == "Budi"
        assert identity["age"] == 61

    def test_free_text_identity_passed_through(
        self, client: TestClient, make_answers
    ) -> None:
        """Test identity values are stored as sent, not validated."""
        response = client.post(
            "/api/v1/screenings/evaluate",
            json={
                "answers": make_answers({1: 2}),
                "identity": {"name": 12345, "age": "54 tahun"},
            },
        )

        assert response.status_code == 200
        identity = response.json()["record"]["esas_data"]["identity"]
        assert identity["name"] == 12345
        assert identity["age"] == "54 tahun"

    def test_default_screening_type(self, client: TestClient, make_answers) -> None:
        response = client.post(
            "/api/v1/screenings/evaluate",
            json={"answers": make_answers()},
        )

        assert response.status_code == 200
        assert response.json()["record"]["screening_type"] == "initial"

    def test_invalid_answers_list_every_error(
        self, client: TestClient, make_answers
    ) -> None:
        answers = make_answers({4: 11, 7: "bad"})
        del answers["2"]

        response = client.post("/api/v1/screenings/evaluate", json={"answers": answers})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["errors"] == [
            "item 2 is missing",
            "item 4 must be between 0 and 10",
            "item 7 must be a number",
        ]

    def test_invalid_screening_type(self, client: TestClient, make_answers) -> None:
        response = client.post(
            "/api/v1/screenings/evaluate",
            json={"answers": make_answers(), "screening_type": "weekly"},
        )

        assert response.status_code == 422
