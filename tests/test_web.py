"""Tests for the web API."""

import pytest
from fastapi.testclient import TestClient

from fitspec.web import create_app


@pytest.fixture
def client(data_dir):
    with TestClient(create_app()) as client:
        yield client


class TestCategoryRoutes:
    """Tests for category and standards routes."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_categories(self, client):
        response = client.get("/api/categories")
        assert response.status_code == 200
        assert len(response.json()["categories"]) == 15

    def test_categories_by_type(self, client):
        response = client.get("/api/categories", params={"type": "flexibility"})
        ids = [c["id"] for c in response.json()["categories"]]
        assert ids == [11, 12, 13, 14, 15]

    def test_category(self, client):
        response = client.get("/api/categories/4")
        assert response.status_code == 200
        assert response.json()["name"] == "Barbell Squat"
        assert "thresholds" not in response.json()

    def test_category_with_thresholds(self, client):
        response = client.get(
            "/api/categories/4", params={"age": 28, "bodyweight": 70, "gender": "male"}
        )
        levels = response.json()["thresholds"]["levels"]
        assert [level["value"] for level in levels] == [52.5, 70.0, 105.0, 140.0, 175.0]

    def test_unknown_category(self, client):
        response = client.get("/api/categories/99")
        assert response.status_code == 404

    def test_standards(self, client):
        response = client.get("/api/standards", params={"age": 45, "bodyweight": 60, "gender": "female"})
        assert response.status_code == 200
        standards = {s["category_id"]: s for s in response.json()["standards"]}
        assert [level["value"] for level in standards[8]["levels"]] == [3, 10, 17, 24, 30]

    def test_standards_invalid_profile(self, client):
        response = client.get("/api/standards", params={"age": 28, "bodyweight": -5, "gender": "male"})
        assert response.status_code == 422


class TestAssessmentRoutes:
    """Tests for assessment scoring and history routes."""

    def test_assess(self, client, sample_request):
        response = client.post("/api/assessments", json=sample_request)
        assert response.status_code == 200
        body = response.json()
        assert body["summary"]["overall_level"] == "Advanced"
        assert body["results"][0]["issues"][0] == "Squat depth limited above parallel"
        assert "id" not in body

    def test_assess_invalid(self, client, sample_request):
        sample_request["measurements"].append({"category_id": 4, "value": 100})
        response = client.post("/api/assessments", json=sample_request)
        assert response.status_code == 422
        assert "more than once" in response.json()["detail"]

    @pytest.mark.parametrize(
        "field,value",
        [("height_cm", "tall"), ("injury_notes", 5), ("name", ["Minjun"])],
    )
    def test_assess_malformed_profile(self, client, sample_request, field, value):
        sample_request["profile"][field] = value
        response = client.post("/api/assessments", json=sample_request)
        assert response.status_code == 422
        assert field in response.json()["detail"]

    def test_assess_out_of_range_value(self, client, sample_request):
        sample_request["measurements"] = [{"category_id": 8, "value": 10**400}]
        response = client.post("/api/assessments", json=sample_request)
        assert response.status_code == 422
        assert "out of range" in response.json()["detail"]

    def test_assess_string_flag_value(self, client, sample_request):
        sample_request["flags"] = {"4": {"depth_limited": "false"}}
        response = client.post("/api/assessments", json=sample_request)
        assert response.status_code == 422

    def test_assess_unknown_category(self, client, sample_request):
        sample_request["measurements"] = [{"category_id": 99, "value": 1}]
        response = client.post("/api/assessments", json=sample_request)
        assert response.status_code == 422

    def test_assess_skip_invalid(self, client, sample_request):
        sample_request["measurements"].append({"category_id": 2, "value": "many"})
        response = client.post("/api/assessments", params={"skip_invalid": True}, json=sample_request)
        assert response.status_code == 200
        assert response.json()["rejected"][0]["category_id"] == 2

    def test_save_list_delete(self, client, sample_request):
        response = client.post("/api/assessments", params={"save": True}, json=sample_request)
        assert response.status_code == 200
        assessment_id = response.json()["id"]

        listed = client.get("/api/assessments", params={"member_id": "m-001"}).json()["assessments"]
        assert [a["id"] for a in listed] == [assessment_id]

        stored = client.get(f"/api/assessments/{assessment_id}").json()
        assert stored["report"]["summary"]["average_score"] == 3.5

        assert client.delete(f"/api/assessments/{assessment_id}").status_code == 200
        assert client.delete(f"/api/assessments/{assessment_id}").status_code == 404
        assert client.get("/api/assessments").json()["assessments"] == []

    def test_save_without_member(self, client, sample_request):
        del sample_request["profile"]["member_id"]
        del sample_request["profile"]["name"]
        response = client.post("/api/assessments", params={"save": True}, json=sample_request)
        assert response.status_code == 422
