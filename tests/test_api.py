"""
HTTP layer – in-process via FastAPI's TestClient (no server needed).
"""
import math

import pytest
from fastapi.testclient import TestClient

from main import app
from services import gemini

client = TestClient(app)

PROFILE = {
    "heightCm": 180,
    "weightKg": 80,
    "age": 30,
    "gender": "MALE",
    "activityLevel": "MODERATELY_ACTIVE",
    "fitnessGoal": "LOSE_WEIGHT",
}


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


# ── standalone calculators ───────────────────────────────────────────
def test_bmi_endpoint():
    r = client.get("/api/v1/fitness/bmi", params={"height": 175, "weight": 70})
    assert r.status_code == 200
    data = r.json()
    assert math.isclose(data["bmi"], 70 / 1.75 ** 2, rel_tol=1e-9)
    assert data["category"] == "Normal"


@pytest.mark.parametrize(
    "params",
    [
        {"height": 0, "weight": 70},
        {"height": 175, "weight": 0},
        {"height": 175, "weight": "inf"},
        {"height": "inf", "weight": 70},
    ],
)
def test_bmi_endpoint_rejects_non_positive_or_infinite(params):
    r = client.get("/api/v1/fitness/bmi", params=params)
    assert r.status_code == 400
    assert r.json()["error"] == "invalid_argument"


def test_water_intake_endpoint():
    r = client.get("/api/v1/fitness/water-intake", params={"weight": 70})
    assert r.status_code == 200
    assert r.json() == {"dailyIntakeML": 2450}


@pytest.mark.parametrize("weight", [0, "inf"])
def test_water_intake_endpoint_rejects_bad_weight(weight):
    r = client.get("/api/v1/fitness/water-intake", params={"weight": weight})
    assert r.status_code == 400


# ── profile based ────────────────────────────────────────────────────
def test_recommendation_shape():
    r = client.post("/api/v1/fitness/recommendations", json=PROFILE)
    assert r.status_code == 200
    data = r.json()
    assert set(data) == {
        "basalMetabolicRate", "dailyCalorieNeeds", "bodyMassIndex", "bmiCategory",
        "dailyWaterIntake", "macroSplit", "workoutRecommendations",
    }
    assert math.isclose(data["basalMetabolicRate"], 1780)
    assert data["bmiCategory"] == "Normal"
    assert data["dailyWaterIntake"] == 2800
    assert set(data["macroSplit"]) == {"protein", "carbs", "fat"}
    assert data["workoutRecommendations"][0] == "Maintain current activity levels"


def test_recommendation_accepts_snake_case_and_birth_date():
    body = {
        "height_cm": 165,
        "weight_kg": 60,
        "birth_date": "1990-01-01",
        "gender": "FEMALE",
        "activity_level": "SEDENTARY",
        "fitness_goal": "MAINTAIN_WEIGHT",
    }
    r = client.post("/api/v1/fitness/recommendations", json=body)
    assert r.status_code == 200


def test_incomplete_profile_is_distinct_client_error():
    body = {k: v for k, v in PROFILE.items() if k != "activityLevel"}
    r = client.post("/api/v1/fitness/recommendations", json=body)
    assert r.status_code == 422
    data = r.json()
    assert data["error"] == "incomplete_profile"
    assert data["missing"] == ["activity_level"]


def test_unknown_enum_value_fails_validation():
    r = client.post("/api/v1/fitness/recommendations", json={**PROFILE, "gender": "robot"})
    assert r.status_code == 422
    assert "error" not in r.json()


def test_metrics_endpoint():
    r = client.post("/api/v1/fitness/metrics", json=PROFILE)
    assert r.status_code == 200
    data = r.json()
    assert math.isclose(data["targetCalories"], data["dailyCalories"] - 500)


# ── assistant ────────────────────────────────────────────────────────
def test_advice_without_key_returns_canned(monkeypatch):
    monkeypatch.setattr(gemini, "is_configured", lambda: False)
    r = client.post(
        "/api/v1/ai/workout-recommendation",
        json={"prompt": "3 days a week", "profile": PROFILE},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["type"] == "WORKOUT_PLAN"
    assert data["success"] is True
    assert "workout plan" in data["response"]


def test_advice_unknown_kind():
    r = client.post("/api/v1/ai/horoscope", json={"prompt": "?"})
    assert r.status_code == 404


def test_advice_with_negative_height_still_answers(monkeypatch):
    seen = {}

    def fake_generate(prompt, **_):
        seen["prompt"] = prompt
        return "Start slow."

    monkeypatch.setattr(gemini, "is_configured", lambda: True)
    monkeypatch.setattr(gemini, "generate", fake_generate)
    r = client.post(
        "/api/v1/ai/general-advice",
        json={"prompt": "where to begin?", "profile": {**PROFILE, "heightCm": -180}},
    )
    assert r.status_code == 200
    assert r.json()["response"] == "Start slow."
    assert "BMI" not in seen["prompt"]
