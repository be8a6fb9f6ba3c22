"""
core/advice.py – prompt building and the Gemini fallbacks.
"""
import dataclasses
import math
from datetime import date

import pytest

from core import advice
from core.advice import AdviceKind, build_prompt, build_user_profile, get_advice
from core.enums import ActivityLevel, FitnessGoal, Gender
from core.fitness_calc import Profile
from services import gemini

FULL = Profile(
    height_cm=180,
    weight_kg=80,
    birth_date=date(1994, 5, 1),
    gender=Gender.MALE,
    activity_level=ActivityLevel.VERY_ACTIVE,
    fitness_goal=FitnessGoal.BUILD_MUSCLE,
)


def test_profile_block_full():
    text = build_user_profile(FULL, today=date(2024, 5, 1))
    assert text.startswith("User Profile:\n")
    assert "- Age: 30 years" in text
    assert "- Gender: MALE" in text
    assert "- Height: 180 cm" in text
    assert "- Activity Level: Very Active (Hard exercise 6-7 days/week)" in text
    assert "- Fitness Goal: Build Muscle" in text
    assert "- BMI: 24.7 (Normal)" in text
    assert "- Health Status: Maintain current healthy weight range" in text
    assert "- Drink at least 2800 ml of water daily" in text


def test_profile_block_missing_values():
    text = build_user_profile(Profile(weight_kg=70))
    assert "- Age: Not specified" in text
    assert "- Height: Not specified" in text
    assert "- Weight: 70 kg" in text
    assert "BMI" not in text
    assert "- Activity Level: Not specified" in text
    assert "Health Status" not in text


@pytest.mark.parametrize("height", [-180, 0, math.inf])
def test_profile_block_skips_bmi_for_unusable_height(height):
    text = build_user_profile(dataclasses.replace(FULL, height_cm=height))
    assert "BMI" not in text
    assert "Priorities" not in text


def test_profile_block_without_targets_when_age_is_invalid():
    text = build_user_profile(dataclasses.replace(FULL, age=-1))
    assert "- BMI: 24.7 (Normal)" in text
    assert "Health Status" not in text


def test_prompt_wraps_request():
    p = build_prompt(AdviceKind.NUTRITION_ADVICE, FULL, "high protein snacks?")
    assert p.startswith("As a nutrition AI assistant")
    assert "User's specific question: high protein snacks?" in p
    assert "User Profile:" in p


@pytest.mark.parametrize("kind", list(AdviceKind))
def test_canned_answer_without_key(monkeypatch, kind):
    monkeypatch.setattr(gemini, "is_configured", lambda: False)
    res = get_advice(kind, FULL, "anything")
    assert res.success
    assert res.type is kind
    assert res.response


def test_gemini_text_is_returned(monkeypatch):
    seen = {}

    def fake_generate(prompt, **_):
        seen["prompt"] = prompt
        return "Do squats."

    monkeypatch.setattr(gemini, "is_configured", lambda: True)
    monkeypatch.setattr(gemini, "generate", fake_generate)
    res = get_advice(AdviceKind.GENERAL_ADVICE, FULL, "how often?")
    assert res.success and res.response == "Do squats."
    assert "User's question: how often?" in seen["prompt"]


def test_gemini_failure_falls_back(monkeypatch):
    def boom(prompt, **_):
        raise RuntimeError("quota")

    monkeypatch.setattr(gemini, "is_configured", lambda: True)
    monkeypatch.setattr(gemini, "generate", boom)
    res = get_advice(AdviceKind.WORKOUT_PLAN, FULL, "plan")
    assert res.success is False
    assert res.response == advice.FALLBACK_MESSAGE


def test_generate_without_key_raises(monkeypatch):
    monkeypatch.setattr(gemini.settings, "gemini_api_key", None)
    gemini._client.cache_clear()
    with pytest.raises(gemini.GeminiNotConfigured):
        gemini.generate("hello")
