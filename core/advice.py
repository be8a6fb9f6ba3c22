"""
core/advice.py
────────────────────────────────────────────────────────────────────────
Free-text fitness advice.  The user's profile is rendered into a short
text block, wrapped in a kind-specific instruction and sent to Gemini.
Without an API key a canned answer per kind is returned instead.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from core.enums import ACTIVITY_DESCRIPTION, ACTIVITY_DISPLAY_NAME, GOAL_DISPLAY_NAME
from core.errors import InvalidArgument
from core.fitness_calc import Profile, calculator
from services import gemini

_LOG = logging.getLogger(__name__)


class AdviceKind(str, Enum):
    WORKOUT_PLAN = "WORKOUT_PLAN"
    NUTRITION_ADVICE = "NUTRITION_ADVICE"
    GENERAL_ADVICE = "GENERAL_ADVICE"


@dataclass(frozen=True)
class AdviceResponse:
    type: AdviceKind
    response: str
    success: bool = True


FALLBACK_MESSAGE = (
    "Sorry, I'm unable to provide recommendations at the moment. "
    "Please try again later."
)

_INSTRUCTIONS = {
    AdviceKind.WORKOUT_PLAN: (
        "As a fitness AI assistant, provide a personalized workout recommendation "
        "based on the following user profile:\n{profile}\n\n"
        "User's specific request: {prompt}\n\n"
        "Provide a detailed workout plan with exercises, sets, reps, and estimated duration."
    ),
    AdviceKind.NUTRITION_ADVICE: (
        "As a nutrition AI assistant, provide personalized nutrition advice "
        "based on the following user profile:\n{profile}\n\n"
        "User's specific question: {prompt}\n\n"
        "Provide detailed nutritional guidance, meal suggestions, and calorie recommendations."
    ),
    AdviceKind.GENERAL_ADVICE: (
        "As a general fitness AI assistant, provide helpful advice "
        "based on the following user profile:\n{profile}\n\n"
        "User's question: {prompt}\n\n"
        "Provide practical, motivational, and safe fitness advice."
    ),
}

_CANNED = {
    AdviceKind.WORKOUT_PLAN: (
        "Based on your profile, here's a personalized workout plan:\n\n"
        "**Day 1: Upper Body Strength**\n"
        "- Push-ups: 3 sets of 10-15 reps\n"
        "- Dumbbell rows: 3 sets of 10-12 reps\n"
        "- Shoulder press: 3 sets of 8-10 reps\n"
        "- Planks: 3 sets of 30-60 seconds\n\n"
        "**Day 2: Cardio**\n"
        "- 30 minutes of moderate-intensity cardio\n"
        "- Options: brisk walking, cycling, or swimming\n\n"
        "**Day 3: Lower Body Strength**\n"
        "- Squats: 3 sets of 12-15 reps\n"
        "- Lunges: 3 sets of 10 per leg\n"
        "- Calf raises: 3 sets of 15-20 reps\n"
        "- Glute bridges: 3 sets of 12-15 reps\n\n"
        "Remember to warm up before exercising and cool down afterward!"
    ),
    AdviceKind.NUTRITION_ADVICE: (
        "Based on your fitness goals, here's personalized nutrition advice:\n\n"
        "**Daily Nutrition Guidelines:**\n"
        "- Protein: 1.2-1.6g per kg of body weight\n"
        "- Carbs: 45-65% of total calories\n"
        "- Fats: 20-35% of total calories\n"
        "- Water: At least 8-10 glasses per day\n\n"
        "**Meal Suggestions:**\n"
        "- Breakfast: Oatmeal with berries and nuts\n"
        "- Lunch: Grilled chicken salad with quinoa\n"
        "- Dinner: Baked salmon with vegetables\n"
        "- Snacks: Greek yogurt, fruits, or nuts\n\n"
        "**Tips:**\n"
        "- Eat protein within 30 minutes after workouts\n"
        "- Include colorful vegetables in every meal\n"
        "- Avoid processed foods and excessive sugar"
    ),
    AdviceKind.GENERAL_ADVICE: (
        "Here's some general fitness advice tailored to your profile:\n\n"
        "**Key Tips for Success:**\n"
        "1. **Consistency is key** - Aim for 150 minutes of moderate exercise per week\n"
        "2. **Listen to your body** - Rest when you need it\n"
        "3. **Set realistic goals** - Start small and gradually increase intensity\n"
        "4. **Stay hydrated** - Drink water before, during, and after workouts\n"
        "5. **Get adequate sleep** - 7-9 hours for optimal recovery\n\n"
        "Remember: Fitness is a journey, not a destination. Be patient with yourself!"
    ),
}


def _positive_finite(value) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def build_user_profile(profile: Profile, today: date | None = None) -> str:
    def _or_missing(value, unit: str = "") -> str:
        if value is None:
            return "Not specified"
        if hasattr(value, "value"):
            value = value.value
        return f"{value}{unit}"

    activity, goal = profile.activity_level, profile.fitness_goal
    activity_text = (
        f"{ACTIVITY_DISPLAY_NAME[activity]} ({ACTIVITY_DESCRIPTION[activity]})"
        if activity is not None else "Not specified"
    )
    goal_text = GOAL_DISPLAY_NAME[goal] if goal is not None else "Not specified"

    lines = [
        "User Profile:",
        f"- Age: {_or_missing(profile.age_on(today), ' years')}",
        f"- Gender: {_or_missing(profile.gender)}",
        f"- Height: {_or_missing(profile.height_cm, ' cm')}",
        f"- Weight: {_or_missing(profile.weight_kg, ' kg')}",
        f"- Activity Level: {activity_text}",
        f"- Fitness Goal: {goal_text}",
    ]
    if not (_positive_finite(profile.height_cm) and _positive_finite(profile.weight_kg)):
        return "\n".join(lines) + "\n"

    bmi = calculator.calculate_bmi(profile.height_cm, profile.weight_kg)
    lines.append(f"- BMI: {bmi:.1f} ({calculator.bmi_category(bmi).value})")

    if profile.is_complete:
        try:
            rec = calculator.generate_recommendation(profile, today)
        except InvalidArgument as exc:
            _LOG.debug("profile block without derived targets: %s", exc)
        else:
            lines.append(f"- Health Status: {rec.health_status()}")
            lines.append("Priorities:")
            lines.extend(f"- {item}" for item in rec.priority_recommendations())
    return "\n".join(lines) + "\n"


def build_prompt(
    kind: AdviceKind, profile: Profile, prompt: str, today: date | None = None
) -> str:
    return _INSTRUCTIONS[kind].format(
        profile=build_user_profile(profile, today), prompt=prompt
    )


def get_advice(kind: AdviceKind, profile: Profile, prompt: str) -> AdviceResponse:
    if not gemini.is_configured():
        _LOG.warning("GEMINI_API_KEY missing – returning canned %s", kind.value)
        return AdviceResponse(type=kind, response=_CANNED[kind])

    full_prompt = build_prompt(kind, profile, prompt)
    try:
        text = gemini.generate(full_prompt)
    except Exception as exc:  # noqa: BLE001
        _LOG.error("advice generation failed for %s: %s", kind.value, exc)
        return AdviceResponse(type=kind, response=FALLBACK_MESSAGE, success=False)
    return AdviceResponse(type=kind, response=text)
