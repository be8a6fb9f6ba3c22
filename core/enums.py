"""
core/enums.py
────────────────────────────────────────────────────────────────────────
Categorical profile inputs and the constant tables attached to them.

The enums are plain tags; every per-member constant lives in a dict keyed
by the member so the calculator can dispatch with a lookup.
"""

from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"
    PREFER_NOT_TO_SAY = "PREFER_NOT_TO_SAY"


class ActivityLevel(str, Enum):
    SEDENTARY = "SEDENTARY"
    LIGHTLY_ACTIVE = "LIGHTLY_ACTIVE"
    MODERATELY_ACTIVE = "MODERATELY_ACTIVE"
    VERY_ACTIVE = "VERY_ACTIVE"
    EXTREMELY_ACTIVE = "EXTREMELY_ACTIVE"


class FitnessGoal(str, Enum):
    LOSE_WEIGHT = "LOSE_WEIGHT"
    GAIN_WEIGHT = "GAIN_WEIGHT"
    MAINTAIN_WEIGHT = "MAINTAIN_WEIGHT"
    BUILD_MUSCLE = "BUILD_MUSCLE"
    IMPROVE_ENDURANCE = "IMPROVE_ENDURANCE"
    GENERAL_FITNESS = "GENERAL_FITNESS"


class BMICategory(str, Enum):
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


# ──────────────────────────────────────────────────────────────────────
#  Activity level tables
# ──────────────────────────────────────────────────────────────────────
ACTIVITY_MULTIPLIER: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

ACTIVITY_DISPLAY_NAME: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHTLY_ACTIVE: "Lightly Active",
    ActivityLevel.MODERATELY_ACTIVE: "Moderately Active",
    ActivityLevel.VERY_ACTIVE: "Very Active",
    ActivityLevel.EXTREMELY_ACTIVE: "Extremely Active",
}

ACTIVITY_DESCRIPTION: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Little or no exercise",
    ActivityLevel.LIGHTLY_ACTIVE: "Light exercise 1-3 days/week",
    ActivityLevel.MODERATELY_ACTIVE: "Moderate exercise 3-5 days/week",
    ActivityLevel.VERY_ACTIVE: "Hard exercise 6-7 days/week",
    ActivityLevel.EXTREMELY_ACTIVE: "Very hard exercise, physical job",
}

# sessions per week
WORKOUT_FREQUENCY: dict[ActivityLevel, int] = {
    ActivityLevel.SEDENTARY: 2,
    ActivityLevel.LIGHTLY_ACTIVE: 3,
    ActivityLevel.MODERATELY_ACTIVE: 4,
    ActivityLevel.VERY_ACTIVE: 5,
    ActivityLevel.EXTREMELY_ACTIVE: 6,
}

WORKOUT_RECOMMENDATIONS: dict[ActivityLevel, tuple[str, ...]] = {
    ActivityLevel.SEDENTARY: (
        "Start with 10-15 minutes of light walking daily",
        "Add basic bodyweight exercises 2-3 times per week",
        "Focus on building consistency before intensity",
    ),
    ActivityLevel.LIGHTLY_ACTIVE: (
        "Increase to 30 minutes of moderate exercise most days",
        "Add strength training 2 times per week",
        "Try activities like swimming, cycling, or dancing",
    ),
    ActivityLevel.MODERATELY_ACTIVE: (
        "Maintain current activity levels",
        "Add variety with different types of workouts",
        "Consider increasing intensity gradually",
    ),
    ActivityLevel.VERY_ACTIVE: (
        "Focus on specific fitness goals",
        "Incorporate both cardio and strength training",
        "Monitor for overtraining and ensure adequate recovery",
    ),
    ActivityLevel.EXTREMELY_ACTIVE: (
        "Periodize training to prevent burnout",
        "Focus on recovery and nutrition optimization",
        "Consider working with a trainer for advanced programming",
    ),
}


# ──────────────────────────────────────────────────────────────────────
#  Fitness goal tables
# ──────────────────────────────────────────────────────────────────────
# kcal/day added to maintenance
CALORIE_DELTA: dict[FitnessGoal, int] = {
    FitnessGoal.LOSE_WEIGHT: -500,
    FitnessGoal.GAIN_WEIGHT: 500,
    FitnessGoal.MAINTAIN_WEIGHT: 0,
    FitnessGoal.BUILD_MUSCLE: 300,
    FitnessGoal.IMPROVE_ENDURANCE: -200,
    FitnessGoal.GENERAL_FITNESS: -100,
}

# (protein, carbs, fat) share of total calories
MACRO_RATIOS: dict[FitnessGoal, tuple[float, float, float]] = {
    FitnessGoal.LOSE_WEIGHT: (0.35, 0.35, 0.30),
    FitnessGoal.GAIN_WEIGHT: (0.25, 0.50, 0.25),
    FitnessGoal.MAINTAIN_WEIGHT: (0.25, 0.45, 0.30),
    FitnessGoal.BUILD_MUSCLE: (0.30, 0.40, 0.30),
    FitnessGoal.IMPROVE_ENDURANCE: (0.20, 0.60, 0.20),
    FitnessGoal.GENERAL_FITNESS: (0.25, 0.45, 0.30),
}

GOAL_DISPLAY_NAME: dict[FitnessGoal, str] = {
    FitnessGoal.LOSE_WEIGHT: "Lose Weight",
    FitnessGoal.GAIN_WEIGHT: "Gain Weight",
    FitnessGoal.MAINTAIN_WEIGHT: "Maintain Weight",
    FitnessGoal.BUILD_MUSCLE: "Build Muscle",
    FitnessGoal.IMPROVE_ENDURANCE: "Improve Endurance",
    FitnessGoal.GENERAL_FITNESS: "General Fitness",
}

GOAL_FOCUS: dict[FitnessGoal, tuple[str, ...]] = {
    FitnessGoal.LOSE_WEIGHT: ("cardio", "strength"),
    FitnessGoal.GAIN_WEIGHT: ("strength", "protein"),
    FitnessGoal.MAINTAIN_WEIGHT: ("balanced", "consistency"),
    FitnessGoal.BUILD_MUSCLE: ("strength", "protein", "progressive_overload"),
    FitnessGoal.IMPROVE_ENDURANCE: ("cardio", "interval_training"),
    FitnessGoal.GENERAL_FITNESS: ("balanced", "variety", "consistency"),
}


def requires_calorie_surplus(goal: FitnessGoal) -> bool:
    return CALORIE_DELTA[goal] > 0


def requires_calorie_deficit(goal: FitnessGoal) -> bool:
    return CALORIE_DELTA[goal] < 0


# ──────────────────────────────────────────────────────────────────────
#  BMI category advice
# ──────────────────────────────────────────────────────────────────────
HEALTH_STATUS: dict[BMICategory, str] = {
    BMICategory.UNDERWEIGHT: "Consider consulting a healthcare provider about healthy weight gain",
    BMICategory.NORMAL: "Maintain current healthy weight range",
    BMICategory.OVERWEIGHT: "Consider moderate calorie reduction and increased activity",
    BMICategory.OBESE: "Consult healthcare provider for comprehensive weight management plan",
}
