"""
core/fitness_calc.py
────────────────────────────────────────────────────────────────────────
Derived fitness metrics for a biometric profile:

1. BMI + WHO category
2. Daily water intake (35 ml / kg)
3. BMR  (Mifflin–St Jeor)
4. Daily calorie needs (activity multiplier) and goal-adjusted target
5. Macro split in grams for the goal's protein/carbs/fat ratios
6. The composite FitnessRecommendation

Every method is a pure function of its arguments; `FitnessCalculator`
holds no state, so one shared instance is safe across requests.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from core.enums import (
    ACTIVITY_MULTIPLIER,
    CALORIE_DELTA,
    GOAL_DISPLAY_NAME,
    GOAL_FOCUS,
    HEALTH_STATUS,
    MACRO_RATIOS,
    WORKOUT_FREQUENCY,
    WORKOUT_RECOMMENDATIONS,
    ActivityLevel,
    BMICategory,
    FitnessGoal,
    Gender,
)
from core.errors import IncompleteProfile, InvalidArgument, MissingData

_LOG = logging.getLogger(__name__)

WATER_ML_PER_KG = 35
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9
CALORIE_TOLERANCE = 0.05  # ±5 % counts as on target


# ──────────────────────────────────────────────────────────────────────
#  Profile
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Profile:
    height_cm: float | None = None
    weight_kg: float | None = None
    age: int | None = None
    birth_date: date | None = None   # used when age is not given
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
    fitness_goal: FitnessGoal | None = None

    def age_on(self, today: date | None = None) -> int | None:
        if self.age is not None:
            return self.age
        if self.birth_date is None:
            return None
        return _full_years(self.birth_date, today or date.today())

    def missing_fields(self) -> list[str]:
        missing = []
        for name in ("height_cm", "weight_kg"):
            if getattr(self, name) is None:
                missing.append(name)
        if self.age is None and self.birth_date is None:
            missing.append("age")
        for name in ("gender", "activity_level", "fitness_goal"):
            if getattr(self, name) is None:
                missing.append(name)
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


def _full_years(born: date, today: date) -> int:
    years = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        years -= 1
    return years


# ──────────────────────────────────────────────────────────────────────
#  Value objects
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class MacroSplit:
    """Daily macronutrient targets in grams."""

    protein: float
    carbs: float
    fat: float

    def calories(self) -> float:
        return (
            self.protein * KCAL_PER_G_PROTEIN
            + self.carbs * KCAL_PER_G_CARBS
            + self.fat * KCAL_PER_G_FAT
        )

    def to_dict(self) -> dict[str, float]:
        return {"protein": self.protein, "carbs": self.carbs, "fat": self.fat}


@dataclass(frozen=True)
class FitnessMetrics:
    bmr: float
    daily_calories: float
    target_calories: float
    bmi: float

    def to_dict(self) -> dict[str, float]:
        return {
            "bmr": self.bmr,
            "dailyCalories": self.daily_calories,
            "targetCalories": self.target_calories,
            "bmi": self.bmi,
        }


@dataclass(frozen=True)
class FitnessRecommendation:
    bmr: float
    daily_calorie_needs: float
    bmi: float
    bmi_category: BMICategory
    daily_water_intake_ml: float
    macro_split: MacroSplit
    workout_recommendations: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("bmr", "daily_calorie_needs", "bmi", "daily_water_intake_ml"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise InvalidArgument(f"{name} must be positive, got {value}")
        # freeze whatever sequence the caller handed in
        object.__setattr__(
            self, "workout_recommendations", tuple(self.workout_recommendations)
        )

    # -------------------------------- derived advice ----------------
    def needs_calorie_adjustment(self, current_intake: float) -> bool:
        tolerance = self.daily_calorie_needs * CALORIE_TOLERANCE
        return abs(current_intake - self.daily_calorie_needs) > tolerance

    def health_status(self) -> str:
        return HEALTH_STATUS[self.bmi_category]

    def priority_recommendations(self) -> list[str]:
        return [
            f"Aim for {self.daily_calorie_needs:.0f} calories daily",
            f"Drink at least {self.daily_water_intake_ml:.0f} ml of water daily",
            f"Your BMI is {self.bmi:.1f} ({self.bmi_category.value})",
            "Follow the personalized workout plan",
        ]

    def to_dict(self) -> dict[str, Any]:
        """Wire shape used by the HTTP layer and the batch script."""
        return {
            "basalMetabolicRate": self.bmr,
            "dailyCalorieNeeds": self.daily_calorie_needs,
            "bodyMassIndex": self.bmi,
            "bmiCategory": self.bmi_category.value,
            "dailyWaterIntake": self.daily_water_intake_ml,
            "macroSplit": self.macro_split.to_dict(),
            "workoutRecommendations": list(self.workout_recommendations),
        }


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class FitnessCalculator:
    """Source-of-truth for BMR, calories, BMI, water and macros."""

    # --------------- BMI / water ------------------------------------
    def calculate_bmi(self, height_cm: float, weight_kg: float) -> float:
        _require(height_cm=height_cm, weight_kg=weight_kg)
        _positive(height_cm=height_cm, weight_kg=weight_kg)
        height_m = height_cm / 100
        return weight_kg / (height_m * height_m)

    def bmi_category(self, bmi: float) -> BMICategory:
        if bmi < 18.5:
            return BMICategory.UNDERWEIGHT
        if bmi < 25:
            return BMICategory.NORMAL
        if bmi < 30:
            return BMICategory.OVERWEIGHT
        return BMICategory.OBESE

    def calculate_water_intake_ml(self, weight_kg: float) -> float:
        _require(weight_kg=weight_kg)
        _positive(weight_kg=weight_kg)
        return weight_kg * WATER_ML_PER_KG

    # --------------- BMR / calories ---------------------------------
    def calculate_bmr(
        self, gender: Gender, weight_kg: float, height_cm: float, age: int
    ) -> float:
        _require(gender=gender, weight_kg=weight_kg, height_cm=height_cm, age=age)
        _positive(height_cm=height_cm, weight_kg=weight_kg)
        if age < 0:
            raise InvalidArgument(f"Age must not be negative, got {age}")

        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        male, female = base + 5, base - 161
        if gender == Gender.MALE:
            return male
        if gender == Gender.FEMALE:
            return female
        return (male + female) / 2   # OTHER / PREFER_NOT_TO_SAY

    def calculate_daily_calorie_needs(
        self, bmr: float, activity_level: ActivityLevel
    ) -> float:
        _require(bmr=bmr, activity_level=activity_level)
        return bmr * ACTIVITY_MULTIPLIER[activity_level]

    def calculate_target_calories(
        self, daily_calorie_needs: float, fitness_goal: FitnessGoal
    ) -> float:
        _require(daily_calorie_needs=daily_calorie_needs, fitness_goal=fitness_goal)
        return daily_calorie_needs + CALORIE_DELTA[fitness_goal]

    # --------------- Macros -----------------------------------------
    def calculate_macro_split(
        self, total_calories: float, fitness_goal: FitnessGoal
    ) -> MacroSplit:
        _require(total_calories=total_calories, fitness_goal=fitness_goal)
        if not (math.isfinite(total_calories) and total_calories >= 0):
            raise InvalidArgument(f"Total calories must be a finite non-negative number, got {total_calories}")

        protein_pc, carbs_pc, fat_pc = MACRO_RATIOS[fitness_goal]
        validate_ratios(protein_pc, carbs_pc, fat_pc)

        return MacroSplit(
            protein=total_calories * protein_pc / KCAL_PER_G_PROTEIN,
            carbs=total_calories * carbs_pc / KCAL_PER_G_CARBS,
            fat=total_calories * fat_pc / KCAL_PER_G_FAT,
        )

    def workout_recommendations(
        self, activity_level: ActivityLevel, fitness_goal: FitnessGoal
    ) -> tuple[str, ...]:
        focus = ", ".join(f.replace("_", " ") for f in GOAL_FOCUS[fitness_goal])
        return WORKOUT_RECOMMENDATIONS[activity_level] + (
            f"For your goal ({GOAL_DISPLAY_NAME[fitness_goal]}), emphasise: {focus}",
            f"Aim for {WORKOUT_FREQUENCY[activity_level]} workout sessions per week",
        )

    # --------------- Composite --------------------------------------
    def calculate_metrics(
        self, profile: Profile, today: date | None = None
    ) -> FitnessMetrics:
        _require_complete(profile)
        bmr = self._profile_bmr(profile, today)
        daily = self.calculate_daily_calorie_needs(bmr, profile.activity_level)
        return FitnessMetrics(
            bmr=bmr,
            daily_calories=daily,
            target_calories=self.calculate_target_calories(daily, profile.fitness_goal),
            bmi=self.calculate_bmi(profile.height_cm, profile.weight_kg),
        )

    def generate_recommendation(
        self, profile: Profile, today: date | None = None
    ) -> FitnessRecommendation:
        _require_complete(profile)

        bmr = self._profile_bmr(profile, today)
        daily = self.calculate_daily_calorie_needs(bmr, profile.activity_level)
        target = self.calculate_target_calories(daily, profile.fitness_goal)
        bmi = self.calculate_bmi(profile.height_cm, profile.weight_kg)

        rec = FitnessRecommendation(
            bmr=bmr,
            daily_calorie_needs=daily,
            bmi=bmi,
            bmi_category=self.bmi_category(bmi),
            daily_water_intake_ml=self.calculate_water_intake_ml(profile.weight_kg),
            macro_split=self.calculate_macro_split(target, profile.fitness_goal),
            workout_recommendations=self.workout_recommendations(
                profile.activity_level, profile.fitness_goal
            ),
        )
        _LOG.debug(
            "recommendation: bmr=%.1f daily=%.1f target=%.1f bmi=%.1f",
            bmr, daily, target, bmi,
        )
        return rec

    def _profile_bmr(self, profile: Profile, today: date | None) -> float:
        return self.calculate_bmr(
            profile.gender,
            profile.weight_kg,
            profile.height_cm,
            profile.age_on(today),
        )


# ──────────────────────────────────────────────────────────────────────
#  Helpers
# ──────────────────────────────────────────────────────────────────────
def validate_ratios(protein: float, carbs: float, fat: float) -> None:
    total = protein + carbs + fat
    if not math.isclose(total, 1.0, rel_tol=0, abs_tol=1e-9):
        raise InvalidArgument(f"Macro percentages must sum to 1.0, got {total}")


def _require(**values: Any) -> None:
    missing = [name for name, v in values.items() if v is None]
    if missing:
        raise MissingData(missing)


def _positive(**values: float) -> None:
    for name, v in values.items():
        if not (math.isfinite(v) and v > 0):
            raise InvalidArgument(f"{name} must be a positive finite number, got {v}")


def _require_complete(profile: Profile) -> None:
    missing = profile.missing_fields()
    if missing:
        _LOG.warning("incomplete profile, missing %s", missing)
        raise IncompleteProfile(missing)


calculator = FitnessCalculator()
