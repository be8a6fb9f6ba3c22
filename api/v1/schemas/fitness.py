from __future__ import annotations
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.enums import BMICategory


class _CamelOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BmiOut(BaseModel):
    bmi: float
    category: BMICategory


class WaterIntakeOut(BaseModel):
    daily_intake_ml: float = Field(..., alias="dailyIntakeML")

    model_config = ConfigDict(populate_by_name=True)


class MacroSplitOut(BaseModel):
    protein: float
    carbs: float
    fat: float


class RecommendationOut(_CamelOut):
    basal_metabolic_rate: float
    daily_calorie_needs: float
    body_mass_index: float
    bmi_category: BMICategory
    daily_water_intake: float
    macro_split: MacroSplitOut
    workout_recommendations: List[str]


class MetricsOut(_CamelOut):
    bmr: float
    daily_calories: float
    target_calories: float
    bmi: float
