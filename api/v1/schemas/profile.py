from __future__ import annotations
from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.enums import ActivityLevel, FitnessGoal, Gender
from core.fitness_calc import Profile


class ProfileIn(BaseModel):
    """Biometric profile; every field optional, completeness is checked later."""

    height_cm: float | None = Field(None, examples=[180])
    weight_kg: float | None = Field(None, examples=[80])
    age: int | None = Field(None, examples=[30])
    birth_date: date | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
    fitness_goal: FitnessGoal | None = None

    # accepts heightCm as well as height_cm
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_profile(self) -> Profile:
        return Profile(**self.model_dump())
