# api/v1/fitness.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Query, status

from core.fitness_calc import calculator
from api.v1.schemas import (
    BmiOut,
    MetricsOut,
    ProfileIn,
    RecommendationOut,
    WaterIntakeOut,
)

router = APIRouter()
_LOG = logging.getLogger(__name__)


# ───────────────────────── standalone calculators ──────────────────────────
@router.get("/bmi", response_model=BmiOut, summary="Calculate BMI")
def calculate_bmi(
    height: float = Query(..., description="height in cm"),
    weight: float = Query(..., description="weight in kg"),
) -> BmiOut:
    bmi = calculator.calculate_bmi(height, weight)
    return BmiOut(bmi=bmi, category=calculator.bmi_category(bmi))


@router.get(
    "/water-intake",
    response_model=WaterIntakeOut,
    summary="Calculate daily water intake",
)
def calculate_water_intake(
    weight: float = Query(..., description="weight in kg"),
) -> WaterIntakeOut:
    return WaterIntakeOut(daily_intake_ml=calculator.calculate_water_intake_ml(weight))


# ───────────────────────── profile based ───────────────────────────────────
@router.post(
    "/recommendations",
    response_model=RecommendationOut,
    status_code=status.HTTP_200_OK,
    summary="Personalised fitness recommendation for a complete profile",
)
def recommendations(body: ProfileIn) -> RecommendationOut:
    rec = calculator.generate_recommendation(body.to_profile())
    _LOG.info("recommendation generated: bmi=%.1f (%s)", rec.bmi, rec.bmi_category.value)
    return RecommendationOut.model_validate(rec.to_dict())


@router.post(
    "/metrics",
    response_model=MetricsOut,
    summary="BMR, daily / target calories and BMI for a complete profile",
)
def metrics(body: ProfileIn) -> MetricsOut:
    return MetricsOut.model_validate(calculator.calculate_metrics(body.to_profile()).to_dict())
