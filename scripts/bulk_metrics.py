"""
scripts/bulk_metrics.py
────────────────────────────────────────────────────────────────────────
Compute fitness recommendations for a CSV of profiles:

    python -m scripts.bulk_metrics profiles.csv -o metrics.csv

Expected columns: height_cm, weight_kg, age, gender, activity_level,
fitness_goal (enum member names, case-insensitive).  Rows that are
incomplete or invalid get an `error` value instead of metrics.
"""
from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import Any, Dict

from dotenv import load_dotenv
load_dotenv()

import pandas as pd

from core.enums import ActivityLevel, FitnessGoal, Gender
from core.errors import FitnessCalcError, InvalidArgument
from core.fitness_calc import FitnessCalculator, Profile, calculator

_LOG = logging.getLogger(__name__)

INPUT_COLUMNS = [
    "height_cm", "weight_kg", "age", "gender", "activity_level", "fitness_goal",
]
OUTPUT_COLUMNS = [
    "bmr", "daily_calorie_needs", "bmi", "bmi_category", "daily_water_intake_ml",
    "protein_g", "carbs_g", "fat_g", "error",
]


def _cell(row: pd.Series, col: str) -> Any:
    val = row.get(col)
    return None if val is None or pd.isna(val) else val


def _number(row: pd.Series, col: str) -> float | None:
    raw = _cell(row, col)
    if raw is None:
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{col} must be numeric, got {raw!r}") from None


def _enum(enum_cls, raw: Any):
    if raw is None:
        return None
    try:
        return enum_cls(str(raw).strip().upper())
    except ValueError:
        raise FitnessCalcError(f"unknown {enum_cls.__name__}: {raw!r}") from None


def row_to_profile(row: pd.Series) -> Profile:
    age = _number(row, "age")
    if age is not None and not age.is_integer():
        raise InvalidArgument(f"age must be a whole number, got {age}")
    return Profile(
        height_cm=_number(row, "height_cm"),
        weight_kg=_number(row, "weight_kg"),
        age=int(age) if age is not None else None,
        gender=_enum(Gender, _cell(row, "gender")),
        activity_level=_enum(ActivityLevel, _cell(row, "activity_level")),
        fitness_goal=_enum(FitnessGoal, _cell(row, "fitness_goal")),
    )


def _metrics_row(row: pd.Series, calc: FitnessCalculator) -> Dict[str, Any]:
    out: Dict[str, Any] = {c: None for c in OUTPUT_COLUMNS}
    try:
        profile = row_to_profile(row)
        rec = calc.generate_recommendation(profile)
    except FitnessCalcError as exc:
        _LOG.warning("row %s skipped: %s", row.name, exc)
        out["error"] = str(exc)
        return out

    out.update(
        bmr=rec.bmr,
        daily_calorie_needs=rec.daily_calorie_needs,
        bmi=rec.bmi,
        bmi_category=rec.bmi_category.value,
        daily_water_intake_ml=rec.daily_water_intake_ml,
        protein_g=rec.macro_split.protein,
        carbs_g=rec.macro_split.carbs,
        fat_g=rec.macro_split.fat,
    )
    return out


def compute(df: pd.DataFrame, calc: FitnessCalculator = calculator) -> pd.DataFrame:
    """Return `df` with the metric columns appended (one row per profile)."""
    for col in INPUT_COLUMNS:
        if col not in df.columns:
            df = df.assign(**{col: pd.NA})

    metrics = pd.DataFrame(
        [_metrics_row(row, calc) for _, row in df.iterrows()],
        index=df.index,
        columns=OUTPUT_COLUMNS,
    )
    failed = int(metrics["error"].notna().sum())
    _LOG.info("computed %d profiles (%d failed)", len(df), failed)
    return pd.concat([df, metrics], axis=1)


# ───────────────────────────────
# CLI entrypoint
# ───────────────────────────────
def _main(argv: list[str] | None = None) -> int:
    ap = ArgumentParser(description="Compute fitness metrics for a CSV of profiles")
    ap.add_argument("csv", help="input CSV of profiles")
    ap.add_argument("-o", "--output", help="output CSV (default: stdout)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    result = compute(pd.read_csv(args.csv))
    if args.output:
        result.to_csv(args.output, index=False)
    else:
        result.to_csv(sys.stdout, index=False)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(_main())
