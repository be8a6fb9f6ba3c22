# api/v1/ai.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from core.advice import AdviceKind, get_advice
from api.v1.schemas import AdviceOut, AdviceRequest

router = APIRouter()

_KINDS = {
    "workout-recommendation": AdviceKind.WORKOUT_PLAN,
    "nutrition-advice": AdviceKind.NUTRITION_ADVICE,
    "general-advice": AdviceKind.GENERAL_ADVICE,
}


@router.post("/{kind}", response_model=AdviceOut, summary="Ask the fitness assistant")
async def advice(kind: str, body: AdviceRequest) -> AdviceOut:
    advice_kind = _KINDS.get(kind)
    if advice_kind is None:
        raise HTTPException(status_code=404, detail=f"Unknown advice type: {kind}")

    # Gemini client is synchronous
    res = await run_in_threadpool(
        get_advice, advice_kind, body.profile.to_profile(), body.prompt
    )
    return AdviceOut(type=res.type, response=res.response, success=res.success)
