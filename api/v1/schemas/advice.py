from __future__ import annotations

from pydantic import BaseModel, Field

from core.advice import AdviceKind
from .profile import ProfileIn


class AdviceRequest(BaseModel):
    prompt: str = Field(..., examples=["3-day plan, no gym equipment"])
    profile: ProfileIn = Field(default_factory=ProfileIn)


class AdviceOut(BaseModel):
    type: AdviceKind
    response: str
    success: bool
