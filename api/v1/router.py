# api/v1/router.py
from fastapi import APIRouter

from . import ai, fitness

api_router = APIRouter()

api_router.include_router(fitness.router, prefix="/fitness", tags=["Fitness"])
api_router.include_router(ai.router, prefix="/ai", tags=["AI Assistant"])
