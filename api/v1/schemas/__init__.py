"""Re-export individual schema modules for easy imports."""

from .profile import ProfileIn
from .fitness import BmiOut, MacroSplitOut, MetricsOut, RecommendationOut, WaterIntakeOut
from .advice import AdviceOut, AdviceRequest

__all__ = [
    "ProfileIn",
    "BmiOut",
    "MacroSplitOut",
    "MetricsOut",
    "RecommendationOut",
    "WaterIntakeOut",
    "AdviceOut",
    "AdviceRequest",
]
