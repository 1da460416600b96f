"""Domain entities."""

from .region import Region
from .crop import Crop
from .monthly_temperature import MonthlyTemperatureProfile
from .evaluation_result import EvaluationResult
from .recommendation import Recommendation

__all__ = [
    "Region",
    "Crop",
    "MonthlyTemperatureProfile",
    "EvaluationResult",
    "Recommendation",
]
