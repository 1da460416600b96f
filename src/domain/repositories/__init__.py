"""Repository interfaces."""

from .region_repository import RegionRepository
from .crop_repository import CropRepository
from .temperature_repository import TemperatureRepository

__all__ = [
    "RegionRepository",
    "CropRepository",
    "TemperatureRepository",
]
