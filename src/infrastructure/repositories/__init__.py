"""Concrete repository implementations."""

from .static_region_repository import StaticRegionRepository
from .static_crop_repository import StaticCropRepository
from .static_temperature_repository import StaticTemperatureRepository
from .csv_temperature_repository import CsvTemperatureRepository

__all__ = [
    "StaticRegionRepository",
    "StaticCropRepository",
    "StaticTemperatureRepository",
    "CsvTemperatureRepository",
]
