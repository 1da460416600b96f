"""Service construction shared by the CLI and the HTTP API."""

import logging
from typing import Optional

from ..application.services.crop_advisor_service import CropAdvisorService
from ..domain.repositories.temperature_repository import TemperatureRepository
from ..infrastructure.repositories.static_region_repository import StaticRegionRepository
from ..infrastructure.repositories.static_crop_repository import StaticCropRepository
from ..infrastructure.repositories.static_temperature_repository import (
    StaticTemperatureRepository,
)
from ..infrastructure.repositories.csv_temperature_repository import CsvTemperatureRepository

from config.settings import (
    REGION_DEFINITIONS,
    CROP_DEFINITIONS,
    MONTHLY_TEMPERATURES,
    TEMPERATURE_DATA_FILE,
    RECOMMENDATION_SETTINGS,
)

logger = logging.getLogger(__name__)


def build_temperature_repository(data_file: Optional[str] = None) -> TemperatureRepository:
    """
    Pick the temperature source.

    Args:
        data_file: CSV of measured means; defaults to TEMPERATURE_DATA_FILE.
            An empty value selects the placeholder table.

    Returns:
        CsvTemperatureRepository or StaticTemperatureRepository
    """
    data_file = TEMPERATURE_DATA_FILE if data_file is None else data_file
    if data_file:
        logger.info(f"Using measured temperatures from {data_file}")
        return CsvTemperatureRepository(data_file)
    return StaticTemperatureRepository(MONTHLY_TEMPERATURES)


def build_service(data_file: Optional[str] = None) -> CropAdvisorService:
    """Create the service from settings, preferring measured temperatures if configured."""
    return CropAdvisorService(
        region_repo=StaticRegionRepository(REGION_DEFINITIONS),
        crop_repo=StaticCropRepository(CROP_DEFINITIONS),
        temperature_repo=build_temperature_repository(data_file),
        recommendation_settings=RECOMMENDATION_SETTINGS,
    )
