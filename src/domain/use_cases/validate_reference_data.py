"""Use case for cross-checking the reference tables."""

import logging
from typing import List
from ..repositories.crop_repository import CropRepository
from ..repositories.region_repository import RegionRepository
from ..repositories.temperature_repository import TemperatureRepository

logger = logging.getLogger(__name__)


class ValidateReferenceDataUseCase:
    """Use case to find inconsistencies between regions, crops and temperatures."""

    def __init__(
        self,
        region_repository: RegionRepository,
        crop_repository: CropRepository,
        temperature_repository: TemperatureRepository,
    ):
        self.region_repository = region_repository
        self.crop_repository = crop_repository
        self.temperature_repository = temperature_repository

    def execute(self) -> List[str]:
        """
        Execute validation.

        Returns:
            List of human-readable issues (empty if the data is consistent)
        """
        issues = []
        zones = self.temperature_repository.list_zones()

        for region in self.region_repository.list_regions():
            if region.zone not in zones:
                issues.append(
                    f"Region '{region.name}' uses zone '{region.zone}' "
                    f"which has no temperature profile"
                )

        all_temps = [
            t
            for zone in zones
            for t in self.temperature_repository.get_profile(zone).temperatures
        ]
        for crop in self.crop_repository.list_crops():
            if not crop.planting_months:
                issues.append(f"Crop '{crop.id}' has an empty planting window")
            if all_temps and not any(crop.accepts_temperature(t) for t in all_temps):
                issues.append(
                    f"Crop '{crop.id}' range {crop.ideal_range_display} matches "
                    f"no zone temperature and can never be recommended"
                )

        logger.info(f"Reference data validation found {len(issues)} issues")
        return issues
