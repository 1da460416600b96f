"""In-memory temperature repository built from the placeholder table."""

import logging
from typing import Dict, List, Optional, Sequence
from ...domain.entities.monthly_temperature import MonthlyTemperatureProfile
from ...domain.repositories.temperature_repository import TemperatureRepository

logger = logging.getLogger(__name__)


class StaticTemperatureRepository(TemperatureRepository):
    """Repository for approximate monthly means defined in settings."""

    def __init__(self, table: Dict[str, Sequence[float]]):
        """
        Initialize repository.

        Args:
            table: Mapping from zone to 12 monthly means (Jan..Dec)
        """
        self._profiles = {
            zone: MonthlyTemperatureProfile.from_sequence(zone, values)
            for zone, values in table.items()
        }
        logger.info(f"Loaded temperature profiles for {len(self._profiles)} zones")

    def list_zones(self) -> List[str]:
        return list(self._profiles.keys())

    def get_profile(self, zone: str) -> Optional[MonthlyTemperatureProfile]:
        return self._profiles.get(zone)
