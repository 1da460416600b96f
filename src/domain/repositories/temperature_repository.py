"""Temperature repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.monthly_temperature import MonthlyTemperatureProfile


class TemperatureRepository(ABC):
    """Abstract repository for monthly mean temperatures per climate zone."""

    @abstractmethod
    def list_zones(self) -> List[str]:
        """
        Retrieve the known climate zones.

        Returns:
            List of zone tags
        """
        pass

    @abstractmethod
    def get_profile(self, zone: str) -> Optional[MonthlyTemperatureProfile]:
        """
        Retrieve the monthly profile of a zone.

        Args:
            zone: Climate zone tag

        Returns:
            The profile, or None if the zone is unknown
        """
        pass

    def get_mean_temperature(self, zone: str, month: int) -> Optional[float]:
        """
        Retrieve the mean temperature of a zone for a month.

        Args:
            zone: Climate zone tag
            month: Month number (1 = January)

        Returns:
            Temperature in Celsius, or None if the zone is unknown
        """
        profile = self.get_profile(zone)
        if profile is None:
            return None
        return profile.for_month(month)
