"""Region repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.region import Region


class RegionRepository(ABC):
    """Abstract repository for region (governorate) lookup."""

    @abstractmethod
    def list_regions(self) -> List[Region]:
        """
        Retrieve all regions.

        Returns:
            List of Region entities in definition order
        """
        pass

    @abstractmethod
    def get_region(self, name: str) -> Optional[Region]:
        """
        Retrieve a region by name.

        Args:
            name: Region name

        Returns:
            The Region, or None if no region has this name
        """
        pass
