"""Use case for resolving a region name to its region."""

import logging
from typing import Optional
from ..entities.region import Region
from ..repositories.region_repository import RegionRepository

logger = logging.getLogger(__name__)


class ResolveRegionUseCase:
    """Use case to look up a governorate by name."""

    def __init__(self, repository: RegionRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for region lookup
        """
        self.repository = repository

    def execute(self, name: Optional[str]) -> Optional[Region]:
        """
        Execute the use case.

        Args:
            name: Region name as selected by the user

        Returns:
            The Region, or None if the name is empty or unknown
        """
        if not name:
            logger.warning("No region selected")
            return None

        region = self.repository.get_region(name.strip())
        if region is None:
            logger.warning(f"Unknown region: {name}")
        return region
