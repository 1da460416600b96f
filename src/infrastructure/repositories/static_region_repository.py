"""In-memory region repository built from settings definitions."""

import logging
from typing import Any, Dict, List, Optional
from ...domain.entities.region import Region
from ...domain.repositories.region_repository import RegionRepository

logger = logging.getLogger(__name__)


class StaticRegionRepository(RegionRepository):
    """Repository for the fixed list of governorates."""

    def __init__(self, definitions: List[Dict[str, Any]]):
        """
        Initialize repository.

        Args:
            definitions: List of dicts with 'name' and 'zone' keys
        """
        self._regions: Dict[str, Region] = {}
        for definition in definitions:
            region = Region(name=definition["name"], zone=definition["zone"])
            if region.name in self._regions:
                raise ValueError(f"Duplicate region name: {region.name}")
            self._regions[region.name] = region

        logger.info(f"Loaded {len(self._regions)} regions")

    def list_regions(self) -> List[Region]:
        return list(self._regions.values())

    def get_region(self, name: str) -> Optional[Region]:
        return self._regions.get(name)
