"""Crop repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.crop import Crop


class CropRepository(ABC):
    """Abstract repository for crop definitions."""

    @abstractmethod
    def list_crops(self) -> List[Crop]:
        """
        Retrieve all crops.

        Returns:
            List of Crop entities in definition order
        """
        pass

    @abstractmethod
    def get_crop(self, crop_id: str) -> Optional[Crop]:
        """
        Retrieve a crop by id.

        Args:
            crop_id: Crop identifier

        Returns:
            The Crop, or None if no crop has this id
        """
        pass
