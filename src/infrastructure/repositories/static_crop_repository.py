"""In-memory crop repository built from settings definitions."""

import logging
from typing import Any, Dict, List, Optional
from ...domain.entities.crop import Crop
from ...domain.repositories.crop_repository import CropRepository

logger = logging.getLogger(__name__)


class StaticCropRepository(CropRepository):
    """Repository for the fixed list of crop definitions."""

    def __init__(self, definitions: List[Dict[str, Any]]):
        """
        Initialize repository.

        Args:
            definitions: List of crop definition dicts (see config.settings)
        """
        self._crops: Dict[str, Crop] = {}
        for definition in definitions:
            crop = Crop.from_dict(definition)
            if crop.id in self._crops:
                raise ValueError(f"Duplicate crop id: {crop.id}")
            self._crops[crop.id] = crop

        logger.info(f"Loaded {len(self._crops)} crop definitions")

    def list_crops(self) -> List[Crop]:
        # dicts keep insertion order, so this is definition order
        return list(self._crops.values())

    def get_crop(self, crop_id: str) -> Optional[Crop]:
        return self._crops.get(crop_id)
