"""Evaluation result entity."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of checking one crop against a zone and month."""

    crop_id: str
    name: str
    score: int
    temperature_matched: bool
    month_matched: bool
    ideal_range_display: str  # e.g., '17–24'
    region_temperature: Optional[float]
    water_need: str
    soils_display: str  # e.g., 'clay, loam'

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.crop_id}_{self.score}"
