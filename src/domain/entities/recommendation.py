"""Recommendation entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from .evaluation_result import EvaluationResult


@dataclass(frozen=True)
class Recommendation:
    """Ranked crop matches for a zone and month."""

    zone: Optional[str]
    month: int
    region_temperature: Optional[float]  # None when the zone is unknown
    matches: Tuple[EvaluationResult, ...] = field(default_factory=tuple)

    @property
    def has_matches(self) -> bool:
        return bool(self.matches)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zone": self.zone,
            "month": self.month,
            "region_temperature": self.region_temperature,
            "matches": [m.to_dict() for m in self.matches],
        }
