"""Crop entity."""

import calendar
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Crop:
    """Represents a crop with its climate and planting preferences."""

    id: str
    name: str
    temp_min: float  # Celsius, inclusive
    temp_max: float  # Celsius, inclusive
    soils: Tuple[str, ...]
    water_need: str  # e.g., 'low', 'moderate', 'high'
    planting_months: Tuple[int, ...]  # definition order, e.g. Nov..Apr

    def __post_init__(self):
        if self.temp_min > self.temp_max:
            raise ValueError(
                f"Crop '{self.id}' has an inverted temperature range "
                f"({self.temp_min} > {self.temp_max})"
            )
        invalid = sorted(m for m in self.planting_months if not 1 <= m <= 12)
        if invalid:
            raise ValueError(f"Crop '{self.id}' has invalid planting months: {invalid}")

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "Crop":
        """Create Crop from dictionary definition."""
        temp_min, temp_max = definition["temp_range"]
        return cls(
            id=definition["id"],
            name=definition["name"],
            temp_min=temp_min,
            temp_max=temp_max,
            soils=tuple(definition.get("soils", ())),
            water_need=definition.get("water_need", ""),
            planting_months=tuple(dict.fromkeys(definition.get("planting_months", ()))),
        )

    @property
    def temp_range(self) -> Tuple[float, float]:
        """Get ideal temperature range as tuple."""
        return (self.temp_min, self.temp_max)

    @property
    def ideal_range_display(self) -> str:
        return f"{self.temp_min}–{self.temp_max}"

    @property
    def soils_display(self) -> str:
        return ", ".join(self.soils)

    @property
    def planting_month_names(self) -> List[str]:
        """Planting months as English month names, in definition order."""
        return [calendar.month_name[m] for m in self.planting_months]

    def accepts_temperature(self, temperature: float) -> bool:
        """Check if a temperature lies within the ideal range (both ends inclusive)."""
        return self.temp_min <= temperature <= self.temp_max

    def __str__(self) -> str:
        return self.name
