"""Monthly temperature profile entity."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class MonthlyTemperatureProfile:
    """Approximate mean temperature of a climate zone for each month."""

    zone: str
    temperatures: Tuple[float, ...]  # Celsius, index 0 = January

    def __post_init__(self):
        if len(self.temperatures) != MONTHS_PER_YEAR:
            raise ValueError(
                f"Zone '{self.zone}' needs {MONTHS_PER_YEAR} monthly temperatures, "
                f"got {len(self.temperatures)}"
            )

    @classmethod
    def from_sequence(cls, zone: str, values: Sequence[float]) -> "MonthlyTemperatureProfile":
        """Create profile from a Jan..Dec sequence."""
        return cls(zone=zone, temperatures=tuple(values))

    def for_month(self, month: int) -> Optional[float]:
        """Mean temperature for a 1-based month, or None outside 1..12."""
        if not 1 <= month <= MONTHS_PER_YEAR:
            return None
        return self.temperatures[month - 1]

    def __str__(self) -> str:
        return self.zone
