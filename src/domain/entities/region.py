"""Region entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """Represents a governorate and the climate zone it belongs to."""

    name: str
    zone: str  # e.g., 'Delta', 'Upper', 'Sinai'

    def __str__(self) -> str:
        return self.name
