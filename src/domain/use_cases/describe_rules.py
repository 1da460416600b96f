"""Use case for describing the crop rules in display-ready form."""

from typing import Any, Dict, List
from ..repositories.crop_repository import CropRepository


class DescribeRulesUseCase:
    """Use case to render crop reference cards and the editable rules summary."""

    def __init__(self, repository: CropRepository):
        self.repository = repository

    def crop_cards(self) -> List[Dict[str, Any]]:
        """Per-crop reference data with pre-joined display strings."""
        return [
            {
                "id": crop.id,
                "name": crop.name,
                "ideal_range_display": crop.ideal_range_display,
                "soils_display": crop.soils_display,
                "water_need": crop.water_need,
                "best_months": crop.planting_month_names,
            }
            for crop in self.repository.list_crops()
        ]

    def rules_text(self) -> str:
        """Plain-text summary of months, temperature and soils per crop."""
        lines = ["Prediction rules (editable):", ""]
        for crop in self.repository.list_crops():
            months = ", ".join(str(m) for m in crop.planting_months)
            lines.append(crop.name)
            lines.append(f" - months: {months}")
            lines.append(f" - temp: {crop.ideal_range_display} °C")
            lines.append(f" - soils: {crop.soils_display}")
            lines.append("")
        return "\n".join(lines)
