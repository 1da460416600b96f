"""Main service orchestrating the crop recommendation workflow."""

import calendar
import logging
from typing import Any, Dict, List, Optional

from ...domain.repositories.crop_repository import CropRepository
from ...domain.repositories.region_repository import RegionRepository
from ...domain.repositories.temperature_repository import TemperatureRepository

# Use cases
from ...domain.use_cases.evaluate_crops import EvaluateCropsUseCase, validate_month
from ...domain.use_cases.resolve_region import ResolveRegionUseCase
from ...domain.use_cases.validate_reference_data import ValidateReferenceDataUseCase
from ...domain.use_cases.describe_rules import DescribeRulesUseCase

logger = logging.getLogger(__name__)

NO_MATCH_ADVICE = (
    "No strong match found. Consider soil test and local irrigation before planting."
)
RULE_BASED_NOTE = (
    "This is a rule-based recommendation. Replace sample temps with measured "
    "values for higher accuracy."
)


class CropAdvisorService:
    """Orchestrates region lookup, crop evaluation and rule descriptions."""

    def __init__(
        self,
        region_repo: RegionRepository,
        crop_repo: CropRepository,
        temperature_repo: TemperatureRepository,
        recommendation_settings: Optional[Dict[str, int]] = None,
    ):
        self.region_repo = region_repo
        self.crop_repo = crop_repo
        self.temperature_repo = temperature_repo

        settings = recommendation_settings or {}

        # Use cases
        self.resolve_region_uc = ResolveRegionUseCase(region_repo)
        self.evaluate_uc = EvaluateCropsUseCase(
            crop_repo,
            temperature_repo,
            month_weight=settings.get("month_weight", 1),
            temperature_weight=settings.get("temperature_weight", 2),
            min_score=settings.get("min_score", 2),
        )
        self.describe_rules_uc = DescribeRulesUseCase(crop_repo)
        self.validate_uc = ValidateReferenceDataUseCase(region_repo, crop_repo, temperature_repo)

        for issue in self.validate_uc.execute():
            logger.warning(f"Reference data: {issue}")

    def recommend(self, region_name: str, month: int) -> Dict[str, Any]:
        """
        Recommend crops for a governorate and month.

        Args:
            region_name: Governorate name
            month: Month number (1 = January)

        Returns:
            Dict with region, zone, month, temperature, ranked matches and advice.
            An unknown region gives known_region=False and no matches.

        Raises:
            ValueError: If month is outside 1..12
        """
        validate_month(month)

        region = self.resolve_region_uc.execute(region_name)
        if region is None:
            return {
                "region": region_name,
                "known_region": False,
                "zone": None,
                "month": month,
                "month_name": calendar.month_name[month],
                "region_temperature": None,
                "matches": [],
                "advice": NO_MATCH_ADVICE,
            }

        recommendation = self.evaluate_uc.execute(region.zone, month)

        return {
            "region": region.name,
            "known_region": True,
            "zone": region.zone,
            "month": month,
            "month_name": calendar.month_name[month],
            "region_temperature": recommendation.region_temperature,
            "matches": [m.to_dict() for m in recommendation.matches],
            "advice": RULE_BASED_NOTE if recommendation.has_matches else NO_MATCH_ADVICE,
        }

    def list_regions(self) -> List[Dict[str, str]]:
        """All governorates with their zone, in definition order."""
        return [
            {"name": r.name, "zone": r.zone} for r in self.region_repo.list_regions()
        ]

    def crop_reference(self) -> List[Dict[str, Any]]:
        return self.describe_rules_uc.crop_cards()

    def rules_text(self) -> str:
        return self.describe_rules_uc.rules_text()
