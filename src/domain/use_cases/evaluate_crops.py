"""Use case for evaluating crop suitability for a zone and month."""

import logging
from typing import List
from ..entities.evaluation_result import EvaluationResult
from ..entities.recommendation import Recommendation
from ..repositories.crop_repository import CropRepository
from ..repositories.temperature_repository import TemperatureRepository

logger = logging.getLogger(__name__)


def validate_month(month: int) -> int:
    """
    Check that month is an integer in 1..12.

    Args:
        month: Month number (1 = January)

    Returns:
        The month, unchanged

    Raises:
        ValueError: If month is not an integer between 1 and 12
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValueError(f"Month must be an integer between 1 and 12, got {month!r}")
    return month


class EvaluateCropsUseCase:
    """
    Use case to score every crop against a zone's mean temperature and a month.

    A crop earns ``month_weight`` when the month is in its planting window and
    ``temperature_weight`` when the zone temperature is within its ideal range.
    Crops scoring at least ``min_score`` are returned, best first. With the
    default weights (1, 2) and threshold (2), a planting-window match alone is
    never enough.
    """

    def __init__(
        self,
        crop_repository: CropRepository,
        temperature_repository: TemperatureRepository,
        month_weight: int = 1,
        temperature_weight: int = 2,
        min_score: int = 2,
    ):
        """
        Initialize use case.

        Args:
            crop_repository: Repository for crop definitions
            temperature_repository: Repository for monthly temperatures
            month_weight: Score for a planting-window match
            temperature_weight: Score for a temperature-range match
            min_score: Minimum score for a crop to be recommended
        """
        self.crop_repository = crop_repository
        self.temperature_repository = temperature_repository
        self.month_weight = month_weight
        self.temperature_weight = temperature_weight
        self.min_score = min_score

    def execute(self, zone: str, month: int) -> Recommendation:
        """
        Execute the evaluation.

        Args:
            zone: Climate zone tag
            month: Month number (1 = January)

        Returns:
            Recommendation with the zone temperature (None if the zone is
            unknown) and the qualifying crops ranked by score

        Raises:
            ValueError: If month is outside 1..12
        """
        validate_month(month)

        temperature = self.temperature_repository.get_mean_temperature(zone, month)
        if temperature is None:
            logger.warning(f"No temperature data for zone '{zone}', month {month}")

        results: List[EvaluationResult] = []
        for crop in self.crop_repository.list_crops():
            month_ok = month in crop.planting_months
            temp_ok = temperature is not None and crop.accepts_temperature(temperature)

            score = 0
            if month_ok:
                score += self.month_weight
            if temp_ok:
                score += self.temperature_weight

            if score >= self.min_score:
                results.append(
                    EvaluationResult(
                        crop_id=crop.id,
                        name=crop.name,
                        score=score,
                        temperature_matched=temp_ok,
                        month_matched=month_ok,
                        ideal_range_display=crop.ideal_range_display,
                        region_temperature=temperature,
                        water_need=crop.water_need,
                        soils_display=crop.soils_display,
                    )
                )

        # sorted() is stable, so equal scores keep definition order
        ranked = sorted(results, key=lambda r: r.score, reverse=True)

        logger.info(
            f"Evaluated zone={zone}, month={month}, temp={temperature}: "
            f"{len(ranked)} crops recommended"
        )
        return Recommendation(
            zone=zone,
            month=month,
            region_temperature=temperature,
            matches=tuple(ranked),
        )
