"""Example usage of the crop advisor."""

import logging
from src.application.services.crop_advisor_service import CropAdvisorService
from src.infrastructure.repositories.static_region_repository import StaticRegionRepository
from src.infrastructure.repositories.static_crop_repository import StaticCropRepository
from src.infrastructure.repositories.static_temperature_repository import (
    StaticTemperatureRepository,
)
from config.settings import (
    REGION_DEFINITIONS,
    CROP_DEFINITIONS,
    MONTHLY_TEMPERATURES,
    RECOMMENDATION_SETTINGS,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    service = CropAdvisorService(
        region_repo=StaticRegionRepository(REGION_DEFINITIONS),
        crop_repo=StaticCropRepository(CROP_DEFINITIONS),
        temperature_repo=StaticTemperatureRepository(MONTHLY_TEMPERATURES),
        recommendation_settings=RECOMMENDATION_SETTINGS,
    )

    # Example 1: Winter in the Delta
    print("=" * 60)
    print("Example 1: Giza in January")
    print("=" * 60)
    result = service.recommend(region_name="Giza", month=1)
    print(f"Region temperature: {result['region_temperature']} °C")
    for match in result["matches"]:
        print(f"  {match['name']}: score {match['score']}")

    # Example 2: Midsummer in Upper Egypt
    print("\n" + "=" * 60)
    print("Example 2: Aswan in July")
    print("=" * 60)
    result = service.recommend(region_name="Aswan", month=7)
    print(f"Region temperature: {result['region_temperature']} °C")
    if not result["matches"]:
        print(result["advice"])

    # Example 3: Rules summary
    print("\n" + "=" * 60)
    print("Example 3: Rules")
    print("=" * 60)
    print(service.rules_text())


if __name__ == "__main__":
    main()
