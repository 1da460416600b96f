"""CLI interface for rule-based crop recommendation."""

import argparse
import logging
import sys

from ..bootstrap import build_service

from config.settings import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)


def print_recommendation(result: dict) -> None:
    print("\n" + "=" * 60)
    if not result["known_region"]:
        print(f" Unknown region: {result['region']}")
        print("=" * 60)
        print(result["advice"])
        return

    print(
        f" Recommended crops for {result['region']} ({result['zone']}) "
        f"- {result['month_name']}"
    )
    print("=" * 60)
    print(f" Region mean temperature: {result['region_temperature']} °C")
    print("-" * 60)

    if not result["matches"]:
        print(result["advice"])
        return

    for match in result["matches"]:
        print(
            f"  • {match['name']}: match score {match['score']}. "
            f"Ideal temp: {match['ideal_range_display']} °C. "
            f"Water: {match['water_need']}. Soils: {match['soils_display']}."
        )
    print("-" * 60)
    print(f"Note: {result['advice']}")


def main():
    parser = argparse.ArgumentParser(description="Rule-based Crop Advisor")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === recommend: evaluate crops for a governorate and month ===
    recommend_parser = subparsers.add_parser(
        "recommend", help="Recommend crops for a governorate and month"
    )
    recommend_parser.add_argument("--region", type=str, required=True, help="e.g. 'Giza'")
    recommend_parser.add_argument(
        "--month",
        type=int,
        required=True,
        choices=range(1, 13),
        metavar="{1..12}",
        help="Month number (1 = January)",
    )

    subparsers.add_parser("regions", help="List governorates and their climate zone")
    subparsers.add_parser("crops", help="Show the crop reference table")
    subparsers.add_parser("rules", help="Show the editable prediction rules")

    args = parser.parse_args()

    # === Initialize service ===
    try:
        service = build_service()
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        sys.exit(1)

    # === Command: recommend ===
    if args.command == "recommend":
        try:
            result = service.recommend(region_name=args.region, month=args.month)
        except Exception as e:
            logger.error(f"Recommendation failed: {e}", exc_info=True)
            sys.exit(1)

        print_recommendation(result)
        if not result["known_region"]:
            sys.exit(1)

    # === Command: regions ===
    elif args.command == "regions":
        for region in service.list_regions():
            print(f"{region['name']:<20} {region['zone']}")

    # === Command: crops ===
    elif args.command == "crops":
        for card in service.crop_reference():
            print(f"\n{card['name']}")
            print(f"  Ideal Temperature: {card['ideal_range_display']} °C")
            print(f"  Soil:              {card['soils_display']}")
            print(f"  Water needs:       {card['water_need']}")
            print(f"  Best months:       {', '.join(card['best_months'])}")

    # === Command: rules ===
    elif args.command == "rules":
        print(service.rules_text())


if __name__ == "__main__":
    main()
