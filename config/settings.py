"""Application settings and configuration."""

import logging
import os

# Optional CSV with measured monthly means (zone,month,mean_temp).
# When unset, the placeholder table below is used.
TEMPERATURE_DATA_FILE = os.getenv("CROP_ADVISOR_TEMPERATURE_FILE", "")


def resolve_log_level(name: str) -> str:
    """Return a known logging level name, falling back to INFO."""
    level = (name or "").strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


LOG_LEVEL = resolve_log_level(os.getenv("CROP_ADVISOR_LOG_LEVEL", "INFO"))

# Governorates and their simplified climate zone
REGION_DEFINITIONS = [
    {"name": "Cairo", "zone": "Delta"},
    {"name": "Giza", "zone": "Delta"},
    {"name": "Fayoum", "zone": "Delta"},
    {"name": "Dakahlia", "zone": "Delta"},
    {"name": "Kafr El-Sheikh", "zone": "Delta"},
    {"name": "Minya", "zone": "Upper"},
    {"name": "Beni Suef", "zone": "Upper"},
    {"name": "Aswan", "zone": "Upper"},
    {"name": "North Sinai", "zone": "Sinai"},
]

# Crop definitions (ideal temp ranges in Celsius, preferred soils, water)
CROP_DEFINITIONS = [
    {
        "id": "wheat",
        "name": "Wheat (Triticum aestivum)",
        "temp_range": (17, 24),
        "soils": ["clay", "loam"],
        "water_need": "moderate",
        "planting_months": [11, 12, 1, 2, 3, 4],  # Nov - Apr
    },
    {
        "id": "rice",
        "name": "Rice (Oryza sativa)",
        "temp_range": (20, 30),
        "soils": ["clay"],
        "water_need": "high",
        "planting_months": [4, 5, 6, 7, 8, 9],  # Apr - Sep
    },
    {
        "id": "maize",
        "name": "Maize (Zea mays)",
        "temp_range": (25, 35),
        "soils": ["loam", "sandy loam"],
        "water_need": "moderate-high",
        "planting_months": [5, 6, 7, 8, 9, 10],
    },
    {
        "id": "barley",
        "name": "Barley (Hordeum vulgare)",
        "temp_range": (15, 22),
        "soils": ["varied"],
        "water_need": "low",
        "planting_months": [11, 12, 1, 2, 3],
    },
]

# Approximate monthly mean temperatures per zone (Jan..Dec, degrees C).
# Placeholders until measured values are exported to TEMPERATURE_DATA_FILE.
MONTHLY_TEMPERATURES = {
    "Delta": [17, 18, 21, 24, 27, 30, 32, 31, 29, 26, 22, 18],
    "Upper": [19, 20, 24, 28, 31, 34, 36, 35, 33, 29, 25, 20],
    "Sinai": [16, 17, 20, 24, 28, 31, 33, 32, 30, 26, 21, 17],
}

# Rule engine settings
RECOMMENDATION_SETTINGS = {
    "month_weight": 1,
    "temperature_weight": 2,
    "min_score": 2,
}

# API settings
API_SETTINGS = {
    "title": "Crop Advisor API",
    "description": "Rule-based crop recommendations by governorate and month",
    "version": "1.0.0",
}
