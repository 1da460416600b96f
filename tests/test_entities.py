"""Tests for domain entities."""

import pytest
from src.domain.entities.region import Region
from src.domain.entities.crop import Crop
from src.domain.entities.monthly_temperature import MonthlyTemperatureProfile
from src.domain.entities.evaluation_result import EvaluationResult
from src.domain.entities.recommendation import Recommendation


WHEAT = {
    "id": "wheat",
    "name": "Wheat (Triticum aestivum)",
    "temp_range": (17, 24),
    "soils": ["clay", "loam"],
    "water_need": "moderate",
    "planting_months": [11, 12, 1, 2, 3, 4],
}


def test_region():
    """Test Region entity."""
    region = Region(name="Giza", zone="Delta")
    assert region.zone == "Delta"
    assert str(region) == "Giza"


def test_crop_from_dict():
    """Test Crop creation and display helpers."""
    crop = Crop.from_dict(WHEAT)
    assert crop.temp_range == (17, 24)
    assert crop.ideal_range_display == "17–24"
    assert crop.soils_display == "clay, loam"
    assert crop.planting_months == (11, 12, 1, 2, 3, 4)
    assert crop.planting_month_names[:3] == ["November", "December", "January"]
    assert str(crop) == "Wheat (Triticum aestivum)"


def test_crop_temperature_range_is_inclusive():
    """Both ends of the ideal range are accepted."""
    crop = Crop.from_dict(WHEAT)
    assert crop.accepts_temperature(17)
    assert crop.accepts_temperature(24)
    assert not crop.accepts_temperature(16.9)
    assert not crop.accepts_temperature(24.1)


def test_crop_rejects_inverted_range():
    """Test that min > max is rejected."""
    with pytest.raises(ValueError, match="inverted"):
        Crop.from_dict({**WHEAT, "temp_range": (30, 20)})


def test_crop_rejects_invalid_months():
    """Test that planting months outside 1..12 are rejected."""
    with pytest.raises(ValueError, match="invalid planting months"):
        Crop.from_dict({**WHEAT, "planting_months": [0, 13, 5]})


def test_crop_is_immutable():
    """Test that crops cannot be changed after creation."""
    crop = Crop.from_dict(WHEAT)
    with pytest.raises(AttributeError):
        crop.temp_min = 0


def test_monthly_temperature_profile():
    """Test MonthlyTemperatureProfile lookup."""
    profile = MonthlyTemperatureProfile.from_sequence("Delta", range(1, 13))
    assert profile.for_month(1) == 1
    assert profile.for_month(12) == 12
    assert profile.for_month(13) is None


def test_monthly_temperature_profile_needs_twelve_values():
    """Test that a profile must cover every month."""
    with pytest.raises(ValueError, match="12 monthly temperatures"):
        MonthlyTemperatureProfile.from_sequence("Delta", [20] * 11)


def test_recommendation_to_dict():
    """Test Recommendation serialization."""
    result = EvaluationResult(
        crop_id="wheat",
        name="Wheat",
        score=3,
        temperature_matched=True,
        month_matched=True,
        ideal_range_display="17–24",
        region_temperature=17,
        water_need="moderate",
        soils_display="clay, loam",
    )
    recommendation = Recommendation(
        zone="Delta", month=1, region_temperature=17, matches=(result,)
    )
    data = recommendation.to_dict()
    assert recommendation.has_matches
    assert data["region_temperature"] == 17
    assert data["matches"][0]["crop_id"] == "wheat"
    assert data["matches"][0]["soils_display"] == "clay, loam"
