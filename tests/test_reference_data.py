"""Tests for reference data validation and rule descriptions."""

from src.domain.use_cases.describe_rules import DescribeRulesUseCase
from src.domain.use_cases.resolve_region import ResolveRegionUseCase
from src.domain.use_cases.validate_reference_data import ValidateReferenceDataUseCase
from src.infrastructure.repositories.static_region_repository import StaticRegionRepository
from src.infrastructure.repositories.static_crop_repository import StaticCropRepository


def test_shipped_reference_data_is_consistent(region_repo, crop_repo, temperature_repo):
    """Every region has a temperature profile and every crop can be recommended."""
    issues = ValidateReferenceDataUseCase(region_repo, crop_repo, temperature_repo).execute()
    assert issues == []


def test_validation_reports_problems(temperature_repo):
    """Test that orphan zones and unreachable crops are reported."""
    regions = StaticRegionRepository([{"name": "Siwa", "zone": "Oasis"}])
    crops = StaticCropRepository(
        [
            {"id": "ice", "name": "Ice", "temp_range": (-10, 0), "planting_months": [1]},
            {"id": "idle", "name": "Idle", "temp_range": (20, 25), "planting_months": []},
        ]
    )
    issues = ValidateReferenceDataUseCase(regions, crops, temperature_repo).execute()

    assert len(issues) == 3
    assert any("Siwa" in issue and "Oasis" in issue for issue in issues)
    assert any("'ice'" in issue and "never" in issue for issue in issues)
    assert any("'idle'" in issue and "empty planting window" in issue for issue in issues)


def test_resolve_region(region_repo):
    """Test region resolution with unknown and blank names."""
    use_case = ResolveRegionUseCase(region_repo)
    assert use_case.execute("Minya").zone == "Upper"
    assert use_case.execute(" Minya ").zone == "Upper"
    assert use_case.execute("Atlantis") is None
    assert use_case.execute("") is None
    assert use_case.execute(None) is None


def test_crop_cards(crop_repo):
    """Cards carry pre-joined display strings."""
    cards = DescribeRulesUseCase(crop_repo).crop_cards()
    maize = next(c for c in cards if c["id"] == "maize")
    assert maize["ideal_range_display"] == "25–35"
    assert maize["soils_display"] == "loam, sandy loam"
    assert maize["water_need"] == "moderate-high"
    assert maize["best_months"][0] == "May"
    assert maize["best_months"][-1] == "October"


def test_rules_text(crop_repo):
    """Test the editable rules summary."""
    text = DescribeRulesUseCase(crop_repo).rules_text()
    assert text.startswith("Prediction rules (editable):")
    assert "Wheat (Triticum aestivum)\n - months: 11, 12, 1, 2, 3, 4" in text
    assert " - temp: 17–24 °C" in text
    assert " - soils: varied" in text
