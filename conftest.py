"""Shared pytest fixtures."""

import pytest
from config.settings import (
    REGION_DEFINITIONS,
    CROP_DEFINITIONS,
    MONTHLY_TEMPERATURES,
    RECOMMENDATION_SETTINGS,
)
from src.application.services.crop_advisor_service import CropAdvisorService
from src.domain.use_cases.evaluate_crops import EvaluateCropsUseCase
from src.infrastructure.repositories.static_region_repository import StaticRegionRepository
from src.infrastructure.repositories.static_crop_repository import StaticCropRepository
from src.infrastructure.repositories.static_temperature_repository import (
    StaticTemperatureRepository,
)


@pytest.fixture
def region_repo():
    return StaticRegionRepository(REGION_DEFINITIONS)


@pytest.fixture
def crop_repo():
    return StaticCropRepository(CROP_DEFINITIONS)


@pytest.fixture
def temperature_repo():
    return StaticTemperatureRepository(MONTHLY_TEMPERATURES)


@pytest.fixture
def evaluator(crop_repo, temperature_repo):
    return EvaluateCropsUseCase(crop_repo, temperature_repo)


@pytest.fixture
def service(region_repo, crop_repo, temperature_repo):
    return CropAdvisorService(
        region_repo=region_repo,
        crop_repo=crop_repo,
        temperature_repo=temperature_repo,
        recommendation_settings=RECOMMENDATION_SETTINGS,
    )
