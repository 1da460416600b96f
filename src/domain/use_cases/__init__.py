"""Use cases - core business operations."""

from .evaluate_crops import EvaluateCropsUseCase, validate_month
from .resolve_region import ResolveRegionUseCase
from .validate_reference_data import ValidateReferenceDataUseCase
from .describe_rules import DescribeRulesUseCase

__all__ = [
    "EvaluateCropsUseCase",
    "validate_month",
    "ResolveRegionUseCase",
    "ValidateReferenceDataUseCase",
    "DescribeRulesUseCase",
]
