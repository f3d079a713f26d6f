"""Shared fixtures for domain unit tests."""

from typing import Any, Callable

import pytest
from domain.value_objects import (
    Confidence,
    ForensicInputs,
    HardnessSource,
    OpterraMetrics,
    ResolvedHardness,
    RiskLevel,
    StressFactors,
)


@pytest.fixture
def create_inputs() -> Callable[..., ForensicInputs]:
    """Factory for inspection inputs with a quiet baseline.

    The baseline is a 5-year-old gas tank in an unfinished garage at
    60 PSI on an open system with zero hardness, so no stressor is active
    unless a test turns one on.
    """

    def _create(**overrides: Any) -> ForensicInputs:
        values: dict[str, Any] = {
            "calendar_age": 5.0,
            "house_psi": 60.0,
            "hardness_gpg": 0.0,
        }
        values.update(overrides)
        return ForensicInputs(**values)

    return _create


@pytest.fixture
def create_metrics() -> Callable[..., OpterraMetrics]:
    """Factory for metrics snapshots used to drive the decision tiers directly."""

    def _create(**overrides: Any) -> OpterraMetrics:
        values: dict[str, Any] = {
            "bio_age": 5.0,
            "fail_prob": 5.0,
            "health_score": 82,
            "stress_factors": StressFactors(total=1.0),
            "effective_pressure": 60.0,
            "is_transient_pressure": False,
            "hardness": ResolvedHardness(
                street_hardness=0.0,
                effective_hardness=0.0,
                source=HardnessSource.API,
                confidence=Confidence.MEDIUM,
            ),
            "risk_level": RiskLevel.LOW,
            "sediment_lbs": 0.0,
        }
        values.update(overrides)
        return OpterraMetrics(**values)

    return _create
