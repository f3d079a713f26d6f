"""Assessment Application Service.

Main application service that coordinates the risk engine for the
assessment use cases exposed to callers.
"""

import logging
from datetime import datetime

from domain.services import FuelTypeRouter
from domain.value_objects import (
    TANKLESS_TIER_PROFILES,
    TIER_PROFILES,
    ForensicInputs,
    OpterraMetrics,
    OpterraResult,
    QualityTier,
    Recommendation,
    TankEngineConfig,
    TanklessEngineConfig,
    TierProfile,
    detect_quality_tier,
)

_LOGGER = logging.getLogger(__name__)


class AssessmentApplicationService:
    """Application service for water heater assessments.

    This service is the main entry point for all assessment operations.
    It selects the engine for each inspection and logs the outcome.
    """

    def __init__(self, router: FuelTypeRouter | None = None) -> None:
        """Initialize the assessment application service.

        Args:
            router: Fuel-type router. If None, uses the current engine versions.
        """
        self._router = router or FuelTypeRouter()

    def assess(self, inputs: ForensicInputs) -> OpterraResult:
        """Run a full assessment.

        Args:
            inputs: Inspection snapshot

        Returns:
            Metrics and verdict
        """
        _LOGGER.info(
            "Assessing %s unit: age=%.1f, psi=%.0f",
            inputs.fuel_type.value,
            inputs.calendar_age,
            inputs.house_psi,
        )
        result = self._router.assess(inputs)
        _LOGGER.info(
            "Assessment result: %s '%s' (fail_prob=%.1f%%, health=%d)",
            result.verdict.action.value,
            result.verdict.title,
            result.metrics.fail_prob,
            result.metrics.health_score,
        )
        return result

    def calculate_health(self, inputs: ForensicInputs) -> OpterraMetrics:
        """Compute metrics without a verdict.

        Args:
            inputs: Inspection snapshot

        Returns:
            Metrics snapshot
        """
        return self._router.route(inputs.fuel_type).calculate_health(inputs)

    def get_recommendation(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation:
        """Derive the verdict for metrics computed earlier.

        Args:
            metrics: Metrics for the same inputs
            inputs: Inspection snapshot

        Returns:
            Final verdict
        """
        verdict = self._router.route(inputs.fuel_type).get_recommendation(metrics, inputs)
        _LOGGER.debug("Recommendation: %s '%s'", verdict.action.value, verdict.title)
        return verdict

    def detect_tier(self, inputs: ForensicInputs) -> TierProfile:
        """Quality tier inferred from the inputs' warranty and fuel type."""
        return detect_quality_tier(inputs)

    def get_tier_catalog(self) -> dict[str, dict[QualityTier, TierProfile]]:
        """Get the tank and tankless tier catalogs.

        Returns:
            Mapping of family name to its tier profiles
        """
        return {"tank": dict(TIER_PROFILES), "tankless": dict(TANKLESS_TIER_PROFILES)}

    def get_status(self) -> dict:
        """Get the current status of the assessment service.

        Returns:
            Dictionary with status information
        """
        return {
            "ready": True,
            "tank_engine_version": TankEngineConfig().version,
            "tankless_engine_version": TanklessEngineConfig().version,
            "timestamp": datetime.now().isoformat(),
        }
