"""Hybrid (heat-pump) risk engine.

A heat-pump water heater is a storage tank with a compressor on top, so
it shares the tank physics and tiers. Heat-pump failure modes are checked
after every tank tier that condemns the vessel and before the tank service
and maintenance tiers.
"""

import logging
from dataclasses import replace

from domain.interfaces import IRiskEngine
from domain.value_objects import (
    ActionType,
    AirFilterStatus,
    BadgeColor,
    Finding,
    ForensicInputs,
    OpterraMetrics,
    Recommendation,
    RecommendationBadge,
    RoomVolumeType,
    TankEngineConfig,
)

from .economic_optimizer import optimize_economic_verdict
from .tank_engine import TankRiskEngine

logger = logging.getLogger(__name__)


def calculate_hybrid_efficiency(inputs: ForensicInputs, config: TankEngineConfig) -> float:
    """Heat-pump efficiency score 0-100.

    Filter and enclosure penalties are subtracted from 100, the result is
    scaled by compressor health, and a blocked condensate drain costs a
    further few points.

    Args:
        inputs: Inspection snapshot
        config: Tank tuning constants carrying the heat-pump penalties

    Returns:
        Efficiency score clamped to 0-100
    """
    efficiency = 100.0
    if inputs.air_filter_status is not None:
        efficiency -= config.filter_penalty(inputs.air_filter_status)
    if inputs.room_volume_type is not None:
        efficiency -= config.closet_penalty(inputs.room_volume_type)

    compressor_health = (
        inputs.compressor_health if inputs.compressor_health is not None else 100.0
    )
    efficiency *= compressor_health / 100.0

    if inputs.is_condensate_clear is False:
        efficiency -= config.condensate_penalty
    return max(0.0, min(100.0, efficiency))


def get_hybrid_critical_failure(inputs: ForensicInputs) -> Recommendation | None:
    """Heat-pump specific failure that supersedes the tank service tiers."""
    if inputs.air_filter_status is AirFilterStatus.CLOGGED:
        return Recommendation(
            action=ActionType.REPAIR,
            title="Filter Clog",
            reason=(
                "Clogged air filter is starving the heat pump compressor. Immediate "
                "cleaning required to prevent compressor failure."
            ),
            urgent=True,
            badge_color=BadgeColor.ORANGE,
            badge=RecommendationBadge.SERVICE,
            finding=Finding.FILTER_CLOG,
        )
    if inputs.is_condensate_clear is False:
        return Recommendation(
            action=ActionType.REPAIR,
            title="Condensate Blockage",
            reason=(
                "Condensate drain is blocked. Water backup can damage the control board "
                "and create mold. Clear the drain immediately."
            ),
            urgent=True,
            badge_color=BadgeColor.ORANGE,
            badge=RecommendationBadge.SERVICE,
            finding=Finding.CONDENSATE_BLOCKED,
        )
    if inputs.room_volume_type is RoomVolumeType.CLOSET_SEALED:
        return Recommendation(
            action=ActionType.UPGRADE,
            title="Insufficient Airflow",
            reason=(
                "Heat pump installed in a sealed closet. The unit needs roughly 700 cubic "
                "feet of air to operate efficiently. Add a louvered door or ductwork."
            ),
            urgent=False,
            badge_color=BadgeColor.YELLOW,
            badge=RecommendationBadge.SERVICE,
            finding=Finding.INSUFFICIENT_AIRFLOW,
        )
    return None


class HybridRiskEngine(IRiskEngine):
    """Risk engine for heat-pump water heaters, built on the tank engine."""

    def __init__(self, config: TankEngineConfig | None = None) -> None:
        """Initialize the hybrid engine.

        Args:
            config: Tank tuning constants shared with the storage tank.
                If None, uses the current version.
        """
        self._tank = TankRiskEngine(config)

    @property
    def config(self) -> TankEngineConfig:
        """Tuning constants used by this engine."""
        return self._tank.config

    def calculate_health(self, inputs: ForensicInputs) -> OpterraMetrics:
        """Tank metrics with the heat-pump efficiency score added.

        Args:
            inputs: Inspection snapshot

        Returns:
            Metrics with the hybrid extension populated
        """
        metrics = self._tank.calculate_health(inputs)
        efficiency = calculate_hybrid_efficiency(inputs, self._tank.config)
        logger.debug(f"Hybrid efficiency: {efficiency:.1f}")
        return replace(metrics, hybrid_efficiency=round(efficiency, 1))

    def get_recommendation(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation:
        """Derive the optimized verdict.

        Tank tiers that condemn the vessel (Tier 0 to Tier 2) first, then
        heat-pump failures, then the remaining tank tiers. Every verdict
        passes through the economic optimizer.

        Args:
            metrics: Metrics computed for the inputs
            inputs: Inspection snapshot

        Returns:
            Final verdict
        """
        raw = self._tank.get_replacement_verdict(metrics, inputs)
        if raw is None:
            raw = get_hybrid_critical_failure(inputs)
            if raw is not None:
                logger.info(f"Hybrid failure mode detected: {raw.finding.value}")
        if raw is None:
            raw = self._tank.get_raw_recommendation(metrics, inputs)
        return optimize_economic_verdict(raw, metrics, inputs, self._tank.config)
