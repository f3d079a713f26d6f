"""Fuel-type router.

Central entry point of the risk engine. Dispatches an inspection to the
engine for its appliance family so every family returns the same
metrics and verdict shape.
"""

import logging

from domain.interfaces import IRiskEngine
from domain.value_objects import (
    ForensicInputs,
    FuelType,
    OpterraMetrics,
    OpterraResult,
    Recommendation,
    TankEngineConfig,
    TanklessEngineConfig,
)

from .hybrid_engine import HybridRiskEngine
from .tank_engine import TankRiskEngine
from .tankless_engine import TanklessRiskEngine

logger = logging.getLogger(__name__)


class FuelTypeRouter:
    """Selects the risk engine for a fuel type.

    Engines are stateless, so one instance per family is built up front
    and shared across assessments.
    """

    def __init__(
        self,
        tank_config: TankEngineConfig | None = None,
        tankless_config: TanklessEngineConfig | None = None,
    ) -> None:
        """Initialize the router.

        Args:
            tank_config: Constants for storage tanks and hybrids.
                If None, uses the current version.
            tankless_config: Constants for tankless units.
                If None, uses the current version.
        """
        self._tank = TankRiskEngine(tank_config)
        self._hybrid = HybridRiskEngine(tank_config)
        self._tankless = TanklessRiskEngine(tankless_config)

    def route(self, fuel_type: FuelType) -> IRiskEngine:
        """Return the engine responsible for a fuel type.

        Args:
            fuel_type: Appliance family

        Returns:
            Hybrid engine for heat pumps, tankless engine for on-demand
            units, tank engine otherwise
        """
        if fuel_type.is_hybrid:
            engine: IRiskEngine = self._hybrid
        elif fuel_type.is_tankless:
            engine = self._tankless
        else:
            engine = self._tank
        logger.debug(f"Routing {fuel_type.value} to {type(engine).__name__}")
        return engine

    def assess(self, inputs: ForensicInputs) -> OpterraResult:
        """Run the full assessment on the engine for the inputs' fuel type."""
        return self.route(inputs.fuel_type).assess(inputs)


_default_router = FuelTypeRouter()


def calculate_opterra_risk(inputs: ForensicInputs) -> OpterraResult:
    """Assess a water heater with the current engine versions.

    Args:
        inputs: Inspection snapshot

    Returns:
        Metrics and verdict
    """
    return _default_router.assess(inputs)


def calculate_health(inputs: ForensicInputs) -> OpterraMetrics:
    """Compute metrics only, with the current engine versions."""
    return _default_router.route(inputs.fuel_type).calculate_health(inputs)


def get_recommendation(metrics: OpterraMetrics, inputs: ForensicInputs) -> Recommendation:
    """Derive the verdict for previously computed metrics."""
    return _default_router.route(inputs.fuel_type).get_recommendation(metrics, inputs)
