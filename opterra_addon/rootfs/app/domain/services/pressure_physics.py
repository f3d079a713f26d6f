"""Pressure physics adapter.

A static gauge reading cannot see the pressure spike that builds on every
heating cycle when expanding water has nowhere to go. This module infers
the effective peak pressure and converts pressure into stress.
"""

import logging
from dataclasses import dataclass

from domain.value_objects import ForensicInputs, TankEngineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EffectivePressure:
    """Static and modeled peak pressure for one installation.

    Attributes:
        static_psi: Gauge reading
        effective_psi: Modeled peak pressure seen by the vessel
        is_transient: Whether the peak comes from thermal expansion rather
            than the static reading
    """

    static_psi: float
    effective_psi: float
    is_transient: bool


def resolve_effective_pressure(
    inputs: ForensicInputs, config: TankEngineConfig
) -> EffectivePressure:
    """Infer the peak pressure the vessel experiences.

    On a closed loop without a working expansion tank, effective pressure
    is at least the thermal-spike baseline; otherwise it is the static
    reading.

    Args:
        inputs: Inspection snapshot
        config: Tank tuning constants

    Returns:
        Static and effective pressure
    """
    static_psi = inputs.house_psi
    if inputs.is_actually_closed and not inputs.has_functional_exp_tank:
        effective_psi = max(static_psi, config.psi_thermal_spike)
    else:
        effective_psi = static_psi

    is_transient = effective_psi > static_psi
    if is_transient:
        logger.debug(
            f"Thermal expansion spike inferred: static={static_psi:.0f} PSI, "
            f"effective={effective_psi:.0f} PSI"
        )
    return EffectivePressure(
        static_psi=static_psi, effective_psi=effective_psi, is_transient=is_transient
    )


def pressure_stress(
    psi: float, safe_limit: float, scalar: float, exponent: float
) -> float:
    """Quadratic stress from pressure above the safe limit.

    Returns 1.0 at or below the limit, so pressure never reduces stress.
    """
    if psi <= safe_limit:
        return 1.0
    return 1.0 + ((psi - safe_limit) / scalar) ** exponent
