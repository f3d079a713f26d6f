"""Stress composer.

Combines independent physical stressors into named multipliers. Tank
stressors are split into a mechanical class the anode cannot prevent and
a chemical class it suppresses while intact.
"""

import logging

from domain.value_objects import (
    ForensicInputs,
    StressFactors,
    TankEngineConfig,
    TanklessEngineConfig,
    TempSetting,
)

from .pressure_physics import pressure_stress

logger = logging.getLogger(__name__)


def temperature_stress(temp_setting: TempSetting, config: TankEngineConfig) -> float:
    """Full thermostat stress for a storage tank."""
    return {
        TempSetting.LOW: config.temp_stress_low,
        TempSetting.NORMAL: config.temp_stress_normal,
        TempSetting.HOT: config.temp_stress_hot,
    }[temp_setting]


def compose_tank_stress(
    inputs: ForensicInputs,
    effective_psi: float,
    sediment_lbs: float,
    usage_intensity: float,
    config: TankEngineConfig,
) -> StressFactors:
    """Compose tank stress from pressure, sediment, temperature and plumbing.

    Mechanical: pressure x sediment hot-spotting x half the temperature effect.
    Chemical: the other temperature half x circulation x closed-loop cycling.
    Total: mechanical x chemical. Every product is clamped to the stress cap.

    Args:
        inputs: Inspection snapshot
        effective_psi: Modeled peak pressure
        sediment_lbs: Modeled sediment load
        usage_intensity: Household usage relative to the reference household
        config: Tank tuning constants

    Returns:
        Named stress multipliers
    """
    cap = config.max_stress_cap

    pressure = pressure_stress(
        effective_psi, config.psi_safe_limit, config.psi_scalar, config.psi_quadratic_exp
    )
    temp = temperature_stress(inputs.temp_setting, config)
    temp_half = 1.0 + (temp - 1.0) * 0.5
    sediment = 1.0 + sediment_lbs * config.sediment_stress_per_lb
    circ = config.circ_stress if inputs.has_circ_pump else 1.0
    loop = (
        config.loop_stress
        if inputs.is_actually_closed and not inputs.has_functional_exp_tank
        else 1.0
    )

    mechanical = min(pressure * sediment * temp_half, cap)
    chemical = min(temp_half * circ * loop, cap)
    total = min(mechanical * chemical, cap)

    logger.debug(
        f"Tank stress: mechanical={mechanical:.3f} (pressure={pressure:.3f}, "
        f"sediment={sediment:.3f}), chemical={chemical:.3f} (circ={circ}, loop={loop}), "
        f"total={total:.3f}"
    )
    return StressFactors(
        total=total,
        mechanical=mechanical,
        chemical=chemical,
        pressure=pressure,
        temp=temp,
        temp_mechanical=temp_half,
        temp_chemical=temp_half,
        circ=circ,
        loop=loop,
        sediment=sediment,
        usage_intensity=usage_intensity,
    )


def compose_tankless_stress(
    inputs: ForensicInputs,
    scale_percent: float,
    cycle_intensity: float,
    config: TanklessEngineConfig,
) -> StressFactors:
    """Compose tankless stress from scale, cycling, temperature and pressure.

    There is no anode, so the split only attributes stress: scale, cycle
    wear and pressure are mechanical, the thermostat setting chemical.

    Args:
        inputs: Inspection snapshot
        scale_percent: Heat exchanger blockage (0-100)
        cycle_intensity: Firing cycles relative to the reference household
        config: Tankless tuning constants

    Returns:
        Named stress multipliers
    """
    cap = config.max_stress_cap

    scale = 1.0 + (scale_percent / config.scale_stress_divisor) ** 2
    cycle = max(1.0, 1.0 + (cycle_intensity - 1.0) * config.cycle_wear_per_unit)
    temp = config.temp_stress_hot if inputs.temp_setting is TempSetting.HOT else 1.0
    pressure = pressure_stress(
        inputs.house_psi, config.psi_safe_limit, config.psi_scalar, config.psi_quadratic_exp
    )

    mechanical = min(scale * cycle * pressure, cap)
    total = min(mechanical * temp, cap)

    logger.debug(
        f"Tankless stress: scale={scale:.3f}, cycle={cycle:.3f}, temp={temp}, "
        f"pressure={pressure:.3f}, total={total:.3f}"
    )
    return StressFactors(
        total=total,
        mechanical=mechanical,
        chemical=temp,
        pressure=pressure,
        temp=temp,
        temp_mechanical=1.0,
        temp_chemical=temp,
        usage_intensity=cycle_intensity,
        scale=scale,
        cycle=cycle,
    )
