"""Sediment and scale accumulation models.

Both fouling models share one shape: deposits accumulate with hardness,
time since service and usage, and service partially resets them. Past
the lockout band, servicing itself risks perforating weakened material.
"""

import logging
import math
from dataclasses import dataclass

from domain.value_objects import (
    DescaleStatus,
    FlushStatus,
    ForensicInputs,
    FuelType,
    TankEngineConfig,
    TanklessEngineConfig,
    TempSetting,
    UsageType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SedimentState:
    """Tank sediment load and projection.

    Attributes:
        lbs: Modeled sediment load
        rate: Accumulation per year at current conditions
        years_since_flush: Accumulation window used
        usage_intensity: Household usage relative to the reference household
        months_to_flush: Months until the flush band, None if reached or never
        months_to_lockout: Months until lockout, None if reached or never
        flush_status: Maintenance band
    """

    lbs: float
    rate: float
    years_since_flush: float
    usage_intensity: float
    months_to_flush: int | None
    months_to_lockout: int | None
    flush_status: FlushStatus


@dataclass(frozen=True)
class ScaleState:
    """Tankless heat exchanger scale and flow condition.

    Attributes:
        scale_percent: Heat exchanger blockage (0-100)
        raw_index: Unsaturated scale index
        effective_hardness: Hardness used for scaling after softener credit
        years_since_descale: Accumulation window used
        cycle_intensity: Firing cycles relative to the reference household
        descale_status: Maintenance band
        flow_degradation: Lost flow versus nameplate in percent
    """

    scale_percent: float
    raw_index: float
    effective_hardness: float
    years_since_descale: float
    cycle_intensity: float
    descale_status: DescaleStatus
    flow_degradation: float


def calculate_usage_intensity(inputs: ForensicInputs, config: TankEngineConfig) -> float:
    """Household hot-water draw relative to a three-person normal household."""
    usage_mult = {
        UsageType.LIGHT: config.usage_light,
        UsageType.NORMAL: config.usage_normal,
        UsageType.HEAVY: config.usage_heavy,
    }[inputs.usage_type]
    occupancy = max(
        config.usage_min_occupancy_factor,
        inputs.people_count / config.usage_reference_people,
    )
    return min(config.usage_intensity_cap, usage_mult * occupancy)


def _sediment_factor(fuel_type: FuelType, config: TankEngineConfig) -> float:
    if fuel_type is FuelType.ELECTRIC:
        return config.sediment_factor_electric
    if fuel_type is FuelType.HYBRID:
        return config.sediment_factor_hybrid
    return config.sediment_factor_gas


def _months_until(current: float, target: float, rate: float) -> int | None:
    if current >= target or rate <= 0:
        return None
    return math.ceil((target - current) / rate * 12)


def calculate_sediment(
    inputs: ForensicInputs, effective_hardness: float, config: TankEngineConfig
) -> SedimentState:
    """Model sediment accumulated in a storage tank.

    lbs = fuel factor x hardness x usage intensity x temperature factor
    x years since the last flush. Years since flush cannot predate the
    unit, and annual maintenance bounds it to one year.

    Args:
        inputs: Inspection snapshot
        effective_hardness: Resolved hardness reaching the tank (GPG)
        config: Tank tuning constants

    Returns:
        Sediment load, projection and flush status
    """
    years_since_flush = inputs.calendar_age
    if inputs.last_flush_years_ago is not None:
        years_since_flush = min(inputs.last_flush_years_ago, inputs.calendar_age)
    if inputs.is_annually_maintained:
        years_since_flush = min(years_since_flush, 1.0)

    usage_intensity = calculate_usage_intensity(inputs, config)
    temp_mult = {
        TempSetting.LOW: config.sediment_temp_low,
        TempSetting.NORMAL: config.sediment_temp_normal,
        TempSetting.HOT: config.sediment_temp_hot,
    }[inputs.temp_setting]

    rate = (
        _sediment_factor(inputs.fuel_type, config)
        * effective_hardness
        * usage_intensity
        * temp_mult
    )
    lbs = rate * years_since_flush

    if lbs > config.sediment_lockout_lbs:
        status = FlushStatus.LOCKOUT
    elif lbs >= config.sediment_critical_lbs:
        status = FlushStatus.CRITICAL
    elif lbs >= config.sediment_flush_lbs:
        status = FlushStatus.DUE
    elif lbs >= config.sediment_advisory_lbs:
        status = FlushStatus.ADVISORY
    else:
        status = FlushStatus.OPTIMAL

    state = SedimentState(
        lbs=lbs,
        rate=rate,
        years_since_flush=years_since_flush,
        usage_intensity=usage_intensity,
        months_to_flush=_months_until(lbs, config.sediment_flush_lbs, rate),
        months_to_lockout=_months_until(lbs, config.sediment_lockout_lbs, rate),
        flush_status=status,
    )
    logger.debug(
        f"Sediment: {lbs:.2f} lbs at {rate:.3f} lbs/yr over "
        f"{years_since_flush:.1f} yrs, status={status.value}"
    )
    return state


def calculate_cycle_intensity(
    inputs: ForensicInputs, config: TanklessEngineConfig
) -> float:
    """Burner firing cycles relative to the reference household.

    A recirculation loop roughly doubles cycling.
    """
    usage_mult = {
        UsageType.LIGHT: config.usage_light,
        UsageType.NORMAL: config.usage_normal,
        UsageType.HEAVY: config.usage_heavy,
    }[inputs.usage_type]
    occupancy = max(
        config.usage_min_occupancy_factor,
        inputs.people_count / config.usage_reference_people,
    )
    recirc = (
        config.recirc_cycle_multiplier
        if inputs.has_recirculation_loop or inputs.has_circ_pump
        else 1.0
    )
    return min(config.cycle_intensity_cap, usage_mult * occupancy * recirc)


def calculate_flow_degradation(inputs: ForensicInputs) -> float:
    """Percent of nameplate flow lost, 0 when either reading is missing."""
    if not inputs.rated_flow_gpm or inputs.flow_rate_gpm is None:
        return 0.0
    lost = (inputs.rated_flow_gpm - inputs.flow_rate_gpm) / inputs.rated_flow_gpm * 100.0
    return min(100.0, max(0.0, lost))


def calculate_scale(
    inputs: ForensicInputs, effective_hardness: float, config: TanklessEngineConfig
) -> ScaleState:
    """Model heat exchanger scale in a tankless unit.

    The raw index is linear in hardness, years since descale, cycling and
    fuel/temperature factors. A neglected interval before the last descale
    leaves a permanent residue. Blockage saturates:
    100 x (1 - exp(-raw / saturation)).

    Args:
        inputs: Inspection snapshot
        effective_hardness: Resolved hardness reaching the unit (GPG)
        config: Tankless tuning constants

    Returns:
        Blockage percent, descale status and flow loss
    """
    hardness = effective_hardness
    if inputs.has_softener and effective_hardness < config.softened_hardness_threshold:
        hardness = config.softened_effective_hardness

    never_descaled = inputs.last_descale_years_ago is None
    years_since_descale = inputs.calendar_age
    if not never_descaled:
        years_since_descale = min(inputs.last_descale_years_ago, inputs.calendar_age)

    cycle_intensity = calculate_cycle_intensity(inputs, config)
    fuel_factor = (
        config.scale_factor_electric
        if inputs.fuel_type is FuelType.TANKLESS_ELECTRIC
        else config.scale_factor_gas
    )
    temp_factor = config.scale_temp_hot if inputs.temp_setting is TempSetting.HOT else 1.0
    annual_index = hardness * cycle_intensity * fuel_factor * temp_factor

    raw_index = annual_index * years_since_descale
    neglected_interval = inputs.calendar_age - years_since_descale
    if not never_descaled and neglected_interval > config.neglect_interval_years:
        raw_index += config.residual_scar_fraction * annual_index * neglected_interval

    scale_percent = 100.0 * (1.0 - math.exp(-raw_index / config.scale_saturation))

    if scale_percent > config.scale_lockout_percent:
        status = DescaleStatus.LOCKOUT
    elif (
        inputs.calendar_age > config.run_to_failure_age
        and hardness > config.run_to_failure_hardness
        and never_descaled
        and scale_percent > config.scale_critical_percent
    ):
        status = DescaleStatus.RUN_TO_FAILURE
    elif scale_percent > config.scale_due_percent and not inputs.has_isolation_valves:
        status = DescaleStatus.IMPOSSIBLE
    elif scale_percent > config.scale_critical_percent:
        status = DescaleStatus.CRITICAL
    elif scale_percent > config.scale_due_percent:
        status = DescaleStatus.DUE
    else:
        status = DescaleStatus.OPTIMAL

    state = ScaleState(
        scale_percent=scale_percent,
        raw_index=raw_index,
        effective_hardness=hardness,
        years_since_descale=years_since_descale,
        cycle_intensity=cycle_intensity,
        descale_status=status,
        flow_degradation=calculate_flow_degradation(inputs),
    )
    logger.debug(
        f"Scale: {scale_percent:.1f}% (raw={raw_index:.2f}) over "
        f"{years_since_descale:.1f} yrs, cycle={cycle_intensity:.2f}, status={status.value}"
    )
    return state
