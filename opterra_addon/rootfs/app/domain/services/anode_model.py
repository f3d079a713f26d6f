"""Anode shield-life model.

The sacrificial anode is a finite mass consumed at a rate set by the
water chemistry and plumbing around it. Its history is decomposed into
an ordered list of burn intervals so accelerants that arrived partway
through the anode's life are not applied retroactively.
"""

import logging
from dataclasses import dataclass

from domain.value_objects import (
    AnodeBurnFactors,
    AnodeStatus,
    ConnectionType,
    ForensicInputs,
    SanitizerType,
    TankEngineConfig,
    TierProfile,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BurnInterval:
    """A stretch of anode life at a constant burn rate.

    Attributes:
        duration: Length of the stretch in years
        rate: Anode mass consumed per year, in years of nominal burn
    """

    duration: float
    rate: float

    def __post_init__(self) -> None:
        """Validate burn interval values."""
        if self.duration < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")
        if self.rate <= 0:
            raise ValueError(f"rate must be positive, got {self.rate}")

    @property
    def consumed(self) -> float:
        """Anode mass consumed over the interval."""
        return self.duration * self.rate


@dataclass(frozen=True)
class AnodeState:
    """Anode condition derived from its burn history.

    Attributes:
        capacity: Anode mass in years of nominal burn
        consumed: Mass consumed so far
        burn_rate: Current capped burn rate
        burn_factors: Current accelerants
        shield_life: Years of protection left at the current rate
        depletion_percent: Consumed share of the capacity, capped at 100
        mass_remaining: Remaining share of the capacity (0-1)
        status: Condition band
        naked_years: Years the vessel has spent without anode protection
        intervals: Burn history of the current anode, oldest first
    """

    capacity: float
    consumed: float
    burn_rate: float
    burn_factors: AnodeBurnFactors
    shield_life: float
    depletion_percent: float
    mass_remaining: float
    status: AnodeStatus
    naked_years: float
    intervals: tuple[BurnInterval, ...]


def calculate_burn_factors(
    inputs: ForensicInputs, config: TankEngineConfig
) -> AnodeBurnFactors:
    """Collect the anode accelerants present today."""
    return AnodeBurnFactors(
        softener=config.burn_softener if inputs.has_softener else 1.0,
        galvanic=(
            config.burn_galvanic
            if inputs.connection_type is ConnectionType.DIRECT_COPPER
            else 1.0
        ),
        recirc=config.burn_recirc if inputs.has_circ_pump else 1.0,
        chloramine=(
            config.burn_chloramine
            if inputs.sanitizer_type is SanitizerType.CHLORAMINE
            else 1.0
        ),
    )


def _clamp_rate(rate: float, config: TankEngineConfig) -> float:
    return max(config.min_rate_floor, min(rate, config.burn_rate_cap))


def build_burn_intervals(
    inputs: ForensicInputs, factors: AnodeBurnFactors, config: TankEngineConfig
) -> tuple[BurnInterval, ...]:
    """Decompose the current anode's life into constant-rate intervals.

    When a softener was installed partway through, the years before it
    burn at the historical rate and only the remainder at today's rate.

    Args:
        inputs: Inspection snapshot
        factors: Accelerants present today
        config: Tank tuning constants

    Returns:
        Burn intervals ordered oldest first, empty intervals dropped
    """
    anode_age = _anode_age(inputs)
    current_rate = _clamp_rate(factors.combined, config)

    pre_softener = 0.0
    if inputs.has_softener and inputs.years_without_softener:
        pre_softener = min(inputs.years_without_softener, anode_age)

    intervals = []
    if pre_softener > 0:
        historical_rate = _clamp_rate(factors.combined / factors.softener, config)
        intervals.append(BurnInterval(duration=pre_softener, rate=historical_rate))
    remaining = anode_age - pre_softener
    if remaining > 0:
        intervals.append(BurnInterval(duration=remaining, rate=current_rate))
    return tuple(intervals)


def _anode_age(inputs: ForensicInputs) -> float:
    if inputs.last_anode_replace_years_ago is None:
        return inputs.calendar_age
    return min(inputs.last_anode_replace_years_ago, inputs.calendar_age)


def _depletion_time(intervals: tuple[BurnInterval, ...], capacity: float) -> float | None:
    """Years into the anode's life at which it was fully consumed, if ever."""
    remaining = capacity
    elapsed = 0.0
    for interval in intervals:
        if interval.consumed >= remaining:
            return elapsed + remaining / interval.rate
        remaining -= interval.consumed
        elapsed += interval.duration
    return None


def _status_for(depletion_percent: float, config: TankEngineConfig) -> AnodeStatus:
    if depletion_percent >= 100.0:
        return AnodeStatus.NAKED
    if depletion_percent >= config.anode_replace_percent:
        return AnodeStatus.REPLACE
    if depletion_percent >= config.anode_inspect_percent:
        return AnodeStatus.INSPECT
    return AnodeStatus.PROTECTED


def anode_capacity(
    inputs: ForensicInputs, tier: TierProfile, config: TankEngineConfig
) -> float:
    """Anode mass in years of nominal burn for the tier or reported rod count."""
    if tier.anode_type.is_extended or inputs.anode_count == 2:
        return config.anode_capacity_dual
    return config.anode_capacity_single


def calculate_anode_state(
    inputs: ForensicInputs, tier: TierProfile, config: TankEngineConfig
) -> AnodeState:
    """Compute remaining shield life and the unprotected time of the vessel.

    Remaining shield life = max(0, (capacity - consumed) / current rate).
    Years run with no anode at all are added to the time the current
    anode has been depleted; the total is clamped to the unit's age.

    Args:
        inputs: Inspection snapshot
        tier: Quality tier the unit was detected as
        config: Tank tuning constants

    Returns:
        Anode condition and the vessel's naked years
    """
    capacity = anode_capacity(inputs, tier, config)
    factors = calculate_burn_factors(inputs, config)
    burn_rate = _clamp_rate(factors.combined, config)
    intervals = build_burn_intervals(inputs, factors, config)

    consumed = sum(interval.consumed for interval in intervals)
    shield_life = max(0.0, (capacity - consumed) / burn_rate)
    depletion_percent = min(100.0, consumed / capacity * 100.0)
    mass_remaining = max(0.0, 1.0 - consumed / capacity)

    naked_years = 0.0
    depleted_at = _depletion_time(intervals, capacity)
    if depleted_at is not None:
        naked_years = _anode_age(inputs) - depleted_at
    if inputs.years_without_anode:
        naked_years += inputs.years_without_anode
    naked_years = min(max(0.0, naked_years), inputs.calendar_age)

    state = AnodeState(
        capacity=capacity,
        consumed=consumed,
        burn_rate=burn_rate,
        burn_factors=factors,
        shield_life=shield_life,
        depletion_percent=depletion_percent,
        mass_remaining=mass_remaining,
        status=_status_for(depletion_percent, config),
        naked_years=naked_years,
        intervals=intervals,
    )
    logger.debug(
        f"Anode state: capacity={capacity:.1f}, consumed={consumed:.2f}, "
        f"rate={burn_rate:.2f}, shield_life={shield_life:.2f}, "
        f"naked_years={naked_years:.2f}, status={state.status.value}"
    )
    return state
