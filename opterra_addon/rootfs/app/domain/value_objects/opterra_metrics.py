"""Opterra metrics value objects.

Immutable output snapshot of one assessment: biological age, failure
probability, health score, the stress breakdown that produced them and
the fuel-specific extensions.
"""

from dataclasses import dataclass
from enum import Enum

from .equipment_types import RiskLevel
from .resolved_hardness import ResolvedHardness


class AnodeStatus(str, Enum):
    """Sacrificial anode condition band by depletion percent."""

    PROTECTED = "protected"
    INSPECT = "inspect"
    REPLACE = "replace"
    NAKED = "naked"


class FlushStatus(str, Enum):
    """Tank sediment maintenance band."""

    OPTIMAL = "optimal"
    ADVISORY = "advisory"
    DUE = "due"
    CRITICAL = "critical"
    LOCKOUT = "lockout"


class DescaleStatus(str, Enum):
    """Tankless heat exchanger maintenance band.

    Attributes:
        OPTIMAL: Scale below the due band
        DUE: Descale recommended
        CRITICAL: Descale urgently
        LOCKOUT: Descaling could perforate the exchanger; replace instead
        IMPOSSIBLE: Fouled but no isolation valves to connect a descale pump
        RUN_TO_FAILURE: Old, hard-water unit never serviced; leave alone
    """

    OPTIMAL = "optimal"
    DUE = "due"
    CRITICAL = "critical"
    LOCKOUT = "lockout"
    IMPOSSIBLE = "impossible"
    RUN_TO_FAILURE = "run_to_failure"


@dataclass(frozen=True)
class StressFactors:
    """Named stress multipliers behind the biological age.

    Each factor is 1.0 when neutral. Factors below 1.0 only appear for
    protective configurations such as a LOW thermostat setting.

    Attributes:
        total: Combined stress with the anode depleted, capped
        mechanical: Anode-independent stress (pressure, sediment, half temp)
        chemical: Anode-suppressible stress (half temp, circulation, loop)
        pressure: Quadratic stress from effective pressure above the safe limit
        temp: Full thermostat stress
        temp_mechanical: Mechanical half of the thermostat stress
        temp_chemical: Chemical half of the thermostat stress
        circ: Recirculation erosion-corrosion
        loop: Closed-loop thermal expansion cycling
        sediment: Sediment hot-spotting
        usage_intensity: Household usage relative to the reference household
        scale: Tankless heat exchanger scale stress
        cycle: Tankless burner cycling wear
    """

    total: float
    mechanical: float = 1.0
    chemical: float = 1.0
    pressure: float = 1.0
    temp: float = 1.0
    temp_mechanical: float = 1.0
    temp_chemical: float = 1.0
    circ: float = 1.0
    loop: float = 1.0
    sediment: float = 1.0
    usage_intensity: float = 1.0
    scale: float = 1.0
    cycle: float = 1.0

    def __post_init__(self) -> None:
        """Validate stress factors."""
        for name in (
            "total",
            "mechanical",
            "chemical",
            "pressure",
            "temp",
            "temp_mechanical",
            "temp_chemical",
            "circ",
            "loop",
            "sediment",
            "usage_intensity",
            "scale",
            "cycle",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class AnodeBurnFactors:
    """Independent accelerants of anode consumption (1.0 = inactive)."""

    softener: float = 1.0
    galvanic: float = 1.0
    recirc: float = 1.0
    chloramine: float = 1.0

    @property
    def combined(self) -> float:
        """Uncapped product of all burn multipliers."""
        return self.softener * self.galvanic * self.recirc * self.chloramine

    @property
    def active(self) -> list[str]:
        """Names of the accelerants currently above 1.0."""
        return [
            name
            for name in ("softener", "galvanic", "recirc", "chloramine")
            if getattr(self, name) > 1.0
        ]


@dataclass(frozen=True)
class RiskLevelInfo:
    """Display metadata for a location risk level."""

    level: RiskLevel
    label: str
    color: str
    description: str


@dataclass(frozen=True)
class OpterraMetrics:
    """Metrics computed from one forensic input snapshot.

    Tank and hybrid units populate the anode and sediment extensions;
    tankless units populate the scale, descale and flow extensions.
    Extensions that do not apply to the fuel type are None.

    Attributes:
        bio_age: Wear-adjusted age in years
        fail_prob: One-year conditional failure probability (0-100)
        health_score: Severity-curve score (0-100)
        stress_factors: Attributed stress breakdown
        effective_pressure: Modeled peak pressure including thermal spikes (PSI)
        is_transient_pressure: Effective pressure exceeds the static reading
        hardness: Resolved water hardness
        risk_level: Water-damage consequence of the install location
        aging_rate: Current aging speed (years of wear per calendar year)
        optimized_aging_rate: Aging speed with pressure and loop issues fixed
        years_left_current: Remaining modeled life at the current rate
        years_left_optimized: Remaining modeled life at the optimized rate
        life_extension: Years gained by fixing pressure issues
        primary_stressor: Human-readable name of the dominant stressor
        shield_life: Remaining anode protection in years (tank/hybrid)
        anode_depletion_percent: Consumed share of the anode mass (tank/hybrid)
        anode_status: Anode condition band (tank/hybrid)
        anode_mass_remaining: Remaining anode mass fraction 0-1 (tank/hybrid)
        anode_burn_rate: Current capped burn rate (tank/hybrid)
        anode_burn_factors: Active accelerants (tank/hybrid)
        sediment_lbs: Modeled sediment load (tank/hybrid)
        sediment_rate: Sediment accumulation per year (tank/hybrid)
        months_to_flush: Months until the flush band, None once reached
        months_to_lockout: Months until lockout, None once reached
        flush_status: Sediment maintenance band (tank/hybrid)
        scale_buildup_score: Heat exchanger blockage percent (tankless)
        descale_status: Descale band (tankless)
        flow_degradation: Lost flow versus nameplate in percent (tankless)
        hybrid_efficiency: Heat-pump efficiency score 0-100 (hybrid)
    """

    bio_age: float
    fail_prob: float
    health_score: int
    stress_factors: StressFactors
    effective_pressure: float
    is_transient_pressure: bool
    hardness: ResolvedHardness
    risk_level: RiskLevel
    aging_rate: float = 1.0
    optimized_aging_rate: float = 1.0
    years_left_current: float = 0.0
    years_left_optimized: float = 0.0
    life_extension: float = 0.0
    primary_stressor: str = "Normal Wear"

    # Tank / hybrid
    shield_life: float | None = None
    anode_depletion_percent: float | None = None
    anode_status: AnodeStatus | None = None
    anode_mass_remaining: float | None = None
    anode_burn_rate: float | None = None
    anode_burn_factors: AnodeBurnFactors | None = None
    sediment_lbs: float | None = None
    sediment_rate: float | None = None
    months_to_flush: int | None = None
    months_to_lockout: int | None = None
    flush_status: FlushStatus | None = None

    # Tankless
    scale_buildup_score: float | None = None
    descale_status: DescaleStatus | None = None
    flow_degradation: float | None = None

    # Hybrid
    hybrid_efficiency: float | None = None

    def __post_init__(self) -> None:
        """Validate metric ranges."""
        if self.bio_age < 0:
            raise ValueError(f"bio_age must be non-negative, got {self.bio_age}")
        if not 0.0 <= self.fail_prob <= 100.0:
            raise ValueError(f"fail_prob must be between 0 and 100, got {self.fail_prob}")
        if not 0 <= self.health_score <= 100:
            raise ValueError(
                f"health_score must be between 0 and 100, got {self.health_score}"
            )
        if self.shield_life is not None and self.shield_life < 0:
            raise ValueError(f"shield_life must be non-negative, got {self.shield_life}")
        if self.scale_buildup_score is not None and not 0.0 <= self.scale_buildup_score <= 100.0:
            raise ValueError(
                f"scale_buildup_score must be between 0 and 100, "
                f"got {self.scale_buildup_score}"
            )

    @property
    def is_tankless(self) -> bool:
        """Whether these metrics carry the tankless extensions."""
        return self.scale_buildup_score is not None
