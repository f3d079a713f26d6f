"""Quality tier catalog.

Static reference records keyed by quality tier. Profiles are looked up,
never computed; the warranty length on the data plate selects the tier.
"""

from dataclasses import dataclass
from enum import Enum

from .equipment_types import FuelType
from .forensic_inputs import ForensicInputs


class QualityTier(str, Enum):
    """Manufacturer quality tier."""

    BUILDER = "BUILDER"
    STANDARD = "STANDARD"
    PROFESSIONAL = "PROFESSIONAL"
    PREMIUM = "PREMIUM"


class VentType(str, Enum):
    """Combustion venting type."""

    ATMOSPHERIC = "ATMOSPHERIC"
    POWER_VENT = "POWER_VENT"
    DIRECT_VENT = "DIRECT_VENT"


class InsulationQuality(str, Enum):
    """Jacket insulation grade."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"


class AnodeType(str, Enum):
    """Anode configuration shipped with the tank."""

    SINGLE = "SINGLE"
    SINGLE_LARGE = "SINGLE_LARGE"
    DUAL = "DUAL"
    POWERED = "POWERED"

    @property
    def is_extended(self) -> bool:
        """Whether the configuration carries roughly double anode mass."""
        return self in (AnodeType.DUAL, AnodeType.POWERED)


class FailureMode(str, Enum):
    """Typical way the tier fails at end of life."""

    CATASTROPHIC = "CATASTROPHIC"
    GRADUAL = "GRADUAL"
    SLOW_LEAK = "SLOW_LEAK"
    CONTROLLED = "CONTROLLED"


@dataclass(frozen=True)
class TierProfile:
    """Catalog record for one quality tier.

    Attributes:
        tier: Quality tier key
        tier_label: Display label
        warranty_years: Typical warranty for the tier
        vent_type: Typical venting
        features: Marketing feature list
        insulation_quality: Jacket insulation grade
        anode_type: Anode configuration
        failure_mode: Typical end-of-life failure
        expected_life: Expected service life in years
        base_cost_gas: Baseline installed cost, gas
        base_cost_electric: Baseline installed cost, electric
        base_cost_hybrid: Baseline installed cost, heat pump (0 if not offered)
    """

    tier: QualityTier
    tier_label: str
    warranty_years: int
    vent_type: VentType
    features: tuple[str, ...]
    insulation_quality: InsulationQuality
    anode_type: AnodeType
    failure_mode: FailureMode
    expected_life: int
    base_cost_gas: int
    base_cost_electric: int
    base_cost_hybrid: int

    def __post_init__(self) -> None:
        """Validate tier profile values."""
        if not self.tier_label:
            raise ValueError("tier_label cannot be empty")
        if self.warranty_years <= 0:
            raise ValueError(f"warranty_years must be positive, got {self.warranty_years}")
        if self.expected_life <= 0:
            raise ValueError(f"expected_life must be positive, got {self.expected_life}")
        for name in ("base_cost_gas", "base_cost_electric", "base_cost_hybrid"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def base_cost(self, fuel_type: FuelType) -> int:
        """Baseline like-for-like cost for the given fuel type."""
        if fuel_type in (FuelType.ELECTRIC, FuelType.TANKLESS_ELECTRIC):
            return self.base_cost_electric
        if fuel_type is FuelType.HYBRID:
            return self.base_cost_hybrid
        return self.base_cost_gas


TIER_PROFILES: dict[QualityTier, TierProfile] = {
    QualityTier.BUILDER: TierProfile(
        tier=QualityTier.BUILDER,
        tier_label="Builder Grade",
        warranty_years=6,
        vent_type=VentType.ATMOSPHERIC,
        features=("Basic glass-lined tank", "Single anode rod", "Standard thermostat"),
        insulation_quality=InsulationQuality.LOW,
        anode_type=AnodeType.SINGLE,
        failure_mode=FailureMode.CATASTROPHIC,
        expected_life=10,
        base_cost_gas=1400,
        base_cost_electric=1200,
        base_cost_hybrid=2800,
    ),
    QualityTier.STANDARD: TierProfile(
        tier=QualityTier.STANDARD,
        tier_label="Standard",
        warranty_years=9,
        vent_type=VentType.ATMOSPHERIC,
        features=("Premium glass lining", "Larger anode rod", "Self-cleaning dip tube"),
        insulation_quality=InsulationQuality.MEDIUM,
        anode_type=AnodeType.SINGLE_LARGE,
        failure_mode=FailureMode.GRADUAL,
        expected_life=12,
        base_cost_gas=1900,
        base_cost_electric=1600,
        base_cost_hybrid=3400,
    ),
    QualityTier.PROFESSIONAL: TierProfile(
        tier=QualityTier.PROFESSIONAL,
        tier_label="Professional",
        warranty_years=12,
        vent_type=VentType.ATMOSPHERIC,
        features=(
            "Dual anode rods",
            "High-recovery burner",
            "Brass drain valve",
            "Commercial-grade thermostat",
        ),
        insulation_quality=InsulationQuality.HIGH,
        anode_type=AnodeType.DUAL,
        failure_mode=FailureMode.SLOW_LEAK,
        expected_life=14,
        base_cost_gas=2600,
        base_cost_electric=2200,
        base_cost_hybrid=4200,
    ),
    QualityTier.PREMIUM: TierProfile(
        tier=QualityTier.PREMIUM,
        tier_label="Premium / Lifetime",
        warranty_years=15,
        vent_type=VentType.ATMOSPHERIC,
        features=(
            "Stainless steel tank OR Lifetime warranty",
            "Powered anode",
            "WiFi monitoring",
            "Leak detection",
        ),
        insulation_quality=InsulationQuality.VERY_HIGH,
        anode_type=AnodeType.POWERED,
        failure_mode=FailureMode.CONTROLLED,
        expected_life=18,
        base_cost_gas=3500,
        base_cost_electric=3000,
        base_cost_hybrid=5200,
    ),
}

TANKLESS_TIER_PROFILES: dict[QualityTier, TierProfile] = {
    QualityTier.BUILDER: TierProfile(
        tier=QualityTier.BUILDER,
        tier_label="Economy Tankless",
        warranty_years=5,
        vent_type=VentType.ATMOSPHERIC,
        features=("Basic heat exchanger", "Standard ignition", "Manual controls"),
        insulation_quality=InsulationQuality.LOW,
        anode_type=AnodeType.SINGLE,
        failure_mode=FailureMode.CATASTROPHIC,
        expected_life=12,
        base_cost_gas=2400,
        base_cost_electric=1800,
        base_cost_hybrid=0,
    ),
    QualityTier.STANDARD: TierProfile(
        tier=QualityTier.STANDARD,
        tier_label="Standard Tankless",
        warranty_years=10,
        vent_type=VentType.DIRECT_VENT,
        features=("Copper heat exchanger", "Electronic ignition", "Digital display"),
        insulation_quality=InsulationQuality.MEDIUM,
        anode_type=AnodeType.SINGLE,
        failure_mode=FailureMode.GRADUAL,
        expected_life=15,
        base_cost_gas=3200,
        base_cost_electric=2400,
        base_cost_hybrid=0,
    ),
    QualityTier.PROFESSIONAL: TierProfile(
        tier=QualityTier.PROFESSIONAL,
        tier_label="Professional Tankless",
        warranty_years=12,
        vent_type=VentType.DIRECT_VENT,
        features=(
            "Premium copper HX",
            "Built-in recirculation",
            "WiFi connectivity",
            "Error diagnostics",
        ),
        insulation_quality=InsulationQuality.HIGH,
        anode_type=AnodeType.DUAL,
        failure_mode=FailureMode.SLOW_LEAK,
        expected_life=18,
        base_cost_gas=4200,
        base_cost_electric=3200,
        base_cost_hybrid=0,
    ),
    QualityTier.PREMIUM: TierProfile(
        tier=QualityTier.PREMIUM,
        tier_label="Premium Tankless",
        warranty_years=15,
        vent_type=VentType.DIRECT_VENT,
        features=(
            "Commercial-grade HX",
            "Condensing technology",
            "Smart home integration",
            "Leak detection",
        ),
        insulation_quality=InsulationQuality.VERY_HIGH,
        anode_type=AnodeType.POWERED,
        failure_mode=FailureMode.CONTROLLED,
        expected_life=20,
        base_cost_gas=5500,
        base_cost_electric=4200,
        base_cost_hybrid=0,
    ),
}


def detect_quality_tier(inputs: ForensicInputs) -> TierProfile:
    """Select the catalog tier implied by the warranty on the data plate.

    Tankless units are matched against their own catalog.

    Args:
        inputs: Inspection snapshot

    Returns:
        The matching tier profile
    """
    warranty_years = inputs.warranty_years
    if inputs.fuel_type.is_tankless:
        if warranty_years >= 12:
            return TANKLESS_TIER_PROFILES[QualityTier.PROFESSIONAL]
        if warranty_years >= 7:
            return TANKLESS_TIER_PROFILES[QualityTier.STANDARD]
        return TANKLESS_TIER_PROFILES[QualityTier.BUILDER]

    if warranty_years >= 15:
        return TIER_PROFILES[QualityTier.PREMIUM]
    if warranty_years >= 12:
        return TIER_PROFILES[QualityTier.PROFESSIONAL]
    if warranty_years >= 8:
        return TIER_PROFILES[QualityTier.STANDARD]
    return TIER_PROFILES[QualityTier.BUILDER]
