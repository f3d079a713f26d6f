"""Equipment and site classification types.

Enumerations describing the appliance, its installation and the
observations made during a field inspection.
"""

from enum import Enum


class FuelType(str, Enum):
    """Appliance family discriminator.

    Attributes:
        GAS: Gas-fired storage tank
        ELECTRIC: Electric-element storage tank
        HYBRID: Heat-pump storage tank
        TANKLESS_GAS: Gas-fired on-demand unit
        TANKLESS_ELECTRIC: Electric on-demand unit
    """

    GAS = "GAS"
    ELECTRIC = "ELECTRIC"
    HYBRID = "HYBRID"
    TANKLESS_GAS = "TANKLESS_GAS"
    TANKLESS_ELECTRIC = "TANKLESS_ELECTRIC"

    @property
    def is_tankless(self) -> bool:
        """Whether the unit heats on demand without a storage vessel."""
        return self in (FuelType.TANKLESS_GAS, FuelType.TANKLESS_ELECTRIC)

    @property
    def is_hybrid(self) -> bool:
        """Whether the unit is a heat-pump storage tank."""
        return self is FuelType.HYBRID

    @property
    def is_standard_tank(self) -> bool:
        """Whether the unit is a plain gas or electric storage tank."""
        return self in (FuelType.GAS, FuelType.ELECTRIC)


class TempSetting(str, Enum):
    """Thermostat setting band (LOW ~110°F, NORMAL ~120°F, HOT 140°F+)."""

    LOW = "LOW"
    NORMAL = "NORMAL"
    HOT = "HOT"


class LocationType(str, Enum):
    """Where the appliance is installed."""

    ATTIC = "ATTIC"
    UPPER_FLOOR = "UPPER_FLOOR"
    MAIN_LIVING = "MAIN_LIVING"
    BASEMENT = "BASEMENT"
    GARAGE = "GARAGE"
    EXTERIOR = "EXTERIOR"
    CRAWLSPACE = "CRAWLSPACE"


class UsageType(str, Enum):
    """Household hot-water usage pattern."""

    LIGHT = "light"
    NORMAL = "normal"
    HEAVY = "heavy"


class RiskLevel(int, Enum):
    """Water-damage consequence of a failure at the install location."""

    LOW = 1
    MODERATE = 2
    HIGH = 3
    EXTREME = 4


class SoftenerSaltStatus(str, Enum):
    """Observed salt level in the softener brine tank."""

    OK = "OK"
    EMPTY = "EMPTY"
    UNKNOWN = "UNKNOWN"


class SanitizerType(str, Enum):
    """Municipal disinfectant in the supply water."""

    CHLORINE = "CHLORINE"
    CHLORAMINE = "CHLORAMINE"
    UNKNOWN = "UNKNOWN"


class ExpansionTankStatus(str, Enum):
    """Condition of the thermal expansion tank."""

    FUNCTIONAL = "FUNCTIONAL"
    WATERLOGGED = "WATERLOGGED"
    MISSING = "MISSING"


class ConnectionType(str, Enum):
    """Fitting between the supply piping and the tank nipples."""

    DIELECTRIC = "DIELECTRIC"
    BRASS = "BRASS"
    DIRECT_COPPER = "DIRECT_COPPER"


class AirFilterStatus(str, Enum):
    """Heat-pump intake filter condition."""

    CLEAN = "CLEAN"
    DIRTY = "DIRTY"
    CLOGGED = "CLOGGED"


class RoomVolumeType(str, Enum):
    """Air volume available to a heat-pump unit."""

    OPEN = "OPEN"
    CLOSET_LOUVERED = "CLOSET_LOUVERED"
    CLOSET_SEALED = "CLOSET_SEALED"


class InletFilterStatus(str, Enum):
    """Tankless cold-water inlet screen condition."""

    CLEAN = "CLEAN"
    DIRTY = "DIRTY"
    CLOGGED = "CLOGGED"


class FlameRodStatus(str, Enum):
    """Tankless flame sensor condition."""

    GOOD = "GOOD"
    WORN = "WORN"
    FAILING = "FAILING"


class VentStatus(str, Enum):
    """Tankless exhaust vent condition."""

    CLEAR = "CLEAR"
    RESTRICTED = "RESTRICTED"
    BLOCKED = "BLOCKED"


class GasLineSize(str, Enum):
    """Nominal gas supply line diameter in inches."""

    HALF_INCH = "1/2"
    THREE_QUARTER_INCH = "3/4"
    ONE_INCH = "1"
