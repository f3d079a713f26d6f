"""Forensic inputs value object.

Immutable snapshot of everything observed about one water heater during
an inspection. The engines are pure functions of this snapshot.
"""

from dataclasses import dataclass

from .equipment_types import (
    AirFilterStatus,
    ConnectionType,
    ExpansionTankStatus,
    FlameRodStatus,
    FuelType,
    GasLineSize,
    InletFilterStatus,
    LocationType,
    RoomVolumeType,
    SanitizerType,
    SoftenerSaltStatus,
    TempSetting,
    UsageType,
    VentStatus,
)


@dataclass(frozen=True)
class ForensicInputs:
    """Inspection snapshot for a single appliance.

    Which optional fields are meaningful depends on ``fuel_type``: the
    tankless fields are read only by the tankless engine and the heat-pump
    fields only by the hybrid engine. This is a documented contract and is
    not cross-validated.

    Attributes:
        calendar_age: Years since installation
        house_psi: Static supply pressure read at a gauge (PSI)
        hardness_gpg: Regional/street water hardness in grains per gallon
        fuel_type: Appliance family
        warranty_years: Manufacturer tank warranty, used to infer quality tier
        temp_setting: Thermostat band
        location: Install location
        is_finished_area: Whether the install area is finished (drywall/flooring)
        street_hardness_gpg: Hardness from a geolocation lookup (overrides hardness_gpg)
        measured_hardness_gpg: Hardness measured on site with a test strip
        people_count: Household occupancy
        usage_type: Usage pattern
        tank_capacity: Storage volume in gallons (0 for tankless)
        has_softener: Whole-house softener present
        softener_salt_status: Brine tank salt level
        sanitizer_type: Municipal disinfectant
        has_circ_pump: Recirculation pump present
        has_exp_tank: Thermal expansion tank present
        exp_tank_status: Expansion tank condition, when inspected
        has_prv: Pressure-reducing valve present
        is_closed_loop: Check valve or backflow preventer present
        has_drain_pan: Drain pan under the unit
        visual_rust: Visible corrosion on the vessel
        is_leaking: Active leak observed
        connection_type: Supply connection fitting type
        anode_count: Number of anode rods, when known
        last_anode_replace_years_ago: Years since the anode was replaced
        last_flush_years_ago: Years since the tank was last flushed
        is_annually_maintained: Owner reports yearly service
        years_without_anode: Years the vessel ran with no anode installed
        years_without_softener: Years of the current anode's life before the
            softener was installed
        air_filter_status: Heat-pump intake filter condition
        is_condensate_clear: Heat-pump condensate drain state (None = not inspected)
        compressor_health: Heat-pump compressor health 0-100
        room_volume_type: Heat-pump enclosure type
        flow_rate_gpm: Measured tankless flow
        rated_flow_gpm: Nameplate tankless flow
        last_descale_years_ago: Years since the heat exchanger was descaled
        igniter_health: Igniter health 0-100
        flame_rod_status: Flame sensor condition
        element_health: Electric tankless element health 0-100
        inlet_filter_status: Inlet screen condition
        has_recirculation_loop: Tankless recirculation loop present
        error_code_count: Stored diagnostic codes
        tankless_vent_status: Exhaust vent condition
        has_isolation_valves: Service isolation valves installed
        gas_line_size: Gas supply line diameter
        btu_rating: Burner input rating
        manufacturer: Brand name, when known
        model_number: Model number, when known
    """

    calendar_age: float
    house_psi: float
    hardness_gpg: float
    fuel_type: FuelType = FuelType.GAS
    warranty_years: float = 6.0
    temp_setting: TempSetting = TempSetting.NORMAL
    location: LocationType = LocationType.GARAGE
    is_finished_area: bool = False

    # Hardness signals
    street_hardness_gpg: float | None = None
    measured_hardness_gpg: float | None = None

    # Usage calibration
    people_count: int = 3
    usage_type: UsageType = UsageType.NORMAL
    tank_capacity: float = 50.0

    # Equipment flags
    has_softener: bool = False
    softener_salt_status: SoftenerSaltStatus = SoftenerSaltStatus.UNKNOWN
    sanitizer_type: SanitizerType = SanitizerType.UNKNOWN
    has_circ_pump: bool = False
    has_exp_tank: bool = False
    exp_tank_status: ExpansionTankStatus | None = None
    has_prv: bool = False
    is_closed_loop: bool = False
    has_drain_pan: bool = False
    connection_type: ConnectionType = ConnectionType.DIELECTRIC
    anode_count: int | None = None

    # Visual inspection
    visual_rust: bool = False
    is_leaking: bool = False

    # Service history
    last_anode_replace_years_ago: float | None = None
    last_flush_years_ago: float | None = None
    is_annually_maintained: bool = False
    years_without_anode: float | None = None
    years_without_softener: float | None = None

    # Hybrid (heat pump)
    air_filter_status: AirFilterStatus | None = None
    is_condensate_clear: bool | None = None
    compressor_health: float | None = None
    room_volume_type: RoomVolumeType | None = None

    # Tankless
    flow_rate_gpm: float | None = None
    rated_flow_gpm: float | None = None
    last_descale_years_ago: float | None = None
    igniter_health: float | None = None
    flame_rod_status: FlameRodStatus | None = None
    element_health: float | None = None
    inlet_filter_status: InletFilterStatus | None = None
    has_recirculation_loop: bool = False
    error_code_count: int = 0
    tankless_vent_status: VentStatus | None = None
    has_isolation_valves: bool = False
    gas_line_size: GasLineSize | None = None
    btu_rating: float | None = None

    # Asset identification
    manufacturer: str | None = None
    model_number: str | None = None

    def __post_init__(self) -> None:
        """Validate forensic input values."""
        if self.calendar_age < 0:
            raise ValueError(f"calendar_age must be non-negative, got {self.calendar_age}")
        if self.house_psi < 0:
            raise ValueError(f"house_psi must be non-negative, got {self.house_psi}")
        if self.hardness_gpg < 0:
            raise ValueError(f"hardness_gpg must be non-negative, got {self.hardness_gpg}")
        if self.warranty_years < 0:
            raise ValueError(f"warranty_years must be non-negative, got {self.warranty_years}")
        if self.people_count < 0:
            raise ValueError(f"people_count must be non-negative, got {self.people_count}")
        if self.tank_capacity < 0:
            raise ValueError(f"tank_capacity must be non-negative, got {self.tank_capacity}")
        if self.error_code_count < 0:
            raise ValueError(
                f"error_code_count must be non-negative, got {self.error_code_count}"
            )
        for name in (
            "street_hardness_gpg",
            "measured_hardness_gpg",
            "last_anode_replace_years_ago",
            "last_flush_years_ago",
            "years_without_anode",
            "years_without_softener",
            "last_descale_years_ago",
            "flow_rate_gpm",
            "rated_flow_gpm",
            "btu_rating",
        ):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        for name in ("compressor_health", "igniter_health", "element_health"):
            value = getattr(self, name)
            if value is not None and not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")
        if self.anode_count is not None and self.anode_count not in (1, 2):
            raise ValueError(f"anode_count must be 1 or 2, got {self.anode_count}")

    @property
    def is_actually_closed(self) -> bool:
        """Whether pressure cannot relieve back into the supply main.

        A PRV acts as a check valve, so its presence closes the loop even
        when no backflow preventer was reported.
        """
        return self.is_closed_loop or self.has_prv

    @property
    def has_functional_exp_tank(self) -> bool:
        """Whether an expansion tank is present and able to absorb expansion."""
        if not self.has_exp_tank:
            return False
        return self.exp_tank_status not in (
            ExpansionTankStatus.WATERLOGGED,
            ExpansionTankStatus.MISSING,
        )
