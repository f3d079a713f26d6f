"""Engine tuning configuration value objects.

Versioned, immutable tuning constants for the risk engines. Decision
logic reads these by name so a retune never touches control flow.
"""

from dataclasses import dataclass, field

from .equipment_types import AirFilterStatus, FuelType, RoomVolumeType


@dataclass(frozen=True)
class WeibullParameters:
    """Weibull reliability parameters for one appliance family.

    Attributes:
        eta: Characteristic life in years (63.2% failure point)
        beta: Shape parameter; values above 2.0 indicate wear-out
        statistical_cap: Maximum failure probability the model may report (%)
        visual_cap: Failure probability forced by physical evidence (%)
        health_score_decay: Steepness of the health score severity curve
    """

    eta: float
    beta: float
    statistical_cap: float = 85.0
    visual_cap: float = 99.9
    health_score_decay: float = 0.04

    def __post_init__(self) -> None:
        """Validate Weibull parameters."""
        if self.eta <= 0:
            raise ValueError(f"eta must be positive, got {self.eta}")
        if self.beta <= 0:
            raise ValueError(f"beta must be positive, got {self.beta}")
        if not 0 < self.statistical_cap <= 100:
            raise ValueError(
                f"statistical_cap must be in (0, 100], got {self.statistical_cap}"
            )
        if not self.statistical_cap <= self.visual_cap <= 100:
            raise ValueError(
                f"visual_cap must be between statistical_cap and 100, got {self.visual_cap}"
            )
        if self.health_score_decay <= 0:
            raise ValueError(
                f"health_score_decay must be positive, got {self.health_score_decay}"
            )


@dataclass(frozen=True)
class TankEngineConfig:
    """Tuning constants for storage-tank (and hybrid) assessment.

    Attributes:
        version: Algorithm version label these constants belong to
        weibull: Failure model parameters
        max_stress_cap: Upper bound on any combined stress multiplier
        max_bio_age: Upper bound on modeled biological age (years)
        chemical_suppression: Fraction of chemical stress excess removed
            while the anode is intact
        min_rate_floor: Minimum positive denominator for rate divisions
        psi_safe_limit: Code maximum static pressure (PSI)
        psi_scalar: Pressure excess normalizer for the quadratic stress term
        psi_quadratic_exp: Exponent of the pressure stress term
        psi_thermal_spike: Modeled peak pressure on a closed loop with no
            working expansion tank (PSI)
        psi_critical: Vessel fatigue threshold (PSI)
        psi_safety_valve: T&P relief valve rating (PSI)
        psi_optimize: Lower bound of the PRV optimization band (PSI)
        softener_ok_hardness_gpg: Hardness behind a softener with salt (GPG)
        softener_unknown_salt_gpg: Ceiling on hardness behind a softener whose
            salt level is unknown (GPG)
        temp_stress_low / temp_stress_normal / temp_stress_hot: Temperature
            stress per thermostat band
        circ_stress: Recirculation erosion-corrosion multiplier
        loop_stress: Closed-loop oxygen cycling multiplier
        sediment_stress_per_lb: Thermal hot-spot stress per pound of sediment
        usage_light / usage_normal / usage_heavy: Usage pattern multipliers
        usage_reference_people: Occupancy that maps to 1.0 usage intensity
        usage_min_occupancy_factor: Floor on the occupancy factor
        usage_intensity_cap: Upper bound on usage intensity
        sediment_factor_gas / sediment_factor_electric / sediment_factor_hybrid:
            Sediment accumulation in lbs per GPG-year
        sediment_temp_low / sediment_temp_normal / sediment_temp_hot:
            Sediment accumulation multipliers per thermostat band
        sediment_advisory_lbs / sediment_flush_lbs / sediment_critical_lbs /
            sediment_lockout_lbs: Sediment bands
        anode_capacity_single / anode_capacity_dual: Anode mass in years of
            nominal burn
        burn_softener / burn_galvanic / burn_recirc / burn_chloramine:
            Anode burn accelerants
        burn_rate_cap: Upper bound on combined anode burn rate
        anode_inspect_percent / anode_replace_percent: Anode status bands
        service_life_years: Modeled service life for remaining-life projection
        failprob_economic_limit: Statistical replacement threshold (%)
        age_max: Absolute age replacement threshold (years)
        failprob_liability_extreme / failprob_liability_high: Replacement
            thresholds for high-consequence locations (%)
        age_aged_unit: Age above which a unit counts as aged (years)
        failprob_fragile / age_fragile: Fragility gate thresholds
        age_anode_refresh_limit: Anode refresh only below this age (years)
        age_young_tank: Young tank override applies at or below this age
        age_pressure_optimize_limit: PRV optimization only below this age
        age_economic_repair_limit: Economic optimizer age threshold (years)
        filter_penalty_dirty / filter_penalty_clogged: Heat-pump efficiency
            lost to the air filter state
        closet_penalty_louvered / closet_penalty_sealed: Heat-pump efficiency
            lost to an enclosed installation
        condensate_penalty: Heat-pump efficiency lost to a blocked drain
    """

    version: str = "9.2"
    weibull: WeibullParameters = field(
        default_factory=lambda: WeibullParameters(eta=11.5, beta=2.2)
    )

    # Caps
    max_stress_cap: float = 12.0
    max_bio_age: float = 50.0
    chemical_suppression: float = 0.9
    min_rate_floor: float = 0.01

    # Pressure physics
    psi_safe_limit: float = 80.0
    psi_scalar: float = 20.0
    psi_quadratic_exp: float = 2.0
    psi_thermal_spike: float = 140.0
    psi_critical: float = 100.0
    psi_safety_valve: float = 150.0
    psi_optimize: float = 65.0

    # Softener credit
    softener_ok_hardness_gpg: float = 0.5
    softener_unknown_salt_gpg: float = 3.0

    # Stress multipliers
    temp_stress_low: float = 0.9
    temp_stress_normal: float = 1.0
    temp_stress_hot: float = 1.5
    circ_stress: float = 1.4
    loop_stress: float = 1.5
    sediment_stress_per_lb: float = 0.05

    # Usage intensity
    usage_light: float = 0.7
    usage_normal: float = 1.0
    usage_heavy: float = 1.3
    usage_reference_people: float = 3.0
    usage_min_occupancy_factor: float = 0.4
    usage_intensity_cap: float = 4.0

    # Sediment accumulation
    sediment_factor_gas: float = 0.044
    sediment_factor_electric: float = 0.08
    sediment_factor_hybrid: float = 0.06
    sediment_temp_low: float = 0.8
    sediment_temp_normal: float = 1.0
    sediment_temp_hot: float = 1.75
    sediment_advisory_lbs: float = 0.5
    sediment_flush_lbs: float = 2.0
    sediment_critical_lbs: float = 5.0
    sediment_lockout_lbs: float = 10.0

    # Anode
    anode_capacity_single: float = 4.0
    anode_capacity_dual: float = 7.5
    burn_softener: float = 3.0
    burn_galvanic: float = 2.5
    burn_recirc: float = 1.25
    burn_chloramine: float = 1.2
    burn_rate_cap: float = 8.0
    anode_inspect_percent: float = 50.0
    anode_replace_percent: float = 75.0

    # Remaining life projection
    service_life_years: float = 20.0

    # Recommendation tiers
    failprob_economic_limit: float = 60.0
    age_max: float = 20.0
    failprob_liability_extreme: float = 20.0
    failprob_liability_high: float = 30.0
    age_aged_unit: float = 10.0
    failprob_fragile: float = 45.0
    age_fragile: float = 10.0
    age_anode_refresh_limit: float = 8.0
    age_young_tank: float = 6.0
    age_pressure_optimize_limit: float = 8.0
    age_economic_repair_limit: float = 10.0

    # Heat-pump efficiency
    filter_penalty_dirty: float = 15.0
    filter_penalty_clogged: float = 40.0
    closet_penalty_louvered: float = 10.0
    closet_penalty_sealed: float = 30.0
    condensate_penalty: float = 5.0

    def __post_init__(self) -> None:
        """Validate tank engine configuration."""
        if not self.version:
            raise ValueError("version cannot be empty")
        if self.max_stress_cap < 1.0:
            raise ValueError(f"max_stress_cap must be at least 1.0, got {self.max_stress_cap}")
        if self.max_bio_age <= 0:
            raise ValueError(f"max_bio_age must be positive, got {self.max_bio_age}")
        if not 0.0 <= self.chemical_suppression <= 1.0:
            raise ValueError(
                f"chemical_suppression must be between 0.0 and 1.0, "
                f"got {self.chemical_suppression}"
            )
        if self.min_rate_floor <= 0:
            raise ValueError(f"min_rate_floor must be positive, got {self.min_rate_floor}")
        if self.psi_scalar <= 0:
            raise ValueError(f"psi_scalar must be positive, got {self.psi_scalar}")
        if not self.psi_safe_limit < self.psi_critical < self.psi_safety_valve:
            raise ValueError(
                "pressure limits must satisfy psi_safe_limit < psi_critical < psi_safety_valve"
            )
        if not (
            self.sediment_advisory_lbs
            <= self.sediment_flush_lbs
            <= self.sediment_critical_lbs
            <= self.sediment_lockout_lbs
        ):
            raise ValueError("sediment bands must be non-decreasing")
        if self.anode_capacity_single <= 0 or self.anode_capacity_dual <= 0:
            raise ValueError("anode capacities must be positive")
        if self.burn_rate_cap < 1.0:
            raise ValueError(f"burn_rate_cap must be at least 1.0, got {self.burn_rate_cap}")
        if not 0 < self.anode_inspect_percent < self.anode_replace_percent < 100:
            raise ValueError("anode status bands must satisfy 0 < inspect < replace < 100")
        if self.service_life_years <= 0:
            raise ValueError(
                f"service_life_years must be positive, got {self.service_life_years}"
            )
        if not 0 <= self.softener_ok_hardness_gpg <= self.softener_unknown_salt_gpg:
            raise ValueError(
                "softener credit must satisfy 0 <= softener_ok_hardness_gpg "
                "<= softener_unknown_salt_gpg"
            )
        if not 0 <= self.filter_penalty_dirty <= self.filter_penalty_clogged <= 100:
            raise ValueError("filter penalties must satisfy 0 <= dirty <= clogged <= 100")
        if not 0 <= self.closet_penalty_louvered <= self.closet_penalty_sealed <= 100:
            raise ValueError("closet penalties must satisfy 0 <= louvered <= sealed <= 100")
        if not 0 <= self.condensate_penalty <= 100:
            raise ValueError(
                f"condensate_penalty must be between 0 and 100, got {self.condensate_penalty}"
            )

    def filter_penalty(self, status: AirFilterStatus) -> float:
        """Efficiency points lost to the heat-pump air filter state."""
        if status is AirFilterStatus.CLOGGED:
            return self.filter_penalty_clogged
        if status is AirFilterStatus.DIRTY:
            return self.filter_penalty_dirty
        return 0.0

    def closet_penalty(self, room: RoomVolumeType) -> float:
        """Efficiency points lost to the heat-pump enclosure."""
        if room is RoomVolumeType.CLOSET_SEALED:
            return self.closet_penalty_sealed
        if room is RoomVolumeType.CLOSET_LOUVERED:
            return self.closet_penalty_louvered
        return 0.0

    def is_flush_serviceable(self, sediment_lbs: float) -> bool:
        """Whether a sediment load is in the band where a flush helps and is safe."""
        return self.sediment_flush_lbs <= sediment_lbs <= self.sediment_lockout_lbs


@dataclass(frozen=True)
class TanklessEngineConfig:
    """Tuning constants for on-demand (tankless) assessment.

    Attributes:
        version: Algorithm version label these constants belong to
        weibull_gas / weibull_electric: Failure model per fuel
        max_stress_cap: Upper bound on combined stress
        max_bio_age: Upper bound on modeled biological age (years)
        min_rate_floor: Minimum positive denominator for rate divisions
        usage_light / usage_normal / usage_heavy: Usage pattern multipliers
        usage_reference_people: Occupancy that maps to 1.0 cycling
        usage_min_occupancy_factor: Floor on the occupancy factor
        recirc_cycle_multiplier: Extra firing cycles from recirculation
        cycle_intensity_cap: Upper bound on cycle intensity
        cycle_wear_per_unit: Stress per unit of cycle intensity above 1.0
        softened_hardness_threshold: Below this, softened water is near-inert
        softened_effective_hardness: Hardness used for softened water (GPG)
        softener_ok_hardness_gpg: Hardness behind a softener with salt (GPG)
        softener_unknown_salt_gpg: Ceiling on hardness behind a softener whose
            salt level is unknown (GPG)
        scale_factor_gas / scale_factor_electric: Fuel scaling factors
        scale_temp_hot: Scale multiplier for HOT setting
        scale_saturation: Raw scale index giving ~63% blockage
        residual_scar_fraction: Share of a neglected interval's scale that
            survives a later descale
        neglect_interval_years: Interval length that counts as neglect
        scale_due_percent / scale_critical_percent / scale_lockout_percent:
            Descale bands
        scale_stress_divisor: Normalizer of the scale stress term
        temp_stress_hot: Heat exchanger stress at HOT setting
        psi_safe_limit: Static pressure above which pressure stress applies
        psi_scalar: Pressure excess normalizer for the quadratic stress term
        psi_quadratic_exp: Exponent of the pressure stress term
        psi_safety_valve: Relief valve rating (PSI)
        run_to_failure_age / run_to_failure_hardness: Calcified, never
            serviced units are left alone beyond these
        error_code_replace_count: Error codes that indicate chronic failure
        age_end_of_life: Service life for tankless units (years)
        failprob_economic_limit: Statistical replacement threshold (%)
        failprob_liability_extreme / failprob_liability_high: Replacement
            thresholds for high-consequence locations (%)
        age_economic_repair_limit: Economic optimizer age threshold (years)
        gas_starvation_btu: Burner rating that needs more than a 1/2" line
        isolation_valve_min_age: Valves recommended above this age
        igniter_failing_health: Igniter health below which repair is due
        service_life_years: Modeled service life for remaining-life projection
    """

    version: str = "8.5"
    weibull_gas: WeibullParameters = field(
        default_factory=lambda: WeibullParameters(eta=15.5, beta=2.8)
    )
    weibull_electric: WeibullParameters = field(
        default_factory=lambda: WeibullParameters(eta=14.0, beta=2.8)
    )

    max_stress_cap: float = 12.0
    max_bio_age: float = 50.0
    min_rate_floor: float = 0.01

    # Cycle intensity
    usage_light: float = 0.7
    usage_normal: float = 1.0
    usage_heavy: float = 1.6
    usage_reference_people: float = 2.5
    usage_min_occupancy_factor: float = 0.4
    recirc_cycle_multiplier: float = 2.0
    cycle_intensity_cap: float = 4.0
    cycle_wear_per_unit: float = 0.25

    # Scale accumulation
    softened_hardness_threshold: float = 1.5
    softened_effective_hardness: float = 0.2
    softener_ok_hardness_gpg: float = 0.5
    softener_unknown_salt_gpg: float = 3.0
    scale_factor_gas: float = 1.1
    scale_factor_electric: float = 0.8
    scale_temp_hot: float = 1.5
    scale_saturation: float = 120.0
    residual_scar_fraction: float = 0.5
    neglect_interval_years: float = 2.0
    scale_due_percent: float = 10.0
    scale_critical_percent: float = 25.0
    scale_lockout_percent: float = 60.0

    # Stress
    scale_stress_divisor: float = 30.0
    temp_stress_hot: float = 1.2
    psi_safe_limit: float = 80.0
    psi_scalar: float = 20.0
    psi_quadratic_exp: float = 2.0
    psi_safety_valve: float = 150.0

    # Recommendation tiers
    run_to_failure_age: float = 6.0
    run_to_failure_hardness: float = 10.0
    error_code_replace_count: int = 10
    age_end_of_life: float = 15.0
    failprob_economic_limit: float = 60.0
    failprob_liability_extreme: float = 20.0
    failprob_liability_high: float = 30.0
    age_economic_repair_limit: float = 10.0
    gas_starvation_btu: float = 150000.0
    isolation_valve_min_age: float = 1.0
    igniter_failing_health: float = 50.0
    service_life_years: float = 15.0

    def __post_init__(self) -> None:
        """Validate tankless engine configuration."""
        if not self.version:
            raise ValueError("version cannot be empty")
        if self.scale_saturation <= 0:
            raise ValueError(f"scale_saturation must be positive, got {self.scale_saturation}")
        if not 0.0 <= self.residual_scar_fraction <= 1.0:
            raise ValueError(
                f"residual_scar_fraction must be between 0.0 and 1.0, "
                f"got {self.residual_scar_fraction}"
            )
        if not (
            0 < self.scale_due_percent
            < self.scale_critical_percent
            < self.scale_lockout_percent
            <= 100
        ):
            raise ValueError("descale bands must satisfy 0 < due < critical < lockout <= 100")
        if self.scale_stress_divisor <= 0:
            raise ValueError(
                f"scale_stress_divisor must be positive, got {self.scale_stress_divisor}"
            )
        if self.max_stress_cap < 1.0:
            raise ValueError(f"max_stress_cap must be at least 1.0, got {self.max_stress_cap}")
        if self.psi_scalar <= 0:
            raise ValueError(f"psi_scalar must be positive, got {self.psi_scalar}")
        if self.psi_safe_limit >= self.psi_safety_valve:
            raise ValueError("psi_safe_limit must be below psi_safety_valve")
        if not 0 <= self.softener_ok_hardness_gpg <= self.softener_unknown_salt_gpg:
            raise ValueError(
                "softener credit must satisfy 0 <= softener_ok_hardness_gpg "
                "<= softener_unknown_salt_gpg"
            )

    def weibull_for(self, fuel_type: FuelType) -> WeibullParameters:
        """Weibull parameters for a tankless fuel type."""
        if fuel_type is FuelType.TANKLESS_ELECTRIC:
            return self.weibull_electric
        return self.weibull_gas
