"""Storage tank risk engine.

Assembles the sub-models into metrics for gas and electric storage tanks
and derives the verdict through the tiered engine and economic optimizer.
"""

import logging
from dataclasses import dataclass

from domain.interfaces import IRiskEngine
from domain.value_objects import (
    ForensicInputs,
    OpterraMetrics,
    Recommendation,
    StressFactors,
    TankEngineConfig,
    detect_quality_tier,
)

from .anode_model import calculate_anode_state
from .bio_age_integrator import integrate_biphasic_bio_age
from .economic_optimizer import optimize_economic_verdict
from .hardness_resolver import resolve_hardness
from .location_risk import get_location_risk
from .pressure_physics import resolve_effective_pressure
from .recommendation_engine import TieredRecommendationEngine
from .sediment_model import calculate_sediment
from .stress_composer import compose_tank_stress
from .weibull_model import (
    apply_failure_overrides,
    fail_prob_to_health_score,
    weibull_failure_probability,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgingSpeedometer:
    """How fast the unit is aging now and with pressure issues fixed.

    Attributes:
        aging_rate: Current years of wear per calendar year
        optimized_rate: Rate with pressure and closed-loop penalties removed
        years_left_current: Modeled life left at the current rate
        years_left_optimized: Modeled life left at the optimized rate
        life_extension: Years gained by fixing pressure issues
        primary_stressor: Name of the dominant stressor
    """

    aging_rate: float
    optimized_rate: float
    years_left_current: float
    years_left_optimized: float
    life_extension: float
    primary_stressor: str


def calculate_aging_speedometer(
    bio_age: float, stress: StressFactors, config: TankEngineConfig
) -> AgingSpeedometer:
    """Project remaining life against the modeled service life.

    Args:
        bio_age: Current biological age
        stress: Composed tank stress
        config: Tank tuning constants

    Returns:
        Current and optimized aging rates with remaining-life projection
    """
    aging_rate = max(stress.total, config.min_rate_floor)
    optimized_rate = max(
        min(
            stress.sediment * stress.temp_mechanical * stress.temp_chemical * stress.circ,
            config.max_stress_cap,
        ),
        config.min_rate_floor,
    )

    remaining = max(0.0, config.service_life_years - bio_age)
    years_left_current = remaining / aging_rate
    years_left_optimized = remaining / optimized_rate

    stressors = [
        ("High Pressure", stress.pressure),
        ("High Temperature", stress.temp),
        ("Sediment Buildup", stress.sediment),
        ("Thermal Expansion", stress.loop),
        ("Circulation Pump", stress.circ),
    ]
    name, value = max(stressors, key=lambda item: item[1])
    primary_stressor = name if value > 1.0 else "Normal Wear"

    return AgingSpeedometer(
        aging_rate=aging_rate,
        optimized_rate=optimized_rate,
        years_left_current=years_left_current,
        years_left_optimized=years_left_optimized,
        life_extension=max(0.0, years_left_optimized - years_left_current),
        primary_stressor=primary_stressor,
    )


class TankRiskEngine(IRiskEngine):
    """Risk engine for gas and electric storage tanks.

    The biphasic aging model keys chemical stress to the anode: while the
    anode is intact most corrosion is suppressed, once it is consumed the
    vessel ages at the full combined stress.
    """

    def __init__(self, config: TankEngineConfig | None = None) -> None:
        """Initialize the tank engine.

        Args:
            config: Tank tuning constants. If None, uses the current version.
        """
        self._config = config or TankEngineConfig()
        self._recommendations = TieredRecommendationEngine(self._config)

    @property
    def config(self) -> TankEngineConfig:
        """Tuning constants used by this engine."""
        return self._config

    def calculate_health(self, inputs: ForensicInputs) -> OpterraMetrics:
        """Compute tank metrics.

        Args:
            inputs: Inspection snapshot

        Returns:
            Metrics with the anode and sediment extensions populated
        """
        config = self._config
        tier = detect_quality_tier(inputs)
        hardness = resolve_hardness(inputs, config)
        pressure = resolve_effective_pressure(inputs, config)
        sediment = calculate_sediment(inputs, hardness.effective_hardness, config)
        anode = calculate_anode_state(inputs, tier, config)
        stress = compose_tank_stress(
            inputs, pressure.effective_psi, sediment.lbs, sediment.usage_intensity, config
        )

        bio_age = integrate_biphasic_bio_age(
            inputs.calendar_age,
            anode.naked_years,
            stress,
            config.chemical_suppression,
            config.max_bio_age,
        )
        fail_prob = weibull_failure_probability(bio_age, config.weibull)
        fail_prob = apply_failure_overrides(fail_prob, inputs, config.weibull)
        speedometer = calculate_aging_speedometer(bio_age, stress, config)

        metrics = OpterraMetrics(
            bio_age=round(bio_age, 1),
            fail_prob=round(fail_prob, 1),
            health_score=fail_prob_to_health_score(fail_prob, config.weibull),
            stress_factors=stress,
            effective_pressure=pressure.effective_psi,
            is_transient_pressure=pressure.is_transient,
            hardness=hardness,
            risk_level=get_location_risk(inputs.location, inputs.is_finished_area),
            aging_rate=round(speedometer.aging_rate, 2),
            optimized_aging_rate=round(speedometer.optimized_rate, 2),
            years_left_current=round(speedometer.years_left_current, 1),
            years_left_optimized=round(speedometer.years_left_optimized, 1),
            life_extension=round(speedometer.life_extension, 1),
            primary_stressor=speedometer.primary_stressor,
            shield_life=round(anode.shield_life, 1),
            anode_depletion_percent=round(anode.depletion_percent, 1),
            anode_status=anode.status,
            anode_mass_remaining=round(anode.mass_remaining, 3),
            anode_burn_rate=round(anode.burn_rate, 2),
            anode_burn_factors=anode.burn_factors,
            sediment_lbs=round(sediment.lbs, 1),
            sediment_rate=round(sediment.rate, 2),
            months_to_flush=sediment.months_to_flush,
            months_to_lockout=sediment.months_to_lockout,
            flush_status=sediment.flush_status,
        )
        logger.info(
            f"Tank assessment ({inputs.fuel_type.value}, {tier.tier.value}): "
            f"age={inputs.calendar_age}, bio_age={metrics.bio_age}, "
            f"fail_prob={metrics.fail_prob}%, health={metrics.health_score}"
        )
        return metrics

    def get_raw_recommendation(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation:
        """Verdict from the tiers, before economic optimization."""
        return self._recommendations.get_raw_recommendation(metrics, inputs)

    def get_replacement_verdict(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        """Vessel condemnation verdict (Tier 0 to Tier 2), if any applies."""
        return self._recommendations.get_replacement_verdict(metrics, inputs)

    def get_recommendation(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation:
        """Derive the optimized verdict.

        Args:
            metrics: Metrics computed for the inputs
            inputs: Inspection snapshot

        Returns:
            Final verdict
        """
        raw = self.get_raw_recommendation(metrics, inputs)
        return optimize_economic_verdict(raw, metrics, inputs, self._config)
