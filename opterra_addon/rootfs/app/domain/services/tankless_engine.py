"""Tankless risk engine.

On-demand units have no anode and no storage vessel. Wear is driven by
heat exchanger scale and burner cycling, so aging is single-phase and the
decision tree checks venting, ignition, gas supply and serviceability.
"""

import logging

from domain.interfaces import IRiskEngine
from domain.value_objects import (
    ActionType,
    BadgeColor,
    DescaleStatus,
    Finding,
    FlameRodStatus,
    ForensicInputs,
    GasLineSize,
    OpterraMetrics,
    Recommendation,
    RecommendationBadge,
    RiskLevel,
    StressFactors,
    TanklessEngineConfig,
    VentStatus,
)

from .bio_age_integrator import integrate_single_phase_bio_age
from .economic_optimizer import optimize_economic_verdict
from .hardness_resolver import resolve_hardness
from .location_risk import get_location_risk
from .recommendation_engine import explosion_hazard
from .sediment_model import calculate_scale
from .stress_composer import compose_tankless_stress
from .weibull_model import (
    apply_failure_overrides,
    fail_prob_to_health_score,
    weibull_failure_probability,
)

logger = logging.getLogger(__name__)


class TanklessRiskEngine(IRiskEngine):
    """Risk engine for gas and electric tankless units."""

    def __init__(self, config: TanklessEngineConfig | None = None) -> None:
        """Initialize the tankless engine.

        Args:
            config: Tankless tuning constants. If None, uses the current version.
        """
        self._config = config or TanklessEngineConfig()

    @property
    def config(self) -> TanklessEngineConfig:
        """Tuning constants used by this engine."""
        return self._config

    def calculate_health(self, inputs: ForensicInputs) -> OpterraMetrics:
        """Compute tankless metrics.

        Args:
            inputs: Inspection snapshot

        Returns:
            Metrics with the scale, descale and flow extensions populated
        """
        config = self._config
        weibull = config.weibull_for(inputs.fuel_type)

        hardness = resolve_hardness(inputs, config)
        scale = calculate_scale(inputs, hardness.effective_hardness, config)
        stress = compose_tankless_stress(
            inputs, scale.scale_percent, scale.cycle_intensity, config
        )
        bio_age = integrate_single_phase_bio_age(
            inputs.calendar_age, stress, config.max_stress_cap, config.max_bio_age
        )
        fail_prob = weibull_failure_probability(bio_age, weibull)
        fail_prob = apply_failure_overrides(fail_prob, inputs, weibull)

        aging_rate = max(stress.total, config.min_rate_floor)
        optimized_rate = max(
            min(stress.cycle * stress.temp, config.max_stress_cap), config.min_rate_floor
        )
        remaining = max(0.0, config.service_life_years - bio_age)
        years_left_current = remaining / aging_rate
        years_left_optimized = remaining / optimized_rate

        metrics = OpterraMetrics(
            bio_age=round(bio_age, 1),
            fail_prob=round(fail_prob, 1),
            health_score=fail_prob_to_health_score(fail_prob, weibull),
            stress_factors=stress,
            effective_pressure=inputs.house_psi,
            is_transient_pressure=False,
            hardness=hardness,
            risk_level=get_location_risk(inputs.location, inputs.is_finished_area),
            aging_rate=round(aging_rate, 2),
            optimized_aging_rate=round(optimized_rate, 2),
            years_left_current=round(years_left_current, 1),
            years_left_optimized=round(years_left_optimized, 1),
            life_extension=round(max(0.0, years_left_optimized - years_left_current), 1),
            primary_stressor=self._primary_stressor(inputs, stress, scale.descale_status),
            scale_buildup_score=round(scale.scale_percent, 1),
            descale_status=scale.descale_status,
            flow_degradation=round(scale.flow_degradation, 1),
        )
        logger.info(
            f"Tankless assessment ({inputs.fuel_type.value}): age={inputs.calendar_age}, "
            f"scale={metrics.scale_buildup_score}%, descale={scale.descale_status.value}, "
            f"bio_age={metrics.bio_age}, fail_prob={metrics.fail_prob}%, "
            f"health={metrics.health_score}"
        )
        return metrics

    @staticmethod
    def _primary_stressor(
        inputs: ForensicInputs, stress: StressFactors, descale_status: DescaleStatus
    ) -> str:
        if inputs.is_leaking or inputs.visual_rust:
            return "Heat Exchanger Breach"
        if inputs.tankless_vent_status is VentStatus.BLOCKED:
            return "Vent Obstruction"
        if descale_status is DescaleStatus.RUN_TO_FAILURE:
            return "Calcification (Non-Serviceable)"
        stressors = [
            ("Scale Accumulation", stress.scale),
            ("Cycling Wear", stress.cycle),
            ("High Temperature", stress.temp),
            ("High Pressure", stress.pressure),
        ]
        name, value = max(stressors, key=lambda item: item[1])
        return name if value > 1.0 else "Normal Wear"

    def get_raw_recommendation(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation:
        """Walk the tankless tiers and return the first verdict that matches.

        Args:
            metrics: Metrics computed for the inputs
            inputs: Inspection snapshot

        Returns:
            Raw verdict before economic optimization
        """
        verdict = (
            explosion_hazard(inputs.house_psi, self._config.psi_safety_valve)
            or self._physical_lockout(metrics, inputs)
            or self._economic_replacement(metrics, inputs)
            or self._service_zone(inputs)
            or self._maintenance_zone(metrics, inputs)
            or self._system_healthy()
        )
        logger.debug(f"Raw tankless verdict: {verdict.action.value} ({verdict.finding.value})")
        return verdict

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

    def _physical_lockout(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        if inputs.tankless_vent_status is VentStatus.BLOCKED:
            return Recommendation(
                action=ActionType.REPLACE,
                title="Vent Obstruction",
                reason="Critical safety hazard detected in venting system.",
                urgent=True,
                badge_color=BadgeColor.RED,
                badge=RecommendationBadge.CRITICAL,
                finding=Finding.VENT_BLOCKED,
            )
        if inputs.is_leaking or inputs.visual_rust:
            return Recommendation(
                action=ActionType.REPLACE,
                title="Heat Exchanger Failure",
                reason="Internal leakage detected. Heat exchanger integrity compromised.",
                urgent=True,
                badge_color=BadgeColor.RED,
                badge=RecommendationBadge.CRITICAL,
                finding=Finding.HEAT_EXCHANGER_FAILURE,
            )
        if metrics.descale_status is DescaleStatus.LOCKOUT:
            return Recommendation(
                action=ActionType.REPLACE,
                title="Scale Lockout",
                reason=(
                    f"Scale buildup ({metrics.scale_buildup_score:.0f}%) has exceeded "
                    f"serviceable limits. Descaling risks revealing pinhole leaks."
                ),
                urgent=False,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.REPLACE,
                finding=Finding.SCALE_LOCKOUT,
            )
        if inputs.error_code_count > self._config.error_code_replace_count:
            return Recommendation(
                action=ActionType.REPLACE,
                title="Chronic System Errors",
                reason=(
                    f"Unit is displaying {inputs.error_code_count} error codes. System "
                    f"reliability is compromised."
                ),
                urgent=True,
                badge_color=BadgeColor.RED,
                badge=RecommendationBadge.CRITICAL,
                finding=Finding.CHRONIC_ERRORS,
            )
        return None

    def _economic_replacement(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        config = self._config
        if inputs.calendar_age > config.age_end_of_life:
            return Recommendation(
                action=ActionType.REPLACE,
                title="End of Service Life",
                reason=(
                    f"Unit has exceeded statistical life expectancy "
                    f"({config.age_end_of_life:.0f} years)."
                ),
                urgent=False,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.REPLACE,
                finding=Finding.END_OF_LIFE,
            )
        if metrics.fail_prob > config.failprob_economic_limit:
            return Recommendation(
                action=ActionType.REPLACE,
                title="Statistical End-of-Life",
                reason=(
                    f"Failure probability is {metrics.fail_prob:.0f}%. Repair costs are "
                    f"not justifiable."
                ),
                urgent=False,
                badge_color=BadgeColor.RED,
                badge=RecommendationBadge.REPLACE,
                finding=Finding.ECONOMIC_FAILURE_RISK,
            )
        if (
            metrics.risk_level is RiskLevel.EXTREME
            and metrics.fail_prob > config.failprob_liability_extreme
        ) or (
            metrics.risk_level is RiskLevel.HIGH
            and metrics.fail_prob > config.failprob_liability_high
        ):
            return Recommendation(
                action=ActionType.REPLACE,
                title="Liability Hazard",
                reason=(
                    f"Unit is in a high-damage zone. Statistical failure risk "
                    f"({metrics.fail_prob:.0f}%) exceeds the safety threshold for "
                    f"finished areas."
                ),
                urgent=False,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.REPLACE,
                finding=Finding.LIABILITY_RISK,
            )
        return None

    def _service_zone(self, inputs: ForensicInputs) -> Recommendation | None:
        config = self._config
        if inputs.error_code_count > 0:
            return Recommendation(
                action=ActionType.REPAIR,
                title="System Error Codes",
                reason=(
                    f"Unit is displaying {inputs.error_code_count} error codes. "
                    f"Diagnostics required."
                ),
                urgent=True,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.ERROR_CODES,
            )
        if (
            inputs.btu_rating is not None
            and inputs.btu_rating > config.gas_starvation_btu
            and inputs.gas_line_size is GasLineSize.HALF_INCH
        ):
            return Recommendation(
                action=ActionType.UPGRADE,
                title="Gas Supply Starvation",
                reason=(
                    f'1/2" gas line is insufficient for a {inputs.btu_rating:,.0f} BTU '
                    f"unit. System is running lean."
                ),
                urgent=True,
                badge_color=BadgeColor.RED,
                badge=RecommendationBadge.CRITICAL,
                finding=Finding.GAS_STARVATION,
            )
        if inputs.tankless_vent_status is VentStatus.RESTRICTED:
            return Recommendation(
                action=ActionType.REPAIR,
                title="Vent Restriction",
                reason="Exhaust vent is partially obstructed. Clear it before it blocks.",
                urgent=True,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.VENT_RESTRICTED,
            )
        if inputs.flame_rod_status is FlameRodStatus.FAILING or (
            inputs.igniter_health is not None
            and inputs.igniter_health < config.igniter_failing_health
        ):
            return Recommendation(
                action=ActionType.REPAIR,
                title="Ignition System Service",
                reason="Flame sensor or igniter is failing. Expect intermittent lockouts.",
                urgent=False,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.IGNITION_FAILURE,
            )
        return None

    def _maintenance_zone(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        status = metrics.descale_status
        if status is DescaleStatus.RUN_TO_FAILURE:
            return Recommendation(
                action=ActionType.PASS,
                title="Run to Failure",
                reason=(
                    "Unit is functioning but too calcified to safely flush. Monitor for "
                    "leaks."
                ),
                urgent=False,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.MONITOR,
                finding=Finding.DESCALE_RUN_TO_FAILURE,
            )
        if status is DescaleStatus.IMPOSSIBLE:
            return Recommendation(
                action=ActionType.UPGRADE,
                title="Install Isolation Valves",
                reason=(
                    f"Scale buildup is {metrics.scale_buildup_score:.0f}% but the unit has "
                    f"no isolation valves, so it cannot be descaled. Install valves, then "
                    f"descale."
                ),
                urgent=True,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.DESCALE_IMPOSSIBLE,
            )
        if status is DescaleStatus.CRITICAL:
            return Recommendation(
                action=ActionType.MAINTAIN,
                title="Descale Critical",
                reason="Heavy scale accumulation detected. Immediate descaling recommended.",
                urgent=True,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.DESCALE_CRITICAL,
            )
        if status is DescaleStatus.DUE:
            return Recommendation(
                action=ActionType.MAINTAIN,
                title="Descale Required",
                reason="Hard water exposure without recent maintenance detected.",
                urgent=False,
                badge_color=BadgeColor.YELLOW,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.DESCALE_DUE,
            )
        if (
            not inputs.has_isolation_valves
            and inputs.calendar_age > self._config.isolation_valve_min_age
        ):
            return Recommendation(
                action=ActionType.UPGRADE,
                title="Install Isolation Valves",
                reason=(
                    "Unit cannot be descaled without isolation valves. Install to enable "
                    "maintenance."
                ),
                urgent=False,
                badge_color=BadgeColor.YELLOW,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.ISOLATION_VALVES,
            )
        return None

    @staticmethod
    def _system_healthy() -> Recommendation:
        return Recommendation(
            action=ActionType.PASS,
            title="System Healthy",
            reason="No critical issues or maintenance needs detected.",
            urgent=False,
            badge_color=BadgeColor.GREEN,
            badge=RecommendationBadge.OPTIMAL,
            finding=Finding.SYSTEM_HEALTHY,
        )
