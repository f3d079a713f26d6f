"""Tiered recommendation engine for storage tanks.

A strict priority state machine where the first matching tier wins:

- Tier 0: explosion hazard
- Tier 1: physical lockout (breach, sediment lockout, vessel fatigue)
- Tier 2: economic replacement (statistics, age, liability)
- Tier 3: service zone (pressure regulation, thermal expansion)
- Tier 3B: maintenance zone (flush, anode)
- Tier 4: pass

Young tanks run the Tier 3/3B checks before Tier 2, so a fixable finding
on young hardware resolves to a repair rather than a replacement.
"""

import logging

from domain.value_objects import (
    ActionType,
    AnodeStatus,
    BadgeColor,
    ExpansionTankStatus,
    Finding,
    ForensicInputs,
    OpterraMetrics,
    Recommendation,
    RecommendationBadge,
    RiskLevel,
    TankEngineConfig,
)

logger = logging.getLogger(__name__)


def explosion_hazard(static_psi: float, safety_valve_psi: float) -> Recommendation | None:
    """Tier 0 check shared by every engine."""
    if static_psi < safety_valve_psi:
        return None
    return Recommendation(
        action=ActionType.REPLACE,
        title="Explosion Hazard",
        reason=(
            f"Static pressure of {static_psi:.0f} PSI meets or exceeds the "
            f"{safety_valve_psi:.0f} PSI rating of the T&P safety valve. The relief "
            f"valve is the only thing preventing a catastrophic rupture."
        ),
        urgent=True,
        badge_color=BadgeColor.RED,
        badge=RecommendationBadge.CRITICAL,
        finding=Finding.EXPLOSION_HAZARD,
    )


def containment_breach() -> Recommendation:
    """Tier 1 verdict for visible corrosion or an active leak."""
    return Recommendation(
        action=ActionType.REPLACE,
        title="Containment Breach",
        reason="Visual evidence of tank failure. Leak is imminent or active.",
        urgent=True,
        badge_color=BadgeColor.RED,
        badge=RecommendationBadge.CRITICAL,
        finding=Finding.CONTAINMENT_BREACH,
    )


class TieredRecommendationEngine:
    """Derive a raw tank verdict from metrics and inputs.

    The verdict is raw: the economic optimizer may still rewrite it.
    """

    def __init__(self, config: TankEngineConfig | None = None) -> None:
        """Initialize the recommendation engine.

        Args:
            config: Tank tuning constants. If None, uses the current version.
        """
        self._config = config or TankEngineConfig()

    def get_raw_recommendation(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation:
        """Walk the tiers and return the first verdict that matches.

        Args:
            metrics: Metrics computed for the inputs
            inputs: Inspection snapshot

        Returns:
            Raw verdict before economic optimization
        """
        verdict = (
            explosion_hazard(inputs.house_psi, self._config.psi_safety_valve)
            or self._physical_lockout(metrics, inputs)
        )
        if verdict is None and inputs.calendar_age <= self._config.age_young_tank:
            verdict = self._service_zone(metrics, inputs) or self._maintenance_zone(
                metrics, inputs
            )
            if verdict is not None:
                logger.debug(f"Young tank override resolved to {verdict.finding.value}")
        if verdict is None:
            verdict = (
                self._economic_replacement(metrics, inputs)
                or self._service_zone(metrics, inputs)
                or self._maintenance_zone(metrics, inputs)
                or self._system_healthy()
            )
        logger.debug(f"Raw verdict: {verdict.action.value} ({verdict.finding.value})")
        return verdict

    def get_replacement_verdict(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        """Verdict from the tiers that condemn the vessel, if any applies.

        Runs Tier 0, Tier 1 and, outside the young tank override, Tier 2.
        Engines that layer their own failure modes on the tank use this to
        keep vessel condemnation ahead of those modes.

        Args:
            metrics: Metrics computed for the inputs
            inputs: Inspection snapshot

        Returns:
            Replacement verdict, or None when the vessel is not condemned
        """
        verdict = explosion_hazard(
            inputs.house_psi, self._config.psi_safety_valve
        ) or self._physical_lockout(metrics, inputs)
        if verdict is None and inputs.calendar_age > self._config.age_young_tank:
            verdict = self._economic_replacement(metrics, inputs)
        return verdict

    # Tier 1

    def _physical_lockout(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        config = self._config

        if inputs.visual_rust or inputs.is_leaking:
            return containment_breach()

        sediment_lbs = metrics.sediment_lbs or 0.0
        if sediment_lbs > config.sediment_lockout_lbs:
            return Recommendation(
                action=ActionType.REPLACE,
                title="Sediment Lockout",
                reason=(
                    f"Extreme buildup ({sediment_lbs:.1f} lbs) detected. Flushing is no "
                    f"longer possible without risking drain valve failure."
                ),
                urgent=False,
                badge_color=BadgeColor.RED,
                badge=RecommendationBadge.REPLACE,
                finding=Finding.SEDIMENT_LOCKOUT,
            )

        if (
            metrics.effective_pressure >= config.psi_critical
            and inputs.calendar_age > config.age_aged_unit
        ):
            if metrics.is_transient_pressure:
                title = "Hidden Thermal Spike"
                reason = (
                    f"The gauge reads {inputs.house_psi:.0f} PSI, but a closed loop with no "
                    f"working expansion tank spikes to ~{metrics.effective_pressure:.0f} PSI "
                    f"every heating cycle. Years of these spikes have fatigued the "
                    f"{inputs.calendar_age:.0f}-year-old vessel."
                )
            else:
                title = "Vessel Fatigue"
                reason = (
                    f"Long-term exposure to critical pressure ({inputs.house_psi:.0f} PSI) "
                    f"has compromised the steel tank structure."
                )
            return Recommendation(
                action=ActionType.REPLACE,
                title=title,
                reason=reason,
                urgent=True,
                badge_color=BadgeColor.RED,
                badge=RecommendationBadge.CRITICAL,
                finding=Finding.CRITICAL_PRESSURE,
            )
        return None

    # Tier 2

    def _economic_replacement(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        config = self._config

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

        if inputs.calendar_age >= config.age_max:
            return Recommendation(
                action=ActionType.REPLACE,
                title="End of Service Life",
                reason=(
                    f"At {inputs.calendar_age:.0f} years the unit is past any realistic "
                    f"service life for a storage tank."
                ),
                urgent=False,
                badge_color=BadgeColor.ORANGE,
                badge=RecommendationBadge.REPLACE,
                finding=Finding.END_OF_LIFE,
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

    # Tier 3

    def _service_zone(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        config = self._config
        psi = inputs.house_psi
        needs_exp_tank = not inputs.has_functional_exp_tank

        if psi > config.psi_safe_limit:
            if inputs.has_prv:
                if needs_exp_tank and inputs.is_actually_closed:
                    return self._service(
                        "Replace PRV + Install Expansion Tank",
                        f"System pressure is {psi:.0f} PSI despite a PRV, so the valve has "
                        f"failed. The PRV closes the loop, so an expansion tank must go in "
                        f"with the replacement valve.",
                        Finding.FAILED_PRV,
                    )
                return self._service(
                    "Failed PRV Detected",
                    f"System pressure is {psi:.0f} PSI despite having a PRV. The valve has "
                    f"failed and needs replacement.",
                    Finding.FAILED_PRV,
                )
            if needs_exp_tank:
                return self._service(
                    "Install PRV + Expansion Tank",
                    f"Water pressure is {psi:.0f} PSI (code max: "
                    f"{config.psi_safe_limit:.0f}). A PRV alone would trap thermal "
                    f"expansion in a closed loop, so both must be installed together.",
                    Finding.PRV_AND_EXPANSION_TANK,
                )
            return self._service(
                "Critical Pressure Violation",
                f"Water pressure is {psi:.0f} PSI (code max: {config.psi_safe_limit:.0f}). "
                f"Install a PRV immediately.",
                Finding.PRESSURE_VIOLATION,
            )

        if inputs.is_actually_closed and needs_exp_tank:
            if inputs.exp_tank_status is ExpansionTankStatus.WATERLOGGED:
                title = "Waterlogged Expansion Tank"
                reason = (
                    "The expansion tank bladder has failed and no longer absorbs thermal "
                    "expansion. Every heating cycle spikes pressure in the closed loop."
                )
            else:
                title = "Missing Thermal Expansion"
                reason = (
                    "Closed-loop system detected without an expansion tank. This voids "
                    "manufacturer warranty and causes premature tank failure."
                )
            return self._service(title, reason, Finding.MISSING_EXPANSION_TANK)

        if (
            not inputs.has_prv
            and config.psi_optimize <= psi <= config.psi_safe_limit
            and inputs.calendar_age < config.age_pressure_optimize_limit
        ):
            if needs_exp_tank:
                title = "Pressure Optimization (PRV + Expansion Tank)"
                reason = (
                    f"Pressure is {psi:.0f} PSI. Installing a PRV with an expansion tank "
                    f"will lower tank stress and extend life without trapping thermal "
                    f"expansion."
                )
            else:
                title = "Pressure Optimization"
                reason = (
                    f"Pressure is {psi:.0f} PSI. Installing a PRV will reduce tank stress "
                    f"and extend life."
                )
            return Recommendation(
                action=ActionType.UPGRADE,
                title=title,
                reason=reason,
                urgent=False,
                badge_color=BadgeColor.YELLOW,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.PRESSURE_OPTIMIZATION,
            )
        return None

    @staticmethod
    def _service(title: str, reason: str, finding: Finding) -> Recommendation:
        return Recommendation(
            action=ActionType.REPAIR,
            title=title,
            reason=reason,
            urgent=True,
            badge_color=BadgeColor.ORANGE,
            badge=RecommendationBadge.SERVICE,
            finding=finding,
        )

    # Tier 3B

    def _maintenance_zone(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation | None:
        config = self._config
        sediment_lbs = metrics.sediment_lbs or 0.0

        is_fragile = (
            metrics.fail_prob > config.failprob_fragile
            or inputs.calendar_age > config.age_fragile
        )
        is_serviceable = config.is_flush_serviceable(sediment_lbs)

        if is_serviceable and is_fragile:
            return Recommendation(
                action=ActionType.PASS,
                title="Maintenance Risk",
                reason=(
                    f"Sediment present ({sediment_lbs:.1f} lbs), but unit condition makes "
                    f"flushing risky. Disturbance may cause leaks."
                ),
                urgent=False,
                badge_color=BadgeColor.YELLOW,
                badge=RecommendationBadge.MONITOR,
                finding=Finding.MAINTENANCE_RISK,
            )

        if is_serviceable:
            return Recommendation(
                action=ActionType.MAINTAIN,
                title="Performance Flush",
                reason=(
                    f"Estimated {sediment_lbs:.1f} lbs of sediment. Flushing now will "
                    f"restore efficiency and prevent overheating of the tank bottom."
                ),
                urgent=False,
                badge_color=BadgeColor.GREEN,
                badge=RecommendationBadge.SERVICE,
                finding=Finding.PERFORMANCE_FLUSH,
            )

        if (
            metrics.anode_status in (AnodeStatus.REPLACE, AnodeStatus.NAKED)
            and inputs.calendar_age < config.age_anode_refresh_limit
        ):
            return Recommendation(
                action=ActionType.MAINTAIN,
                title="Anode Refresh",
                reason=(
                    f"Anode is {metrics.anode_depletion_percent:.0f}% depleted. Replacing "
                    f"it restores cathodic protection and extends tank life."
                ),
                urgent=False,
                badge_color=BadgeColor.GREEN,
                badge=RecommendationBadge.MONITOR,
                finding=Finding.ANODE_REFRESH,
            )
        return None

    # Tier 4

    @staticmethod
    def _system_healthy() -> Recommendation:
        return Recommendation(
            action=ActionType.PASS,
            title="System Healthy",
            reason="Unit is operating within safe parameters.",
            urgent=False,
            badge_color=BadgeColor.GREEN,
            badge=RecommendationBadge.OPTIMAL,
            finding=Finding.SYSTEM_HEALTHY,
        )
