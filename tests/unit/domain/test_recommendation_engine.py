"""Unit tests for the tiered recommendation engine and the economic optimizer.

Metrics are constructed directly so each tier can be exercised in isolation.
"""

import pytest
from domain.services import TieredRecommendationEngine, optimize_economic_verdict
from domain.value_objects import (
    ActionType,
    AnodeStatus,
    BadgeColor,
    ExpansionTankStatus,
    Finding,
    RiskLevel,
    TankEngineConfig,
)


@pytest.fixture
def engine() -> TieredRecommendationEngine:
    """Recommendation engine with the current tank constants."""
    return TieredRecommendationEngine()


class TestSafetyTiers:
    """Tests for Tier 0 and Tier 1."""

    def test_explosion_hazard(self, engine, create_inputs, create_metrics) -> None:
        """Test that pressure at the relief valve rating is an explosion hazard."""
        verdict = engine.get_raw_recommendation(
            create_metrics(), create_inputs(house_psi=150.0, calendar_age=2.0)
        )
        assert verdict.action is ActionType.REPLACE
        assert verdict.urgent is True
        assert verdict.finding is Finding.EXPLOSION_HAZARD
        assert "safety valve" in verdict.reason

    def test_explosion_outranks_breach(self, engine, create_inputs, create_metrics) -> None:
        """Test that Tier 0 wins over Tier 1."""
        verdict = engine.get_raw_recommendation(
            create_metrics(), create_inputs(house_psi=160.0, visual_rust=True)
        )
        assert verdict.finding is Finding.EXPLOSION_HAZARD

    def test_containment_breach(self, engine, create_inputs, create_metrics) -> None:
        """Test that a leak forces replacement even on a young tank."""
        verdict = engine.get_raw_recommendation(
            create_metrics(), create_inputs(calendar_age=1.0, is_leaking=True)
        )
        assert verdict.action is ActionType.REPLACE
        assert verdict.finding is Finding.CONTAINMENT_BREACH
        assert verdict.badge_color is BadgeColor.RED

    def test_sediment_lockout(self, engine, create_inputs, create_metrics) -> None:
        """Test that extreme sediment is a lockout."""
        verdict = engine.get_raw_recommendation(
            create_metrics(sediment_lbs=12.0), create_inputs(calendar_age=12.0)
        )
        assert verdict.finding is Finding.SEDIMENT_LOCKOUT
        assert verdict.action is ActionType.REPLACE

    def test_hidden_thermal_spike(self, engine, create_inputs, create_metrics) -> None:
        """Test vessel fatigue from inferred thermal expansion spikes."""
        verdict = engine.get_raw_recommendation(
            create_metrics(effective_pressure=140.0, is_transient_pressure=True),
            create_inputs(calendar_age=12.0, house_psi=70.0, is_closed_loop=True),
        )
        assert verdict.title == "Hidden Thermal Spike"
        assert verdict.finding is Finding.CRITICAL_PRESSURE
        assert verdict.urgent is True

    def test_static_vessel_fatigue(self, engine, create_inputs, create_metrics) -> None:
        """Test vessel fatigue from a high static reading."""
        verdict = engine.get_raw_recommendation(
            create_metrics(effective_pressure=110.0),
            create_inputs(calendar_age=12.0, house_psi=110.0),
        )
        assert verdict.title == "Vessel Fatigue"

    def test_fatigue_needs_an_aged_vessel(self, engine, create_inputs, create_metrics) -> None:
        """Test that a young vessel at spike pressure gets the repair instead."""
        verdict = engine.get_raw_recommendation(
            create_metrics(effective_pressure=140.0, is_transient_pressure=True),
            create_inputs(calendar_age=4.0, house_psi=70.0, is_closed_loop=True),
        )
        assert verdict.finding is Finding.MISSING_EXPANSION_TANK
        assert verdict.action is ActionType.REPAIR


class TestEconomicTier:
    """Tests for Tier 2."""

    def test_statistical_end_of_life(self, engine, create_inputs, create_metrics) -> None:
        """Test replacement above the economic failure threshold."""
        verdict = engine.get_raw_recommendation(
            create_metrics(fail_prob=65.0, health_score=7), create_inputs(calendar_age=14.0)
        )
        assert verdict.title == "Statistical End-of-Life"
        assert verdict.finding is Finding.ECONOMIC_FAILURE_RISK

    def test_end_of_service_life(self, engine, create_inputs, create_metrics) -> None:
        """Test the absolute age cap."""
        verdict = engine.get_raw_recommendation(
            create_metrics(fail_prob=30.0, health_score=30), create_inputs(calendar_age=20.0)
        )
        assert verdict.finding is Finding.END_OF_LIFE
        assert verdict.action is ActionType.REPLACE

    def test_liability_in_extreme_location(self, engine, create_inputs, create_metrics) -> None:
        """Test the liability threshold for attic and upper floor installs."""
        verdict = engine.get_raw_recommendation(
            create_metrics(fail_prob=25.0, health_score=37, risk_level=RiskLevel.EXTREME),
            create_inputs(calendar_age=12.0),
        )
        assert verdict.title == "Liability Hazard"
        assert verdict.finding is Finding.LIABILITY_RISK

    def test_high_location_has_higher_threshold(self, engine, create_inputs, create_metrics) -> None:
        """Test that 25% is below the liability threshold in a HIGH location."""
        verdict = engine.get_raw_recommendation(
            create_metrics(fail_prob=25.0, health_score=37, risk_level=RiskLevel.HIGH),
            create_inputs(calendar_age=12.0),
        )
        assert verdict.finding is Finding.SYSTEM_HEALTHY

    def test_young_tank_override(self, engine, create_inputs, create_metrics) -> None:
        """Test that a fixable finding on a young tank beats statistical replacement."""
        verdict = engine.get_raw_recommendation(
            create_metrics(fail_prob=65.0, health_score=7),
            create_inputs(calendar_age=4.0, house_psi=70.0, is_closed_loop=True),
        )
        assert verdict.action is ActionType.REPAIR
        assert verdict.finding is Finding.MISSING_EXPANSION_TANK

    def test_young_tank_without_findings_still_replaced(
        self, engine, create_inputs, create_metrics
    ) -> None:
        """Test that the override only applies when a repair exists."""
        verdict = engine.get_raw_recommendation(
            create_metrics(fail_prob=65.0, health_score=7), create_inputs(calendar_age=4.0)
        )
        assert verdict.finding is Finding.ECONOMIC_FAILURE_RISK


class TestReplacementVerdict:
    """Tests for the Tier 0 to Tier 2 replacement verdict."""

    def test_sound_vessel_has_no_replacement(self, engine, create_inputs, create_metrics) -> None:
        """Test that a healthy tank is not condemned."""
        assert engine.get_replacement_verdict(create_metrics(), create_inputs()) is None

    def test_service_findings_are_excluded(self, engine, create_inputs, create_metrics) -> None:
        """Test that a repairable finding is left to the lower tiers."""
        verdict = engine.get_replacement_verdict(
            create_metrics(effective_pressure=90.0),
            create_inputs(calendar_age=8.0, house_psi=90.0),
        )
        assert verdict is None

    def test_physical_lockout(self, engine, create_inputs, create_metrics) -> None:
        """Test that sediment lockout condemns the vessel."""
        verdict = engine.get_replacement_verdict(
            create_metrics(sediment_lbs=12.0), create_inputs(calendar_age=9.0)
        )
        assert verdict.finding is Finding.SEDIMENT_LOCKOUT

    def test_economic_replacement(self, engine, create_inputs, create_metrics) -> None:
        """Test that statistical end-of-life condemns an older vessel."""
        verdict = engine.get_replacement_verdict(
            create_metrics(fail_prob=65.0, health_score=7), create_inputs(calendar_age=12.0)
        )
        assert verdict.finding is Finding.ECONOMIC_FAILURE_RISK

    def test_young_tank_defers_economic_tier(self, engine, create_inputs, create_metrics) -> None:
        """Test that the young tank override keeps Tier 2 out of the replacement verdict."""
        verdict = engine.get_replacement_verdict(
            create_metrics(fail_prob=65.0, health_score=7), create_inputs(calendar_age=4.0)
        )
        assert verdict is None


class TestServiceTier:
    """Tests for Tier 3."""

    def test_failed_prv_on_closed_loop(self, engine, create_inputs, create_metrics) -> None:
        """Test that a failed PRV without expansion tank is replaced with one."""
        verdict = engine.get_raw_recommendation(
            create_metrics(), create_inputs(calendar_age=8.0, house_psi=90.0, has_prv=True)
        )
        assert verdict.title == "Replace PRV + Install Expansion Tank"
        assert verdict.finding is Finding.FAILED_PRV
        assert verdict.action is ActionType.REPAIR

    def test_failed_prv_with_expansion_tank(self, engine, create_inputs, create_metrics) -> None:
        """Test a failed PRV on a system already protected from expansion."""
        verdict = engine.get_raw_recommendation(
            create_metrics(),
            create_inputs(calendar_age=8.0, house_psi=90.0, has_prv=True, has_exp_tank=True),
        )
        assert verdict.title == "Failed PRV Detected"

    def test_high_pressure_without_prv(self, engine, create_inputs, create_metrics) -> None:
        """Test that PRV and expansion tank are bundled."""
        verdict = engine.get_raw_recommendation(
            create_metrics(), create_inputs(calendar_age=8.0, house_psi=90.0)
        )
        assert verdict.title == "Install PRV + Expansion Tank"
        assert verdict.finding is Finding.PRV_AND_EXPANSION_TANK

    def test_high_pressure_with_expansion_tank(self, engine, create_inputs, create_metrics) -> None:
        """Test a plain pressure violation."""
        verdict = engine.get_raw_recommendation(
            create_metrics(),
            create_inputs(calendar_age=8.0, house_psi=90.0, has_exp_tank=True),
        )
        assert verdict.finding is Finding.PRESSURE_VIOLATION

    def test_waterlogged_expansion_tank(self, engine, create_inputs, create_metrics) -> None:
        """Test that a waterlogged tank is named as such."""
        verdict = engine.get_raw_recommendation(
            create_metrics(),
            create_inputs(
                calendar_age=8.0,
                is_closed_loop=True,
                has_exp_tank=True,
                exp_tank_status=ExpansionTankStatus.WATERLOGGED,
            ),
        )
        assert verdict.title == "Waterlogged Expansion Tank"
        assert verdict.finding is Finding.MISSING_EXPANSION_TANK

    def test_pressure_optimization(self, engine, create_inputs, create_metrics) -> None:
        """Test the optional PRV upgrade in the optimization band."""
        verdict = engine.get_raw_recommendation(
            create_metrics(), create_inputs(calendar_age=3.0, house_psi=72.0, has_exp_tank=True)
        )
        assert verdict.action is ActionType.UPGRADE
        assert verdict.title == "Pressure Optimization"
        assert verdict.urgent is False

    def test_pressure_optimization_bundles_expansion_tank(
        self, engine, create_inputs, create_metrics
    ) -> None:
        """Test that the upgrade adds an expansion tank when there is none."""
        verdict = engine.get_raw_recommendation(
            create_metrics(), create_inputs(calendar_age=3.0, house_psi=72.0)
        )
        assert verdict.title == "Pressure Optimization (PRV + Expansion Tank)"


class TestMaintenanceTier:
    """Tests for Tier 3B and the pass tier."""

    def test_performance_flush(self, engine, create_inputs, create_metrics) -> None:
        """Test a flush recommendation on a sound tank."""
        verdict = engine.get_raw_recommendation(
            create_metrics(sediment_lbs=3.0), create_inputs(calendar_age=8.0)
        )
        assert verdict.action is ActionType.MAINTAIN
        assert verdict.finding is Finding.PERFORMANCE_FLUSH

    def test_fragile_tank_is_not_flushed(self, engine, create_inputs, create_metrics) -> None:
        """Test that flushing an aged tank is flagged as risky."""
        verdict = engine.get_raw_recommendation(
            create_metrics(sediment_lbs=3.0, fail_prob=20.0, health_score=45),
            create_inputs(calendar_age=12.0),
        )
        assert verdict.action is ActionType.PASS
        assert verdict.finding is Finding.MAINTENANCE_RISK

    def test_flush_band_follows_config(self, create_inputs, create_metrics) -> None:
        """Test that the flush threshold is read from the engine constants."""
        metrics = create_metrics(sediment_lbs=1.5)
        inputs = create_inputs(calendar_age=8.0)
        retuned = TieredRecommendationEngine(TankEngineConfig(sediment_flush_lbs=1.0))
        flushed = retuned.get_raw_recommendation(metrics, inputs)
        assert flushed.finding is Finding.PERFORMANCE_FLUSH
        current = TieredRecommendationEngine().get_raw_recommendation(metrics, inputs)
        assert current.finding is Finding.SYSTEM_HEALTHY

    def test_anode_refresh(self, engine, create_inputs, create_metrics) -> None:
        """Test anode replacement on a tank still worth protecting."""
        verdict = engine.get_raw_recommendation(
            create_metrics(anode_status=AnodeStatus.REPLACE, anode_depletion_percent=80.0),
            create_inputs(calendar_age=7.0),
        )
        assert verdict.finding is Finding.ANODE_REFRESH
        assert "80%" in verdict.reason

    def test_no_anode_refresh_on_older_tank(self, engine, create_inputs, create_metrics) -> None:
        """Test that an older tank does not get a new anode."""
        verdict = engine.get_raw_recommendation(
            create_metrics(anode_status=AnodeStatus.NAKED, anode_depletion_percent=100.0),
            create_inputs(calendar_age=9.0),
        )
        assert verdict.finding is Finding.SYSTEM_HEALTHY

    def test_system_healthy(self, engine, create_inputs, create_metrics) -> None:
        """Test the pass verdict."""
        verdict = engine.get_raw_recommendation(create_metrics(), create_inputs())
        assert verdict.action is ActionType.PASS
        assert verdict.title == "System Healthy"
        assert verdict.badge_color is BadgeColor.GREEN


class TestEconomicOptimizer:
    """Tests for optimize_economic_verdict."""

    def test_run_to_failure_in_low_risk_location(self, create_inputs, create_metrics) -> None:
        """Test that an aged unit in a garage is not worth re-plumbing."""
        inputs = create_inputs(calendar_age=12.0, house_psi=90.0)
        metrics = create_metrics(risk_level=RiskLevel.LOW)
        raw = TieredRecommendationEngine().get_raw_recommendation(metrics, inputs)
        assert raw.finding is Finding.PRV_AND_EXPANSION_TANK

        verdict = optimize_economic_verdict(raw, metrics, inputs, TankEngineConfig())
        assert verdict.action is ActionType.PASS
        assert verdict.title == "Run to Failure"
        assert verdict.finding is Finding.RUN_TO_FAILURE

    def test_strategic_replacement_in_high_risk_location(
        self, create_inputs, create_metrics
    ) -> None:
        """Test that an aged unit over living space is replaced instead of repaired."""
        inputs = create_inputs(calendar_age=12.0, house_psi=90.0)
        metrics = create_metrics(risk_level=RiskLevel.HIGH)
        raw = TieredRecommendationEngine().get_raw_recommendation(metrics, inputs)

        verdict = optimize_economic_verdict(raw, metrics, inputs, TankEngineConfig())
        assert verdict.action is ActionType.REPLACE
        assert verdict.title == "Strategic Replacement"
        assert verdict.finding is Finding.STRATEGIC_REPLACEMENT

    def test_young_unit_keeps_repair(self, create_inputs, create_metrics) -> None:
        """Test that the optimizer leaves repairs on younger units alone."""
        inputs = create_inputs(calendar_age=8.0, house_psi=90.0)
        metrics = create_metrics()
        raw = TieredRecommendationEngine().get_raw_recommendation(metrics, inputs)
        assert optimize_economic_verdict(raw, metrics, inputs, TankEngineConfig()) == raw

    def test_non_infrastructure_verdict_untouched(self, create_inputs, create_metrics) -> None:
        """Test that maintenance verdicts pass through unchanged."""
        inputs = create_inputs(calendar_age=12.0)
        metrics = create_metrics(sediment_lbs=3.0)
        raw = TieredRecommendationEngine().get_raw_recommendation(metrics, inputs)
        assert raw.finding is Finding.MAINTENANCE_RISK
        assert optimize_economic_verdict(raw, metrics, inputs, TankEngineConfig()) == raw

    def test_budgeting_note_past_warranty(self, create_inputs, create_metrics) -> None:
        """Test the budgeting note on a healthy unit past its warranty."""
        inputs = create_inputs(calendar_age=9.0)
        metrics = create_metrics()
        raw = TieredRecommendationEngine().get_raw_recommendation(metrics, inputs)
        verdict = optimize_economic_verdict(raw, metrics, inputs, TankEngineConfig())
        assert verdict.action is ActionType.PASS
        assert verdict.finding is Finding.SYSTEM_HEALTHY
        assert verdict.note is not None
        assert "warranty" in verdict.note

    def test_no_note_within_warranty(self, create_inputs, create_metrics) -> None:
        """Test that a unit within warranty gets no note."""
        inputs = create_inputs(calendar_age=4.0)
        metrics = create_metrics()
        raw = TieredRecommendationEngine().get_raw_recommendation(metrics, inputs)
        assert optimize_economic_verdict(raw, metrics, inputs, TankEngineConfig()).note is None
