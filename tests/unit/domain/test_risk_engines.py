"""Unit tests for the tank, tankless and hybrid risk engines."""

import pytest
from domain.services import (
    HybridRiskEngine,
    TankRiskEngine,
    TanklessRiskEngine,
    calculate_hybrid_efficiency,
)
from domain.services.tank_engine import calculate_aging_speedometer
from domain.value_objects import (
    ActionType,
    AirFilterStatus,
    AnodeStatus,
    Finding,
    FuelType,
    GasLineSize,
    LocationType,
    RoomVolumeType,
    StressFactors,
    TankEngineConfig,
    TempSetting,
    UsageType,
    VentStatus,
)


class TestAgingSpeedometer:
    """Tests for calculate_aging_speedometer."""

    def test_baseline(self) -> None:
        """Test that a neutral unit ages at calendar speed."""
        speedometer = calculate_aging_speedometer(5.0, StressFactors(total=1.0), TankEngineConfig())
        assert speedometer.aging_rate == 1.0
        assert speedometer.years_left_current == pytest.approx(15.0)
        assert speedometer.life_extension == 0.0
        assert speedometer.primary_stressor == "Normal Wear"

    def test_fixing_pressure_extends_life(self) -> None:
        """Test that removing the pressure penalty buys back years."""
        stress = StressFactors(total=1.5, mechanical=1.5, pressure=1.5)
        speedometer = calculate_aging_speedometer(5.0, stress, TankEngineConfig())
        assert speedometer.optimized_rate == 1.0
        assert speedometer.years_left_current == pytest.approx(10.0)
        assert speedometer.years_left_optimized == pytest.approx(15.0)
        assert speedometer.life_extension == pytest.approx(5.0)
        assert speedometer.primary_stressor == "High Pressure"


class TestTankRiskEngine:
    """Tests for TankRiskEngine."""

    @pytest.fixture
    def engine(self) -> TankRiskEngine:
        """Tank engine with the current constants."""
        return TankRiskEngine()

    def test_neutral_unit_bio_age_equals_calendar_age(self, engine, create_inputs) -> None:
        """Test that bio-age tracks calendar age when no stressor is active."""
        for age in (1.0, 5.0, 12.0):
            metrics = engine.calculate_health(create_inputs(calendar_age=age))
            assert metrics.bio_age == age

    def test_tank_extensions_are_populated(self, engine, create_inputs) -> None:
        """Test that tank metrics carry the anode and sediment fields."""
        metrics = engine.calculate_health(create_inputs(hardness_gpg=10.0))
        assert metrics.anode_status is not None
        assert metrics.sediment_lbs == pytest.approx(2.2)
        assert metrics.flush_status is not None
        assert metrics.scale_buildup_score is None
        assert metrics.hybrid_efficiency is None
        assert metrics.is_tankless is False
        assert 0 <= metrics.health_score <= 100

    def test_depleted_anode_on_young_tank(self, engine, create_inputs) -> None:
        """Test the anode refresh verdict on a 5-year-old builder tank."""
        inputs = create_inputs()
        metrics = engine.calculate_health(inputs)
        assert metrics.anode_status is AnodeStatus.NAKED
        verdict = engine.get_recommendation(metrics, inputs)
        assert verdict.action is ActionType.MAINTAIN
        assert verdict.finding is Finding.ANODE_REFRESH

    def test_young_tank_gets_expansion_tank_not_replacement(self, engine, create_inputs) -> None:
        """Test that a fixable pressure problem on a young tank is repaired."""
        inputs = create_inputs(
            calendar_age=2.0,
            house_psi=75.0,
            is_closed_loop=True,
            has_prv=True,
            hardness_gpg=12.0,
            last_flush_years_ago=1.0,
        )
        metrics = engine.calculate_health(inputs)
        assert metrics.effective_pressure == 140.0
        assert metrics.is_transient_pressure is True

        verdict = engine.get_recommendation(metrics, inputs)
        assert verdict.action is ActionType.REPAIR
        assert verdict.title == "Missing Thermal Expansion"
        assert verdict.finding is Finding.MISSING_EXPANSION_TANK

    def test_aged_tank_in_garage_runs_to_failure(self, engine, create_inputs) -> None:
        """Test that re-plumbing an aged, low-risk tank is skipped."""
        inputs = create_inputs(
            calendar_age=12.0, house_psi=90.0, hardness_gpg=5.0, is_annually_maintained=True
        )
        metrics = engine.calculate_health(inputs)
        assert metrics.fail_prob == pytest.approx(24.1, abs=0.5)

        assert engine.get_raw_recommendation(metrics, inputs).finding is (
            Finding.PRV_AND_EXPANSION_TANK
        )
        verdict = engine.get_recommendation(metrics, inputs)
        assert verdict.action is ActionType.PASS
        assert verdict.finding is Finding.RUN_TO_FAILURE

    def test_aged_tank_over_living_space_is_replaced(self, engine, create_inputs) -> None:
        """Test that the same tank over living space is strategically replaced."""
        inputs = create_inputs(
            calendar_age=12.0,
            house_psi=90.0,
            hardness_gpg=5.0,
            is_annually_maintained=True,
            location=LocationType.MAIN_LIVING,
        )
        verdict = engine.assess(inputs).verdict
        assert verdict.action is ActionType.REPLACE
        assert verdict.finding is Finding.STRATEGIC_REPLACEMENT

    def test_age_cap(self, engine, create_inputs) -> None:
        """Test that a 20-year-old tank is past its service life."""
        result = engine.assess(create_inputs(calendar_age=20.0))
        assert result.metrics.fail_prob < 60.0
        assert result.verdict.finding is Finding.END_OF_LIFE

    def test_visual_rust_forces_breach(self, engine, create_inputs) -> None:
        """Test that rust overrides the statistics and the verdict."""
        result = engine.assess(create_inputs(calendar_age=3.0, visual_rust=True))
        assert result.metrics.fail_prob == 99.9
        assert result.metrics.health_score == 2
        assert result.verdict.finding is Finding.CONTAINMENT_BREACH

    def test_stressors_raise_failure_probability(self, engine, create_inputs) -> None:
        """Test that a harsh install ages faster than a quiet one."""
        quiet = engine.calculate_health(create_inputs(calendar_age=8.0))
        harsh = engine.calculate_health(
            create_inputs(
                calendar_age=8.0,
                house_psi=95.0,
                hardness_gpg=15.0,
                temp_setting=TempSetting.HOT,
                has_circ_pump=True,
            )
        )
        assert harsh.bio_age > quiet.bio_age
        assert harsh.fail_prob > quiet.fail_prob
        assert harsh.health_score < quiet.health_score


class TestTanklessRiskEngine:
    """Tests for TanklessRiskEngine."""

    @pytest.fixture
    def engine(self) -> TanklessRiskEngine:
        """Tankless engine with the current constants."""
        return TanklessRiskEngine()

    def _inputs(self, create_inputs, **overrides):
        values = {"fuel_type": FuelType.TANKLESS_GAS, "calendar_age": 3.0}
        values.update(overrides)
        return create_inputs(**values)

    def test_tankless_extensions_are_populated(self, engine, create_inputs) -> None:
        """Test that tankless metrics carry scale fields and no anode fields."""
        metrics = engine.calculate_health(self._inputs(create_inputs, hardness_gpg=10.0))
        assert metrics.is_tankless is True
        assert metrics.scale_buildup_score is not None
        assert metrics.descale_status is not None
        assert metrics.anode_status is None
        assert metrics.sediment_lbs is None

    def test_missing_isolation_valves(self, engine, create_inputs) -> None:
        """Test the valve upgrade on a clean unit that cannot be serviced."""
        verdict = engine.assess(self._inputs(create_inputs)).verdict
        assert verdict.action is ActionType.UPGRADE
        assert verdict.finding is Finding.ISOLATION_VALVES

    def test_system_healthy_with_valves(self, engine, create_inputs) -> None:
        """Test the pass verdict."""
        verdict = engine.assess(self._inputs(create_inputs, has_isolation_valves=True)).verdict
        assert verdict.finding is Finding.SYSTEM_HEALTHY

    def test_scale_lockout(self, engine, create_inputs) -> None:
        """Test that heavy scale forces replacement."""
        verdict = engine.assess(
            self._inputs(create_inputs, calendar_age=5.0, hardness_gpg=20.0, has_isolation_valves=True)
        ).verdict
        assert verdict.action is ActionType.REPLACE
        assert verdict.title == "Scale Lockout"

    def test_run_to_failure(self, engine, create_inputs) -> None:
        """Test that an old calcified unit is left to run."""
        result = engine.assess(
            self._inputs(
                create_inputs,
                calendar_age=7.0,
                usage_type=UsageType.LIGHT,
                hardness_gpg=11.0,
                has_isolation_valves=True,
            )
        )
        assert result.metrics.fail_prob < 60.0
        assert result.metrics.primary_stressor == "Calcification (Non-Serviceable)"
        assert result.verdict.action is ActionType.PASS
        assert result.verdict.finding is Finding.DESCALE_RUN_TO_FAILURE

    def test_end_of_life(self, engine, create_inputs) -> None:
        """Test the tankless age cap."""
        verdict = engine.assess(
            self._inputs(create_inputs, calendar_age=16.0, has_isolation_valves=True)
        ).verdict
        assert verdict.finding is Finding.END_OF_LIFE

    def test_gas_starvation(self, engine, create_inputs) -> None:
        """Test an undersized gas line."""
        verdict = engine.assess(
            self._inputs(
                create_inputs,
                has_isolation_valves=True,
                btu_rating=199000.0,
                gas_line_size=GasLineSize.HALF_INCH,
            )
        ).verdict
        assert verdict.finding is Finding.GAS_STARVATION
        assert "199,000" in verdict.reason

    @pytest.mark.parametrize(
        "count,finding",
        [(3, Finding.ERROR_CODES), (12, Finding.CHRONIC_ERRORS)],
    )
    def test_error_codes(self, engine, create_inputs, count: int, finding: Finding) -> None:
        """Test that error codes are serviced until they become chronic."""
        verdict = engine.assess(
            self._inputs(create_inputs, has_isolation_valves=True, error_code_count=count)
        ).verdict
        assert verdict.finding is finding

    def test_blocked_vent(self, engine, create_inputs) -> None:
        """Test that a blocked vent is a critical breach."""
        result = engine.assess(
            self._inputs(create_inputs, tankless_vent_status=VentStatus.BLOCKED)
        )
        assert result.metrics.fail_prob == 99.9
        assert result.metrics.primary_stressor == "Vent Obstruction"
        assert result.verdict.finding is Finding.VENT_BLOCKED
        assert result.verdict.urgent is True

    def test_electric_uses_its_own_curve(self, engine, create_inputs) -> None:
        """Test that electric units fail earlier at the same bio-age."""
        gas = engine.calculate_health(self._inputs(create_inputs, calendar_age=8.0))
        electric = engine.calculate_health(
            self._inputs(create_inputs, calendar_age=8.0, fuel_type=FuelType.TANKLESS_ELECTRIC)
        )
        assert electric.fail_prob > gas.fail_prob


class TestHybridRiskEngine:
    """Tests for HybridRiskEngine."""

    @pytest.fixture
    def engine(self) -> HybridRiskEngine:
        """Hybrid engine with the current constants."""
        return HybridRiskEngine()

    def _inputs(self, create_inputs, **overrides):
        values = {"fuel_type": FuelType.HYBRID}
        values.update(overrides)
        return create_inputs(**values)

    def test_efficiency_penalties(self, create_inputs) -> None:
        """Test the heat-pump efficiency score."""
        inputs = self._inputs(
            create_inputs,
            air_filter_status=AirFilterStatus.DIRTY,
            room_volume_type=RoomVolumeType.CLOSET_LOUVERED,
            compressor_health=80.0,
            is_condensate_clear=False,
        )
        assert calculate_hybrid_efficiency(inputs, TankEngineConfig()) == pytest.approx(55.0)

    def test_efficiency_is_clamped(self, create_inputs) -> None:
        """Test that the score never goes negative."""
        inputs = self._inputs(
            create_inputs,
            air_filter_status=AirFilterStatus.CLOGGED,
            room_volume_type=RoomVolumeType.CLOSET_SEALED,
            compressor_health=0.0,
            is_condensate_clear=False,
        )
        assert calculate_hybrid_efficiency(inputs, TankEngineConfig()) == 0.0

    def test_metrics_extend_tank_metrics(self, engine, create_inputs) -> None:
        """Test that hybrid metrics are tank metrics plus efficiency."""
        inputs = self._inputs(create_inputs)
        metrics = engine.calculate_health(inputs)
        assert metrics.hybrid_efficiency == 100.0
        assert metrics.anode_status is not None
        assert metrics.bio_age == TankRiskEngine().calculate_health(inputs).bio_age

    def test_filter_clog(self, engine, create_inputs) -> None:
        """Test that a clogged filter is an urgent repair."""
        verdict = engine.assess(
            self._inputs(create_inputs, air_filter_status=AirFilterStatus.CLOGGED)
        ).verdict
        assert verdict.action is ActionType.REPAIR
        assert verdict.urgent is True
        assert verdict.finding is Finding.FILTER_CLOG

    def test_condensate_blockage(self, engine, create_inputs) -> None:
        """Test a blocked condensate line."""
        verdict = engine.assess(self._inputs(create_inputs, is_condensate_clear=False)).verdict
        assert verdict.finding is Finding.CONDENSATE_BLOCKED

    def test_sealed_closet(self, engine, create_inputs) -> None:
        """Test the airflow upgrade for a sealed closet."""
        verdict = engine.assess(
            self._inputs(create_inputs, room_volume_type=RoomVolumeType.CLOSET_SEALED)
        ).verdict
        assert verdict.action is ActionType.UPGRADE
        assert verdict.title == "Insufficient Airflow"

    def test_explosion_hazard_comes_first(self, engine, create_inputs) -> None:
        """Test that pressure safety outranks heat-pump failures."""
        verdict = engine.assess(
            self._inputs(create_inputs, house_psi=155.0, air_filter_status=AirFilterStatus.CLOGGED)
        ).verdict
        assert verdict.finding is Finding.EXPLOSION_HAZARD

    def test_breach_comes_before_filter(self, engine, create_inputs) -> None:
        """Test that a rusted vessel outranks heat-pump failures."""
        verdict = engine.assess(
            self._inputs(create_inputs, visual_rust=True, air_filter_status=AirFilterStatus.CLOGGED)
        ).verdict
        assert verdict.action is ActionType.REPLACE
        assert verdict.finding is Finding.CONTAINMENT_BREACH

    @pytest.mark.parametrize(
        "overrides,expected_finding",
        [
            (
                {"calendar_age": 12.0, "house_psi": 110.0, "has_exp_tank": True},
                Finding.CRITICAL_PRESSURE,
            ),
            (
                {
                    "calendar_age": 14.0,
                    "hardness_gpg": 25.0,
                    "people_count": 6,
                    "usage_type": UsageType.HEAVY,
                },
                Finding.SEDIMENT_LOCKOUT,
            ),
        ],
    )
    def test_vessel_condemnation_outranks_heat_pump_failures(
        self, engine, create_inputs, overrides, expected_finding
    ) -> None:
        """Test that a condemned vessel is replaced even with a clogged filter."""
        verdict = engine.assess(
            self._inputs(
                create_inputs, air_filter_status=AirFilterStatus.CLOGGED, **overrides
            )
        ).verdict
        assert verdict.action is ActionType.REPLACE
        assert verdict.finding is expected_finding

    def test_economic_replacement_outranks_filter_clog(
        self, engine, create_inputs, create_metrics
    ) -> None:
        """Test that statistical end-of-life wins over a heat-pump repair."""
        inputs = self._inputs(
            create_inputs, calendar_age=12.0, air_filter_status=AirFilterStatus.CLOGGED
        )
        verdict = engine.get_recommendation(
            create_metrics(fail_prob=65.0, health_score=7), inputs
        )
        assert verdict.action is ActionType.REPLACE
        assert verdict.finding is Finding.ECONOMIC_FAILURE_RISK

    def test_young_unit_repairs_filter_before_economic_replacement(
        self, engine, create_inputs, create_metrics
    ) -> None:
        """Test that the young tank override keeps the heat-pump repair first."""
        inputs = self._inputs(
            create_inputs, calendar_age=4.0, air_filter_status=AirFilterStatus.CLOGGED
        )
        verdict = engine.get_recommendation(
            create_metrics(fail_prob=65.0, health_score=7), inputs
        )
        assert verdict.finding is Finding.FILTER_CLOG

    def test_efficiency_penalties_follow_config(self, create_inputs) -> None:
        """Test that the heat-pump penalties are read from the engine constants."""
        config = TankEngineConfig(filter_penalty_dirty=5.0, closet_penalty_louvered=0.0)
        inputs = self._inputs(
            create_inputs,
            air_filter_status=AirFilterStatus.DIRTY,
            room_volume_type=RoomVolumeType.CLOSET_LOUVERED,
        )
        assert calculate_hybrid_efficiency(inputs, config) == pytest.approx(95.0)
        assert HybridRiskEngine(config).calculate_health(inputs).hybrid_efficiency == 95.0

    def test_falls_back_to_tank_tiers(self, engine, create_inputs) -> None:
        """Test that a sound heat pump gets the tank verdict."""
        inputs = self._inputs(create_inputs)
        tank = TankRiskEngine()
        expected = tank.get_recommendation(tank.calculate_health(inputs), inputs)
        assert engine.assess(inputs).verdict == expected
