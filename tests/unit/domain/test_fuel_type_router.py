"""Unit tests for fuel-type routing and the engine-wide invariants."""

import pytest
from domain.services import (
    FuelTypeRouter,
    HybridRiskEngine,
    TankRiskEngine,
    TanklessRiskEngine,
    calculate_health,
    calculate_opterra_risk,
    get_location_risk,
    get_recommendation,
    get_risk_level_info,
)
from domain.value_objects import (
    ActionType,
    Finding,
    FuelType,
    LocationType,
    RiskLevel,
    TankEngineConfig,
    TempSetting,
    UsageType,
)

ALL_FUEL_TYPES = list(FuelType)


class TestRouting:
    """Tests for FuelTypeRouter.route."""

    @pytest.mark.parametrize(
        "fuel_type,engine_type",
        [
            (FuelType.GAS, TankRiskEngine),
            (FuelType.ELECTRIC, TankRiskEngine),
            (FuelType.HYBRID, HybridRiskEngine),
            (FuelType.TANKLESS_GAS, TanklessRiskEngine),
            (FuelType.TANKLESS_ELECTRIC, TanklessRiskEngine),
        ],
    )
    def test_route(self, fuel_type: FuelType, engine_type: type) -> None:
        """Test that each fuel type reaches its engine."""
        assert isinstance(FuelTypeRouter().route(fuel_type), engine_type)

    def test_engines_are_reused(self) -> None:
        """Test that routing returns the same engine instance each time."""
        router = FuelTypeRouter()
        assert router.route(FuelType.GAS) is router.route(FuelType.ELECTRIC)

    def test_tank_config_is_shared_with_hybrid(self) -> None:
        """Test that hybrids use the storage tank constants."""
        config = TankEngineConfig(psi_safety_valve=120.0)
        router = FuelTypeRouter(tank_config=config)
        assert router.route(FuelType.GAS).config is config
        assert router.route(FuelType.HYBRID).config is config


class TestEntryPoints:
    """Tests for the module-level assessment functions."""

    @pytest.mark.parametrize("fuel_type", ALL_FUEL_TYPES)
    def test_assessment_is_deterministic(self, create_inputs, fuel_type: FuelType) -> None:
        """Test that identical inputs give identical results."""
        inputs = create_inputs(fuel_type=fuel_type, calendar_age=7.0, hardness_gpg=12.0)
        assert calculate_opterra_risk(inputs) == calculate_opterra_risk(inputs)

    @pytest.mark.parametrize("fuel_type", ALL_FUEL_TYPES)
    def test_decomposed_path_matches_combined(self, create_inputs, fuel_type: FuelType) -> None:
        """Test that metrics then verdict equals the one-shot assessment."""
        inputs = create_inputs(
            fuel_type=fuel_type, calendar_age=9.0, hardness_gpg=8.0, house_psi=85.0
        )
        metrics = calculate_health(inputs)
        result = calculate_opterra_risk(inputs)
        assert result.metrics == metrics
        assert result.verdict == get_recommendation(metrics, inputs)


class TestInvariants:
    """Properties that hold for every engine."""

    @pytest.mark.parametrize("fuel_type", ALL_FUEL_TYPES)
    def test_explosion_hazard_for_every_family(self, create_inputs, fuel_type: FuelType) -> None:
        """Test that pressure at the valve rating always wins."""
        verdict = calculate_opterra_risk(
            create_inputs(fuel_type=fuel_type, house_psi=155.0, visual_rust=True)
        ).verdict
        assert verdict.action is ActionType.REPLACE
        assert verdict.urgent is True
        assert verdict.finding is Finding.EXPLOSION_HAZARD

    @pytest.mark.parametrize("fuel_type", ALL_FUEL_TYPES)
    def test_visual_breach_for_every_family(self, create_inputs, fuel_type: FuelType) -> None:
        """Test that rust pins the failure probability and forces replacement."""
        result = calculate_opterra_risk(
            create_inputs(fuel_type=fuel_type, calendar_age=2.0, visual_rust=True)
        )
        assert result.metrics.fail_prob == 99.9
        assert result.verdict.action is ActionType.REPLACE
        assert result.verdict.urgent is True

    @pytest.mark.parametrize("fuel_type", ALL_FUEL_TYPES)
    @pytest.mark.parametrize("age", [0.0, 4.0, 10.0, 25.0])
    def test_statistical_bounds(self, create_inputs, fuel_type: FuelType, age: float) -> None:
        """Test that without physical evidence the model stays under its cap."""
        metrics = calculate_health(
            create_inputs(
                fuel_type=fuel_type,
                calendar_age=age,
                house_psi=140.0,
                hardness_gpg=25.0,
                temp_setting=TempSetting.HOT,
                usage_type=UsageType.HEAVY,
                has_circ_pump=True,
            )
        )
        assert 0.0 <= metrics.fail_prob <= 85.0
        assert 0 <= metrics.health_score <= 100
        assert 0.0 <= metrics.bio_age <= 50.0

    @pytest.mark.parametrize("fuel_type", ALL_FUEL_TYPES)
    def test_every_verdict_is_well_formed(self, create_inputs, fuel_type: FuelType) -> None:
        """Test that verdicts always carry an action, a title and a finding."""
        for age in (1.0, 6.0, 11.0, 18.0):
            verdict = calculate_opterra_risk(
                create_inputs(fuel_type=fuel_type, calendar_age=age, hardness_gpg=10.0)
            ).verdict
            assert isinstance(verdict.action, ActionType)
            assert verdict.title
            assert verdict.finding is not None


class TestLocationRisk:
    """Tests for get_location_risk."""

    @pytest.mark.parametrize(
        "location,finished,expected",
        [
            (LocationType.ATTIC, False, RiskLevel.EXTREME),
            (LocationType.UPPER_FLOOR, True, RiskLevel.EXTREME),
            (LocationType.MAIN_LIVING, False, RiskLevel.HIGH),
            (LocationType.BASEMENT, True, RiskLevel.HIGH),
            (LocationType.BASEMENT, False, RiskLevel.MODERATE),
            (LocationType.GARAGE, True, RiskLevel.MODERATE),
            (LocationType.GARAGE, False, RiskLevel.LOW),
            (LocationType.CRAWLSPACE, False, RiskLevel.LOW),
            (LocationType.EXTERIOR, True, RiskLevel.LOW),
        ],
    )
    def test_classification(
        self, location: LocationType, finished: bool, expected: RiskLevel
    ) -> None:
        """Test the damage consequence by location."""
        assert get_location_risk(location, finished) is expected

    def test_display_info(self) -> None:
        """Test the display metadata for a level."""
        info = get_risk_level_info(RiskLevel.EXTREME)
        assert info.label == "EXTREME"
        assert info.color == "red"
