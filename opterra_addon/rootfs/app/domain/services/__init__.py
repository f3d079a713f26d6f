"""Domain services for water heater risk assessment.

Services contain pure business logic and operate on value objects.
"""

from .anode_model import AnodeState, BurnInterval, build_burn_intervals, calculate_anode_state
from .bio_age_integrator import integrate_biphasic_bio_age, integrate_single_phase_bio_age
from .economic_optimizer import optimize_economic_verdict
from .fuel_type_router import (
    FuelTypeRouter,
    calculate_health,
    calculate_opterra_risk,
    get_recommendation,
)
from .hardness_resolver import resolve_hardness
from .hybrid_engine import HybridRiskEngine, calculate_hybrid_efficiency
from .location_risk import get_location_risk, get_risk_level_info
from .pressure_physics import EffectivePressure, pressure_stress, resolve_effective_pressure
from .recommendation_engine import TieredRecommendationEngine
from .sediment_model import ScaleState, SedimentState, calculate_scale, calculate_sediment
from .stress_composer import compose_tank_stress, compose_tankless_stress
from .tank_engine import TankRiskEngine
from .tankless_engine import TanklessRiskEngine
from .weibull_model import (
    HealthProjection,
    apply_failure_overrides,
    fail_prob_to_health_score,
    project_future_health,
    weibull_failure_probability,
)

__all__ = [
    "AnodeState",
    "BurnInterval",
    "EffectivePressure",
    "FuelTypeRouter",
    "HealthProjection",
    "HybridRiskEngine",
    "ScaleState",
    "SedimentState",
    "TankRiskEngine",
    "TanklessRiskEngine",
    "TieredRecommendationEngine",
    "apply_failure_overrides",
    "build_burn_intervals",
    "calculate_anode_state",
    "calculate_health",
    "calculate_hybrid_efficiency",
    "calculate_opterra_risk",
    "calculate_scale",
    "calculate_sediment",
    "compose_tank_stress",
    "compose_tankless_stress",
    "fail_prob_to_health_score",
    "get_location_risk",
    "get_recommendation",
    "get_risk_level_info",
    "integrate_biphasic_bio_age",
    "integrate_single_phase_bio_age",
    "optimize_economic_verdict",
    "pressure_stress",
    "project_future_health",
    "resolve_effective_pressure",
    "resolve_hardness",
    "weibull_failure_probability",
]
