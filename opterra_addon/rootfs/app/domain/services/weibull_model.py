"""Weibull failure model and health score transform.

One-year conditional failure probability from biological age, the
evidence overrides that outrank it, and the severity-curve health score.
"""

import math
from dataclasses import dataclass

from domain.value_objects import ForensicInputs, VentStatus, WeibullParameters


@dataclass(frozen=True)
class HealthProjection:
    """Projected condition some months ahead.

    Attributes:
        months_ahead: Projection horizon
        bio_age: Projected biological age
        fail_prob: Projected one-year failure probability
        health_score: Projected health score
    """

    months_ahead: float
    bio_age: float
    fail_prob: float
    health_score: int


def weibull_failure_probability(bio_age: float, params: WeibullParameters) -> float:
    """One-year conditional failure probability in percent.

    P = 1 - R(t+1)/R(t) with R(t) = exp(-(t/eta)^beta), capped at the
    statistical cap.

    Args:
        bio_age: Biological age t in years
        params: Weibull parameters

    Returns:
        Failure probability between 0 and the statistical cap
    """
    t = max(0.0, bio_age)
    r_now = math.exp(-((t / params.eta) ** params.beta))
    r_next = math.exp(-(((t + 1.0) / params.eta) ** params.beta))
    if r_now <= 0.0:
        return params.statistical_cap
    fail_prob = (1.0 - r_next / r_now) * 100.0
    return min(max(0.0, fail_prob), params.statistical_cap)


def has_breach_evidence(inputs: ForensicInputs) -> bool:
    """Whether physical evidence shows the unit is failing now.

    A blocked exhaust vent counts only for tankless units, the only
    family that reports it.
    """
    if inputs.visual_rust or inputs.is_leaking:
        return True
    return (
        inputs.fuel_type.is_tankless
        and inputs.tankless_vent_status is VentStatus.BLOCKED
    )


def apply_failure_overrides(
    fail_prob: float, inputs: ForensicInputs, params: WeibullParameters
) -> float:
    """Force the visual cap when physical evidence outranks the model."""
    if has_breach_evidence(inputs):
        return params.visual_cap
    return fail_prob


def fail_prob_to_health_score(fail_prob: float, params: WeibullParameters) -> int:
    """Severity curve: 100 x exp(-k x failProb), rounded and clamped to 0-100."""
    score = 100.0 * math.exp(-params.health_score_decay * fail_prob)
    return int(round(max(0.0, min(100.0, score))))


def project_future_health(
    bio_age: float, aging_rate: float, months_ahead: float, params: WeibullParameters
) -> HealthProjection:
    """Project health forward at a constant aging rate.

    Args:
        bio_age: Current biological age
        aging_rate: Years of wear per calendar year
        months_ahead: Projection horizon
        params: Weibull parameters of the appliance family

    Returns:
        Projected bio-age, failure probability and health score
    """
    future_bio_age = bio_age + (months_ahead / 12.0) * aging_rate
    fail_prob = weibull_failure_probability(future_bio_age, params)
    return HealthProjection(
        months_ahead=months_ahead,
        bio_age=round(future_bio_age, 1),
        fail_prob=round(fail_prob, 1),
        health_score=fail_prob_to_health_score(fail_prob, params),
    )
