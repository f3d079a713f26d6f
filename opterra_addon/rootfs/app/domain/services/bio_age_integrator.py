"""Biological age integrator.

Converts calendar age into wear-adjusted age. Storage tanks age in two
phases keyed to the anode: while it is intact chemical stress is largely
suppressed, once it is gone every stressor applies in full.
"""

import logging

from domain.value_objects import StressFactors

logger = logging.getLogger(__name__)


def integrate_biphasic_bio_age(
    calendar_age: float,
    naked_years: float,
    stress: StressFactors,
    chemical_suppression: float,
    max_bio_age: float,
) -> float:
    """Integrate wear over the protected and naked phases.

    Protected phase: mechanical stress at full rate, chemical excess at
    (1 - chemical_suppression). Naked phase: the capped total stress.

    Args:
        calendar_age: Years since installation
        naked_years: Years without anode protection (clamped to the age)
        stress: Composed stress factors
        chemical_suppression: Share of chemical excess removed by the anode
        max_bio_age: Absolute cap on the result

    Returns:
        Biological age in years
    """
    naked = min(max(0.0, naked_years), calendar_age)
    protected = calendar_age - naked

    protected_rate = stress.mechanical * (
        1.0 + (stress.chemical - 1.0) * (1.0 - chemical_suppression)
    )
    naked_rate = stress.total

    bio_age = min(protected * protected_rate + naked * naked_rate, max_bio_age)
    logger.debug(
        f"Biphasic bio-age: protected={protected:.2f} yrs @ {protected_rate:.3f}, "
        f"naked={naked:.2f} yrs @ {naked_rate:.3f} -> {bio_age:.2f}"
    )
    return bio_age


def integrate_single_phase_bio_age(
    calendar_age: float, stress: StressFactors, max_stress: float, max_bio_age: float
) -> float:
    """Bio-age for units without an anode: age x capped total stress."""
    return min(calendar_age * min(stress.total, max_stress), max_bio_age)
