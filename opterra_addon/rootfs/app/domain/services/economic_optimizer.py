"""Economic optimizer.

Post-pass over a raw verdict that re-weighs costly infrastructure repairs
against the unit's age and the consequence of a failure where it sits.
"""

import logging

from domain.value_objects import (
    ActionType,
    BadgeColor,
    Finding,
    ForensicInputs,
    OpterraMetrics,
    Recommendation,
    RecommendationBadge,
    RiskLevel,
    TankEngineConfig,
    TanklessEngineConfig,
)

logger = logging.getLogger(__name__)


def optimize_economic_verdict(
    verdict: Recommendation,
    metrics: OpterraMetrics,
    inputs: ForensicInputs,
    config: TankEngineConfig | TanklessEngineConfig,
) -> Recommendation:
    """Rewrite an infrastructure repair verdict when it is not worth doing.

    On an aged unit, an infrastructure repair becomes:
    - PASS "Run to Failure" in a low-consequence location, since the
      repair cost is not recovered over the remaining life
    - REPLACE "Strategic Replacement" in a high-consequence location,
      since repairing now and replacing soon costs more than replacing now

    A healthy unit past its warranty keeps its verdict but gains a
    budgeting note.

    Args:
        verdict: Raw verdict from the tiered engine
        metrics: Metrics the verdict was derived from
        inputs: Inspection snapshot
        config: Tuning constants of the engine that produced the verdict

    Returns:
        The optimized verdict (the input verdict when no rule applies)
    """
    age = inputs.calendar_age
    finding = verdict.finding

    if (
        finding is not None
        and finding.is_infrastructure
        and age > config.age_economic_repair_limit
    ):
        if metrics.risk_level <= RiskLevel.MODERATE:
            logger.info(
                f"Optimizer: {finding.value} on {age:.0f}-year-old unit in "
                f"low-risk location -> run to failure"
            )
            return Recommendation(
                action=ActionType.PASS,
                title="Run to Failure",
                reason=(
                    f"{verdict.title} would normally be recommended, but at {age:.0f} years "
                    f"the repair cost is not justified by the remaining life. The unit is "
                    f"in a low-damage location, so it can be run until it fails."
                ),
                urgent=False,
                badge_color=BadgeColor.YELLOW,
                badge=RecommendationBadge.MONITOR,
                finding=Finding.RUN_TO_FAILURE,
            )
        logger.info(
            f"Optimizer: {finding.value} on {age:.0f}-year-old unit in "
            f"high-risk location -> strategic replacement"
        )
        return Recommendation(
            action=ActionType.REPLACE,
            title="Strategic Replacement",
            reason=(
                f"{verdict.title} is needed, but investing in a {age:.0f}-year-old unit "
                f"in a high-damage location only delays a replacement that is coming soon. "
                f"Replacing now avoids paying for both."
            ),
            urgent=False,
            badge_color=BadgeColor.ORANGE,
            badge=RecommendationBadge.REPLACE,
            finding=Finding.STRATEGIC_REPLACEMENT,
        )

    if finding is Finding.SYSTEM_HEALTHY and age > inputs.warranty_years:
        return verdict.with_note(
            f"Unit is {age:.0f} years old, past its {inputs.warranty_years:.0f}-year "
            f"warranty. Start budgeting for a replacement."
        )

    return verdict
