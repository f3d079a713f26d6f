"""Recommendation value objects.

The verdict derived from a metrics snapshot and the combined result
returned by every risk engine.
"""

from dataclasses import dataclass, replace
from enum import Enum

from .opterra_metrics import OpterraMetrics


class ActionType(str, Enum):
    """What the homeowner is told to do."""

    REPLACE = "REPLACE"
    REPAIR = "REPAIR"
    UPGRADE = "UPGRADE"
    MAINTAIN = "MAINTAIN"
    PASS = "PASS"


class RecommendationBadge(str, Enum):
    """Severity badge shown next to a verdict."""

    CRITICAL = "CRITICAL"
    REPLACE = "REPLACE"
    SERVICE = "SERVICE"
    MONITOR = "MONITOR"
    OPTIMAL = "OPTIMAL"


class BadgeColor(str, Enum):
    """Display colour of a verdict badge."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"


class Finding(str, Enum):
    """Identifies the decision rule that produced a verdict."""

    # Safety and physical lockout
    EXPLOSION_HAZARD = "EXPLOSION_HAZARD"
    CONTAINMENT_BREACH = "CONTAINMENT_BREACH"
    SEDIMENT_LOCKOUT = "SEDIMENT_LOCKOUT"
    CRITICAL_PRESSURE = "CRITICAL_PRESSURE"

    # Economic replacement
    ECONOMIC_FAILURE_RISK = "ECONOMIC_FAILURE_RISK"
    END_OF_LIFE = "END_OF_LIFE"
    LIABILITY_RISK = "LIABILITY_RISK"

    # Infrastructure service
    FAILED_PRV = "FAILED_PRV"
    PRV_AND_EXPANSION_TANK = "PRV_AND_EXPANSION_TANK"
    PRESSURE_VIOLATION = "PRESSURE_VIOLATION"
    MISSING_EXPANSION_TANK = "MISSING_EXPANSION_TANK"
    PRESSURE_OPTIMIZATION = "PRESSURE_OPTIMIZATION"

    # Maintenance
    MAINTENANCE_RISK = "MAINTENANCE_RISK"
    PERFORMANCE_FLUSH = "PERFORMANCE_FLUSH"
    ANODE_REFRESH = "ANODE_REFRESH"
    SYSTEM_HEALTHY = "SYSTEM_HEALTHY"

    # Economic optimizer rewrites
    RUN_TO_FAILURE = "RUN_TO_FAILURE"
    STRATEGIC_REPLACEMENT = "STRATEGIC_REPLACEMENT"

    # Tankless
    VENT_BLOCKED = "VENT_BLOCKED"
    HEAT_EXCHANGER_FAILURE = "HEAT_EXCHANGER_FAILURE"
    SCALE_LOCKOUT = "SCALE_LOCKOUT"
    CHRONIC_ERRORS = "CHRONIC_ERRORS"
    ERROR_CODES = "ERROR_CODES"
    GAS_STARVATION = "GAS_STARVATION"
    VENT_RESTRICTED = "VENT_RESTRICTED"
    IGNITION_FAILURE = "IGNITION_FAILURE"
    DESCALE_RUN_TO_FAILURE = "DESCALE_RUN_TO_FAILURE"
    DESCALE_IMPOSSIBLE = "DESCALE_IMPOSSIBLE"
    DESCALE_CRITICAL = "DESCALE_CRITICAL"
    DESCALE_DUE = "DESCALE_DUE"
    ISOLATION_VALVES = "ISOLATION_VALVES"

    # Hybrid
    FILTER_CLOG = "FILTER_CLOG"
    CONDENSATE_BLOCKED = "CONDENSATE_BLOCKED"
    INSUFFICIENT_AIRFLOW = "INSUFFICIENT_AIRFLOW"

    @property
    def is_infrastructure(self) -> bool:
        """Whether the finding is a costly plumbing repair the optimizer may re-weigh."""
        return self in _INFRASTRUCTURE_FINDINGS


_INFRASTRUCTURE_FINDINGS = frozenset(
    {
        Finding.FAILED_PRV,
        Finding.PRV_AND_EXPANSION_TANK,
        Finding.PRESSURE_VIOLATION,
        Finding.MISSING_EXPANSION_TANK,
        Finding.PRESSURE_OPTIMIZATION,
        Finding.GAS_STARVATION,
        Finding.DESCALE_IMPOSSIBLE,
        Finding.ISOLATION_VALVES,
    }
)


@dataclass(frozen=True)
class Recommendation:
    """Verdict for one assessment.

    Attributes:
        action: Recommended action
        title: Short headline
        reason: Human-readable justification
        urgent: Whether the action should not wait
        badge_color: Display colour
        badge: Severity badge
        finding: Rule that produced the verdict
        note: Optional budgeting or context guidance
    """

    action: ActionType
    title: str
    reason: str
    urgent: bool
    badge_color: BadgeColor
    badge: RecommendationBadge | None = None
    finding: Finding | None = None
    note: str | None = None

    def __post_init__(self) -> None:
        """Validate recommendation values."""
        if not self.title:
            raise ValueError("title cannot be empty")
        if not self.reason:
            raise ValueError("reason cannot be empty")

    def with_note(self, note: str) -> "Recommendation":
        """Return a copy carrying the given note."""
        return replace(self, note=note)


@dataclass(frozen=True)
class OpterraResult:
    """Metrics and verdict returned by every risk engine."""

    metrics: OpterraMetrics
    verdict: Recommendation
