"""Location risk classification.

Water-damage consequence of a failure, by install location.
"""

from domain.value_objects import LocationType, RiskLevel, RiskLevelInfo

_RISK_LEVEL_INFO = {
    RiskLevel.LOW: RiskLevelInfo(
        level=RiskLevel.LOW,
        label="LOW",
        color="green",
        description="Minimal damage potential",
    ),
    RiskLevel.MODERATE: RiskLevelInfo(
        level=RiskLevel.MODERATE,
        label="MODERATE",
        color="yellow",
        description="Limited damage potential",
    ),
    RiskLevel.HIGH: RiskLevelInfo(
        level=RiskLevel.HIGH,
        label="HIGH",
        color="orange",
        description="Significant damage potential",
    ),
    RiskLevel.EXTREME: RiskLevelInfo(
        level=RiskLevel.EXTREME,
        label="EXTREME",
        color="red",
        description="Catastrophic damage potential",
    ),
}


def get_location_risk(location: LocationType, is_finished_area: bool) -> RiskLevel:
    """Classify the consequence of a leak at the install location.

    Args:
        location: Install location
        is_finished_area: Whether the area has drywall or flooring to ruin

    Returns:
        Risk level from LOW (1) to EXTREME (4)
    """
    if location in (LocationType.ATTIC, LocationType.UPPER_FLOOR):
        return RiskLevel.EXTREME
    if location is LocationType.MAIN_LIVING:
        return RiskLevel.HIGH
    if location is LocationType.BASEMENT:
        return RiskLevel.HIGH if is_finished_area else RiskLevel.MODERATE
    if location in (LocationType.GARAGE, LocationType.CRAWLSPACE):
        return RiskLevel.MODERATE if is_finished_area else RiskLevel.LOW
    return RiskLevel.LOW


def get_risk_level_info(level: RiskLevel) -> RiskLevelInfo:
    """Display label, colour and description for a risk level."""
    return _RISK_LEVEL_INFO[level]
