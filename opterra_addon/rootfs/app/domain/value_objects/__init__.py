"""Value objects for the risk domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .engine_config import TankEngineConfig, TanklessEngineConfig, WeibullParameters
from .equipment_types import (
    AirFilterStatus,
    ConnectionType,
    ExpansionTankStatus,
    FlameRodStatus,
    FuelType,
    GasLineSize,
    InletFilterStatus,
    LocationType,
    RiskLevel,
    RoomVolumeType,
    SanitizerType,
    SoftenerSaltStatus,
    TempSetting,
    UsageType,
    VentStatus,
)
from .forensic_inputs import ForensicInputs
from .opterra_metrics import (
    AnodeBurnFactors,
    AnodeStatus,
    DescaleStatus,
    FlushStatus,
    OpterraMetrics,
    RiskLevelInfo,
    StressFactors,
)
from .recommendation import (
    ActionType,
    BadgeColor,
    Finding,
    OpterraResult,
    Recommendation,
    RecommendationBadge,
)
from .resolved_hardness import Confidence, HardnessSource, ResolvedHardness
from .tier_profile import (
    TANKLESS_TIER_PROFILES,
    TIER_PROFILES,
    AnodeType,
    FailureMode,
    InsulationQuality,
    QualityTier,
    TierProfile,
    VentType,
    detect_quality_tier,
)

__all__ = [
    "TANKLESS_TIER_PROFILES",
    "TIER_PROFILES",
    "ActionType",
    "AirFilterStatus",
    "AnodeBurnFactors",
    "AnodeStatus",
    "AnodeType",
    "BadgeColor",
    "Confidence",
    "ConnectionType",
    "DescaleStatus",
    "ExpansionTankStatus",
    "FailureMode",
    "Finding",
    "FlameRodStatus",
    "FlushStatus",
    "ForensicInputs",
    "FuelType",
    "GasLineSize",
    "HardnessSource",
    "InletFilterStatus",
    "InsulationQuality",
    "LocationType",
    "OpterraMetrics",
    "OpterraResult",
    "QualityTier",
    "Recommendation",
    "RecommendationBadge",
    "ResolvedHardness",
    "RiskLevel",
    "RiskLevelInfo",
    "RoomVolumeType",
    "SanitizerType",
    "SoftenerSaltStatus",
    "StressFactors",
    "TankEngineConfig",
    "TanklessEngineConfig",
    "TempSetting",
    "TierProfile",
    "UsageType",
    "VentStatus",
    "VentType",
    "WeibullParameters",
    "detect_quality_tier",
]
