"""JSON payload mapper.

Converts HTTP request bodies into domain inputs and domain results back
into JSON-ready dictionaries. Keys are snake_case field names.
"""

import logging
from dataclasses import asdict
from enum import Enum
from typing import Any, Callable

from domain.services import get_risk_level_info
from domain.value_objects import (
    AirFilterStatus,
    ConnectionType,
    ExpansionTankStatus,
    FlameRodStatus,
    ForensicInputs,
    FuelType,
    GasLineSize,
    InletFilterStatus,
    LocationType,
    OpterraMetrics,
    OpterraResult,
    Recommendation,
    RoomVolumeType,
    SanitizerType,
    SoftenerSaltStatus,
    TempSetting,
    TierProfile,
    UsageType,
    VentStatus,
)

_LOGGER = logging.getLogger(__name__)

REQUIRED_FIELDS = ("calendar_age", "house_psi", "hardness_gpg")


def _parse_bool(value: Any) -> bool:
    """Accept JSON booleans only; truthy strings are ambiguous."""
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _parse_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return int(number)


def _parse_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _parse_enum(enum_type: type[Enum]) -> Callable[[Any], Enum]:
    def parse(value: Any) -> Enum:
        try:
            return enum_type(value)
        except ValueError:
            allowed = ", ".join(str(member.value) for member in enum_type)
            raise ValueError(f"{value!r} is not one of: {allowed}") from None

    return parse


# Optional fields and their converters; omitted keys keep the dataclass default.
_FIELD_PARSERS: dict[str, Callable[[Any], Any]] = {
    "fuel_type": _parse_enum(FuelType),
    "warranty_years": _parse_float,
    "temp_setting": _parse_enum(TempSetting),
    "location": _parse_enum(LocationType),
    "is_finished_area": _parse_bool,
    "street_hardness_gpg": _parse_float,
    "measured_hardness_gpg": _parse_float,
    "people_count": _parse_int,
    "usage_type": _parse_enum(UsageType),
    "tank_capacity": _parse_float,
    "has_softener": _parse_bool,
    "softener_salt_status": _parse_enum(SoftenerSaltStatus),
    "sanitizer_type": _parse_enum(SanitizerType),
    "has_circ_pump": _parse_bool,
    "has_exp_tank": _parse_bool,
    "exp_tank_status": _parse_enum(ExpansionTankStatus),
    "has_prv": _parse_bool,
    "is_closed_loop": _parse_bool,
    "has_drain_pan": _parse_bool,
    "connection_type": _parse_enum(ConnectionType),
    "anode_count": _parse_int,
    "visual_rust": _parse_bool,
    "is_leaking": _parse_bool,
    "last_anode_replace_years_ago": _parse_float,
    "last_flush_years_ago": _parse_float,
    "is_annually_maintained": _parse_bool,
    "years_without_anode": _parse_float,
    "years_without_softener": _parse_float,
    "air_filter_status": _parse_enum(AirFilterStatus),
    "is_condensate_clear": _parse_bool,
    "compressor_health": _parse_float,
    "room_volume_type": _parse_enum(RoomVolumeType),
    "flow_rate_gpm": _parse_float,
    "rated_flow_gpm": _parse_float,
    "last_descale_years_ago": _parse_float,
    "igniter_health": _parse_float,
    "flame_rod_status": _parse_enum(FlameRodStatus),
    "element_health": _parse_float,
    "inlet_filter_status": _parse_enum(InletFilterStatus),
    "has_recirculation_loop": _parse_bool,
    "error_code_count": _parse_int,
    "tankless_vent_status": _parse_enum(VentStatus),
    "has_isolation_valves": _parse_bool,
    "gas_line_size": _parse_enum(GasLineSize),
    "btu_rating": _parse_float,
    "manufacturer": str,
    "model_number": str,
}


def parse_forensic_inputs(data: dict[str, Any]) -> ForensicInputs:
    """Build inspection inputs from a JSON body.

    Args:
        data: Decoded request body

    Returns:
        Validated inputs

    Raises:
        KeyError: If a required field is missing
        ValueError: If a field has the wrong type, an unknown enum value,
            or violates an input invariant
    """
    kwargs: dict[str, Any] = {}
    for name in REQUIRED_FIELDS:
        value = data[name]
        try:
            kwargs[name] = _parse_float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{name}: {e}") from None

    for name, parse in _FIELD_PARSERS.items():
        value = data.get(name)
        if value is None:
            continue
        try:
            kwargs[name] = parse(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{name}: {e}") from None

    unknown = set(data) - set(REQUIRED_FIELDS) - set(_FIELD_PARSERS)
    if unknown:
        _LOGGER.debug("Ignoring unknown fields: %s", ", ".join(sorted(unknown)))

    return ForensicInputs(**kwargs)


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def metrics_to_dict(metrics: OpterraMetrics) -> dict[str, Any]:
    """Serialize metrics, including the display info for the risk level."""
    payload = _jsonable(asdict(metrics))
    if metrics.anode_burn_factors is not None:
        payload["anode_burn_factors"]["combined"] = metrics.anode_burn_factors.combined
        payload["anode_burn_factors"]["active"] = metrics.anode_burn_factors.active
    info = get_risk_level_info(metrics.risk_level)
    payload["risk_level_info"] = {
        "label": info.label,
        "color": info.color,
        "description": info.description,
    }
    return payload


def recommendation_to_dict(verdict: Recommendation) -> dict[str, Any]:
    """Serialize a verdict."""
    return _jsonable(asdict(verdict))


def result_to_dict(result: OpterraResult) -> dict[str, Any]:
    """Serialize a full assessment result."""
    return {
        "metrics": metrics_to_dict(result.metrics),
        "verdict": recommendation_to_dict(result.verdict),
    }


def tier_profile_to_dict(profile: TierProfile) -> dict[str, Any]:
    """Serialize a tier catalog record."""
    return _jsonable(asdict(profile))
