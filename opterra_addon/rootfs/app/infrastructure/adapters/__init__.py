"""Infrastructure adapters for the risk engine.

These adapters translate between the JSON wire format and the domain
value objects.
"""

from .payload_mapper import (
    metrics_to_dict,
    parse_forensic_inputs,
    recommendation_to_dict,
    result_to_dict,
    tier_profile_to_dict,
)

__all__ = [
    "metrics_to_dict",
    "parse_forensic_inputs",
    "recommendation_to_dict",
    "result_to_dict",
    "tier_profile_to_dict",
]
