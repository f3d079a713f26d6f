"""Resolved water hardness value object."""

from dataclasses import dataclass
from enum import Enum


class HardnessSource(str, Enum):
    """Where the effective hardness figure came from."""

    MEASURED = "MEASURED"
    INFERRED = "INFERRED"
    API = "API"


class Confidence(str, Enum):
    """Confidence tag attached to a resolved signal."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class ResolvedHardness:
    """Hardness after reconciling street, measured and softener signals.

    Attributes:
        street_hardness: Regional hardness in GPG (drives sediment for
            unsoftened water)
        effective_hardness: Hardness actually reaching the appliance in GPG
        source: Signal the effective value was taken from
        confidence: How far downstream consumers should trust it
    """

    street_hardness: float
    effective_hardness: float
    source: HardnessSource
    confidence: Confidence

    def __post_init__(self) -> None:
        """Validate resolved hardness values."""
        if self.street_hardness < 0:
            raise ValueError(
                f"street_hardness must be non-negative, got {self.street_hardness}"
            )
        if self.effective_hardness < 0:
            raise ValueError(
                f"effective_hardness must be non-negative, got {self.effective_hardness}"
            )
