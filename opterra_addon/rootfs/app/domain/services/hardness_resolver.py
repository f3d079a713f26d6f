"""Hardness resolver.

Reconciles the street/regional hardness, an on-site measurement and the
softener state into the hardness actually reaching the appliance.
"""

import logging

from domain.value_objects import (
    Confidence,
    ForensicInputs,
    HardnessSource,
    ResolvedHardness,
    SoftenerSaltStatus,
    TankEngineConfig,
    TanklessEngineConfig,
)

logger = logging.getLogger(__name__)


def resolve_hardness(
    inputs: ForensicInputs, config: TankEngineConfig | TanklessEngineConfig
) -> ResolvedHardness:
    """Resolve conflicting hardness signals.

    Priority:
    1. A direct measurement on site (HIGH confidence)
    2. Softener state inference: salt EMPTY passes full street hardness,
       salt OK leaves near-zero hardness, salt UNKNOWN gets partial credit
    3. The street/regional value (MEDIUM confidence)

    The street figure is always reported as well, since sediment in an
    unsoftened tank and anode exposure downstream may need it.

    Args:
        inputs: Inspection snapshot
        config: Tuning constants carrying the softener credit

    Returns:
        Street and effective hardness with source and confidence tags
    """
    street = (
        inputs.street_hardness_gpg
        if inputs.street_hardness_gpg is not None
        else inputs.hardness_gpg
    )

    if inputs.measured_hardness_gpg is not None:
        resolved = ResolvedHardness(
            street_hardness=street,
            effective_hardness=inputs.measured_hardness_gpg,
            source=HardnessSource.MEASURED,
            confidence=Confidence.HIGH,
        )
    elif inputs.has_softener:
        if inputs.softener_salt_status is SoftenerSaltStatus.EMPTY:
            effective, confidence = street, Confidence.MEDIUM
        elif inputs.softener_salt_status is SoftenerSaltStatus.OK:
            effective, confidence = config.softener_ok_hardness_gpg, Confidence.MEDIUM
        else:
            effective = min(street, config.softener_unknown_salt_gpg)
            confidence = Confidence.LOW
        resolved = ResolvedHardness(
            street_hardness=street,
            effective_hardness=effective,
            source=HardnessSource.INFERRED,
            confidence=confidence,
        )
    else:
        resolved = ResolvedHardness(
            street_hardness=street,
            effective_hardness=street,
            source=HardnessSource.API,
            confidence=Confidence.MEDIUM,
        )

    logger.debug(
        f"Resolved hardness: effective={resolved.effective_hardness:.2f} GPG, "
        f"street={resolved.street_hardness:.2f} GPG, "
        f"source={resolved.source.value}, confidence={resolved.confidence.value}"
    )
    return resolved
