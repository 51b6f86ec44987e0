"""
Tier selection - graceful degradation per module.

Each module independently adopts the richest methodology the country's data
supports:

1. Walk the tiers in catalog order (most desirable first)
2. Take the first tier whose required capability is available
3. If none matches, take the last tier, whatever its requirement

The fallback is positional: the last tier is the baseline even when it
names a requirement the country does not meet.
"""

import logging
from typing import Optional

from ..errors import ConfigurationError
from ..schemas.assessment import CapabilityRecord, TierCheck
from ..schemas.catalog import Module, Tier

logger = logging.getLogger(__name__)


def is_tier_satisfied(tier: Tier, record: CapabilityRecord) -> bool:
    """Whether the country meets this tier's data requirement.

    Baseline tiers have no requirement and are never satisfied on their own.
    """
    return record.has(tier.required_capability)


def find_satisfied_tier(module: Module, record: CapabilityRecord) -> Optional[Tier]:
    """First tier in catalog order whose requirement is met, or None."""
    for tier in module.tiers:
        if is_tier_satisfied(tier, record):
            return tier
    return None


def select_tier(module: Module, record: CapabilityRecord) -> Tier:
    """Select the single active tier for a module.

    Raises:
        ConfigurationError: If the module has no tiers to fall back on
    """
    if not module.tiers:
        raise ConfigurationError(f"Module '{module.id}' has no tiers")

    tier = find_satisfied_tier(module, record)
    if tier is None:
        tier = module.tiers[-1]
        logger.debug(f"{module.id}: no requirement met for {record.subject_name}, falling back to '{tier.name}'")
    else:
        logger.debug(f"{module.id}: selected '{tier.name}' via {tier.required_capability}")
    return tier


def tier_checks(module: Module, record: CapabilityRecord, selected: Optional[Tier] = None) -> list[TierCheck]:
    """Per-tier requirement checks in level order, marking the selected tier."""
    if selected is None:
        selected = select_tier(module, record)
    return [
        TierCheck(tier=tier, satisfied=is_tier_satisfied(tier, record), selected=tier.level == selected.level)
        for tier in sorted(module.tiers, key=lambda t: t.level)
    ]
