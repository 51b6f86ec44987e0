"""
Scoring & classification - selected tier weights vs. the best possible.

total_score = sum of selected tier weights
max_score   = sum over modules of the highest tier weight
percentage  = round-half-up(100 * total_score / max_score)

All calculations are integer arithmetic, so repeated evaluations are
bit-identical.
"""

from typing import Iterable

from ..constants import HIGH_QUALITY_THRESHOLD, LOW_QUALITY_THRESHOLD, MEDIUM_QUALITY_THRESHOLD
from ..errors import ConfigurationError
from ..schemas.catalog import Module, QualityStatus, Tier

# Inclusive lower bounds, evaluated high to low
QUALITY_BANDS = [
    (HIGH_QUALITY_THRESHOLD, QualityStatus.HIGH),
    (MEDIUM_QUALITY_THRESHOLD, QualityStatus.MEDIUM),
    (LOW_QUALITY_THRESHOLD, QualityStatus.LOW),
]


def total_score(selected: Iterable[Tier]) -> int:
    return sum(t.quality_weight for t in selected)


def max_score(modules: Iterable[Module]) -> int:
    return sum(m.max_weight for m in modules)


def score_percentage(total: int, maximum: int) -> int:
    """Percentage of the maximum, rounded half up (12.5 -> 13).

    Raises:
        ConfigurationError: If maximum is zero (every tier weight is zero)
    """
    if maximum <= 0:
        raise ConfigurationError(f"Maximum score must be positive, got {maximum}")
    # floor(100 * total / maximum + 0.5) without floating point
    return (200 * total + maximum) // (2 * maximum)


def classify_percentage(percentage: int) -> QualityStatus:
    """Map a percentage to its quality band (first match wins)."""
    for threshold, status in QUALITY_BANDS:
        if percentage >= threshold:
            return status
    return QualityStatus.INSUFFICIENT
