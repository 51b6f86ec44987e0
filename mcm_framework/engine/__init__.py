"""Deterministic tier selection, scoring and report assembly."""

from .report import AssessmentEngine, assess, assess_module
from .scoring import QUALITY_BANDS, classify_percentage, max_score, score_percentage, total_score
from .tier_selection import find_satisfied_tier, is_tier_satisfied, select_tier, tier_checks

__all__ = [
    # Tier selection
    "select_tier",
    "find_satisfied_tier",
    "is_tier_satisfied",
    "tier_checks",
    # Scoring
    "QUALITY_BANDS",
    "classify_percentage",
    "max_score",
    "score_percentage",
    "total_score",
    # Reports
    "AssessmentEngine",
    "assess",
    "assess_module",
]
