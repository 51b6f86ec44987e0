"""Pydantic schema classes for the rule catalog.

A catalog is a list of Modules; each Module is an ordered list of Tiers,
most desirable first. Modules are data, not subclasses: the engine treats
every module the same way by walking its tier list.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Quality Status (banded data quality rating)
# =============================================================================


class QualityStatus(str, Enum):
    """Overall data quality rating derived from the assessment percentage.

    Bands (inclusive lower bounds, first match wins):
    - HIGH: >= 75%
    - MEDIUM: 50-74%
    - LOW: 30-49%
    - INSUFFICIENT: < 30%
    """

    HIGH = "HIGH QUALITY"
    MEDIUM = "MEDIUM QUALITY"
    LOW = "LOW QUALITY"
    INSUFFICIENT = "INSUFFICIENT DATA"

    @property
    def style(self) -> str:
        """Display colour for terminal rendering."""
        return {
            "HIGH QUALITY": "green",
            "MEDIUM QUALITY": "yellow",
            "LOW QUALITY": "dark_orange",
            "INSUFFICIENT DATA": "red",
        }[self.value]


# =============================================================================
# Catalog Entries
# =============================================================================


class Tier(BaseModel):
    """One ranked methodology choice within a module.

    A tier with no required capability is a baseline: it never matches on
    its own and is only reached through the positional fallback.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: int = Field(..., gt=0, description="Display/ordering level, unique within the module")
    name: str = Field(..., description="Display label (e.g., 'Hospital Admissions')")
    required_capability: Optional[str] = Field(
        default=None,
        description="Capability key that must be true for this tier; None for a baseline tier",
    )
    quality_weight: int = Field(..., ge=0, description="Points contributed when this tier is selected")
    outcome: str = Field(default="", description="What this tier implies methodologically")

    @property
    def is_baseline(self) -> bool:
        return self.required_capability is None


class Module(BaseModel):
    """An independent assessment dimension with its own ordered tier list.

    Tier order is the catalog author's preference order and is never
    re-derived from quality weights.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1, description="Unique module identifier (e.g., 'severity')")
    name: str = Field(..., description="Display label (e.g., 'Disease Severity')")
    tiers: tuple[Tier, ...] = Field(default=(), description="Tiers ordered from most to least desirable")

    @property
    def max_weight(self) -> int:
        """Highest quality weight among this module's tiers."""
        return max((t.quality_weight for t in self.tiers), default=0)

    @property
    def baseline(self) -> Optional[Tier]:
        """The positional fallback tier (last in catalog order)."""
        return self.tiers[-1] if self.tiers else None

    def tier_by_level(self, level: int) -> Optional[Tier]:
        for tier in self.tiers:
            if tier.level == level:
                return tier
        return None
