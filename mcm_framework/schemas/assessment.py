"""Pydantic schema classes for capability records and assessment results.

CapabilityRecord is the per-country input. TierCheck, ModuleAssessment and
AssessmentReport are derived values, rebuilt from scratch on every
evaluation and never mutated.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from .catalog import Module, QualityStatus, Tier


class CapabilityRecord(BaseModel):
    """Snapshot of which data sources a country has available.

    Missing capability keys count as unavailable. Proxy attributes are
    carried for display and are not used in scoring.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    subject_key: str = Field(default="", description="Registry key (e.g., 'nigeria')")
    subject_name: str = Field(..., description="Display name (e.g., 'Nigeria (LMIC)')")
    capabilities: dict[str, StrictBool] = Field(default_factory=dict, description="Capability key -> available")
    proxy_attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Demographic proxies (region, urbanizationRate, householdSize)",
    )

    def has(self, key: Optional[str]) -> bool:
        """True only when the key is named and explicitly available."""
        if key is None:
            return False
        return self.capabilities.get(key, False)

    def available_keys(self) -> list[str]:
        return [k for k, v in self.capabilities.items() if v]

    def with_capabilities(self, **flags: bool) -> "CapabilityRecord":
        """Return a copy with the given capability flags overridden."""
        merged = {**self.capabilities, **flags}
        return self.model_copy(update={"capabilities": merged})


class TierCheck(BaseModel):
    """Per-tier requirement check for display."""

    model_config = ConfigDict(frozen=True)

    tier: Tier
    satisfied: bool = Field(..., description="Tier has a requirement and the country meets it")
    selected: bool = Field(..., description="Tier is the one the engine chose")


class ModuleAssessment(BaseModel):
    """A module together with the single tier selected for a country."""

    model_config = ConfigDict(frozen=True)

    module: Module
    selected_tier: Tier
    used_fallback: bool = Field(
        default=False,
        description="No tier requirement was met; the last tier was taken positionally",
    )
    checks: tuple[TierCheck, ...] = Field(default=(), description="Requirement checks in tier level order")

    @property
    def module_id(self) -> str:
        return self.module.id

    @property
    def score(self) -> int:
        return self.selected_tier.quality_weight

    @property
    def max_score(self) -> int:
        return self.module.max_weight

    def insight(self) -> str:
        """One-line summary, e.g. 'Disease Severity (Tier 3): Comorbidity-Adjusted IFR - Acceptable - ...'."""
        tier = self.selected_tier
        line = f"{self.module.name} (Tier {tier.level}): {tier.name}"
        if tier.outcome:
            line = f"{line} - {tier.outcome}"
        return line


class AssessmentReport(BaseModel):
    """Aggregate result of assessing one country against one catalog."""

    model_config = ConfigDict(frozen=True)

    subject_key: str = ""
    subject_name: str
    catalog_version: str = ""
    proxy_attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Demographic proxies carried over from the record, for display",
    )
    module_assessments: tuple[ModuleAssessment, ...]
    total_score: int = Field(..., ge=0)
    max_score: int = Field(..., gt=0)
    percentage: int = Field(..., ge=0, le=100)
    status: QualityStatus

    @property
    def summary(self) -> str:
        """Headline line, e.g. '60% Data Quality - MEDIUM QUALITY (12/20)'."""
        return (
            f"{self.percentage}% Data Quality - {self.status.value} "
            f"({self.total_score}/{self.max_score})"
        )

    def get(self, module_id: str) -> Optional[ModuleAssessment]:
        for assessment in self.module_assessments:
            if assessment.module_id == module_id:
                return assessment
        return None

    def insights(self) -> list[str]:
        return [a.insight() for a in self.module_assessments]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "subject_key": self.subject_key,
            "subject_name": self.subject_name,
            "catalog_version": self.catalog_version,
            "total_score": self.total_score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "status": self.status.value,
            "proxy_attributes": dict(self.proxy_attributes),
            "modules": [
                {
                    "id": a.module.id,
                    "name": a.module.name,
                    "selected_tier": a.selected_tier.model_dump(mode="json"),
                    "used_fallback": a.used_fallback,
                    "score": a.score,
                    "max_score": a.max_score,
                    "checks": [
                        {
                            "level": c.tier.level,
                            "name": c.tier.name,
                            "required_capability": c.tier.required_capability,
                            "satisfied": c.satisfied,
                            "selected": c.selected,
                        }
                        for c in a.checks
                    ],
                }
                for a in self.module_assessments
            ],
        }
