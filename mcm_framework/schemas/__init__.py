"""Pydantic schemas for catalogs, capability records and assessment results."""

from .assessment import AssessmentReport, CapabilityRecord, ModuleAssessment, TierCheck
from .catalog import Module, QualityStatus, Tier

__all__ = [
    # Catalog
    "Tier",
    "Module",
    "QualityStatus",
    # Inputs and results
    "CapabilityRecord",
    "TierCheck",
    "ModuleAssessment",
    "AssessmentReport",
]
