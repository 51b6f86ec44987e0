"""Generalisable MCM allocation framework: tiered capability assessment.

Decides, per country, which methodology tier each modelling module can
support given the data sources available, and rates overall data quality.
"""

from .catalog import CapabilityRegistry, RuleCatalog, get_default_catalog, get_default_registry
from .engine import AssessmentEngine, assess, select_tier
from .errors import ConfigurationError, UnknownCapabilityKey, UnknownSubjectError
from .schemas import AssessmentReport, CapabilityRecord, Module, ModuleAssessment, QualityStatus, Tier

__version__ = "1.0.0"

__all__ = [
    "AssessmentEngine",
    "AssessmentReport",
    "CapabilityRecord",
    "CapabilityRegistry",
    "ConfigurationError",
    "Module",
    "ModuleAssessment",
    "QualityStatus",
    "RuleCatalog",
    "Tier",
    "UnknownCapabilityKey",
    "UnknownSubjectError",
    "assess",
    "get_default_catalog",
    "get_default_registry",
    "select_tier",
]
