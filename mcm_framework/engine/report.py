"""
Assessment report assembly.

Runs tier selection once per catalog module, scores the selections and
packs everything into an AssessmentReport. Nothing is cached and nothing
is mutated: switching the active country means calling assess() again.

Usage:
    engine = AssessmentEngine(get_default_catalog())
    report = engine.assess(registry.get("nigeria"))
    report.summary   # "60% Data Quality - MEDIUM QUALITY (12/20)"
"""

import logging

from ..catalog.rule_catalog import RuleCatalog
from ..schemas.assessment import AssessmentReport, CapabilityRecord, ModuleAssessment, TierCheck
from ..schemas.catalog import Module
from .scoring import classify_percentage, max_score, score_percentage, total_score
from .tier_selection import find_satisfied_tier, select_tier, tier_checks

logger = logging.getLogger(__name__)


def assess_module(module: Module, record: CapabilityRecord) -> ModuleAssessment:
    """Select a module's tier and collect its requirement checks."""
    selected = select_tier(module, record)
    return ModuleAssessment(
        module=module,
        selected_tier=selected,
        used_fallback=find_satisfied_tier(module, record) is None,
        checks=tuple(tier_checks(module, record, selected)),
    )


def assess(catalog: RuleCatalog, record: CapabilityRecord) -> AssessmentReport:
    """Assess one country against one catalog."""
    assessments = tuple(assess_module(module, record) for module in catalog)
    total = total_score(a.selected_tier for a in assessments)
    maximum = max_score(catalog)
    percentage = score_percentage(total, maximum)
    status = classify_percentage(percentage)

    logger.debug(f"{record.subject_name}: {total}/{maximum} = {percentage}% ({status.value})")
    return AssessmentReport(
        subject_key=record.subject_key,
        subject_name=record.subject_name,
        catalog_version=catalog.version,
        proxy_attributes=record.proxy_attributes,
        module_assessments=assessments,
        total_score=total,
        max_score=maximum,
        percentage=percentage,
        status=status,
    )


class AssessmentEngine:
    """Assessment bound to one explicit rule catalog.

    Holds no state besides the catalog, so a single engine can serve many
    countries, and engines for different rule versions can coexist.
    """

    def __init__(self, catalog: RuleCatalog):
        self.catalog = catalog

    def assess(self, record: CapabilityRecord) -> AssessmentReport:
        return assess(self.catalog, record)

    def assess_module(self, module_id: str, record: CapabilityRecord) -> ModuleAssessment:
        return assess_module(self.catalog.get(module_id), record)

    def tier_checks(self, module_id: str, record: CapabilityRecord) -> list[TierCheck]:
        return tier_checks(self.catalog.get(module_id), record)
