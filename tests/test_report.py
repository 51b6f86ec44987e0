"""Tests for full assessments: scenarios, built-in countries and report output."""

import json
from itertools import product

import pytest
from conftest import make_module, make_tier

from mcm_framework.catalog import RuleCatalog
from mcm_framework.constants import DEFAULT_CAPABILITY_KEYS
from mcm_framework.engine import AssessmentEngine, assess, assess_module
from mcm_framework.schemas import CapabilityRecord, QualityStatus


def _levels(report):
    return {a.module_id: a.selected_tier.level for a in report.module_assessments}


# ─── Scenarios ──────────────────────────────────────────────────────────────


class TestScenarios:
    def test_death_counts_only(self, catalog, make_record):
        """Only deathCounts → severity uses Death Counts Only without falling back."""
        severity = assess(catalog, make_record(deathCounts=True)).get("severity")
        assert severity.selected_tier.name == "Death Counts Only"
        assert severity.score == 1
        assert not severity.used_fallback

    def test_highest_desirability_wins(self, catalog, make_record):
        severity = assess(catalog, make_record(hospitalAdmissions=True, deathCounts=True)).get("severity")
        assert severity.selected_tier.name == "Hospital Admissions"
        assert severity.score == 5

    def test_ideal_country(self, catalog, all_true_record):
        """Every key available → every top tier, 100%, HIGH QUALITY."""
        report = assess(catalog, all_true_record)
        assert set(_levels(report).values()) == {1}
        assert report.total_score == report.max_score == 20
        assert report.percentage == 100
        assert report.status == QualityStatus.HIGH

    def test_no_data(self, catalog, all_false_record):
        """Every key missing → every baseline, 4/20 = 20%, INSUFFICIENT DATA."""
        report = assess(catalog, all_false_record)
        assert [a.selected_tier for a in report.module_assessments] == [m.tiers[-1] for m in catalog]
        assert all(a.used_fallback for a in report.module_assessments)
        assert report.total_score == 4
        assert report.percentage == 20
        assert report.status == QualityStatus.INSUFFICIENT

    def test_empty_record_same_as_all_false(self, catalog, all_false_record):
        empty = CapabilityRecord(subject_key="none", subject_name="No Data")
        assert assess(catalog, empty) == assess(catalog, all_false_record)


# ─── Built-in countries ─────────────────────────────────────────────────────


class TestBuiltInCountries:
    def test_nigeria(self, catalog, registry):
        report = assess(catalog, registry.get("nigeria"))
        assert _levels(report) == {"severity": 3, "contacts": 2, "operations": 2, "behavior": 2}
        assert (report.total_score, report.max_score, report.percentage) == (12, 20, 60)
        assert report.status == QualityStatus.MEDIUM
        assert report.summary == "60% Data Quality - MEDIUM QUALITY (12/20)"

    def test_vietnam_matches_nigeria(self, catalog, registry):
        nigeria = assess(catalog, registry.get("nigeria"))
        vietnam = assess(catalog, registry.get("vietnam"))
        assert vietnam.subject_name == "Vietnam (LMIC Success)"
        assert _levels(vietnam) == _levels(nigeria)
        assert vietnam.percentage == nigeria.percentage

    def test_italy(self, catalog, registry):
        report = assess(catalog, registry.get("italy"))
        assert report.summary == "100% Data Quality - HIGH QUALITY (20/20)"

    def test_switching_country_re_evaluates(self, catalog, registry):
        """Each subject is assessed independently; no state carries over."""
        engine = AssessmentEngine(catalog)
        first = engine.assess(registry.get("nigeria"))
        engine.assess(registry.get("italy"))
        assert engine.assess(registry.get("nigeria")) == first


# ─── Properties ─────────────────────────────────────────────────────────────


class TestReportProperties:
    def test_deterministic(self, catalog, registry):
        for record in registry:
            assert assess(catalog, record) == assess(catalog, record)
            assert assess(catalog, record).to_dict() == assess(catalog, record).to_dict()

    def test_inputs_not_mutated(self, catalog, registry):
        record = registry.get("nigeria")
        before_record = record.model_dump()
        before_catalog = catalog.to_dict()
        assess(catalog, record)
        assert record.model_dump() == before_record
        assert catalog.to_dict() == before_catalog

    def test_score_bounds_all_key_combinations(self, catalog):
        """0 <= total <= max and 0 <= percentage <= 100 for every capability combination."""
        keys = list(DEFAULT_CAPABILITY_KEYS)
        for flags in product([False, True], repeat=len(keys)):
            record = CapabilityRecord(subject_name="combo", capabilities=dict(zip(keys, flags)))
            report = assess(catalog, record)
            assert 0 <= report.total_score <= report.max_score
            assert 0 <= report.percentage <= 100

    def test_module_order_preserved(self, catalog, registry):
        report = assess(catalog, registry.get("italy"))
        assert [a.module_id for a in report.module_assessments] == [m.id for m in catalog]

    def test_rounds_half_up(self, make_record):
        """1/8 = 12.5% reports as 13%."""
        catalog = RuleCatalog([make_module("m", make_tier(1, "a", 8), make_tier(2, None, 1))])
        report = assess(catalog, make_record())
        assert report.percentage == 13
        assert report.status == QualityStatus.INSUFFICIENT

    @pytest.mark.parametrize(
        "flags,expected",
        [
            ({"a": True, "b": True}, QualityStatus.HIGH),  # 10/10
            ({"c": True, "b": True}, QualityStatus.MEDIUM),  # 7/10
            ({"a": True}, QualityStatus.MEDIUM),  # 6/10
            ({"c": True}, QualityStatus.LOW),  # 3/10
            ({}, QualityStatus.INSUFFICIENT),  # 2/10
        ],
    )
    def test_bands_through_assess(self, make_record, flags, expected):
        catalog = RuleCatalog(
            [
                make_module("one", make_tier(1, "a", 5), make_tier(2, "c", 2), make_tier(3, None, 1)),
                make_module("two", make_tier(1, "b", 5), make_tier(2, None, 1)),
            ]
        )
        assert assess(catalog, make_record(**flags)).status == expected


# ─── Report output ──────────────────────────────────────────────────────────


class TestReportOutput:
    def test_insights(self, catalog, registry):
        lines = assess(catalog, registry.get("nigeria")).insights()
        assert len(lines) == 4
        assert lines[0].startswith("Disease Severity (Tier 3): Comorbidity-Adjusted IFR - Acceptable")
        assert lines[2].startswith("Operational Constraints (Tier 2): Proxy Framework (Novel)")

    def test_checks_attached(self, catalog, registry):
        contacts = assess(catalog, registry.get("nigeria")).get("contacts")
        assert [c.tier.level for c in contacts.checks] == [1, 2, 3, 4]
        assert [c.satisfied for c in contacts.checks] == [False, True, True, False]
        assert [c.selected for c in contacts.checks] == [False, True, False, False]

    def test_get_unknown_module(self, catalog, registry):
        assert assess(catalog, registry.get("nigeria")).get("missing") is None

    def test_to_dict_is_json_ready(self, catalog, registry):
        data = assess(catalog, registry.get("nigeria")).to_dict()
        json.dumps(data)
        assert data["subject_key"] == "nigeria"
        assert data["catalog_version"] == catalog.version
        assert data["status"] == "MEDIUM QUALITY"
        assert data["percentage"] == 60
        assert data["proxy_attributes"] == {"region": "West Africa", "urbanizationRate": 0.52, "householdSize": 4.5}
        severity = data["modules"][0]
        assert severity["id"] == "severity"
        assert severity["selected_tier"]["name"] == "Comorbidity-Adjusted IFR"
        assert severity["score"] == 2
        assert severity["max_score"] == 5
        assert [c["selected"] for c in severity["checks"]] == [False, False, True, False]

    def test_engine_helpers(self, catalog, registry):
        engine = AssessmentEngine(catalog)
        record = registry.get("nigeria")
        assert engine.assess_module("behavior", record) == assess_module(catalog.get("behavior"), record)
        assert len(engine.tier_checks("operations", record)) == 3
        with pytest.raises(KeyError):
            engine.assess_module("missing", record)

    def test_proxies_carried_from_record(self, catalog, make_record):
        record = make_record().model_copy(update={"proxy_attributes": {"region": "Sahel"}})
        assert assess(catalog, record).proxy_attributes == {"region": "Sahel"}
