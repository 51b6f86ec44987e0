"""Shared fixtures for assessment engine tests."""

import sys
from pathlib import Path
from typing import Optional

import pytest

# Add repo root to path so tests can import mcm_framework without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from mcm_framework.catalog import build_default_catalog, build_default_registry  # noqa: E402
from mcm_framework.catalog.capability_registry import clear_cache as clear_registry_cache  # noqa: E402
from mcm_framework.catalog.rule_catalog import clear_cache as clear_catalog_cache  # noqa: E402
from mcm_framework.constants import DEFAULT_CAPABILITY_KEYS  # noqa: E402
from mcm_framework.schemas import CapabilityRecord, Module, Tier  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Each test starts with no MCM_* overrides and empty loader caches."""
    for var in ("MCM_CONFIG_DIR", "MCM_CATALOG_PATH", "MCM_PROFILES_PATH", "MCM_DEFAULT_COUNTRY", "MCM_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    clear_catalog_cache()
    clear_registry_cache()
    yield
    clear_catalog_cache()
    clear_registry_cache()


@pytest.fixture
def catalog():
    """The built-in four-module rule set."""
    return build_default_catalog()


@pytest.fixture
def registry():
    """The built-in Nigeria / Vietnam / Italy profiles."""
    return build_default_registry()


@pytest.fixture
def make_record():
    """Factory for a CapabilityRecord with only the given flags set."""

    def _make(name: str = "Test Country", **capabilities: bool) -> CapabilityRecord:
        return CapabilityRecord(subject_key="test", subject_name=name, capabilities=capabilities)

    return _make


@pytest.fixture
def all_false_record():
    return CapabilityRecord(
        subject_key="none",
        subject_name="No Data",
        capabilities={key: False for key in DEFAULT_CAPABILITY_KEYS},
    )


@pytest.fixture
def all_true_record():
    return CapabilityRecord(
        subject_key="ideal",
        subject_name="Ideal",
        capabilities={key: True for key in DEFAULT_CAPABILITY_KEYS},
    )


def make_tier(level: int, key: Optional[str], weight: int, name: Optional[str] = None) -> Tier:
    """Build a Tier with a generated name."""
    return Tier(
        level=level,
        name=name or f"Tier {level}",
        required_capability=key,
        quality_weight=weight,
        outcome=f"Outcome {level}",
    )


def make_module(module_id: str, *tiers: Tier) -> Module:
    return Module(id=module_id, name=module_id.title(), tiers=tiers)
