"""Capability Registry - named country profiles keyed by subject.

Each entry becomes an immutable CapabilityRecord. The registry only holds
records; which one is active is decided by the caller (the CLI picks one
with --country).
"""

import logging
from pathlib import Path
from typing import Any, Iterator, Optional, Union

import yaml
from pydantic import ValidationError

from ..config import get_profiles_path
from ..errors import ConfigurationError, UnknownSubjectError
from ..schemas.assessment import CapabilityRecord
from .defaults import DEFAULT_PROFILES
from .rule_catalog import RuleCatalog

logger = logging.getLogger(__name__)


class CapabilityRegistry:
    """Read-only mapping of subject key -> CapabilityRecord."""

    def __init__(self, records: dict[str, CapabilityRecord], default_key: Optional[str] = None):
        if not records:
            raise ConfigurationError("Capability registry has no countries")
        if default_key is not None and default_key not in records:
            raise ConfigurationError(f"Default country '{default_key}' is not in the registry")
        self._records = dict(records)
        self._default_key = default_key or next(iter(self._records))

    @property
    def default_key(self) -> str:
        return self._default_key

    def keys(self) -> list[str]:
        return list(self._records)

    def get(self, key: str) -> CapabilityRecord:
        record = self._records.get(key)
        if record is None:
            raise UnknownSubjectError(key, available=self.keys())
        return record

    def default(self) -> CapabilityRecord:
        return self._records[self._default_key]

    def unknown_keys(self, catalog: RuleCatalog) -> dict[str, list[str]]:
        """Capability keys per country that the catalog vocabulary does not declare."""
        unknown = {}
        for key, record in self._records.items():
            extra = sorted(set(record.capabilities) - catalog.capability_keys)
            if extra:
                unknown[key] = extra
        return unknown

    def __iter__(self) -> Iterator[CapabilityRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records


def registry_from_dict(raw: Any) -> CapabilityRegistry:
    """Build a CapabilityRegistry from a parsed YAML document."""
    if not isinstance(raw, dict) or not isinstance(raw.get("countries"), dict):
        raise ConfigurationError("Profile document must define a 'countries' mapping")

    records = {}
    for key, data in raw["countries"].items():
        if not isinstance(data, dict):
            raise ConfigurationError(f"Country '{key}' must be a mapping")
        try:
            records[key] = CapabilityRecord(
                subject_key=key,
                subject_name=data.get("name", key),
                capabilities=data.get("capabilities") or {},
                proxy_attributes=data.get("proxies") or {},
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid profile for country '{key}': {e}") from e

    default_key = raw.get("default_country")
    if default_key is not None and not isinstance(default_key, str):
        raise ConfigurationError("Profile 'default_country' must be a country key string")

    return CapabilityRegistry(records, default_key=default_key)


def load_registry(path: Union[str, Path]) -> CapabilityRegistry:
    """Load country profiles from a YAML file."""
    path = Path(path)
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Could not parse profiles {path}: {e}") from e

    registry = registry_from_dict(raw)
    logger.info(f"Loaded {len(registry)} country profiles from {path}")
    return registry


def build_default_registry() -> CapabilityRegistry:
    """Built-in Nigeria / Vietnam / Italy profiles."""
    return registry_from_dict(DEFAULT_PROFILES)


# Module-level cache
_registry_cache: Optional[CapabilityRegistry] = None


def get_default_registry() -> CapabilityRegistry:
    """Load and cache the configured profiles, falling back to the built-in ones."""
    global _registry_cache
    if _registry_cache is not None:
        return _registry_cache

    config_path = get_profiles_path()
    if not config_path.exists():
        logger.warning(f"Country profiles not found at {config_path}, using built-in profiles")
        _registry_cache = build_default_registry()
    else:
        _registry_cache = load_registry(config_path)
    return _registry_cache


def clear_cache():
    """Clear the registry cache (useful for testing)."""
    global _registry_cache
    _registry_cache = None
