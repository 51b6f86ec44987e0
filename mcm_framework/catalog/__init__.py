"""Rule catalog and country profile registry."""

from .capability_registry import (
    CapabilityRegistry,
    build_default_registry,
    get_default_registry,
    load_registry,
    registry_from_dict,
)
from .rule_catalog import (
    RuleCatalog,
    build_default_catalog,
    catalog_from_dict,
    get_default_catalog,
    load_catalog,
)

__all__ = [
    # Rule catalog
    "RuleCatalog",
    "build_default_catalog",
    "catalog_from_dict",
    "get_default_catalog",
    "load_catalog",
    # Country profiles
    "CapabilityRegistry",
    "build_default_registry",
    "get_default_registry",
    "load_registry",
    "registry_from_dict",
]
