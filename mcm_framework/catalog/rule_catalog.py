"""Rule Catalog - ordered modules, their tiers and the capability vocabulary.

A RuleCatalog is validated once, when it is built, and is read-only
afterwards. Every invariant the engine relies on (non-empty tier lists,
a reachable fallback, known capability keys, a non-zero maximum score) is
checked here so that tier selection and scoring stay total.

Usage:
    from mcm_framework.catalog.rule_catalog import get_default_catalog, load_catalog

    catalog = get_default_catalog()           # config/mcm_modules.yaml or built-in rules
    catalog = load_catalog("rules_v2.yaml")   # an explicit, versioned rule set
    catalog.max_score                         # 20 for the built-in rules
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Union

import yaml
from pydantic import ValidationError

from ..config import get_catalog_path
from ..constants import DEFAULT_CATALOG_VERSION
from ..errors import ConfigurationError, UnknownCapabilityKey
from ..schemas.catalog import Module
from .defaults import DEFAULT_CATALOG

logger = logging.getLogger(__name__)


class RuleCatalog:
    """Immutable, validated sequence of modules.

    Args:
        modules: Modules in catalog order
        capability_keys: Declared vocabulary. When omitted, the keys referenced
            by the tiers themselves form the vocabulary.
        version: Rule set version label
        strict: Raise instead of warn when tier order and quality weight disagree
    """

    def __init__(
        self,
        modules: Iterable[Module],
        capability_keys: Optional[Iterable[str]] = None,
        version: str = DEFAULT_CATALOG_VERSION,
        strict: bool = False,
    ):
        self._modules: tuple[Module, ...] = tuple(modules)
        if capability_keys is None:
            self._capability_keys = frozenset(
                t.required_capability for m in self._modules for t in m.tiers if t.required_capability
            )
        elif isinstance(capability_keys, str):
            raise ConfigurationError("Catalog 'capability_keys' must be a list of strings")
        else:
            self._capability_keys = frozenset(capability_keys)
        self._version = version
        self._by_id: dict[str, Module] = {}

        self._validate()
        self._ordering_warnings = tuple(w for m in self._modules for w in _ordering_disagreements(m))
        if self._ordering_warnings:
            if strict:
                raise ConfigurationError("; ".join(self._ordering_warnings))
            for warning in self._ordering_warnings:
                logger.warning(warning)

    def _validate(self) -> None:
        if not self._modules:
            raise ConfigurationError("Catalog defines no modules")
        for module in self._modules:
            if module.id in self._by_id:
                raise ConfigurationError(f"Duplicate module id '{module.id}'")
            _validate_module(module, self._capability_keys)
            self._by_id[module.id] = module

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------

    @property
    def modules(self) -> tuple[Module, ...]:
        return self._modules

    @property
    def capability_keys(self) -> frozenset[str]:
        return self._capability_keys

    @property
    def version(self) -> str:
        return self._version

    @property
    def max_score(self) -> int:
        """Sum over modules of the best quality weight each module offers."""
        return sum(m.max_weight for m in self._modules)

    def ordering_warnings(self) -> list[str]:
        """Places where a later (less desirable) tier outweighs an earlier one."""
        return list(self._ordering_warnings)

    def get(self, module_id: str) -> Module:
        try:
            return self._by_id[module_id]
        except KeyError:
            raise KeyError(f"Unknown module '{module_id}'") from None

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._by_id

    def __repr__(self) -> str:
        return f"RuleCatalog(version={self._version!r}, modules={[m.id for m in self._modules]})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to the YAML/dict shape accepted by catalog_from_dict."""
        return {
            "version": self._version,
            "capability_keys": sorted(self._capability_keys),
            "modules": [m.model_dump(mode="json") for m in self._modules],
        }


def _validate_module(module: Module, capability_keys: frozenset[str]) -> None:
    """Check one module's tier list against the catalog invariants."""
    if not module.tiers:
        raise ConfigurationError(f"Module '{module.id}' has no tiers")

    levels = [t.level for t in module.tiers]
    duplicates = sorted({lvl for lvl in levels if levels.count(lvl) > 1})
    if duplicates:
        raise ConfigurationError(f"Module '{module.id}' has duplicate tier levels: {duplicates}")

    last = len(module.tiers) - 1
    for i, tier in enumerate(module.tiers):
        if tier.is_baseline and i != last:
            # Tiers after a requirement-free tier could never be selected
            raise ConfigurationError(
                f"Module '{module.id}': baseline tier '{tier.name}' must be the last tier"
            )
        if tier.required_capability is not None and tier.required_capability not in capability_keys:
            raise UnknownCapabilityKey(tier.required_capability, module_id=module.id)

    if module.max_weight == 0:
        raise ConfigurationError(f"Module '{module.id}' has all-zero quality weights")


def _ordering_disagreements(module: Module) -> list[str]:
    warnings = []
    for earlier, later in zip(module.tiers, module.tiers[1:]):
        if later.quality_weight > earlier.quality_weight:
            warnings.append(
                f"Module '{module.id}': tier '{later.name}' (weight {later.quality_weight}) "
                f"outweighs more desirable tier '{earlier.name}' (weight {earlier.quality_weight})"
            )
    return warnings


# =============================================================================
# Loading
# =============================================================================


def catalog_from_dict(raw: Any, strict: bool = False) -> RuleCatalog:
    """Build a RuleCatalog from a parsed YAML document."""
    if not isinstance(raw, dict):
        raise ConfigurationError("Catalog document must be a mapping")
    modules_raw = raw.get("modules")
    if not isinstance(modules_raw, list):
        raise ConfigurationError("Catalog must define a 'modules' list")

    try:
        modules = [Module.model_validate(m) for m in modules_raw]
    except ValidationError as e:
        raise ConfigurationError(f"Invalid catalog module definition: {e}") from e

    capability_keys = raw.get("capability_keys")
    if capability_keys is not None and (
        not isinstance(capability_keys, list) or not all(isinstance(k, str) for k in capability_keys)
    ):
        raise ConfigurationError("Catalog 'capability_keys' must be a list of strings")

    return RuleCatalog(
        modules,
        capability_keys=capability_keys,
        version=str(raw.get("version", DEFAULT_CATALOG_VERSION)),
        strict=strict,
    )


def load_catalog(path: Union[str, Path], strict: bool = False) -> RuleCatalog:
    """Load and validate a rule catalog from a YAML file."""
    path = Path(path)
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Could not parse catalog {path}: {e}") from e

    catalog = catalog_from_dict(raw, strict=strict)
    logger.info(f"Loaded catalog v{catalog.version} from {path}: {len(catalog)} modules, max score {catalog.max_score}")
    return catalog


def build_default_catalog(strict: bool = False) -> RuleCatalog:
    """The built-in four-module rule set."""
    return catalog_from_dict(DEFAULT_CATALOG, strict=strict)


# Module-level cache
_catalog_cache: Optional[RuleCatalog] = None


def get_default_catalog() -> RuleCatalog:
    """Load and cache the configured catalog, falling back to the built-in rules."""
    global _catalog_cache
    if _catalog_cache is not None:
        return _catalog_cache

    config_path = get_catalog_path()
    if not config_path.exists():
        logger.warning(f"Rule catalog not found at {config_path}, using built-in rules")
        _catalog_cache = build_default_catalog()
    else:
        _catalog_cache = load_catalog(config_path)
    return _catalog_cache


def clear_cache():
    """Clear the catalog cache (useful for testing)."""
    global _catalog_cache
    _catalog_cache = None
