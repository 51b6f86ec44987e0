"""Exceptions raised by the catalog loader and the assessment engine.

Configuration problems are fatal and surface when a catalog is built, so
tier selection and scoring never have to degrade silently.
"""

from typing import Optional


class ConfigurationError(ValueError):
    """The rule catalog or capability registry violates an invariant."""


class UnknownCapabilityKey(ConfigurationError):
    """A tier requires a capability key that the catalog vocabulary does not declare."""

    def __init__(self, key: str, module_id: Optional[str] = None):
        self.key = key
        self.module_id = module_id
        where = f" in module '{module_id}'" if module_id else ""
        super().__init__(f"Unknown capability key '{key}'{where}")


class UnknownSubjectError(KeyError):
    """The capability registry holds no record for the requested subject key."""

    def __init__(self, key: str, available: Optional[list[str]] = None):
        self.key = key
        self.available = available or []
        super().__init__(key)

    def __str__(self) -> str:
        if self.available:
            return f"Unknown country '{self.key}' (available: {', '.join(self.available)})"
        return f"Unknown country '{self.key}'"
