"""
Global constants for the assessment engine.

Centralizes the capability vocabulary and the quality band thresholds so
the catalog loader, the engine and the CLI agree on them.
"""

# Capability Vocabulary
# Data sources a country may or may not have, grouped by the module that consumes them
DEFAULT_CAPABILITY_KEYS = [
    # Disease severity
    "hospitalAdmissions",
    "excessMortality",
    "deathCounts",
    "comorbidityData",
    # Contact patterns
    "contactSurvey",
    "regionalMatrices",
    "demographicProxies",
    # Operational constraints
    "coldChainInventory",
    "facilityTypes",
    "electricityAccess",
    # Behavioural compliance
    "trustIndices",
    "behavioralSurveys",
]

# Quality Bands
# Inclusive lower bounds, evaluated high to low; anything below the last is INSUFFICIENT DATA
HIGH_QUALITY_THRESHOLD = 75
MEDIUM_QUALITY_THRESHOLD = 50
LOW_QUALITY_THRESHOLD = 30

# Catalog
DEFAULT_CATALOG_VERSION = "1.0.0"

# Logging
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
