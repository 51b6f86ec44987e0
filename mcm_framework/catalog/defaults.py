"""
Built-in rule set and country profiles.

Used when the YAML files under config/ are missing. The shapes match the
YAML documents exactly so both go through the same loader.
"""

from ..constants import DEFAULT_CAPABILITY_KEYS, DEFAULT_CATALOG_VERSION

# =============================================================================
# DEFAULT RULE CATALOG
# =============================================================================
# Tiers are listed most desirable first. The severity module has no
# requirement-free tier: Death Counts Only is reached positionally.

DEFAULT_CATALOG = {
    "version": DEFAULT_CATALOG_VERSION,
    "capability_keys": list(DEFAULT_CAPABILITY_KEYS),
    "modules": [
        {
            "id": "severity",
            "name": "Disease Severity",
            "tiers": [
                {
                    "level": 1,
                    "name": "Hospital Admissions",
                    "required_capability": "hospitalAdmissions",
                    "quality_weight": 5,
                    "outcome": "Optimal - Direct calibration to hospital burden",
                },
                {
                    "level": 2,
                    "name": "Excess Mortality",
                    "required_capability": "excessMortality",
                    "quality_weight": 3,
                    "outcome": "Good - Indirect severity estimation",
                },
                {
                    "level": 3,
                    "name": "Comorbidity-Adjusted IFR",
                    "required_capability": "comorbidityData",
                    "quality_weight": 2,
                    "outcome": "Acceptable - Literature-based with adjustments (e.g., Lancet Global Health method)",
                },
                {
                    "level": 4,
                    "name": "Death Counts Only",
                    "required_capability": "deathCounts",
                    "quality_weight": 1,
                    "outcome": "Minimal - High uncertainty, all parameters from literature",
                },
            ],
        },
        {
            "id": "contacts",
            "name": "Contact Patterns",
            "tiers": [
                {
                    "level": 1,
                    "name": "Empirical Survey",
                    "required_capability": "contactSurvey",
                    "quality_weight": 5,
                    "outcome": "Optimal - Country-specific mixing patterns (e.g., POLYMOD survey)",
                },
                {
                    "level": 2,
                    "name": "Regional Matrices",
                    "required_capability": "regionalMatrices",
                    "quality_weight": 4,
                    "outcome": "Good - Uses regional matrices (Prem et al.) scaled by age structure",
                },
                {
                    "level": 3,
                    "name": "Demographic Proxies",
                    "required_capability": "demographicProxies",
                    "quality_weight": 2,
                    "outcome": "Acceptable - Built from Urban/Rural split, school enrolment, household size",
                },
                {
                    "level": 4,
                    "name": "Global Defaults",
                    "required_capability": None,
                    "quality_weight": 1,
                    "outcome": "Minimal - Generic Covasim defaults",
                },
            ],
        },
        {
            "id": "operations",
            "name": "Operational Constraints",
            "tiers": [
                {
                    "level": 1,
                    "name": "Cold Chain Inventory",
                    "required_capability": "coldChainInventory",
                    "quality_weight": 5,
                    "outcome": "Optimal - Explicit capacity constraints by facility and storage type",
                },
                {
                    "level": 2,
                    "name": "Proxy Framework (Novel)",
                    "required_capability": "facilityTypes",
                    "quality_weight": 3,
                    "outcome": (
                        "Novel - Uses facility types, electricity/GDP proxies to estimate reliability "
                        "and propose buffer strategies"
                    ),
                },
                {
                    "level": 3,
                    "name": "Facility Counts",
                    "required_capability": None,
                    "quality_weight": 1,
                    "outcome": "Minimal - Assumes equal capacity per facility; allocation is coarse",
                },
            ],
        },
        {
            "id": "behavior",
            "name": "Behavioural Compliance",
            "tiers": [
                {
                    "level": 1,
                    "name": "Time-Series Surveys",
                    "required_capability": "behavioralSurveys",
                    "quality_weight": 5,
                    "outcome": "Optimal - Real-time compliance measures (masking, distancing, vaccine uptake)",
                },
                {
                    "level": 2,
                    "name": "Trust + Education Proxies",
                    "required_capability": "trustIndices",
                    "quality_weight": 3,
                    "outcome": (
                        "Good - Uses government trust, education, and NPI history "
                        "to parameterise compliance decay"
                    ),
                },
                {
                    "level": 3,
                    "name": "Literature Defaults",
                    "required_capability": None,
                    "quality_weight": 1,
                    "outcome": "Minimal - Uses static assumption of 50% average compliance",
                },
            ],
        },
    ],
}


# =============================================================================
# DEFAULT COUNTRY PROFILES
# =============================================================================
# Two LMIC profiles with identical data availability and one high-income
# profile with every source available.

_LMIC_CAPABILITIES = {
    "hospitalAdmissions": False,
    "excessMortality": False,
    "deathCounts": True,
    "comorbidityData": True,
    "contactSurvey": False,
    "regionalMatrices": True,
    "demographicProxies": True,
    "coldChainInventory": False,
    "facilityTypes": True,
    "electricityAccess": True,
    "trustIndices": True,
    "behavioralSurveys": False,
}

DEFAULT_PROFILES = {
    "default_country": "nigeria",
    "countries": {
        "nigeria": {
            "name": "Nigeria (LMIC)",
            "capabilities": dict(_LMIC_CAPABILITIES),
            "proxies": {"region": "West Africa", "urbanizationRate": 0.52, "householdSize": 4.5},
        },
        "vietnam": {
            "name": "Vietnam (LMIC Success)",
            "capabilities": dict(_LMIC_CAPABILITIES),
            "proxies": {"region": "South-East Asia", "urbanizationRate": 0.38, "householdSize": 3.5},
        },
        "italy": {
            "name": "Italy (HIC Ideal)",
            "capabilities": {key: True for key in DEFAULT_CAPABILITY_KEYS},
            "proxies": {"region": "Europe", "urbanizationRate": 0.69, "householdSize": 2.4},
        },
    },
}
