"""Domain constants shared by deterministic logic."""

from __future__ import annotations

from datetime import timedelta

MAX_STAY_DAYS = 90
WINDOW_DAYS = 180

DEFAULT_SEARCH_HORIZON_DAYS = 365
DEFAULT_LOW_REMAINING_THRESHOLD = 10

# Remaining-days bands used by the report recommendations.
PLAN_EXIT_REMAINING_DAYS = 30
COMFORTABLE_REMAINING_DAYS = 60

ONE_DAY = timedelta(days=1)

DEFAULT_SCHENGEN_MEMBERS = (
    "AT",
    "BE",
    "BG",
    "CH",
    "CZ",
    "DE",
    "DK",
    "EE",
    "ES",
    "FI",
    "FR",
    "GR",
    "HR",
    "HU",
    "IS",
    "IT",
    "LI",
    "LT",
    "LU",
    "LV",
    "MT",
    "NL",
    "NO",
    "PL",
    "PT",
    "RO",
    "SE",
    "SI",
    "SK",
)

COUNTRY_NAME_ALIASES = {
    "austria": "AT",
    "belgium": "BE",
    "bulgaria": "BG",
    "croatia": "HR",
    "czech republic": "CZ",
    "czechia": "CZ",
    "denmark": "DK",
    "estonia": "EE",
    "finland": "FI",
    "france": "FR",
    "germany": "DE",
    "greece": "GR",
    "hungary": "HU",
    "iceland": "IS",
    "italy": "IT",
    "latvia": "LV",
    "liechtenstein": "LI",
    "lithuania": "LT",
    "luxembourg": "LU",
    "malta": "MT",
    "netherlands": "NL",
    "the netherlands": "NL",
    "norway": "NO",
    "poland": "PL",
    "portugal": "PT",
    "romania": "RO",
    "slovakia": "SK",
    "slovenia": "SI",
    "spain": "ES",
    "sweden": "SE",
    "switzerland": "CH",
    # Non-members that commonly appear in European travel histories.
    "albania": "AL",
    "andorra": "AD",
    "bosnia and herzegovina": "BA",
    "cyprus": "CY",
    "ireland": "IE",
    "monaco": "MC",
    "montenegro": "ME",
    "north macedonia": "MK",
    "san marino": "SM",
    "serbia": "RS",
    "turkey": "TR",
    "ukraine": "UA",
    "united kingdom": "GB",
    "vatican city": "VA",
}
