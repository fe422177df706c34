# This module defines NWS API settings and Area Forecast Discussion section
# headers as module-level constants.

# Base URL of the NWS public API.
NWS_BASE_URL = "https://api.weather.gov"

# Product type code for the Area Forecast Discussion.
AFD_PRODUCT_TYPE = "afd"

# The API serves GeoJSON-LD; plain application/json is also accepted.
ACCEPT_HEADER = "application/geo+json"

# api.weather.gov rejects requests without an identifying User-Agent.
DEFAULT_USER_AGENT = "(afd-section-notifier, afd-notifier@example.com)"

# Seconds before a request to the API is abandoned.
DEFAULT_TIMEOUT = 30

# Literal sequence closing a section in the product text.
SECTION_TERMINATOR = "&&"

# Section headers commonly found in AFDs. Any name can be requested; the
# --list-sections output marks headers outside this list as nonstandard.
KNOWN_SECTIONS = [
    "SYNOPSIS",
    "NEAR TERM",
    "SHORT TERM",
    "LONG TERM",
    "DISCUSSION",
    "AVIATION",
    "MARINE",
    "FIRE WEATHER",
    "HYDROLOGY",
    "CLIMATE",
    "TIDES/COASTAL FLOODING",
    "UPDATE",
    "WATCHES/WARNINGS/ADVISORIES",
]
