"""Core constants used across explorer filter modules.

This module centralizes sentinels, defaults, and environment keys.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

ANY = "XX"
DATE_FORMAT = "%Y-%m-%d"
STATUS_ALL = "all"
STATUS_CONFIRMED = "confirmed"
STATUS_ANOMALIES = "anomalies"
SUPPORTED_STATUSES = (STATUS_ALL, STATUS_CONFIRMED, STATUS_ANOMALIES)
DEFAULT_STATUS = STATUS_ALL
DEFAULT_HIDE_FAILED_MEASUREMENTS = True
ANY_TEST_NAME_LABEL_ID = "Search.Sidebar.TestName.AllTests"
ANY_COUNTRY_LABEL_ID = "Search.Sidebar.Country.AllCountries"
LEGACY_TEST_GROUP = "legacy"
CATALOG_PATH_ENV = "EXPLORER_CATALOG_PATH"
FROZEN_TODAY_ENV = "EXPLORER_FROZEN_TODAY"
