"""Test membership catalogs for optional filter fields.

Each set lists the test types for which an optional field is meaningful.
Every set contains the ANY sentinel: when no specific test is selected
all optional fields stay visible, since some test in scope supports them.
"""

from __future__ import annotations

from core.constants import ANY
from core.types import TestType

# Tests whose measurements carry an input domain or URL.
# ANY policy: included, the form starts on ANY and shows the field.
TESTS_WITH_DOMAIN: frozenset[TestType] = frozenset(
    {
        ANY,
        "web_connectivity",
        "http_requests",
        "dns_consistency",
        "tcp_connect",
    }
)

# Tests that compute an anomaly verdict.
# ANY policy: included, 'anomalies' filters across every anomaly-capable test.
TESTS_WITH_ANOMALY_STATUS: frozenset[TestType] = frozenset(
    {
        ANY,
        "web_connectivity",
        "telegram",
        "facebook_messenger",
        "whatsapp",
        "signal",
        "http_header_field_manipulation",
        "http_invalid_request_line",
        "psiphon",
        "tor",
        "riseupvpn",
        "torsf",
    }
)

# Tests with confirmed blocking detection.
# ANY policy: included, 'confirmed' narrows to tests that can confirm.
TESTS_WITH_CONFIRMED_STATUS: frozenset[TestType] = frozenset(
    {
        ANY,
        "web_connectivity",
    }
)
