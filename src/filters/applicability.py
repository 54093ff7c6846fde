"""Resolve which optional filter fields apply to a test type."""

from __future__ import annotations

from core.constants import ANY, STATUS_ANOMALIES, STATUS_CONFIRMED
from core.types import FieldApplicability, TestType
from filters.membership import (
    TESTS_WITH_ANOMALY_STATUS,
    TESTS_WITH_CONFIRMED_STATUS,
    TESTS_WITH_DOMAIN,
)


def resolve_applicability(test_name: TestType | None) -> FieldApplicability:
    """Compute optional-field applicability for a test type.

    Args:
        test_name: Selected test identifier; empty or None means ANY.

    Returns:
        Applicability flags derived only from the test name.
    """
    selected = test_name or ANY
    return FieldApplicability(
        show_domain=selected in TESTS_WITH_DOMAIN,
        show_confirmed=selected in TESTS_WITH_CONFIRMED_STATUS,
        show_anomalies=selected in TESTS_WITH_ANOMALY_STATUS,
    )


def status_applies(status: str, applicability: FieldApplicability) -> bool:
    """Return whether a status value is selectable under applicability."""
    if status == STATUS_CONFIRMED:
        return applicability.show_confirmed
    if status == STATUS_ANOMALIES:
        return applicability.show_anomalies
    return True
