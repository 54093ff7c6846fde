"""Unit tests for optional field applicability."""

from __future__ import annotations

from core.constants import ANY
from core.types import FieldApplicability
from filters.applicability import resolve_applicability, status_applies
from filters.membership import (
    TESTS_WITH_ANOMALY_STATUS,
    TESTS_WITH_CONFIRMED_STATUS,
    TESTS_WITH_DOMAIN,
)


def test_any_test_shows_every_optional_field() -> None:
    """ANY selection should show domain, confirmed, and anomalies."""
    assert resolve_applicability(ANY) == FieldApplicability(
        show_domain=True, show_confirmed=True, show_anomalies=True
    )


def test_every_membership_set_contains_any() -> None:
    """Each membership catalog should include the ANY sentinel."""
    assert all(
        ANY in tests
        for tests in (TESTS_WITH_DOMAIN, TESTS_WITH_ANOMALY_STATUS, TESTS_WITH_CONFIRMED_STATUS)
    )


def test_tests_outside_domain_set_hide_domain() -> None:
    """Tests without an input domain should never show the domain field."""
    candidates = ("telegram", "ndt", "psiphon", "signal", "dash", "unknown_test")

    flags = [resolve_applicability(test_name).show_domain for test_name in candidates]

    assert flags == [False] * len(candidates)


def test_web_connectivity_shows_all_fields() -> None:
    """Web connectivity supports domain and both status filters."""
    applicability = resolve_applicability("web_connectivity")

    assert applicability.show_domain and applicability.show_confirmed
    assert applicability.show_anomalies and applicability.show_status


def test_telegram_supports_only_anomalies() -> None:
    """Telegram has anomalies but no confirmed status or domain."""
    assert resolve_applicability("telegram") == FieldApplicability(
        show_domain=False, show_confirmed=False, show_anomalies=True
    )


def test_ndt_supports_no_optional_field() -> None:
    """NDT supports neither domain nor status filters."""
    applicability = resolve_applicability("ndt")

    assert not applicability.show_status and not applicability.show_domain


def test_legacy_domain_tests_show_domain_without_status() -> None:
    """Legacy domain tests show the domain field but no status choices."""
    applicability = resolve_applicability("dns_consistency")

    assert applicability.show_domain and not applicability.show_status


def test_resolve_is_idempotent() -> None:
    """Resolving the same test twice should yield identical flags."""
    assert resolve_applicability("tor") == resolve_applicability("tor")


def test_empty_test_name_resolves_as_any() -> None:
    """Empty test names should behave like the ANY selection."""
    assert resolve_applicability("") == resolve_applicability(ANY)


def test_status_applies_respects_flags() -> None:
    """'all' is always selectable; others follow applicability."""
    applicability = resolve_applicability("telegram")

    assert status_applies("all", applicability)
    assert status_applies("anomalies", applicability)
    assert not status_applies("confirmed", applicability)
