"""Integration test for a complete filter editing session."""

from __future__ import annotations

from datetime import date

from catalog.catalog_io import load_catalog
from catalog.measurement_tests import build_test_name_options
from core.clock import FixedClock
from core.types import NormalizedFilter, OptionGroup
from filters.query_codec import draft_from_query, filter_to_query
from filters.reducer import FilterSession
from tests.fixture_paths import catalog_fixture


def test_edit_reject_fix_submit_and_restore_flow(frozen_clock: FixedClock) -> None:
    """A user session should recover from errors and deep-link cleanly."""
    clock = frozen_clock
    catalog = load_catalog(catalog_fixture("valid_catalog.yaml"))
    test_ids = [
        option.value
        for entry in build_test_name_options(catalog.test_names)
        if isinstance(entry, OptionGroup)
        for option in entry.options
    ]
    applied: list[NormalizedFilter] = []
    session = FilterSession(clock, on_apply=applied.append)

    session.change_test_name(test_ids[0])
    session.change_field("domain", "ex_ample.com")
    session.change_field("status", "confirmed")
    session.change_field("since", date(2024, 3, 20))
    rejected = session.submit()
    session.change_field("domain", "example.com")
    session.change_field("since", date(2024, 3, 1))
    accepted = session.submit()
    session.change_test_name("ndt")
    restored = draft_from_query(filter_to_query(applied[0]), clock)

    assert [issue.field for issue in rejected.issues] == ["domain", "since", "until"]
    assert accepted.filter is not None and applied == [accepted.filter]
    assert accepted.filter.domain == "example.com" and accepted.filter.status == "confirmed"
    assert (session.draft.domain, session.draft.status) == ("", "all")
    assert restored.domain == "example.com" and restored.since == "2024-03-01"
