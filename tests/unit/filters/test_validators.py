"""Unit tests for filter field validators."""

from __future__ import annotations

from datetime import date

from core.clock import FixedClock
from core.types import FilterDraft
from filters.validators import (
    format_iso_day,
    parse_iso_day,
    validate_asn,
    validate_domain,
    validate_draft,
    validate_since,
    validate_until,
)

CLOCK = FixedClock(date(2024, 3, 14))
TOMORROW = "2024-03-15"


def test_validate_asn_accepts_empty_and_well_formed_values() -> None:
    """Empty, prefixed, and bare ASNs without leading zeros are valid."""
    values = ("", "AS1234", "1", "AS3269")

    assert all(validate_asn(value).is_valid for value in values)


def test_validate_asn_rejects_zero_and_leading_zero() -> None:
    """Zero and zero-prefixed ASNs should fail with a format issue."""
    results = [validate_asn(value) for value in ("0", "AS0042", "AS", "as1234", "AS12x")]

    assert [result.issue.kind for result in results if result.issue] == ["format"] * 5


def test_validate_asn_issue_names_field() -> None:
    """ASN issues should be scoped to the asn field."""
    issue = validate_asn("AS0042").issue

    assert issue is not None and issue.field == "asn" and "AS0042" in issue.message


def test_validate_domain_accepts_hostnames_and_dotted_quads() -> None:
    """Hostnames, ports, and IPv4-shaped values are valid."""
    values = ("", "example.com", "www.example-site.co.uk", "example.com:8080", "192.168.1.1")

    assert all(validate_domain(value).is_valid for value in values)


def test_validate_domain_rejects_malformed_hostnames() -> None:
    """Underscores, missing TLDs, and long TLDs should fail."""
    values = ("ex_ample.com", "localhost", "example.abcdefgh", "-example.com", "example..com")

    assert all(not validate_domain(value).is_valid for value in values)


def test_validate_domain_does_not_range_check_octets() -> None:
    """Dotted quads are matched by shape only."""
    assert validate_domain("999.999.999.999").is_valid


def test_validate_since_before_until_is_required() -> None:
    """Since must be strictly before a set until date."""
    result = validate_since("2024-01-10", "2024-01-05", CLOCK)

    assert result.issue is not None and result.issue.kind == "range"


def test_validate_since_equal_to_until_is_rejected() -> None:
    """A range with since equal to until would be empty."""
    assert not validate_since("2024-01-05", "2024-01-05", CLOCK).is_valid


def test_validate_since_without_until_allows_tomorrow() -> None:
    """Without until the start may be at most tomorrow."""
    assert validate_since(TOMORROW, "", CLOCK).is_valid
    assert not validate_since("2024-03-16", "", CLOCK).is_valid


def test_validate_until_after_since_and_not_after_tomorrow() -> None:
    """Until must follow since and stay within the tomorrow fence."""
    assert validate_until(TOMORROW, "2024-01-01", CLOCK).is_valid
    assert not validate_until("2024-03-16", "2024-01-01", CLOCK).is_valid
    assert not validate_until("2024-01-01", "2024-01-01", CLOCK).is_valid


def test_validate_until_without_since_checks_fence_only() -> None:
    """Without since only the tomorrow fence applies."""
    assert validate_until("2001-01-01", "", CLOCK).is_valid
    assert not validate_until("2024-04-01", None, CLOCK).is_valid


def test_date_validators_accept_date_objects() -> None:
    """Date pickers may hand over date objects instead of strings."""
    assert validate_since(date(2024, 1, 1), date(2024, 3, 15), CLOCK).is_valid
    assert validate_until(date(2024, 3, 15), date(2024, 1, 1), CLOCK).is_valid


def test_date_validators_report_unparsable_dates_as_format_issues() -> None:
    """Dates outside the YYYY-MM-DD form are format issues."""
    issue = validate_until("15/03/2024", "", CLOCK).issue

    assert issue is not None and issue.kind == "format" and issue.field == "until"


def test_validate_draft_accepts_range_ending_tomorrow() -> None:
    """since=2024-01-01 with until=tomorrow should pass for both fields."""
    draft = FilterDraft(since="2024-01-01", until=TOMORROW)

    assert validate_draft(draft, CLOCK) == ()


def test_validate_draft_flags_both_ends_of_inverted_range() -> None:
    """An inverted range should report issues on since and until."""
    draft = FilterDraft(since="2024-01-10", until="2024-01-05")

    issues = validate_draft(draft, CLOCK)

    assert [(issue.field, issue.kind) for issue in issues] == [
        ("since", "range"),
        ("until", "range"),
    ]


def test_validate_draft_skips_domain_for_tests_without_domain() -> None:
    """Domain is not validated when the test type hides it."""
    draft = FilterDraft(test_name="ndt", domain="ex_ample.com", until=TOMORROW)

    assert validate_draft(draft, CLOCK) == ()


def test_validate_draft_collects_format_issues_in_form_order() -> None:
    """ASN and domain issues are reported together."""
    draft = FilterDraft(asn="0", domain="ex_ample.com", until=TOMORROW)

    issues = validate_draft(draft, CLOCK)

    assert [issue.field for issue in issues] == ["asn", "domain"]


def test_parse_and_format_iso_day() -> None:
    """ISO day helpers should canonicalize valid dates only."""
    assert parse_iso_day("2024-02-30") is None
    assert parse_iso_day(" 2024-02-29 ") == date(2024, 2, 29)
    assert format_iso_day(date(2024, 3, 1)) == "2024-03-01"
    assert format_iso_day(" not-a-date ") == "not-a-date"


def test_validate_asn_rejects_trailing_newline() -> None:
    """The end anchor should not accept a value followed by a newline."""
    issue = validate_asn("AS1234\n").issue

    assert issue is not None and issue.kind == "format"


def test_validate_domain_rejects_hostname_with_trailing_newline() -> None:
    """Hostnames followed by a newline should fail the format check."""
    assert not validate_domain("example.com\n").is_valid


def test_submit_path_rejects_asn_with_trailing_newline() -> None:
    """Unstripped drafts must not pass a newline-terminated ASN."""
    draft = FilterDraft(asn="AS1\n", until=TOMORROW)

    assert [issue.field for issue in validate_draft(draft, CLOCK)] == ["asn"]


def test_validate_draft_treats_empty_until_as_unset() -> None:
    """An empty until leaves since checked only against the tomorrow fence."""
    draft = FilterDraft(since="2024-01-01", until="")

    assert validate_draft(draft, CLOCK) == ()


def test_validate_draft_empty_until_still_fences_since() -> None:
    """With until empty, since after tomorrow is a range issue."""
    draft = FilterDraft(since="2024-03-16", until="")

    issues = validate_draft(draft, CLOCK)

    assert [(issue.field, issue.kind) for issue in issues] == [("since", "range")]
