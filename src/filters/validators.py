"""Field validators for the measurement filter form.

Validators never raise for user input. Each returns a FieldValidation
that carries a field-scoped issue when the value is rejected, so the
presentation layer can render feedback next to the offending input.

Date checks work on UTC calendar days. The upper fence is tomorrow
because results for the current day may still be arriving.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from core.clock import UtcClock, tomorrow_utc
from core.constants import DATE_FORMAT
from core.types import FieldIssue, FieldValidation, FilterDraft, FilterFieldName
from filters.applicability import resolve_applicability

ASN_PATTERN = re.compile(r"^(AS)?([1-9][0-9]*)\Z")
# Dotted quads are matched by shape only and the branch is anchored at the
# start; octet values are not range-checked.
DOMAIN_PATTERN = re.compile(
    r"(^[a-z0-9]+([\-\.]{1}[a-z0-9]+)*\.[a-z]{2,7}(:[0-9]{1,5})?\Z)"
    r"|(^(([0-9]{1,3})\.){3}([0-9]{1,3}))"
)
ISO_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}\Z")

DateInput = date | str


def validate_asn(value: str | None) -> FieldValidation:
    """Validate an ASN such as 'AS1234' or '1234'."""
    if not value:
        return FieldValidation()
    if ASN_PATTERN.match(value):
        return FieldValidation()
    return _format_issue("asn", f"Invalid ASN '{value}'. Use a number like AS1234 or 1234.")


def validate_domain(value: str | None) -> FieldValidation:
    """Validate a hostname (with optional port) or dotted-quad address."""
    if not value:
        return FieldValidation()
    if DOMAIN_PATTERN.search(value):
        return FieldValidation()
    return _format_issue(
        "domain",
        f"Invalid domain '{value}'. Use a hostname like example.com or an IP address.",
    )


def validate_since(
    candidate: DateInput,
    until_value: DateInput | None,
    clock: UtcClock,
) -> FieldValidation:
    """Validate a range start date.

    Args:
        candidate: Proposed start date.
        until_value: Current range end, empty when unset.
        clock: UTC clock providing the tomorrow fence.

    Returns:
        Valid when before the range end if set, else not after tomorrow.
    """
    since_day = parse_iso_day(candidate)
    if since_day is None:
        return _unparsable_date("since", candidate)
    until_day = parse_iso_day(until_value) if until_value else None
    if until_day is not None:
        if since_day < until_day:
            return FieldValidation()
        return _range_issue(
            "since", f"Start date {since_day} must be before end date {until_day}."
        )
    tomorrow = tomorrow_utc(clock)
    if since_day <= tomorrow:
        return FieldValidation()
    return _range_issue("since", f"Start date {since_day} must not be after {tomorrow}.")


def validate_until(
    candidate: DateInput,
    since_value: DateInput | None,
    clock: UtcClock,
) -> FieldValidation:
    """Validate a range end date.

    Args:
        candidate: Proposed end date.
        since_value: Current range start, empty when unset.
        clock: UTC clock providing the tomorrow fence.

    Returns:
        Valid when after the range start if set and not after tomorrow.
    """
    until_day = parse_iso_day(candidate)
    if until_day is None:
        return _unparsable_date("until", candidate)
    since_day = parse_iso_day(since_value) if since_value else None
    if since_day is not None and not until_day > since_day:
        return _range_issue(
            "until", f"End date {until_day} must be after start date {since_day}."
        )
    tomorrow = tomorrow_utc(clock)
    if until_day <= tomorrow:
        return FieldValidation()
    return _range_issue("until", f"End date {until_day} must not be after {tomorrow}.")


def validate_draft(draft: FilterDraft, clock: UtcClock) -> tuple[FieldIssue, ...]:
    """Validate every field that applies to the draft's test type.

    Args:
        draft: Draft to check.
        clock: UTC clock providing the tomorrow fence.

    Returns:
        Field issues in form order; empty when the draft is submittable.
    """
    applicability = resolve_applicability(draft.test_name)
    results = [validate_asn(draft.asn)]
    if applicability.show_domain:
        results.append(validate_domain(draft.domain))
    if draft.since:
        results.append(validate_since(draft.since, draft.until, clock))
    if draft.until:
        results.append(validate_until(draft.until, draft.since, clock))
    return tuple(result.issue for result in results if result.issue is not None)


def parse_iso_day(value: DateInput | None) -> date | None:
    """Parse a YYYY-MM-DD string or date into a date, None when invalid."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not ISO_DAY_PATTERN.match(text):
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def format_iso_day(value: DateInput) -> str:
    """Return the canonical YYYY-MM-DD form, or the stripped raw text."""
    parsed = parse_iso_day(value)
    if parsed is None:
        return str(value).strip()
    return parsed.isoformat()


def _format_issue(field: FilterFieldName, message: str) -> FieldValidation:
    return FieldValidation(FieldIssue(field=field, kind="format", message=message))


def _range_issue(field: FilterFieldName, message: str) -> FieldValidation:
    return FieldValidation(FieldIssue(field=field, kind="range", message=message))


def _unparsable_date(field: FilterFieldName, value: DateInput) -> FieldValidation:
    return _format_issue(field, f"Invalid date '{value}'. Use the YYYY-MM-DD format.")
