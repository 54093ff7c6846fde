"""Filter draft reducer and submission.

The draft is replaced, never mutated: every user event goes through
reduce_draft, which also clears optional values that stop applying to the
selected test type. Submission validates the draft and builds the
normalized filter handed to the results-fetching collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Mapping, cast

from core.clock import UtcClock, tomorrow_utc
from core.constants import ANY, STATUS_ALL, SUPPORTED_STATUSES
from core.errors import FilterFieldError, FilterValidationError
from core.logging_config import get_logger
from core.types import (
    FieldApplicability,
    FilterDraft,
    NormalizedFilter,
    StatusFilter,
    SubmitResult,
    TestType,
)
from filters.applicability import resolve_applicability, status_applies
from filters.validators import format_iso_day, validate_draft

_LOGGER = get_logger(__name__)

DRAFT_FIELDS = (
    "test_name",
    "country",
    "asn",
    "domain",
    "since",
    "until",
    "status",
    "hide_failed_measurements",
)


@dataclass(frozen=True)
class TestNameChanged:
    """The user picked another test type."""

    __test__ = False

    test_name: TestType


@dataclass(frozen=True)
class FieldChanged:
    """The user edited one draft field."""

    field_name: str
    value: object


FilterEvent = TestNameChanged | FieldChanged


def default_draft(clock: UtcClock) -> FilterDraft:
    """Build the draft shown when the form mounts without prior state."""
    return FilterDraft(until=tomorrow_utc(clock).isoformat())


def restore_draft(values: Mapping[str, object], clock: UtcClock) -> FilterDraft:
    """Build a draft from previously submitted or deep-linked values.

    Args:
        values: Field values keyed by draft field name; missing or None
            values keep their defaults.
        clock: UTC clock providing the default range end.

    Returns:
        Draft with stale optional selections already cleared.
    """
    draft = default_draft(clock)
    for field_name in DRAFT_FIELDS:
        value = values.get(field_name)
        if value is None:
            continue
        draft = _apply_field(draft, field_name, value)
    return clear_stale_selections(draft, resolve_applicability(draft.test_name))


def reduce_draft(draft: FilterDraft, event: FilterEvent) -> FilterDraft:
    """Apply one user event and return the next draft.

    Args:
        draft: Current draft.
        event: Test-type change or field edit.

    Returns:
        New draft; optional fields inapplicable to the test type are reset.

    Raises:
        FilterFieldError: If the event names an unknown field or an
            unsupported status or flag value.
    """
    if isinstance(event, TestNameChanged):
        next_draft = _apply_field(draft, "test_name", event.test_name)
    else:
        next_draft = _apply_field(draft, event.field_name, event.value)
    return clear_stale_selections(next_draft, resolve_applicability(next_draft.test_name))


def clear_stale_selections(draft: FilterDraft, applicability: FieldApplicability) -> FilterDraft:
    """Reset domain and status values the active test type does not support."""
    cleared = draft
    if cleared.domain and not applicability.show_domain:
        _log_stale_selection(cleared, "domain", cleared.domain)
        cleared = replace(cleared, domain="")
    if not status_applies(cleared.status, applicability):
        _log_stale_selection(cleared, "status", cleared.status)
        cleared = replace(cleared, status=cast(StatusFilter, STATUS_ALL))
    return cleared


def build_filter(draft: FilterDraft) -> NormalizedFilter:
    """Build the normalized filter from an already validated draft."""
    applicability = resolve_applicability(draft.test_name)
    status = draft.status if status_applies(draft.status, applicability) else STATUS_ALL
    domain = draft.domain if applicability.show_domain and draft.domain else None
    return NormalizedFilter(
        test_name=draft.test_name or ANY,
        country=draft.country or ANY,
        since=draft.since,
        until=draft.until,
        status=cast(StatusFilter, status),
        hide_failed_measurements=draft.hide_failed_measurements,
        asn=draft.asn or None,
        domain=domain,
    )


def submit_draft(draft: FilterDraft, clock: UtcClock) -> SubmitResult:
    """Validate a draft and build its normalized filter.

    Args:
        draft: Draft to submit; it is never modified.
        clock: UTC clock providing the tomorrow fence.

    Returns:
        Accepted result with the filter, or rejected result with issues.
    """
    issues = validate_draft(draft, clock)
    if issues:
        _LOGGER.info(
            "filter_submit_rejected",
            fields=[issue.field for issue in issues],
            issue_count=len(issues),
        )
        return SubmitResult(filter=None, issues=issues)
    normalized = build_filter(draft)
    _LOGGER.info(
        "filter_submit_accepted",
        test_name=normalized.test_name,
        country=normalized.country,
        status=normalized.status,
    )
    return SubmitResult(filter=normalized)


def require_filter(result: SubmitResult) -> NormalizedFilter:
    """Return the accepted filter or raise with the field issues."""
    if result.filter is None:
        raise FilterValidationError(result.issues)
    return result.filter


class FilterSession:
    """Owns the single draft of one filter form.

    Events are applied synchronously; callers must not drive one session
    from several threads.
    """

    def __init__(
        self,
        clock: UtcClock,
        on_apply: Callable[[NormalizedFilter], None] | None = None,
        draft: FilterDraft | None = None,
    ) -> None:
        self._clock = clock
        self._on_apply = on_apply
        initial = draft if draft is not None else default_draft(clock)
        self._draft = clear_stale_selections(initial, resolve_applicability(initial.test_name))

    @property
    def draft(self) -> FilterDraft:
        """Current draft."""
        return self._draft

    @property
    def applicability(self) -> FieldApplicability:
        """Optional fields relevant to the current test type."""
        return resolve_applicability(self._draft.test_name)

    def dispatch(self, event: FilterEvent) -> FilterDraft:
        """Apply one event and return the new draft."""
        self._draft = reduce_draft(self._draft, event)
        return self._draft

    def change_test_name(self, test_name: TestType) -> FilterDraft:
        """Select a test type."""
        return self.dispatch(TestNameChanged(test_name))

    def change_field(self, field_name: str, value: object) -> FilterDraft:
        """Edit one draft field."""
        return self.dispatch(FieldChanged(field_name, value))

    def submit(self) -> SubmitResult:
        """Validate the current draft and hand an accepted filter to on_apply."""
        result = submit_draft(self._draft, self._clock)
        if result.filter is not None and self._on_apply is not None:
            self._on_apply(result.filter)
        return result


def _apply_field(draft: FilterDraft, field_name: str, value: object) -> FilterDraft:
    if field_name == "test_name":
        return replace(draft, test_name=_text_value(field_name, value) or ANY)
    if field_name == "country":
        return replace(draft, country=_text_value(field_name, value) or ANY)
    if field_name == "asn":
        return replace(draft, asn=_text_value(field_name, value))
    if field_name == "domain":
        return replace(draft, domain=_text_value(field_name, value))
    if field_name == "since":
        return replace(draft, since=_date_value(field_name, value))
    if field_name == "until":
        return replace(draft, until=_date_value(field_name, value))
    if field_name == "status":
        return replace(draft, status=_status_value(value))
    if field_name == "hide_failed_measurements":
        if not isinstance(value, bool):
            raise FilterFieldError(
                f"Field 'hide_failed_measurements' must be true/false, got {value!r}."
            )
        return replace(draft, hide_failed_measurements=value)
    supported_rows = ", ".join(DRAFT_FIELDS)
    raise FilterFieldError(f"Unknown filter field '{field_name}'. Use one of: {supported_rows}.")


def _text_value(field_name: str, value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise FilterFieldError(f"Field '{field_name}' must be a string, got {type(value).__name__}.")


def _date_value(field_name: str, value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (date, str)):
        return format_iso_day(value)
    raise FilterFieldError(
        f"Field '{field_name}' must be a date or YYYY-MM-DD string, got {type(value).__name__}."
    )


def _status_value(value: object) -> StatusFilter:
    if isinstance(value, str) and value in SUPPORTED_STATUSES:
        return cast(StatusFilter, value)
    supported_rows = ", ".join(SUPPORTED_STATUSES)
    raise FilterFieldError(f"Invalid status {value!r}. Use one of: {supported_rows}.")


def _log_stale_selection(draft: FilterDraft, field_name: str, value: str) -> None:
    _LOGGER.debug(
        "filter_stale_selection_cleared",
        field=field_name,
        value=value,
        test_name=draft.test_name,
    )
