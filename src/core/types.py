"""Shared typed models.

This module defines the immutable data models exchanged between the
applicability resolver, validators, reducer, catalog, and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from core.constants import ANY, DEFAULT_HIDE_FAILED_MEASUREMENTS, DEFAULT_STATUS

TestType = str
StatusFilter = Literal["all", "confirmed", "anomalies"]
IssueKind = Literal["format", "range"]
FilterFieldName = Literal[
    "test_name",
    "country",
    "asn",
    "domain",
    "since",
    "until",
    "status",
    "hide_failed_measurements",
]


@dataclass(frozen=True)
class FilterDraft:
    """In-progress filter values as edited by the user.

    A new draft is produced for every event; dates are stored as
    canonical YYYY-MM-DD strings and the empty string means unset.

    Attributes:
        test_name: Selected test identifier or the ANY sentinel.
        country: Selected alpha-2 country code or the ANY sentinel.
        asn: Raw ASN input.
        domain: Raw domain input.
        since: Range start date string.
        until: Range end date string.
        status: Result status filter.
        hide_failed_measurements: Exclude failed measurements.
    """

    test_name: TestType = ANY
    country: str = ANY
    asn: str = ""
    domain: str = ""
    since: str = ""
    until: str = ""
    status: StatusFilter = DEFAULT_STATUS
    hide_failed_measurements: bool = DEFAULT_HIDE_FAILED_MEASUREMENTS


@dataclass(frozen=True)
class FieldApplicability:
    """Optional fields relevant to one test type."""

    show_domain: bool
    show_confirmed: bool
    show_anomalies: bool

    @property
    def show_status(self) -> bool:
        """Whether any status choice beyond 'all' applies."""
        return self.show_confirmed or self.show_anomalies


@dataclass(frozen=True)
class FieldIssue:
    """One field-scoped validation failure.

    Attributes:
        field: Draft field name the issue belongs to.
        kind: 'format' for pattern failures, 'range' for date-range failures.
        message: Human-readable explanation.
    """

    field: FilterFieldName
    kind: IssueKind
    message: str


@dataclass(frozen=True)
class FieldValidation:
    """Validator outcome for a single value."""

    issue: FieldIssue | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the value passed validation."""
        return self.issue is None


@dataclass(frozen=True)
class NormalizedFilter:
    """Submittable filter built from a validated draft.

    Optional fields are None when empty or inapplicable to the test type.
    """

    test_name: TestType
    country: str
    since: str
    until: str
    status: StatusFilter
    hide_failed_measurements: bool
    asn: str | None = None
    domain: str | None = None

    def to_payload(self) -> dict[str, object]:
        """Render the filter for the results-fetching collaborator."""
        payload: dict[str, object] = {
            "testName": self.test_name,
            "country": self.country,
        }
        if self.asn is not None:
            payload["asn"] = self.asn
        if self.domain is not None:
            payload["domain"] = self.domain
        payload["since"] = self.since
        payload["until"] = self.until
        payload["status"] = self.status
        payload["hideFailedMeasurements"] = self.hide_failed_measurements
        return payload


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of submitting a draft.

    Exactly one of filter/issues is meaningful: a rejected submission
    carries issues and no filter.
    """

    filter: NormalizedFilter | None
    issues: tuple[FieldIssue, ...] = ()

    @property
    def accepted(self) -> bool:
        """Whether the draft passed validation."""
        return self.filter is not None

    def issues_for(self, field: FilterFieldName) -> tuple[FieldIssue, ...]:
        """Return issues attached to one field."""
        return tuple(issue for issue in self.issues if issue.field == field)


@dataclass(frozen=True)
class TestNameEntry:
    """Test catalog row supplied by the input collaborator."""

    __test__ = False

    id: str
    name: str


@dataclass(frozen=True)
class CountryEntry:
    """Country catalog row supplied by the input collaborator."""

    alpha_2: str
    name: str


@dataclass(frozen=True)
class SelectOption:
    """One selectable option; label is a display name or message id."""

    value: str
    label: str


@dataclass(frozen=True)
class OptionGroup:
    """Test options sharing one display group."""

    group: str
    options: tuple[SelectOption, ...]


@dataclass(frozen=True)
class FilterCatalog:
    """Static catalogs available to the filter form."""

    test_names: tuple[TestNameEntry, ...]
    countries: tuple[CountryEntry, ...]
