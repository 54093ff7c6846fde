"""Public SDK surface for the measurement filter engine.

This module provides a stable import path for presentation layers.
It re-exports the reducer, resolver, validators, and typed models.
"""

from __future__ import annotations

from catalog.catalog_io import default_catalog, load_catalog
from catalog.measurement_tests import (
    build_country_options,
    build_test_name_options,
    group_test_name_options,
)
from core.clock import FixedClock, SystemClock, UtcClock
from core.config import ExplorerConfig
from core.constants import ANY
from core.types import (
    FieldApplicability,
    FieldIssue,
    FilterCatalog,
    FilterDraft,
    NormalizedFilter,
    SubmitResult,
)
from filters.applicability import resolve_applicability
from filters.membership import (
    TESTS_WITH_ANOMALY_STATUS,
    TESTS_WITH_CONFIRMED_STATUS,
    TESTS_WITH_DOMAIN,
)
from filters.query_codec import draft_from_filter, draft_from_query, filter_to_query
from filters.reducer import (
    FieldChanged,
    FilterSession,
    TestNameChanged,
    default_draft,
    reduce_draft,
    require_filter,
    submit_draft,
)
from filters.validators import validate_asn, validate_domain, validate_since, validate_until

__all__ = [
    "ANY",
    "ExplorerConfig",
    "FieldApplicability",
    "FieldChanged",
    "FieldIssue",
    "FilterCatalog",
    "FilterDraft",
    "FilterSession",
    "FixedClock",
    "NormalizedFilter",
    "SubmitResult",
    "SystemClock",
    "TESTS_WITH_ANOMALY_STATUS",
    "TESTS_WITH_CONFIRMED_STATUS",
    "TESTS_WITH_DOMAIN",
    "TestNameChanged",
    "UtcClock",
    "build_country_options",
    "build_test_name_options",
    "default_catalog",
    "default_draft",
    "draft_from_filter",
    "draft_from_query",
    "filter_to_query",
    "group_test_name_options",
    "load_catalog",
    "reduce_draft",
    "require_filter",
    "resolve_applicability",
    "submit_draft",
    "validate_asn",
    "validate_domain",
    "validate_since",
    "validate_until",
]
