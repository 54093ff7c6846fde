"""Encode filters as URL query parameters and restore drafts from them.

Deep links and re-submissions both come back through this module, so a
submitted filter restored as a draft submits to the same filter again.
The ANY sentinel is kept in the encoded form so links stay stable.
"""

from __future__ import annotations

from typing import Mapping

from core.clock import UtcClock
from core.constants import SUPPORTED_STATUSES
from core.logging_config import get_logger
from core.types import FilterDraft, NormalizedFilter
from filters.reducer import restore_draft

_LOGGER = get_logger(__name__)

QUERY_TO_FIELD = {
    "test_name": "test_name",
    "probe_cc": "country",
    "probe_asn": "asn",
    "domain": "domain",
    "since": "since",
    "until": "until",
    "only": "status",
}
PAYLOAD_TO_FIELD = {
    "testName": "test_name",
    "country": "country",
    "asn": "asn",
    "domain": "domain",
    "since": "since",
    "until": "until",
    "status": "status",
    "hideFailedMeasurements": "hide_failed_measurements",
}
_TRUE_FLAGS = ("true", "1", "yes")
_FALSE_FLAGS = ("false", "0", "no")


def filter_to_query(normalized: NormalizedFilter) -> dict[str, str]:
    """Encode a normalized filter as URL query parameters."""
    params = {
        "test_name": normalized.test_name,
        "probe_cc": normalized.country,
    }
    if normalized.asn is not None:
        params["probe_asn"] = normalized.asn
    if normalized.domain is not None:
        params["domain"] = normalized.domain
    params["since"] = normalized.since
    params["until"] = normalized.until
    params["only"] = normalized.status
    params["hide_failed"] = "true" if normalized.hide_failed_measurements else "false"
    return params


def draft_from_query(params: Mapping[str, str], clock: UtcClock) -> FilterDraft:
    """Restore a draft from URL query parameters.

    Unknown parameters are ignored; unsupported status or flag values fall
    back to their defaults.

    Args:
        params: Query parameters as decoded strings.
        clock: UTC clock providing the default range end.

    Returns:
        Draft ready for further edits or immediate submission.
    """
    values: dict[str, object] = {}
    for query_key, field_name in QUERY_TO_FIELD.items():
        if query_key in params:
            values[field_name] = params[query_key]
    status = values.get("status")
    if status is not None and status not in SUPPORTED_STATUSES:
        _LOGGER.warning("filter_query_value_ignored", parameter="only", value=status)
        del values["status"]
    raw_flag = params.get("hide_failed")
    if raw_flag is not None:
        flag = _parse_flag(raw_flag)
        if flag is None:
            _LOGGER.warning("filter_query_value_ignored", parameter="hide_failed", value=raw_flag)
        else:
            values["hide_failed_measurements"] = flag
    return restore_draft(values, clock)


def draft_from_payload(payload: Mapping[str, object], clock: UtcClock) -> FilterDraft:
    """Restore a draft from a payload previously emitted on submit."""
    values = {
        field_name: payload[payload_key]
        for payload_key, field_name in PAYLOAD_TO_FIELD.items()
        if payload_key in payload
    }
    return restore_draft(values, clock)


def draft_from_filter(normalized: NormalizedFilter, clock: UtcClock) -> FilterDraft:
    """Restore a draft from a normalized filter."""
    return draft_from_payload(normalized.to_payload(), clock)


def _parse_flag(raw_value: str) -> bool | None:
    lowered = raw_value.strip().lower()
    if lowered in _TRUE_FLAGS:
        return True
    if lowered in _FALSE_FLAGS:
        return False
    return None
