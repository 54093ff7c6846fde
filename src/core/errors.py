"""Explorer filter exception hierarchy.

This module defines traceable domain errors with clear boundaries.
User-input validation outcomes are returned as data, not raised; the
exceptions here cover configuration, catalog, and caller mistakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.types import FieldIssue


class ExplorerError(Exception):
    """Base exception for all explorer filter failures."""


class ExplorerConfigError(ExplorerError):
    """Raised for invalid runtime configuration."""


class ExplorerCatalogError(ExplorerError):
    """Raised for unreadable or malformed test/country catalogs."""


class FilterFieldError(ExplorerError):
    """Raised when a caller addresses an unknown field or status value."""


class FilterValidationError(ExplorerError):
    """Raised by callers that require a filter from a rejected submission."""

    def __init__(self, issues: tuple[FieldIssue, ...]) -> None:
        self.issues = issues
        rendered = ", ".join(f"{issue.field}: {issue.message}" for issue in issues)
        super().__init__(f"Filter submission rejected ({rendered}).")
