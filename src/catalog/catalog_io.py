"""YAML catalog loading for test names and countries.

Catalog files supply the static selector data consumed by the filter
form. Expected layout:

    test_names:
      - {id: web_connectivity, name: Web Connectivity Test}
    countries:
      - {alpha_2: IT, name: Italy}
"""

from __future__ import annotations

from pathlib import Path
import yaml

from catalog.measurement_tests import default_test_names
from core.config import ExplorerConfig
from core.errors import ExplorerCatalogError
from core.logging_config import get_logger
from core.types import CountryEntry, FilterCatalog, TestNameEntry

_LOGGER = get_logger(__name__)


def default_catalog() -> FilterCatalog:
    """Return the built-in test catalog with no countries."""
    return FilterCatalog(test_names=default_test_names(), countries=())


def load_configured_catalog(config: ExplorerConfig) -> FilterCatalog:
    """Load the catalog named by config, or the built-in one."""
    if config.catalog_path is None:
        return default_catalog()
    return load_catalog(str(config.catalog_path))


def load_catalog(catalog_path: str) -> FilterCatalog:
    """Load and validate a YAML catalog file.

    Args:
        catalog_path: File path to YAML catalog.

    Returns:
        Validated catalog; a missing section yields an empty tuple.

    Raises:
        ExplorerCatalogError: If the file is missing, unreadable, or malformed.
    """
    catalog_file = Path(catalog_path).expanduser().resolve()
    if not catalog_file.exists():
        raise ExplorerCatalogError(
            f"Catalog file does not exist at {catalog_file}. Provide a valid YAML file path."
        )
    try:
        payload = yaml.safe_load(catalog_file.read_text(encoding="utf-8"))
    except OSError as error:
        raise ExplorerCatalogError(
            f"Failed to read catalog at {catalog_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise ExplorerCatalogError(
            f"Failed to parse YAML catalog at {catalog_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise ExplorerCatalogError(
            f"Catalog at {catalog_file} is empty. Define 'test_names' and/or 'countries'."
        )
    if not isinstance(payload, dict):
        raise ExplorerCatalogError(
            f"Catalog at {catalog_file} must map 'test_names' and/or 'countries' to lists, "
            f"got {type(payload).__name__}."
        )
    _validate_root_keys(payload)
    catalog = FilterCatalog(
        test_names=tuple(
            TestNameEntry(id=row["id"], name=row["name"])
            for row in _parse_rows(payload, "test_names", ("id", "name"))
        ),
        countries=tuple(
            CountryEntry(alpha_2=row["alpha_2"], name=row["name"])
            for row in _parse_rows(payload, "countries", ("alpha_2", "name"))
        ),
    )
    _LOGGER.info(
        "catalog_loaded",
        path=str(catalog_file),
        test_count=len(catalog.test_names),
        country_count=len(catalog.countries),
    )
    return catalog


def _parse_rows(
    payload: dict[object, object],
    section: str,
    required_keys: tuple[str, ...],
) -> list[dict[str, str]]:
    raw_rows = payload.get(section)
    if raw_rows is None:
        return []
    if not isinstance(raw_rows, list):
        raise ExplorerCatalogError(
            f"Catalog section '{section}' must be a list of entries, "
            f"got {type(raw_rows).__name__}."
        )
    rows = []
    for index, raw_row in enumerate(raw_rows):
        context = f"catalog '{section}' entry #{index + 1}"
        if not isinstance(raw_row, dict):
            expected = ", ".join(required_keys)
            raise ExplorerCatalogError(
                f"Invalid {context}: expected fields {expected}, got {type(raw_row).__name__}."
            )
        row = {}
        for key in required_keys:
            value = raw_row.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ExplorerCatalogError(
                    f"Invalid {context}: field '{key}' must be a non-empty string."
                )
            row[key] = value.strip()
        rows.append(row)
    return rows


def _validate_root_keys(payload: dict[object, object]) -> None:
    allowed_keys = {"test_names", "countries"}
    unknown_keys = sorted(str(key) for key in payload if key not in allowed_keys)
    if unknown_keys:
        raise ExplorerCatalogError(
            f"Catalog contains unknown root fields: {', '.join(unknown_keys)}."
        )
