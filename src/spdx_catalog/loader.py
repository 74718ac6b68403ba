"""Reading the license list and synonym documents from disk.

The license list is the SPDX-published ``licenses.json``.  The synonym
document may be JSON or YAML (chosen by file suffix).  Both default to
the copies bundled in ``spdx_catalog/data``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from spdx_catalog.errors import CatalogConfigurationError
from spdx_catalog.index import LicenseCatalog
from spdx_catalog.models import LicenseMappings, SpdxLicenseFile

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
BUNDLED_LICENSES = DATA_DIR / "licenses.json"
BUNDLED_SYNONYMS = DATA_DIR / "license-synonyms.json"

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _read_document(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                raw_data = yaml.safe_load(f)
            else:
                text = f.read()
                raw_data = json.loads(text) if text.strip() else None
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CatalogConfigurationError(f"Malformed catalog document {path}: {exc}") from exc
    if raw_data is None:
        raise CatalogConfigurationError(f"Empty catalog document: {path}")
    if not isinstance(raw_data, dict):
        raise CatalogConfigurationError(f"Catalog document root must be a mapping: {path}")
    return raw_data


def load_license_file(path: str | Path | None = None) -> SpdxLicenseFile:
    path = Path(path) if path is not None else BUNDLED_LICENSES
    data = _read_document(path)
    try:
        license_file = SpdxLicenseFile.model_validate(data)
    except ValidationError as exc:
        raise CatalogConfigurationError(f"Invalid license list {path}: {exc}") from exc
    logger.info(
        "Loaded SPDX license list %s (released %s) with %d licenses from %s",
        license_file.license_list_version or "?",
        license_file.release_date or "?",
        len(license_file.licenses),
        path,
    )
    return license_file


def load_license_mappings(path: str | Path | None = None) -> LicenseMappings:
    path = Path(path) if path is not None else BUNDLED_SYNONYMS
    data = _read_document(path)
    try:
        mappings = LicenseMappings.model_validate(data)
    except ValidationError as exc:
        raise CatalogConfigurationError(f"Invalid license synonyms {path}: {exc}") from exc
    logger.info(
        "Loaded license synonyms for %d names and %d urls from %s",
        len(mappings.id_to_name),
        len(mappings.id_to_url),
        path,
    )
    return mappings


def load_catalog(
    licenses_path: str | Path | None = None,
    synonyms_path: str | Path | None = None,
) -> LicenseCatalog:
    """Load both documents and build a catalog. None means bundled data.

    Raises CatalogConfigurationError if either document is unreadable or
    the synonyms reference an unknown license id.
    """
    license_file = load_license_file(licenses_path)
    mappings = load_license_mappings(synonyms_path)
    return LicenseCatalog.from_documents(license_file, mappings)
