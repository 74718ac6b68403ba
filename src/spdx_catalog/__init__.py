"""SPDX license catalog -- classify license strings into SPDX identifiers.

Public API::

    from spdx_catalog import LicenseCatalog, LicenseQuery, load_catalog

    catalog = load_catalog()                 # bundled SPDX data
    catalog.find_by_id("Apache-2.0")
    catalog.find_by_name("apache license 2.0")
    catalog.find_by_url("http://www.apache.org/licenses/LICENSE-2.0")
    catalog.find_license(LicenseQuery(url="...", name="..."))
"""

from spdx_catalog.config import CatalogConfig
from spdx_catalog.default import get_default_catalog, reset_default_catalog
from spdx_catalog.errors import (
    CatalogConfigurationError,
    CatalogError,
    DuplicateLicenseIdError,
    UnknownLicenseIdError,
)
from spdx_catalog.index import LicenseCatalog, normalize_name, normalize_url
from spdx_catalog.loader import load_catalog, load_license_file, load_license_mappings
from spdx_catalog.models import LicenseMappings, LicenseQuery, SpdxLicense, SpdxLicenseFile

__all__ = [
    "CatalogConfig",
    "CatalogConfigurationError",
    "CatalogError",
    "DuplicateLicenseIdError",
    "LicenseCatalog",
    "LicenseMappings",
    "LicenseQuery",
    "SpdxLicense",
    "SpdxLicenseFile",
    "UnknownLicenseIdError",
    "get_default_catalog",
    "load_catalog",
    "load_license_file",
    "load_license_mappings",
    "normalize_name",
    "normalize_url",
    "reset_default_catalog",
]
__version__ = "3.21.0"
