"""Exception hierarchy for catalog loading.

Query misses are never errors: lookups return ``None``.  Everything in
here is raised while documents are read or the index is built, and means
no catalog instance was produced.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all catalog errors."""


class CatalogConfigurationError(CatalogError, ValueError):
    """The license list or synonym data is malformed or inconsistent."""


class UnknownLicenseIdError(CatalogConfigurationError):
    def __init__(self, license_id: str, source: str = "license synonyms") -> None:
        self.license_id = license_id
        self.source = source
        super().__init__(f"Unknown license {license_id!r} in {source}")


class DuplicateLicenseIdError(CatalogConfigurationError):
    def __init__(self, license_id: str) -> None:
        self.license_id = license_id
        super().__init__(f"Duplicate license id in license list: {license_id!r}")
