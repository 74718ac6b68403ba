"""Test fixtures for spdx-catalog tests."""

from __future__ import annotations

import pytest

from spdx_catalog import reset_default_catalog
from spdx_catalog.index import LicenseCatalog
from spdx_catalog.loader import load_catalog
from spdx_catalog.models import LicenseMappings, SpdxLicense


@pytest.fixture(autouse=True)
def _reset_default_catalog():
    """Drop the shared catalog before and after each test to avoid cross-test pollution."""
    reset_default_catalog()
    yield
    reset_default_catalog()


@pytest.fixture(scope="session")
def bundled_catalog() -> LicenseCatalog:
    return load_catalog()


def make_license(
    license_id: str = "Test-1.0",
    name: str | None = None,
    reference: str | None = None,
    see_also: list[str] | None = None,
    osi: bool = False,
    deprecated: bool = False,
) -> SpdxLicense:
    """Create a minimal license record for testing."""
    return SpdxLicense(
        license_id=license_id,
        name=name if name is not None else f"Test License {license_id}",
        reference=reference or f"https://spdx.org/licenses/{license_id}.html",
        see_also=tuple(see_also or ()),
        is_osi_approved=osi,
        is_deprecated_license_id=deprecated,
        details_url=f"https://spdx.org/licenses/{license_id}.json",
    )


def make_mappings(
    names: dict[str, list[str]] | None = None,
    urls: dict[str, list[str]] | None = None,
) -> LicenseMappings:
    return LicenseMappings(
        id_to_name={k: tuple(v) for k, v in (names or {}).items()},
        id_to_url={k: tuple(v) for k, v in (urls or {}).items()},
    )
