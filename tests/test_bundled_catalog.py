"""Properties of the catalog built from the bundled SPDX data."""

from __future__ import annotations

import pytest

from spdx_catalog.index import LicenseCatalog, normalize_name
from spdx_catalog.models import LicenseQuery

GPL2_URL = "https://opensource.org/licenses/GPL-2.0"


class TestEveryLicense:
    def test_find_by_id_returns_each_record(self, bundled_catalog: LicenseCatalog):
        for lic in bundled_catalog:
            assert bundled_catalog.find_by_id(lic.license_id) is lic

    def test_find_by_name_returns_first_claimant(self, bundled_catalog: LicenseCatalog):
        first_claimant = {}
        for lic in bundled_catalog:
            first_claimant.setdefault(normalize_name(lic.name), lic)
        for lic in bundled_catalog:
            assert bundled_catalog.find_by_name(lic.name) is first_claimant[normalize_name(lic.name)]

    def test_reference_url_resolves(self, bundled_catalog: LicenseCatalog):
        for lic in bundled_catalog:
            assert bundled_catalog.find_by_url(lic.reference) is lic

    def test_ids_unique(self, bundled_catalog: LicenseCatalog):
        ids = [lic.license_id for lic in bundled_catalog]
        assert len(ids) == len(set(ids))


class TestWellKnownLookups:
    @pytest.mark.parametrize(
        "url",
        [
            "https://spdx.org/licenses/Apache-2.0.html",
            "http://spdx.org/licenses/Apache-2.0.html",
            "spdx.org/licenses/Apache-2.0.html",
            "http://www.apache.org/licenses/LICENSE-2.0",
            "https://www.apache.org/licenses/LICENSE-2.0.txt",
        ],
    )
    def test_apache_urls(self, bundled_catalog: LicenseCatalog, url: str):
        assert bundled_catalog.find_by_url(url).license_id == "Apache-2.0"

    @pytest.mark.parametrize(
        "name",
        [
            "Apache License 2.0",
            "APACHE LICENSE 2.0",
            "apache license v2.0",
            "The Apache Software License, Version 2.0",
        ],
    )
    def test_apache_names(self, bundled_catalog: LicenseCatalog, name: str):
        assert bundled_catalog.find_by_name(name).license_id == "Apache-2.0"

    def test_deprecated_id_keeps_shared_name(self, bundled_catalog: LicenseCatalog):
        found = bundled_catalog.find_by_name("GNU General Public License v2.0 only")
        assert found.license_id == "GPL-2.0"
        assert found.is_deprecated_license_id

    def test_shared_url_shortest_id(self, bundled_catalog: LicenseCatalog):
        assert bundled_catalog.find_by_url(GPL2_URL).license_id == "GPL-2.0"

    def test_find_license_id_wins(self, bundled_catalog: LicenseCatalog):
        query = LicenseQuery(id="Apache-2.0", url=GPL2_URL, name="MIT License")
        assert bundled_catalog.find_license(query).license_id == "Apache-2.0"

    def test_find_license_shared_url_with_name(self, bundled_catalog: LicenseCatalog):
        query = LicenseQuery(url=GPL2_URL, name="GNU General Public License v2.0 or later")
        assert bundled_catalog.find_license(query).license_id == "GPL-2.0-or-later"

    def test_find_license_shared_url_unknown_name(self, bundled_catalog: LicenseCatalog):
        query = LicenseQuery(url=GPL2_URL, name="No Such Name")
        assert bundled_catalog.find_license(query).license_id == "GPL-2.0"

    def test_misses_return_none(self, bundled_catalog: LicenseCatalog):
        assert bundled_catalog.find_by_id("Not-A-License") is None
        assert bundled_catalog.find_by_name("Not A License") is None
        assert bundled_catalog.find_by_url("https://example.org/not-a-license") is None
        assert bundled_catalog.find_license(LicenseQuery(name="Not A License")) is None

    def test_metadata(self, bundled_catalog: LicenseCatalog):
        assert bundled_catalog.license_list_version == "3.21"
        assert bundled_catalog.release_date == "2023-06-18"
