"""Output formatters for CLI results: aligned table and JSON."""

from __future__ import annotations

import json
from typing import Any

from spdx_catalog.index import LicenseCatalog
from spdx_catalog.models import SpdxLicense


def _row(label: str, value: str, width: int = 20) -> str:
    return f"{label.ljust(width)}{value}"


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def format_license_table(lic: SpdxLicense) -> str:
    lines = [
        _row("License ID", lic.license_id),
        _row("Name", lic.name),
        _row("Reference", lic.reference),
        _row("OSI approved", _yes_no(lic.is_osi_approved)),
        _row("FSF libre", _yes_no(lic.is_fsf_libre)),
        _row("Deprecated", _yes_no(lic.is_deprecated_license_id)),
    ]
    if lic.see_also:
        lines.append(_row("See also", lic.see_also[0]))
        lines.extend(_row("", url) for url in lic.see_also[1:])
    return "\n".join(lines)


def format_license_json(lic: SpdxLicense) -> str:
    return json.dumps(lic.model_dump(mode="json", by_alias=True), indent=2)


def catalog_summary(catalog: LicenseCatalog) -> dict[str, Any]:
    return {
        "licenseListVersion": catalog.license_list_version,
        "releaseDate": catalog.release_date,
        "licenses": len(catalog),
        "deprecated": sum(1 for lic in catalog if lic.is_deprecated_license_id),
        "names": catalog.name_count,
        "urls": catalog.url_count,
    }


def format_info_table(catalog: LicenseCatalog) -> str:
    summary = catalog_summary(catalog)
    lines = [
        "SPDX License Catalog",
        "=" * 40,
        _row("List version", summary["licenseListVersion"] or "-"),
        _row("Release date", summary["releaseDate"] or "-"),
        _row("Licenses", str(summary["licenses"])),
        _row("Deprecated ids", str(summary["deprecated"])),
        _row("Indexed names", str(summary["names"])),
        _row("Indexed urls", str(summary["urls"])),
    ]
    return "\n".join(lines)


def format_info_json(catalog: LicenseCatalog) -> str:
    return json.dumps(catalog_summary(catalog), indent=2)
