"""Pydantic models for SPDX license records, synonym data and queries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _DocumentModel(BaseModel):
    """Shared settings for models parsed from the SPDX JSON documents.

    The published list keeps growing new keys, so unknown keys are ignored
    rather than rejected.  Field names are snake_case, the documents use
    camelCase aliases.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class SpdxLicense(_DocumentModel):
    """A single entry of the SPDX license list."""

    license_id: str = Field(alias="licenseId")
    name: str
    reference: str
    see_also: tuple[str, ...] = Field(default=(), alias="seeAlso")
    is_deprecated_license_id: bool = Field(default=False, alias="isDeprecatedLicenseId")
    is_osi_approved: bool = Field(default=False, alias="isOsiApproved")
    # SPDX only publishes isFsfLibre for licenses the FSF reviewed
    is_fsf_libre: bool = Field(default=False, alias="isFsfLibre")
    reference_number: int = Field(default=0, alias="referenceNumber")
    details_url: str = Field(default="", alias="detailsUrl")


class SpdxLicenseFile(_DocumentModel):
    """The license-list document: version header plus the ordered records."""

    license_list_version: str = Field(default="", alias="licenseListVersion")
    release_date: str = Field(default="", alias="releaseDate")
    licenses: tuple[SpdxLicense, ...]


class LicenseMappings(_DocumentModel):
    """Synonym data: alternate names and URLs keyed by license id.

    Key order and value order are preserved; the index relies on both for
    first-writer-wins names and for URL candidate ordering.
    """

    id_to_name: dict[str, tuple[str, ...]] = Field(default_factory=dict, alias="idToName")
    id_to_url: dict[str, tuple[str, ...]] = Field(default_factory=dict, alias="idToUrl")


class LicenseQuery(BaseModel):
    """Combined lookup request for ``LicenseCatalog.find_license``.

    All three fields are optional.  ``id`` is tried first, then ``url``,
    then ``name``; the first match wins.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str | None = None
    url: str | None = None
    name: str | None = None
