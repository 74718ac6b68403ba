"""License catalog -- immutable in-memory indexes over the SPDX license list.

The catalog maintains three lookup structures:
  - by id: license id -> license, exact and case-sensitive
  - by name: lower-cased name -> license, first writer wins
  - by url: url without protocol -> ordered candidate licenses

Names come from each license's own ``name`` first and from synonym names
afterwards, so a synonym can never take over a name a license already
claimed.  URLs accumulate: ``reference``, then ``seeAlso``, then synonym
URLs, in that order.  Candidate order is significant because it decides
ties at query time.

All indexes are built in ``__init__`` and never change afterwards, so a
catalog can be shared between threads without locking.  To pick up new
data, build a new catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType

from spdx_catalog.errors import DuplicateLicenseIdError, UnknownLicenseIdError
from spdx_catalog.models import LicenseMappings, LicenseQuery, SpdxLicense, SpdxLicenseFile

logger = logging.getLogger(__name__)

_PROTOCOL_PREFIXES = ("https://", "http://")


def normalize_name(name: str) -> str:
    return name.lower()


def normalize_url(url: str) -> str:
    """Strip one leading ``https://`` or ``http://``.  Nothing else changes."""
    for prefix in _PROTOCOL_PREFIXES:
        if url.startswith(prefix):
            return url[len(prefix):]
    return url


def _id_length(lic: SpdxLicense) -> int:
    return len(lic.license_id)


def _claim_name(by_name: dict[str, SpdxLicense], name: str, lic: SpdxLicense) -> None:
    key = normalize_name(name)
    if key not in by_name:
        by_name[key] = lic


def _add_url(by_url: dict[str, list[SpdxLicense]], url: str, lic: SpdxLicense) -> None:
    by_url.setdefault(normalize_url(url), []).append(lic)


class LicenseCatalog:
    """Read-only lookup service over a fixed set of SPDX licenses."""

    def __init__(
        self,
        licenses: Iterable[SpdxLicense],
        mappings: LicenseMappings | None = None,
        *,
        license_list_version: str = "",
        release_date: str = "",
    ) -> None:
        """Build all indexes.

        Raises DuplicateLicenseIdError if two licenses share an id and
        UnknownLicenseIdError if the synonym data names a license that is
        not in ``licenses``.
        """
        records = tuple(licenses)
        mappings = mappings if mappings is not None else LicenseMappings()

        by_id: dict[str, SpdxLicense] = {}
        for lic in records:
            if lic.license_id in by_id:
                raise DuplicateLicenseIdError(lic.license_id)
            by_id[lic.license_id] = lic

        by_name: dict[str, SpdxLicense] = {}
        by_url: dict[str, list[SpdxLicense]] = {}
        for lic in records:
            _claim_name(by_name, lic.name, lic)
            _add_url(by_url, lic.reference, lic)
            for url in lic.see_also:
                _add_url(by_url, url, lic)

        for license_id, names in mappings.id_to_name.items():
            lic = self._resolve(by_id, license_id, "idToName")
            for name in names:
                _claim_name(by_name, name, lic)

        for license_id, urls in mappings.id_to_url.items():
            lic = self._resolve(by_id, license_id, "idToUrl")
            for url in urls:
                _add_url(by_url, url, lic)

        self._licenses = records
        self._by_id: Mapping[str, SpdxLicense] = MappingProxyType(by_id)
        self._by_name: Mapping[str, SpdxLicense] = MappingProxyType(by_name)
        self._by_url: Mapping[str, tuple[SpdxLicense, ...]] = MappingProxyType(
            {url: tuple(candidates) for url, candidates in by_url.items()}
        )
        self.license_list_version = license_list_version
        self.release_date = release_date

        logger.debug(
            "Built license catalog %s: %d ids, %d names, %d urls",
            license_list_version or "(unversioned)",
            len(self._by_id),
            len(self._by_name),
            len(self._by_url),
        )

    @classmethod
    def from_documents(
        cls, license_file: SpdxLicenseFile, mappings: LicenseMappings | None = None,
    ) -> LicenseCatalog:
        return cls(
            license_file.licenses,
            mappings,
            license_list_version=license_file.license_list_version,
            release_date=license_file.release_date,
        )

    @staticmethod
    def _resolve(
        by_id: Mapping[str, SpdxLicense], license_id: str, section: str,
    ) -> SpdxLicense:
        lic = by_id.get(license_id)
        if lic is None:
            raise UnknownLicenseIdError(license_id, f"license synonyms ({section})")
        return lic

    # -- point lookups --------------------------------------------------

    def find_by_id(self, license_id: str) -> SpdxLicense | None:
        """Exact, case-sensitive lookup. Returns None if not found."""
        return self._by_id.get(license_id)

    def find_by_name(self, name: str) -> SpdxLicense | None:
        """Case-insensitive lookup over license names and synonym names."""
        return self._by_name.get(normalize_name(name))

    def find_by_url(self, url: str) -> SpdxLicense | None:
        """Look up a URL, ignoring a leading ``https://`` or ``http://``.

        When several licenses share the URL the one with the shortest id
        wins (``GPL-2.0`` over ``GPL-2.0-or-later``); equal lengths keep
        candidate order.
        """
        candidates = self._by_url.get(normalize_url(url))
        if not candidates:
            return None
        return min(candidates, key=_id_length)

    def find_license(
        self,
        query: LicenseQuery | None = None,
        *,
        id: str | None = None,
        url: str | None = None,
        name: str | None = None,
    ) -> SpdxLicense | None:
        """Resolve a license from any combination of id, url and name.

        Accepts either a LicenseQuery or the same fields as keywords.  The
        id is tried first, then the url, then the name; the first match
        wins.  For a url shared by several licenses, candidates whose
        ``name`` equals the query name exactly are preferred and the
        shortest id among them is returned.  If the name matches none of
        them, the first candidate registered for the url is returned
        instead.

        Note that ``find_by_url`` has no such fallback and always picks the
        shortest id, so the two can disagree for the same url.
        """
        if query is None:
            query = LicenseQuery(id=id, url=url, name=name)
        elif id is not None or url is not None or name is not None:
            raise TypeError("find_license() takes a LicenseQuery or keyword fields, not both")

        if query.id is not None:
            lic = self.find_by_id(query.id)
            if lic is not None:
                return lic

        if query.url is not None:
            candidates = self._by_url.get(normalize_url(query.url))
            if candidates:
                if len(candidates) == 1:
                    return candidates[0]
                matching = [c for c in candidates if not query.name or c.name == query.name]
                if matching:
                    return min(matching, key=_id_length)
                return candidates[0]

        if query.name is not None:
            return self.find_by_name(query.name)
        return None

    # -- read-only views ------------------------------------------------

    def candidates_for_url(self, url: str) -> Sequence[SpdxLicense]:
        """All licenses registered for a URL, in registration order."""
        return self._by_url.get(normalize_url(url), ())

    @property
    def licenses(self) -> tuple[SpdxLicense, ...]:
        return self._licenses

    @property
    def name_count(self) -> int:
        return len(self._by_name)

    @property
    def url_count(self) -> int:
        return len(self._by_url)

    def __len__(self) -> int:
        return len(self._licenses)

    def __iter__(self) -> Iterator[SpdxLicense]:
        return iter(self._licenses)

    def __contains__(self, license_id: object) -> bool:
        return license_id in self._by_id

    def __repr__(self) -> str:
        version = self.license_list_version or "unversioned"
        return f"<LicenseCatalog {version}: {len(self._licenses)} licenses>"
