"""Catalog configuration -- where the license list and synonym data come from.

Both paths default to the documents bundled with the package::

    config = CatalogConfig()                       # bundled data
    config = CatalogConfig(synonyms_path="extra/synonyms.yaml")
    config = CatalogConfig.from_env()              # SPDX_CATALOG_* variables
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

LICENSES_ENV_VAR = "SPDX_CATALOG_LICENSES"
SYNONYMS_ENV_VAR = "SPDX_CATALOG_SYNONYMS"


def _optional_path(value: str | Path | None) -> Path | None:
    if value is None:
        return None
    text = str(value).strip()
    return Path(text) if text else None


@dataclass(frozen=True)
class CatalogConfig:
    """Data sources for a LicenseCatalog.

    Attributes:
        licenses_path: SPDX license-list JSON document.  None means the
            bundled ``licenses.json``.
        synonyms_path: Synonym document, JSON or YAML.  None means the
            bundled ``license-synonyms.json``.
    """

    licenses_path: Path | None = None
    synonyms_path: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "licenses_path", _optional_path(self.licenses_path))
        object.__setattr__(self, "synonyms_path", _optional_path(self.synonyms_path))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CatalogConfig:
        env = os.environ if environ is None else environ
        return cls(
            licenses_path=_optional_path(env.get(LICENSES_ENV_VAR)),
            synonyms_path=_optional_path(env.get(SYNONYMS_ENV_VAR)),
        )
