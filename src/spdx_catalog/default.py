"""Process-wide shared catalog, built lazily on first use.

Passing a LicenseCatalog around explicitly is preferred.  This holder is
for callers that need one well-known instance, such as the CLI.  The
catalog is built at most once under a lock; ``reset_default_catalog``
drops the reference so the next call builds a fresh, independent
instance.  Existing holders of the old instance are unaffected.
"""

from __future__ import annotations

import logging
import threading

from spdx_catalog.config import CatalogConfig
from spdx_catalog.index import LicenseCatalog
from spdx_catalog.loader import load_catalog

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_catalog: LicenseCatalog | None = None


def get_default_catalog(config: CatalogConfig | None = None) -> LicenseCatalog:
    """Return the shared catalog, building it on first call.

    ``config`` is only consulted when the catalog is built; it defaults
    to ``CatalogConfig.from_env()``.  If building fails, nothing is cached
    and the error propagates.
    """
    global _catalog
    catalog = _catalog
    if catalog is not None:
        return catalog
    with _lock:
        if _catalog is None:
            config = config if config is not None else CatalogConfig.from_env()
            _catalog = load_catalog(config.licenses_path, config.synonyms_path)
            logger.info("Initialized default license catalog: %r", _catalog)
        return _catalog


def reset_default_catalog() -> None:
    global _catalog
    with _lock:
        _catalog = None
