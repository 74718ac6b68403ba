"""CLI handlers for ``spdx-catalog find`` and ``spdx-catalog info``."""

from __future__ import annotations

import sys
from argparse import Namespace
from dataclasses import replace

from spdx_catalog.config import CatalogConfig
from spdx_catalog.default import get_default_catalog
from spdx_catalog.errors import CatalogConfigurationError
from spdx_catalog.index import LicenseCatalog
from spdx_catalog.models import LicenseQuery
from spdx_catalog.report import (
    format_info_json,
    format_info_table,
    format_license_json,
    format_license_table,
)

EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2


def _config(args: Namespace) -> CatalogConfig:
    """Environment settings, overridden by --licenses and --synonyms."""
    config = CatalogConfig.from_env()
    if args.licenses:
        config = replace(config, licenses_path=args.licenses)
    if args.synonyms:
        config = replace(config, synonyms_path=args.synonyms)
    return config


def _load(args: Namespace) -> LicenseCatalog:
    try:
        return get_default_catalog(_config(args))
    except (CatalogConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)


def run_find(args: Namespace) -> None:
    if args.id is None and args.url is None and args.name is None:
        print("Error: pass at least one of --id, --url or --name", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    catalog = _load(args)
    query = LicenseQuery(id=args.id, url=args.url, name=args.name)
    lic = catalog.find_license(query)
    if lic is None:
        print("No matching license found.", file=sys.stderr)
        sys.exit(EXIT_NOT_FOUND)

    if args.json:
        print(format_license_json(lic))
    else:
        print(format_license_table(lic))


def run_info(args: Namespace) -> None:
    catalog = _load(args)
    if args.json:
        print(format_info_json(catalog))
    else:
        print(format_info_table(catalog))
