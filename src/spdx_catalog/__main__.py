"""CLI entry point: python -m spdx_catalog <command>."""

from __future__ import annotations

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="spdx-catalog",
        description="Look up SPDX licenses by id, name or url",
    )
    parser.add_argument("--licenses", default=None, help="Path to an SPDX licenses.json")
    parser.add_argument("--synonyms", default=None, help="Path to a synonym JSON/YAML file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    fd = sub.add_parser("find", help="Resolve a license from id, url and/or name")
    fd.add_argument("--id", default=None, help="SPDX license id (exact)")
    fd.add_argument("--url", default=None, help="License url, protocol optional")
    fd.add_argument("--name", default=None, help="License name (case-insensitive)")
    fd.add_argument("--json", action="store_true", default=False, help="Output as JSON")

    info = sub.add_parser("info", help="Show license list version and index sizes")
    info.add_argument("--json", action="store_true", default=False, help="Output as JSON")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "find":
        from spdx_catalog.cli.lookup import run_find
        run_find(args)
    elif args.command == "info":
        from spdx_catalog.cli.lookup import run_info
        run_info(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
