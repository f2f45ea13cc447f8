"""
Command line entry point.

Run with:  nativeid [--appid TAG]   (or python -m nativeid)
Prints the machine id, or the app-scoped protected id, and exits non-zero
on any lookup or configuration error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from .config import ConfigError, load_log_level
from .errors import MachineIDError
from .machine import machine_id, protected_id
from .version import APP_NAME, APP_VERSION

logger = logging.getLogger("nativeid.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Print the OS-native machine id or an app-scoped protected id.",
    )
    parser.add_argument(
        "--appid",
        metavar="TAG",
        help="print the id protected with this application tag instead of the raw id",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log each source attempt to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    try:
        log_level = load_log_level()
    except ConfigError as exc:
        print(f"{APP_NAME}: {exc}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else log_level
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")

    try:
        if args.appid is not None:
            value = protected_id(args.appid)
        else:
            value = machine_id()
    except MachineIDError as exc:
        logger.debug("Lookup failed", exc_info=True)
        print(f"{APP_NAME}: {exc}", file=sys.stderr)
        return 1

    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
