#!/usr/bin/env python3
"""
Generate the pipeline function reference partials.

Usage:
    python -m mkdocs_funcref.generate
    python -m mkdocs_funcref.generate --output docs/partials/functions
    python -m mkdocs_funcref.generate --dry-run --verbose
"""

import argparse
import logging
import sys

from .catalog import FUNCTIONS
from .generator import generate
from .naming import DEFAULT_PARTIALS_DIR
from .writer import FragmentWriter, FuncRefError


def main(argv=None):
    p = argparse.ArgumentParser(description="Generate pipeline function reference partials")
    p.add_argument(
        "--output",
        default=DEFAULT_PARTIALS_DIR,
        help=f"Partials directory (default: {DEFAULT_PARTIALS_DIR})",
    )
    p.add_argument(
        "--dry-run", action="store_true", help="List the partials without writing them"
    )
    p.add_argument("--verbose", action="store_true", help="Log every written partial")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s"
    )

    writer = FragmentWriter(dry_run=args.dry_run)
    try:
        result = generate(FUNCTIONS, args.output, writer)
    except FuncRefError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    tag = "[dry-run] " if args.dry_run else ""
    for path in result.files:
        print(f"{tag}{path}")
    print(f"\n{len(result.files)} partials {'would be ' if args.dry_run else ''}written")
    return 0


if __name__ == "__main__":
    sys.exit(main())
