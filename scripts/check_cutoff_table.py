#!/usr/bin/env python
"""Validate an ASQ-3 cutoff table before deploying it.

Usage:
    python scripts/check_cutoff_table.py asq3-cutoffs-v1.0.0.yaml
    python scripts/check_cutoff_table.py my-table.yaml --tables-dir /etc/ecd/cutoffs

Prints the table version, hash and curated intervals, and lists the
intervals that would be scored against the default row. Exits non-zero if
the table can't be loaded.
"""

import argparse
import sys
from pathlib import Path

from app.scoring.loader import CUTOFF_TABLES_DIR, CutoffTableError, load_cutoff_table
from app.scoring.models import ASQ_INTERVALS


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the cutoff table checker."""
    parser = argparse.ArgumentParser(description="Validate an ASQ-3 cutoff table")
    parser.add_argument("filename", help="Cutoff table YAML file name")
    parser.add_argument(
        "--tables-dir",
        type=Path,
        default=CUTOFF_TABLES_DIR,
        help="Directory containing cutoff tables",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if any interval falls back to the default row",
    )

    args = parser.parse_args(argv)

    try:
        table = load_cutoff_table(args.filename, args.tables_dir)
    except (FileNotFoundError, CutoffTableError) as exc:
        print(f"INVALID: {exc}", file=sys.stderr)
        return 1

    uncurated = [i for i in ASQ_INTERVALS if not table.is_curated(i)]

    print(f"Table:     {args.filename}")
    print(f"Version:   {table.version}")
    print(f"SHA256:    {table.content_hash}")
    print(f"Curated:   {', '.join(map(str, table.curated_intervals)) or 'none'}")
    print(f"Default:   {', '.join(map(str, uncurated)) or 'none'}")

    if args.strict and uncurated:
        print(f"INCOMPLETE: {len(uncurated)} intervals use default thresholds", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
