#!/usr/bin/env python3
"""List the prologues found in source files.

For each prologue prints the file, the convention it was written in, its
name and the sections present.

Usage:
    python3 scripts/prolis.py kpg1_fill.f ndf_*.f
    python3 scripts/prolis.py --json src/*.c > prologues.json

Listings go to stdout; messages go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import orjson

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from prologue.document import Prologue
from prologue.rewrite import prologues, read_source, split_source

log = logging.getLogger("prolis")


def describe(prl: Prologue, path: Path) -> dict[str, Any]:
    """Summary record for one prologue."""
    name = prl.content("Name")
    return {
        "file": str(path),
        "style": prl.style,
        "name": name[0] if name else None,
        "sections": prl.sections(),
        "misc_sections": prl.misc_sections(),
        "adam_task": prl.is_adam_task(),
        "years": prl.years(),
    }


def format_record(record: dict[str, Any]) -> str:
    lines = [
        f"{record['file']}: {record['name'] or '<unnamed>'} ({record['style']})",
    ]
    for section in record["sections"]:
        lines.append(f"    {section}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="List prologues and their sections.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Source files")
    parser.add_argument(
        "--json", action="store_true",
        help="Print machine-readable JSON records",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    status = 0
    records: list[dict[str, Any]] = []
    for path in args.files:
        try:
            lines = read_source(path)
        except OSError as exc:
            log.error("Unable to read %s: %s", path, exc)
            status = 1
            continue
        found = prologues(split_source(lines))
        if not found:
            log.info("No prologue found in %s", path)
        records.extend(describe(prl, path) for prl in found)

    if args.json:
        sys.stdout.buffer.write(orjson.dumps(records, option=orjson.OPT_INDENT_2))
        sys.stdout.buffer.write(b"\n")
        sys.stdout.flush()
    else:
        for record in records:
            print(format_record(record))
    return status


if __name__ == "__main__":
    raise SystemExit(main())
