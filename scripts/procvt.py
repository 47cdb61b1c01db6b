#!/usr/bin/env python3
"""Convert source file prologues to the modern Starlink layout.

Every prologue found (modern or legacy ADAM/SSE) is re-emitted in
canonical form; code lines pass through untouched. Language and Type of
Module are guessed from the filename when missing.

Usage:
    python3 scripts/procvt.py kpg1_fill.f
    python3 scripts/procvt.py --no-defaults --output new.f old.f
    python3 scripts/procvt.py *.f > converted.txt

Converted source goes to stdout (or --output); messages go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from prologue.fixups import modernise
from prologue.rewrite import (
    prologues,
    read_source,
    render,
    split_source,
    write_source,
)

log = logging.getLogger("procvt")


def convert_file(path: Path, *, write_defaults: bool = True) -> str | None:
    """Return the converted text of ``path``, or None if it has no prologue."""
    items = split_source(read_source(path))
    found = prologues(items)
    if not found:
        return None
    for prl in found:
        modernise(prl, file=path.name, write_defaults=write_defaults)
    return render(items)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert source prologues to the modern Starlink layout.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Source files")
    parser.add_argument(
        "--output", type=Path, default=None,
        help="Write the converted file here (single input only)",
    )
    parser.add_argument(
        "--no-defaults", dest="defaults", action="store_false",
        help="Do not write placeholder text for empty standard sections",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if args.output is not None and len(args.files) != 1:
        parser.error("--output requires exactly one input file")

    status = 0
    for path in args.files:
        try:
            text = convert_file(path, write_defaults=args.defaults)
        except OSError as exc:
            log.error("Unable to read %s: %s", path, exc)
            status = 1
            continue

        if text is None:
            log.warning("No prologue found in %s", path)
            text = render(read_source(path))

        if args.output is not None:
            write_source(args.output, text)
            log.info("Wrote %s", args.output)
        else:
            sys.stdout.write(text)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
