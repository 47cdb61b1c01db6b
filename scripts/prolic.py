#!/usr/bin/env python3
"""Add Licence and Copyright sections to source file prologues.

Copyright years come from each prologue's History section and are
credited to the funding body of the time, unless --copyright names the
holder. A prologue with no datable History gets the current year (with a
warning).

In-place rewrites are only done for files whose prologues are all in the
modern (STARLSE) layout; anything else is reported and left alone. Run
procvt first to convert legacy prologues.

Usage:
    python3 scripts/prolic.py kpg1_fill.f
    python3 scripts/prolic.py --inplace src/*.c
    python3 scripts/prolic.py --copyright "University of Exeter" --inplace foo.f
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from prologue.fixups import add_copyright, add_licence
from prologue.rewrite import (
    SourceItem,
    prologue_styles,
    prologues,
    read_source,
    render,
    split_source,
    write_source,
)

log = logging.getLogger("prolic")

REWRITABLE_STYLE = "STARLSE"


def licence_items(
    items: list[SourceItem],
    copyright_holder: str | None = None,
) -> bool:
    """Add licence and copyright to every prologue; True if any changed."""
    changed = False
    for prl in prologues(items):
        changed |= add_licence(prl)
        changed |= add_copyright(prl, copyright_holder)
    return changed


def can_rewrite(items: list[SourceItem]) -> bool:
    """True if the file has prologues and all of them are modern."""
    styles = prologue_styles(items)
    return styles == {REWRITABLE_STYLE}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Add Licence and Copyright sections to prologues.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Source files")
    parser.add_argument(
        "--copyright", default=None,
        help="Copyright holder to credit instead of the funding bodies",
    )
    parser.add_argument(
        "--inplace", action="store_true",
        help="Rewrite files in place (modern prologues only)",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    status = 0
    for path in args.files:
        try:
            items = split_source(read_source(path))
        except OSError as exc:
            log.error("Unable to read %s: %s", path, exc)
            status = 1
            continue

        if args.inplace and not can_rewrite(items):
            styles = sorted(str(s) for s in prologue_styles(items))
            log.warning(
                "Not rewriting %s: prologue styles %s",
                path, ", ".join(styles) or "none",
            )
            continue

        changed = licence_items(items, args.copyright)
        text = render(items)
        if not args.inplace:
            sys.stdout.write(text)
        elif changed:
            write_source(path, text)
            log.info("Updated %s", path)
        else:
            log.info("%s already has licence and copyright", path)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
