"""Editing operations applied to parsed prologues before they are rewritten."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from prologue.copyright import assemble_copyright
from prologue.document import Prologue
from prologue.licences import GPL_LICENCE

log = logging.getLogger(__name__)


def add_licence(prl: Prologue, lines: Sequence[str] = GPL_LICENCE) -> bool:
    """Fill the Licence section unless one (or a License section) exists.

    Returns True if the prologue was modified.
    """
    if prl.has_section("Licence") is not None:
        return False
    prl.content("Licence", lines)
    return True


def add_copyright(
    prl: Prologue,
    override: str | None = None,
    *,
    now: date | None = None,
) -> bool:
    """Fill the Copyright section from the History years.

    With no datable History entries the current year is used and a warning
    is logged. Returns True if the prologue was modified.
    """
    if prl.has_section("Copyright") is not None:
        return False
    years = prl.years()
    if not years:
        year = (now or date.today()).year
        name = prl.content("Name")
        log.warning(
            "No years found in History of %s, using %d",
            name[0] if name else "prologue", year,
        )
        years = [year]
    prl.content("Copyright", assemble_copyright(years, override=override))
    return True


def modernise(
    prl: Prologue,
    *,
    file: str | None = None,
    write_defaults: bool = True,
) -> Prologue:
    """Prepare a parsed prologue for output in the modern layout.

    Guesses Language / Type of Module from ``file`` and sets whether
    default placeholders are written. The parsed style tag is left
    untouched.
    """
    prl.guess_defaults(file=file)
    prl.write_defaults = write_defaults
    return prl
