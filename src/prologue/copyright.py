"""Build Copyright section text from the years a file was worked on.

Starlink code changed hands between funding bodies over its lifetime, so
years are bucketed by the body that held copyright at the time and each
bucket gets its own sentence::

    Copyright (C) 1993-1994 Science & Engineering Research Council.
    Copyright (C) 1995 Central Laboratory of the Research Councils.
    Copyright (C) 2008 Science & Technology Facilities Council. All
    Rights Reserved.

Callers must supply at least one year; nothing here invents one.
"""
from __future__ import annotations

import re
import textwrap
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

COPYRIGHT_WIDTH = 66


@dataclass(frozen=True, slots=True)
class FundingBody:
    """Copyright holder for an inclusive range of years (None = open ended)."""

    label: str
    first_year: int | None = None
    last_year: int | None = None

    def holds(self, year: int) -> bool:
        if self.first_year is not None and year < self.first_year:
            return False
        if self.last_year is not None and year > self.last_year:
            return False
        return True


DEFAULT_FUNDING_BODIES: tuple[FundingBody, ...] = (
    FundingBody("Science & Engineering Research Council", None, 1994),
    FundingBody("Central Laboratory of the Research Councils", 1995, 2004),
    FundingBody("Particle Physics & Astronomy Research Council", 2005, 2006),
    FundingBody("Science & Technology Facilities Council", 2007, None),
)


def compress_years(years: Iterable[int]) -> list[str]:
    """Collapse strictly increasing years into ranges.

    ``[1990, 1991, 1992, 1995]`` -> ``["1990-1992", "1995"]``.
    """
    ranges: list[str] = []
    start: int | None = None
    prev: int | None = None
    for year in years:
        if start is None or prev is None:
            start = prev = year
            continue
        if year - prev > 1:
            ranges.append(_format_range(start, prev))
            start = year
        prev = year
    if start is not None and prev is not None:
        ranges.append(_format_range(start, prev))
    return ranges


def _format_range(start: int, end: int) -> str:
    if end > start:
        return f"{start}-{end}"
    return str(start)


def _sentence(years: Sequence[int], holder: str) -> str:
    return f"Copyright (C) {','.join(compress_years(years))} {holder}."


def assemble_copyright(
    years: Sequence[int],
    bodies: Sequence[FundingBody] = DEFAULT_FUNDING_BODIES,
    *,
    override: str | None = None,
    width: int = COPYRIGHT_WIDTH,
) -> list[str]:
    """Return wrapped Copyright section lines for sorted, distinct ``years``.

    Args:
        years: Strictly increasing years.
        bodies: Funding bodies in order; each year goes to the first body
            that holds it.
        override: Copyright holder to credit for every year instead of the
            funding bodies.
        width: Wrap column.

    Returns:
        Lines of text, empty if ``years`` is empty.
    """
    sentences: list[str] = []
    if override is not None:
        if years:
            sentences.append(_sentence(years, override.strip()))
    else:
        buckets: dict[str, list[int]] = {body.label: [] for body in bodies}
        for year in years:
            for body in bodies:
                if body.holds(year):
                    buckets[body.label].append(year)
                    break
        for body in bodies:
            if buckets[body.label]:
                sentences.append(_sentence(buckets[body.label], body.label))

    if not sentences:
        return []
    sentences.append("All Rights Reserved.")
    text = re.sub(r"\s+", " ", " ".join(sentences)).strip()
    return textwrap.wrap(text, width=width, break_on_hyphens=False)
