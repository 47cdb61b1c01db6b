"""Worker for the legacy ADAM/SSE prologue convention.

Layout::

    *+  FOO - Does something useful
          SUBROUTINE FOO( STATUS )
    *    Description :
    *     Text of the description.
    *    Authors :
    *     Malcolm Currie RAL (MJC)
    *    History :
    *     1988 Jun 14: Original version (MJC)
    *    endhistory
    *    Type Definitions :
          IMPLICIT NONE

The name and purpose share the opening line. There is no closing marker:
the prologue ends at the first line of code after the documentation (or
at a declaration heading such as ``Type Definitions :``), so the worker
only learns it is done when it is handed a line that does not belong to
it. That line is returned together with the prologue.

Code lines seen before the first section heading (the ``SUBROUTINE``
statement above) are passed through while the prologue stays open.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from prologue.catalog import normalize_section_name
from prologue.styles.base import PushResult, StyleWorker, strip_indent

_START_RE = re.compile(r"^\s*([*#])\+\s+(\S+)\s+-\s+(.*\S)\s*$")
_HEADER_RE = re.compile(r"^ {1,4}([A-Za-z][\w\- ]*?)\s*:\s*(.*)$")
_END_RE = re.compile(r"^-\s*$")
_ENDHISTORY_RE = re.compile(r"^\s*endhistory\s*$", re.IGNORECASE)

# Header names are limited to a few words so that ordinary sentences
# containing a colon are not mistaken for headings.
_MAX_HEADER_WORDS = 4

# Legacy section names and their modern equivalents.
RENAMES: Mapping[str, str] = MappingProxyType({
    "Method": "Algorithm",
    "Deficiencies": "Implementation Deficiencies",
    "Author": "Authors",
})

# Headings that introduce code declarations rather than documentation.
DECLARATION_HEADINGS: frozenset[str] = frozenset(
    normalize_section_name(name)
    for name in (
        "Type Definitions",
        "Global constants",
        "Global variables",
        "Import",
        "Export",
        "Import-Export",
        "Status",
        "Local constants",
        "Local variables",
        "Local data",
        "Internal References",
        "External references",
    )
)


class AdamsseWorker(StyleWorker):
    style = "ADAMSSE"

    def __init__(self) -> None:
        super().__init__()
        self._started = False
        self._seen_header = False

    @classmethod
    def recognizes_start(cls, line: str) -> bool:
        return bool(_START_RE.match(line))

    def push_line(self, line: str) -> PushResult:
        if not self._started:
            return self._open(line)

        cchar = self._prologue.comment_char
        if not line.startswith(cchar):
            if self._seen_header:
                return PushResult(line=line, prologue=self.finalize())
            return PushResult(line=line)

        rest = line[len(cchar):]
        if _END_RE.match(rest):
            return PushResult(prologue=self.finalize())
        if _ENDHISTORY_RE.match(rest):
            return PushResult()

        header = _HEADER_RE.match(rest)
        if header and len(header.group(1).split()) <= _MAX_HEADER_WORDS:
            name = normalize_section_name(header.group(1))
            if name in DECLARATION_HEADINGS:
                return PushResult(line=line, prologue=self.finalize())
            self._seen_header = True
            self._start_section(RENAMES.get(name, name))
            trailing = header.group(2).rstrip()
            if trailing:
                self._add_line(trailing)
            return PushResult()

        if self.in_section:
            self._add_line("" if not rest.strip() else strip_indent(rest))
        return PushResult()

    def _open(self, line: str) -> PushResult:
        match = _START_RE.match(line)
        if match is None:
            raise ValueError(f"Not the start of an ADAM/SSE prologue: {line!r}")
        self._started = True
        self._prologue.comment_char = match.group(1)
        self._prologue.content("Name", [match.group(2)])
        # comment lines before the first heading continue the purpose
        self._start_section("Purpose")
        self._add_line(match.group(3))
        return PushResult()
