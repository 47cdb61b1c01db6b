"""Worker for the modern (STARLSE) prologue convention.

Layout::

    /*+                  or  *+  /  #+
    *  Name:
    *     FOO
    *
    *     continued paragraph

    *  Invocation:
    *     CALL FOO( A,
    *    :          B )
    *-                   optionally *-*/

Sections open on a header line (marker, a few blanks, ``Name:``). Content
lines carry five blanks of indentation after the marker; an empty input
line separates sections. The ``*-`` line always closes the prologue, so
this worker never needs lookahead.
"""
from __future__ import annotations

import logging
import re

from prologue.styles.base import PushResult, StyleWorker, strip_indent

log = logging.getLogger(__name__)

_START_RE = re.compile(r"^\s*(/)?([*#])\+\s*$")
_HEADER_RE = re.compile(r"^ {1,4}([A-Za-z][\w\- ]*?)\s*:\s*$")
_END_RE = re.compile(r"^-\s*(\*/)?\s*$")


class StarlseWorker(StyleWorker):
    style = "STARLSE"

    def __init__(self) -> None:
        super().__init__()
        self._started = False

    @classmethod
    def recognizes_start(cls, line: str) -> bool:
        return bool(_START_RE.match(line))

    def push_line(self, line: str) -> PushResult:
        if not self._started:
            return self._open(line)

        if not line.strip():
            self._close_section()
            return PushResult()

        body = line.lstrip()
        cchar = self._prologue.comment_char
        if not body.startswith(cchar):
            # stray text inside the block; keep it with the current section
            log.debug("Line without comment marker inside prologue: %r", line)
            self._store(body)
            return PushResult()

        rest = body[len(cchar):]
        end = _END_RE.match(rest)
        if end:
            self._prologue.ends_embedded_comment = end.group(1) is not None
            return PushResult(prologue=self.finalize())

        header = _HEADER_RE.match(rest)
        if header:
            self._start_section(header.group(1))
            return PushResult()

        if not rest.strip():
            self._store("")
        else:
            self._store(strip_indent(rest))
        return PushResult()

    def _open(self, line: str) -> PushResult:
        match = _START_RE.match(line)
        if match is None:
            raise ValueError(f"Not the start of a STARLSE prologue: {line!r}")
        self._started = True
        self._prologue.starts_embedded_comment = match.group(1) is not None
        self._prologue.comment_char = match.group(2)
        return PushResult()

    def _store(self, text: str) -> None:
        if not self.in_section:
            if text.strip():
                log.debug("Discarding prologue text before first section: %r", text)
            return
        self._add_line(text)
