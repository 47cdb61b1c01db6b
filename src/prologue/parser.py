"""Streaming parser that pulls prologues out of source lines.

Which convention a prologue follows is only known once its first line
arrives, so the parser holds at most one active worker and otherwise
asks each convention in turn whether a line opens a prologue.

Typical rewrite loop::

    parser = PrologueParser()
    for raw in lines:
        result = parser.push_line(raw)
        if result.prologue is not None:
            out.write(result.prologue.stringify())
        if result.line is not None:
            out.write(result.line + "\\n")
    trailing = parser.flush()

When only the prologues are wanted, ``push`` returns a single value.
"""
from __future__ import annotations

from prologue.document import Prologue
from prologue.styles import STYLE_VARIANTS, PushResult, StyleWorker


class PrologueParser:
    """Incremental prologue recognizer; one line at a time, no buffering."""

    def __init__(self) -> None:
        self._worker: StyleWorker | None = None

    @property
    def in_prologue(self) -> bool:
        return self._worker is not None

    def push_line(self, line: str) -> PushResult:
        """Feed one line; returns the pass-through line and/or a prologue.

        The returned line never has a trailing newline. Both fields are set
        when a prologue ends by lookahead on an ordinary code line.
        """
        line = line.rstrip("\r\n")

        if self._worker is not None:
            result = self._worker.push_line(line)
            if result.prologue is not None:
                self._worker = None
            return result

        for variant in STYLE_VARIANTS:
            if variant.recognizes_start(line):
                self._worker = variant.new_worker()
                return self._worker.push_line(line)
        return PushResult(line=line)

    def push(self, line: str) -> str | Prologue | None:
        """Single-value form of ``push_line``: a prologue wins over a line.

        Returns the line when it is ordinary text, None while inside a
        prologue, and the ``Prologue`` on the line that completes one.
        """
        return self.push_line(line).value

    def flush(self) -> Prologue | None:
        """Signal end of input; return any prologue still in progress.

        The prologue is returned in whatever state it reached. The parser is
        reset and can be reused for new input.
        """
        worker = self._worker
        if worker is None:
            return None
        self._worker = None
        return worker.finalize()
