"""Shared contract and section accumulation for prologue style workers."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from prologue.catalog import normalize_section_name
from prologue.document import Prologue, PrologueStyle, trim_blank_edges


@dataclass(frozen=True, slots=True)
class PushResult:
    """Outcome of feeding one line to a parser or worker.

    ``line`` is ordinary source text to pass through to the caller.
    ``prologue`` is set on the call that completes a prologue. Both are set
    when a prologue is only known to have ended because a code line
    arrived; that line still has to be written out after the prologue.
    """

    line: str | None = None
    prologue: Prologue | None = None

    @property
    def value(self) -> str | Prologue | None:
        """Single-value view: a completed prologue wins over a line."""
        if self.prologue is not None:
            return self.prologue
        return self.line


class StyleWorker(ABC):
    """Accumulates sections for one prologue of one convention.

    Subclasses implement ``recognizes_start`` and ``push_line``. A worker
    is single use: once it has returned a prologue it must be discarded.
    """

    style: PrologueStyle

    def __init__(self) -> None:
        self._prologue = Prologue(style=self.style)
        self._current: str | None = None
        self._buffer: list[str] = []
        self._sections: list[tuple[str, list[str]]] = []

    @classmethod
    @abstractmethod
    def recognizes_start(cls, line: str) -> bool:
        """True if ``line`` opens a prologue in this convention."""

    @abstractmethod
    def push_line(self, line: str) -> PushResult:
        """Consume one line of the prologue."""

    def finalize(self) -> Prologue:
        """Close the open section and build the prologue from what was seen."""
        self._close_section()
        for name, lines in self._sections:
            existing = self._prologue.content(name)
            if existing:
                lines = existing + [""] + lines
            self._prologue.content(name, lines)
        self._sections = []
        return self._prologue

    # ------------------------------------------------------------------
    # Accumulation helpers
    # ------------------------------------------------------------------

    @property
    def in_section(self) -> bool:
        return self._current is not None

    def _start_section(self, name: str) -> None:
        self._close_section()
        self._current = normalize_section_name(name)

    def _add_line(self, text: str) -> None:
        self._buffer.append(text)

    def _close_section(self) -> None:
        if self._current is None:
            return
        lines = trim_blank_edges(self._buffer)
        if lines:
            self._sections.append((self._current, lines))
        self._current = None
        self._buffer = []


def strip_indent(text: str, width: int = 5) -> str:
    """Remove up to ``width`` leading blanks (the content indentation)."""
    n = 0
    while n < width and n < len(text) and text[n] == " ":
        n += 1
    return text[n:]
