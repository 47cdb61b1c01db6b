"""Whole-file helpers: split source into lines and prologues, join back."""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TypeAlias

from prologue.document import Prologue, PrologueStyle
from prologue.parser import PrologueParser

SourceItem: TypeAlias = str | Prologue


def read_source(path: Path) -> list[str]:
    """Read a source file as lines without newlines.

    Undecodable bytes survive via ``surrogateescape``; write the result
    back with ``write_source``. Only newlines split lines, so form feeds
    and other control characters stay inside the line they belong to.
    """
    text = path.read_text(encoding="utf-8", errors="surrogateescape")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_source(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8", errors="surrogateescape")


def split_source(lines: Iterable[str]) -> list[SourceItem]:
    """Run the parser over ``lines`` and interleave ordinary lines and prologues.

    A line that ended a prologue by lookahead is placed after that prologue.
    A prologue still open at the end of input is flushed and appended.
    """
    parser = PrologueParser()
    items: list[SourceItem] = []
    for line in lines:
        result = parser.push_line(line)
        if result.prologue is not None:
            items.append(result.prologue)
        if result.line is not None:
            items.append(result.line)
    trailing = parser.flush()
    if trailing is not None:
        items.append(trailing)
    return items


def prologues(items: Iterable[SourceItem]) -> list[Prologue]:
    return [item for item in items if isinstance(item, Prologue)]


def prologue_styles(items: Iterable[SourceItem]) -> set[PrologueStyle | None]:
    """Styles of every prologue in ``items``."""
    return {prl.style for prl in prologues(items)}


def render(items: Iterable[SourceItem]) -> str:
    """Reassemble source text; prologues are stringified in place."""
    chunks: list[str] = []
    for item in items:
        if isinstance(item, Prologue):
            chunks.append(item.stringify())
        else:
            chunks.append(item + "\n")
    return "".join(chunks)
