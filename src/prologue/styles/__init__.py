"""Prologue conventions: start recognizers and per-convention workers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from prologue.document import PrologueStyle
from prologue.styles.adamsse import AdamsseWorker
from prologue.styles.base import PushResult, StyleWorker
from prologue.styles.starlse import StarlseWorker


@dataclass(frozen=True, slots=True)
class StyleVariant:
    """One supported convention: its tag, start test and worker factory."""

    tag: PrologueStyle
    recognizes_start: Callable[[str], bool]
    new_worker: Callable[[], StyleWorker]


# Tried in order; the first convention whose start test passes wins.
STYLE_VARIANTS: tuple[StyleVariant, ...] = (
    StyleVariant("STARLSE", StarlseWorker.recognizes_start, StarlseWorker),
    StyleVariant("ADAMSSE", AdamsseWorker.recognizes_start, AdamsseWorker),
)

__all__ = [
    "STYLE_VARIANTS",
    "AdamsseWorker",
    "PushResult",
    "StarlseWorker",
    "StyleVariant",
    "StyleWorker",
]
