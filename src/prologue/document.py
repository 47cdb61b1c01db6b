"""In-memory model of a single source prologue.

A ``Prologue`` holds normalized section content and knows how to write
itself back out as a canonical Starlink prologue::

    *+
    *  Name:
    *     FOO

    *  Purpose:
    *     Do something useful.

    *-

Section order on output comes from the catalog (``catalog.STANDARD_SECTIONS``),
never from the order content was added. Non-standard sections are written,
sorted, at the catalog's miscellaneous slot.

The simplest way to get one is ``prologue.parser.PrologueParser``.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from prologue.catalog import (
    ACCESSOR_NAMES,
    ALIASES,
    DEFAULTS,
    MISCELLANEOUS,
    STANDARD_SECTIONS,
    TERMINATORS,
    is_placeholder,
    normalize_section_name,
    standard_names,
)
from prologue.languages import language_for, type_of_module_for

log = logging.getLogger(__name__)

PrologueStyle: TypeAlias = Literal["STARLSE", "ADAMSSE"]

_YEAR_RE = re.compile(r"(\d\d\d\d)")
# dd.mm.yy or dd/mm/yy
_SHORT_DATE_RE = re.compile(r"\d+[/.]\d+[/.](\d\d)")

_EMBEDDED_OPEN = "/*"
_EMBEDDED_CLOSE = "*/"


def trim_blank_edges(lines: Sequence[str]) -> list[str]:
    """Drop blank lines from both ends; a prologue section never starts or ends blank."""
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return list(lines[start:end])


@dataclass(slots=True)
class Prologue:
    """A Starlink source code prologue.

    Attributes:
        comment_char: Prefix for every emitted line, usually ``*`` or ``#``.
        starts_embedded_comment: Prologue opened together with a C comment
            (``/*+``); ``/*`` is written before the open marker.
        ends_embedded_comment: Prologue closed together with the C comment;
            ``*/`` is written after the close marker.
        style: Convention the prologue was parsed from. None when built by hand.
        write_defaults: Write placeholder content for empty sections that
            have a registered default (Bugs, History, Authors, Language).
    """

    comment_char: str = "*"
    starts_embedded_comment: bool = False
    ends_embedded_comment: bool = False
    style: PrologueStyle | None = None
    write_defaults: bool = False
    _content: dict[str, list[str]] = field(default_factory=dict, repr=False)

    # ------------------------------------------------------------------
    # Section access
    # ------------------------------------------------------------------

    def content(self, name: str, lines: Sequence[str] | None = None) -> list[str]:
        """Read or replace the lines of a section.

        ``prl.content("Description")`` returns a copy of the stored lines
        (empty when the section is absent). ``prl.content("Description",
        lines)`` replaces them; an empty sequence removes the section.
        Comment characters must already be stripped. Aliases are not
        resolved here, see ``has_section``.
        """
        key = normalize_section_name(name)
        if lines is None:
            return list(self._content.get(key, ()))
        if isinstance(lines, str):
            raise TypeError("lines must be a sequence of strings, not a str")
        stored = [line.rstrip("\r\n") for line in lines]
        if stored:
            self._content[key] = stored
        else:
            self._content.pop(key, None)
        return list(stored)

    def section(self, name: str) -> tuple[str, list[str]]:
        """Return ``(resolved_name, lines)``, resolving aliases."""
        resolved = self.has_section(name)
        if resolved is None:
            return normalize_section_name(name), []
        return resolved, self.content(resolved)

    def del_section(self, name: str) -> None:
        """Remove a section if present; unknown names are ignored."""
        self._content.pop(normalize_section_name(name), None)

    def sections(self) -> list[str]:
        """All populated section names, sorted."""
        return sorted(self._content)

    def misc_sections(self) -> list[str]:
        """Populated sections that are not in the standard catalog, sorted."""
        standard = standard_names()
        return [name for name in self.sections() if name not in standard]

    def has_section(self, name: str) -> str | None:
        """Return the populated name for ``name`` or its alias, else None.

        ``has_section("Authors")`` returns ``"Author"`` when only the alias
        spelling is present. If both spellings are populated the literal
        name wins and a warning is logged.
        """
        key = normalize_section_name(name)
        alias = ALIASES.get(key)
        has_primary = key in self._content
        has_alias = alias is not None and alias in self._content
        if has_primary and has_alias:
            log.warning("Both section (%s) and alias (%s) exist", key, alias)
            return key
        if has_primary:
            return key
        if has_alias:
            return alias
        return None

    def __getattr__(self, attr: str) -> list[str]:
        # prl.description, prl.type_of_module, prl.adam_parameters, ...
        name = ACCESSOR_NAMES.get(attr)
        if name is None:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {attr!r}",
            )
        return self.content(name)

    # ------------------------------------------------------------------
    # Derived information
    # ------------------------------------------------------------------

    def years(self) -> list[int]:
        """Years mentioned in the History section, sorted and distinct.

        Each line contributes the first four digit run, or failing that
        the two digit year of a ``dd.mm.yy`` / ``dd/mm/yy`` date
        (``> 50`` is 19xx, otherwise 20xx).
        """
        found: set[int] = set()
        for line in self.content("History"):
            match = _YEAR_RE.search(line)
            if match:
                found.add(int(match.group(1)))
                continue
            match = _SHORT_DATE_RE.search(line)
            if match:
                year = int(match.group(1))
                found.add(year + 1900 if year > 50 else year + 2000)
        return sorted(found)

    def is_adam_task(self) -> bool:
        """True for ADAM A-tasks (ADAM Parameters present or Type of Module ADAM)."""
        if self.content("ADAM Parameters"):
            return True
        return any("ADAM" in line for line in self.content("Type of Module"))

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def guess_defaults(self, *, file: str | None = None) -> None:
        """Fill empty Language / Type of Module sections from a filename hint."""
        if file is None:
            return
        if not self.content("Language"):
            language = language_for(file)
            if language is not None:
                self.content("Language", [language])
        if not self.content("Type of Module"):
            module_type = type_of_module_for(file)
            if module_type is not None:
                self.content("Type of Module", [module_type])

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def output_order(self) -> list[str]:
        """Section names in the order ``stringify`` considers them."""
        order: list[str] = []
        for name in STANDARD_SECTIONS:
            if name == MISCELLANEOUS:
                order.extend(self.misc_sections())
            else:
                order.append(name)

        if not self.is_adam_task():
            return order

        # A-tasks document Arguments before Description
        reordered: list[str] = []
        seen_description = False
        seen_arguments = False
        for name in order:
            if name == "Description" and not seen_arguments:
                reordered.append("Arguments")
                seen_description = True
            elif name == "Arguments":
                seen_arguments = True
                if seen_description:
                    continue
            reordered.append(name)
        return reordered

    def stringify(self) -> str:
        """Render the prologue as canonical source text (newline terminated)."""
        cchar = self.comment_char
        out: list[str] = []
        if self.starts_embedded_comment:
            out.append(_EMBEDDED_OPEN)
        out.append(f"{cchar}+")

        for name in self.output_order():
            section = self.has_section(name)
            lines = trim_blank_edges(self.content(section)) if section is not None else []

            if not lines and self.write_defaults and name in DEFAULTS:
                section = name
                lines = [DEFAULTS[name]]
            if not lines or section is None:
                continue

            out.append(f"{cchar}  {section}:")
            if name in TERMINATORS and not is_placeholder(lines[-1]):
                lines.append(TERMINATORS[name])

            for line in lines:
                if not line.strip():
                    out.append(cchar)
                elif section == "Invocation" and line.startswith(":"):
                    # Fortran continuation marker sits one column left
                    out.append(f"{cchar}    {line}")
                else:
                    out.append(f"{cchar}     {line}")
            out.append("")

        out.append(f"{cchar}-")
        if self.ends_embedded_comment:
            out.append(_EMBEDDED_CLOSE)
        return "\n".join(out) + "\n"
