"""Section catalog for Starlink source prologues.

Fixed, ordered list of the standard prologue sections plus the read-only
lookup tables that drive serialization:

- ``DEFAULTS``: placeholder written when a section is empty and the
  prologue asks for defaults.
- ``TERMINATORS``: placeholder appended to open-ended lists
  (History, Bugs, Authors) so that new entries have somewhere to go.
- ``ALIASES``: alternate spellings accepted in place of a standard name.

Section names are always stored in normalized form, see
``normalize_section_name``.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# Slot in the catalog where non-standard sections are inserted (sorted).
MISCELLANEOUS = "__MISCELLANEOUS__PLACEHOLDER__"

STANDARD_SECTIONS: tuple[str, ...] = (
    "Name",
    "Purpose",
    "Language",
    "Type of Module",
    "Invocation",
    "Synopsis",
    "Description",
    "Arguments",
    "Usage",
    "Parameters",
    "ADAM Parameters",
    "Returned Value",
    "Examples",
    "Notes",
    "Algorithm",
    "References",
    "Related Applications",
    "Implementation Status",
    "Implementation Deficiencies",
    MISCELLANEOUS,
    "Copyright",
    "Licence",
    "Authors",
    "History",
    "Bugs",
)

DEFAULTS: Mapping[str, str] = MappingProxyType({
    "Bugs": "{note_any_bugs_here}",
    "History": "{enter_changes_here}",
    "Authors": "{original_author_entry}",
    "Language": "{routine_language}",
})

TERMINATORS: Mapping[str, str] = MappingProxyType({
    "Bugs": "{note_new_bugs_here}",
    "History": "{enter_further_changes_here}",
    "Authors": "{enter_new_authors_here}",
})

ALIASES: Mapping[str, str] = MappingProxyType({
    "Authors": "Author",
    "Licence": "License",
})

# Attribute-style convenience accessors (``prl.type_of_module``) mapped to
# the catalog name they read.
ACCESSOR_NAMES: Mapping[str, str] = MappingProxyType({
    name.lower().replace(" ", "_"): name
    for name in STANDARD_SECTIONS
    if name != MISCELLANEOUS
})

_UPPER_WORD_RE = re.compile(r"^[A-Z_]+$")
_PLACEHOLDER_RE = re.compile(r"^\s*\{[\w_]+\}\s*$")


def normalize_section_name(name: str | None) -> str:
    """Return the canonical spelling of a section name.

    Words that are entirely upper case (``ADAM``) are left alone, ``of``
    is always lower case, everything else is capitalised. Whitespace is
    collapsed to single blanks. Idempotent.

    Raises:
        ValueError: ``name`` is None or blank.
    """
    if name is None:
        raise ValueError("Section name is not defined")
    parts = name.split()
    if not parts:
        raise ValueError(f"Section name is empty: {name!r}")
    words: list[str] = []
    for word in parts:
        if _UPPER_WORD_RE.match(word):
            words.append(word)
        elif word.lower() == "of":
            words.append("of")
        else:
            words.append(word.lower().capitalize())
    return " ".join(words)


def is_placeholder(line: str) -> bool:
    """True if ``line`` is a bare ``{placeholder_token}``."""
    return bool(_PLACEHOLDER_RE.match(line))


def standard_names() -> frozenset[str]:
    """Normalized catalog names and alias targets (no miscellaneous slot)."""
    names = [n for n in STANDARD_SECTIONS if n != MISCELLANEOUS]
    names.extend(ALIASES.values())
    return frozenset(normalize_section_name(n) for n in names)
