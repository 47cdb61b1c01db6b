"""Filename heuristics for guessing a prologue's Language and Type of Module.

Suffix lookup first. Files without a suffix fall back to Starlink naming
conventions (``SAE_PAR``, ``foo_link_adam``, ``Makefile``).
"""
from __future__ import annotations

import re
from pathlib import PurePath

# Exact-case suffix table; ``f``/``for`` are matched case-insensitively.
_SUFFIX_LANGUAGES: dict[str, str] = {
    "pl": "Perl",
    "pm": "Perl",
    "t": "Perl Test",
    "c": "Starlink C",
    "h": "Starlink C",
    "C": "Starlink C++",
    "cc": "Starlink C++",
    "sh": "Bourne shell",
    "csh": "C-shell",
    "tcl": "TCL",
    "py": "Python",
    "awk": "AWK",
    "icl": "ICL",
}

_FORTRAN = "Starlink Fortran 77"

_INCLUDE_RE = re.compile(r"_(ERR|SYS|CMN|PAR)$", re.IGNORECASE)
_LINK_RE = re.compile(r"_link(_adam)?$")
_COMMON_RE = re.compile(r"_CMN$", re.IGNORECASE)
_FORTRAN_INCLUDE_RE = re.compile(r"_(ERR|PAR|SYS)$", re.IGNORECASE)


def _basename(file: str) -> str:
    name = PurePath(file).name
    # autotools templates are named after the file they generate
    if name.endswith(".in"):
        name = name[:-3]
    return name


def language_for(file: str) -> str | None:
    """Guess the implementation language from a filename, or None."""
    name = _basename(file)
    if "." in name:
        suffix = name.rsplit(".", 1)[1]
        if suffix.lower() in ("f", "for"):
            return _FORTRAN
        return _SUFFIX_LANGUAGES.get(suffix)

    if _INCLUDE_RE.search(name):
        return _FORTRAN
    if _LINK_RE.search(name):
        return "Bourne Shell"
    if name.startswith("Makefile"):
        return "Makefile"
    return None


def type_of_module_for(file: str) -> str | None:
    """Guess "Type of Module" for Fortran include files, or None."""
    name = _basename(file)
    if _COMMON_RE.search(name):
        return "COMMON BLOCK"
    if _FORTRAN_INCLUDE_RE.search(name):
        return "FORTRAN INCLUDE"
    return None
