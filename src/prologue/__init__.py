"""Starlink source prologue parsing, editing and rewriting."""

from prologue.catalog import (
    ALIASES,
    DEFAULTS,
    STANDARD_SECTIONS,
    TERMINATORS,
    normalize_section_name,
)
from prologue.copyright import (
    DEFAULT_FUNDING_BODIES,
    FundingBody,
    assemble_copyright,
    compress_years,
)
from prologue.document import Prologue, PrologueStyle
from prologue.fixups import add_copyright, add_licence, modernise
from prologue.parser import PrologueParser
from prologue.rewrite import read_source, render, split_source, write_source
from prologue.styles import PushResult

__all__ = [
    "ALIASES",
    "DEFAULTS",
    "DEFAULT_FUNDING_BODIES",
    "STANDARD_SECTIONS",
    "TERMINATORS",
    "FundingBody",
    "Prologue",
    "PrologueParser",
    "PrologueStyle",
    "PushResult",
    "add_copyright",
    "add_licence",
    "assemble_copyright",
    "compress_years",
    "modernise",
    "normalize_section_name",
    "read_source",
    "render",
    "split_source",
    "write_source",
]
