"""Centralized constants for GridNames.

Grammar limits for each supported spreadsheet format, the reserved built-in
defined names, and the textual markers used by reference handling.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class GridLimits:
    """Row and column limits of a spreadsheet format."""

    MAX_ROWS: int
    MAX_COLUMNS: int
    LAST_COLUMN_NAME: str


EXCEL97_LIMITS: Final = GridLimits(MAX_ROWS=65_536, MAX_COLUMNS=256, LAST_COLUMN_NAME="IV")
EXCEL2007_LIMITS: Final = GridLimits(
    MAX_ROWS=1_048_576, MAX_COLUMNS=16_384, LAST_COLUMN_NAME="XFD"
)


@dataclass(frozen=True)
class ReferenceSyntax:
    """Special characters of the area reference grammar."""

    SHEET_SEPARATOR: Final[str] = "!"
    RANGE_SEPARATOR: Final[str] = ":"
    AREA_SEPARATOR: Final[str] = ","
    ABSOLUTE_MARKER: Final[str] = "$"
    QUOTE: Final[str] = "'"


REFERENCE_SYNTAX: Final = ReferenceSyntax()

# Excel writes this in place of a reference whose target was deleted
DELETED_REFERENCE_MARKER: Final[str] = "#REF!"


@dataclass(frozen=True)
class BuiltinNames:
    """Reserved defined names written by spreadsheet applications.

    The values are kept exactly as Excel writes them, trailing colons included.
    """

    # The workbook's print area
    PRINT_AREA: Final[str] = "_xlnm.Print_Area"
    # Rows or columns repeated at the top of each printed page
    PRINT_TITLES: Final[str] = "_xlnm.Print_Titles"
    # Criteria values for an advanced filter
    CRITERIA: Final[str] = "_xlnm.Criteria:"
    # Output range of an advanced filter
    EXTRACT: Final[str] = "_xlnm.Extract:"
    # Source range of an advanced filter or AutoFilter
    FILTER_DATABASE: Final[str] = "_xlnm._FilterDatabase:"
    CONSOLIDATE_AREA: Final[str] = "_xlnm.Consolidate_Area"
    # Range sourced from a database
    DATABASE: Final[str] = "_xlnm.Database"
    SHEET_TITLE: Final[str] = "_xlnm.Sheet_Title"


BUILTIN: Final = BuiltinNames()

BUILTIN_NAMES: Final[frozenset[str]] = frozenset(
    {
        BUILTIN.PRINT_AREA,
        BUILTIN.PRINT_TITLES,
        BUILTIN.CRITERIA,
        BUILTIN.EXTRACT,
        BUILTIN.FILTER_DATABASE,
        BUILTIN.CONSOLIDATE_AREA,
        BUILTIN.DATABASE,
        BUILTIN.SHEET_TITLE,
    }
)

_BUILTIN_NAMES_FOLDED: Final[frozenset[str]] = frozenset(n.casefold() for n in BUILTIN_NAMES)


def is_builtin_name(name: str | None) -> bool:
    """Check whether a name is one of the reserved built-in names (case-insensitive)."""
    return name is not None and name.casefold() in _BUILTIN_NAMES_FOLDED
