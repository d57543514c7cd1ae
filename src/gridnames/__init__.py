"""GridNames - Defined names and area references for spreadsheet documents."""

__version__ = "0.1.0"

from gridnames.config import Config
from gridnames.core.constants import BUILTIN, BUILTIN_NAMES, is_builtin_name
from gridnames.core.exceptions import (
    DuplicateNameError,
    GridNamesError,
    InvalidNameError,
    MalformedReferenceError,
    UnresolvableSheetError,
)
from gridnames.models import AreaReference, CellCoordinate, SpreadsheetVersion
from gridnames.references import AreaReferenceParser
from gridnames.registry import DefinedName, NamedRangeRegistry, SheetList

__all__ = [
    "AreaReference",
    "AreaReferenceParser",
    "BUILTIN",
    "BUILTIN_NAMES",
    "CellCoordinate",
    "Config",
    "DefinedName",
    "DuplicateNameError",
    "GridNamesError",
    "InvalidNameError",
    "MalformedReferenceError",
    "NamedRangeRegistry",
    "SheetList",
    "SpreadsheetVersion",
    "UnresolvableSheetError",
    "is_builtin_name",
]
