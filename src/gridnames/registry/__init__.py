"""Defined name registry."""

from .collaborators import ReferenceWarningSink, SheetList, SheetLookup
from .defined_name import DefinedName
from .named_range_registry import NamedRangeRegistry, validate_name
from .store import NameRecord, NameStore

__all__ = [
    "DefinedName",
    "NamedRangeRegistry",
    "NameRecord",
    "NameStore",
    "ReferenceWarningSink",
    "SheetList",
    "SheetLookup",
    "validate_name",
]
