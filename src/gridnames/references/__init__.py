"""Area reference parsing and formatting."""

from .area_parser import (
    AreaReferenceParser,
    format_area_reference,
    format_sheet_name,
    is_contiguous,
    parse_area_reference,
)

__all__ = [
    "AreaReferenceParser",
    "format_area_reference",
    "format_sheet_name",
    "is_contiguous",
    "parse_area_reference",
]
