"""Structured area reference models."""

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.constants import EXCEL97_LIMITS, EXCEL2007_LIMITS, REFERENCE_SYNTAX, GridLimits
from ..utils.excel_utils import get_column_letter


class SpreadsheetVersion(str, Enum):
    """Spreadsheet formats and the grid limits they impose on references."""

    EXCEL97 = "excel97"
    EXCEL2007 = "excel2007"

    @property
    def limits(self) -> GridLimits:
        """Row and column limits for this format."""
        if self is SpreadsheetVersion.EXCEL97:
            return EXCEL97_LIMITS
        return EXCEL2007_LIMITS

    @property
    def max_rows(self) -> int:
        """Number of rows in a sheet."""
        return self.limits.MAX_ROWS

    @property
    def max_columns(self) -> int:
        """Number of columns in a sheet."""
        return self.limits.MAX_COLUMNS

    @property
    def last_column_name(self) -> str:
        """Letters of the last column (e.g. 'XFD')."""
        return self.limits.LAST_COLUMN_NAME


class CellCoordinate(BaseModel):
    """A single cell position with per-axis absolute flags."""

    model_config = ConfigDict(frozen=True, strict=True)

    row: int = Field(..., ge=0, description="Row index (0-based)")
    column: int = Field(..., ge=0, description="Column index (0-based)")
    row_absolute: bool = Field(False, description="Row is fixed with '$'")
    column_absolute: bool = Field(False, description="Column is fixed with '$'")

    @property
    def column_letter(self) -> str:
        """Excel letters for the column (e.g. 'C')."""
        return get_column_letter(self.column)

    def format(self) -> str:
        """A1-style text with '$' markers where the flags are set."""
        marker = REFERENCE_SYNTAX.ABSOLUTE_MARKER
        col_part = (marker if self.column_absolute else "") + self.column_letter
        row_part = (marker if self.row_absolute else "") + str(self.row + 1)
        return col_part + row_part

    def __str__(self) -> str:
        return self.format()


class AreaReference(BaseModel):
    """A single cell or one rectangular block, optionally sheet-qualified.

    Two-cell references are always normalized so that ``first_cell`` is the
    top-left corner and ``last_cell`` the bottom-right corner. Each absolute
    flag moves with the bound it was written on.
    """

    model_config = ConfigDict(frozen=True)

    sheet_name: str | None = Field(None, description="Sheet qualifier, unquoted")
    first_cell: CellCoordinate = Field(..., description="Top-left cell")
    last_cell: CellCoordinate | None = Field(
        None, description="Bottom-right cell, None for a single-cell reference"
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize_corners(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("last_cell") is None:
            return data
        first = CellCoordinate.model_validate(data["first_cell"])
        last = CellCoordinate.model_validate(data["last_cell"])
        if first.row <= last.row and first.column <= last.column:
            return data

        top, bottom = (first, last) if first.row <= last.row else (last, first)
        left, right = (first, last) if first.column <= last.column else (last, first)
        return {
            **data,
            "first_cell": CellCoordinate(
                row=top.row,
                column=left.column,
                row_absolute=top.row_absolute,
                column_absolute=left.column_absolute,
            ),
            "last_cell": CellCoordinate(
                row=bottom.row,
                column=right.column,
                row_absolute=bottom.row_absolute,
                column_absolute=right.column_absolute,
            ),
        }

    @property
    def is_single_cell(self) -> bool:
        """Whether the reference names exactly one cell."""
        return self.last_cell is None

    @property
    def is_contiguous(self) -> bool:
        """Always true: an AreaReference is one rectangular block."""
        return True

    @property
    def row_count(self) -> int:
        """Number of rows covered."""
        if self.last_cell is None:
            return 1
        return self.last_cell.row - self.first_cell.row + 1

    @property
    def column_count(self) -> int:
        """Number of columns covered."""
        if self.last_cell is None:
            return 1
        return self.last_cell.column - self.first_cell.column + 1

    def all_referenced_cells(self) -> Iterator[CellCoordinate]:
        """Yield every cell of the block in row-major order.

        Absolute flags are taken from the top-left corner.
        """
        last = self.last_cell or self.first_cell
        first = self.first_cell
        for row in range(first.row, last.row + 1):
            for column in range(first.column, last.column + 1):
                yield CellCoordinate(
                    row=row,
                    column=column,
                    row_absolute=first.row_absolute,
                    column_absolute=first.column_absolute,
                )
