"""Data models for GridNames."""

from .reference import AreaReference, CellCoordinate, SpreadsheetVersion

__all__ = ["AreaReference", "CellCoordinate", "SpreadsheetVersion"]
