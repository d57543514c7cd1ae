"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from gridnames.config import Config
from gridnames.models.reference import SpreadsheetVersion
from gridnames.references.area_parser import AreaReferenceParser
from gridnames.registry import NamedRangeRegistry, SheetList


@pytest.fixture
def parser() -> AreaReferenceParser:
    """Parser with Excel 2007 grid limits."""
    return AreaReferenceParser()


@pytest.fixture
def excel97_parser() -> AreaReferenceParser:
    """Parser with the smaller Excel 97 grid limits."""
    return AreaReferenceParser(SpreadsheetVersion.EXCEL97)


@pytest.fixture
def sheets() -> SheetList:
    """Three-sheet workbook layout."""
    return SheetList(["Sheet1", "Sales", "My Sheet"])


@pytest.fixture
def warning_sink() -> MagicMock:
    """Diagnostics sink recording reference fallbacks."""
    return MagicMock(name="on_reference_warning")


@pytest.fixture
def registry(sheets: SheetList, warning_sink: MagicMock) -> NamedRangeRegistry:
    """Empty registry wired to the sheet list and warning sink."""
    return NamedRangeRegistry(sheets, on_reference_warning=warning_sink)


@pytest.fixture
def excel97_config() -> Config:
    """Configuration targeting the Excel 97 format."""
    return Config(spreadsheet_version=SpreadsheetVersion.EXCEL97)
