"""Utility functions for GridNames."""

from .excel_utils import column_index_from_letter, get_column_letter
from .logging_context import get_contextual_logger, setup_contextual_logging

__all__ = [
    "column_index_from_letter",
    "get_column_letter",
    "get_contextual_logger",
    "setup_contextual_logging",
]
