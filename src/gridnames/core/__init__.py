"""Core constants and exceptions for GridNames."""

from .constants import BUILTIN_NAMES, DELETED_REFERENCE_MARKER, is_builtin_name
from .exceptions import (
    ConfigurationError,
    DetachedNameError,
    DuplicateNameError,
    GridNamesError,
    InvalidNameError,
    InvalidScopeError,
    MalformedReferenceError,
    UnresolvableSheetError,
)

__all__ = [
    "BUILTIN_NAMES",
    "DELETED_REFERENCE_MARKER",
    "is_builtin_name",
    "GridNamesError",
    "InvalidNameError",
    "DuplicateNameError",
    "MalformedReferenceError",
    "UnresolvableSheetError",
    "InvalidScopeError",
    "DetachedNameError",
    "ConfigurationError",
]
