"""Custom exceptions for GridNames."""


class GridNamesError(Exception):
    """Base exception for all GridNames errors."""

    pass


class ConfigurationError(GridNamesError):
    """Raised when configuration is invalid."""

    pass


class InvalidNameError(GridNamesError, ValueError):
    """Raised when a defined name violates the naming rules."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid name: '{name}'; Names must begin with a letter or underscore "
            "and not contain spaces"
        )


class DuplicateNameError(GridNamesError, ValueError):
    """Raised when a name collides (case-insensitively) with another defined name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The workbook already contains this name: {name}")


class MalformedReferenceError(GridNamesError, ValueError):
    """Raised when reference text does not match the area reference grammar."""

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(f"Malformed area reference '{reference}': {reason}")


class UnresolvableSheetError(GridNamesError):
    """Raised when the sheet a defined name belongs to cannot be determined."""

    def __init__(self, name: str | None, detail: str = "no local scope and no sheet qualifier"):
        self.name = name
        super().__init__(f"Cannot resolve sheet for name '{name}': {detail}")


class InvalidScopeError(GridNamesError, ValueError):
    """Raised when a local scope is set to a negative sheet index."""

    def __init__(self, sheet_index: int):
        self.sheet_index = sheet_index
        super().__init__(
            f"Invalid sheet index {sheet_index}; use None to make the name workbook-global"
        )


class DetachedNameError(GridNamesError):
    """Raised when a defined name is used after removal from its registry."""

    pass
