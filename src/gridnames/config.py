"""Configuration model for GridNames."""

from pathlib import Path

from pydantic import BaseModel, Field

from .core.exceptions import ConfigurationError
from .models.reference import SpreadsheetVersion
from .references.area_parser import AreaReferenceParser


class Config(BaseModel):
    """Configuration for GridNames."""

    # Reference grammar
    spreadsheet_version: SpreadsheetVersion = Field(
        SpreadsheetVersion.EXCEL2007,
        description="Spreadsheet format whose row/column limits references must respect",
    )

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")
    enable_debug: bool = Field(False, description="Enable debug mode")

    def create_parser(self) -> AreaReferenceParser:
        """Build an area reference parser for the configured spreadsheet version."""
        return AreaReferenceParser(self.spreadsheet_version)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from environment variables.
        """
        import os

        from dotenv import load_dotenv

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        version_env = os.getenv("GRIDNAMES_SPREADSHEET_VERSION", "excel2007").lower()
        try:
            spreadsheet_version = SpreadsheetVersion(version_env)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown spreadsheet version '{version_env}'; "
                f"expected one of {[v.value for v in SpreadsheetVersion]}"
            ) from e

        log_file = os.getenv("GRIDNAMES_LOG_FILE")

        return cls(
            spreadsheet_version=spreadsheet_version,
            log_level=os.getenv("GRIDNAMES_LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
            enable_debug=os.getenv("GRIDNAMES_ENABLE_DEBUG", "false").lower() == "true",
        )

