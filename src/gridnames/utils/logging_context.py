"""Context-aware logging utilities for GridNames."""

import contextvars
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import Config

# Context variables for tracking what is currently being processed
current_workbook = contextvars.ContextVar[str | None]("current_workbook", default=None)
current_sheet = contextvars.ContextVar[str | None]("current_sheet", default=None)
current_name = contextvars.ContextVar[str | None]("current_name", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)

_CONTEXT_FIELDS = (
    ("workbook", current_workbook),
    ("sheet", current_sheet),
    ("name", current_name),
    ("operation", current_operation),
)

_SHORT_LABELS = {"workbook": "wb", "sheet": "sheet", "name": "name", "operation": "op"}


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context information."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        extra = dict(kwargs.get("extra") or {})
        context_parts = []
        for field, var in _CONTEXT_FIELDS:
            value = var.get()
            if value:
                # "name" is reserved on LogRecord, so context keys get a prefix
                extra[f"ctx_{field}"] = value
                context_parts.append(f"{_SHORT_LABELS[field]}={value}")

        kwargs = dict(kwargs)
        kwargs["extra"] = extra

        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    base_logger = logging.getLogger(name)
    return ContextualLogger(base_logger, {})


class _VarContext:
    """Sets a context variable for the duration of a ``with`` block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str | None):
        self.value = value
        self.token = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)
            self.token = None


class WorkbookContext(_VarContext):
    """Context manager for tracking the current workbook."""

    var = current_workbook


class SheetContext(_VarContext):
    """Context manager for tracking the current sheet."""

    var = current_sheet


class NameContext(_VarContext):
    """Context manager for tracking the defined name being mutated."""

    var = current_name


class OperationContext(_VarContext):
    """Context manager for tracking the current operation."""

    var = current_operation


def setup_contextual_logging(config: "Config | None" = None) -> None:
    """Set up contextual logging with structured format.

    This should be called once at application startup. When a config is given,
    its log level is applied and a file handler is added for ``log_file``.
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s - "
        "%(ctx_workbook)s %(ctx_sheet)s %(ctx_name)s %(ctx_operation)s",
        defaults={"ctx_workbook": "", "ctx_sheet": "", "ctx_name": "", "ctx_operation": ""},
    )

    root_logger = logging.getLogger()

    if config is not None:
        level = "DEBUG" if config.enable_debug else config.log_level.upper()
        root_logger.setLevel(level)
        if config.log_file is not None:
            root_logger.addHandler(logging.FileHandler(config.log_file))

    for handler in root_logger.handlers:
        handler.setFormatter(formatter)
