"""Error taxonomy shared by the sources, tools and CLI."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    CONFIG_ERROR = "CONFIG_ERROR"
    OPEN_ERROR = "OPEN_ERROR"


class LineKitError(RuntimeError):
    """Exception carrying a structured error code."""

    def __init__(self, code: ErrorCode, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.context = context or {}


class ConfigurationError(LineKitError):
    """Invalid or conflicting tool options, raised before any input is opened."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(ErrorCode.CONFIG_ERROR, message, context=context)


def _describe(error: OSError) -> str:
    return error.strerror or str(error)


class InputOpenError(LineKitError):
    """An input designator could not be opened for reading."""

    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(ErrorCode.OPEN_ERROR, f"{path}: {_describe(error)}", context={"path": path})
        self.path = path
        self.error = error


class OutputOpenError(LineKitError):
    """An output destination could not be opened for appending."""

    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(ErrorCode.OPEN_ERROR, f"{path}: {_describe(error)}", context={"path": path})
        self.path = path
        self.error = error
