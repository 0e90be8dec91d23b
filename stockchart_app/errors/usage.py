"""Errors raised when the pipeline or registry is called incorrectly."""

from typing import Optional, Any


class CallerUsageError(ValueError):
    """Logic error on the caller side, e.g. removing a series never loaded."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value
        self.recoverable = False
