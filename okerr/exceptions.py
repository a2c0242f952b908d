"""Exceptions raised by the Result extraction and decoding layer.

Only extraction (``unwrap``, ``unwrap_err``, ``expect``) and wire decoding
raise. Failures inside caller-supplied callbacks are never wrapped.
"""

from typing import Any


class ResultError(Exception):
    """Base exception for all Result errors."""

    pass


class NonResultError(ResultError, TypeError):
    """Raised when a value does not have the shape of a Result.

    Attributes:
        value: The offending input, as received
    """

    def __init__(self, message: str, value: Any) -> None:
        super().__init__(message)
        self.value = value


class UnwrapError(ResultError, ValueError):
    """Raised when the success payload is requested from an Err result.

    Attributes:
        error: The failure payload of the Err result
    """

    def __init__(self, message: str, error: Any) -> None:
        super().__init__(message)
        self.error = error


class UnwrapOkError(ResultError, ValueError):
    """Raised when the failure payload is requested from an Ok result."""

    def __init__(self, message: str, value: Any) -> None:
        super().__init__(message)
        self.value = value
