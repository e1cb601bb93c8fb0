"""Error types raised by the checked prompt and read helpers."""

from __future__ import annotations

from typing import Optional


class PromptError(Exception):
    """Base class for failures reported to the caller instead of exiting."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(operation, cause)
        self.operation = operation
        self.cause = cause

    def __str__(self) -> str:
        return f"Failed to {self.operation}: {self.cause}"


class PromptIOError(PromptError):
    """The underlying stream failed while writing, flushing or reading."""

    cause: OSError


class PromptDecodeError(PromptError):
    """The bytes read from the source are not valid text."""

    cause: UnicodeDecodeError

    def __init__(
        self,
        operation: str,
        cause: UnicodeDecodeError,
        data: Optional[bytes] = None,
    ) -> None:
        super().__init__(operation, cause)
        self.data = bytes(data) if data is not None else bytes(cause.object)


__all__ = ["PromptDecodeError", "PromptError", "PromptIOError"]
