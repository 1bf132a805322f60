"""Custom exceptions for the Quay API client."""

from typing import Optional


class QuayError(Exception):
    """Base exception for all Quay-related errors."""

    pass


class QuayConnectionError(QuayError):
    """Raised when the request cannot be sent or the Quay host cannot be reached."""

    pass


class QuayAPIError(QuayError):
    """Raised when Quay answers with an error status and a structured body."""

    def __init__(
        self,
        status: int,
        message: str,
        error_type: Optional[str] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.error_type = error_type
        self.detail = detail

    def __repr__(self) -> str:
        return f"QuayAPIError(status={self.status}, message={self.message!r})"


class QuayDecodeError(QuayError):
    """Raised when a response body is not JSON or does not match its schema."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status
