"""Exception classes for the Textile client."""

from __future__ import annotations


class TextileError(Exception):
    """Raised when a Textile daemon request fails.

    Attributes:
        code: Machine-readable error code (e.g. ``"HTTP_404"``).
        status: HTTP status code of the response, or ``None`` when no
            response was received.
        message: Human-readable error description.
    """

    def __init__(self, message: str, *, code: str, status: int | None) -> None:
        super().__init__(message)
        self.code = code
        self.status = status
        self.message = message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, status={self.status}, "
            f"message={self.message!r})"
        )

    def __str__(self) -> str:
        if self.status is None:
            return f"[{self.code}] {self.message}"
        return f"[{self.code}] {self.message} (HTTP {self.status})"


class TextileConnectionError(TextileError):
    """Raised when the daemon could not be reached or timed out."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONNECTION_ERROR", status=None)
