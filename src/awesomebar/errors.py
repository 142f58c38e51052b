"""
Awesomebar error classification.

Error Categories:
-----------------
1. Query errors: the history store failed to answer a query. These are
   never recovered inside the provider and reach the caller of
   ``on_input_changed`` unchanged.

2. Side-effect errors: a best-effort operation such as a speculative
   connect failed. The provider contains these; callers never see them.

3. Configuration errors: invalid provider or environment settings.

Usage:
------
    from awesomebar.errors import AwesomeBarError, HistoryQueryError

    try:
        suggestions = await provider.on_input_changed(text)
    except HistoryQueryError as e:
        logger.warning(f"History lookup failed: {e}")
        suggestions = []
"""

from typing import Any


class AwesomeBarError(Exception):
    """
    Base exception for all awesomebar errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


class HistoryQueryError(AwesomeBarError):
    """
    Raised when a history store cannot answer a suggestion query.

    Common causes:
    - Storage closed or unavailable
    - Corrupted index
    """

    def __init__(
        self,
        message: str = "History query failed",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class SpeculativeConnectError(AwesomeBarError):
    """Raised when an engine refuses to warm up a connection for a url."""

    def __init__(
        self,
        message: str = "Speculative connect failed",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class ConfigurationError(AwesomeBarError):
    """
    Raised when there's a configuration problem.

    Common causes:
    - Non-positive suggestion limit
    - Malformed environment variable
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)
