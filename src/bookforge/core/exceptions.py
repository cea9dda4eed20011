"""
Exceptions for bookforge.

Provides a small hierarchy:
- BookforgeError (base)
  - ProbeError
  - FileNotParsableError

Not-found outcomes (missing glossary entry, unresolved file) are never
exceptions; they are returned as None.
"""

from typing import Any


class BookforgeError(Exception):
    """Base exception for bookforge errors.

    Attributes:
        operation: Operation that failed.
        details: Additional error details.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.details = details or {}

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.operation:
            parts.append(f"Operation: {self.operation}")
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"Details: {details_str}")
        return " | ".join(parts)


class ProbeError(BookforgeError):
    """A filesystem or ignore-predicate call failed while probing a candidate.

    Only raised when the resolver runs in strict mode; otherwise the
    candidate is skipped. The original error is chained as __cause__.
    """

    def __init__(
        self,
        message: str = "Failed to probe candidate file",
        filename: str | None = None,
        candidate: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if filename:
            details["filename"] = filename
        if candidate:
            details["candidate"] = candidate
        super().__init__(message, operation="find_parsable_file", details=details, **kwargs)
        self.filename = filename
        self.candidate = candidate


class FileNotParsableError(BookforgeError):
    """No parser can read the resolved file."""

    def __init__(
        self,
        message: str = "File is not parsable",
        filename: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if filename:
            details["filename"] = filename
        kwargs.setdefault("operation", "parse")
        super().__init__(message, details=details, **kwargs)
        self.filename = filename
