from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a required record does not exist."""

    code = "PGRST116"


class ExportError(DomainError):
    """Raised when a spreadsheet export cannot be generated."""


class BackendError(DomainError):
    """Raised when the database rejects or fails an operation.

    `code` is a canonical SQLSTATE-style code (e.g. '23505') used by the error
    formatter to pick a user-facing message.
    """

    def __init__(self, message: str, code: Optional[str] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
