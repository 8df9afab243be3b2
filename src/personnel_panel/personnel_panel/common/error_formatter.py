"""User-facing error messages.

Errors reach the UI in several shapes: our own `BackendError`, raw driver
exceptions, dict payloads from JSON APIs, plain strings or nothing at all.
`classify` turns any of them into one of three variants once, at the boundary,
and the formatting functions only ever look at the variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

from ..core.exceptions import BackendError, DomainError
from ..core.logger import logger

T = TypeVar("T")

UNKNOWN_ERROR_MESSAGE = "Bilinmeyen bir hata oluştu"
RETRY_ERROR_MESSAGE = "Bir hata oluştu. Lütfen tekrar deneyin."
UNEXPECTED_ERROR_MESSAGE = "Beklenmeyen bir hata oluştu"

BACKEND_MESSAGES: dict[str, str] = {
    "PGRST116": "Kayıt bulunamadı",
    "23505": "Bu kayıt zaten mevcut",
    "23503": "İlişkili bir kayıt bulunamadı",
    "42501": "Bu işlem için yetkiniz yok",
}


@dataclass(frozen=True)
class BackendFault:
    code: Optional[str]
    message: Optional[str]


@dataclass(frozen=True)
class PlainFault:
    text: str


@dataclass(frozen=True)
class UnknownFault:
    pass


Fault = Union[BackendFault, PlainFault, UnknownFault]


def _as_code(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def classify(error: Any) -> Fault:
    if error is None:
        return UnknownFault()
    if isinstance(error, BackendError):
        return BackendFault(code=_as_code(error.code), message=error.message or None)
    if isinstance(error, str):
        return PlainFault(error)
    if isinstance(error, Mapping):
        message = error.get("message")
        return BackendFault(code=_as_code(error.get("code")), message=str(message) if message else None)
    if isinstance(error, BaseException):
        return BackendFault(code=_as_code(getattr(error, "code", None)), message=str(error) or None)
    # Any other non-null value is an error we cannot read anything from.
    return BackendFault(code=None, message=None)


def describe_backend_error(error: Any) -> str:
    """Map a backend error to a localized message.

    Known codes win over the raw message; unknown codes fall back to the
    message verbatim. A missing error and an error without a message get
    different fallbacks.
    """
    fault = classify(error)
    if isinstance(fault, BackendFault):
        if fault.code in BACKEND_MESSAGES:
            return BACKEND_MESSAGES[fault.code]
        return fault.message or RETRY_ERROR_MESSAGE
    if isinstance(fault, PlainFault):
        return fault.text
    return UNKNOWN_ERROR_MESSAGE


def format_error_for_user(error: Any) -> str:
    if isinstance(error, DomainError) and not isinstance(error, BackendError):
        return str(error) or UNEXPECTED_ERROR_MESSAGE
    if isinstance(error, BaseException):
        return describe_backend_error(error)
    if isinstance(error, str):
        return error
    return UNEXPECTED_ERROR_MESSAGE


def log_error(error: Any, context: Optional[str] = None) -> None:
    fault = classify(error)
    fields = {
        "context": context or "App",
        "code": getattr(fault, "code", None),
        "details": getattr(error, "details", None),
    }
    exc_info = error if isinstance(error, BaseException) else None
    logger.error(
        "[%s] Error: %s",
        fields["context"],
        describe_backend_error(error),
        exc_info=exc_info,
        extra={"extra_fields": fields},
    )


@dataclass(frozen=True)
class SafeResult(Generic[T]):
    data: Optional[T]
    error: Optional[str]

    @property
    def ok(self) -> bool:
        return self.error is None


def safe_call(fn: Callable[[], T], error_message: Optional[str] = None) -> SafeResult[T]:
    """Run `fn`, turning any exception into a logged, user-facing message."""
    try:
        return SafeResult(data=fn(), error=None)
    except Exception as e:
        log_error(e)
        return SafeResult(data=None, error=error_message or describe_backend_error(e))
