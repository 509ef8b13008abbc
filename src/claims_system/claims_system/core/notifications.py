"""User-facing notifications.

Services report outcomes; the presentation layer decides how to render them.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ErrorCode, Severity
from .exceptions import DomainError

# code -> (severity, title)
_ERROR_PRESENTATION: dict[ErrorCode, tuple[Severity, str]] = {
    ErrorCode.MISSING_FIELD: (Severity.ERROR, "Login Error"),
    ErrorCode.NON_NUMERIC_ID: (Severity.ERROR, "Login Error"),
    ErrorCode.WRONG_ID_LENGTH: (Severity.ERROR, "Login Error"),
    ErrorCode.LIMIT_REACHED: (Severity.WARNING, "Limit Reached"),
    ErrorCode.FILE_TOO_LARGE: (Severity.ERROR, "File Too Large"),
    ErrorCode.INVALID_HOURS: (Severity.WARNING, "Validation Error"),
    ErrorCode.MISSING_PERIOD: (Severity.WARNING, "Validation Error"),
    ErrorCode.DOCUMENT_REQUIRED: (Severity.ERROR, "Document Required"),
    ErrorCode.SYSTEM_ERROR: (Severity.ERROR, "System Error"),
}

# Flash categories understood by the templates.
_FLASH_CATEGORY = {
    Severity.INFO: "success",
    Severity.WARNING: "warning",
    Severity.ERROR: "danger",
}


@dataclass(frozen=True)
class Notification:
    severity: Severity
    title: str
    message: str

    @property
    def category(self) -> str:
        return _FLASH_CATEGORY[self.severity]

    @classmethod
    def info(cls, title: str, message: str) -> "Notification":
        return cls(severity=Severity.INFO, title=title, message=message)

    @classmethod
    def for_code(cls, code: ErrorCode, message: str) -> "Notification":
        severity, title = _ERROR_PRESENTATION[code]
        return cls(severity=severity, title=title, message=message)

    @classmethod
    def from_error(cls, error: DomainError) -> "Notification":
        if error.code is None:
            return cls(severity=Severity.ERROR, title="Error", message=str(error))
        return cls.for_code(error.code, str(error))

    @classmethod
    def system_error(cls, message: str) -> "Notification":
        return cls.for_code(ErrorCode.SYSTEM_ERROR, message)
