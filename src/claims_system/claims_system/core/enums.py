from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role chosen on the login form."""

    ADMIN = "admin"
    LECTURER = "lecturer"


class ClaimStatus(str, Enum):
    """Claim lifecycle. APPROVED and REJECTED are terminal."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not ClaimStatus.PENDING


class Severity(str, Enum):
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"


class View(str, Enum):
    """Views the single application window can show."""

    LOGIN = "login"
    LECTURER = "lecturer"
    ADMIN = "admin"


class ErrorCode(str, Enum):
    # login
    MISSING_FIELD = "MissingField"
    NON_NUMERIC_ID = "NonNumericId"
    WRONG_ID_LENGTH = "WrongIdLength"
    # upload
    LIMIT_REACHED = "LimitReached"
    FILE_TOO_LARGE = "FileTooLarge"
    # submission
    INVALID_HOURS = "InvalidHours"
    MISSING_PERIOD = "MissingPeriod"
    DOCUMENT_REQUIRED = "DocumentRequired"

    SYSTEM_ERROR = "SystemError"
