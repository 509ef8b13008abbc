from __future__ import annotations

import math
import re
from typing import Optional

from ..core.enums import ErrorCode
from ..core.exceptions import ValidationError

_DECIMAL_RE = re.compile(r"[0-9]*\.?[0-9]*")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def is_integer(value: Optional[str]) -> bool:
    """ASCII digits with an optional sign; no underscores or other scripts."""
    if value is None:
        return False
    return _INTEGER_RE.fullmatch(value.strip()) is not None


def parse_hours(value: Optional[str]) -> float:
    """Parse the hours field: digits with at most one decimal point.

    An empty field parses as 0 so the submission check reports it.
    """
    text = (value or "").strip()
    if not text:
        return 0.0
    if not _DECIMAL_RE.fullmatch(text) or text == ".":
        raise ValidationError("Please enter valid hours worked and month/year.", code=ErrorCode.INVALID_HOURS)
    hours = float(text)
    if not math.isfinite(hours):
        raise ValidationError("Please enter valid hours worked and month/year.", code=ErrorCode.INVALID_HOURS)
    return hours
