from __future__ import annotations

from ..core.constants import CURRENCY_SYMBOL

_STATUS_COLORS = {
    "approved": "#28a745",
    "pending": "#ffc107",
    "rejected": "#dc3545",
}
_DEFAULT_STATUS_COLOR = "#6c757d"


def format_currency(amount: float) -> str:
    """Format as e.g. R1,234.50."""
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def status_color(status) -> str:
    value = getattr(status, "value", status)
    if not isinstance(value, str):
        return "transparent"
    return _STATUS_COLORS.get(value.lower(), _DEFAULT_STATUS_COLOR)
