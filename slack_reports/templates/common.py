"""
Shared Template Helpers

Severity lookup and value formatting used by every report template.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence

TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M:%S"


class Severity(Enum):
    """Severity / alert levels shared by error, security, risk and budget reports."""
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: str) -> "Severity":
        try:
            return cls((value or "").strip().upper())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class SeverityInfo:
    icon: str
    label: str


_SEVERITY_ICONS = {
    Severity.CRITICAL: "🚨",
    Severity.HIGH: "⚠️",
    Severity.MEDIUM: "🔶",
    Severity.LOW: "ℹ️",
}


def severity_info(level: str, default_icon: str = "❓") -> SeverityInfo:
    """
    Map a severity or alert level name to its icon and label.

    Args:
        level: Level name, case-insensitive (critical, high, medium, low)
        default_icon: Icon for unrecognised levels

    Returns:
        SeverityInfo; the label keeps the caller's spelling
    """
    severity = Severity.parse(level)
    icon = _SEVERITY_ICONS.get(severity, default_icon)
    return SeverityInfo(icon=icon, label=level)


def format_timestamp(now: Optional[datetime] = None, fmt: str = TIMESTAMP_FORMAT) -> str:
    return (now or datetime.now()).strftime(fmt)


def format_list_items(items: Sequence[str], empty_text: str = "No items to display") -> str:
    """Format items as a bullet list, one per line."""
    if not items:
        return empty_text
    return "\n".join(f"• {item}" for item in items)


def format_currency(amount: float) -> str:
    """Format as dollars with thousands separators, e.g. $1,234.56 / -$12.00."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def safe_percentage(part: float, whole: float) -> float:
    """part / whole * 100, or 0 when whole is 0."""
    if not whole:
        return 0.0
    return part * 100.0 / whole
