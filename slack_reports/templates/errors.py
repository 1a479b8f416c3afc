"""
Error Report Template

System error alerts with severity-dependent recommended actions.
"""

from datetime import datetime
from typing import Optional

from ..messages import Button, Message, MessageBuilder
from .common import Severity, format_list_items, format_timestamp, severity_info

_RECOMMENDED_ACTIONS = {
    Severity.CRITICAL: [
        "*IMMEDIATE ACTION REQUIRED*",
        "Escalate to on-call engineer",
        "Check system logs for detailed stack trace",
        "Consider emergency rollback",
        "Notify stakeholders immediately",
    ],
    Severity.HIGH: [
        "Check system logs for detailed stack trace",
        "Verify service dependencies",
        "Monitor resource utilization",
        "Consider scaling if needed",
        "Update incident tracking",
    ],
    Severity.MEDIUM: [
        "Review error patterns and frequency",
        "Check recent deployments",
        "Monitor for escalation",
        "Schedule investigation",
    ],
}

_DEFAULT_ACTIONS = [
    "Log for analysis",
    "Monitor for patterns",
    "Include in regular maintenance",
]


def recommended_actions(severity: str) -> str:
    actions = _RECOMMENDED_ACTIONS.get(Severity.parse(severity), _DEFAULT_ACTIONS)
    return format_list_items(actions)


def build_error_report(
    system_name: str,
    error_type: str,
    error_message: str,
    error_count: int,
    severity: str,
    affected_services: str,
    now: Optional[datetime] = None,
) -> Message:
    """
    Build a detailed system error report.

    Args:
        system_name: System experiencing errors
        error_type: Error class or category
        error_message: Error message or stack trace
        error_count: Number of occurrences
        severity: CRITICAL / HIGH / MEDIUM / LOW
        affected_services: Affected services, free text
        now: Report time (defaults to now)

    Returns:
        Message
    """
    timestamp = format_timestamp(now)
    info = severity_info(severity)

    return (
        MessageBuilder.create()
        .text(f"{info.label} error in {system_name}: {error_type}")
        .add_header(f"{info.icon} System Error Alert - {system_name}")
        .add_section(f"*Error Type:* `{error_type}`\n*Severity:* {info.icon} {info.label}")
        .add_section(f"*Timestamp:* {timestamp}\n*Error Count:* {error_count} occurrences")
        .add_divider()
        .add_section("🔍 *Error Details:*")
        .add_section(f"```{error_message}```")
        .add_section(f"*Affected Services:* {affected_services}")
        .add_divider()
        .add_section("📋 *Recommended Actions:*")
        .add_section(recommended_actions(severity))
        .add_divider()
        .add_context("🔔 Alert System", "📱 Incident Management", f"⏰ {timestamp}")
        .add_buttons(
            Button.create("View Logs", url="https://logs.example.com", style="primary"),
            Button.create("Create Incident", url="https://incident.example.com", style="danger"),
            Button.create("System Status", url="https://status.example.com"),
        )
        .build()
    )


def build_quick_error_alert(
    system_name: str,
    error_type: str,
    severity: str,
    now: Optional[datetime] = None,
) -> Message:
    """Build a short error alert."""
    info = severity_info(severity)

    return (
        MessageBuilder.create()
        .text(f"{info.label} error in {system_name}: {error_type}")
        .add_header(f"{info.icon} Quick Alert - {system_name}")
        .add_section(f"*Error:* `{error_type}`")
        .add_section(f"*Severity:* {info.icon} {info.label}")
        .add_section(f"*Time:* {format_timestamp(now)}")
        .add_buttons(
            Button.create("View Details", url="https://logs.example.com", style="primary"),
            Button.create("Acknowledge", url="https://ack.example.com", style="default"),
        )
        .build()
    )
