"""
Deployment Report Templates

Release, deployment progress and rollback notifications.
"""

from datetime import datetime
from typing import Optional, Sequence

from ..messages import Button, Message, MessageBuilder
from .common import format_list_items, format_timestamp


def _status(success: bool) -> str:
    return "✅ SUCCESS" if success else "❌ FAILED"


def build_deployment_report(
    application_name: str,
    version: str,
    environment: str,
    success: bool,
    duration: str,
    deployed_services: Sequence[str] = (),
    changes: Sequence[str] = (),
    now: Optional[datetime] = None,
) -> Message:
    """
    Build a detailed deployment report.

    Args:
        application_name: Deployed application
        version: Version or tag
        environment: Target environment
        success: Whether the deployment succeeded
        duration: Human-readable deployment duration
        deployed_services: Services that were deployed
        changes: Changes included in the release
        now: Report time (defaults to now)

    Returns:
        Message
    """
    timestamp = format_timestamp(now)
    status_icon = "🚀" if success else "💥"

    builder = (
        MessageBuilder.create()
        .text(f"Deployment of {application_name} {version}: {_status(success)}")
        .add_header(f"{status_icon} Deployment Report - {application_name}")
        .add_section(f"*Version:* `{version}`\n*Environment:* {environment.upper()}")
        .add_section(f"*Status:* {_status(success)}\n*Duration:* {duration}")
        .add_section(f"*Completed:* {timestamp}")
        .add_divider()
    )

    if deployed_services:
        builder.add_section("📦 *Deployed Services:*")
        builder.add_section(format_list_items(deployed_services))
        builder.add_divider()

    if changes:
        builder.add_section("📝 *Changes Included:*")
        builder.add_section(format_list_items(changes))
        builder.add_divider()

    builder.add_context("🔄 CI/CD Pipeline", "🛠️ DevOps Team", f"📅 {timestamp}")

    if success:
        builder.add_buttons(
            Button.create("View Application", url="https://app.example.com", style="primary"),
            Button.create("Release Notes", url="https://releases.example.com"),
            Button.create("Monitoring", url="https://monitoring.example.com"),
        )
    else:
        builder.add_buttons(
            Button.create("View Logs", url="https://deployment-logs.example.com", style="danger"),
            Button.create("Rollback", url="https://rollback.example.com", style="primary"),
            Button.create("Contact DevOps", url="https://devops-support.example.com"),
        )

    return builder.build()


def build_deployment_notification(
    application_name: str,
    version: str,
    environment: str,
    success: bool,
    now: Optional[datetime] = None,
) -> Message:
    """Build a short deployment result notification."""
    status_icon = "🚀" if success else "💥"
    outcome = "Completed" if success else "Failed"

    return (
        MessageBuilder.create()
        .text(f"Deployment {outcome.lower()}: {application_name} {version}")
        .add_header(f"{status_icon} Deployment {outcome}")
        .add_section(f"*Application:* {application_name}")
        .add_section(f"*Version:* `{version}`")
        .add_section(f"*Environment:* {environment.upper()}")
        .add_section(f"*Status:* {_status(success)}")
        .add_section(f"*Time:* {format_timestamp(now)}")
        .build()
    )


def build_deployment_started(
    application_name: str,
    version: str,
    environment: str,
    estimated_duration: str,
    now: Optional[datetime] = None,
) -> Message:
    return (
        MessageBuilder.create()
        .text(f"Deployment started: {application_name} {version}")
        .add_header(f"🔄 Deployment Started - {application_name}")
        .add_section(f"*Version:* `{version}`")
        .add_section(f"*Environment:* {environment.upper()}")
        .add_section(f"*Started:* {format_timestamp(now)}")
        .add_section(f"*Estimated Duration:* {estimated_duration}")
        .add_buttons(
            Button.create("View Progress", url="https://deployment.example.com", style="primary"),
            Button.create("Cancel Deployment", url="https://cancel.example.com", style="danger"),
        )
        .build()
    )


def build_rollback_notification(
    application_name: str,
    from_version: str,
    to_version: str,
    environment: str,
    success: bool,
    reason: str,
    now: Optional[datetime] = None,
) -> Message:
    """Build a rollback result notification."""
    status_icon = "↩️" if success else "⚠️"
    outcome = "Completed" if success else "Failed"

    return (
        MessageBuilder.create()
        .text(f"Rollback {outcome.lower()}: {application_name} {from_version} -> {to_version}")
        .add_header(f"{status_icon} Rollback {outcome}")
        .add_section(f"*Application:* {application_name}")
        .add_section(f"*Environment:* {environment.upper()}")
        .add_section(f"*From Version:* `{from_version}`")
        .add_section(f"*To Version:* `{to_version}`")
        .add_section(f"*Status:* {_status(success)}")
        .add_section(f"*Reason:* {reason}")
        .add_section(f"*Completed:* {format_timestamp(now)}")
        .add_buttons(
            Button.create("View Application", url="https://app.example.com", style="primary"),
            Button.create("Incident Report", url="https://incident.example.com"),
        )
        .build()
    )
