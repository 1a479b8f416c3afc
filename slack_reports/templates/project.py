"""
Project Status Report Templates

Progress, milestones, risks, sprints and resource requests.
"""

from datetime import datetime
from typing import Optional, Sequence

from ..messages import Button, Message, MessageBuilder
from .common import (
    format_list_items,
    format_percent,
    format_timestamp,
    safe_percentage,
    severity_info,
)

PROGRESS_BAR_CELLS = 10


def create_progress_bar(percentage: int) -> str:
    """Ten-cell bar, one filled cell per started 10% (clamped to 0..10)."""
    filled = max(0, min(percentage // 10, PROGRESS_BAR_CELLS))
    return "█" * filled + "░" * (PROGRESS_BAR_CELLS - filled)


def progress_icon(percentage: int) -> str:
    if percentage >= 90:
        return "🎯"
    if percentage >= 70:
        return "🚀"
    if percentage >= 50:
        return "⚡"
    return "🔄"


def build_project_status_report(
    project_name: str,
    project_manager: str,
    completion_percentage: int,
    current_phase: str,
    completed_tasks: Sequence[str] = (),
    upcoming_tasks: Sequence[str] = (),
    blockers: Sequence[str] = (),
    next_milestone: str = "TBD",
    now: Optional[datetime] = None,
) -> Message:
    """
    Build a project status report.

    Args:
        project_name: Project name
        project_manager: Responsible manager
        completion_percentage: 0-100
        current_phase: Current phase name
        completed_tasks: Recently completed tasks
        upcoming_tasks: Next tasks
        blockers: Current blockers (section omitted when empty)
        next_milestone: Next milestone description
        now: Report time (defaults to now)

    Returns:
        Message
    """
    timestamp = format_timestamp(now)
    bar = create_progress_bar(completion_percentage)

    builder = (
        MessageBuilder.create()
        .text(f"{project_name}: {completion_percentage}% complete")
        .add_header(f"{progress_icon(completion_percentage)} Project Status - {project_name}")
        .add_section(f"*Project Manager:* {project_manager}\n*Current Phase:* {current_phase}")
        .add_section(f"*Progress:* {bar} {completion_percentage}%")
        .add_section(f"*Last Updated:* {timestamp}")
        .add_divider()
        .add_section("✅ *Completed Tasks:*")
        .add_section(format_list_items(completed_tasks))
        .add_divider()
        .add_section("🔄 *Upcoming Tasks:*")
        .add_section(format_list_items(upcoming_tasks))
        .add_divider()
    )

    if blockers:
        builder.add_section("🚫 *Current Blockers:*")
        builder.add_section(format_list_items(blockers))
        builder.add_divider()

    return (
        builder
        .add_section(f"🎯 *Next Milestone:* {next_milestone}")
        .add_context("📋 Project Management", "👥 Team Collaboration", f"📅 {timestamp}")
        .add_buttons(
            Button.create("Project Board", url="https://project.example.com", style="primary"),
            Button.create("Timeline", url="https://timeline.example.com"),
            Button.create("Team Chat", url="https://chat.example.com"),
        )
        .build()
    )


def build_milestone_notification(
    project_name: str,
    milestone_name: str,
    completion_date: str,
    deliverables: Sequence[str] = (),
    next_milestone: str = "TBD",
    now: Optional[datetime] = None,
) -> Message:
    builder = (
        MessageBuilder.create()
        .text(f"{project_name}: milestone {milestone_name} achieved")
        .add_header(f"🎉 Milestone Achieved - {project_name}")
        .add_section(f"*Milestone:* {milestone_name}")
        .add_section(f"*Completed:* {completion_date}")
        .add_section(f"*Reported:* {format_timestamp(now)}")
        .add_divider()
    )

    if deliverables:
        builder.add_section("📦 *Deliverables Completed:*")
        builder.add_section(format_list_items(deliverables))
        builder.add_divider()

    return (
        builder
        .add_section(f"🎯 *Next Milestone:* {next_milestone}")
        .add_buttons(
            Button.create("View Details", url="https://milestone.example.com", style="primary"),
            Button.create("Celebrate", url="https://celebrate.example.com"),
            Button.create("Next Steps", url="https://nextsteps.example.com"),
        )
        .build()
    )


def build_risk_alert(
    project_name: str,
    risk_description: str,
    risk_level: str,
    impact: str,
    mitigation_actions: Sequence[str],
    owner: str,
    now: Optional[datetime] = None,
) -> Message:
    """Build a project risk alert."""
    info = severity_info(risk_level)

    return (
        MessageBuilder.create()
        .text(f"{info.label} risk on {project_name}")
        .add_header(f"{info.icon} Project Risk Alert - {project_name}")
        .add_section(f"*Risk Level:* {info.icon} {info.label}")
        .add_section(f"*Impact:* {impact}")
        .add_section(f"*Owner:* {owner}")
        .add_section(f"*Identified:* {format_timestamp(now)}")
        .add_divider()
        .add_section("⚠️ *Risk Description:*")
        .add_section(risk_description)
        .add_divider()
        .add_section("🛡️ *Mitigation Actions:*")
        .add_section(format_list_items(mitigation_actions))
        .add_buttons(
            Button.create("Risk Register", url="https://risk.example.com", style="primary"),
            Button.create("Escalate", url="https://escalate.example.com", style="danger"),
            Button.create("Contact PM", url="https://pm.example.com"),
        )
        .build()
    )


def sprint_velocity_icon(completion_rate: float) -> str:
    if completion_rate >= 90:
        return "🚀"
    if completion_rate >= 70:
        return "⚡"
    return "🔄"


def build_sprint_summary(
    project_name: str,
    sprint_number: str,
    story_points_completed: int,
    story_points_planned: int,
    tasks_completed: int,
    tasks_carried_over: int,
    sprint_goals: Sequence[str] = (),
    retrospective_items: Sequence[str] = (),
    now: Optional[datetime] = None,
) -> Message:
    """Build a sprint summary. Completion rate is 0% when nothing was planned."""
    completion_rate = safe_percentage(story_points_completed, story_points_planned)
    icon = sprint_velocity_icon(completion_rate)

    if completion_rate >= 90:
        rate_status = "✅ Excellent"
    elif completion_rate >= 70:
        rate_status = "⚠️ Good"
    else:
        rate_status = "🔶 Needs Focus"

    carried_status = "✅ None" if tasks_carried_over == 0 else f"⚠️ {tasks_carried_over}"

    builder = (
        MessageBuilder.create()
        .text(f"Sprint {sprint_number} summary for {project_name}")
        .add_header(f"{icon} Sprint {sprint_number} Summary - {project_name}")
        .add_section(f"*Sprint Completed:* {format_timestamp(now)}")
        .add_divider()
        .add_section("📊 *Sprint Metrics:*")
        .add_table(
            ["Metric", "Value", "Status"],
            [
                ["Story Points Completed", str(story_points_completed), f"{icon} Tracked"],
                ["Story Points Planned", str(story_points_planned), "🎯 Target"],
                ["Completion Rate", format_percent(completion_rate), rate_status],
                ["Tasks Completed", str(tasks_completed), "✅ Done"],
                ["Tasks Carried Over", str(tasks_carried_over), carried_status],
            ],
        )
    )

    if sprint_goals:
        builder.add_section("🎯 *Sprint Goals Achievement:*")
        builder.add_section(format_list_items(sprint_goals))
        builder.add_divider()

    if retrospective_items:
        builder.add_section("🔄 *Key Retrospective Items:*")
        builder.add_section(format_list_items(retrospective_items))
        builder.add_divider()

    return (
        builder
        .add_context("🏃 Agile Sprint", "📊 Team Velocity", "📅 Sprint Review")
        .add_buttons(
            Button.create("Sprint Board", url="https://sprint.example.com", style="primary"),
            Button.create("Burndown Chart", url="https://burndown.example.com"),
            Button.create("Next Sprint", url="https://nextsprint.example.com"),
        )
        .build()
    )


def build_resource_alert(
    project_name: str,
    resource_type: str,
    current_allocation: str,
    required_allocation: str,
    impact_description: str,
    requested_by: str,
    now: Optional[datetime] = None,
) -> Message:
    return (
        MessageBuilder.create()
        .text(f"Resource request for {project_name}: {resource_type}")
        .add_header(f"📋 Resource Request - {project_name}")
        .add_section(f"*Resource Type:* {resource_type}")
        .add_section(f"*Current Allocation:* {current_allocation}")
        .add_section(f"*Required Allocation:* {required_allocation}")
        .add_section(f"*Requested By:* {requested_by}")
        .add_section(f"*Request Time:* {format_timestamp(now)}")
        .add_divider()
        .add_section("⚡ *Impact Description:*")
        .add_section(impact_description)
        .add_buttons(
            Button.create("Approve Request", url="https://approve.example.com", style="primary"),
            Button.create("Resource Pool", url="https://resources.example.com"),
            Button.create("Schedule Meeting", url="https://meeting.example.com"),
        )
        .build()
    )
