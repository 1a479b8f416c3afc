"""
Performance Report Template

Service health summary: response time, throughput, error rate and resource usage.
"""

from datetime import datetime
from typing import Optional

from ..messages import Button, Message, MessageBuilder
from .common import format_timestamp


def determine_health_status(error_rate: float) -> str:
    """Overall health based on error rate (percent)."""
    if error_rate < 5:
        return "✅ HEALTHY"
    if error_rate < 15:
        return "⚠️ WARNING"
    return "🚨 CRITICAL"


def evaluate_response_time(response_time_ms: float) -> str:
    if response_time_ms < 200:
        return "✅ Good"
    if response_time_ms < 500:
        return "⚠️ Fair"
    return "🚨 Poor"


def evaluate_error_rate(error_rate: float) -> str:
    if error_rate < 5:
        return "✅ Good"
    if error_rate < 15:
        return "⚠️ Warning"
    return "🚨 Critical"


def evaluate_resource_usage(usage: float, warning: float, critical: float) -> str:
    """Evaluate CPU / memory usage against warning and critical thresholds."""
    if usage < warning:
        return "✅ Normal"
    if usage < critical:
        return "⚠️ High"
    return "🚨 Critical"


def build_performance_report(
    service_name: str,
    avg_response_time: float,
    total_requests: int,
    error_rate: float,
    cpu_usage: float,
    memory_usage: float,
    report_period: str,
    now: Optional[datetime] = None,
) -> Message:
    """
    Build a performance report message.

    Args:
        service_name: Monitored service
        avg_response_time: Average response time in milliseconds
        total_requests: Requests processed in the period
        error_rate: Error rate percentage
        cpu_usage: CPU usage percentage
        memory_usage: Memory usage percentage
        report_period: Human-readable period covered
        now: Report time (defaults to now)

    Returns:
        Message
    """
    timestamp = format_timestamp(now)

    return (
        MessageBuilder.create()
        .text(f"{service_name} performance report: {determine_health_status(error_rate)}")
        .add_header(f"🚀 {service_name} Performance Report")
        .add_section(f"*Report Period:* {report_period}\n*Generated:* {timestamp}")
        .add_divider()
        .add_section(f"*Overall Status:* {determine_health_status(error_rate)}")
        .add_section("📊 *Key Metrics:*")
        .add_table(
            ["Metric", "Value", "Status"],
            [
                ["Average Response Time", f"{avg_response_time:.2f} ms",
                 evaluate_response_time(avg_response_time)],
                ["Total Requests", f"{total_requests:,}", "📈 Tracked"],
                ["Error Rate", f"{error_rate:.2f}%", evaluate_error_rate(error_rate)],
                ["CPU Usage", f"{cpu_usage:.1f}%", evaluate_resource_usage(cpu_usage, 70, 85)],
                ["Memory Usage", f"{memory_usage:.1f}%",
                 evaluate_resource_usage(memory_usage, 80, 90)],
            ],
        )
        .add_context("📋 Automated Performance Monitoring", "🕐 Next Report: 1 hour")
        .add_buttons(
            Button.create("View Dashboard", url="https://dashboard.example.com", style="primary"),
            Button.create("Download Report", url="https://reports.example.com"),
            Button.create("Alert Settings", url="https://settings.example.com"),
        )
        .build()
    )
