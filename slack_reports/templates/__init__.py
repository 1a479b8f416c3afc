"""
Report Templates

Data-to-Message functions for each report type, plus the report catalogue.
"""

from typing import Callable, List, Protocol

from ..messages import Message
from .common import Severity, SeverityInfo, severity_info
from .deployment import (
    build_deployment_notification,
    build_deployment_report,
    build_deployment_started,
    build_rollback_notification,
)
from .errors import build_error_report, build_quick_error_alert
from .financial import (
    build_budget_alert,
    build_cash_flow_alert,
    build_financial_report,
    build_quarterly_summary,
    build_revenue_milestone,
)
from .performance import build_performance_report
from .project import (
    build_milestone_notification,
    build_project_status_report,
    build_resource_alert,
    build_risk_alert,
    build_sprint_summary,
)
from .qa import ScenarioResult, build_quick_test_summary, build_test_report
from .security import (
    build_compliance_report,
    build_critical_vulnerability_alert,
    build_scan_started,
    build_security_audit_report,
)


class MessageTemplate(Protocol):
    """Anything that can produce a finished Message."""

    def build_message(self) -> Message:
        ...


TemplateFunction = Callable[[], Message]

REPORT_TYPES = {
    "Performance Report":
        "Tracks system performance metrics like response time, error rate, and resource usage",
    "Error Report":
        "Reports system errors, exceptions, and incidents with severity levels",
    "Deployment Report":
        "Notifies about application deployments, releases, and rollbacks",
    "Security Audit Report":
        "Reports security scan results, vulnerabilities, and compliance status",
    "Financial Report":
        "Tracks financial metrics, revenue, expenses, and budget status",
    "Project Status Report":
        "Updates on project progress, milestones, and team collaboration",
    "Test Report":
        "Reports automated test execution results with vertical success rates and metrics",
    "Milestone Notification":
        "Announces a completed project milestone and its deliverables",
    "Risk Alert":
        "Flags a project risk with its level, impact, owner and mitigation actions",
    "Sprint Summary":
        "Summarizes sprint velocity, carried-over work and retrospective items",
    "Budget Alert":
        "Warns when a department's spend approaches or exceeds its budget",
    "Compliance Report":
        "Summarizes passed, failed and not-applicable controls for a framework",
    "Vulnerability Alert":
        "Alerts on a critical vulnerability with CVE and recommended action",
}

UNKNOWN_REPORT_DESCRIPTION = "Report type description not available"


def get_available_report_types() -> List[str]:
    return list(REPORT_TYPES)


def get_report_type_description(report_type: str) -> str:
    """Look up a report type description, case-insensitively."""
    wanted = (report_type or "").strip().lower()
    for name, description in REPORT_TYPES.items():
        if name.lower() == wanted:
            return description
    return UNKNOWN_REPORT_DESCRIPTION


__all__ = [
    'MessageTemplate',
    'TemplateFunction',
    'REPORT_TYPES',
    'get_available_report_types',
    'get_report_type_description',
    'Severity',
    'SeverityInfo',
    'severity_info',
    'ScenarioResult',
    'build_performance_report',
    'build_error_report',
    'build_quick_error_alert',
    'build_deployment_report',
    'build_deployment_notification',
    'build_deployment_started',
    'build_rollback_notification',
    'build_security_audit_report',
    'build_critical_vulnerability_alert',
    'build_compliance_report',
    'build_scan_started',
    'build_financial_report',
    'build_revenue_milestone',
    'build_budget_alert',
    'build_quarterly_summary',
    'build_cash_flow_alert',
    'build_project_status_report',
    'build_milestone_notification',
    'build_risk_alert',
    'build_sprint_summary',
    'build_resource_alert',
    'build_test_report',
    'build_quick_test_summary',
]
