"""
Security Audit Report Templates

Vulnerability scans, critical findings and compliance status.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from ..messages import Button, Message, MessageBuilder
from .common import (
    Severity,
    format_list_items,
    format_percent,
    format_timestamp,
    safe_percentage,
    severity_info,
)


def determine_overall_risk(critical: int, high: int, medium: int) -> str:
    """Overall risk level from vulnerability counts."""
    if critical > 0:
        level = Severity.CRITICAL
    elif high > 0:
        level = Severity.HIGH
    elif medium > 5:
        level = Severity.MEDIUM
    else:
        return "✅ LOW"
    return f"{severity_info(level.value).icon} {level.value}"


def _action_required(count: int, timeframe: str) -> str:
    return timeframe if count > 0 else "None"


def _recommended_actions(critical: int, high: int) -> str:
    actions: List[str] = []
    if critical > 0:
        actions += [
            "*CRITICAL*: Immediate patch deployment required",
            "Isolate affected systems if necessary",
            "Notify security incident response team",
        ]
    if high > 0:
        actions += [
            "Review and prioritize high severity vulnerabilities",
            "Schedule emergency patching within 24 hours",
        ]
    actions += [
        "Conduct penetration testing on affected systems",
        "Update security policies and procedures",
        "Schedule regular security training for team",
    ]
    return format_list_items(actions)


def build_security_audit_report(
    total_scans: int,
    vulnerabilities_found: int,
    critical: int,
    high: int,
    medium: int,
    low: int,
    affected_systems: Sequence[str],
    scan_duration: str,
    now: Optional[datetime] = None,
) -> Message:
    """
    Build a security audit report.

    Args:
        total_scans: Systems scanned
        vulnerabilities_found: Total vulnerabilities discovered
        critical: Critical findings
        high: High severity findings
        medium: Medium severity findings
        low: Low severity findings
        affected_systems: Systems with findings
        scan_duration: Human-readable scan duration
        now: Report time (defaults to now)

    Returns:
        Message
    """
    timestamp = format_timestamp(now)
    overall_risk = determine_overall_risk(critical, high, medium)

    return (
        MessageBuilder.create()
        .text(f"Security audit: {vulnerabilities_found} vulnerabilities, risk {overall_risk}")
        .add_header("🔒 Security Audit Report")
        .add_section(f"*Scan Completed:* {timestamp}\n*Duration:* {scan_duration}")
        .add_section(f"*Systems Scanned:* {total_scans}\n*Overall Risk Level:* {overall_risk}")
        .add_section(f"*Vulnerabilities Found:* {vulnerabilities_found}")
        .add_divider()
        .add_section("🛡️ *Vulnerability Summary:*")
        .add_table(
            ["Severity", "Count", "Action Required"],
            [
                ["🚨 Critical", str(critical), _action_required(critical, "Immediate")],
                ["⚠️ High", str(high), _action_required(high, "Within 24h")],
                ["🔶 Medium", str(medium), _action_required(medium, "Within 1 week")],
                ["ℹ️ Low", str(low), _action_required(low, "Next cycle")],
            ],
        )
        .add_section("🎯 *Affected Systems:*")
        .add_section(format_list_items(affected_systems, empty_text="No systems affected"))
        .add_divider()
        .add_section("📋 *Recommended Actions:*")
        .add_section(_recommended_actions(critical, high))
        .add_context("🔍 Security Team", "🛡️ Automated Scanning", "📊 Compliance Report")
        .add_buttons(
            Button.create("View Details", url="https://security.example.com", style="primary"),
            Button.create("Download Report", url="https://reports.example.com"),
            Button.create("Schedule Review", url="https://calendar.example.com"),
        )
        .build()
    )


def build_critical_vulnerability_alert(
    system_name: str,
    vulnerability_type: str,
    cve_id: str,
    description: str,
    recommended_action: str,
    now: Optional[datetime] = None,
) -> Message:
    return (
        MessageBuilder.create()
        .text(f"CRITICAL vulnerability {cve_id} on {system_name}")
        .add_header("🚨 CRITICAL VULNERABILITY DETECTED")
        .add_section(f"*System:* {system_name}")
        .add_section(f"*Vulnerability:* {vulnerability_type}")
        .add_section(f"*CVE ID:* `{cve_id}`")
        .add_section(f"*Description:* {description}")
        .add_section(f"*Detected:* {format_timestamp(now)}")
        .add_divider()
        .add_section("⚡ *IMMEDIATE ACTION REQUIRED:*")
        .add_section(recommended_action)
        .add_buttons(
            Button.create("Patch Now", url="https://patch.example.com", style="danger"),
            Button.create("View Details", url="https://vuln.example.com", style="primary"),
            Button.create("Create Incident", url="https://incident.example.com"),
        )
        .build()
    )


def compliance_status(score: float) -> str:
    if score >= 95:
        return "✅ COMPLIANT"
    if score >= 80:
        return "⚠️ PARTIAL"
    return "🚨 NON-COMPLIANT"


def build_compliance_report(
    framework: str,
    total_controls: int,
    passed_controls: int,
    failed_controls: int,
    not_applicable_controls: int,
    compliance_score: float,
    now: Optional[datetime] = None,
) -> Message:
    """Build a compliance status report for one framework (SOC 2, ISO 27001, ...)."""
    timestamp = format_timestamp(now)

    def share(count: int) -> str:
        return format_percent(safe_percentage(count, total_controls))

    return (
        MessageBuilder.create()
        .text(f"{framework} compliance: {format_percent(compliance_score)}")
        .add_header(f"📋 {framework} Compliance Report")
        .add_section(f"*Assessment Date:* {timestamp}")
        .add_section(f"*Compliance Score:* {format_percent(compliance_score)}")
        .add_section(f"*Status:* {compliance_status(compliance_score)}")
        .add_divider()
        .add_section("📊 *Control Summary:*")
        .add_table(
            ["Status", "Count", "Percentage"],
            [
                ["✅ Passed", str(passed_controls), share(passed_controls)],
                ["❌ Failed", str(failed_controls), share(failed_controls)],
                ["➖ N/A", str(not_applicable_controls), share(not_applicable_controls)],
            ],
        )
        .add_context("🏛️ Compliance Team", f"📋 {framework}", f"📅 {timestamp}")
        .add_buttons(
            Button.create("Full Report", url="https://compliance.example.com", style="primary"),
            Button.create("Remediation Plan", url="https://remediation.example.com"),
            Button.create("Audit Trail", url="https://audit.example.com"),
        )
        .build()
    )


def build_scan_started(
    scan_type: str,
    system_count: int,
    estimated_duration: str,
    now: Optional[datetime] = None,
) -> Message:
    return (
        MessageBuilder.create()
        .text(f"Security scan started: {scan_type}")
        .add_header("🔍 Security Scan Started")
        .add_section(f"*Scan Type:* {scan_type}")
        .add_section(f"*Systems:* {system_count}")
        .add_section(f"*Started:* {format_timestamp(now)}")
        .add_section(f"*Estimated Duration:* {estimated_duration}")
        .add_buttons(
            Button.create("Monitor Progress", url="https://scan.example.com", style="primary"),
            Button.create("Cancel Scan", url="https://cancel-scan.example.com"),
        )
        .build()
    )
