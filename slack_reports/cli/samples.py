"""Sample data for each report type, used by `slack-reports report`."""

from typing import Callable, Dict

from ..messages import Message
from ..templates import (
    ScenarioResult,
    build_deployment_report,
    build_error_report,
    build_financial_report,
    build_performance_report,
    build_project_status_report,
    build_security_audit_report,
    build_test_report,
)


def sample_performance() -> Message:
    return build_performance_report(
        service_name="checkout-api",
        avg_response_time=245.7,
        total_requests=1_284_503,
        error_rate=2.4,
        cpu_usage=63.2,
        memory_usage=81.5,
        report_period="Last 24 hours",
    )


def sample_error() -> Message:
    return build_error_report(
        system_name="payments",
        error_type="DatabaseTimeoutException",
        error_message="Connection to db-primary timed out after 30000ms",
        error_count=17,
        severity="HIGH",
        affected_services="checkout-api, billing-worker",
    )


def sample_deployment() -> Message:
    return build_deployment_report(
        application_name="checkout-api",
        version="v2.14.0",
        environment="production",
        success=True,
        duration="6m 12s",
        deployed_services=["checkout-api", "billing-worker"],
        changes=["Add Apple Pay support", "Fix currency rounding in refunds"],
    )


def sample_security() -> Message:
    return build_security_audit_report(
        total_scans=42,
        vulnerabilities_found=9,
        critical=0,
        high=2,
        medium=4,
        low=3,
        affected_systems=["web-frontend", "legacy-reporting"],
        scan_duration="48m",
    )


def sample_financial() -> Message:
    return build_financial_report(
        report_period="September 2026",
        total_revenue=1_250_000.0,
        total_expenses=940_000.0,
        profit_margin=24.8,
        monthly_growth=3.6,
        top_performers=["EMEA subscriptions", "Enterprise add-ons"],
        key_metrics=["Churn: 1.9%", "ARPU: $84.20"],
    )


def sample_project() -> Message:
    return build_project_status_report(
        project_name="Mobile Checkout",
        project_manager="Jordan Lee",
        completion_percentage=72,
        current_phase="Beta",
        completed_tasks=["Payment sheet redesign", "Saved cards"],
        upcoming_tasks=["Accessibility audit", "Load testing"],
        blockers=["Waiting on PSP sandbox credentials"],
        next_milestone="Public beta on 2026-11-15",
    )


def sample_test() -> Message:
    results = [
        ScenarioResult("HOTEL", True),
        ScenarioResult("HOTEL", True),
        ScenarioResult("FLIGHT", True),
        ScenarioResult("FLIGHT", False),
        ScenarioResult("BUS", True),
        ScenarioResult("CAR", True),
        ScenarioResult("SEA", False),
        ScenarioResult("MYACCOUNT", True),
    ]
    return build_test_report(
        test_tags="@smoke @regression",
        environment="staging",
        browser="Chrome 128",
        duration_seconds=450,
        total_scenarios=len(results),
        passed_scenarios=sum(r.passed for r in results),
        failed_scenarios=sum(not r.passed for r in results),
        results=results,
        allure_report_url="https://allure.example.com/reports/latest",
        cucumber_report_url="https://cucumber.example.com/reports/latest",
    )


SAMPLES: Dict[str, Callable[[], Message]] = {
    "performance": sample_performance,
    "error": sample_error,
    "deployment": sample_deployment,
    "security": sample_security,
    "financial": sample_financial,
    "project": sample_project,
    "test": sample_test,
}
