"""
Financial Report Templates

Revenue, budget, quarterly and cash-flow reporting.
"""

from datetime import datetime
from typing import Optional, Sequence

from ..messages import Button, Message, MessageBuilder
from .common import (
    format_currency,
    format_list_items,
    format_percent,
    format_timestamp,
    safe_percentage,
    severity_info,
)


def evaluate_profit_status(profit_margin: float) -> str:
    if profit_margin > 20:
        return "💰 Excellent"
    if profit_margin > 10:
        return "✅ Good"
    if profit_margin > 0:
        return "⚠️ Moderate"
    return "🚨 Loss"


def evaluate_utilization(utilization: float) -> str:
    if utilization > 100:
        return "🚨 Over Budget"
    if utilization > 90:
        return "⚠️ High"
    if utilization > 75:
        return "🔶 Moderate"
    return "✅ Good"


def _growth_icon(growth: float) -> str:
    return "📈" if growth > 0 else "📉"


def build_financial_report(
    report_period: str,
    total_revenue: float,
    total_expenses: float,
    profit_margin: float,
    monthly_growth: float,
    top_performers: Sequence[str] = (),
    key_metrics: Sequence[str] = (),
    now: Optional[datetime] = None,
) -> Message:
    """
    Build a financial performance report.

    Args:
        report_period: Period covered
        total_revenue: Revenue for the period
        total_expenses: Expenses for the period
        profit_margin: Profit margin percentage
        monthly_growth: Month-over-month growth percentage
        top_performers: Best performing products / regions
        key_metrics: Free-form metric lines
        now: Report time (defaults to now)

    Returns:
        Message
    """
    profit_status = evaluate_profit_status(profit_margin)
    net_profit = total_revenue - total_expenses
    growth_label = "Positive" if monthly_growth > 0 else "Negative"

    return (
        MessageBuilder.create()
        .text(f"Financial report {report_period}: net profit {format_currency(net_profit)}")
        .add_header("💼 Financial Performance Report")
        .add_section(f"*Report Period:* {report_period}\n*Generated:* {format_timestamp(now)}")
        .add_divider()
        .add_section("💰 *Financial Overview:*")
        .add_table(
            ["Metric", "Amount", "Status"],
            [
                ["Total Revenue", format_currency(total_revenue), "💵 Tracked"],
                ["Total Expenses", format_currency(total_expenses), "💸 Monitored"],
                ["Net Profit", format_currency(net_profit), profit_status],
                ["Profit Margin", format_percent(profit_margin), profit_status],
                ["Monthly Growth", format_percent(monthly_growth),
                 f"{_growth_icon(monthly_growth)} {growth_label}"],
            ],
        )
        .add_section("🏆 *Top Performers:*")
        .add_section(format_list_items(top_performers))
        .add_divider()
        .add_section("📊 *Key Metrics:*")
        .add_section(format_list_items(key_metrics))
        .add_context("💼 Finance Team", "📈 Business Intelligence", "💹 Market Analysis")
        .add_buttons(
            Button.create("Full Dashboard", url="https://finance.example.com", style="primary"),
            Button.create("Export Data", url="https://export.example.com"),
            Button.create("Schedule Meeting", url="https://meeting.example.com"),
        )
        .build()
    )


def build_revenue_milestone(
    milestone: str,
    amount: float,
    period: str,
    growth_rate: float,
    now: Optional[datetime] = None,
) -> Message:
    return (
        MessageBuilder.create()
        .text(f"Revenue milestone achieved: {milestone}")
        .add_header("🎉 Revenue Milestone Achieved!")
        .add_section(f"*Milestone:* {milestone}")
        .add_section(f"*Amount:* {format_currency(amount)}")
        .add_section(f"*Period:* {period}")
        .add_section(f"*Growth Rate:* {format_percent(growth_rate)}")
        .add_section(f"*Achieved:* {format_timestamp(now)}")
        .add_buttons(
            Button.create("View Details", url="https://revenue.example.com", style="primary"),
            Button.create("Share News", url="https://share.example.com"),
        )
        .build()
    )


def build_budget_alert(
    department: str,
    budget_category: str,
    budget_limit: float,
    current_spend: float,
    utilization: float,
    alert_level: str,
    now: Optional[datetime] = None,
) -> Message:
    """Build a budget utilization alert for a department."""
    info = severity_info(alert_level, default_icon="📊")
    remaining = budget_limit - current_spend

    return (
        MessageBuilder.create()
        .text(f"Budget alert for {department}: {format_percent(utilization)} used")
        .add_header(f"{info.icon} Budget Alert - {department}")
        .add_section(f"*Category:* {budget_category}")
        .add_section(f"*Alert Level:* {info.icon} {info.label}")
        .add_divider()
        .add_section("💰 *Budget Status:*")
        .add_table(
            ["Metric", "Amount", "Status"],
            [
                ["Budget Limit", format_currency(budget_limit), "🎯 Target"],
                ["Current Spend", format_currency(current_spend), "💸 Used"],
                ["Remaining", format_currency(remaining),
                 "✅ Available" if remaining > 0 else "🚨 Exceeded"],
                ["Utilization", format_percent(utilization), evaluate_utilization(utilization)],
            ],
        )
        .add_section(f"*Alert Time:* {format_timestamp(now)}")
        .add_buttons(
            Button.create("Review Budget", url="https://budget.example.com", style="primary"),
            Button.create("Request Approval", url="https://approval.example.com"),
            Button.create("Contact Finance", url="https://finance-team.example.com"),
        )
        .build()
    )


def build_quarterly_summary(
    quarter: str,
    revenue: float,
    expenses: float,
    profit: float,
    previous_quarter_revenue: float,
    achievements: Sequence[str] = (),
    challenges: Sequence[str] = (),
    now: Optional[datetime] = None,
) -> Message:
    """
    Build a quarterly financial summary.

    Quarter-over-quarter growth is reported as 0% when the previous
    quarter had no revenue.
    """
    qoq_growth = safe_percentage(revenue - previous_quarter_revenue, previous_quarter_revenue)
    profit_margin = safe_percentage(profit, revenue)

    builder = (
        MessageBuilder.create()
        .text(f"{quarter} financial summary: revenue {format_currency(revenue)}")
        .add_header(f"📊 {quarter} Financial Summary")
        .add_section(f"*Report Generated:* {format_timestamp(now)}")
        .add_divider()
        .add_section("💰 *Quarter Highlights:*")
        .add_table(
            ["Metric", "Amount", "QoQ Change"],
            [
                ["Revenue", format_currency(revenue),
                 f"{_growth_icon(qoq_growth)} {format_percent(qoq_growth)}"],
                ["Expenses", format_currency(expenses), "💸 Managed"],
                ["Net Profit", format_currency(profit), evaluate_profit_status(profit_margin)],
            ],
        )
    )

    if achievements:
        builder.add_section("🏆 *Key Achievements:*")
        builder.add_section(format_list_items(achievements))
        builder.add_divider()

    if challenges:
        builder.add_section("⚠️ *Challenges & Focus Areas:*")
        builder.add_section(format_list_items(challenges))
        builder.add_divider()

    return (
        builder
        .add_context("📈 Quarterly Review", "💼 Executive Summary", f"📅 {quarter}")
        .add_buttons(
            Button.create("Full Report", url="https://quarterly.example.com", style="primary"),
            Button.create("Board Presentation", url="https://board.example.com"),
            Button.create("Next Quarter Plan", url="https://planning.example.com"),
        )
        .build()
    )


def build_cash_flow_alert(
    current_balance: float,
    projected_cash_flow: float,
    days_remaining: int,
    alert_type: str,
    now: Optional[datetime] = None,
) -> Message:
    info = severity_info(alert_type, default_icon="📊")

    return (
        MessageBuilder.create()
        .text(f"Cash flow alert: {days_remaining} days of cash remaining")
        .add_header(f"{info.icon} Cash Flow Alert")
        .add_section(f"*Alert Type:* {info.icon} {info.label}")
        .add_section(f"*Current Balance:* {format_currency(current_balance)}")
        .add_section(f"*Projected Cash Flow:* {format_currency(projected_cash_flow)}")
        .add_section(f"*Days of Cash Remaining:* {days_remaining} days")
        .add_section(f"*Alert Time:* {format_timestamp(now)}")
        .add_buttons(
            Button.create("View Cash Flow", url="https://cashflow.example.com", style="primary"),
            Button.create("Emergency Plan", url="https://emergency.example.com", style="danger"),
            Button.create("Contact CFO", url="https://cfo.example.com"),
        )
        .build()
    )
