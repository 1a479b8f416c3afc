"""
Test Execution Report Templates

Automated test run results with per-vertical success bars.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from ..messages import Button, Message, MessageBuilder
from .common import format_timestamp

SUCCESS_CELL = "🟩"
FAIL_CELL = "🟥"
BAR_CELLS = 10
VERTICAL_NAME_WIDTH = 10
RUN_DATE_FORMAT = "%d-%m-%Y %H:%M"


@dataclass
class ScenarioResult:
    """Outcome of one scenario, grouped by vertical (product area)."""

    vertical: str
    passed: bool


@dataclass
class VerticalTally:
    passed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    def add(self, passed: bool) -> None:
        if passed:
            self.passed += 1
        else:
            self.failed += 1


def calculate_success_rate(total: int, passed: int) -> str:
    """Success rate with one decimal, "0" when there were no scenarios."""
    if total == 0:
        return "0"
    return f"{passed / total * 100:.1f}"


def format_execution_time(seconds: float) -> str:
    """Format a duration as 1h 2m 3s / 2m 3s / 3s."""
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}h {minutes}m {secs}s"
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def tally_verticals(results: Sequence[ScenarioResult]) -> Dict[str, VerticalTally]:
    """Group results by vertical, sorted by vertical name."""
    tallies: Dict[str, VerticalTally] = defaultdict(VerticalTally)
    for result in results:
        tallies[result.vertical].add(result.passed)
    return dict(sorted(tallies.items()))


def vertical_result_line(name: str, tally: VerticalTally) -> str:
    """Fixed-width line: NAME │ 🟩🟩🟥... passed/total (pct%)."""
    rate = tally.passed / tally.total if tally.total else 0.0
    # half-up rounding
    passed_cells = int(rate * BAR_CELLS + 0.5)
    bar = SUCCESS_CELL * passed_cells + FAIL_CELL * (BAR_CELLS - passed_cells)
    return (
        f"{name.upper():<{VERTICAL_NAME_WIDTH}} │ {bar} "
        f"{tally.passed}/{tally.total} ({int(rate * 100 + 0.5)}%)"
    )


def build_test_report(
    test_tags: str,
    environment: str,
    browser: str,
    duration_seconds: float,
    total_scenarios: int,
    passed_scenarios: int,
    failed_scenarios: int,
    results: Sequence[ScenarioResult],
    allure_report_url: str,
    cucumber_report_url: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Message:
    """
    Build a test execution report.

    Args:
        test_tags: Tags that were executed (e.g. "@smoke @regression")
        environment: Execution environment
        browser: Browser used
        duration_seconds: Run duration
        total_scenarios: Total scenarios
        passed_scenarios: Passed scenarios
        failed_scenarios: Failed scenarios
        results: Per-scenario results for the vertical chart
        allure_report_url: Allure report link
        cucumber_report_url: Cucumber report link (button omitted if empty)
        now: Report time (defaults to now)

    Returns:
        Message
    """
    env = environment.upper()
    success_rate = calculate_success_rate(total_scenarios, passed_scenarios)

    builder = (
        MessageBuilder.create()
        .text(f"{env} {test_tags}: {passed_scenarios}/{total_scenarios} passed")
        .add_header(f"{env} {test_tags} TEST RESULTS")
        .add_context(
            f"*Env:* {env}",
            f"*Browser:* {browser}",
            f"*Date:* {format_timestamp(now, RUN_DATE_FORMAT)}",
            f"*Duration:* {format_execution_time(duration_seconds)}",
        )
        .add_divider()
        .add_section("*Test Results Summary:*")
        .add_context(
            f"• :bar_chart: Total Scenarios: {total_scenarios}\n"
            f"• :white_check_mark: Passed: {passed_scenarios}\n"
            f"• :x: Failed: {failed_scenarios}\n"
            f"• :chart_with_upwards_trend: Success Rate: {success_rate}%"
        )
        .add_divider()
        .add_header("🏢 Verticals Success Rate Chart")
    )

    for name, tally in tally_verticals(results).items():
        builder.add_section(f"`{vertical_result_line(name, tally)}`")

    builder.add_divider()

    buttons: List[Button] = []
    if cucumber_report_url:
        buttons.append(Button.create("🥒 Cucumber Report", url=cucumber_report_url, style="primary"))
    buttons.append(Button.create("✨ Allure Report", url=allure_report_url, style="primary"))

    return builder.add_buttons(*buttons).build()


def build_quick_test_summary(
    test_tags: str,
    environment: str,
    total_scenarios: int,
    passed_scenarios: int,
    failed_scenarios: int,
    duration: str,
    now: Optional[datetime] = None,
) -> Message:
    """Build a short pass/fail summary of a test run."""
    all_passed = failed_scenarios == 0
    status = "✅ ALL TESTS PASSED" if all_passed else "⚠️ SOME TESTS FAILED"
    icon = "🎉" if all_passed else "⚠️"
    success_rate = calculate_success_rate(total_scenarios, passed_scenarios)

    return (
        MessageBuilder.create()
        .text(f"Test run {test_tags}: {status}")
        .add_header(f"{icon} Test Execution Complete")
        .add_section(f"*Environment:* {environment.upper()}")
        .add_section(f"*Tags:* {test_tags}")
        .add_section(f"*Status:* {status}")
        .add_section(f"*Results:* {passed_scenarios}/{total_scenarios} ({success_rate}%)")
        .add_section(f"*Duration:* {duration}")
        .add_section(f"*Completed:* {format_timestamp(now, RUN_DATE_FORMAT)}")
        .build()
    )
