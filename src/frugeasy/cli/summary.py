#!/usr/bin/env python3
"""
Summary CLI - Monthly Analysis Commands

Command-line interface for monthly reports, nudges and daily activity.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

import click

from ..analysis import build_monthly_report, daily_series, filter_by_month, smart_nudges
from ..analysis.report import MonthlyReport
from ..core.config import get_config
from ..core.currency import format_currency, format_percent
from ..core.dates import MonthWindow, parse_instant
from ..core.json_utils import format_json
from ..core.loader import load_budgets, load_transactions
from ..core.models import Transaction

logger = logging.getLogger(__name__)


def _resolve_now(now: str | None) -> datetime:
    if not now:
        return datetime.now(timezone.utc)
    parsed = parse_instant(now)
    if parsed is None:
        raise click.BadParameter(f"Cannot parse instant: {now}", param_hint="--now")
    return parsed


def _resolve_window(month: str | None, now: datetime) -> MonthWindow:
    if not month:
        return MonthWindow.containing(now)
    try:
        return MonthWindow.from_key(month)
    except ValueError as e:
        raise click.BadParameter(f"Expected YYYY-MM, got {month}", param_hint="--month") from e


def _load(input_path: str) -> list[Transaction]:
    try:
        return load_transactions(input_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"❌ Error loading transactions: {e}", err=True)
        raise click.ClickException(str(e)) from e


def _render_report(report: MonthlyReport, currency: str) -> str:
    def money(amount: float) -> str:
        return format_currency(amount, currency)

    lines = [
        f"[SUMMARY] {report.window.label}",
        f"   Income:  {money(report.totals.income)}",
        f"   Expense: {money(report.totals.expense)}",
        f"   Net:     {money(report.totals.net)}",
        "",
        f"[PACE] Day {report.days_elapsed} of {report.window.days_in_month}",
        f"   Weekly Burn: {money(report.weekly_burn)}",
        f"   Projected Month-End Expense: {money(report.projected_expense)}",
    ]

    if report.expense_categories:
        lines.append("")
        lines.append("[CATEGORIES] Expense by category:")
        for entry in report.expense_categories:
            lines.append(f"   {entry.category.value}: {money(entry.total)}")

    if report.comparison:
        lines.append("")
        lines.append("[TRENDS] Versus last month:")
        for comparison in report.comparison:
            lines.append(
                f"   {comparison.category.value}: {money(comparison.current)}"
                f" (was {money(comparison.previous)}, {format_percent(comparison.delta_pct)}%)"
            )

    if report.largest:
        lines.append("")
        lines.append("[LARGEST] Largest transactions:")
        for record in report.largest:
            lines.append(f"   {record.date[:10]} {record.category.value}: {money(record.amount)} ({record.type.value})")

    if report.unusual:
        lines.append("")
        lines.append("[UNUSUAL] Unusually large transactions:")
        for record in report.unusual:
            lines.append(f"   {record.date[:10]} {record.category.value}: {money(record.amount)}")

    if report.budgets:
        lines.append("")
        lines.append("[BUDGETS] Budget progress:")
        for progress in report.budgets:
            flag = " OVER" if progress.is_over_budget else ""
            lines.append(
                f"   {progress.category.value}: {money(progress.spent)} of {money(progress.budget)}"
                f" ({format_percent(progress.used_pct)}%){flag}"
            )

    if report.nudges:
        lines.append("")
        lines.append("[NUDGES]")
        for nudge in report.nudges:
            lines.append(f"   - {nudge}")

    return "\n".join(lines)


@click.group()
def summary() -> None:
    """Monthly analysis of a transaction snapshot."""
    pass


@summary.command()
@click.option("--input", "input_path", required=True, help="Transaction snapshot (JSON or CSV)")
@click.option("--month", help="Month to analyze (YYYY-MM), defaults to the current month")
@click.option("--now", help="Current instant (ISO-8601), defaults to the system clock")
@click.option("--budgets", "budgets_path", help="Budget file (JSON or CSV)")
@click.option("--limit", type=int, help="Number of largest transactions to list")
@click.option(
    "--format", type=click.Choice(["text", "json"]), default="text", help="Output format (default: text)"
)
@click.option("--save", is_flag=True, help="Save the report to the output directory instead of stdout")
@click.option("--output-dir", help="Override output directory (implies --save)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def report(
    ctx: click.Context,
    input_path: str,
    month: str | None,
    now: str | None,
    budgets_path: str | None,
    limit: int | None,
    format: str,
    save: bool,
    output_dir: str | None,
    verbose: bool,
) -> None:
    """
    Generate the monthly report for a snapshot.

    Saved reports are named report_YYYY-MM.txt or report_YYYY-MM.json.

    Examples:
      frugeasy summary report --input transactions.json
      frugeasy summary report --input transactions.csv --month 2026-02 --now 2026-02-14T12:00:00Z
      frugeasy summary report --input transactions.json --budgets budgets.json --format json --save
    """
    config = get_config()
    current_time = _resolve_now(now)
    window = _resolve_window(month, current_time)
    largest_limit = limit if limit is not None else config.analysis.largest_limit
    if largest_limit <= 0:
        raise click.BadParameter("must be positive", param_hint="--limit")

    if verbose or (ctx.obj or {}).get("verbose", False):
        click.echo("Monthly Report")
        click.echo(f"Snapshot: {input_path}")
        click.echo(f"Month: {window.key}")
        click.echo(f"As of: {current_time.isoformat()}")
        if budgets_path:
            click.echo(f"Budgets: {budgets_path}")
        click.echo()

    records = _load(input_path)

    budgets = []
    if budgets_path:
        try:
            budgets = load_budgets(budgets_path)
        except (FileNotFoundError, ValueError) as e:
            click.echo(f"❌ Error loading budgets: {e}", err=True)
            raise click.ClickException(str(e)) from e

    result = build_monthly_report(records, window, current_time, budgets=budgets, largest_limit=largest_limit)

    if format == "json":
        rendered = format_json(result.to_dict())
    else:
        rendered = _render_report(result, config.analysis.currency)

    if save or output_dir:
        output_path = Path(output_dir) if output_dir else config.output_dir
        output_path.mkdir(parents=True, exist_ok=True)
        output_file = output_path / f"report_{window.key}.{'json' if format == 'json' else 'txt'}"
        output_file.write_text(rendered + "\n", encoding="utf-8")
        logger.info("Wrote %s report to %s", window.key, output_file)
        click.echo(f"✅ Report saved to: {output_file}")
    else:
        click.echo(rendered)


@summary.command()
@click.option("--input", "input_path", required=True, help="Transaction snapshot (JSON or CSV)")
@click.option("--month", help="Month to analyze (YYYY-MM), defaults to the current month")
@click.option("--now", help="Current instant (ISO-8601), defaults to the system clock")
def nudges(input_path: str, month: str | None, now: str | None) -> None:
    """
    Show short observations about a month versus the month before.

    Example:
      frugeasy summary nudges --input transactions.json --month 2026-02
    """
    window = _resolve_window(month, _resolve_now(now))
    previous_window = window.previous()
    records = _load(input_path)

    current = filter_by_month(records, window.year, window.month_index)
    previous = filter_by_month(records, previous_window.year, previous_window.month_index)

    messages = smart_nudges(current, previous)
    if not messages:
        click.echo(f"Nothing to report for {window.label}.")
        return
    for message in messages:
        click.echo(f"- {message}")


@summary.command()
@click.option("--input", "input_path", required=True, help="Transaction snapshot (JSON or CSV)")
@click.option("--month", help="Month to analyze (YYYY-MM), defaults to the current month")
@click.option("--now", help="Current instant (ISO-8601), defaults to the system clock")
@click.option("--active-only", is_flag=True, help="Only list days with activity")
def daily(input_path: str, month: str | None, now: str | None, active_only: bool) -> None:
    """
    Show income and expense for each day of a month.

    Example:
      frugeasy summary daily --input transactions.json --month 2026-02 --active-only
    """
    config = get_config()
    window = _resolve_window(month, _resolve_now(now))
    records = _load(input_path)

    click.echo(f"{window.label}")
    click.echo(f"{'Day':>4}  {'Income':>14}  {'Expense':>14}")
    for point in daily_series(records, window.year, window.month_index):
        if active_only and not (point.income or point.expense):
            continue
        income = format_currency(point.income, config.analysis.currency)
        expense = format_currency(point.expense, config.analysis.currency)
        click.echo(f"{point.day:>4}  {income:>14}  {expense:>14}")


if __name__ == "__main__":
    summary()
