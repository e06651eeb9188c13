"""Plan command: build a budget group and show its monthly breakdown."""

import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from budgetplan.config import Settings, load_settings
from budgetplan.domain.budget_group import BudgetGroup
from budgetplan.domain.budget_item import parse_item_spec
from budgetplan.domain.models import ItemKind
from budgetplan.domain.summary import GroupSummary, annual_total, summarize_group
from budgetplan.errors import BudgetPlanError
from budgetplan.log import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def build_group(group_name: str, incomes: list[str], expenses: list[str]) -> BudgetGroup:
    """Build a group from NAME:AMOUNT[:PERIOD] specs.

    Raises:
        BudgetPlanError: If any spec is invalid.
    """
    group = BudgetGroup(group_name)
    for spec in incomes:
        group.add(parse_item_spec(spec, ItemKind.INCOME))
    for spec in expenses:
        group.add(parse_item_spec(spec, ItemKind.EXPENSE))
    return group


def apply_removals(group: BudgetGroup, indices: list[int]) -> None:
    """Remove items by index, in order, each against the group's current state.

    Raises:
        IndexOutOfRangeError: On the first invalid index.
    """
    for index in indices:
        removed = group.remove(index)
        logger.info("Removed item %d (%s)", index, removed.name)


def format_monthly(amount: float, settings: Settings) -> str:
    """Format a signed monthly amount with color.

    Amounts that round to zero are shown unsigned and uncolored.
    """
    rounded = settings.round_amount(amount)
    text = settings.format_amount(rounded)
    if rounded < 0:
        return f"[red]{text}[/red]"
    if rounded > 0:
        return f"[green]+{text}[/green]"
    return text


def render_group_table(summary: GroupSummary, settings: Settings) -> None:
    """Render the items of a group as a table."""
    if not summary.lines:
        console.print(f"[yellow]Group '{escape(summary.name)}' has no items[/yellow]")
        return

    table = Table(title=escape(summary.name))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Period", style="magenta")
    table.add_column("Amount", justify="right")
    table.add_column("Monthly", justify="right")

    for line in summary.lines:
        table.add_row(
            str(line.index),
            escape(line.name),
            line.kind.label,
            line.period.label,
            settings.format_amount(line.amount),
            format_monthly(line.monthly, settings),
        )

    console.print(table)


def render_totals(summary: GroupSummary, settings: Settings) -> None:
    """Render monthly totals and the annual net."""
    console.print(f"\nIncome:   {format_monthly(summary.income, settings)} / month")
    console.print(f"Expenses: {format_monthly(summary.expenses, settings)} / month")
    console.print(f"[bold]Net:      {format_monthly(summary.net, settings)} / month[/bold]")
    console.print(f"[dim]Annual net: {settings.format_amount(annual_total(summary.net))}[/dim]")


def plan_command(
    group_name: str,
    incomes: list[str],
    expenses: list[str],
    removals: list[int],
    verbose: bool = False,
) -> None:
    """Build a budget group and show its monthly breakdown."""
    try:
        settings = load_settings()
        configure_logging("DEBUG" if verbose else settings.log_level)
        group = build_group(group_name, incomes, expenses)
        apply_removals(group, removals)
    except BudgetPlanError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    summary = summarize_group(group)
    render_group_table(summary, settings)
    render_totals(summary, settings)
