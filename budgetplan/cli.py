"""CLI entry point for budgetplan."""

import typer

from budgetplan.commands.admin import init_command, periods_command
from budgetplan.commands.plan import plan_command

app = typer.Typer(
    name="budgetplan",
    help="Plan a budget from recurring income and expenses",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Plan a budget from recurring income and expenses."""
    pass


@app.command()
def plan(
    group: str = typer.Option("Budget", "--group", "-g", help="Name of the budget group"),
    income: list[str] = typer.Option([], "--income", "-i", help="Income as NAME:AMOUNT[:PERIOD] (repeatable)"),
    expense: list[str] = typer.Option([], "--expense", "-e", help="Expense as NAME:AMOUNT[:PERIOD] (repeatable)"),
    remove: list[int] = typer.Option([], "--remove", "-r", help="Remove the item at this index (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Show the sorted items of a budget group and its monthly totals."""
    plan_command(group, income, expense, remove, verbose)


@app.command()
def periods() -> None:
    """List the supported recurrence periods."""
    periods_command()


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the budgetplan configuration file."""
    init_command(force)


if __name__ == "__main__":
    app()
