"""Admin commands for configuration and reference listings."""

import sys

from rich.console import Console
from rich.table import Table

from budgetplan.config import create_default_config, get_config_path
from budgetplan.domain.models import PERIOD_ALIASES, Period

console = Console()


def init_command(force: bool = False) -> None:
    """Write the default budgetplan configuration."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if not force and config_path.exists():
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'budgetplan init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def periods_command() -> None:
    """List supported periods and the names accepted for them."""
    table = Table(title="Periods")
    table.add_column("Period", style="cyan")
    table.add_column("Months", justify="right")
    table.add_column("Accepted names", style="dim")

    for period in Period:
        aliases = [str(period.months)] + [alias for alias, p in PERIOD_ALIASES.items() if p is period]
        table.add_row(period.label, str(period.months), ", ".join(aliases))

    console.print(table)
