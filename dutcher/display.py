"""Terminal output formatting with rich tables and colors."""

from decimal import Decimal
from typing import Callable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dutcher.allocation import round_currency
from dutcher.calculator import DutchingCalculator, default_label
from dutcher.config import config


def format_amount(value: Decimal) -> str:
    """Plain amount with exactly two decimals."""
    return f"{round_currency(value):.{config.decimal_places}f}"


def format_money(value: Decimal) -> str:
    """Amount with the configured currency symbol."""
    return f"{config.currency_symbol} {format_amount(value)}"


def format_odds(normalized: str) -> str:
    """Odds are shown exactly as the normalizer produced them."""
    return normalized or "-"


def copy_to_output(value: Decimal, sink: Callable[[str], None]) -> str:
    """
    Hand a value to an output collaborator, such as a clipboard.

    The value is always formatted to two decimals before the handoff.

    Returns:
        The text given to the sink
    """
    text = format_amount(value)
    sink(text)
    return text


def display_round(
    calculator: DutchingCalculator,
    odds_text: list[str] | None = None,
    console: Console | None = None,
) -> None:
    """Display every leg of the round with its stake and return."""
    console = console or Console()
    odds_text = odds_text or []

    table = Table(
        title=f"[bold blue]Dutching[/bold blue]\nInvestment: {format_money(calculator.total_investment)}",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("#", style="white")
    table.add_column("Odds", justify="right", style="yellow")
    table.add_column("Stake", justify="right", style="cyan")
    table.add_column("Return", justify="right", style="green")

    for i, leg in enumerate(calculator.legs):
        shown_odds = odds_text[i] if i < len(odds_text) else (str(leg.odds) if leg.is_active else "")
        table.add_row(
            leg.label or default_label(i),
            format_odds(shown_odds),
            format_money(leg.stake),
            format_money(calculator.leg_return(i)),
            style=None if leg.is_active else "dim",
        )

    console.print()
    console.print(table)

    profit = calculator.profit
    profit_style = "bold red" if profit < 0 else "bold green"

    summary = Panel(
        f"[bold]Profit:[/bold] [{profit_style}]{format_money(profit)}[/{profit_style}]  |  "
        f"[bold]Return:[/bold] {format_money(calculator.total_return)}  |  "
        f"[bold]Book:[/bold] {calculator.book_percent:.2f}%",
        title="Summary",
        border_style="green" if profit >= 0 else "red",
    )
    console.print(summary)


def print_header(text: str, console: Console | None = None) -> None:
    """Print a styled header."""
    (console or Console()).print(Panel(text, style="bold blue"))


def print_info(text: str, console: Console | None = None) -> None:
    """Print an info message."""
    (console or Console()).print(f"[dim]{text}[/dim]")
