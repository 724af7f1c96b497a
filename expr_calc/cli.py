"""CLI interface for expr-calc.

Commands:
- eval: Evaluate one expression
- repl: Interactive calculator shell with history
"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .calculator import Calculator
from .config import load_config
from .errors import CalculatorError
from .formatting import format_result


console = Console()
err_console = Console(stderr=True)

QUIT_COMMANDS = ("quit", "exit", "q")
HISTORY_COMMANDS = ("history", "h")
CLEAR_COMMANDS = ("clear", "c")
HELP_COMMANDS = ("help", "?")

HELP_TEXT = """\
Enter an arithmetic expression to evaluate it, e.g. [cyan](2 + 3) * 4[/cyan]

Operators: + - * / and parentheses; leading + or - sign a number.

Commands:
  history, h    Show calculation history
  clear, c      Clear calculation history
  help          Show this help
  quit, exit, q Leave the calculator"""


def _setup_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _print_error(error: CalculatorError):
    err_console.print(f"[red]Error: {escape(str(error))}[/red]")


def _print_history(calc: Calculator, count: int):
    entries = calc.history.get_last(count)
    if not entries:
        console.print("[dim]No calculations in history.[/dim]")
        return

    table = Table(title=f"Last {len(entries)} calculations")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Expression", style="white")
    table.add_column("Result", style="green", justify="right")
    table.add_column("Time", style="dim")

    for entry in entries:
        table.add_row(
            str(entry.id),
            escape(entry.expression),
            format_result(entry.result),
            entry.timestamp.astimezone().strftime("%H:%M:%S"),
        )

    console.print(table)


@click.group()
@click.version_option(version=__version__, prog_name="expr-calc")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, verbose: bool):
    """expr-calc - Arithmetic Expression Calculator.

    Evaluates expressions with + - * /, parentheses and unary signs,
    honoring operator precedence.
    """
    config = load_config(".")
    _setup_logging("DEBUG" if verbose else config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["calculator"] = Calculator(config)


@main.command(
    name="eval",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("expression", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def eval_command(ctx, expression):
    """Evaluate EXPRESSION and print the result.

    Arguments are joined with spaces, so quoting is optional:

        expr-calc eval "2 + 3 * 4"
        expr-calc eval -- -5 + 2
    """
    calc: Calculator = ctx.obj["calculator"]
    try:
        result = calc.calculate(" ".join(expression))
    except CalculatorError as e:
        _print_error(e)
        sys.exit(1)
    console.print(format_result(result), highlight=False)


@main.command()
@click.pass_context
def repl(ctx):
    """Start an interactive calculator session."""
    calc: Calculator = ctx.obj["calculator"]
    display_count = ctx.obj["config"].history_display_count

    console.print(f"[bold]expr-calc {__version__}[/bold] - type 'help' for commands")

    while True:
        try:
            line = click.prompt("calc", prompt_suffix="> ", default="", show_default=False)
        except (click.Abort, EOFError):
            console.print()
            break

        line = line.strip()
        if not line:
            continue

        command = line.lower()
        if command in QUIT_COMMANDS:
            break
        if command in HISTORY_COMMANDS:
            _print_history(calc, display_count)
            continue
        if command in CLEAR_COMMANDS:
            calc.clear_history()
            console.print("History cleared.")
            continue
        if command in HELP_COMMANDS:
            console.print(HELP_TEXT)
            continue

        try:
            result = calc.calculate(line)
        except CalculatorError as e:
            _print_error(e)
            continue
        console.print(f"= {format_result(result)}", highlight=False)

    console.print("Goodbye!")


if __name__ == "__main__":
    main()
