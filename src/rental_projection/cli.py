"""
Interactive Rich CLI for the rental property projection.

Flow:
  1. Banner
  2. Input prompts (pre-filled with the demonstration values)
  3. Summary panel
  4. Yearly projection table
  5. Optional plain-text export
  6. Optional chart export (PNG)

With --defaults the prompts are skipped and the demonstration values are used;
--export and --charts then write the report and charts without asking.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError as InputTypeError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt
from rich.table import Table
from rich.text import Text

from rental_projection.charts import save_charts
from rental_projection.data.defaults import DEFAULT_INPUTS, INPUT_LABELS
from rental_projection.engine import compute
from rental_projection.errors import Err
from rental_projection.formatting import format_inr, format_lakh, format_pct
from rental_projection.models import LoanInputs, ProjectionResult
from rental_projection.report import generate_report_text
from rental_projection.summary import summarize

console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


# ── Step 1: Banner ────────────────────────────────────────────────────────────

def show_banner() -> None:
    title = Text("Rental Property Loan & Wealth Projection", style="bold cyan")
    subtitle = Text(
        "EMI, amortization, rental income and net wealth over the loan tenure",
        style="dim",
    )
    console.print(Panel(f"[bold]{title}[/bold]\n{subtitle}", expand=False, border_style="cyan"))
    console.print()


# ── Step 2: Inputs ────────────────────────────────────────────────────────────

def prompt_inputs(defaults: dict | None = None) -> dict:
    """Ask for every input; `defaults` pre-fills the answers (last entry on retry)."""
    defaults = dict(defaults or DEFAULT_INPUTS)
    console.print("[bold]Step 1: Property & Loan[/bold]\n")

    values: dict = {}
    for key, label in INPUT_LABELS.items():
        if key == "loan_tenure":
            values[key] = IntPrompt.ask(f"  {label}", default=int(defaults[key]))
        else:
            values[key] = FloatPrompt.ask(f"  {label}", default=float(defaults[key]))

    console.print()
    return values


def run_projection(values: dict) -> ProjectionResult | None:
    """Build inputs and run the engine. Prints the reason and returns None on failure."""
    logger.debug("Running projection with %s", values)
    try:
        inputs = LoanInputs(**values)
    except InputTypeError as e:
        console.print(f"[red]Invalid input: {e}[/red]")
        return None

    outcome = compute(inputs)
    if isinstance(outcome, Err):
        console.print(f"[red]❌ {outcome.error.reason}[/red]")
        return None

    return outcome.value


# ── Step 3: Summary ───────────────────────────────────────────────────────────

def show_summary(result: ProjectionResult) -> None:
    console.print("[bold]Step 2: Summary[/bold]\n")

    s = summarize(result)
    gain_style = "green" if s.net_wealth_gain >= 0 else "red"

    text = (
        f"  Monthly EMI:                 [bold]{format_inr(s.monthly_emi)}[/bold]\n"
        f"  Total interest paid:         {format_lakh(s.total_interest)}\n"
        f"  Total amount paid:           {format_lakh(s.total_amount_paid)}\n"
        f"  Total rental income:         [green]{format_lakh(s.total_rental_income)}[/green]\n"
        f"  Total property tax paid:     {format_lakh(s.total_property_tax)}\n"
        f"  ─────────────────────────────────────\n"
        f"  Total out-of-pocket money:   [bold magenta]{format_lakh(s.total_out_of_pocket)}[/bold magenta]\n"
        f"  Property value at end:       [bold cyan]{format_lakh(s.final_property_value)}[/bold cyan]\n"
        f"  Net wealth gain:             [bold {gain_style}]{format_lakh(s.net_wealth_gain)}[/bold {gain_style}]\n"
    )
    if s.break_even_year is not None:
        text += f"  Break-even year:             [green]Year {s.break_even_year}[/green]\n"
    else:
        text += "  Break-even year:             [dim]not reached within tenure[/dim]\n"

    console.print(Panel(text, title="Projection Summary", border_style="green"))
    console.print()


# ── Step 4: Yearly table ──────────────────────────────────────────────────────

def show_yearly_table(result: ProjectionResult) -> None:
    console.print("[bold]Step 3: Year-by-Year Projection[/bold]\n")
    ds = result.dataset

    table = Table(border_style="blue", show_lines=False)
    table.add_column("Year", justify="center", style="bold")
    table.add_column("Principal Left", justify="right")
    table.add_column("EMI", justify="right")
    table.add_column("Interest", justify="right")
    table.add_column("Rent", justify="right")
    table.add_column("Out-of-Pocket", justify="right")
    table.add_column("Yield", justify="right")
    table.add_column("Net Position", justify="right")

    for i, label in enumerate(ds.year_labels):
        year = i + 1
        net = ds.net_position[i]
        style = "green" if year == ds.break_even_year else ""
        table.add_row(
            label,
            format_lakh(ds.principal_remaining[i]),
            format_lakh(ds.emi_paid_yearly[i]),
            format_lakh(ds.interest_paid_yearly[i]),
            format_lakh(ds.rental_income_yearly[i]),
            format_lakh(ds.emi_out_of_pocket_yearly[i]),
            format_pct(ds.rental_yield_yearly[i]),
            f"[red]{format_lakh(net)}[/red]" if net < 0 else format_lakh(net),
            style=style,
        )

    console.print(table)
    console.print("  [dim]green row = break-even year  |  amounts in lakh (1L = 100,000)[/dim]")
    console.print()


# ── Steps 5-6: Export ─────────────────────────────────────────────────────────

def export_report(result: ProjectionResult, path: Path) -> None:
    path.write_text(generate_report_text(result), encoding="utf-8")
    console.print(f"  [green]Report saved to {path.resolve()}[/green]")


def export_charts(result: ProjectionResult, directory: Path) -> None:
    paths = save_charts(result, directory)
    console.print(f"  [green]{len(paths)} charts saved to {directory.resolve()}[/green]")


# ── Main entry point ──────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rental-projection",
        description="Project loan, rental income and net wealth for a rented property.",
    )
    parser.add_argument(
        "--defaults", action="store_true",
        help="skip prompts and use the demonstration inputs",
    )
    parser.add_argument("--export", type=Path, help="write the text report to this file")
    parser.add_argument("--charts", type=Path, help="write PNG charts to this directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        show_banner()

        if args.defaults:
            result = run_projection(dict(DEFAULT_INPUTS))
            if result is None:
                sys.exit(1)
        else:
            values = prompt_inputs()
            result = run_projection(values)
            while result is None:
                console.print("Please re-enter the inputs.\n")
                values = prompt_inputs(values)
                result = run_projection(values)

        show_summary(result)
        show_yearly_table(result)

        if args.export:
            export_report(result, args.export)
        elif not args.defaults and Confirm.ask("  Export plain-text report?", default=False):
            path = Path(Prompt.ask("  Output file path", default="projection_report.txt"))
            export_report(result, path)

        if args.charts:
            export_charts(result, args.charts)
        elif not args.defaults and Confirm.ask("  Save charts as PNG?", default=False):
            directory = Path(Prompt.ask("  Output directory", default="charts"))
            export_charts(result, directory)

        console.print("\n[bold cyan]Done.[/bold cyan]")

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
