"""
Matplotlib charts over the yearly projection series.

Each builder returns a new Figure owned by the caller; nothing is cached at
module level. Figures are created with matplotlib.figure.Figure directly, so
no pyplot state or GUI backend is involved and they can be saved headless.

Charts:
  loan               principal remaining, cumulative interest, cumulative EMI
  rental_vs_interest yearly rent vs yearly interest
  rental_vs_emi      yearly rent vs yearly EMI vs out-of-pocket EMI
  rental_yield       rent as % of purchase price
  net_position       cumulative rent - cumulative EMI
"""

from pathlib import Path
from typing import Callable

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from rental_projection.data.defaults import CURRENCY_SYMBOL
from rental_projection.formatting import axis_formatter
from rental_projection.models import ProjectionResult

# Line colours shared across charts
_RED = "#e74c3c"
_ORANGE = "#f39c12"
_BLUE = "#3498db"
_GREEN = "#27ae60"
_DARK_ORANGE = "#e67e22"
_PURPLE = "#8e44ad"
_SLATE = "#2c3e50"
_VIOLET = "#9b59b6"


def _new_axes(title: str, ylabel: str) -> tuple[Figure, Axes]:
    fig = Figure(figsize=(9, 5), constrained_layout=True)
    ax = fig.add_subplot(111)
    ax.set_title(title)
    ax.set_xlabel("Year")
    ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    return fig, ax


def _money_axes(title: str) -> tuple[Figure, Axes]:
    fig, ax = _new_axes(title, f"Amount ({CURRENCY_SYMBOL})")
    ax.yaxis.set_major_formatter(FuncFormatter(axis_formatter))
    return fig, ax


def _years(result: ProjectionResult) -> list[int]:
    return [row.year for row in result.yearly_loans]


def _finish(ax: Axes, bottom_zero: bool = True) -> None:
    if bottom_zero:
        ax.set_ylim(bottom=0)
    ax.legend(loc="best", fontsize=9)


# ── Loan progress ─────────────────────────────────────────────────────────────

def loan_chart(result: ProjectionResult) -> Figure:
    ds = result.dataset
    years = _years(result)
    fig, ax = _money_axes("Loan Progress")

    ax.fill_between(years, ds.principal_remaining, color=_RED, alpha=0.1)
    ax.plot(years, ds.principal_remaining, color=_RED, linewidth=2.5,
            label="Principal Remaining")
    ax.plot(years, ds.interest_paid_cumulative, color=_ORANGE, linewidth=2.5,
            label="Cumulative Interest Paid")
    ax.plot(years, ds.emi_paid_cumulative, color=_BLUE, linewidth=2.5,
            label="Cumulative EMI Paid")

    _finish(ax)
    return fig


# ── Rental comparisons ────────────────────────────────────────────────────────

def rental_vs_interest_chart(result: ProjectionResult) -> Figure:
    ds = result.dataset
    years = _years(result)
    fig, ax = _money_axes("Yearly Rental Income vs Interest Paid")

    ax.fill_between(years, ds.rental_income_yearly, color=_GREEN, alpha=0.1)
    ax.plot(years, ds.rental_income_yearly, color=_GREEN, linewidth=2.5,
            label="Yearly Rental Income")
    ax.plot(years, ds.interest_paid_yearly, color=_DARK_ORANGE, linewidth=2.5,
            label="Yearly Interest Paid")

    _finish(ax)
    return fig


def rental_vs_emi_chart(result: ProjectionResult) -> Figure:
    ds = result.dataset
    years = _years(result)
    fig, ax = _money_axes("Yearly Rental Income vs EMI")

    ax.fill_between(years, ds.rental_income_yearly, color=_GREEN, alpha=0.1)
    ax.plot(years, ds.rental_income_yearly, color=_GREEN, linewidth=2.5,
            label="Yearly Rental Income")
    ax.plot(years, ds.emi_paid_yearly, color=_BLUE, linewidth=2.5,
            label="Yearly EMI Paid")
    ax.plot(years, ds.emi_out_of_pocket_yearly, color=_PURPLE, linewidth=2.5,
            label="Out-of-Pocket EMI Paid")

    _finish(ax)
    return fig


def rental_yield_chart(result: ProjectionResult) -> Figure:
    ds = result.dataset
    years = _years(result)
    fig, ax = _new_axes("Rental Yield", "Rental Yield (%)")
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: f"{v:g}%"))

    ax.fill_between(years, ds.rental_yield_yearly, color=_SLATE, alpha=0.1)
    ax.plot(years, ds.rental_yield_yearly, color=_SLATE, linewidth=2.5,
            label="Rental Yield (% of Property Value)")

    _finish(ax)
    return fig


# ── Net position ──────────────────────────────────────────────────────────────

def net_position_chart(result: ProjectionResult) -> Figure:
    """Can go below zero, so the axis is not pinned at 0 and a zero line is drawn."""
    ds = result.dataset
    years = _years(result)
    fig, ax = _money_axes("Net Position (Rental Income - EMI)")

    ax.axhline(0, color="#7f8c8d", linewidth=1, linestyle="--")
    ax.fill_between(years, ds.net_position, color=_VIOLET, alpha=0.1)
    ax.plot(years, ds.net_position, color=_VIOLET, linewidth=2.5,
            label="Net Position (Rental Income - EMI)")

    if ds.break_even_year is not None:
        ax.axvline(ds.break_even_year, color=_GREEN, linewidth=1, linestyle=":",
                   label=f"Break-even (Year {ds.break_even_year})")

    _finish(ax, bottom_zero=False)
    return fig


CHART_BUILDERS: dict[str, Callable[[ProjectionResult], Figure]] = {
    "loan": loan_chart,
    "rental_vs_interest": rental_vs_interest_chart,
    "rental_vs_emi": rental_vs_emi_chart,
    "rental_yield": rental_yield_chart,
    "net_position": net_position_chart,
}


def build_all_charts(result: ProjectionResult) -> dict[str, Figure]:
    return {name: build(result) for name, build in CHART_BUILDERS.items()}


def save_charts(result: ProjectionResult, directory: Path, dpi: int = 100) -> list[Path]:
    """Write every chart as <directory>/<name>.png and return the paths."""
    directory.mkdir(parents=True, exist_ok=True)
    paths: list[Path] = []
    for name, fig in build_all_charts(result).items():
        path = directory / f"{name}.png"
        fig.savefig(path, dpi=dpi)
        paths.append(path)
    return paths
