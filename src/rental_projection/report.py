"""Plain-text report of a projection, used by the CLI export."""

from datetime import date

from rental_projection.formatting import format_inr, format_pct
from rental_projection.models import ProjectionResult
from rental_projection.summary import summarize


def generate_report_text(result: ProjectionResult) -> str:
    """
    Build the full report as a single string: inputs, summary figures and a
    year-by-year table.
    """
    inputs = result.inputs
    summary = summarize(result)
    ds = result.dataset

    break_even = (
        f"Year {summary.break_even_year}"
        if summary.break_even_year is not None
        else "not reached within tenure"
    )

    lines = [
        "Rental Property Projection Report",
        f"Generated: {date.today().isoformat()}",
        "=" * 60,
        "",
        "INPUTS",
        f"  Property price:        {format_inr(inputs.price)}",
        f"  Down payment:          {format_inr(inputs.down_payment)}",
        f"  Loan amount:           {format_inr(inputs.loan_amount)}",
        f"  Interest rate:         {format_pct(inputs.interest_rate)}",
        f"  Loan tenure:           {inputs.loan_tenure} years",
        f"  Monthly rent:          {format_inr(inputs.monthly_rent)}",
        f"  Rent escalation:       {format_pct(inputs.rent_escalation)}",
        f"  Property tax / year:   {format_inr(inputs.property_tax)}",
        f"  Appreciation:          {format_pct(inputs.property_appreciation)}",
        "",
        "SUMMARY",
        f"  Monthly EMI:           {format_inr(summary.monthly_emi)}",
        f"  Total interest paid:   {format_inr(summary.total_interest)}",
        f"  Total amount paid:     {format_inr(summary.total_amount_paid)}",
        f"  Total rental income:   {format_inr(summary.total_rental_income)}",
        f"  Total property tax:    {format_inr(summary.total_property_tax)}",
        f"  Total out-of-pocket:   {format_inr(summary.total_out_of_pocket)}",
        f"  Final property value:  {format_inr(summary.final_property_value)}",
        f"  Net wealth gain:       {format_inr(summary.net_wealth_gain)}",
        f"  Break-even year:       {break_even}",
        "",
        "YEARLY PROJECTION",
        f"  {'Year':>4}  {'Principal left':>16}  {'EMI':>14}  {'Interest':>14}  "
        f"{'Rent':>14}  {'Out-of-pocket':>14}  {'Yield':>7}  {'Net position':>16}",
    ]

    for i, row in enumerate(result.yearly_loans):
        lines.append(
            f"  {row.year:>4}  {format_inr(ds.principal_remaining[i]):>16}  "
            f"{format_inr(ds.emi_paid_yearly[i]):>14}  "
            f"{format_inr(ds.interest_paid_yearly[i]):>14}  "
            f"{format_inr(ds.rental_income_yearly[i]):>14}  "
            f"{format_inr(ds.emi_out_of_pocket_yearly[i]):>14}  "
            f"{format_pct(ds.rental_yield_yearly[i]):>7}  "
            f"{format_inr(ds.net_position[i]):>16}"
        )

    return "\n".join(lines)
