"""
Headline figures for a finished projection (the summary panel).

Lifetime totals are read from the last entry of each cumulative series, so
they match what the charts show for the final year.
"""

from rental_projection.models import ProjectionResult, ProjectionSummary


def net_wealth_gain(result: ProjectionResult) -> float:
    """Property value at the end of the tenure minus everything paid out of pocket."""
    dataset = result.dataset
    return round(dataset.final_property_value - dataset.out_of_pocket_money, 2)


def summarize(result: ProjectionResult) -> ProjectionSummary:
    dataset = result.dataset

    return ProjectionSummary(
        monthly_emi=round(result.monthly_emi, 2),
        total_interest=dataset.interest_paid_cumulative[-1],
        total_amount_paid=dataset.emi_paid_cumulative[-1],
        total_rental_income=dataset.rental_income_cumulative[-1],
        total_property_tax=dataset.property_tax_cumulative[-1],
        total_out_of_pocket=dataset.out_of_pocket_money,
        final_property_value=dataset.final_property_value,
        net_wealth_gain=net_wealth_gain(result),
        break_even_year=dataset.break_even_year,
    )
