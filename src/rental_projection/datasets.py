"""
Turn the aligned yearly loan / rent / tax records into chart-ready series and
the derived scalar metrics.

Rounding rule: running totals are kept at full precision and each value is
rounded to 2 decimals only when it is placed into a series, so rounding error
never compounds across years.

Out-of-pocket asymmetry:
  - The per-year series is floored at 0: a year where rent covers EMI and tax
    shows nothing paid, the surplus is not carried as a negative amount.
  - The lifetime total is NOT floored and can be negative (net profit).
"""

from rental_projection.models import (
    LoanInputs,
    ProjectionDataset,
    YearlyLoanRecord,
    YearlyRentalRecord,
    YearlyTaxRecord,
)


def find_break_even_year(
    emi_cumulative: list[float],
    rental_cumulative: list[float],
) -> int | None:
    """
    First 1-based year where cumulative rent strictly exceeds cumulative EMI.
    Returns None if that never happens within the tenure.
    """
    for i, (emi, rent) in enumerate(zip(emi_cumulative, rental_cumulative)):
        if rent > emi:
            return i + 1
    return None


def compute_out_of_pocket_money(
    inputs: LoanInputs,
    yearly_loans: list[YearlyLoanRecord],
    rental_data: list[YearlyRentalRecord],
    tax_data: list[YearlyTaxRecord],
) -> float:
    """
    Lifetime cash put in by the owner:
        down payment + all EMI + all property tax - all rental income

    Uses the unrounded yearly figures.
    """
    total_emi = sum(row.emi for row in yearly_loans)
    total_rental = sum(row.income for row in rental_data)
    total_tax = sum(row.tax for row in tax_data)
    return inputs.down_payment + total_emi + total_tax - total_rental


def compute_final_property_value(inputs: LoanInputs) -> float:
    """Purchase price compounded annually at the appreciation rate over the tenure."""
    return inputs.price * (1 + inputs.property_appreciation / 100) ** inputs.loan_tenure


def generate_datasets(
    inputs: LoanInputs,
    yearly_loans: list[YearlyLoanRecord],
    rental_data: list[YearlyRentalRecord],
    tax_data: list[YearlyTaxRecord],
) -> ProjectionDataset:
    year_labels: list[str] = []
    principal_remaining: list[float] = []
    interest_paid_yearly: list[float] = []
    interest_paid_cumulative: list[float] = []
    emi_paid_yearly: list[float] = []
    emi_out_of_pocket_yearly: list[float] = []
    emi_paid_cumulative: list[float] = []
    rental_income_yearly: list[float] = []
    rental_income_cumulative: list[float] = []
    rental_yield_yearly: list[float] = []
    property_tax_yearly: list[float] = []
    property_tax_cumulative: list[float] = []
    net_position: list[float] = []

    cumulative_interest = 0.0
    cumulative_emi = 0.0
    cumulative_rental = 0.0
    cumulative_tax = 0.0

    for loan, rental, tax in zip(yearly_loans, rental_data, tax_data):
        year_labels.append(f"Year {loan.year}")

        emi_year = round(loan.emi, 2)
        rent_year = round(rental.income, 2)

        cumulative_interest += loan.interest
        cumulative_emi += loan.emi
        cumulative_rental += rental.income
        cumulative_tax += tax.tax

        principal_remaining.append(round(loan.remaining, 2))
        interest_paid_yearly.append(round(loan.interest, 2))
        interest_paid_cumulative.append(round(cumulative_interest, 2))

        emi_paid_yearly.append(emi_year)
        emi_paid_cumulative.append(round(cumulative_emi, 2))
        emi_out_of_pocket_yearly.append(
            max(0.0, round(emi_year - rent_year + tax.tax, 2))
        )

        rental_income_yearly.append(rent_year)
        rental_income_cumulative.append(round(cumulative_rental, 2))
        # Yield against the purchase price, not the appreciated value
        rental_yield_yearly.append(round(rent_year / inputs.price * 100, 2))

        property_tax_yearly.append(round(tax.tax, 2))
        property_tax_cumulative.append(round(cumulative_tax, 2))

        net_position.append(round(cumulative_rental - cumulative_emi, 2))

    out_of_pocket = compute_out_of_pocket_money(
        inputs, yearly_loans, rental_data, tax_data
    )

    return ProjectionDataset(
        year_labels=year_labels,
        principal_remaining=principal_remaining,
        interest_paid_yearly=interest_paid_yearly,
        interest_paid_cumulative=interest_paid_cumulative,
        emi_paid_yearly=emi_paid_yearly,
        emi_out_of_pocket_yearly=emi_out_of_pocket_yearly,
        emi_paid_cumulative=emi_paid_cumulative,
        rental_income_yearly=rental_income_yearly,
        rental_income_cumulative=rental_income_cumulative,
        rental_yield_yearly=rental_yield_yearly,
        property_tax_yearly=property_tax_yearly,
        property_tax_cumulative=property_tax_cumulative,
        net_position=net_position,
        break_even_year=find_break_even_year(
            emi_paid_cumulative, rental_income_cumulative
        ),
        out_of_pocket_money=round(out_of_pocket, 2),
        final_property_value=round(compute_final_property_value(inputs), 2),
    )
