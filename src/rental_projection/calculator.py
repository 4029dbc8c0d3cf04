"""
Core loan and rental math: EMI, amortization, yearly aggregation, rent and tax.

Key conventions:
- Rates are entered in percent per year; the monthly rate is (R / 100) / 12.
- Nothing is rounded here. Rounding happens once, when the yearly series are
  placed into the chart dataset (see datasets.py).
- The outstanding balance is clamped at zero so floating-point residue can
  never push it negative in the final month.
- All yearly outputs have exactly loan_tenure entries, numbered from 1.
"""

from rental_projection.data.defaults import MONTHS_PER_YEAR
from rental_projection.models import (
    LoanInputs,
    MonthlyRecord,
    YearlyLoanRecord,
    YearlyRentalRecord,
    YearlyTaxRecord,
)


def monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 100 / MONTHS_PER_YEAR


def _emi(principal: float, rate: float, months: int) -> float:
    """
    Standard amortizing-loan installment: P * r(1+r)^n / ((1+r)^n - 1).
    Falls back to straight-line P / n at a zero rate.
    """
    if rate == 0:
        return principal / months
    growth = (1 + rate) ** months
    return principal * (rate * growth / (growth - 1))


def compute_emi(inputs: LoanInputs) -> float:
    """Constant monthly installment for the borrowed amount over the full tenure."""
    return _emi(
        inputs.loan_amount,
        monthly_rate(inputs.interest_rate),
        inputs.loan_tenure * MONTHS_PER_YEAR,
    )


def build_amortization_schedule(inputs: LoanInputs) -> list[MonthlyRecord]:
    """
    Build the month-by-month schedule (months 1..tenure*12).

    Each month: interest on the opening balance, the rest of the EMI repays
    principal, and the closing balance is floored at zero.
    """
    rate = monthly_rate(inputs.interest_rate)
    emi = compute_emi(inputs)

    remaining = inputs.loan_amount
    schedule: list[MonthlyRecord] = []

    for month in range(1, inputs.loan_tenure * MONTHS_PER_YEAR + 1):
        interest = remaining * rate
        principal = emi - interest
        remaining = max(0.0, remaining - principal)

        schedule.append(
            MonthlyRecord(
                month=month,
                emi=emi,
                interest=interest,
                principal=principal,
                remaining=remaining,
            )
        )

    return schedule


def aggregate_to_yearly(
    schedule: list[MonthlyRecord],
    loan_tenure: int,
) -> list[YearlyLoanRecord]:
    """
    Collapse the monthly schedule into loan_tenure yearly records.

    Year y covers schedule[(y-1)*12 : y*12]. Its balance is that of the
    window's last month, or 0 if the window is empty.
    """
    yearly: list[YearlyLoanRecord] = []

    for year in range(1, loan_tenure + 1):
        window = schedule[(year - 1) * MONTHS_PER_YEAR : year * MONTHS_PER_YEAR]

        yearly.append(
            YearlyLoanRecord(
                year=year,
                emi=sum(row.emi for row in window),
                interest=sum(row.interest for row in window),
                principal=sum(row.principal for row in window),
                remaining=window[-1].remaining if window else 0.0,
            )
        )

    return yearly


def project_rental_income(inputs: LoanInputs) -> list[YearlyRentalRecord]:
    """Annual rent, escalated once per year; year 1 is monthly_rent * 12 as entered."""
    initial_annual_rent = inputs.monthly_rent * MONTHS_PER_YEAR
    escalation = inputs.rent_escalation / 100

    return [
        YearlyRentalRecord(
            year=year,
            income=initial_annual_rent * (1 + escalation) ** (year - 1),
        )
        for year in range(1, inputs.loan_tenure + 1)
    ]


def project_property_tax(inputs: LoanInputs) -> list[YearlyTaxRecord]:
    # No escalation: the same amount every year.
    return [
        YearlyTaxRecord(year=year, tax=inputs.property_tax)
        for year in range(1, inputs.loan_tenure + 1)
    ]
