"""Pydantic v2 models for the rental property projection."""

from pydantic import BaseModel, ConfigDict, Field


class LoanInputs(BaseModel):
    """
    Caller-supplied inputs for one projection.

    Types, finiteness (no NaN / inf) and the non-negative interest rate and
    property tax are enforced here. The price / down payment / tenure / rent
    rules are checked by validation.validate_inputs so such a record can
    still be built and reported through the engine's result.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    price: float                   # Purchase price of the property
    down_payment: float            # Paid upfront; the rest is borrowed
    interest_rate: float = Field(ge=0)  # Annual interest rate in percent (8.25 = 8.25%)
    loan_tenure: int               # Loan term in whole years
    monthly_rent: float            # Rent received in year 1, per month
    rent_escalation: float = 0.0   # Annual rent growth in percent
    property_tax: float = Field(0.0, ge=0)  # Fixed annual property tax
    property_appreciation: float = 0.0  # Annual property value growth in percent

    @property
    def loan_amount(self) -> float:
        return self.price - self.down_payment


class MonthlyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int           # 1-based
    emi: float           # Constant installment
    interest: float      # Interest portion this month
    principal: float     # Principal repaid this month
    remaining: float     # Outstanding principal after payment (>= 0)


class YearlyLoanRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    emi: float           # Sum of the year's 12 installments
    interest: float
    principal: float
    remaining: float     # Balance after the year's last month


class YearlyRentalRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    income: float        # Annual rent after escalation


class YearlyTaxRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    tax: float


class ProjectionDataset(BaseModel):
    """
    Chart-ready yearly series. Index 0 is year 1; every list has one entry
    per year of the loan. Monetary values are rounded to 2 decimals.
    """

    model_config = ConfigDict(frozen=True)

    year_labels: list[str]
    principal_remaining: list[float]
    interest_paid_yearly: list[float]
    interest_paid_cumulative: list[float]
    emi_paid_yearly: list[float]
    emi_out_of_pocket_yearly: list[float]   # max(0, EMI - rent + tax) per year
    emi_paid_cumulative: list[float]
    rental_income_yearly: list[float]
    rental_income_cumulative: list[float]
    rental_yield_yearly: list[float]        # % of purchase price
    property_tax_yearly: list[float]
    property_tax_cumulative: list[float]
    net_position: list[float]               # cumulative rent - cumulative EMI
    break_even_year: int | None             # first year rent overtakes EMI
    out_of_pocket_money: float              # lifetime total, may be negative
    final_property_value: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    inputs: LoanInputs
    monthly_emi: float
    yearly_loans: list[YearlyLoanRecord]
    rental_data: list[YearlyRentalRecord]
    tax_data: list[YearlyTaxRecord]
    dataset: ProjectionDataset


class ProjectionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_emi: float
    total_interest: float
    total_amount_paid: float         # Cumulative EMI over the tenure
    total_rental_income: float
    total_property_tax: float
    total_out_of_pocket: float
    final_property_value: float
    net_wealth_gain: float           # final_property_value - total_out_of_pocket
    break_even_year: int | None
