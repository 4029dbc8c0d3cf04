"""
Hardcoded defaults and unit constants.
Update DEFAULT_INPUTS to change the values the CLI pre-fills.
"""

from typing import TypedDict

MONTHS_PER_YEAR = 12

# ── Currency display ─────────────────────────────────────────────────────────
# Amounts are in a single currency (no conversion). Indian units are used for
# compact labels: 1 lakh = 100,000, 1 crore = 100 lakh.
CURRENCY_SYMBOL = "₹"
LAKH = 100_000
CRORE = 10_000_000


# ── Demonstration inputs ─────────────────────────────────────────────────────

class DefaultInputs(TypedDict):
    price: float
    down_payment: float
    interest_rate: float          # annual %
    loan_tenure: int              # years
    monthly_rent: float
    rent_escalation: float        # annual %
    property_tax: float           # fixed annual amount
    property_appreciation: float  # annual %


DEFAULT_INPUTS: DefaultInputs = {
    "price": 31_200_000.0,
    "down_payment": 5_000_000.0,
    "interest_rate": 8.25,
    "loan_tenure": 20,
    "monthly_rent": 170_000.0,
    "rent_escalation": 5.0,
    "property_tax": 95_000.0,
    "property_appreciation": 6.0,
}

# Prompt labels, in the order the CLI asks for them
INPUT_LABELS: dict[str, str] = {
    "price": "Property price",
    "down_payment": "Down payment",
    "interest_rate": "Interest rate (annual %)",
    "loan_tenure": "Loan tenure (years)",
    "monthly_rent": "Monthly rent",
    "rent_escalation": "Rent escalation (annual %)",
    "property_tax": "Property tax (per year)",
    "property_appreciation": "Property appreciation (annual %)",
}
