"""
Input checks run before any projection stage.

Rules are evaluated in order and the first failing rule decides the message:
  1. down payment greater than price
  2. price <= 0, down payment < 0, tenure <= 0 or rent < 0
"""

from dataclasses import dataclass

from rental_projection.models import LoanInputs

DOWN_PAYMENT_EXCEEDS_PRICE = "down payment exceeds price"
NON_POSITIVE_INPUTS = "inputs must be positive/non-negative as specified"


@dataclass(frozen=True)
class ValidationVerdict:
    is_valid: bool
    error: str | None = None


def validate_inputs(inputs: LoanInputs) -> ValidationVerdict:
    if inputs.down_payment > inputs.price:
        return ValidationVerdict(False, DOWN_PAYMENT_EXCEEDS_PRICE)

    if (
        inputs.price <= 0
        or inputs.down_payment < 0
        or inputs.loan_tenure <= 0
        or inputs.monthly_rent < 0
    ):
        return ValidationVerdict(False, NON_POSITIVE_INPUTS)

    return ValidationVerdict(True)
