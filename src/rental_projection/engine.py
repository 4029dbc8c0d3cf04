"""
Projection orchestrator.

  validate → EMI → monthly schedule → yearly loan records
           → yearly rent → yearly tax → chart dataset → ProjectionResult

Invalid inputs stop the pipeline before the first calculation and come back
as Err(ValidationError). The engine keeps no state beyond the inputs it was
built with, so one instance per call is the intended use.
"""

import logging

from rental_projection.calculator import (
    aggregate_to_yearly,
    build_amortization_schedule,
    compute_emi,
    project_property_tax,
    project_rental_income,
)
from rental_projection.datasets import generate_datasets
from rental_projection.errors import Err, Ok, Result, ValidationError
from rental_projection.models import LoanInputs, ProjectionResult
from rental_projection.validation import validate_inputs

logger = logging.getLogger(__name__)


class ProjectionEngine:
    def __init__(self, inputs: LoanInputs) -> None:
        self.inputs = inputs

    def calculate(self) -> Result[ProjectionResult, ValidationError]:
        verdict = validate_inputs(self.inputs)
        if not verdict.is_valid:
            logger.info("Projection rejected: %s", verdict.error)
            return Err(ValidationError(verdict.error))

        inputs = self.inputs

        emi = compute_emi(inputs)
        logger.debug(
            "EMI %.2f on loan %.2f over %d years",
            emi, inputs.loan_amount, inputs.loan_tenure,
        )

        schedule = build_amortization_schedule(inputs)
        yearly_loans = aggregate_to_yearly(schedule, inputs.loan_tenure)
        rental_data = project_rental_income(inputs)
        tax_data = project_property_tax(inputs)
        logger.debug(
            "Built %d monthly and %d yearly records", len(schedule), len(yearly_loans)
        )

        dataset = generate_datasets(inputs, yearly_loans, rental_data, tax_data)
        logger.debug("Break-even year: %s", dataset.break_even_year)

        return Ok(
            ProjectionResult(
                inputs=inputs,
                monthly_emi=emi,
                yearly_loans=yearly_loans,
                rental_data=rental_data,
                tax_data=tax_data,
                dataset=dataset,
            )
        )


def compute(inputs: LoanInputs) -> Result[ProjectionResult, ValidationError]:
    """Run one projection. Returns Ok(result) or Err(ValidationError)."""
    return ProjectionEngine(inputs).calculate()
