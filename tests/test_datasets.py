"""
Tests for datasets.py: cumulative series, out-of-pocket, yield, break-even,
final property value.
"""

import pytest

from rental_projection.calculator import (
    aggregate_to_yearly,
    build_amortization_schedule,
    project_property_tax,
    project_rental_income,
)
from rental_projection.datasets import (
    compute_final_property_value,
    compute_out_of_pocket_money,
    find_break_even_year,
    generate_datasets,
)
from rental_projection.models import LoanInputs, ProjectionDataset


# ── Helpers ───────────────────────────────────────────────────────────────────

def make_inputs(**kwargs) -> LoanInputs:
    defaults = dict(
        price=31_200_000,
        down_payment=5_000_000,
        interest_rate=8.25,
        loan_tenure=20,
        monthly_rent=170_000,
        rent_escalation=5,
        property_tax=95_000,
        property_appreciation=6,
    )
    defaults.update(kwargs)
    return LoanInputs(**defaults)


def build(inputs: LoanInputs):
    yearly = aggregate_to_yearly(build_amortization_schedule(inputs), inputs.loan_tenure)
    rental = project_rental_income(inputs)
    tax = project_property_tax(inputs)
    return yearly, rental, tax


def dataset_for(inputs: LoanInputs) -> ProjectionDataset:
    return generate_datasets(inputs, *build(inputs))


@pytest.fixture(scope="module")
def example() -> ProjectionDataset:
    return dataset_for(make_inputs())


# ── Series shape and rounding ─────────────────────────────────────────────────

class TestSeries:
    SERIES = [
        "year_labels",
        "principal_remaining",
        "interest_paid_yearly",
        "interest_paid_cumulative",
        "emi_paid_yearly",
        "emi_out_of_pocket_yearly",
        "emi_paid_cumulative",
        "rental_income_yearly",
        "rental_income_cumulative",
        "rental_yield_yearly",
        "property_tax_yearly",
        "property_tax_cumulative",
        "net_position",
    ]

    def test_every_series_has_one_entry_per_year(self, example):
        for name in self.SERIES:
            assert len(getattr(example, name)) == 20, name

    def test_year_labels(self, example):
        assert example.year_labels[0] == "Year 1"
        assert example.year_labels[-1] == "Year 20"

    def test_values_rounded_to_cents(self, example):
        for name in self.SERIES[1:]:
            for v in getattr(example, name):
                assert round(v, 2) == v, name

    def test_cumulative_series_non_decreasing(self, example):
        for name in (
            "interest_paid_cumulative",
            "emi_paid_cumulative",
            "rental_income_cumulative",
            "property_tax_cumulative",
        ):
            series = getattr(example, name)
            assert all(b >= a for a, b in zip(series, series[1:])), name

    def test_cumulative_is_running_sum(self):
        inputs = make_inputs()
        yearly, rental, tax = build(inputs)
        ds = generate_datasets(inputs, yearly, rental, tax)

        assert ds.emi_paid_cumulative[4] == pytest.approx(
            sum(r.emi for r in yearly[:5]), abs=0.01
        )
        assert ds.rental_income_cumulative[9] == pytest.approx(
            sum(r.income for r in rental[:10]), abs=0.01
        )
        assert ds.property_tax_cumulative[-1] == pytest.approx(95_000 * 20)

    def test_principal_remaining_ends_at_zero(self, example):
        assert example.principal_remaining[-1] == pytest.approx(0.0, abs=0.01)

    def test_net_position(self, example):
        for i, net in enumerate(example.net_position):
            diff = example.rental_income_cumulative[i] - example.emi_paid_cumulative[i]
            assert net == pytest.approx(diff, abs=0.02)

    def test_net_position_can_be_negative(self, example):
        assert example.net_position[0] < 0
        assert example.net_position[-1] > 0


# ── Out-of-pocket ─────────────────────────────────────────────────────────────

class TestOutOfPocket:
    def test_yearly_formula(self):
        """0% loan of 1.2M over 1 year, rent 50k/month, tax 12k → 1.2M - 600k + 12k."""
        inputs = make_inputs(
            price=1_200_000, down_payment=0, interest_rate=0, loan_tenure=1,
            monthly_rent=50_000, rent_escalation=0, property_tax=12_000,
        )
        ds = dataset_for(inputs)
        assert ds.emi_out_of_pocket_yearly == [612_000.0]

    def test_yearly_floored_at_zero(self, example):
        assert all(v >= 0 for v in example.emi_out_of_pocket_yearly)
        assert example.emi_out_of_pocket_yearly[0] > 0
        # Escalated rent overtakes EMI + tax in later years
        assert example.emi_out_of_pocket_yearly[-1] == 0.0

    def test_lifetime_total_not_floored(self):
        """Rent far above EMI → lifetime total goes negative (net profit)."""
        inputs = make_inputs(
            price=1_000_000, down_payment=200_000, interest_rate=0, loan_tenure=2,
            monthly_rent=100_000, rent_escalation=0, property_tax=0,
        )
        ds = dataset_for(inputs)

        assert ds.emi_out_of_pocket_yearly == [0.0, 0.0]
        # 200k + 800k EMI + 0 tax - 2.4M rent
        assert ds.out_of_pocket_money == pytest.approx(-1_400_000, abs=0.01)

    def test_lifetime_total_formula(self):
        inputs = make_inputs()
        yearly, rental, tax = build(inputs)

        expected = (
            inputs.down_payment
            + sum(r.emi for r in yearly)
            + sum(r.tax for r in tax)
            - sum(r.income for r in rental)
        )
        assert compute_out_of_pocket_money(inputs, yearly, rental, tax) == pytest.approx(expected)
        assert generate_datasets(inputs, yearly, rental, tax).out_of_pocket_money == round(expected, 2)


# ── Rental yield ──────────────────────────────────────────────────────────────

def test_rental_yield_against_purchase_price(example):
    assert example.rental_yield_yearly[0] == round(2_040_000 / 31_200_000 * 100, 2)
    # Grows with rent even though the property appreciates
    assert example.rental_yield_yearly[-1] > example.rental_yield_yearly[0]


# ── Break-even ────────────────────────────────────────────────────────────────

class TestBreakEven:
    def test_first_strictly_greater(self):
        assert find_break_even_year([100, 200, 300], [50, 200, 301]) == 3

    def test_equal_is_not_break_even(self):
        assert find_break_even_year([100, 200], [100, 200]) is None

    def test_year_one(self):
        assert find_break_even_year([100], [101]) == 1

    def test_empty(self):
        assert find_break_even_year([], []) is None

    def test_example_break_even_is_minimal(self, example):
        year = example.break_even_year
        assert year == 12

        rent = example.rental_income_cumulative
        emi = example.emi_paid_cumulative
        assert rent[year - 1] > emi[year - 1]
        assert all(rent[i] <= emi[i] for i in range(year - 1))

    def test_no_break_even_without_rent(self):
        ds = dataset_for(make_inputs(monthly_rent=0))
        assert ds.break_even_year is None


# ── Final property value ──────────────────────────────────────────────────────

class TestFinalPropertyValue:
    def test_compound_appreciation(self):
        inputs = make_inputs()
        assert compute_final_property_value(inputs) == pytest.approx(31_200_000 * 1.06 ** 20)

    def test_rounded_in_dataset(self, example):
        assert example.final_property_value == pytest.approx(31_200_000 * 1.06 ** 20, abs=0.01)
        assert 100_000_000 < example.final_property_value < 100_100_000

    def test_zero_and_negative_appreciation(self):
        assert compute_final_property_value(make_inputs(property_appreciation=0)) == 31_200_000
        assert compute_final_property_value(
            make_inputs(property_appreciation=-5, loan_tenure=2)
        ) == pytest.approx(31_200_000 * 0.95 ** 2)
