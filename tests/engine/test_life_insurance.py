import dataclasses
from decimal import Decimal

from benefit_calc.engine.life_insurance import calculate_life_insurance
from benefit_calc.models.inputs import LifeInsuranceInputs


class TestDIME:
    def test_reference_household(self, life_inputs):
        r = calculate_life_insurance(life_inputs)
        assert r.income_replacement == Decimal("800000")
        assert r.dime_total == Decimal("1170000")
        assert r.additional_needed == Decimal("1070000")

    def test_sum_is_exact(self):
        inputs = LifeInsuranceInputs(
            total_debt=Decimal("12345.67"),
            income=Decimal("65432.10"),
            mortgage_balance=Decimal("250000.01"),
            education_costs=Decimal("40000"),
            income_years=Decimal("7"),
        )
        r = calculate_life_insurance(inputs)
        assert r.dime_total == (
            inputs.total_debt
            + inputs.income * inputs.income_years
            + inputs.mortgage_balance
            + inputs.education_costs
        )

    def test_zero_income_years(self, life_inputs):
        r = calculate_life_insurance(dataclasses.replace(life_inputs, income_years=Decimal("0")))
        assert r.income_replacement == Decimal("0")
        assert r.dime_total == Decimal("370000")

    def test_over_insured(self, life_inputs):
        r = calculate_life_insurance(dataclasses.replace(life_inputs, current_insurance=Decimal("2000000")))
        assert r.additional_needed == Decimal("0")

    def test_large_balances_taken_verbatim(self):
        big = Decimal("5000000")
        r = calculate_life_insurance(
            LifeInsuranceInputs(
                total_debt=big,
                income=big,
                mortgage_balance=big,
                education_costs=big,
                income_years=Decimal("1"),
            )
        )
        assert r.dime_total == Decimal("20000000")
        assert r.additional_needed == Decimal("20000000")


class TestAdjustedNeed:
    def test_living_expenses_below_income(self, life_inputs):
        r = calculate_life_insurance(
            dataclasses.replace(life_inputs, monthly_living_expenses=Decimal("5000"))
        )
        assert r.living_expense_need == Decimal("600000")
        assert r.adjusted_need == r.dime_total

    def test_living_expenses_above_income(self, life_inputs):
        r = calculate_life_insurance(
            dataclasses.replace(life_inputs, monthly_living_expenses=Decimal("8000"))
        )
        assert r.living_expense_need == Decimal("960000")
        assert r.adjusted_need == Decimal("1330000")
        # The DIME gap itself is unchanged
        assert r.additional_needed == Decimal("1070000")

    def test_idempotent(self, life_inputs):
        assert calculate_life_insurance(life_inputs) == calculate_life_insurance(life_inputs)
