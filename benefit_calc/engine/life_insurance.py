"""Life insurance need via the DIME method (Debt, Income, Mortgage, Education).

Inputs are taken verbatim; large balances are legitimate.
"""

from benefit_calc.models.inputs import LifeInsuranceInputs
from benefit_calc.models.results import LifeInsuranceResults
from benefit_calc.engine.tax import ZERO


def calculate_life_insurance(inputs: LifeInsuranceInputs) -> LifeInsuranceResults:
    income_replacement = inputs.income * inputs.income_years
    dime_total = (
        inputs.total_debt
        + income_replacement
        + inputs.mortgage_balance
        + inputs.education_costs
    )
    additional_needed = max(dime_total - inputs.current_insurance, ZERO)

    # Households spending more than they earn need the higher figure replaced
    living_expense_need = inputs.monthly_living_expenses * 12 * inputs.income_years
    adjusted_need = dime_total - income_replacement + max(income_replacement, living_expense_need)

    return LifeInsuranceResults(
        income_replacement=income_replacement,
        dime_total=dime_total,
        additional_needed=additional_needed,
        living_expense_need=living_expense_need,
        adjusted_need=adjusted_need,
    )
