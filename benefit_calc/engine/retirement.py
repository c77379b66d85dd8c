"""401(k) projection: year-by-year salary growth, deferrals, employer match and
monthly compounding.

Each year is a pure step from the previous (balance, salary) state, so any
single year can be checked in isolation. The catch-up eligibility used for the
deferral limit is taken from the starting age and held for the whole
projection.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from benefit_calc.models.inputs import ContributionType, RetirementInputs
from benefit_calc.models.limits import PlanYearLimits
from benefit_calc.models.results import RetirementResults, RetirementYear, WithdrawalEstimate
from benefit_calc.engine.limits import default_limits
from benefit_calc.engine.tax import ZERO, HUNDRED, clamp, non_negative

MONTHS = 12

WITHDRAWAL_RATES = (
    ("Ultra-safe", Decimal("0.035")),
    ("Conservative (4% rule)", Decimal("0.04")),
    ("Moderate", Decimal("0.05")),
)


@dataclass(frozen=True)
class ProjectionState:
    balance: Decimal
    salary: Decimal


def normalize_inputs(inputs: RetirementInputs) -> RetirementInputs:
    """Clamp percentages to 0-100 and floor money at zero.

    Return and salary growth pass through untouched: negative values are
    valid scenarios.
    """
    return replace(
        inputs,
        current_salary=non_negative(inputs.current_salary),
        current_savings=non_negative(inputs.current_savings),
        employee_contribution=clamp(inputs.employee_contribution, ZERO, HUNDRED),
        employer_match=non_negative(inputs.employer_match),
        employer_match_cap=clamp(inputs.employer_match_cap, ZERO, HUNDRED),
        traditional_percentage=clamp(inputs.traditional_percentage, ZERO, HUNDRED),
        tax_bracket=clamp(inputs.tax_bracket, ZERO, HUNDRED),
    )


def contribution_limit(current_age: int, limits: PlanYearLimits | None = None) -> Decimal:
    """Annual elective deferral limit, with catch-up if eligible at the starting age."""
    limits = limits or default_limits()
    if current_age >= limits.retirement_catch_up_age:
        return limits.retirement_total_with_catch_up
    return limits.retirement_401k


def split_contribution(
    employee: Decimal,
    contribution_type: ContributionType,
    traditional_percentage: Decimal,
    base_limit: Decimal,
) -> tuple[Decimal, Decimal]:
    """Split an employee deferral into (traditional, roth).

    For a mixed election the base portion splits by the traditional
    percentage and anything in the catch-up range is traditional.
    """
    if contribution_type == ContributionType.TRADITIONAL:
        return employee, ZERO
    if contribution_type == ContributionType.ROTH:
        return ZERO, employee

    base = min(employee, base_limit)
    catch_up = employee - base
    traditional_base = base * (traditional_percentage / HUNDRED)
    return traditional_base + catch_up, base - traditional_base


def employer_match(
    salary: Decimal,
    employee_pct: Decimal,
    match_pct: Decimal,
    match_cap_pct: Decimal,
) -> Decimal:
    """Employer match on the matchable share of salary."""
    matchable_rate = min(employee_pct, match_cap_pct)
    return matchable_rate / HUNDRED * salary * (match_pct / HUNDRED)


def compound_year(balance: Decimal, annual_contribution: Decimal, expected_return: Decimal) -> Decimal:
    """Twelve months of growth with contributions deposited at each month end."""
    monthly_return = expected_return / HUNDRED / MONTHS
    monthly_deposit = annual_contribution / MONTHS
    for _ in range(MONTHS):
        balance = balance * (1 + monthly_return) + monthly_deposit
    return balance


def project_year(
    state: ProjectionState,
    year: int,
    inputs: RetirementInputs,
    limits: PlanYearLimits | None = None,
) -> RetirementYear:
    """Advance one projection year (1-indexed) from the prior state.

    Expects inputs already passed through normalize_inputs.
    """
    limits = limits or default_limits()

    salary = state.salary * (1 + inputs.salary_growth / HUNDRED)
    employee = min(
        inputs.employee_contribution / HUNDRED * salary,
        contribution_limit(inputs.current_age, limits),
    )
    traditional, roth = split_contribution(
        employee,
        inputs.contribution_type,
        inputs.traditional_percentage,
        limits.retirement_401k,
    )
    employer = employer_match(
        salary,
        inputs.employee_contribution,
        inputs.employer_match,
        inputs.employer_match_cap,
    )
    balance = compound_year(state.balance, employee + employer, inputs.expected_return)

    return RetirementYear(
        year=year,
        age=inputs.current_age + year,
        salary=salary,
        employee_contribution=employee,
        employer_contribution=employer,
        total_contribution=employee + employer,
        traditional_contribution=traditional,
        roth_contribution=roth,
        balance=balance,
        tax_savings=traditional * (inputs.tax_bracket / HUNDRED),
    )


def withdrawal_estimates(final_balance: Decimal) -> tuple[WithdrawalEstimate, ...]:
    """Annual retirement income under common withdrawal-rate rules of thumb."""
    return tuple(
        WithdrawalEstimate(label=label, rate=rate, annual_income=final_balance * rate)
        for label, rate in WITHDRAWAL_RATES
    )


def calculate_retirement(
    inputs: RetirementInputs, limits: PlanYearLimits | None = None
) -> RetirementResults:
    limits = limits or default_limits()
    inputs = normalize_inputs(inputs)

    years = inputs.years_to_retirement
    starting_balance = inputs.current_savings
    state = ProjectionState(balance=starting_balance, salary=inputs.current_salary)

    projections: list[RetirementYear] = []
    for year in range(1, years + 1):
        snapshot = project_year(state, year, inputs, limits)
        projections.append(snapshot)
        state = ProjectionState(balance=snapshot.balance, salary=snapshot.salary)

    total_employee = sum((p.employee_contribution for p in projections), ZERO)
    total_employer = sum((p.employer_contribution for p in projections), ZERO)
    total_traditional = sum((p.traditional_contribution for p in projections), ZERO)
    total_roth = sum((p.roth_contribution for p in projections), ZERO)
    total_tax_savings = sum((p.tax_savings for p in projections), ZERO)

    final_balance = state.balance
    monthly = total_employee / MONTHS / years if years > 0 else ZERO

    return RetirementResults(
        final_balance=final_balance,
        total_contributions=total_employee,
        employer_contributions=total_employer,
        total_traditional_contributions=total_traditional,
        total_roth_contributions=total_roth,
        investment_growth=final_balance - starting_balance - total_employee - total_employer,
        monthly_contribution=monthly,
        tax_savings=total_tax_savings,
        yearly_projections=tuple(projections),
        withdrawal_estimates=withdrawal_estimates(final_balance),
    )
