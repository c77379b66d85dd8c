"""Health, dependent-care and limited-purpose FSA modeling.

Health FSA forfeiture accounts for the plan's carryover allowance and a
pro-rated grace-period spend estimate. Dependent care is use-it-or-lose-it
with no protection at all.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

from decimal import Decimal

from benefit_calc.models.inputs import FSAInputs
from benefit_calc.models.limits import PlanYearLimits
from benefit_calc.models.results import FSAResults
from benefit_calc.engine.limits import default_limits
from benefit_calc.engine.tax import ZERO, HUNDRED, clamp, non_negative, resolve_marginal_rate


def grace_period_utilization(expected_expenses: Decimal, grace_period_months: Decimal) -> Decimal:
    """Extra spend enabled by the grace window: a month of expenses per grace month."""
    months = max(grace_period_months, ZERO)
    return max(expected_expenses / 12 * months, ZERO)


def use_it_or_lose_it(
    election: Decimal, expected_expenses: Decimal, statutory_limit: Decimal
) -> tuple[Decimal, Decimal, Decimal]:
    """Return (capped_election, utilization, forfeiture) with no carryover or grace."""
    capped = clamp(election, ZERO, statutory_limit)
    utilization = min(capped, non_negative(expected_expenses))
    return capped, utilization, capped - utilization


def calculate_fsa(inputs: FSAInputs, limits: PlanYearLimits | None = None) -> FSAResults:
    limits = limits or default_limits()

    capped = clamp(inputs.health_election, ZERO, limits.fsa_health)
    expected = inputs.expected_eligible_expenses
    grace = grace_period_utilization(expected, inputs.grace_period_months)

    expected_utilization = min(capped, max(expected + grace, ZERO))
    unused = max(capped - expected_utilization, ZERO)
    carryover_protected = clamp(inputs.plan_carryover, ZERO, unused)
    forfeiture = max(capped - expected_utilization - carryover_protected, ZERO)

    rate = resolve_marginal_rate(
        inputs.annual_income, inputs.filing_status, inputs.tax_bracket, limits
    )
    tax_savings = capped * (rate / HUNDRED)

    dc_election = dc_utilization = dc_forfeiture = dc_tax_savings = ZERO
    if inputs.include_dependent_care:
        dc_election, dc_utilization, dc_forfeiture = use_it_or_lose_it(
            inputs.dependent_care_election,
            inputs.expected_dependent_care_expenses,
            limits.fsa_dependent_care,
        )
        dc_tax_savings = dc_election * (rate / HUNDRED)

    lp_election = lp_forfeiture = lp_tax_savings = ZERO
    if inputs.include_limited_purpose_fsa:
        lp_election, _, lp_forfeiture = use_it_or_lose_it(
            inputs.lpfsa_election, inputs.lpfsa_expected_expenses, limits.fsa_health
        )
        lp_tax_savings = lp_election * (rate / HUNDRED)

    paychecks = inputs.pay_frequency.paychecks_per_year
    per_paycheck = (capped + dc_election + lp_election) / paychecks

    return FSAResults(
        capped_health_election=capped,
        grace_period_utilization=grace,
        expected_utilization=expected_utilization,
        carryover_protected=carryover_protected,
        forfeiture_risk=forfeiture,
        marginal_rate=rate,
        tax_savings=tax_savings,
        net_benefit=tax_savings - forfeiture,
        dependent_care_election=dc_election,
        dependent_care_utilization=dc_utilization,
        dependent_care_forfeiture_risk=dc_forfeiture,
        dependent_care_tax_savings=dc_tax_savings,
        lpfsa_election=lp_election,
        lpfsa_forfeiture_risk=lp_forfeiture,
        lpfsa_tax_savings=lp_tax_savings,
        number_of_paychecks=paychecks,
        per_paycheck_deduction=per_paycheck,
    )
