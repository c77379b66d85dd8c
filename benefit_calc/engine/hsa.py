"""HSA contribution, tax savings and premium trade-off.

Employer and employee dollars share one annual limit: the combined pool is
capped, and the employer's seed is drawn from it first.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

from decimal import Decimal

from benefit_calc.models.inputs import Coverage, HSAInputs
from benefit_calc.models.limits import PlanYearLimits
from benefit_calc.models.results import HSAResults
from benefit_calc.engine.limits import default_limits
from benefit_calc.engine.tax import ZERO, HUNDRED, clamp, non_negative, resolve_marginal_rate


def contribution_limit(
    coverage: Coverage, age: int, limits: PlanYearLimits | None = None
) -> tuple[Decimal, Decimal]:
    """Return (base_limit, catch_up_allowance) for a coverage tier and age."""
    limits = limits or default_limits()
    base = limits.hsa_family if coverage == Coverage.FAMILY else limits.hsa_individual
    catch_up = limits.hsa_catch_up if age >= limits.hsa_catch_up_age else ZERO
    return base, catch_up


def calculate_hsa(inputs: HSAInputs, limits: PlanYearLimits | None = None) -> HSAResults:
    limits = limits or default_limits()

    base_limit, catch_up_allowance = contribution_limit(inputs.coverage, max(inputs.age, 0), limits)
    annual_limit = base_limit + catch_up_allowance

    employer_seed = non_negative(inputs.employer_seed)
    planned_funding = non_negative(inputs.employee_contribution) + employer_seed
    total = min(planned_funding, annual_limit)

    employer = min(employer_seed, total)
    employee = total - employer

    catch_up_contribution = clamp(total - base_limit, ZERO, catch_up_allowance)

    rate = resolve_marginal_rate(
        inputs.annual_income, inputs.filing_status, inputs.tax_bracket, limits
    )
    tax_savings = employee * (rate / HUNDRED)

    # Not clamped: a cheaper alternative plan shows up as a negative saving
    premium_savings = (
        non_negative(inputs.alt_plan_monthly_premium)
        - non_negative(inputs.hdhp_monthly_premium)
    ) * 12

    projected_reserve = employer + employee
    shortfall = max(non_negative(inputs.target_reserve) - projected_reserve, ZERO)

    return HSAResults(
        base_limit=base_limit,
        catch_up_allowance=catch_up_allowance,
        annual_contribution_limit=annual_limit,
        planned_funding=planned_funding,
        total_contribution=total,
        employer_contribution=employer,
        employee_contribution=employee,
        catch_up_contribution=catch_up_contribution,
        marginal_rate=rate,
        tax_savings=tax_savings,
        annual_premium_savings=premium_savings,
        projected_reserve=projected_reserve,
        reserve_shortfall=shortfall,
        net_cashflow_advantage=premium_savings + employer + tax_savings - employee,
    )
