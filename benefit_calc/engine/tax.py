"""Progressive bracket lookup and shared clamping helpers.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from benefit_calc.models.limits import FilingStatus, PlanYearLimits
from benefit_calc.engine.limits import default_limits

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def non_negative(value: Decimal | None) -> Decimal:
    """Missing or negative amounts count as zero."""
    if value is None or value < 0:
        return ZERO
    return value


def clamp(value: Decimal, lower: Decimal, upper: Decimal) -> Decimal:
    return max(lower, min(value, upper))


def marginal_rate(
    income: Decimal | None,
    filing_status: FilingStatus | None = None,
    limits: PlanYearLimits | None = None,
) -> Decimal:
    """Marginal federal rate (percent) for an annual income.

    Missing, non-finite or non-positive income falls in no bracket and returns 0.
    Filing status defaults to single.
    """
    if income is None or not income.is_finite() or income <= 0:
        return ZERO

    limits = limits or default_limits()
    brackets = limits.brackets_for(filing_status)
    for bracket in brackets:
        if bracket.up_to is None or income <= bracket.up_to:
            return bracket.rate

    return brackets[-1].rate if brackets else ZERO


def resolve_marginal_rate(
    annual_income: Decimal | None,
    filing_status: FilingStatus | None,
    tax_bracket: Decimal | None,
    limits: PlanYearLimits | None = None,
) -> Decimal:
    """Rate used by the calculators.

    Income + filing status drive a bracket lookup; callers that only send a
    flat tax_bracket (older clients) get that rate instead.
    """
    if annual_income is not None and annual_income.is_finite() and annual_income > 0:
        return marginal_rate(annual_income, filing_status, limits)
    if tax_bracket is not None:
        return clamp(tax_bracket, ZERO, HUNDRED)
    return ZERO
