"""Pre-tax commuter benefits: clamp each category to its monthly cap, annualize, tax.

Pure functions. No I/O.
"""

from benefit_calc.models.inputs import CommuterInputs
from benefit_calc.models.limits import PlanYearLimits
from benefit_calc.models.results import CommuterResults
from benefit_calc.engine.limits import default_limits
from benefit_calc.engine.tax import HUNDRED, non_negative, resolve_marginal_rate


def calculate_commuter(
    inputs: CommuterInputs, limits: PlanYearLimits | None = None
) -> CommuterResults:
    limits = limits or default_limits()

    # Transit and parking have separate caps; unused transit room doesn't carry to parking
    transit = min(non_negative(inputs.transit_cost), limits.commuter_transit_monthly)
    parking = min(non_negative(inputs.parking_cost), limits.commuter_parking_monthly)

    annual_transit = transit * 12
    annual_parking = parking * 12

    rate = resolve_marginal_rate(
        inputs.annual_income, inputs.filing_status, inputs.tax_bracket, limits
    )
    transit_savings = annual_transit * (rate / HUNDRED)
    parking_savings = annual_parking * (rate / HUNDRED)

    return CommuterResults(
        marginal_rate=rate,
        annual_transit=annual_transit,
        annual_parking=annual_parking,
        annual_total=annual_transit + annual_parking,
        transit_savings=transit_savings,
        parking_savings=parking_savings,
        total_savings=transit_savings + parking_savings,
    )
