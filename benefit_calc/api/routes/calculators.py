"""Calculator routes: one POST per calculator, plus the active limit table."""

import logging

from fastapi import APIRouter, Depends

from benefit_calc.api.deps import get_limits
from benefit_calc.api.schemas import (
    CommuterRequest,
    CommuterResponse,
    FSARequest,
    FSAResponse,
    HSARequest,
    HSAResponse,
    LifeInsuranceRequest,
    LifeInsuranceResponse,
    LimitsResponse,
    RetirementRequest,
    RetirementResponse,
    TaxBracketResponse,
)
from benefit_calc.config import settings
from benefit_calc.engine.commuter import calculate_commuter
from benefit_calc.engine.fsa import calculate_fsa
from benefit_calc.engine.hsa import calculate_hsa
from benefit_calc.engine.life_insurance import calculate_life_insurance
from benefit_calc.engine.recommendations import (
    fsa_recommendations,
    hsa_recommendations,
    life_insurance_recommendations,
)
from benefit_calc.engine.limits import available_plan_years
from benefit_calc.engine.retirement import calculate_retirement
from benefit_calc.models.limits import PlanYearLimits

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["calculators"])


@router.post("/calculators/hsa", response_model=HSAResponse)
async def run_hsa(req: HSARequest, limits: PlanYearLimits = Depends(get_limits)):
    """HSA contribution limits, tax savings and reserve projection."""
    inputs = req.to_inputs()
    results = calculate_hsa(inputs, limits)
    logger.debug("HSA %s age=%s limit=%s", inputs.coverage.value, inputs.age, results.annual_contribution_limit)
    return HSAResponse(results=results, recommendations=hsa_recommendations(inputs, results))


@router.post("/calculators/fsa", response_model=FSAResponse)
async def run_fsa(req: FSARequest, limits: PlanYearLimits = Depends(get_limits)):
    """Health, dependent-care and limited-purpose FSA elections."""
    inputs = req.to_inputs()
    results = calculate_fsa(inputs, limits)
    return FSAResponse(results=results, recommendations=fsa_recommendations(inputs, results))


@router.post("/calculators/commuter", response_model=CommuterResponse)
async def run_commuter(req: CommuterRequest, limits: PlanYearLimits = Depends(get_limits)):
    return CommuterResponse(results=calculate_commuter(req.to_inputs(), limits))


@router.post("/calculators/life", response_model=LifeInsuranceResponse)
async def run_life_insurance(req: LifeInsuranceRequest):
    """DIME coverage need and gap."""
    inputs = req.to_inputs()
    results = calculate_life_insurance(inputs)
    return LifeInsuranceResponse(
        results=results,
        recommendations=life_insurance_recommendations(inputs, results),
    )


@router.post("/calculators/retirement", response_model=RetirementResponse)
async def run_retirement(req: RetirementRequest, limits: PlanYearLimits = Depends(get_limits)):
    """Year-by-year 401(k) projection to retirement age."""
    inputs = req.to_inputs()
    results = calculate_retirement(inputs, limits)
    logger.debug(
        "Retirement projection over %d years, final balance %s",
        len(results.yearly_projections), results.final_balance,
    )
    return RetirementResponse(results=results)


@router.get("/limits", response_model=LimitsResponse)
async def get_plan_year_limits(limits: PlanYearLimits = Depends(get_limits)):
    """The limit table the calculators are currently running against."""
    brackets = {
        status.value: [TaxBracketResponse(up_to=b.up_to, rate=b.rate) for b in rows]
        for status, rows in limits.tax_brackets.items()
    }
    return LimitsResponse(
        plan_year=limits.plan_year,
        available_years=available_plan_years(settings.limits_path),
        hsa_individual=limits.hsa_individual,
        hsa_family=limits.hsa_family,
        hsa_catch_up=limits.hsa_catch_up,
        hsa_catch_up_age=limits.hsa_catch_up_age,
        fsa_health=limits.fsa_health,
        fsa_carryover_max=limits.fsa_carryover_max,
        fsa_dependent_care=limits.fsa_dependent_care,
        commuter_transit_monthly=limits.commuter_transit_monthly,
        commuter_parking_monthly=limits.commuter_parking_monthly,
        retirement_401k=limits.retirement_401k,
        retirement_catch_up=limits.retirement_catch_up,
        retirement_catch_up_age=limits.retirement_catch_up_age,
        tax_brackets=brackets,
    )
