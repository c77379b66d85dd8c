"""Scenario comparison routes."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from benefit_calc.api.deps import get_limits
from benefit_calc.api.schemas import (
    CommuterRequest,
    ComparisonRequest,
    ComparisonResponse,
    FSARequest,
    HSARequest,
    LifeInsuranceRequest,
    RetirementRequest,
)
from benefit_calc.engine.comparison import CalculatorType, compare_scenarios
from benefit_calc.models.limits import PlanYearLimits

router = APIRouter(prefix="/api/v1/compare", tags=["comparison"])

_REQUEST_MODELS = {
    CalculatorType.HSA: HSARequest,
    CalculatorType.FSA: FSARequest,
    CalculatorType.COMMUTER: CommuterRequest,
    CalculatorType.LIFE: LifeInsuranceRequest,
    CalculatorType.RETIREMENT: RetirementRequest,
}


@router.post("/{calculator_type}", response_model=ComparisonResponse)
async def run_comparison(
    calculator_type: str,
    req: ComparisonRequest,
    limits: PlanYearLimits = Depends(get_limits),
):
    """Run one calculator over several scenarios against the same limits."""
    try:
        kind = CalculatorType(calculator_type)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown calculator: {calculator_type}")

    model = _REQUEST_MODELS[kind]
    try:
        scenarios = [model.model_validate(s).to_inputs() for s in req.scenarios]
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))

    results = compare_scenarios(kind, scenarios, limits)
    return ComparisonResponse(calculator_type=kind.value, results=[asdict(r) for r in results])
