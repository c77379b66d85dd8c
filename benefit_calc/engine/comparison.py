"""Side-by-side scenarios: the same calculator run over several input records."""

from enum import Enum
from typing import Any, Callable, Sequence

from benefit_calc.models.limits import PlanYearLimits
from benefit_calc.engine.commuter import calculate_commuter
from benefit_calc.engine.fsa import calculate_fsa
from benefit_calc.engine.hsa import calculate_hsa
from benefit_calc.engine.life_insurance import calculate_life_insurance
from benefit_calc.engine.limits import default_limits
from benefit_calc.engine.retirement import calculate_retirement


class CalculatorType(Enum):
    HSA = "hsa"
    FSA = "fsa"
    COMMUTER = "commuter"
    LIFE = "life"
    RETIREMENT = "retirement"


def _life(inputs, limits):
    return calculate_life_insurance(inputs)


CALCULATORS: dict[CalculatorType, Callable[[Any, PlanYearLimits], Any]] = {
    CalculatorType.HSA: calculate_hsa,
    CalculatorType.FSA: calculate_fsa,
    CalculatorType.COMMUTER: calculate_commuter,
    CalculatorType.LIFE: _life,
    CalculatorType.RETIREMENT: calculate_retirement,
}


def run_calculator(calculator_type: CalculatorType, inputs: Any, limits: PlanYearLimits | None = None) -> Any:
    return CALCULATORS[calculator_type](inputs, limits or default_limits())


def compare_scenarios(
    calculator_type: CalculatorType,
    scenarios: Sequence[Any],
    limits: PlanYearLimits | None = None,
) -> list[Any]:
    """Results for each scenario, in input order.

    All scenarios share one limit table so differences come from inputs alone.
    """
    limits = limits or default_limits()
    return [run_calculator(calculator_type, s, limits) for s in scenarios]
