from decimal import Decimal

from benefit_calc.engine.comparison import CalculatorType, compare_scenarios, run_calculator
from benefit_calc.models.inputs import Coverage, HSAInputs
from benefit_calc.models.results import HSAResults, LifeInsuranceResults


class TestCompareScenarios:
    def test_results_in_input_order(self, limits_2025):
        scenarios = [
            HSAInputs(coverage=Coverage.FAMILY, age=54, employee_contribution=Decimal("20000")),
            HSAInputs(coverage=Coverage.FAMILY, age=55, employee_contribution=Decimal("20000")),
        ]
        results = compare_scenarios(CalculatorType.HSA, scenarios, limits_2025)
        assert [r.total_contribution for r in results] == [Decimal("8550"), Decimal("9550")]
        assert all(isinstance(r, HSAResults) for r in results)

    def test_matches_individual_runs(self, hsa_family_inputs, limits_2025):
        [compared] = compare_scenarios(CalculatorType.HSA, [hsa_family_inputs], limits_2025)
        assert compared == run_calculator(CalculatorType.HSA, hsa_family_inputs, limits_2025)

    def test_empty(self, limits_2025):
        assert compare_scenarios(CalculatorType.FSA, [], limits_2025) == []


class TestRunCalculator:
    def test_life_ignores_limits(self, life_inputs, alt_limits):
        r = run_calculator(CalculatorType.LIFE, life_inputs, alt_limits)
        assert isinstance(r, LifeInsuranceResults)
        assert r.dime_total == Decimal("1170000")

    def test_default_limits(self, commuter_inputs):
        r = run_calculator(CalculatorType.COMMUTER, commuter_inputs)
        assert r.annual_parking == Decimal("3000")

    def test_calculator_type_values(self):
        assert CalculatorType("life") is CalculatorType.LIFE
