"""CLI for running a benefit calculator on one input record.

Usage:
    python -m benefit_calc.cli hsa --input hsa.json
    echo '{"transitCost": 500, "parkingCost": 250, "taxBracket": 22}' | python -m benefit_calc.cli commuter
    python -m benefit_calc.cli retirement --input 401k.json --plan-year 2025 --json
"""

import argparse
import dataclasses
import json
import sys
from decimal import Decimal

from pydantic import TypeAdapter, ValidationError

from benefit_calc.api.schemas import (
    CommuterRequest,
    FSARequest,
    HSARequest,
    LifeInsuranceRequest,
    RetirementRequest,
)
from benefit_calc.config import settings
from benefit_calc.engine.comparison import CalculatorType, run_calculator
from benefit_calc.engine.limits import load_plan_year_limits
from benefit_calc.engine.recommendations import (
    fsa_recommendations,
    hsa_recommendations,
    life_insurance_recommendations,
)
from benefit_calc.models.limits import describe_filing_status

REQUEST_MODELS = {
    CalculatorType.HSA: HSARequest,
    CalculatorType.FSA: FSARequest,
    CalculatorType.COMMUTER: CommuterRequest,
    CalculatorType.LIFE: LifeInsuranceRequest,
    CalculatorType.RETIREMENT: RetirementRequest,
}

RECOMMENDERS = {
    CalculatorType.HSA: hsa_recommendations,
    CalculatorType.FSA: fsa_recommendations,
    CalculatorType.LIFE: life_insurance_recommendations,
}


def _label(name: str) -> str:
    return name.replace("_", " ").capitalize()


def print_results(title: str, results) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")
    for f in dataclasses.fields(results):
        value = getattr(results, f.name)
        if isinstance(value, tuple):
            continue
        if isinstance(value, Decimal):
            value = f"{value:,.2f}"
        print(f"  {_label(f.name) + ':':<34}{value:>20}")
    print()


def print_projection(results) -> None:
    print(f"  {'Year':>4}  {'Age':>3}  {'Salary':>12}  {'Contributed':>12}  {'Balance':>14}")
    for y in results.yearly_projections:
        print(
            f"  {y.year:>4}  {y.age:>3}  {y.salary:>12,.0f}  "
            f"{y.total_contribution:>12,.0f}  {y.balance:>14,.0f}"
        )
    print()
    for est in results.withdrawal_estimates:
        print(f"  {est.label:<28} ${est.annual_income:,.0f}/yr")
    print()


def print_recommendations(recs) -> None:
    for rec in recs:
        print(f"  [{rec.level.value.upper():>8}]  {rec.title}")
        print(f"             {rec.message}")
        for action in rec.actions:
            print(f"             - {action}")
    if recs:
        print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benefit calculator CLI")
    parser.add_argument("calculator", choices=[t.value for t in CalculatorType], help="Calculator to run")
    parser.add_argument("--input", help="JSON file with the input record (default: stdin)")
    parser.add_argument(
        "--plan-year", type=int, default=settings.plan_year,
        help=f"Plan year for limits (default: {settings.plan_year})",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    args = parser.parse_args(argv)

    kind = CalculatorType(args.calculator)
    try:
        if args.input:
            with open(args.input) as f:
                raw = json.load(f)
        else:
            raw = json.load(sys.stdin)
        limits = load_plan_year_limits(args.plan_year, settings.limits_path)
        inputs = REQUEST_MODELS[kind].model_validate(raw).to_inputs()
    except (OSError, json.JSONDecodeError, ValidationError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    results = run_calculator(kind, inputs, limits)

    if args.json:
        print(TypeAdapter(type(results)).dump_json(results, indent=2).decode())
        return 0

    print_results(f"{kind.value.upper()} results ({limits.plan_year} limits)", results)
    filing_status = getattr(inputs, "filing_status", None)
    if filing_status is not None:
        print(f"  Filing status: {describe_filing_status(filing_status)}\n")
    if kind is CalculatorType.RETIREMENT:
        print_projection(results)
    recommender = RECOMMENDERS.get(kind)
    if recommender:
        print_recommendations(recommender(inputs, results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
