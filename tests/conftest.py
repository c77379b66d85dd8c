"""Shared test fixtures.

Limits: the bundled 2025 table, plus a made-up alternate year for checking
that calculators read every ceiling from the table they are given.
Scenarios: the reference household records used across engine and API tests.
"""

import dataclasses
from decimal import Decimal

import pytest

from benefit_calc.engine.limits import load_plan_year_limits
from benefit_calc.models.inputs import (
    CommuterInputs,
    Coverage,
    FSAInputs,
    HSAInputs,
    LifeInsuranceInputs,
    RetirementInputs,
)
from benefit_calc.models.limits import PlanYearLimits


@pytest.fixture
def limits_2025() -> PlanYearLimits:
    return load_plan_year_limits(2025)


@pytest.fixture
def alt_limits(limits_2025) -> PlanYearLimits:
    """A hypothetical year with every ceiling moved."""
    return dataclasses.replace(
        limits_2025,
        plan_year=2099,
        hsa_individual=Decimal("5000"),
        hsa_family=Decimal("10000"),
        hsa_catch_up=Decimal("2000"),
        hsa_catch_up_age=60,
        fsa_health=Decimal("4000"),
        fsa_dependent_care=Decimal("7500"),
        commuter_transit_monthly=Decimal("400"),
        commuter_parking_monthly=Decimal("350"),
        retirement_401k=Decimal("30000"),
        retirement_catch_up=Decimal("10000"),
        retirement_catch_up_age=55,
    )


@pytest.fixture
def hsa_family_inputs() -> HSAInputs:
    """Family coverage, age 57, over-funded with a $1K employer seed."""
    return HSAInputs(
        coverage=Coverage.FAMILY,
        age=57,
        employee_contribution=Decimal("9000"),
        employer_seed=Decimal("1000"),
        hdhp_monthly_premium=Decimal("300"),
        alt_plan_monthly_premium=Decimal("500"),
        target_reserve=Decimal("6000"),
        tax_bracket=Decimal("24"),
    )


@pytest.fixture
def fsa_inputs() -> FSAInputs:
    return FSAInputs(
        health_election=Decimal("2600"),
        expected_eligible_expenses=Decimal("2400"),
        tax_bracket=Decimal("22"),
    )


@pytest.fixture
def commuter_inputs() -> CommuterInputs:
    return CommuterInputs(
        transit_cost=Decimal("500"),
        parking_cost=Decimal("250"),
        tax_bracket=Decimal("22"),
    )


@pytest.fixture
def life_inputs() -> LifeInsuranceInputs:
    return LifeInsuranceInputs(
        total_debt=Decimal("50000"),
        income=Decimal("80000"),
        mortgage_balance=Decimal("200000"),
        education_costs=Decimal("120000"),
        income_years=Decimal("10"),
        current_insurance=Decimal("100000"),
    )


@pytest.fixture
def retirement_inputs() -> RetirementInputs:
    """30-year-old, $75K salary, 6% deferral with a 50% match up to 6%."""
    return RetirementInputs(
        current_age=30,
        retirement_age=65,
        current_salary=Decimal("75000"),
        current_savings=Decimal("20000"),
        employee_contribution=Decimal("6"),
        employer_match=Decimal("50"),
        employer_match_cap=Decimal("6"),
        expected_return=Decimal("7"),
        salary_growth=Decimal("3"),
        tax_bracket=Decimal("22"),
    )
