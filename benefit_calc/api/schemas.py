"""Pydantic schemas for API request/response models.

Requests accept snake_case or the camelCase names older clients send.
Validation is shape-only; range handling belongs to the calculators.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from benefit_calc.models.inputs import (
    CommuterInputs,
    ContributionType,
    Coverage,
    FSAInputs,
    HSAInputs,
    LifeInsuranceInputs,
    PayFrequency,
    RetirementInputs,
)
from benefit_calc.models.limits import FilingStatus
from benefit_calc.models.results import (
    CommuterResults,
    FSAResults,
    HSAResults,
    LifeInsuranceResults,
    Recommendation,
    RetirementResults,
)


class RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Calculator requests ----

class HSARequest(RequestModel):
    coverage: Coverage = Coverage.INDIVIDUAL
    age: int = 0
    employee_contribution: Decimal = Decimal("0")
    employer_seed: Decimal = Decimal("0")
    hdhp_monthly_premium: Decimal = Decimal("0")
    alt_plan_monthly_premium: Decimal = Decimal("0")
    target_reserve: Decimal = Decimal("0")
    annual_income: Decimal | None = None
    filing_status: FilingStatus | None = None
    tax_bracket: Decimal | None = None
    anticipated_medical_expenses: Decimal = Decimal("0")
    anticipated_dental_expenses: Decimal = Decimal("0")
    anticipated_vision_expenses: Decimal = Decimal("0")
    plan_deductible_individual: Decimal = Decimal("0")
    plan_deductible_family: Decimal = Decimal("0")

    @model_validator(mode="before")
    @classmethod
    def resolve_legacy_contribution(cls, data: Any) -> Any:
        """Fold the legacy `contribution` field into `employee_contribution`.

        An explicit employee contribution wins when both are sent.
        """
        if not isinstance(data, dict) or "contribution" not in data:
            return data
        data = dict(data)
        legacy = data.pop("contribution")
        if "employee_contribution" not in data and "employeeContribution" not in data:
            data["employee_contribution"] = legacy
        return data

    def to_inputs(self) -> HSAInputs:
        return HSAInputs(**self.model_dump())


class FSARequest(RequestModel):
    health_election: Decimal = Decimal("0")
    expected_eligible_expenses: Decimal = Decimal("0")
    plan_carryover: Decimal = Decimal("0")
    grace_period_months: Decimal = Decimal("0")
    include_dependent_care: bool = False
    dependent_care_election: Decimal = Decimal("0")
    expected_dependent_care_expenses: Decimal = Decimal("0")
    include_limited_purpose_fsa: bool = False
    lpfsa_election: Decimal = Decimal("0")
    lpfsa_expected_expenses: Decimal = Decimal("0")
    pay_frequency: PayFrequency = PayFrequency.BIWEEKLY
    annual_income: Decimal | None = None
    filing_status: FilingStatus | None = None
    tax_bracket: Decimal | None = None

    def to_inputs(self) -> FSAInputs:
        return FSAInputs(**self.model_dump())


class CommuterRequest(RequestModel):
    transit_cost: Decimal = Decimal("0")
    parking_cost: Decimal = Decimal("0")
    annual_income: Decimal | None = None
    filing_status: FilingStatus | None = None
    tax_bracket: Decimal | None = None

    def to_inputs(self) -> CommuterInputs:
        return CommuterInputs(**self.model_dump())


class LifeInsuranceRequest(RequestModel):
    total_debt: Decimal = Decimal("0")
    income: Decimal = Decimal("0")
    mortgage_balance: Decimal = Decimal("0")
    education_costs: Decimal = Decimal("0")
    income_years: Decimal = Decimal("0")
    current_insurance: Decimal = Decimal("0")
    current_assets: Decimal = Decimal("0")
    children_under_18: int = 0
    monthly_living_expenses: Decimal = Decimal("0")

    def to_inputs(self) -> LifeInsuranceInputs:
        return LifeInsuranceInputs(**self.model_dump())


class RetirementRequest(RequestModel):
    current_age: int = 30
    retirement_age: int = 65
    current_salary: Decimal = Decimal("0")
    current_savings: Decimal = Decimal("0")
    employee_contribution: Decimal = Decimal("0")
    employer_match: Decimal = Decimal("0")
    employer_match_cap: Decimal = Decimal("0")
    expected_return: Decimal = Decimal("7")
    salary_growth: Decimal = Decimal("3")
    contribution_type: ContributionType = ContributionType.TRADITIONAL
    traditional_percentage: Decimal = Decimal("50")
    tax_bracket: Decimal = Decimal("0")

    @model_validator(mode="before")
    @classmethod
    def resolve_legacy_split(cls, data: Any) -> Any:
        """Fold the legacy `bothSplitTraditional` slider into `traditional_percentage`."""
        if not isinstance(data, dict) or "bothSplitTraditional" not in data:
            return data
        data = dict(data)
        legacy = data.pop("bothSplitTraditional")
        if "traditional_percentage" not in data and "traditionalPercentage" not in data:
            data["traditional_percentage"] = legacy
        return data

    def to_inputs(self) -> RetirementInputs:
        return RetirementInputs(**self.model_dump())


class ComparisonRequest(BaseModel):
    scenarios: list[dict[str, Any]] = Field(..., min_length=1)


# ---- Calculator responses ----

class HSAResponse(BaseModel):
    results: HSAResults
    recommendations: list[Recommendation] = []


class FSAResponse(BaseModel):
    results: FSAResults
    recommendations: list[Recommendation] = []


class CommuterResponse(BaseModel):
    results: CommuterResults
    recommendations: list[Recommendation] = []


class LifeInsuranceResponse(BaseModel):
    results: LifeInsuranceResults
    recommendations: list[Recommendation] = []


class RetirementResponse(BaseModel):
    results: RetirementResults
    recommendations: list[Recommendation] = []


class ComparisonResponse(BaseModel):
    calculator_type: str
    results: list[dict[str, Any]]


class TaxBracketResponse(BaseModel):
    up_to: Decimal | None
    rate: Decimal


class LimitsResponse(BaseModel):
    plan_year: int
    available_years: list[int]
    hsa_individual: Decimal
    hsa_family: Decimal
    hsa_catch_up: Decimal
    hsa_catch_up_age: int
    fsa_health: Decimal
    fsa_carryover_max: Decimal
    fsa_dependent_care: Decimal
    commuter_transit_monthly: Decimal
    commuter_parking_monthly: Decimal
    retirement_401k: Decimal
    retirement_catch_up: Decimal
    retirement_catch_up_age: int
    tax_brackets: dict[str, list[TaxBracketResponse]]


# ---- Saved sessions ----

class CalculationSessionCreate(RequestModel):
    calculator_type: str = Field(..., min_length=1)
    input_data: str = Field(..., description="JSON string of calculator inputs")
    results: str = Field(..., description="JSON string of calculator results")


class CalculationSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    calculator_type: str
    input_data: str
    results: str
    created_at: datetime
