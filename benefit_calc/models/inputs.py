from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from benefit_calc.models.limits import FilingStatus


class Coverage(Enum):
    INDIVIDUAL = "individual"
    FAMILY = "family"


class PayFrequency(Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"

    @property
    def paychecks_per_year(self) -> int:
        return {
            PayFrequency.WEEKLY: 52,
            PayFrequency.BIWEEKLY: 26,
            PayFrequency.SEMIMONTHLY: 24,
            PayFrequency.MONTHLY: 12,
        }[self]


class ContributionType(Enum):
    TRADITIONAL = "traditional"
    ROTH = "roth"
    BOTH = "both"


@dataclass(frozen=True)
class HSAInputs:
    coverage: Coverage = Coverage.INDIVIDUAL
    age: int = 0

    # Funding (annual)
    employee_contribution: Decimal = Decimal("0")
    employer_seed: Decimal = Decimal("0")

    # Premiums (monthly)
    hdhp_monthly_premium: Decimal = Decimal("0")
    alt_plan_monthly_premium: Decimal = Decimal("0")

    target_reserve: Decimal = Decimal("0")

    # Tax: income + filing status, or a flat rate from older clients
    annual_income: Decimal | None = None
    filing_status: FilingStatus | None = None
    tax_bracket: Decimal | None = None  # Percent

    # Expense planning (only used for recommendations)
    anticipated_medical_expenses: Decimal = Decimal("0")
    anticipated_dental_expenses: Decimal = Decimal("0")
    anticipated_vision_expenses: Decimal = Decimal("0")
    plan_deductible_individual: Decimal = Decimal("0")
    plan_deductible_family: Decimal = Decimal("0")

    @property
    def total_anticipated_expenses(self) -> Decimal:
        return (
            self.anticipated_medical_expenses
            + self.anticipated_dental_expenses
            + self.anticipated_vision_expenses
        )

    @property
    def relevant_deductible(self) -> Decimal:
        if self.coverage == Coverage.FAMILY:
            return self.plan_deductible_family
        return self.plan_deductible_individual


@dataclass(frozen=True)
class FSAInputs:
    # Health FSA
    health_election: Decimal = Decimal("0")
    expected_eligible_expenses: Decimal = Decimal("0")
    plan_carryover: Decimal = Decimal("0")
    grace_period_months: Decimal = Decimal("0")

    # Dependent-care FSA (reimbursement only, no carryover or grace)
    include_dependent_care: bool = False
    dependent_care_election: Decimal = Decimal("0")
    expected_dependent_care_expenses: Decimal = Decimal("0")

    # Limited-purpose FSA (dental/vision, pairs with an HSA)
    include_limited_purpose_fsa: bool = False
    lpfsa_election: Decimal = Decimal("0")
    lpfsa_expected_expenses: Decimal = Decimal("0")

    pay_frequency: PayFrequency = PayFrequency.BIWEEKLY

    annual_income: Decimal | None = None
    filing_status: FilingStatus | None = None
    tax_bracket: Decimal | None = None


@dataclass(frozen=True)
class CommuterInputs:
    transit_cost: Decimal = Decimal("0")  # Monthly
    parking_cost: Decimal = Decimal("0")  # Monthly
    annual_income: Decimal | None = None
    filing_status: FilingStatus | None = None
    tax_bracket: Decimal | None = None


@dataclass(frozen=True)
class LifeInsuranceInputs:
    # DIME components
    total_debt: Decimal = Decimal("0")  # Non-mortgage
    income: Decimal = Decimal("0")
    mortgage_balance: Decimal = Decimal("0")
    education_costs: Decimal = Decimal("0")
    income_years: Decimal = Decimal("0")

    current_insurance: Decimal = Decimal("0")

    # Household context
    current_assets: Decimal = Decimal("0")
    children_under_18: int = 0
    monthly_living_expenses: Decimal = Decimal("0")


@dataclass(frozen=True)
class RetirementInputs:
    current_age: int = 30
    retirement_age: int = 65
    current_salary: Decimal = Decimal("0")
    current_savings: Decimal = Decimal("0")

    # Percentages (e.g. Decimal("6") = 6%)
    employee_contribution: Decimal = Decimal("0")  # % of salary
    employer_match: Decimal = Decimal("0")  # % of matchable contribution
    employer_match_cap: Decimal = Decimal("0")  # % of salary eligible for match
    expected_return: Decimal = Decimal("7")
    salary_growth: Decimal = Decimal("3")

    contribution_type: ContributionType = ContributionType.TRADITIONAL
    traditional_percentage: Decimal = Decimal("50")  # Split of base deferrals when BOTH
    tax_bracket: Decimal = Decimal("0")

    @property
    def years_to_retirement(self) -> int:
        return max(self.retirement_age - self.current_age, 0)
