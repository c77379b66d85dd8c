from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class HSAResults:
    # Limits
    base_limit: Decimal = Decimal("0")
    catch_up_allowance: Decimal = Decimal("0")
    annual_contribution_limit: Decimal = Decimal("0")

    # Funding (employer draws from the capped pool first)
    planned_funding: Decimal = Decimal("0")
    total_contribution: Decimal = Decimal("0")
    employer_contribution: Decimal = Decimal("0")
    employee_contribution: Decimal = Decimal("0")
    catch_up_contribution: Decimal = Decimal("0")

    # Savings
    marginal_rate: Decimal = Decimal("0")
    tax_savings: Decimal = Decimal("0")
    annual_premium_savings: Decimal = Decimal("0")  # Negative = HDHP costs more

    # Reserve
    projected_reserve: Decimal = Decimal("0")
    reserve_shortfall: Decimal = Decimal("0")

    net_cashflow_advantage: Decimal = Decimal("0")


@dataclass(frozen=True)
class FSAResults:
    # Health FSA
    capped_health_election: Decimal = Decimal("0")
    grace_period_utilization: Decimal = Decimal("0")
    expected_utilization: Decimal = Decimal("0")
    carryover_protected: Decimal = Decimal("0")
    forfeiture_risk: Decimal = Decimal("0")
    marginal_rate: Decimal = Decimal("0")
    tax_savings: Decimal = Decimal("0")
    net_benefit: Decimal = Decimal("0")

    # Dependent care
    dependent_care_election: Decimal = Decimal("0")
    dependent_care_utilization: Decimal = Decimal("0")
    dependent_care_forfeiture_risk: Decimal = Decimal("0")
    dependent_care_tax_savings: Decimal = Decimal("0")

    # Limited-purpose FSA
    lpfsa_election: Decimal = Decimal("0")
    lpfsa_forfeiture_risk: Decimal = Decimal("0")
    lpfsa_tax_savings: Decimal = Decimal("0")

    # Payroll
    number_of_paychecks: int = 0
    per_paycheck_deduction: Decimal = Decimal("0")


@dataclass(frozen=True)
class CommuterResults:
    marginal_rate: Decimal = Decimal("0")
    annual_transit: Decimal = Decimal("0")
    annual_parking: Decimal = Decimal("0")
    annual_total: Decimal = Decimal("0")
    transit_savings: Decimal = Decimal("0")
    parking_savings: Decimal = Decimal("0")
    total_savings: Decimal = Decimal("0")


@dataclass(frozen=True)
class LifeInsuranceResults:
    income_replacement: Decimal = Decimal("0")
    dime_total: Decimal = Decimal("0")
    additional_needed: Decimal = Decimal("0")

    # Living expenses over the replacement period, when higher than income
    living_expense_need: Decimal = Decimal("0")
    adjusted_need: Decimal = Decimal("0")


@dataclass(frozen=True)
class RetirementYear:
    year: int
    age: int
    salary: Decimal
    employee_contribution: Decimal
    employer_contribution: Decimal
    total_contribution: Decimal
    traditional_contribution: Decimal
    roth_contribution: Decimal
    balance: Decimal  # End of year
    tax_savings: Decimal


@dataclass(frozen=True)
class WithdrawalEstimate:
    label: str
    rate: Decimal  # Fraction, e.g. Decimal("0.04")
    annual_income: Decimal


@dataclass(frozen=True)
class RetirementResults:
    final_balance: Decimal = Decimal("0")
    total_contributions: Decimal = Decimal("0")  # Employee deferrals
    employer_contributions: Decimal = Decimal("0")
    total_traditional_contributions: Decimal = Decimal("0")
    total_roth_contributions: Decimal = Decimal("0")
    investment_growth: Decimal = Decimal("0")
    monthly_contribution: Decimal = Decimal("0")  # Average over the projection
    tax_savings: Decimal = Decimal("0")
    yearly_projections: tuple[RetirementYear, ...] = ()
    withdrawal_estimates: tuple[WithdrawalEstimate, ...] = field(default_factory=tuple)


class RecommendationLevel(Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    GOOD = "good"
    OPTIMAL = "optimal"


@dataclass(frozen=True)
class Recommendation:
    level: RecommendationLevel
    title: str
    message: str
    actions: tuple[str, ...] = ()
