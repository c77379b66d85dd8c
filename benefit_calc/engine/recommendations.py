"""Rule-based guidance derived from calculator inputs and results.

Rules run in priority order and only the first three that fire are returned.
Every ratio is guarded: a zero denominator means the rule does not apply.
"""

from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP

from benefit_calc.models.inputs import FSAInputs, HSAInputs, LifeInsuranceInputs
from benefit_calc.models.results import (
    FSAResults,
    HSAResults,
    LifeInsuranceResults,
    Recommendation,
    RecommendationLevel,
)
from benefit_calc.engine.tax import ZERO, HUNDRED

MAX_RECOMMENDATIONS = 3

Level = RecommendationLevel


def _dollars(amount: Decimal) -> str:
    return f"${amount.quantize(Decimal('1'), ROUND_HALF_UP):,}"


def _pct(ratio: Decimal) -> str:
    return f"{(ratio * HUNDRED).quantize(Decimal('1'), ROUND_HALF_UP)}%"


def _ceil_hundred(amount: Decimal) -> Decimal:
    return (amount / HUNDRED).to_integral_value(ROUND_CEILING) * HUNDRED


def _ratio(numerator: Decimal, denominator: Decimal) -> Decimal | None:
    if denominator <= 0:
        return None
    return numerator / denominator


# ── HSA ──────────────────────────────────────────────────────────


def hsa_recommendations(inputs: HSAInputs, results: HSAResults) -> list[Recommendation]:
    recs: list[Recommendation] = []
    reserve = results.projected_reserve
    deductible = inputs.relevant_deductible
    anticipated = inputs.total_anticipated_expenses

    # Deductible coverage
    coverage = _ratio(reserve, deductible)
    if coverage is not None:
        gap = deductible - reserve
        if coverage >= 1:
            recs.append(Recommendation(
                level=Level.OPTIMAL,
                title="Excellent Deductible Protection",
                message=(
                    f"Your projected HSA balance of {_dollars(reserve)} fully covers your "
                    f"{_dollars(deductible)} deductible."
                ),
                actions=(
                    "Consider this your emergency medical fund",
                    "Any unused balance rolls over year-over-year for future needs",
                ),
            ))
        elif coverage >= Decimal("0.75"):
            recs.append(Recommendation(
                level=Level.GOOD,
                title="Good Deductible Coverage",
                message=f"Your projected HSA balance covers {_pct(coverage)} of your deductible.",
                actions=(
                    f"Increase annual contribution by {_dollars(_ceil_hundred(gap))} to fully cover deductible",
                    "Review anticipated expenses to refine your target",
                ),
            ))
        elif coverage >= Decimal("0.5"):
            recs.append(Recommendation(
                level=Level.WARNING,
                title="Moderate Deductible Gap",
                message=(
                    f"Your HSA balance only covers {_pct(coverage)} of your {_dollars(deductible)} "
                    f"deductible. A major medical event would leave {_dollars(gap)} out-of-pocket."
                ),
                actions=(
                    f"Increase contribution to at least {_dollars(deductible)} to cover deductible",
                    "Build your HSA balance gradually over 2-3 years if an immediate increase isn't feasible",
                    "Keep emergency savings available for medical costs",
                ),
            ))
        else:
            recs.append(Recommendation(
                level=Level.CRITICAL,
                title="Significant Deductible Gap",
                message=(
                    f"Your HSA balance will only cover {_pct(coverage)} of your deductible. "
                    "A major medical event could strain your finances significantly."
                ),
                actions=(
                    f"Increase contribution by {_dollars(gap)} to protect against high medical costs",
                    "Consider if the HDHP is the right plan choice given your financial situation",
                    "Ensure you have emergency savings outside the HSA for medical costs",
                ),
            ))

    # Anticipated expenses
    if anticipated > 0:
        if reserve >= anticipated + deductible:
            recs.append(Recommendation(
                level=Level.OPTIMAL,
                title="Full Expense Coverage",
                message=(
                    f"Your HSA covers both your anticipated {_dollars(anticipated)} in routine "
                    "expenses and your deductible."
                ),
                actions=(
                    "Track actual expenses monthly to stay on budget",
                    "Save receipts for HSA reimbursements",
                ),
            ))
        elif reserve >= anticipated:
            recs.append(Recommendation(
                level=Level.GOOD,
                title="Routine Expenses Covered",
                message=(
                    f"Your HSA covers your anticipated {_dollars(anticipated)} in routine expenses, "
                    "but may fall short if you hit your deductible."
                ),
            ))
        else:
            shortfall = anticipated - reserve
            recs.append(Recommendation(
                level=Level.WARNING,
                title="Expense Forecast Gap",
                message=(
                    f"You've forecasted {_dollars(anticipated)} in expenses, but your HSA will only "
                    f"have {_dollars(reserve)}. You'll need {_dollars(shortfall)} from other sources."
                ),
                actions=(
                    "Reduce anticipated expenses by delaying non-urgent care",
                    f"Increase HSA contribution by {_dollars(_ceil_hundred(shortfall))}",
                    "Budget for out-of-pocket costs beyond HSA balance",
                ),
            ))

    # Tax optimization
    savings_rate = _ratio(results.tax_savings, results.employee_contribution)
    if results.tax_savings > 0 and savings_rate is not None and savings_rate >= Decimal("0.2"):
        headroom = results.annual_contribution_limit - results.employee_contribution
        recs.append(Recommendation(
            level=Level.OPTIMAL,
            title="Strong Tax Savings",
            message=(
                f"You're saving {_dollars(results.tax_savings)} in taxes "
                f"({_pct(savings_rate)} of your contribution)."
            ),
            actions=(
                "Consider maxing out your HSA contribution if financially feasible",
                f"You could save up to {_dollars(headroom * results.marginal_rate / HUNDRED)} "
                "more in taxes by contributing the maximum",
            ),
        ))

    # Premium savings
    if results.annual_premium_savings > 0:
        if results.annual_premium_savings >= results.employee_contribution:
            recs.append(Recommendation(
                level=Level.OPTIMAL,
                title="Premium Savings Exceed Contribution",
                message=(
                    f"Your HDHP saves you {_dollars(results.annual_premium_savings)} vs. the "
                    f"alternative plan, more than your {_dollars(results.employee_contribution)} "
                    "HSA contribution."
                ),
                actions=(
                    "Redirect premium savings into the HSA to build your reserve faster",
                ),
            ))
        else:
            covered = _ratio(results.annual_premium_savings, results.employee_contribution)
            recs.append(Recommendation(
                level=Level.GOOD,
                title="Premium Savings Help Offset Contribution",
                message=(
                    f"Your HDHP saves {_dollars(results.annual_premium_savings)} in premiums, "
                    f"covering {_pct(covered or ZERO)} of your HSA contribution."
                ),
            ))

    # Limit utilization
    utilization = _ratio(results.total_contribution, results.annual_contribution_limit)
    if utilization is not None and utilization < Decimal("0.5") and results.marginal_rate >= 22:
        room = results.annual_contribution_limit - results.total_contribution
        recs.append(Recommendation(
            level=Level.GOOD,
            title="Room for Tax-Advantaged Growth",
            message=(
                f"You're only using {_pct(utilization)} of your HSA contribution limit. In your "
                f"{results.marginal_rate}% bracket you could save an additional "
                f"{_dollars(room * results.marginal_rate / HUNDRED)} by maximizing contributions."
            ),
            actions=(
                f"Consider increasing contribution toward the {_dollars(results.annual_contribution_limit)} limit",
            ),
        ))

    return recs[:MAX_RECOMMENDATIONS]


# ── FSA ──────────────────────────────────────────────────────────


def fsa_recommendations(inputs: FSAInputs, results: FSAResults) -> list[Recommendation]:
    recs: list[Recommendation] = []
    election = results.capped_health_election

    # Forfeiture risk
    risk = _ratio(results.forfeiture_risk, election)
    if results.forfeiture_risk > 0 and risk is not None:
        if risk >= Decimal("0.3"):
            recs.append(Recommendation(
                level=Level.CRITICAL,
                title="High Forfeiture Risk",
                message=(
                    f"You're at risk of losing {_dollars(results.forfeiture_risk)} "
                    f"({_pct(risk)} of your election)."
                ),
                actions=(
                    f"Reduce election to {_dollars(_ceil_hundred(inputs.expected_eligible_expenses))} "
                    "to match forecasted expenses",
                    "Over-electing costs you real money due to use-it-or-lose-it rules",
                ),
            ))
        elif risk >= Decimal("0.15"):
            recs.append(Recommendation(
                level=Level.WARNING,
                title="Moderate Forfeiture Risk",
                message=(
                    f"You may forfeit {_dollars(results.forfeiture_risk)} ({_pct(risk)} of election). "
                    "Carryover and grace period protection isn't enough to save all unused funds."
                ),
                actions=(
                    f"Consider reducing next year's election by {_dollars(_ceil_hundred(results.forfeiture_risk))}",
                    "Schedule dental/vision appointments to use remaining funds",
                ),
            ))
        else:
            recs.append(Recommendation(
                level=Level.GOOD,
                title="Low Forfeiture Risk",
                message=(
                    f"Small potential forfeiture of {_dollars(results.forfeiture_risk)} ({_pct(risk)}). "
                    "This is a reasonable buffer for planning uncertainty."
                ),
            ))
    elif results.forfeiture_risk == 0 and inputs.expected_eligible_expenses > 0:
        used = _ratio(inputs.expected_eligible_expenses, election)
        if used is not None and used >= Decimal("0.95"):
            recs.append(Recommendation(
                level=Level.OPTIMAL,
                title="Well-Balanced Election",
                message="Your election matches your expected expenses. You're maximizing tax savings while minimizing forfeiture risk.",
                actions=(
                    "Track expenses monthly to ensure you stay on budget",
                    "Keep receipts for all FSA purchases",
                ),
            ))

    # Rollover protection
    if inputs.plan_carryover > 0 or inputs.grace_period_months > 0:
        if results.carryover_protected > 0 and results.forfeiture_risk == 0:
            if inputs.plan_carryover > 0:
                protection = f"{_dollars(inputs.plan_carryover)} carryover"
            else:
                protection = f"{inputs.grace_period_months}-month grace period"
            recs.append(Recommendation(
                level=Level.OPTIMAL,
                title="Strong FSA Protection",
                message=(
                    f"Your plan's {protection} will protect all unused funds. You can carry "
                    f"forward {_dollars(results.carryover_protected)}."
                ),
                actions=("You can safely elect slightly above expected expenses",),
            ))
    elif inputs.health_election > 1000:
        recs.append(Recommendation(
            level=Level.WARNING,
            title="No Rollover Protection",
            message=(
                "Your plan has neither carryover nor grace period. Every dollar must be spent "
                "by the end of the plan year."
            ),
            actions=(
                "Only elect what you're certain you'll spend",
                "Plan major expenses (glasses, dental work) for Q4 to use remaining funds",
                "Ask HR if your plan will add carryover/grace period next year",
            ),
        ))

    # Dependent care over-election
    if inputs.include_dependent_care and results.dependent_care_forfeiture_risk > 0:
        dc_risk = _ratio(results.dependent_care_forfeiture_risk, results.dependent_care_election)
        if dc_risk is not None and dc_risk >= Decimal("0.2"):
            recs.append(Recommendation(
                level=Level.WARNING,
                title="Dependent Care FSA Over-Election",
                message=(
                    f"Your dependent care FSA may forfeit {_dollars(results.dependent_care_forfeiture_risk)}. "
                    "Dependent care FSA reimburses after expenses are incurred."
                ),
                actions=(
                    f"Reduce election to {_dollars(inputs.expected_dependent_care_expenses)} to match actual expenses",
                    "No carryover is allowed on a dependent care FSA",
                ),
            ))

    # LPFSA pairing
    if not inputs.include_limited_purpose_fsa:
        recs.append(Recommendation(
            level=Level.GOOD,
            title="Consider Limited Purpose FSA",
            message=(
                "If you have an HSA, a Limited Purpose FSA covers dental and vision expenses "
                "with front-loaded funds while keeping HSA eligibility."
            ),
            actions=(
                "LPFSA covers dental cleanings, fillings, orthodontics, glasses, contacts",
                "Use LPFSA for planned dental/vision, save HSA for medical emergencies",
            ),
        ))

    # Paycheck impact
    monthly_impact = results.per_paycheck_deduction * results.number_of_paychecks / 12
    if monthly_impact > 300:
        recs.append(Recommendation(
            level=Level.GOOD,
            title="Paycheck Impact",
            message=(
                f"Your FSA will reduce monthly take-home pay by approximately {_dollars(monthly_impact)} "
                f"({results.number_of_paychecks} paychecks x {_dollars(results.per_paycheck_deduction)} each)."
            ),
            actions=(
                "You get access to the full health election on day 1",
                "Deductions spread evenly over the year to pay it back",
            ),
        ))

    # Net tax benefit
    benefit = _ratio(results.net_benefit, election)
    if results.net_benefit > 0 and benefit is not None and benefit >= Decimal("0.2"):
        recs.append(Recommendation(
            level=Level.OPTIMAL,
            title="Strong Tax Benefit",
            message=(
                f"After accounting for potential forfeiture, you're netting "
                f"{_dollars(results.net_benefit)} in tax savings ({_pct(benefit)} benefit)."
            ),
            actions=("Continue tracking expenses to maintain this advantage",),
        ))

    return recs[:MAX_RECOMMENDATIONS]


# ── Life insurance ───────────────────────────────────────────────


def life_insurance_recommendations(
    inputs: LifeInsuranceInputs, results: LifeInsuranceResults
) -> list[Recommendation]:
    recs: list[Recommendation] = []
    need = results.adjusted_need
    gap = results.additional_needed
    coverage = _ratio(inputs.current_insurance, need) or ZERO

    # Coverage adequacy
    if gap == 0:
        recs.append(Recommendation(
            level=Level.OPTIMAL,
            title="Adequate Coverage",
            message=(
                f"Your current {_dollars(inputs.current_insurance)} in life insurance meets "
                f"your calculated need of {_dollars(need)}."
            ),
            actions=(
                "Review coverage annually as your financial situation changes",
                "Increase coverage if you have more children or take on additional debt",
            ),
        ))
    elif coverage >= Decimal("0.75"):
        recs.append(Recommendation(
            level=Level.GOOD,
            title="Moderate Coverage Gap",
            message=(
                f"You have {_pct(coverage)} of recommended coverage. Your family would need an "
                f"additional {_dollars(gap)} to fully replace income and cover obligations."
            ),
            actions=(
                f"Consider adding {_dollars(gap)} in term life insurance",
                "Start with employer-provided coverage if available at group rates",
            ),
        ))
    elif coverage >= Decimal("0.5"):
        recs.append(Recommendation(
            level=Level.WARNING,
            title="Significant Coverage Gap",
            message=(
                f"You only have {_pct(coverage)} of recommended coverage. A {_dollars(gap)} "
                "shortfall could force your family to liquidate assets."
            ),
            actions=(
                f"Add {_dollars(gap)} in life insurance coverage",
                "Consider a 20-30 year term policy to cover until children are independent",
                "Get quotes from at least 3 insurers",
            ),
        ))
    else:
        urgent = (gap / 2 / 100000).to_integral_value(ROUND_CEILING) * 100000
        recs.append(Recommendation(
            level=Level.CRITICAL,
            title="Critical Coverage Gap",
            message=(
                f"With only {_pct(coverage)} of recommended protection, your family would face "
                f"significant financial hardship. The {_dollars(gap)} gap is urgent."
            ),
            actions=(
                f"Secure at least {_dollars(urgent)} in additional coverage immediately",
                "Apply for employer coverage during next open enrollment",
                "Insurability can change with health conditions",
            ),
        ))

    # Children
    if inputs.children_under_18 > 0:
        support_years = 18 + 4  # Through college graduation
        plural = "ren" if inputs.children_under_18 > 1 else ""
        if inputs.income_years < support_years:
            recs.append(Recommendation(
                level=Level.GOOD,
                title="Consider Extended Income Replacement",
                message=(
                    f"With {inputs.children_under_18} child{plural} under 18, consider extending "
                    f"income replacement to at least {support_years} years."
                ),
                actions=(
                    f"Each additional 5 years adds approximately {_dollars(inputs.income * 5)} to coverage need",
                ),
            ))
        if inputs.education_costs < 50000 * inputs.children_under_18:
            recs.append(Recommendation(
                level=Level.GOOD,
                title="Education Cost Review",
                message=(
                    f"Education costs of {_dollars(inputs.education_costs)} may be understated for "
                    f"{inputs.children_under_18} child{plural}."
                ),
                actions=(
                    f"Consider increasing education costs to at least {_dollars(Decimal(100000 * inputs.children_under_18))}",
                    "Factor in inflation: costs will be higher when children reach college age",
                ),
            ))

    # Asset cushion
    if inputs.current_assets > 0:
        assets = _ratio(inputs.current_assets, results.dime_total)
        if assets is not None and assets >= Decimal("0.3"):
            recs.append(Recommendation(
                level=Level.OPTIMAL,
                title="Strong Asset Position",
                message=(
                    f"Your {_dollars(inputs.current_assets)} in liquid assets covers {_pct(assets)} "
                    "of your DIME need."
                ),
                actions=("Review beneficiary designations on investment accounts",),
            ))
        elif assets is not None:
            recs.append(Recommendation(
                level=Level.GOOD,
                title="Asset Cushion Available",
                message=(
                    f"Your {_dollars(inputs.current_assets)} in assets provides a {_pct(assets)} "
                    "cushion, but you still need substantial life insurance."
                ),
            ))
    else:
        recs.append(Recommendation(
            level=Level.WARNING,
            title="No Asset Cushion",
            message=(
                "With no current assets, your family would depend entirely on life insurance "
                "proceeds."
            ),
            actions=(
                "Build emergency savings (3-6 months expenses) as assets grow",
                "Consider disability insurance too",
            ),
        ))

    # Living expenses
    if inputs.monthly_living_expenses > 0:
        expense_ratio = _ratio(inputs.monthly_living_expenses * 12, inputs.income)
        if expense_ratio is not None and expense_ratio > Decimal("0.7"):
            recs.append(Recommendation(
                level=Level.WARNING,
                title="High Expense-to-Income Ratio",
                message=(
                    f"Your living expenses ({_pct(expense_ratio)} of income) are high, leaving "
                    "your family little room to cut spending if income is lost."
                ),
            ))
        if results.living_expense_need > results.income_replacement:
            recs.append(Recommendation(
                level=Level.WARNING,
                title="Living Expenses Exceed Income Replacement",
                message=(
                    f"Projected living expenses of {_dollars(results.living_expense_need)} over "
                    f"{inputs.income_years} years exceed the income replacement figure. "
                    f"Total need is adjusted to {_dollars(results.adjusted_need)}."
                ),
            ))

    # Term length
    if inputs.income_years <= 10 and inputs.current_insurance < need * Decimal("0.8"):
        recs.append(Recommendation(
            level=Level.GOOD,
            title="Consider Longer Coverage Period",
            message=(
                f"A {inputs.income_years}-year horizon is short-term protection. Most families "
                "need 15-30 years of coverage."
            ),
            actions=(
                "20-30 year term is typical for primary family protection",
                "Longer terms are only marginally more expensive when you're younger",
            ),
        ))

    return recs[:MAX_RECOMMENDATIONS]
