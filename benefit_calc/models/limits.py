from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class FilingStatus(Enum):
    SINGLE = "single"
    MARRIED_JOINT = "marriedJoint"
    MARRIED_SEPARATE = "marriedSeparate"
    HEAD_OF_HOUSEHOLD = "headOfHousehold"


_FILING_STATUS_LABELS = {
    FilingStatus.SINGLE: "Single",
    FilingStatus.MARRIED_JOINT: "Married filing jointly",
    FilingStatus.MARRIED_SEPARATE: "Married filing separately",
    FilingStatus.HEAD_OF_HOUSEHOLD: "Head of household",
}


def describe_filing_status(status: FilingStatus) -> str:
    return _FILING_STATUS_LABELS.get(status, status.value)


@dataclass(frozen=True)
class TaxBracketThreshold:
    up_to: Decimal | None  # None = unbounded top bracket
    rate: Decimal  # Percentage, e.g. Decimal("22")


@dataclass(frozen=True)
class PlanYearLimits:
    """Statutory ceilings for one plan year. All money values are annual unless noted."""
    plan_year: int

    # HSA
    hsa_individual: Decimal
    hsa_family: Decimal
    hsa_catch_up: Decimal
    hsa_catch_up_age: int

    # FSA
    fsa_health: Decimal
    fsa_carryover_max: Decimal
    fsa_dependent_care: Decimal  # Per household

    # Commuter (monthly, capped independently)
    commuter_transit_monthly: Decimal
    commuter_parking_monthly: Decimal

    # 401(k) elective deferrals
    retirement_401k: Decimal
    retirement_catch_up: Decimal
    retirement_catch_up_age: int

    tax_brackets: dict[FilingStatus, tuple[TaxBracketThreshold, ...]] = field(
        default_factory=dict
    )

    @property
    def retirement_total_with_catch_up(self) -> Decimal:
        return self.retirement_401k + self.retirement_catch_up

    def brackets_for(self, status: FilingStatus | None) -> tuple[TaxBracketThreshold, ...]:
        return self.tax_brackets.get(status or FilingStatus.SINGLE, ())
