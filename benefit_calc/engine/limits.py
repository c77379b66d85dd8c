"""Plan-year limit tables: HSA/FSA/commuter/401(k) ceilings and tax brackets.

The tables live in data/plan_year_limits.json keyed by plan year so a new IRS
release is a data change. Parsed tables are cached per (path, year).
"""

import json
import logging
from decimal import Decimal
from pathlib import Path

from benefit_calc.config import settings
from benefit_calc.models.limits import FilingStatus, PlanYearLimits, TaxBracketThreshold

logger = logging.getLogger(__name__)

DEFAULT_LIMITS_PATH = Path(__file__).parent.parent / "data" / "plan_year_limits.json"

_RAW_TABLES: dict[Path, dict] = {}
_LIMITS: dict[tuple[Path, int], PlanYearLimits] = {}


def _load_raw(path: Path) -> dict:
    if path not in _RAW_TABLES:
        with open(path) as f:
            _RAW_TABLES[path] = json.load(f)
        logger.debug("Loaded plan-year limit tables from %s", path)
    return _RAW_TABLES[path]


def parse_brackets(rows: list[dict]) -> tuple[TaxBracketThreshold, ...]:
    """Parse and validate one filing status's bracket rows.

    Thresholds must be strictly increasing with a single unbounded (null)
    top bracket in last position.
    """
    brackets = tuple(
        TaxBracketThreshold(
            up_to=Decimal(str(row["up_to"])) if row["up_to"] is not None else None,
            rate=Decimal(str(row["rate"])),
        )
        for row in rows
    )
    if not brackets or brackets[-1].up_to is not None:
        raise ValueError("Top bracket must be unbounded and last")

    bounded = [b.up_to for b in brackets[:-1]]
    if any(b is None for b in bounded):
        raise ValueError("Only the top bracket may be unbounded")
    if any(lo >= hi for lo, hi in zip(bounded, bounded[1:])):
        raise ValueError("Bracket thresholds must be strictly increasing")
    return brackets


def parse_plan_year_limits(year: int, raw: dict) -> PlanYearLimits:
    return PlanYearLimits(
        plan_year=year,
        hsa_individual=Decimal(str(raw["hsa_individual"])),
        hsa_family=Decimal(str(raw["hsa_family"])),
        hsa_catch_up=Decimal(str(raw["hsa_catch_up"])),
        hsa_catch_up_age=int(raw["hsa_catch_up_age"]),
        fsa_health=Decimal(str(raw["fsa_health"])),
        fsa_carryover_max=Decimal(str(raw["fsa_carryover_max"])),
        fsa_dependent_care=Decimal(str(raw["fsa_dependent_care"])),
        commuter_transit_monthly=Decimal(str(raw["commuter_transit_monthly"])),
        commuter_parking_monthly=Decimal(str(raw["commuter_parking_monthly"])),
        retirement_401k=Decimal(str(raw["retirement_401k"])),
        retirement_catch_up=Decimal(str(raw["retirement_catch_up"])),
        retirement_catch_up_age=int(raw["retirement_catch_up_age"]),
        tax_brackets={
            FilingStatus(status): parse_brackets(rows)
            for status, rows in raw["tax_brackets"].items()
        },
    )


def available_plan_years(path: str | Path | None = None) -> list[int]:
    table_path = Path(path) if path else DEFAULT_LIMITS_PATH
    return sorted(int(y) for y in _load_raw(table_path))


def load_plan_year_limits(year: int, path: str | Path | None = None) -> PlanYearLimits:
    """Load the limits for a plan year. Raises KeyError for an unknown year."""
    table_path = Path(path) if path else DEFAULT_LIMITS_PATH
    key = (table_path, year)
    if key not in _LIMITS:
        tables = _load_raw(table_path)
        if str(year) not in tables:
            raise KeyError(f"No limit table for plan year {year} in {table_path}")
        _LIMITS[key] = parse_plan_year_limits(year, tables[str(year)])
    return _LIMITS[key]


def default_limits() -> PlanYearLimits:
    """Limits for the configured plan year."""
    return load_plan_year_limits(settings.plan_year, settings.limits_path)
