import json
from decimal import Decimal

import pytest

from benefit_calc.config import settings
from benefit_calc.engine.limits import (
    available_plan_years,
    default_limits,
    load_plan_year_limits,
    parse_brackets,
)
from benefit_calc.models.limits import FilingStatus, describe_filing_status


class TestBundledTable:
    def test_2025_values(self, limits_2025):
        assert limits_2025.plan_year == 2025
        assert limits_2025.hsa_individual == Decimal("4300")
        assert limits_2025.hsa_family == Decimal("8550")
        assert limits_2025.hsa_catch_up == Decimal("1000")
        assert limits_2025.hsa_catch_up_age == 55
        assert limits_2025.fsa_health == Decimal("3200")
        assert limits_2025.fsa_carryover_max == Decimal("640")
        assert limits_2025.commuter_transit_monthly == Decimal("315")
        assert limits_2025.retirement_401k == Decimal("23000")
        assert limits_2025.retirement_total_with_catch_up == Decimal("30500")

    def test_every_filing_status_has_brackets(self, limits_2025):
        for status in FilingStatus:
            brackets = limits_2025.brackets_for(status)
            assert brackets[-1].up_to is None
            assert brackets[-1].rate == Decimal("37")

    def test_available_years(self):
        assert 2025 in available_plan_years()

    def test_unknown_year_raises(self):
        with pytest.raises(KeyError):
            load_plan_year_limits(1999)

    def test_default_follows_settings(self):
        assert default_limits().plan_year == settings.plan_year

    def test_cached(self):
        assert load_plan_year_limits(2025) is load_plan_year_limits(2025)


class TestCustomTable:
    def test_loads_alternate_file(self, tmp_path):
        path = tmp_path / "limits.json"
        raw = {
            "2030": {
                "hsa_individual": "5000",
                "hsa_family": "10000",
                "hsa_catch_up": "1000",
                "hsa_catch_up_age": 55,
                "fsa_health": "3500",
                "fsa_carryover_max": "700",
                "fsa_dependent_care": "7500",
                "commuter_transit_monthly": "350",
                "commuter_parking_monthly": "350",
                "retirement_401k": "25000",
                "retirement_catch_up": "8000",
                "retirement_catch_up_age": 50,
                "tax_brackets": {
                    "single": [
                        {"up_to": "20000", "rate": "10"},
                        {"up_to": None, "rate": "30"},
                    ],
                },
            }
        }
        path.write_text(json.dumps(raw))

        limits = load_plan_year_limits(2030, path)
        assert limits.plan_year == 2030
        assert limits.hsa_individual == Decimal("5000")
        assert available_plan_years(path) == [2030]
        assert limits.brackets_for(FilingStatus.SINGLE)[1].rate == Decimal("30")
        # Statuses missing from the table have no brackets
        assert limits.brackets_for(FilingStatus.MARRIED_JOINT) == ()

    def test_numeric_json_values_parse_exactly(self, tmp_path):
        path = tmp_path / "float_limits.json"
        raw = {
            "2031": {
                "hsa_individual": 4300.1,
                "hsa_family": 8550,
                "hsa_catch_up": 1000,
                "hsa_catch_up_age": 55,
                "fsa_health": 3200.3,
                "fsa_carryover_max": 640,
                "fsa_dependent_care": 5000,
                "commuter_transit_monthly": 315.7,
                "commuter_parking_monthly": 315,
                "retirement_401k": 23000,
                "retirement_catch_up": 7500,
                "retirement_catch_up_age": 50,
                "tax_brackets": {
                    "single": [
                        {"up_to": 11925, "rate": 10},
                        {"up_to": None, "rate": 12.5},
                    ],
                },
            }
        }
        path.write_text(json.dumps(raw))

        limits = load_plan_year_limits(2031, path)
        assert limits.hsa_individual == Decimal("4300.1")
        assert limits.fsa_health == Decimal("3200.3")
        assert limits.commuter_transit_monthly == Decimal("315.7")
        assert limits.retirement_401k == Decimal("23000")
        assert limits.brackets_for(FilingStatus.SINGLE)[1].rate == Decimal("12.5")


class TestParseBrackets:
    def test_valid(self):
        brackets = parse_brackets([
            {"up_to": "10000", "rate": "10"},
            {"up_to": "50000", "rate": "20"},
            {"up_to": None, "rate": "30"},
        ])
        assert len(brackets) == 3
        assert brackets[0].up_to == Decimal("10000")
        assert brackets[2].up_to is None

    def test_top_bracket_must_be_unbounded(self):
        with pytest.raises(ValueError):
            parse_brackets([{"up_to": "10000", "rate": "10"}])

    def test_unbounded_must_be_last(self):
        with pytest.raises(ValueError):
            parse_brackets([
                {"up_to": None, "rate": "10"},
                {"up_to": None, "rate": "20"},
            ])

    def test_thresholds_strictly_increasing(self):
        with pytest.raises(ValueError):
            parse_brackets([
                {"up_to": "50000", "rate": "10"},
                {"up_to": "50000", "rate": "20"},
                {"up_to": None, "rate": "30"},
            ])

    def test_empty(self):
        with pytest.raises(ValueError):
            parse_brackets([])


class TestFilingStatus:
    def test_wire_values(self):
        assert FilingStatus("marriedJoint") is FilingStatus.MARRIED_JOINT
        assert FilingStatus("headOfHousehold") is FilingStatus.HEAD_OF_HOUSEHOLD

    def test_describe(self):
        assert describe_filing_status(FilingStatus.MARRIED_JOINT) == "Married filing jointly"
