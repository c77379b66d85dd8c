from decimal import Decimal

from benefit_calc.engine.tax import clamp, marginal_rate, non_negative, resolve_marginal_rate
from benefit_calc.models.limits import FilingStatus


class TestMarginalRate:
    def test_single_middle_bracket(self, limits_2025):
        assert marginal_rate(Decimal("50000"), FilingStatus.SINGLE, limits_2025) == Decimal("22")

    def test_threshold_is_inclusive(self, limits_2025):
        """Income exactly at a threshold stays in the lower bracket."""
        assert marginal_rate(Decimal("11600"), FilingStatus.SINGLE, limits_2025) == Decimal("10")
        assert marginal_rate(Decimal("11601"), FilingStatus.SINGLE, limits_2025) == Decimal("12")

    def test_top_bracket_unbounded(self, limits_2025):
        assert marginal_rate(Decimal("5000000"), FilingStatus.SINGLE, limits_2025) == Decimal("37")

    def test_filing_status_changes_bracket(self, limits_2025):
        assert marginal_rate(Decimal("50000"), FilingStatus.MARRIED_JOINT, limits_2025) == Decimal("12")
        assert marginal_rate(Decimal("50000"), FilingStatus.HEAD_OF_HOUSEHOLD, limits_2025) == Decimal("12")

    def test_defaults_to_single(self, limits_2025):
        assert marginal_rate(Decimal("50000"), None, limits_2025) == Decimal("22")

    def test_non_positive_income_is_zero(self, limits_2025):
        assert marginal_rate(Decimal("0"), FilingStatus.SINGLE, limits_2025) == Decimal("0")
        assert marginal_rate(Decimal("-100"), FilingStatus.SINGLE, limits_2025) == Decimal("0")
        assert marginal_rate(None, FilingStatus.SINGLE, limits_2025) == Decimal("0")

    def test_non_finite_income_is_zero(self, limits_2025):
        assert marginal_rate(Decimal("NaN"), FilingStatus.SINGLE, limits_2025) == Decimal("0")
        assert marginal_rate(Decimal("Infinity"), FilingStatus.SINGLE, limits_2025) == Decimal("0")

    def test_uses_default_table(self):
        assert marginal_rate(Decimal("50000")) == Decimal("22")


class TestResolveMarginalRate:
    def test_income_wins_over_flat_bracket(self, limits_2025):
        rate = resolve_marginal_rate(Decimal("50000"), FilingStatus.SINGLE, Decimal("10"), limits_2025)
        assert rate == Decimal("22")

    def test_flat_bracket_without_income(self, limits_2025):
        assert resolve_marginal_rate(None, None, Decimal("24"), limits_2025) == Decimal("24")
        assert resolve_marginal_rate(Decimal("0"), None, Decimal("24"), limits_2025) == Decimal("24")

    def test_flat_bracket_clamped(self, limits_2025):
        assert resolve_marginal_rate(None, None, Decimal("150"), limits_2025) == Decimal("100")
        assert resolve_marginal_rate(None, None, Decimal("-5"), limits_2025) == Decimal("0")

    def test_nothing_given(self, limits_2025):
        assert resolve_marginal_rate(None, None, None, limits_2025) == Decimal("0")


class TestHelpers:
    def test_non_negative(self):
        assert non_negative(None) == Decimal("0")
        assert non_negative(Decimal("-1")) == Decimal("0")
        assert non_negative(Decimal("12.5")) == Decimal("12.5")

    def test_clamp(self):
        assert clamp(Decimal("150"), Decimal("0"), Decimal("100")) == Decimal("100")
        assert clamp(Decimal("-1"), Decimal("0"), Decimal("100")) == Decimal("0")
        assert clamp(Decimal("40"), Decimal("0"), Decimal("100")) == Decimal("40")
