# tests/test_conversion.py
"""
Conversion Tests - Unit Tests for Fixed-Rate Conversion

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- dualprice.domain.conversion (convert, secondary_currency, compute_secondary)
- dualprice.domain.models (CurrencyPair)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from dualprice.domain.conversion import compute_secondary, convert, secondary_currency
from dualprice.domain.models import CurrencyPair


class TestCurrencyPair:
    def test_complement(self):
        pair = CurrencyPair()
        assert pair.complement("BGN") == "EUR"
        assert pair.complement("EUR") == "BGN"

    def test_unknown_code_maps_to_divide_side(self):
        assert CurrencyPair().complement("USD") == "BGN"


class TestConvert:
    def test_bgn_primary_divides(self, bgn_snapshot):
        assert convert(100, bgn_snapshot) == pytest.approx(100 / 1.95583)
        assert round(convert(100, bgn_snapshot), 2) == 51.13

    def test_eur_primary_multiplies(self, eur_snapshot):
        assert convert(51.13, eur_snapshot) == pytest.approx(51.13 * 1.95583)
        assert round(convert(51.13, eur_snapshot), 2) == 100.00

    def test_non_positive_amount(self, bgn_snapshot):
        assert convert(0, bgn_snapshot) is None
        assert convert(-5, bgn_snapshot) is None
        assert convert(None, bgn_snapshot) is None

    @pytest.mark.parametrize("rate", [0, -1.95583, "abc", None])
    def test_disabled_rate(self, make_snapshot, rate):
        snapshot = make_snapshot(rate=rate)
        assert snapshot.rate == 0.0
        assert convert(100, snapshot) is None


class TestSecondaryCurrency:
    def test_secondary_currency(self, bgn_snapshot, eur_snapshot):
        assert secondary_currency(bgn_snapshot) == "EUR"
        assert secondary_currency(eur_snapshot) == "BGN"

    def test_compute_secondary(self, bgn_snapshot):
        result = compute_secondary(100, bgn_snapshot)
        assert result.currency == "EUR"
        assert result.amount == pytest.approx(51.1292, rel=1e-4)

    def test_compute_secondary_unavailable(self, make_snapshot):
        assert compute_secondary(100, make_snapshot(rate=0)) is None
