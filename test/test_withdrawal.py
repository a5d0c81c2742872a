# Test type: unit
# Validation: SWP depletion loop, duration formatting, month cap
# Command: pytest test/test_withdrawal.py -v

import pytest

from app import config
from app.models import SWPParams
from app.utils.withdrawal import calc_swp, format_duration, simulate_withdrawals


def _swp(initial=100000.0, withdrawal=2000.0, rate=0.0):
    return SWPParams(
        initial_investment=initial, monthly_withdrawal=withdrawal, annual_return_rate=rate
    )


class TestFormatDuration:
    def test_years_and_months(self):
        assert format_duration(50) == "4 years and 2 months"

    def test_whole_years(self):
        assert format_duration(24) == "2 years and 0 months"

    def test_under_a_year(self):
        assert format_duration(7) == "0 years and 7 months"


class TestSimulateWithdrawals:
    def test_zero_return_depletes_linearly(self):
        months, balance, depleted = simulate_withdrawals(100000, 2000, 0)
        assert months == 50
        assert balance == pytest.approx(0.0)
        assert depleted is True

    def test_growth_extends_duration(self):
        months, _, depleted = simulate_withdrawals(100000, 2000, 12)
        assert months == 70
        assert depleted is True

    def test_zero_initial_investment(self):
        months, _, depleted = simulate_withdrawals(0, 2000, 8)
        assert months == 0
        assert depleted is True

    def test_zero_withdrawal_hits_cap(self):
        months, balance, depleted = simulate_withdrawals(1000, 0, 5, max_months=36)
        assert months == 36
        assert balance > 1000
        assert depleted is False

    def test_growth_matching_withdrawal_hits_default_cap(self):
        months, _, depleted = simulate_withdrawals(100000, 1000, 12)
        assert months == config.MAX_SWP_MONTHS
        assert depleted is False


class TestCalcSwp:
    def test_lasted_label(self):
        result = calc_swp(_swp())
        assert result["investment_lasted"] == "4 years and 2 months"
        assert result["months_lasted"] == 50
        assert result["depleted"] is True
        assert result["total_withdrawn"] == pytest.approx(100000.0)

    def test_with_returns(self):
        result = calc_swp(_swp(rate=12))
        assert result["investment_lasted"] == "5 years and 10 months"

    def test_final_partial_withdrawal(self):
        result = calc_swp(_swp(initial=5000, withdrawal=2000))
        assert result["months_lasted"] == 3
        assert result["total_withdrawn"] == pytest.approx(5000.0)

    def test_never_depletes(self):
        result = calc_swp(_swp(withdrawal=0, rate=6))
        assert result["depleted"] is False
        assert result["investment_lasted"] == f"more than {config.MAX_SWP_MONTHS // 12} years"
        assert result["total_withdrawn"] == 0.0
