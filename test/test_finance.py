# Test type: unit
# Validation: interest, growth, salary, GST, arithmetic, bond and insurance calculators
# Command: pytest test/test_finance.py -v

import pytest

from app import config
from app.exceptions import CalculationDomainError
from app.models import (
    APYParams,
    ArithmeticParams,
    CAGRParams,
    CompoundInterestParams,
    FloatingRateBondParams,
    GratuityParams,
    GSTParams,
    HRAParams,
    InflationParams,
    PLIParams,
    PMJJBYParams,
    RPLIParams,
    SimpleInterestParams,
    SovereignGoldBondParams,
)
from app.utils.finance import (
    calc_apy,
    calc_arithmetic,
    calc_cagr,
    calc_compound_interest,
    calc_fixed_premium_plan,
    calc_floating_rate_bond,
    calc_gratuity,
    calc_gst,
    calc_hra,
    calc_inflation,
    calc_life_insurance,
    calc_simple_interest,
    calc_sovereign_gold_bond,
    compound_amount,
)


# ---------------------------------------------------------------------------
# Interest and growth
# ---------------------------------------------------------------------------

class TestInterest:
    def test_simple_interest(self):
        result = calc_simple_interest(SimpleInterestParams(principal=10000, rate=6, time=5))
        assert result["simple_interest"] == pytest.approx(3000.0)
        assert result["total_amount"] == pytest.approx(13000.0)

    def test_compound_annual_matches_lump_sum(self):
        result = calc_compound_interest(
            CompoundInterestParams(principal=10000, rate=5, time=3, compounds_per_year=1)
        )
        assert result["future_value"] == pytest.approx(11576.25)
        assert result["compound_interest"] == pytest.approx(1576.25)

    def test_compound_quarterly(self):
        assert compound_amount(10000, 0.08, 4, 2) == pytest.approx(11716.59, abs=0.01)

    def test_zero_time(self):
        result = calc_compound_interest(
            CompoundInterestParams(principal=5000, rate=9, time=0, compounds_per_year=12)
        )
        assert result["future_value"] == 5000.0

    def test_inflation(self):
        result = calc_inflation(InflationParams(current_amount=100000, inflation_rate=6, years=10))
        assert result["future_value"] == pytest.approx(55839.48)


class TestCagr:
    def test_doubling_in_five_years(self):
        result = calc_cagr(CAGRParams(initial_value=100000, final_value=200000, years=5))
        assert result["cagr"] == "14.87%"

    def test_no_growth(self):
        result = calc_cagr(CAGRParams(initial_value=5000, final_value=5000, years=3))
        assert result["cagr"] == "0.00%"

    def test_zero_initial_value(self):
        with pytest.raises(CalculationDomainError):
            calc_cagr(CAGRParams(initial_value=0, final_value=1000, years=2))


class TestApy:
    def test_monthly_compounding(self):
        result = calc_apy(APYParams(principal=1000, interest_rate=12, compounds_per_year=12))
        assert result["apy"] == pytest.approx(12.6825)

    def test_annual_compounding_equals_nominal(self):
        result = calc_apy(APYParams(principal=1000, interest_rate=8, compounds_per_year=1))
        assert result["apy"] == pytest.approx(8.0)


# ---------------------------------------------------------------------------
# Salary, GST, arithmetic
# ---------------------------------------------------------------------------

class TestSalary:
    def test_gratuity(self):
        result = calc_gratuity(GratuityParams(last_drawn_salary=26000, years_of_service=10))
        assert result["gratuity_amount"] == pytest.approx(150000.0)

    def test_hra_metro_capped_by_salary(self):
        result = calc_hra(
            HRAParams(basic_salary=50000, rent=30000, other_allowances=0, city_type="metro")
        )
        assert result["hra"] == 25000.0

    def test_hra_non_metro(self):
        result = calc_hra(
            HRAParams(basic_salary=50000, rent=30000, other_allowances=0, city_type="non-metro")
        )
        assert result["hra"] == 20000.0

    def test_hra_capped_by_rent(self):
        result = calc_hra(
            HRAParams(basic_salary=50000, rent=10000, other_allowances=5000, city_type="metro")
        )
        assert result["hra"] == 10000.0


class TestGst:
    def test_eighteen_percent(self):
        result = calc_gst(GSTParams(amount=1000, gst_rate=18))
        assert result["gst_amount"] == 180.0
        assert result["total_amount_including_gst"] == 1180.0


class TestArithmetic:
    @pytest.mark.parametrize(
        "operation, expected",
        [("add", 12.0), ("subtract", 8.0), ("multiply", 20.0), ("divide", 5.0)],
    )
    def test_operations(self, operation, expected):
        result = calc_arithmetic(ArithmeticParams(num1=10, num2=2, operation=operation))
        assert result == {"result": expected}

    def test_divide_by_zero(self):
        with pytest.raises(CalculationDomainError) as exc_info:
            calc_arithmetic(ArithmeticParams(num1=10, num2=0, operation="divide"))
        assert exc_info.value.message == "Division by zero is not allowed"

    def test_multiply_by_zero_allowed(self):
        result = calc_arithmetic(ArithmeticParams(num1=10, num2=0, operation="multiply"))
        assert result["result"] == 0.0


# ---------------------------------------------------------------------------
# Bonds and insurance
# ---------------------------------------------------------------------------

class TestBonds:
    def test_floating_rate_bond(self):
        result = calc_floating_rate_bond(
            FloatingRateBondParams(principal=10000, interest_rate=7.5, period=2)
        )
        assert result["total_interest"] == pytest.approx(1500.0)
        assert result["total_amount"] == pytest.approx(11500.0)

    def test_sovereign_gold_bond(self):
        result = calc_sovereign_gold_bond(
            SovereignGoldBondParams(investment_amount=10000, gold_price_increase=8, period=5)
        )
        assert result["total_value"] == pytest.approx(14693.28)
        assert result["interest_income"] == pytest.approx(1250.0)
        assert result["final_value"] == pytest.approx(15943.28)


class TestInsurance:
    def test_pli_younger_band(self):
        result = calc_life_insurance(
            PLIParams(sum_assured=100000, age=30, term=10),
            plan=config.INSURANCE_PLANS["postal-life-insurance"],
        )
        assert result["premium"] == pytest.approx(2000.0)
        assert result["maturity_amount"] == pytest.approx(150000.0)

    def test_pli_older_band(self):
        result = calc_life_insurance(
            PLIParams(sum_assured=100000, age=40, term=10),
            plan=config.INSURANCE_PLANS["postal-life-insurance"],
        )
        assert result["premium"] == pytest.approx(3000.0)

    def test_rpli(self):
        result = calc_life_insurance(
            RPLIParams(sum_assured=50000, age=25, term=10),
            plan=config.INSURANCE_PLANS["rural-postal-life-insurance"],
        )
        assert result["premium"] == pytest.approx(750.0)
        assert result["maturity_amount"] == pytest.approx(70000.0)

    def test_fixed_premium_plan(self):
        result = calc_fixed_premium_plan(
            PMJJBYParams(age=30), plan=config.FIXED_PREMIUM_PLANS["pm-jeevan-jyoti-bima"]
        )
        assert result == {"age": 30, "sum_assured": 200000, "annual_premium": 436}
