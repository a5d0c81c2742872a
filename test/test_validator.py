# Test type: unit
# Validation: per-product parameter validation, defaults, coercion and error reporting
# Command: pytest test/test_validator.py -v

import pytest

from app import config
from app.exceptions import CalculationValidationError
from app.models import (
    CapitalGainsParams,
    CumulativeFixedDepositParams,
    EmiParams,
    FixedDepositParams,
    LoanAdvancedParams,
    LoanBasicParams,
    MutualFundReturnsParams,
    PPFVariableParams,
    SSYParams,
)
from app.utils.validator import MSG_NOT_AN_OBJECT, validate_params


def _fields(exc_info) -> set:
    return {e["field"] for e in exc_info.value.errors}


# ---------------------------------------------------------------------------
# Coercion and defaults
# ---------------------------------------------------------------------------

class TestCoercion:
    def test_query_strings_coerced_to_numbers(self):
        params = validate_params(
            LoanBasicParams,
            {"principal": "100000", "annual_interest_rate": "10", "term_in_years": "1"},
        )
        assert params.principal == 100000.0
        assert params.annual_interest_rate == 10.0
        assert params.term_in_years == 1.0

    def test_fractional_term_accepted(self):
        params = validate_params(
            LoanBasicParams,
            {"principal": 5000, "annual_interest_rate": 8, "term_in_years": "1.5"},
        )
        assert params.term_in_years == 1.5

    def test_unknown_params_ignored(self):
        params = validate_params(
            LoanBasicParams,
            {"principal": 1, "annual_interest_rate": 1, "term_in_years": 1, "foo": "bar"},
        )
        assert not hasattr(params, "foo")

    def test_none_treated_as_empty(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(LoanBasicParams, None)
        assert _fields(exc_info) == {"principal", "annual_interest_rate", "term_in_years"}


class TestDefaults:
    def test_extra_payment_defaults_to_zero(self):
        params = validate_params(
            LoanAdvancedParams,
            {"principal": 1000, "annual_interest_rate": 5, "term_in_years": 1},
        )
        assert params.extra_payment == 0.0

    def test_payout_frequency_defaults_to_monthly(self):
        params = validate_params(
            FixedDepositParams,
            {"principal": 1000, "annual_interest_rate": 5, "term_in_years": 1},
        )
        assert params.payout_frequency == "monthly"

    def test_compounding_defaults_to_quarterly(self):
        params = validate_params(
            CumulativeFixedDepositParams,
            {"principal": 1000, "annual_interest_rate": 5, "term_in_years": 1},
        )
        assert params.compounding_frequency == "quarterly"

    def test_ssy_term_defaults_to_21_years(self):
        params = validate_params(
            SSYParams, {"annual_contribution": 1000, "annual_interest_rate": 8}
        )
        assert params.term_in_years == 21


# ---------------------------------------------------------------------------
# Rejections
# ---------------------------------------------------------------------------

class TestRejections:
    def test_non_numeric_value(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                LoanBasicParams,
                {"principal": "abc", "annual_interest_rate": 10, "term_in_years": 1},
            )
        assert _fields(exc_info) == {"principal"}
        assert "principal" in exc_info.value.message

    def test_missing_required_field(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(LoanBasicParams, {"principal": 1000, "annual_interest_rate": 10})
        assert _fields(exc_info) == {"term_in_years"}

    def test_every_failing_field_reported(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                LoanBasicParams,
                {"principal": "-5", "annual_interest_rate": "x", "term_in_years": 0},
            )
        assert _fields(exc_info) == {"principal", "annual_interest_rate", "term_in_years"}

    def test_zero_principal_rejected(self):
        with pytest.raises(CalculationValidationError):
            validate_params(
                LoanBasicParams,
                {"principal": 0, "annual_interest_rate": 10, "term_in_years": 1},
            )

    def test_negative_rate_rejected(self):
        with pytest.raises(CalculationValidationError):
            validate_params(
                LoanBasicParams,
                {"principal": 100, "annual_interest_rate": -1, "term_in_years": 1},
            )

    def test_nan_rejected(self):
        with pytest.raises(CalculationValidationError):
            validate_params(
                LoanBasicParams,
                {"principal": "nan", "annual_interest_rate": 10, "term_in_years": 1},
            )

    def test_infinity_rejected(self):
        with pytest.raises(CalculationValidationError):
            validate_params(
                LoanBasicParams,
                {"principal": "inf", "annual_interest_rate": 10, "term_in_years": 1},
            )

    def test_integer_field_rejects_fraction(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                EmiParams,
                {"loan_amount": 1000, "annual_interest_rate": 10, "loan_term_years": "2.5"},
            )
        assert _fields(exc_info) == {"loan_term_years"}

    def test_emi_lower_bound(self):
        with pytest.raises(CalculationValidationError):
            validate_params(
                EmiParams,
                {"loan_amount": 0.5, "annual_interest_rate": 10, "loan_term_years": 1},
            )

    def test_enum_outside_domain(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                FixedDepositParams,
                {
                    "principal": 1000,
                    "annual_interest_rate": 5,
                    "term_in_years": 1,
                    "payout_frequency": "weekly",
                },
            )
        assert _fields(exc_info) == {"payout_frequency"}

    def test_asset_type_outside_domain(self):
        with pytest.raises(CalculationValidationError):
            validate_params(
                CapitalGainsParams,
                {"capital_gain": 1000, "holding_period": 12, "asset_type": "crypto"},
            )

    def test_non_mapping_input(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(LoanBasicParams, [1, 2, 3])
        assert exc_info.value.message == MSG_NOT_AN_OBJECT

    def test_sip_requires_sip_amount(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                MutualFundReturnsParams,
                {
                    "investment_amount": 1000,
                    "annual_return_rate": 12,
                    "investment_duration_years": 5,
                    "investment_type": "sip",
                },
            )
        assert "sip_amount" in exc_info.value.message


class TestContributions:
    def test_valid_list(self):
        params = validate_params(
            PPFVariableParams, {"contributions": [1000, 2000.5], "annual_interest_rate": 7.1}
        )
        assert params.contributions == [1000.0, 2000.5]

    def test_not_a_list(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                PPFVariableParams, {"contributions": "1000,2000", "annual_interest_rate": 7.1}
            )
        assert "Contributions should be an array of numbers" in exc_info.value.message

    def test_non_numeric_element(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                PPFVariableParams, {"contributions": [1000, "abc"], "annual_interest_rate": 7.1}
            )
        assert all(f.startswith("contributions") for f in _fields(exc_info))

    def test_negative_element(self):
        with pytest.raises(CalculationValidationError):
            validate_params(
                PPFVariableParams, {"contributions": [1000, -1], "annual_interest_rate": 7.1}
            )

    def test_empty_list(self):
        with pytest.raises(CalculationValidationError):
            validate_params(PPFVariableParams, {"contributions": [], "annual_interest_rate": 7.1})


class TestTermBounds:
    def test_loan_term_at_limit_accepted(self):
        params = validate_params(
            LoanBasicParams,
            {"principal": 1000, "annual_interest_rate": 5, "term_in_years": config.MAX_TERM_YEARS},
        )
        assert params.term_in_years == config.MAX_TERM_YEARS

    def test_loan_term_above_limit(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                LoanAdvancedParams,
                {"principal": 1000, "annual_interest_rate": 5, "term_in_years": 100000},
            )
        assert _fields(exc_info) == {"term_in_years"}

    def test_deposit_term_above_limit(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                CumulativeFixedDepositParams,
                {"principal": 1000, "annual_interest_rate": 5, "term_in_years": 101},
            )
        assert _fields(exc_info) == {"term_in_years"}

    def test_too_many_contributions(self):
        with pytest.raises(CalculationValidationError):
            validate_params(
                PPFVariableParams,
                {"contributions": [1000] * (config.MAX_TERM_YEARS + 1), "annual_interest_rate": 7.1},
            )


class TestFixedDepositPayouts:
    def test_term_shorter_than_one_payout(self):
        with pytest.raises(CalculationValidationError) as exc_info:
            validate_params(
                FixedDepositParams,
                {
                    "principal": 1000,
                    "annual_interest_rate": 5,
                    "term_in_years": 0.01,
                    "payout_frequency": "annually",
                },
            )
        assert "at least one payout period" in exc_info.value.message

    def test_single_quarterly_payout_accepted(self):
        params = validate_params(
            FixedDepositParams,
            {
                "principal": 1000,
                "annual_interest_rate": 5,
                "term_in_years": 0.25,
                "payout_frequency": "quarterly",
            },
        )
        assert params.term_in_years == 0.25
