"""
Unit Tests for the Loan Decision Scoring Module.

These tests verify:
1. Credit segment classification and its band boundaries
2. Age calculation and the age gate
3. Credit score arithmetic and rounding
4. Maximum amount and suitable period searches
5. Identity code reading through the Estonian parser

Test Categories:
- TestCreditModifier: segment boundaries
- TestAgeGate / TestCalculateAge: age limits and whole-year ages
- TestCreditScore: decimal score and approval threshold
- TestMaximumValidLoanAmount / TestSuitablePeriod: search behavior
- TestIdentityCodeReader: derived values and invalid codes
"""

from datetime import date
from decimal import Decimal

import pytest

from loan_gateway.domain.exceptions import (
    CustomerTooOldException,
    CustomerTooYoungException,
    InvalidPersonalCodeException,
    NoValidLoanException,
)
from loan_gateway.service.scoring import (
    DecisionSettings,
    IdentityCodeReader,
    calculate_age,
    calculate_credit_score,
    classify,
    find_maximum_valid_loan_amount,
    find_suitable_period,
    get_credit_modifier,
    is_loan_approved,
    validate_age,
)


# =============================================================================
# Credit Segment Tests
# =============================================================================

class TestCreditModifier:
    """Tests for get_credit_modifier() and classify()."""

    @pytest.mark.parametrize(
        "segment_key,expected",
        [
            (0, 0),
            (2499, 0),
            (2500, 100),
            (4999, 100),
            (5000, 300),
            (7499, 300),
            (7500, 1000),
            (9999, 1000),
        ],
    )
    def test_band_boundaries(self, segment_key, expected, decision_settings):
        """Each band starts and ends exactly on its documented key."""
        assert get_credit_modifier(segment_key, decision_settings) == expected

    @pytest.mark.parametrize("segment_key", [-1, 10000])
    def test_out_of_range_key_raises(self, segment_key, decision_settings):
        with pytest.raises(ValueError):
            get_credit_modifier(segment_key, decision_settings)

    def test_classify_marks_debtor(self, decision_settings):
        profile = classify(299, decision_settings)
        assert profile.segment_key == 299
        assert profile.credit_modifier == 0
        assert profile.is_debtor

    def test_classify_uses_configured_modifier(self):
        custom = DecisionSettings(_env_file=None, segment_2_credit_modifier=500)
        profile = classify(6610, custom)
        assert profile.credit_modifier == 500
        assert not profile.is_debtor


# =============================================================================
# Age Tests
# =============================================================================

class TestCalculateAge:
    """Tests for calculate_age()."""

    def test_on_birthday(self):
        assert calculate_age(date(2007, 3, 27), date(2025, 3, 27)) == 18

    def test_day_before_birthday(self):
        assert calculate_age(date(2007, 3, 28), date(2025, 3, 27)) == 17

    def test_later_month(self):
        assert calculate_age(date(1984, 11, 26), date(2025, 3, 27)) == 40

    def test_leap_day_birthday(self):
        """Someone born on Feb 29 turns a year older on Mar 1 in common years."""
        born = date(2008, 2, 29)
        assert calculate_age(born, date(2026, 2, 28)) == 17
        assert calculate_age(born, date(2026, 3, 1)) == 18


class TestAgeGate:
    """Tests for validate_age()."""

    def test_max_age_is_derived_from_longest_period(self, decision_settings):
        # 80 - 48 // 12
        assert decision_settings.max_age == 76

    def test_max_age_with_longer_period(self):
        custom = DecisionSettings(_env_file=None, max_loan_period=60)
        assert custom.max_age == 75

    def test_underage_rejected(self, decision_settings):
        with pytest.raises(CustomerTooYoungException) as exc_info:
            validate_age(17, decision_settings)
        assert exc_info.value.code == "NO_VALID_LOAN"
        assert "minimum age: 18" in exc_info.value.message

    def test_min_age_passes(self, decision_settings):
        validate_age(18, decision_settings)

    def test_max_age_passes(self, decision_settings):
        validate_age(decision_settings.max_age, decision_settings)

    def test_over_max_age_rejected(self, decision_settings):
        with pytest.raises(CustomerTooOldException) as exc_info:
            validate_age(decision_settings.max_age + 1, decision_settings)
        assert isinstance(exc_info.value, NoValidLoanException)
        assert "(76)" in exc_info.value.message


# =============================================================================
# Credit Score Tests
# =============================================================================

class TestCreditScore:
    """Tests for calculate_credit_score() and is_loan_approved()."""

    def test_exact_threshold(self, decision_settings):
        """100 / 2000 * 20 / 10 is exactly the 0.1 threshold."""
        score = calculate_credit_score(100, 2000, 20, decision_settings)
        assert score == Decimal("0.1")
        assert is_loan_approved(100, 2000, 20, decision_settings)

    def test_comfortable_score(self, decision_settings):
        score = calculate_credit_score(1000, 8000, 12, decision_settings)
        assert score == Decimal("0.15")

    def test_half_up_rounding_lifts_score_to_threshold(self, decision_settings):
        """
        300 / 3600 rounds to 0.0833333333; * 12 / 10 gives 0.09999999996,
        which rounds half-up to 0.1000000000.
        """
        score = calculate_credit_score(300, 3600, 12, decision_settings)
        assert score == Decimal("0.1000000000")
        assert is_loan_approved(300, 3600, 12, decision_settings)

    def test_one_euro_more_is_refused(self, decision_settings):
        assert not is_loan_approved(300, 3601, 12, decision_settings)

    def test_score_keeps_ten_fractional_digits(self, decision_settings):
        score = calculate_credit_score(100, 3000, 12, decision_settings)
        assert score.as_tuple().exponent == -10

    def test_debtor_modifier_never_approved(self, decision_settings):
        assert calculate_credit_score(0, 2000, 48, decision_settings) == 0
        assert not is_loan_approved(0, 2000, 48, decision_settings)

    def test_non_positive_amount_raises(self, decision_settings):
        with pytest.raises(ValueError):
            calculate_credit_score(100, 0, 12, decision_settings)

    def test_score_decreases_with_amount(self, decision_settings):
        scores = [
            calculate_credit_score(300, amount, 24, decision_settings)
            for amount in range(2000, 10001, 250)
        ]
        assert scores == sorted(scores, reverse=True)

    def test_score_increases_with_period(self, decision_settings):
        scores = [
            calculate_credit_score(300, 5000, period, decision_settings)
            for period in range(12, 49)
        ]
        assert scores == sorted(scores)


# =============================================================================
# Search Tests
# =============================================================================

class TestMaximumValidLoanAmount:
    """Tests for find_maximum_valid_loan_amount()."""

    def test_segment_1_twelve_months_has_no_amount(self, decision_settings):
        assert find_maximum_valid_loan_amount(100, 12, decision_settings) == 0

    def test_segment_1_twenty_months_floors_at_minimum(self, decision_settings):
        assert find_maximum_valid_loan_amount(100, 20, decision_settings) == 2000

    def test_segment_2_twelve_months(self, decision_settings):
        assert find_maximum_valid_loan_amount(300, 12, decision_settings) == 3600

    def test_segment_3_capped_at_maximum(self, decision_settings):
        assert find_maximum_valid_loan_amount(1000, 12, decision_settings) == 10000

    @pytest.mark.parametrize("modifier,period", [(100, 30), (300, 17), (300, 25)])
    def test_matches_linear_scan(self, modifier, period, decision_settings):
        """Binary search agrees with checking every amount."""
        expected = max(
            (
                amount
                for amount in range(2000, 10001)
                if is_loan_approved(modifier, amount, period, decision_settings)
            ),
            default=0,
        )
        assert find_maximum_valid_loan_amount(modifier, period, decision_settings) == expected

    @pytest.mark.parametrize("modifier", [100, 300, 1000])
    def test_never_decreases_with_period(self, modifier, decision_settings):
        amounts = [
            find_maximum_valid_loan_amount(modifier, period, decision_settings)
            for period in range(12, 49)
        ]
        assert amounts == sorted(amounts)


class TestSuitablePeriod:
    """Tests for find_suitable_period()."""

    def test_segment_1_needs_twenty_months(self, decision_settings):
        assert find_suitable_period(100, decision_settings) == 20

    def test_returns_shortest_period(self, decision_settings):
        assert find_suitable_period(300, decision_settings) == 12
        assert find_suitable_period(1000, decision_settings) == 12

    def test_debtor_has_no_period(self, decision_settings):
        assert find_suitable_period(0, decision_settings) is None

    def test_no_period_within_shorter_bounds(self):
        custom = DecisionSettings(_env_file=None, max_loan_period=19)
        assert find_suitable_period(100, custom) is None


# =============================================================================
# Identity Code Tests
# =============================================================================

class TestIdentityCodeReader:
    """Tests for IdentityCodeReader backed by the Estonian parser."""

    @pytest.fixture
    def reader(self, parser, today) -> IdentityCodeReader:
        return IdentityCodeReader(parser, clock=lambda: today)

    def test_valid_code(self, reader, segment_2_code):
        assert reader.is_valid(segment_2_code)

    @pytest.mark.parametrize("code", ["12345678901", "", "abc", "3841126661", "38411266611"])
    def test_invalid_codes_do_not_raise(self, reader, code):
        assert reader.is_valid(code) is False

    def test_birth_date(self, reader, segment_2_code):
        assert reader.get_birth_date(segment_2_code) == date(1984, 11, 26)

    def test_age(self, reader, segment_1_code, segment_3_code):
        assert reader.get_age(segment_1_code) == 21
        assert reader.get_age(segment_3_code) == 74

    def test_segment_key(self, reader, debtor_code, segment_3_code):
        assert reader.get_segment_key(debtor_code) == 299
        assert reader.get_segment_key(segment_3_code) == 9515

    def test_age_of_invalid_code_raises(self, reader, invalid_code):
        with pytest.raises(InvalidPersonalCodeException):
            reader.get_age(invalid_code)

    def test_segment_key_of_invalid_code_raises(self, reader, invalid_code):
        with pytest.raises(InvalidPersonalCodeException):
            reader.get_segment_key(invalid_code)

    def test_generated_code_round_trips_birth_date(self, reader, personal_code_factory):
        code = personal_code_factory(date(2007, 1, 27))
        assert reader.get_birth_date(code) == date(2007, 1, 27)
        assert reader.get_age(code) == 18
