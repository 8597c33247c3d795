"""
Credit Score Calculation for the Loan Decision Engine.

    credit_score = ((credit_modifier / loan_amount) * loan_period) / 10

The score is computed in fixed-point decimal, rounding half-up to
``credit_score_scale`` fractional digits after each division. It is
strictly decreasing in loan_amount and increasing in loan_period and
credit_modifier, which is what makes the amount binary search valid.
"""

from decimal import ROUND_HALF_UP, Decimal

from .settings import DecisionSettings, decision_settings

TEN = Decimal(10)


def _divide(numerator: Decimal, denominator: Decimal, scale: int) -> Decimal:
    return (numerator / denominator).quantize(
        Decimal(1).scaleb(-scale),
        rounding=ROUND_HALF_UP,
    )


def calculate_credit_score(
    credit_modifier: int,
    loan_amount: int,
    loan_period: int,
    settings: DecisionSettings = decision_settings,
) -> Decimal:
    """
    Calculate the credit score for a (modifier, amount, period) triple.

    Args:
        credit_modifier: The applicant's segment modifier
        loan_amount: Loan amount in euros (must be positive)
        loan_period: Loan period in months

    Returns:
        Credit score as a Decimal
    """
    if loan_amount <= 0:
        raise ValueError(f"loan_amount must be positive: {loan_amount}")

    scale = settings.credit_score_scale
    ratio = _divide(Decimal(credit_modifier), Decimal(loan_amount), scale)
    return _divide(ratio * Decimal(loan_period), TEN, scale)


def is_loan_approved(
    credit_modifier: int,
    loan_amount: int,
    loan_period: int,
    settings: DecisionSettings = decision_settings,
) -> bool:
    """A loan is approved when its credit score reaches the threshold."""
    score = calculate_credit_score(credit_modifier, loan_amount, loan_period, settings)
    return score >= settings.credit_score_threshold
