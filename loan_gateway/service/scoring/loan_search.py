"""
Loan Term Search for the Loan Decision Engine.

Finds the best approvable terms for a credit modifier:
- the largest amount for a fixed period (binary search), and
- the shortest period for which any amount can be approved (linear scan).

Both rely on the credit score being monotonic in amount and period.
"""

from typing import Optional

from .credit_score import is_loan_approved
from .settings import DecisionSettings, decision_settings

NO_VALID_AMOUNT = 0


def find_maximum_valid_loan_amount(
    credit_modifier: int,
    loan_period: int,
    settings: DecisionSettings = decision_settings,
) -> int:
    """
    Find the largest loan amount that is approved for a fixed period.

    Approved amounts form a prefix of [min_loan_amount, max_loan_amount],
    so a binary search keeps the best approved midpoint and moves right
    while approval holds, left otherwise.

    Args:
        credit_modifier: The applicant's segment modifier
        loan_period: Loan period in months

    Returns:
        The maximum approved amount, or 0 if even the minimum is refused
    """
    left = settings.min_loan_amount
    right = settings.max_loan_amount
    max_valid_amount = NO_VALID_AMOUNT

    while left <= right:
        mid = left + (right - left) // 2

        if is_loan_approved(credit_modifier, mid, loan_period, settings):
            max_valid_amount = mid
            left = mid + 1
        else:
            right = mid - 1

    return max_valid_amount


def find_suitable_period(
    credit_modifier: int,
    settings: DecisionSettings = decision_settings,
) -> Optional[int]:
    """
    Find the shortest loan period for which some amount is approved.

    Periods are tried in ascending order from min_loan_period, so the
    result is the smallest viable period, not the one closest to the
    original request.

    Returns:
        The period in months, or None if no period in range works
    """
    for period in range(settings.min_loan_period, settings.max_loan_period + 1):
        max_amount = find_maximum_valid_loan_amount(credit_modifier, period, settings)
        if max_amount >= settings.min_loan_amount:
            return period

    return None
