"""
Credit Segment Classification for the Loan Decision Engine.

The last four digits of an identity code place the applicant in one of
four bands:

    0000-2499  debtor (no modifier, never approved)
    2500-4999  segment 1
    5000-7499  segment 2
    7500-9999  segment 3
"""

from .models import CreditProfile
from .settings import DecisionSettings, decision_settings

DEBTOR_CREDIT_MODIFIER = 0
SEGMENT_KEY_LIMIT = 10_000


def get_credit_modifier(
    segment_key: int,
    settings: DecisionSettings = decision_settings,
) -> int:
    """
    Map a segment key to its credit modifier.

    Args:
        segment_key: Last four digits of the identity code (0-9999)
        settings: Decision settings (uses defaults if not provided)

    Returns:
        The segment's credit modifier, or 0 for debtors
    """
    if not 0 <= segment_key < SEGMENT_KEY_LIMIT:
        raise ValueError(f"Segment key out of range: {segment_key}")

    if segment_key < 2500:
        return DEBTOR_CREDIT_MODIFIER
    elif segment_key < 5000:
        return settings.segment_1_credit_modifier
    elif segment_key < 7500:
        return settings.segment_2_credit_modifier
    return settings.segment_3_credit_modifier


def classify(
    segment_key: int,
    settings: DecisionSettings = decision_settings,
) -> CreditProfile:
    """Build the CreditProfile for a segment key."""
    return CreditProfile(
        segment_key=segment_key,
        credit_modifier=get_credit_modifier(segment_key, settings),
    )
