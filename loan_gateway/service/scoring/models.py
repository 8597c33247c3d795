"""
Data models for loan decisions.

These models represent the data structures used throughout the decision
pipeline, from the incoming loan request to the final tagged decision.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class RejectionReason(str, Enum):
    """Why a loan request was not approved."""
    INVALID_PERSONAL_CODE = "INVALID_PERSONAL_CODE"
    INVALID_LOAN_AMOUNT = "INVALID_LOAN_AMOUNT"
    INVALID_LOAN_PERIOD = "INVALID_LOAN_PERIOD"
    NO_VALID_LOAN = "NO_VALID_LOAN"


@dataclass(frozen=True)
class LoanRequest:
    """
    A single loan application.

    Attributes:
        personal_code: The applicant's national identity code
        loan_amount: Requested amount in euros
        loan_period: Requested period in months
    """
    personal_code: str
    loan_amount: int
    loan_period: int


@dataclass(frozen=True)
class CreditProfile:
    """
    Credit standing derived from the last four digits of an identity code.

    Attributes:
        segment_key: The last four digits, 0-9999
        credit_modifier: Numerator of the score formula; 0 marks a debtor
    """
    segment_key: int
    credit_modifier: int

    @property
    def is_debtor(self) -> bool:
        return self.credit_modifier == 0


@dataclass(frozen=True)
class ApprovedDecision:
    """
    An approved loan, possibly on adjusted terms.

    Attributes:
        loan_amount: Largest approvable amount for loan_period
        loan_period: The requested period, or the adjusted one
        note: Set when the period was adjusted to make the loan approvable
    """
    loan_amount: int
    loan_period: int
    note: Optional[str] = None

    @property
    def approved(self) -> bool:
        return True

    @property
    def period_adjusted(self) -> bool:
        return self.note is not None


@dataclass(frozen=True)
class RejectedDecision:
    """
    A refused loan request.

    Attributes:
        reason: Machine-readable rejection reason
        message: Human-readable explanation
    """
    reason: RejectionReason
    message: str

    @property
    def approved(self) -> bool:
        return False


Decision = Union[ApprovedDecision, RejectedDecision]
