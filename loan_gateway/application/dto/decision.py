"""Data transfer objects for loan decision operations."""

from dataclasses import dataclass
from typing import Optional

from loan_gateway.service.scoring import Decision


@dataclass(frozen=True)
class DecisionRequest:
    """Input data for requesting a loan decision."""
    personal_code: str
    loan_amount: int
    loan_period: int


@dataclass(frozen=True)
class DecisionResponse:
    """
    Response data for a loan decision.

    Approved responses carry loan_amount and loan_period (and a note if the
    period was adjusted); rejected ones carry error_code and error_message.
    """

    approved: bool
    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    note: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        if decision.approved:
            return cls(
                approved=True,
                loan_amount=decision.loan_amount,
                loan_period=decision.loan_period,
                note=decision.note,
            )
        return cls(
            approved=False,
            error_code=decision.reason.value,
            error_message=decision.message,
        )
