"""
Decision Engine for the Loan Decision Gateway.

This module orchestrates the complete decision-making process:
1. Validate the amount, period and identity code
2. Check the applicant's age
3. Classify the credit segment (debtors are refused)
4. Try the requested period
5. Otherwise look for the shortest period that can be approved

This is the main entry point for the scoring module. Every outcome is
returned as an ApprovedDecision or a RejectedDecision; domain errors
raised by the individual steps never leave decide().
"""

from datetime import date
from typing import Callable

import structlog

from loan_gateway.domain.exceptions import (
    DomainException,
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
    NoValidLoanException,
)
from loan_gateway.domain.interfaces import IdentityCodeParser

from .age_gate import validate_age
from .identity_code import IdentityCodeReader
from .loan_search import find_maximum_valid_loan_amount, find_suitable_period
from .models import (
    ApprovedDecision,
    CreditProfile,
    Decision,
    LoanRequest,
    RejectedDecision,
    RejectionReason,
)
from .segment import classify
from .settings import DecisionSettings, decision_settings

logger = structlog.get_logger(__name__)


def _is_whole_number(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class DecisionEngine:
    """
    Calculates the approved loan amount and period for an applicant.

    The engine holds no mutable state; one instance can serve any number
    of concurrent callers.
    """

    def __init__(
        self,
        parser: IdentityCodeParser,
        settings: DecisionSettings = decision_settings,
        clock: Callable[[], date] = date.today,
    ):
        self._reader = IdentityCodeReader(parser, clock)
        self._settings = settings

    def decide(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Decide on a loan request.

        Args:
            personal_code: Applicant's national identity code
            loan_amount: Requested amount in euros
            loan_period: Requested period in months

        Returns:
            ApprovedDecision with the largest approvable amount (and an
            adjusted period plus note when the requested one fails), or
            RejectedDecision naming the reason
        """
        request = LoanRequest(
            personal_code=personal_code,
            loan_amount=loan_amount,
            loan_period=loan_period,
        )
        try:
            decision = self._calculate_approved_loan(request)
        except DomainException as e:
            decision = RejectedDecision(reason=RejectionReason(e.code), message=e.message)
            logger.info(
                "decision_rejected",
                reason=decision.reason.value,
                message=decision.message,
                loan_amount=loan_amount,
                loan_period=loan_period,
            )
            return decision

        logger.info(
            "decision_approved",
            requested_amount=loan_amount,
            requested_period=loan_period,
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            period_adjusted=decision.period_adjusted,
        )
        return decision

    def _calculate_approved_loan(self, request: LoanRequest) -> ApprovedDecision:
        settings = self._settings

        self._verify_inputs(request)
        validate_age(self._reader.get_age(request.personal_code), settings)

        profile = self._get_credit_profile(request.personal_code)
        if profile.is_debtor:
            raise NoValidLoanException("No valid loan found due to credit segment!")

        max_valid_amount = find_maximum_valid_loan_amount(
            profile.credit_modifier, request.loan_period, settings
        )
        if max_valid_amount >= settings.min_loan_amount:
            return ApprovedDecision(
                loan_amount=max_valid_amount,
                loan_period=request.loan_period,
            )

        adjusted_period = find_suitable_period(profile.credit_modifier, settings)
        if adjusted_period is not None:
            max_valid_amount = find_maximum_valid_loan_amount(
                profile.credit_modifier, adjusted_period, settings
            )
            return ApprovedDecision(
                loan_amount=max_valid_amount,
                loan_period=adjusted_period,
                note=(
                    f"Adjusted period from {request.loan_period} to "
                    f"{adjusted_period} months for eligibility"
                ),
            )

        raise NoValidLoanException("No valid loan found for any period!")

    def _get_credit_profile(self, personal_code: str) -> CreditProfile:
        return classify(self._reader.get_segment_key(personal_code), self._settings)

    def _verify_inputs(self, request: LoanRequest) -> None:
        """
        Check the request against the configured bounds.

        Raises:
            InvalidLoanAmountException: If the amount is not an int or out of range
            InvalidLoanPeriodException: If the period is not an int or out of range
            InvalidPersonalCodeException: If the identity code is invalid
        """
        settings = self._settings

        if not _is_whole_number(request.loan_amount):
            raise InvalidLoanAmountException()
        if not settings.min_loan_amount <= request.loan_amount <= settings.max_loan_amount:
            raise InvalidLoanAmountException()
        if not _is_whole_number(request.loan_period):
            raise InvalidLoanPeriodException()
        if not settings.min_loan_period <= request.loan_period <= settings.max_loan_period:
            raise InvalidLoanPeriodException()
        if not self._reader.is_valid(request.personal_code):
            raise InvalidPersonalCodeException()


def explain_decision(decision: Decision) -> str:
    """
    Generate a human-readable explanation of a decision.

    Used for logging, debugging and support team reference.
    """
    if not decision.approved:
        return f"Decision: DECLINED ({decision.reason.value})\nReason: {decision.message}"

    lines = [
        f"Decision: APPROVED ({decision.loan_amount} EUR over {decision.loan_period} months)"
    ]
    if decision.note:
        lines.append(f"Note: {decision.note}")
    return "\n".join(lines)
