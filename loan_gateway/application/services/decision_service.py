"""Decision service - orchestrates the loan decision use case."""

import structlog

from loan_gateway.application.dto import DecisionRequest, DecisionResponse
from loan_gateway.core.metrics import record_decision, track_decision_latency
from loan_gateway.service.scoring import DecisionEngine

logger = structlog.get_logger(__name__)


def mask_personal_code(personal_code: str) -> str:
    """Keep only the last four characters of an identity code for logging."""
    if len(personal_code) <= 4:
        return "*" * len(personal_code)
    return "*" * (len(personal_code) - 4) + personal_code[-4:]


class DecisionService:
    """
    Application service for loan decision use cases.
    """

    def __init__(self, engine: DecisionEngine):
        self._engine = engine

    def make_decision(self, request: DecisionRequest) -> DecisionResponse:
        """
        Process a loan decision request.

        Args:
            request: The decision request with identity code, amount and period

        Returns:
            DecisionResponse describing either the approved terms or the
            rejection reason
        """
        log = logger.bind(
            personal_code=mask_personal_code(request.personal_code),
            loan_amount=request.loan_amount,
            loan_period=request.loan_period,
        )
        log.info("decision_requested")

        with track_decision_latency():
            decision = self._engine.decide(
                request.personal_code,
                request.loan_amount,
                request.loan_period,
            )

        record_decision(decision)

        response = DecisionResponse.from_decision(decision)
        log.info(
            "decision_made",
            approved=response.approved,
            approved_amount=response.loan_amount,
            approved_period=response.loan_period,
            error_code=response.error_code,
        )
        return response
