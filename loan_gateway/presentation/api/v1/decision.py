"""Loan decision API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from loan_gateway.application.dto import DecisionRequest
from loan_gateway.application.services import DecisionService
from loan_gateway.core.dependencies import get_decision_service
from loan_gateway.presentation.middleware.request_context import get_request_id
from loan_gateway.presentation.schemas import (
    ErrorResponseSchema,
    LoanDecisionRequestSchema,
    LoanDecisionResponseSchema,
)
from loan_gateway.service.scoring import RejectionReason

decision_router = APIRouter(
    prefix="/loan",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "No valid loan found"},
    },
)

REJECTION_STATUS_CODES = {
    RejectionReason.INVALID_PERSONAL_CODE: 400,
    RejectionReason.INVALID_LOAN_AMOUNT: 400,
    RejectionReason.INVALID_LOAN_PERIOD: 400,
    RejectionReason.NO_VALID_LOAN: 404,
}


@decision_router.post(
    "/decision",
    response_model=LoanDecisionResponseSchema,
    status_code=200,
    summary="Request Loan Decision",
    description="""
    Decide on a loan request for an applicant.

    Returns the largest approvable amount for the requested period. When no
    amount can be approved for that period, the shortest period that works
    is returned instead, together with an adjustment note.
    """,
    responses={
        200: {"description": "Loan approved"},
    },
)
async def create_decision(
    request: LoanDecisionRequestSchema,
    decision_service: Annotated[DecisionService, Depends(get_decision_service)],
):
    """
    Request a loan decision.

    Rejections are returned as ErrorResponseSchema with 400 for invalid input
    and 404 when no loan can be offered.
    """
    dto = DecisionRequest(
        personal_code=request.personal_code,
        loan_amount=request.loan_amount,
        loan_period=request.loan_period,
    )

    response = decision_service.make_decision(dto)

    if not response.approved:
        return JSONResponse(
            status_code=REJECTION_STATUS_CODES[RejectionReason(response.error_code)],
            content=ErrorResponseSchema(
                error=response.error_code,
                message=response.error_message,
                request_id=get_request_id(),
            ).model_dump(),
        )

    return LoanDecisionResponseSchema(
        loan_amount=response.loan_amount,
        loan_period=response.loan_period,
        note=response.note,
    )
