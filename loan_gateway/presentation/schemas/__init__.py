"""Pydantic schemas for API request/response validation."""

from .decision import LoanDecisionRequestSchema, LoanDecisionResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "LoanDecisionRequestSchema",
    "LoanDecisionResponseSchema",
    "ErrorResponseSchema",
]
