"""Loan decision Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


class LoanDecisionRequestSchema(BaseModel):
    """Schema for POST /v1/loan/decision request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "personal_code": "38411266610",
                    "loan_amount": 4000,
                    "loan_period": 12,
                }
            ]
        }
    )
    personal_code: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Applicant's national identity code",
        examples=["38411266610"],
    )
    loan_amount: int = Field(
        ...,
        description="Requested loan amount in euros",
        examples=[4000],
    )
    loan_period: int = Field(
        ...,
        description="Requested loan period in months",
        examples=[12],
    )

    @field_validator("personal_code")
    @classmethod
    def strip_personal_code(cls, v: str) -> str:
        """Drop surrounding whitespace from the identity code."""
        return v.strip()


class LoanDecisionResponseSchema(BaseModel):
    """Schema for POST /v1/loan/decision response body."""

    loan_amount: int = Field(
        ...,
        gt=0,
        description="Largest approved loan amount in euros",
        examples=[3600],
    )
    loan_period: int = Field(
        ...,
        gt=0,
        description="Approved loan period in months",
        examples=[12],
    )
    note: Optional[str] = Field(
        None,
        description="Set when the period was adjusted to make the loan approvable",
        examples=["Adjusted period from 12 to 20 months for eligibility"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "loan_amount": 3600,
                    "loan_period": 12,
                    "note": None,
                },
                {
                    "loan_amount": 2000,
                    "loan_period": 20,
                    "note": "Adjusted period from 12 to 20 months for eligibility",
                },
            ]
        }
    )
