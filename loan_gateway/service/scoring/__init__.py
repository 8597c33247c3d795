"""
Loan Decision Module for the Loan Decision Gateway
"""

from .models import (
    ApprovedDecision,
    CreditProfile,
    Decision,
    LoanRequest,
    RejectedDecision,
    RejectionReason,
)
from .settings import DecisionSettings, decision_settings, get_decision_settings
from .identity_code import IdentityCodeReader, calculate_age
from .segment import classify, get_credit_modifier
from .age_gate import validate_age
from .credit_score import calculate_credit_score, is_loan_approved
from .loan_search import find_maximum_valid_loan_amount, find_suitable_period
from .decision import DecisionEngine, explain_decision

__all__ = [
    # Settings
    "DecisionSettings",
    "decision_settings",
    "get_decision_settings",
    # Models
    "ApprovedDecision",
    "CreditProfile",
    "Decision",
    "LoanRequest",
    "RejectedDecision",
    "RejectionReason",
    # Identity Code
    "IdentityCodeReader",
    "calculate_age",
    # Segment
    "classify",
    "get_credit_modifier",
    # Age Gate
    "validate_age",
    # Scoring
    "calculate_credit_score",
    "is_loan_approved",
    # Search
    "find_maximum_valid_loan_amount",
    "find_suitable_period",
    # Decision
    "DecisionEngine",
    "explain_decision",
]
