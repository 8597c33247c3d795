"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .identity import InvalidPersonalCodeException
from .loan import (
    CustomerTooOldException,
    CustomerTooYoungException,
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    NoValidLoanException,
)

__all__ = [
    "DomainException",
    "InvalidPersonalCodeException",
    "InvalidLoanAmountException",
    "InvalidLoanPeriodException",
    "NoValidLoanException",
    "CustomerTooYoungException",
    "CustomerTooOldException",
]
