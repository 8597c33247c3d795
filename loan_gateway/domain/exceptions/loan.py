"""Loan request and eligibility domain exceptions."""

from .base import DomainException


class InvalidLoanAmountException(DomainException):
    """Raised when the requested amount is outside the allowed range."""

    def __init__(self, message: str = "Invalid loan amount!"):
        super().__init__(
            message=message,
            code="INVALID_LOAN_AMOUNT",
        )


class InvalidLoanPeriodException(DomainException):
    """Raised when the requested period is outside the allowed range."""

    def __init__(self, message: str = "Invalid loan period!"):
        super().__init__(
            message=message,
            code="INVALID_LOAN_PERIOD",
        )


class NoValidLoanException(DomainException):
    """Raised when no amount/period combination can be approved."""

    def __init__(self, message: str = "No valid loan found!"):
        super().__init__(
            message=message,
            code="NO_VALID_LOAN",
        )


class CustomerTooYoungException(NoValidLoanException):
    """Raised when the applicant is below the minimum age."""

    def __init__(self, min_age: int):
        super().__init__(
            f"Customer is too young for a loan (minimum age: {min_age})"
        )
        self.min_age = min_age


class CustomerTooOldException(NoValidLoanException):
    """Raised when the applicant is above the maximum age."""

    def __init__(self, max_age: int):
        super().__init__(f"Customer exceeds maximum age limit ({max_age})")
        self.max_age = max_age
