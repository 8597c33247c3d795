"""Age eligibility check, applied before any scoring."""

from loan_gateway.domain.exceptions import (
    CustomerTooOldException,
    CustomerTooYoungException,
)

from .settings import DecisionSettings, decision_settings


def validate_age(
    age: int,
    settings: DecisionSettings = decision_settings,
) -> None:
    """
    Ensure the applicant's age lies within [min_age, max_age].

    max_age is life_expectancy minus the longest loan period in whole
    years, so that even the longest loan ends within life expectancy.

    Raises:
        CustomerTooYoungException: If age < min_age
        CustomerTooOldException: If age > max_age
    """
    if age < settings.min_age:
        raise CustomerTooYoungException(settings.min_age)
    if age > settings.max_age:
        raise CustomerTooOldException(settings.max_age)

