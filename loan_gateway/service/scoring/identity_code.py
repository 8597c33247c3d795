"""
Identity Code Reading for the Loan Decision Engine.

Derives the two values the decision needs from a personal identity code:
the applicant's age in whole years and the four-digit segment key.
"""

from datetime import date
from typing import Callable

from loan_gateway.domain.exceptions import InvalidPersonalCodeException
from loan_gateway.domain.interfaces import IdentityCodeParser


def calculate_age(birth_date: date, today: date) -> int:
    """
    Whole calendar years between birth_date and today.

    The current year only counts once the birthday has been reached.
    """
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


class IdentityCodeReader:
    """Reads age and segment key from identity codes via an injected parser."""

    SEGMENT_KEY_DIGITS = 4

    def __init__(
        self,
        parser: IdentityCodeParser,
        clock: Callable[[], date] = date.today,
    ):
        self._parser = parser
        self._clock = clock

    def is_valid(self, personal_code: str) -> bool:
        return self._parser.is_valid(personal_code)

    def get_birth_date(self, personal_code: str) -> date:
        """
        Raises:
            InvalidPersonalCodeException: If the code fails validation
        """
        self._require_valid(personal_code)
        return self._parser.get_birth_date(personal_code)

    def get_age(self, personal_code: str) -> int:
        """
        Age of the applicant today, in whole years.

        Raises:
            InvalidPersonalCodeException: If the code fails validation
        """
        return calculate_age(self.get_birth_date(personal_code), self._clock())

    def get_segment_key(self, personal_code: str) -> int:
        """
        The last four digits of the code, as an integer 0-9999.

        Raises:
            InvalidPersonalCodeException: If the code fails validation
        """
        self._require_valid(personal_code)
        return int(personal_code[-self.SEGMENT_KEY_DIGITS:])

    def _require_valid(self, personal_code: str) -> None:
        if not self._parser.is_valid(personal_code):
            raise InvalidPersonalCodeException()
