"""Identity code parser interface."""

from abc import ABC, abstractmethod
from datetime import date


class IdentityCodeParser(ABC):
    """
    Abstract parser for national personal identity codes.

    Implementations are stateless and safe to share between requests.
    """

    @abstractmethod
    def is_valid(self, personal_code: str) -> bool:
        """
        Check the code's structure and checksum.

        Args:
            personal_code: The raw identity code

        Returns:
            True if the code is well-formed and its checksum matches.
            Never raises for malformed input.
        """
        ...

    @abstractmethod
    def get_birth_date(self, personal_code: str) -> date:
        """
        Extract the birth date embedded in the code.

        Args:
            personal_code: The raw identity code

        Returns:
            The applicant's date of birth

        Raises:
            InvalidPersonalCodeException: If the code cannot be parsed
        """
        ...
