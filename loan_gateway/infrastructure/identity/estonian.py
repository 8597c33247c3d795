"""Estonian personal identification code (isikukood) parser."""

from datetime import date

from stdnum.ee import ik
from stdnum.exceptions import ValidationError

from loan_gateway.domain.exceptions import InvalidPersonalCodeException
from loan_gateway.domain.interfaces import IdentityCodeParser


class EstonianIdentityCodeParser(IdentityCodeParser):
    """
    IdentityCodeParser backed by python-stdnum's ``stdnum.ee.ik``.

    An isikukood is 11 digits: century/sex digit, YYMMDD birth date,
    a 3-digit serial and a mod-11 check digit. Only bare digit strings are
    accepted; separators and surrounding whitespace make a code invalid.
    """

    def is_valid(self, personal_code: str) -> bool:
        if not isinstance(personal_code, str):
            return False
        if not (personal_code.isascii() and personal_code.isdigit()):
            return False
        return ik.is_valid(personal_code)

    def get_birth_date(self, personal_code: str) -> date:
        try:
            ik.validate(personal_code)
            return ik.get_birth_date(personal_code)
        except ValidationError as e:
            raise InvalidPersonalCodeException(
                f"Error processing personal code: {e}"
            )
