"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Every decision failure (bad input, ineligible applicant, no viable
    loan) is a DomainException carrying a stable machine-readable code.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
