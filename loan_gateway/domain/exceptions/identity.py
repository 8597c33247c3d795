"""Identity code domain exceptions."""

from .base import DomainException


class InvalidPersonalCodeException(DomainException):
    """Raised when a personal identity code fails format or checksum validation."""

    def __init__(self, message: str = "Invalid personal ID code!"):
        super().__init__(
            message=message,
            code="INVALID_PERSONAL_CODE",
        )
