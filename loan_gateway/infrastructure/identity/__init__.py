"""Identity code parser implementations."""

from .estonian import EstonianIdentityCodeParser

__all__ = [
    "EstonianIdentityCodeParser",
]
