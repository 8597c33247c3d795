"""
Domain Interfaces (Ports)
"""

from .identity import IdentityCodeParser

__all__ = [
    "IdentityCodeParser",
]
