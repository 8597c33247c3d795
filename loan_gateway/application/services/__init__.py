"""Application services - use case orchestration."""

from .decision_service import DecisionService

__all__ = [
    "DecisionService",
]
