"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from loan_gateway.application.services import DecisionService
from loan_gateway.domain.interfaces import IdentityCodeParser
from loan_gateway.infrastructure.identity import EstonianIdentityCodeParser
from loan_gateway.service.scoring import (
    DecisionEngine,
    DecisionSettings,
    get_decision_settings,
)


# Collaborator dependencies
@lru_cache
def get_identity_code_parser() -> IdentityCodeParser:
    """Get the shared identity code parser."""
    return EstonianIdentityCodeParser()


# Engine dependencies
def get_decision_engine(
    parser: Annotated[IdentityCodeParser, Depends(get_identity_code_parser)],
    decision_settings: Annotated[DecisionSettings, Depends(get_decision_settings)],
) -> DecisionEngine:
    """Get a DecisionEngine wired with the parser and decision settings."""
    return DecisionEngine(parser=parser, settings=decision_settings)


# Service dependencies
def get_decision_service(
    engine: Annotated[DecisionEngine, Depends(get_decision_engine)],
) -> DecisionService:
    """Get a DecisionService instance."""
    return DecisionService(engine=engine)
