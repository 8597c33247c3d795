"""
Shared fixtures for unit and integration tests.

Provides:
- A fixed "today" so that ages derived from identity codes never drift
- Known-valid Estonian identity codes, one per credit segment
- A factory for valid codes with a chosen birth date
- A DecisionEngine wired to the fixed clock
"""

from datetime import date
from typing import Callable

import pytest
from stdnum.ee import ik

from loan_gateway.infrastructure.identity import EstonianIdentityCodeParser
from loan_gateway.service.scoring import DecisionEngine, DecisionSettings


# =============================================================================
# Test Data
# =============================================================================

TODAY = date(2025, 3, 27)

DEBTOR_CODE = "37605030299"      # segment key 0299, born 1976-05-03
SEGMENT_1_CODE = "50307172740"   # segment key 2740, born 2003-07-17
SEGMENT_2_CODE = "38411266610"   # segment key 6610, born 1984-11-26
SEGMENT_3_CODE = "35006069515"   # segment key 9515, born 1950-06-06
INVALID_CODE = "12345678901"


def make_personal_code(birth_date: date, serial: str = "951") -> str:
    """
    Build a valid male isikukood for birth_date.

    The default serial keeps the segment key at 951x, i.e. segment 3.
    """
    century_digit = {18: "1", 19: "3", 20: "5"}[birth_date.year // 100]
    base = f"{century_digit}{birth_date:%y%m%d}{serial}"
    for check_digit in "0123456789":
        if ik.is_valid(base + check_digit):
            return base + check_digit
    raise ValueError(f"No valid check digit for {base}")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def personal_code_factory() -> Callable[..., str]:
    return make_personal_code


@pytest.fixture
def parser() -> EstonianIdentityCodeParser:
    return EstonianIdentityCodeParser()


@pytest.fixture
def decision_settings() -> DecisionSettings:
    """Default decision constants, independent of the environment."""
    return DecisionSettings(_env_file=None)


@pytest.fixture
def engine(
    parser: EstonianIdentityCodeParser,
    decision_settings: DecisionSettings,
) -> DecisionEngine:
    return DecisionEngine(
        parser=parser,
        settings=decision_settings,
        clock=lambda: TODAY,
    )


@pytest.fixture
def debtor_code() -> str:
    return DEBTOR_CODE


@pytest.fixture
def segment_1_code() -> str:
    return SEGMENT_1_CODE


@pytest.fixture
def segment_2_code() -> str:
    return SEGMENT_2_CODE


@pytest.fixture
def segment_3_code() -> str:
    return SEGMENT_3_CODE


@pytest.fixture
def invalid_code() -> str:
    return INVALID_CODE
