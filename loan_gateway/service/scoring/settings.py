"""
Decision Settings for the Loan Decision Engine.

This module contains every constant the decision algorithm reads: loan
amount and period bounds, per-segment credit modifiers, the approval
threshold and the age limits. They can be adjusted via environment
variables, but are read-only once loaded.

Environment variables use the DECISION_ prefix:
    DECISION_MIN_LOAN_AMOUNT=2000
    DECISION_MAX_LOAN_PERIOD=48
    DECISION_SEGMENT_2_CREDIT_MODIFIER=300

Usage:
    from loan_gateway.service.scoring.settings import decision_settings

    # Use default settings (loaded from env)
    max_age = decision_settings.max_age

    # Or create custom settings for testing
    custom = DecisionSettings(max_loan_period=60)
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DecisionSettings(BaseSettings):
    """
    Configurable parameters for the loan decision algorithm.

    All settings can be overridden via environment variables with DECISION_ prefix.
    Amounts are in whole euros, periods in months, ages in whole years.
    """

    model_config = SettingsConfigDict(
        env_prefix="DECISION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # === Loan Bounds ===
    min_loan_amount: int = Field(
        default=2000,
        gt=0,
        description="Smallest loan amount that can be requested or approved",
    )
    max_loan_amount: int = Field(
        default=10000,
        gt=0,
        description="Largest loan amount that can be requested or approved",
    )
    min_loan_period: int = Field(
        default=12,
        gt=0,
        description="Shortest loan period in months",
    )
    max_loan_period: int = Field(
        default=48,
        gt=0,
        description="Longest loan period in months",
    )

    # === Segment Credit Modifiers ===
    segment_1_credit_modifier: int = Field(
        default=100,
        gt=0,
        description="Credit modifier for segment keys 2500-4999",
    )
    segment_2_credit_modifier: int = Field(
        default=300,
        gt=0,
        description="Credit modifier for segment keys 5000-7499",
    )
    segment_3_credit_modifier: int = Field(
        default=1000,
        gt=0,
        description="Credit modifier for segment keys 7500-9999",
    )

    # === Scoring ===
    credit_score_threshold: Decimal = Field(
        default=Decimal("0.1"),
        gt=0,
        description="Minimum credit score required for approval",
    )
    credit_score_scale: int = Field(
        default=10,
        ge=10,
        description="Fractional digits kept at each division of the score formula",
    )

    # === Age Limits ===
    min_age: int = Field(
        default=18,
        ge=0,
        description="Youngest age (in whole years) eligible for a loan",
    )
    life_expectancy: int = Field(
        default=80,
        gt=0,
        description="Life expectancy used to derive the maximum eligible age",
    )

    @model_validator(mode="after")
    def validate_bounds(self) -> "DecisionSettings":
        """Reject bound pairs that leave no valid request."""
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError(
                f"min_loan_amount ({self.min_loan_amount}) > "
                f"max_loan_amount ({self.max_loan_amount})"
            )
        if self.min_loan_period > self.max_loan_period:
            raise ValueError(
                f"min_loan_period ({self.min_loan_period}) > "
                f"max_loan_period ({self.max_loan_period})"
            )
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age ({self.min_age}) > derived max_age ({self.max_age})"
            )
        return self

    @property
    def max_age(self) -> int:
        """Oldest eligible age: the longest loan must end before life expectancy."""
        return self.life_expectancy - self.max_loan_period // 12


@lru_cache
def get_decision_settings() -> DecisionSettings:
    """Get cached decision settings instance."""
    return DecisionSettings()


decision_settings = get_decision_settings()
