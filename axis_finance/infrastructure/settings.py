"""Settings helpers for the budget calculations."""

from dataclasses import dataclass
from decimal import Decimal
import os

import dotenv

from axis_finance.domain.constants import (
    DEFAULT_INVESTMENT_GOAL_PERCENT,
    SUPERFLUOUS_WARNING_PERCENT,
)
from axis_finance.domain.services.budget import clamp_goal_percent
from axis_finance.infrastructure.logging.logger import get_app_logger
from axis_finance.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for budget figures.

    Attributes:
        goal_percent: Fraction of monthly income reserved for investments.
        warning_percent: Superfluous share of expenses that raises a warning.
        currency_code: Currency shown by the CLI adapters.
    """

    goal_percent: Decimal = DEFAULT_INVESTMENT_GOAL_PERCENT
    warning_percent: Decimal = SUPERFLUOUS_WARNING_PERCENT
    currency_code: str = "BRL"

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Unreadable values fall back to their defaults with a warning.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        goal = cls._read_decimal(
            "AXIS_INVESTMENT_GOAL_PERCENT",
            DEFAULT_INVESTMENT_GOAL_PERCENT,
            logger=logger,
        )
        clamped = clamp_goal_percent(goal)
        if clamped != goal:
            logger.warning(
                f"AXIS_INVESTMENT_GOAL_PERCENT={goal} outside [0, 1]; "
                f"using {clamped}"
            )
        warning = cls._read_decimal(
            "AXIS_SUPERFLUOUS_WARNING_PERCENT",
            SUPERFLUOUS_WARNING_PERCENT,
            logger=logger,
        )
        currency = os.getenv("AXIS_CURRENCY_CODE", "BRL").strip().upper()
        return cls(
            goal_percent=clamped,
            warning_percent=warning,
            currency_code=currency or "BRL",
        )

    @staticmethod
    def _read_decimal(name: str, default: Decimal, logger) -> Decimal:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return coerce_decimal(raw)
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default


__all__ = ["FinanceSettings"]
