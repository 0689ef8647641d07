"""Configuration for the analytics engine.

This module provides a single, simple configuration class holding the
constants of the membership reward model and the default ranking size.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping

from club_analytics.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Executive membership pays 2% back on warehouse purchases
DEFAULT_REWARD_RATE = 0.02

# Difference between Executive ($120) and Gold Star ($60) annual fees
DEFAULT_ANNUAL_FEE = 60.0

DEFAULT_DAYS_PER_YEAR = 365

DEFAULT_TOP_PRODUCTS_LIMIT = 20

# Co-branded Visa: simplified to 2% on all warehouse purchases
DEFAULT_CARD_REWARD_RATE = 0.02

# Annual spend at which the executive rebate pays for the upgrade fee under the
# standard $60 fee and 2% rate. Reported as-is even when annual_fee or
# reward_rate are overridden.
BREAK_EVEN_SPEND = DEFAULT_ANNUAL_FEE / DEFAULT_REWARD_RATE

ENV_PREFIX = "CLUB_ANALYTICS_"


@dataclass(frozen=True)
class AnalyticsConfig:
    """Tunable constants used by the analytics queries.

    Attributes:
        reward_rate: Executive membership rebate rate (fraction of spend).
        annual_fee: Extra annual fee of the executive tier over the base tier.
        days_per_year: Days used to annualize the observed spend.
        top_products_limit: Default number of products in the product ranking.
        card_reward_rate: Co-branded card reward rate on warehouse purchases.
    """

    reward_rate: float = DEFAULT_REWARD_RATE
    annual_fee: float = DEFAULT_ANNUAL_FEE
    days_per_year: int = DEFAULT_DAYS_PER_YEAR
    top_products_limit: int = DEFAULT_TOP_PRODUCTS_LIMIT
    card_reward_rate: float = DEFAULT_CARD_REWARD_RATE

    def validate(self) -> AnalyticsConfig:
        """Check value ranges.

        Returns:
            The config itself, to allow chaining.

        Raises:
            ConfigError: If any value is out of range.
        """
        if self.reward_rate <= 0:
            raise ConfigError(f"reward_rate must be positive, got {self.reward_rate}")
        if self.annual_fee < 0:
            raise ConfigError(f"annual_fee must not be negative, got {self.annual_fee}")
        if self.days_per_year <= 0:
            raise ConfigError(f"days_per_year must be positive, got {self.days_per_year}")
        if self.top_products_limit < 0:
            raise ConfigError(
                f"top_products_limit must not be negative, got {self.top_products_limit}"
            )
        if self.card_reward_rate < 0:
            raise ConfigError(
                f"card_reward_rate must not be negative, got {self.card_reward_rate}"
            )
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AnalyticsConfig:
        """Create AnalyticsConfig from CLUB_ANALYTICS_* environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Validated AnalyticsConfig instance.

        Raises:
            ConfigError: If a variable cannot be parsed or is out of range.

        Examples:
            >>> AnalyticsConfig.from_env({"CLUB_ANALYTICS_ANNUAL_FEE": "65"}).annual_fee
            65.0
        """
        if environ is None:
            environ = os.environ

        fields: dict[str, tuple[str, Callable[[str], object]]] = {
            "reward_rate": ("REWARD_RATE", float),
            "annual_fee": ("ANNUAL_FEE", float),
            "days_per_year": ("DAYS_PER_YEAR", int),
            "top_products_limit": ("TOP_PRODUCTS", int),
            "card_reward_rate": ("CARD_REWARD_RATE", float),
        }

        values: dict[str, object] = {}
        for field_name, (suffix, parse) in fields.items():
            key = ENV_PREFIX + suffix
            raw = environ.get(key)
            if raw is None or raw.strip() == "":
                continue
            # Strip quotes from environment variables if present
            raw = raw.strip().strip('"').strip("'")
            try:
                values[field_name] = parse(raw)
            except ValueError as e:
                raise ConfigError(f"Invalid value for {key}: {raw!r}") from e
            logger.debug("Config override from %s: %s=%s", key, field_name, raw)

        return cls(**values).validate()  # type: ignore[arg-type]
