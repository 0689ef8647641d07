"""Tests for AnalyticsConfig."""

import pytest

from club_analytics import AnalyticsConfig, ConfigError, PurchaseAnalytics


def test_defaults() -> None:
    config = AnalyticsConfig()

    assert config.reward_rate == 0.02
    assert config.annual_fee == 60.0
    assert config.days_per_year == 365
    assert config.top_products_limit == 20
    assert config.card_reward_rate == 0.02


def test_from_env_overrides() -> None:
    config = AnalyticsConfig.from_env(
        {
            "CLUB_ANALYTICS_ANNUAL_FEE": "65",
            "CLUB_ANALYTICS_TOP_PRODUCTS": "'15'",
            "CLUB_ANALYTICS_REWARD_RATE": "",
        }
    )

    assert config.annual_fee == 65.0
    assert config.top_products_limit == 15
    assert config.reward_rate == 0.02


def test_from_env_empty_mapping_gives_defaults() -> None:
    assert AnalyticsConfig.from_env({}) == AnalyticsConfig()


def test_from_env_invalid_value() -> None:
    with pytest.raises(ConfigError, match="CLUB_ANALYTICS_DAYS_PER_YEAR"):
        AnalyticsConfig.from_env({"CLUB_ANALYTICS_DAYS_PER_YEAR": "a year"})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"reward_rate": 0.0},
        {"annual_fee": -1.0},
        {"days_per_year": 0},
        {"top_products_limit": -5},
        {"card_reward_rate": -0.01},
    ],
)
def test_validate_rejects_out_of_range(kwargs) -> None:
    with pytest.raises(ConfigError):
        AnalyticsConfig(**kwargs).validate()


def test_engine_validates_config() -> None:
    with pytest.raises(ConfigError, match="reward_rate"):
        PurchaseAnalytics([], config=AnalyticsConfig(reward_rate=-0.02))


def test_top_products_limit_from_config(mixed_history) -> None:
    analytics = PurchaseAnalytics(mixed_history, config=AnalyticsConfig(top_products_limit=3))

    assert len(analytics.get_top_products()) == 3
    assert len(analytics.get_top_products(1)) == 1
