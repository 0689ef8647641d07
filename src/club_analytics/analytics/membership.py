"""Executive membership break-even model and co-branded card rewards.

Reward model
------------
- The observed sales total is annualized over the span between the first and
  last sale: ``annualized = total * days_per_year / day_span``.
- The executive tier rebates ``reward_rate`` (2%) of annualized spend.
- The upgrade costs ``annual_fee`` ($60) more per year than the base tier.
- The upgrade pays for itself above $3,000 of annual spend (``BREAK_EVEN_SPEND``).
  That threshold is fixed and does not follow config overrides.

Everything here is a projection from past purchases, not a forecast.
"""

from __future__ import annotations

import logging

import pandas as pd

from club_analytics.analytics.types import (
    CardRewardsEstimate,
    ExecutiveMembershipAnalysis,
    PaymentMethodMetrics,
)
from club_analytics.config import BREAK_EVEN_SPEND, AnalyticsConfig
from club_analytics.data.preparation import sales_only

logger = logging.getLogger(__name__)

CARD_METHOD_MARKERS = ("VISA", "COSTCO")


def observed_day_span(transactions_df: pd.DataFrame) -> int:
    """Whole days between the earliest and latest sale, at least 1."""
    sales = sales_only(transactions_df)
    if sales.empty:
        return 1
    timestamps = sales["transaction_datetime"]
    days = (timestamps.max() - timestamps.min()).days
    return days if days > 0 else 1


def compute_membership_analysis(
    transactions_df: pd.DataFrame,
    config: AnalyticsConfig | None = None,
) -> ExecutiveMembershipAnalysis:
    """Estimate whether the executive membership upgrade pays off.

    Args:
        transactions_df: Transaction-grain frame.
        config: Reward model constants. Defaults to AnalyticsConfig().

    Returns:
        ExecutiveMembershipAnalysis with annualized estimates.
    """
    config = config or AnalyticsConfig()

    total_spend = float(sales_only(transactions_df)["total"].sum())
    day_span = observed_day_span(transactions_df)
    annualization_factor = config.days_per_year / day_span
    annualized_spend = total_spend * annualization_factor

    estimated_rebate = annualized_spend * config.reward_rate
    annual_fee = config.annual_fee

    logger.debug(
        "Annualized %.2f over %d day(s) to %.2f", total_spend, day_span, annualized_spend
    )

    return ExecutiveMembershipAnalysis(
        day_span=day_span,
        annualization_factor=annualization_factor,
        annualized_spend=annualized_spend,
        estimated_rebate=estimated_rebate,
        annual_fee=annual_fee,
        net_benefit=estimated_rebate - annual_fee,
        break_even_spend=BREAK_EVEN_SPEND,
        recommend_upgrade=estimated_rebate > annual_fee,
    )


def find_card_method(
    payment_methods: list[PaymentMethodMetrics],
) -> PaymentMethodMetrics | None:
    """First payment method that looks like the co-branded card.

    Args:
        payment_methods: Payment rollup, in its sorted order.
    """
    for method in payment_methods:
        upper = method.method.upper()
        if any(marker in upper for marker in CARD_METHOD_MARKERS):
            return method
    return None


def compute_card_rewards(
    payment_methods: list[PaymentMethodMetrics],
    membership: ExecutiveMembershipAnalysis,
    config: AnalyticsConfig | None = None,
) -> CardRewardsEstimate:
    """Estimate co-branded card rewards and the combined annual benefit.

    Simplified to a flat ``card_reward_rate`` on everything paid with the card.
    """
    config = config or AnalyticsConfig()

    card = find_card_method(payment_methods)
    card_spend = card.total_amount if card is not None else 0.0
    rewards = card_spend * config.card_reward_rate

    return CardRewardsEstimate(
        method=card.method if card is not None else None,
        card_spend=card_spend,
        estimated_rewards=rewards,
        total_annual_benefit=membership.estimated_rebate + rewards,
    )
