"""Public API for purchase-history analytics.

``PurchaseAnalytics`` wraps a transaction collection and exposes one method
per query. The collection is flattened into frames once at construction;
each query then runs the matching pure function from this package on those
frames and returns fresh result objects. Queries never mutate the frames,
so calling one twice returns equal results.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from club_analytics.analytics.categories import compute_category_spend, compute_kirkland_split
from club_analytics.analytics.membership import compute_card_rewards, compute_membership_analysis
from club_analytics.analytics.overview import compute_overview
from club_analytics.analytics.patterns import (
    compute_shopping_patterns,
    find_highest_spend_hour,
    find_peak_hour,
)
from club_analytics.analytics.payments import compute_payment_methods
from club_analytics.analytics.products import compute_top_products
from club_analytics.analytics.refunds import compute_refund_analysis
from club_analytics.analytics.time_series import compute_time_series
from club_analytics.analytics.types import (
    AnalyticsReport,
    CardRewardsEstimate,
    CategorySpend,
    ExecutiveMembershipAnalysis,
    KirklandSplit,
    OverviewMetrics,
    PaymentMethodMetrics,
    ProductMetrics,
    RefundAnalysis,
    ShoppingInsights,
    ShoppingPattern,
    TimeSeriesPoint,
    WarehouseMetrics,
)
from club_analytics.analytics.warehouses import compute_warehouse_metrics
from club_analytics.config import AnalyticsConfig
from club_analytics.data.loaders import load_transactions
from club_analytics.data.preparation import (
    build_items_frame,
    build_tenders_frame,
    build_transactions_frame,
)
from club_analytics.types import Transaction

logger = logging.getLogger(__name__)


class PurchaseAnalytics:
    """Analytics engine over one purchase history.

    Args:
        transactions: Transaction records. They are copied into a tuple and
            never modified.
        config: Reward model constants and defaults. Defaults to AnalyticsConfig().

    Raises:
        ConfigError: If the config is invalid.

    Example:
        >>> from club_analytics import PurchaseAnalytics
        >>> analytics = PurchaseAnalytics.from_file("costco-export.json")
        >>> analytics.get_overview_metrics().net_spend
        >>> analytics.get_top_products(10)
    """

    def __init__(
        self,
        transactions: Iterable[Transaction],
        config: AnalyticsConfig | None = None,
    ) -> None:
        self.config = (config or AnalyticsConfig()).validate()
        self._transactions = tuple(transactions)

        self._transactions_df = build_transactions_frame(self._transactions)
        self._items_df = build_items_frame(self._transactions)
        self._tenders_df = build_tenders_frame(self._transactions)

        logger.debug(
            "Prepared %d transactions, %d line items, %d tenders",
            len(self._transactions_df),
            len(self._items_df),
            len(self._tenders_df),
        )

    @classmethod
    def from_file(
        cls,
        json_path: str | Path,
        config: AnalyticsConfig | None = None,
    ) -> PurchaseAnalytics:
        """Create the engine from a receipt export JSON file."""
        return cls(load_transactions(json_path), config=config)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    def get_overview_metrics(self) -> OverviewMetrics:
        return compute_overview(self._transactions_df, self._items_df)

    def get_warehouse_metrics(self) -> list[WarehouseMetrics]:
        return compute_warehouse_metrics(self._transactions_df)

    def get_top_products(self, limit: int | None = None) -> list[ProductMetrics]:
        """Top products by spend; ``limit`` defaults to config.top_products_limit."""
        if limit is None:
            limit = self.config.top_products_limit
        return compute_top_products(self._items_df, limit=limit)

    def get_category_spend(self) -> list[CategorySpend]:
        return compute_category_spend(self._items_df)

    def get_time_series_data(self) -> list[TimeSeriesPoint]:
        return compute_time_series(self._transactions_df)

    def get_shopping_patterns(self) -> list[ShoppingPattern]:
        return compute_shopping_patterns(self._transactions_df)

    def get_shopping_insights(self) -> ShoppingInsights:
        patterns = self.get_shopping_patterns()
        return ShoppingInsights(
            peak_hour=find_peak_hour(patterns),
            highest_spend_hour=find_highest_spend_hour(patterns),
        )

    def get_payment_method_metrics(self) -> list[PaymentMethodMetrics]:
        return compute_payment_methods(self._tenders_df)

    def get_kirkland_vs_brand(self) -> KirklandSplit:
        return compute_kirkland_split(self._items_df)

    def get_refund_analysis(self) -> RefundAnalysis:
        return compute_refund_analysis(self._transactions_df, self._items_df)

    def get_executive_membership_analysis(self) -> ExecutiveMembershipAnalysis:
        return compute_membership_analysis(self._transactions_df, self.config)

    def get_card_rewards_estimate(self) -> CardRewardsEstimate:
        return compute_card_rewards(
            self.get_payment_method_metrics(),
            self.get_executive_membership_analysis(),
            self.config,
        )

    def build_report(self, top_products_limit: int | None = None) -> AnalyticsReport:
        """Run every query and bundle the results."""
        logger.info("Building analytics report for %d transactions", len(self._transactions))

        payment_methods = self.get_payment_method_metrics()
        membership = self.get_executive_membership_analysis()

        return AnalyticsReport(
            overview=self.get_overview_metrics(),
            warehouses=self.get_warehouse_metrics(),
            top_products=self.get_top_products(top_products_limit),
            categories=self.get_category_spend(),
            time_series=self.get_time_series_data(),
            shopping_patterns=self.get_shopping_patterns(),
            shopping_insights=self.get_shopping_insights(),
            payment_methods=payment_methods,
            kirkland_split=self.get_kirkland_vs_brand(),
            refunds=self.get_refund_analysis(),
            membership=membership,
            card_rewards=compute_card_rewards(payment_methods, membership, self.config),
        )
