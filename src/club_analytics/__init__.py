"""club_analytics - descriptive analytics over a warehouse club purchase history.

This package turns the receipt export of a membership warehouse club (one
JSON document of sales and refunds) into summary metrics for a dashboard.

Module Structure:
    club_analytics.types: Input records (Transaction, LineItem, TenderUse)
    club_analytics.data: Export loading and frame preparation
    club_analytics.analytics: Aggregation queries and the PurchaseAnalytics engine
    club_analytics.formatters: Plain-text report rendering
    club_analytics.config: AnalyticsConfig (reward model constants)

Quick Start:
    >>> from club_analytics import PurchaseAnalytics, load_transactions
    >>>
    >>> transactions = load_transactions("costco-export.json")
    >>> analytics = PurchaseAnalytics(transactions)
    >>>
    >>> overview = analytics.get_overview_metrics()
    >>> print(overview.total_spent, overview.net_spend)
    >>>
    >>> for month in analytics.get_time_series_data():
    ...     print(month.date, month.amount)
    >>>
    >>> analysis = analytics.get_executive_membership_analysis()
    >>> print(analysis.recommend_upgrade)
"""

__version__ = "0.1.0"

from club_analytics.analytics.api import PurchaseAnalytics
from club_analytics.config import AnalyticsConfig
from club_analytics.data.loaders import load_transactions
from club_analytics.exceptions import ClubAnalyticsError, ConfigError, DataQualityError
from club_analytics.types import LineItem, TenderUse, Transaction

__all__ = [
    "AnalyticsConfig",
    "ClubAnalyticsError",
    "ConfigError",
    "DataQualityError",
    "LineItem",
    "PurchaseAnalytics",
    "TenderUse",
    "Transaction",
    "__version__",
    "load_transactions",
]
