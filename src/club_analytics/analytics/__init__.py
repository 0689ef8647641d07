"""Analytics queries over a purchase history.

Each query is a pure function over the prepared frames; ``PurchaseAnalytics``
bundles them behind one object built from a transaction collection.

Query Reference:
    get_overview_metrics:   totals, averages, distinct products
    get_warehouse_metrics:  sales per warehouse
    get_top_products:       spend ranking per item number
    get_category_spend:     rule-based category buckets
    get_time_series_data:   monthly sales, zero-filled
    get_shopping_patterns:  sales per hour of day
    get_shopping_insights:  busiest and largest-basket hours
    get_payment_method_metrics: tender rollup
    get_kirkland_vs_brand:  store-brand share
    get_refund_analysis:    refund totals and products
    get_executive_membership_analysis: upgrade break-even estimate
    get_card_rewards_estimate: co-branded card rewards
    build_report:           every query in one AnalyticsReport
"""

from club_analytics.analytics.api import PurchaseAnalytics
from club_analytics.analytics.categories import (
    CATEGORY_ORDER,
    CATEGORY_RULES,
    categorize_product,
    is_kirkland_signature,
)

__all__ = [
    "CATEGORY_ORDER",
    "CATEGORY_RULES",
    "PurchaseAnalytics",
    "categorize_product",
    "is_kirkland_signature",
]
