"""Headline metrics over the whole purchase history."""

from __future__ import annotations

import pandas as pd

from club_analytics.analytics.types import OverviewMetrics
from club_analytics.data.preparation import refunds_only, sales_only


def compute_overview(transactions_df: pd.DataFrame, items_df: pd.DataFrame) -> OverviewMetrics:
    """Compute overview metrics.

    Refund totals are stored negative; ``total_refunded`` restores them to a
    positive magnitude. Savings, item counts and distinct products cover every
    transaction, sales and refunds alike.

    Args:
        transactions_df: Transaction-grain frame.
        items_df: Line-item frame.

    Returns:
        OverviewMetrics. Averages are 0 when there are no sales.
    """
    sales = sales_only(transactions_df)
    refunds = refunds_only(transactions_df)

    total_spent = float(sales["total"].sum())
    total_refunded = abs(float(refunds["total"].sum()))
    total_savings = float(transactions_df["instant_savings"].sum())

    sales_count = len(sales)
    total_items = len(items_df)

    return OverviewMetrics(
        total_transactions=len(transactions_df),
        sales_count=sales_count,
        refund_count=len(refunds),
        total_spent=total_spent,
        total_refunded=total_refunded,
        net_spend=total_spent - total_refunded,
        total_savings=total_savings,
        avg_transaction=total_spent / sales_count if sales_count > 0 else 0.0,
        # Divides all line items (refunds included) by the sales count
        avg_basket_size=total_items / sales_count if sales_count > 0 else 0.0,
        total_items=total_items,
        unique_products=int(items_df["item_number"].nunique()),
        savings_rate=total_savings / total_spent * 100 if total_spent != 0 else 0.0,
    )
