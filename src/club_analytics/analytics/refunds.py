"""Refund analysis."""

from __future__ import annotations

import pandas as pd

from club_analytics.analytics.types import RefundAnalysis, RefundedProduct
from club_analytics.data.preparation import refunds_only


def compute_refund_analysis(
    transactions_df: pd.DataFrame,
    items_df: pd.DataFrame,
) -> RefundAnalysis:
    """Summarize refunds and the products refunded.

    ``total_refund_amount`` is the absolute value of the summed refund
    transaction totals. Per-product amounts are sums of absolute line
    amounts, so the two can disagree when a refund's total and its lines
    carry different signs.

    Args:
        transactions_df: Transaction-grain frame.
        items_df: Line-item frame.

    Returns:
        RefundAnalysis with products sorted by refunded amount descending.
    """
    refunds = refunds_only(transactions_df)
    refund_items = refunds_only(items_df)

    products: list[RefundedProduct] = []
    if not refund_items.empty:
        grouped = (
            refund_items.assign(abs_amount=refund_items["amount"].abs())
            .groupby("item_number", sort=False)
            .agg(
                description=("description", "first"),
                count=("abs_amount", "size"),
                amount=("abs_amount", "sum"),
            )
            .sort_values("amount", ascending=False, kind="stable")
        )
        products = [
            RefundedProduct(
                item_number=str(item_number),
                description=str(row["description"]),
                count=int(row["count"]),
                amount=float(row["amount"]),
            )
            for item_number, row in grouped.iterrows()
        ]

    return RefundAnalysis(
        total_refunds=len(refunds),
        total_refund_amount=abs(float(refunds["total"].sum())),
        refunded_products=products,
    )
