"""Per-product rollup and ranking."""

from __future__ import annotations

import pandas as pd

from club_analytics.analytics.categories import is_kirkland_signature
from club_analytics.analytics.types import ProductMetrics


def compute_top_products(items_df: pd.DataFrame, limit: int = 20) -> list[ProductMetrics]:
    """Rank products by total spend over all line items.

    Refund lines subtract from ``total_spent`` but still count as a purchase.
    The description, and the Kirkland flag derived from it, are taken from the
    first line seen for each item number.

    Args:
        items_df: Line-item frame (all transactions).
        limit: Maximum number of products returned.

    Returns:
        Up to ``limit`` ProductMetrics sorted by total_spent descending.

    Raises:
        ValueError: If limit is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    if items_df.empty:
        return []

    grouped = items_df.groupby("item_number", sort=False).agg(
        description=("description", "first"),
        total_spent=("amount", "sum"),
        purchase_count=("amount", "size"),
    )
    grouped["is_kirkland"] = grouped["description"].map(is_kirkland_signature)
    grouped["avg_price"] = grouped["total_spent"] / grouped["purchase_count"]

    top = grouped.sort_values("total_spent", ascending=False, kind="stable").head(limit)

    return [
        ProductMetrics(
            item_number=str(item_number),
            description=str(row["description"]),
            total_spent=float(row["total_spent"]),
            purchase_count=int(row["purchase_count"]),
            avg_price=float(row["avg_price"]),
            is_kirkland=bool(row["is_kirkland"]),
        )
        for item_number, row in top.iterrows()
    ]
