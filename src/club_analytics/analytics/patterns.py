"""Hour-of-day shopping pattern and the peak-hour insights derived from it."""

from __future__ import annotations

import pandas as pd

from club_analytics.analytics.types import ShoppingPattern
from club_analytics.data.preparation import sales_only


def compute_shopping_patterns(transactions_df: pd.DataFrame) -> list[ShoppingPattern]:
    """Visits and average spend per hour of day, ascending by hour.

    Hours are read from the local timestamps as stored. Only hours with at
    least one sale are returned.
    """
    sales = sales_only(transactions_df)
    if sales.empty:
        return []

    hour = sales["transaction_datetime"].dt.hour.rename("hour")
    hourly = sales.groupby(hour).agg(
        count=("total", "size"),
        total_spend=("total", "sum"),
    ).sort_index()

    return [
        ShoppingPattern(
            hour=int(h),
            count=int(row["count"]),
            avg_spend=float(row["total_spend"]) / int(row["count"]),
        )
        for h, row in hourly.iterrows()
    ]


def find_peak_hour(patterns: list[ShoppingPattern]) -> ShoppingPattern | None:
    """Hour with the most visits; the earliest hour wins ties.

    Args:
        patterns: Hour rollup from compute_shopping_patterns (ascending by hour).

    Returns:
        The busiest ShoppingPattern, or None when there are no sales.
    """
    peak = None
    for pattern in patterns:
        if peak is None or pattern.count > peak.count:
            peak = pattern
    return peak


def find_highest_spend_hour(patterns: list[ShoppingPattern]) -> ShoppingPattern | None:
    """Hour with the largest average basket; the earliest hour wins ties."""
    highest = None
    for pattern in patterns:
        if highest is None or pattern.avg_spend > highest.avg_spend:
            highest = pattern
    return highest
