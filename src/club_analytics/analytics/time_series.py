"""Monthly time series of sales."""

from __future__ import annotations

import pandas as pd

from club_analytics.analytics.types import TimeSeriesPoint
from club_analytics.data.preparation import sales_only


def build_monthly_series(transactions_df: pd.DataFrame) -> pd.DataFrame:
    """Aggregate sales by calendar month, filling empty months with zeros.

    The range runs from the month of the earliest sale through the month of
    the latest one, so a month without purchases appears as a zero row
    instead of being missing.

    Args:
        transactions_df: Transaction-grain frame.

    Returns:
        DataFrame indexed by monthly Period with columns amount,
        transaction_count, savings. Empty when there are no sales.
    """
    sales = sales_only(transactions_df)
    if sales.empty:
        return pd.DataFrame(columns=["amount", "transaction_count", "savings"])

    timestamps = sales["transaction_datetime"]
    months = pd.period_range(start=timestamps.min(), end=timestamps.max(), freq="M")

    month_key = timestamps.dt.to_period("M").rename("month")
    monthly = sales.groupby(month_key).agg(
        amount=("total", "sum"),
        transaction_count=("total", "size"),
        savings=("instant_savings", "sum"),
    )
    return monthly.reindex(months, fill_value=0).sort_index()


def compute_time_series(transactions_df: pd.DataFrame) -> list[TimeSeriesPoint]:
    """Monthly sales points ordered by "YYYY-MM" ascending."""
    monthly = build_monthly_series(transactions_df)
    return [
        TimeSeriesPoint(
            date=str(month),
            amount=float(row["amount"]),
            transaction_count=int(row["transaction_count"]),
            savings=float(row["savings"]),
        )
        for month, row in monthly.iterrows()
    ]
