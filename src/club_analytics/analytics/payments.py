"""Payment-method rollup over tender uses."""

from __future__ import annotations

import numpy as np
import pandas as pd

from club_analytics.analytics.types import PaymentMethodMetrics


def compute_payment_methods(tenders_df: pd.DataFrame) -> list[PaymentMethodMetrics]:
    """Count and amount per tender description, sorted by amount descending.

    Descriptions are grouped verbatim ("VISA" and "Visa" are different
    methods). Percentages are relative to the sum of every tender across all
    transactions, which can differ from the sales total when a checkout is
    split over several tenders or includes refunds.

    Args:
        tenders_df: Tender-use frame (all transactions).

    Returns:
        One PaymentMethodMetrics per description.
    """
    if tenders_df.empty:
        return []

    grand_total = tenders_df["amount"].sum()
    grouped = tenders_df.groupby("tender_description", sort=False).agg(
        count=("amount", "size"),
        total_amount=("amount", "sum"),
    )
    with np.errstate(divide="ignore", invalid="ignore"):
        grouped["percentage"] = grouped["total_amount"] / grand_total * 100

    grouped = grouped.sort_values("total_amount", ascending=False, kind="stable")

    return [
        PaymentMethodMetrics(
            method=str(method),
            count=int(row["count"]),
            total_amount=float(row["total_amount"]),
            percentage=float(row["percentage"]),
        )
        for method, row in grouped.iterrows()
    ]
