"""Per-warehouse rollup of sales."""

from __future__ import annotations

import logging

import pandas as pd

from club_analytics.analytics.types import WarehouseMetrics
from club_analytics.data.preparation import sales_only

logger = logging.getLogger(__name__)


def compute_warehouse_metrics(transactions_df: pd.DataFrame) -> list[WarehouseMetrics]:
    """Visits and spend per warehouse name, sorted by spend descending.

    City and state come from the first sale seen at each warehouse name.

    Args:
        transactions_df: Transaction-grain frame.

    Returns:
        One WarehouseMetrics per warehouse with at least one sale.
    """
    sales = sales_only(transactions_df)
    if sales.empty:
        return []

    grouped = sales.groupby("warehouse_name", sort=False).agg(
        city=("warehouse_city", "first"),
        state=("warehouse_state", "first"),
        visits=("total", "size"),
        total_spent=("total", "sum"),
    )
    grouped = grouped.sort_values("total_spent", ascending=False, kind="stable")

    all_spend = float(grouped["total_spent"].sum())
    all_visits = int(grouped["visits"].sum())
    logger.debug("Rolled up %d sales into %d warehouses", all_visits, len(grouped))

    metrics = []
    for name, row in grouped.iterrows():
        visits = int(row["visits"])
        total_spent = float(row["total_spent"])
        metrics.append(
            WarehouseMetrics(
                name=str(name),
                city=str(row["city"]),
                state=str(row["state"]),
                visits=visits,
                total_spent=total_spent,
                avg_transaction=total_spent / visits,
                share_of_wallet=total_spent / all_spend * 100 if all_spend != 0 else 0.0,
                visit_share=visits / all_visits * 100,
            )
        )
    return metrics
