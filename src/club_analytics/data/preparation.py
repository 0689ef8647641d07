"""Flattening transaction records into frames for aggregation.

Three frames are built from the same records:

- **transactions**: one row per transaction (the sales/refund grain)
- **items**: one row per line item, tagged with its parent transaction type
- **tenders**: one row per tender use, tagged with its parent transaction type

The frames are built once and only read afterwards; every query derives new
objects from them.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

import pandas as pd

from club_analytics.types import REFUND, SALES, Transaction

logger = logging.getLogger(__name__)

TRANSACTION_DTYPES = {
    "txn_index": "int64",
    "transaction_type": "object",
    "transaction_datetime": "datetime64[ns]",
    "total": "float64",
    "instant_savings": "float64",
    "warehouse_name": "object",
    "warehouse_city": "object",
    "warehouse_state": "object",
}

ITEM_DTYPES = {
    "txn_index": "int64",
    "transaction_type": "object",
    "item_number": "object",
    "description": "object",
    "amount": "float64",
}

TENDER_DTYPES = {
    "txn_index": "int64",
    "transaction_type": "object",
    "tender_description": "object",
    "amount": "float64",
}


def _frame(rows: list[dict], dtypes: dict[str, str]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=list(dtypes)).astype(dtypes)


def _wall_clock(value: datetime) -> datetime:
    """Drop any UTC offset without converting, keeping the local hour."""
    if value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


def build_transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build the transaction-grain frame.

    Args:
        transactions: Transaction records.

    Returns:
        DataFrame with one row per transaction, in input order.
    """
    rows = [
        {
            "txn_index": index,
            "transaction_type": t.transaction_type,
            "transaction_datetime": _wall_clock(t.transaction_datetime),
            "total": t.total,
            "instant_savings": t.instant_savings,
            "warehouse_name": t.warehouse_name,
            "warehouse_city": t.warehouse_city,
            "warehouse_state": t.warehouse_state,
        }
        for index, t in enumerate(transactions)
    ]
    df = _frame(rows, TRANSACTION_DTYPES)

    unknown = df.loc[~df["transaction_type"].isin([SALES, REFUND]), "transaction_type"]
    if not unknown.empty:
        logger.warning(
            "%d transaction(s) with unrecognized type %s are left out of sales and refunds",
            len(unknown),
            sorted(unknown.unique()),
        )

    return df


def build_items_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build the line-item frame (all transactions, sales and refunds)."""
    rows = [
        {
            "txn_index": index,
            "transaction_type": t.transaction_type,
            "item_number": item.item_number,
            "description": item.description,
            "amount": item.amount,
        }
        for index, t in enumerate(transactions)
        for item in t.items
    ]
    return _frame(rows, ITEM_DTYPES)


def build_tenders_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build the tender-use frame (all transactions, sales and refunds)."""
    rows = [
        {
            "txn_index": index,
            "transaction_type": t.transaction_type,
            "tender_description": tender.description,
            "amount": tender.amount,
        }
        for index, t in enumerate(transactions)
        for tender in t.tenders
    ]
    return _frame(rows, TENDER_DTYPES)


def sales_only(df: pd.DataFrame) -> pd.DataFrame:
    """Rows whose transaction type is exactly "Sales"."""
    return df[df["transaction_type"] == SALES]


def refunds_only(df: pd.DataFrame) -> pd.DataFrame:
    """Rows whose transaction type is exactly "Refund"."""
    return df[df["transaction_type"] == REFUND]
