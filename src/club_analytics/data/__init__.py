"""Data loading and preparation for the analytics engine."""

from club_analytics.data.loaders import load_transactions, parse_transactions
from club_analytics.data.preparation import (
    build_items_frame,
    build_tenders_frame,
    build_transactions_frame,
)

__all__ = [
    "build_items_frame",
    "build_tenders_frame",
    "build_transactions_frame",
    "load_transactions",
    "parse_transactions",
]
