"""Loading the receipt export from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from club_analytics.exceptions import DataQualityError
from club_analytics.types import Transaction

logger = logging.getLogger(__name__)


def parse_transactions(payload: Any) -> list[Transaction]:
    """Convert a decoded export document into Transaction records.

    Args:
        payload: Either a list of transaction objects or an object with a
            "transactions" list.

    Returns:
        List of Transaction, in document order.

    Raises:
        DataQualityError: If the document shape is unexpected or a record
            cannot be parsed.
    """
    if isinstance(payload, dict) and "transactions" in payload:
        payload = payload["transactions"]

    if not isinstance(payload, list):
        raise DataQualityError(
            f"Expected a list of transactions, got {type(payload).__name__}"
        )

    transactions = []
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            raise DataQualityError(
                f"Transaction #{index} is not an object: {type(record).__name__}"
            )
        try:
            transactions.append(Transaction.from_dict(record))
        except DataQualityError as e:
            raise DataQualityError(f"Transaction #{index}: {e}") from e

    return transactions


def load_transactions(json_path: str | Path) -> list[Transaction]:
    """Load transactions from a receipt export JSON file.

    Args:
        json_path: Path to the export file.

    Returns:
        List of Transaction, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        DataQualityError: If the file is not valid JSON or has an unexpected shape.
    """
    json_path = Path(json_path)

    if not json_path.exists():
        raise FileNotFoundError(f"Transaction export not found at {json_path}")

    try:
        with json_path.open(encoding="utf-8-sig") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", json_path, e)
        raise DataQualityError(f"Invalid JSON in {json_path}: {e}") from e

    transactions = parse_transactions(payload)
    logger.info("Loaded %d transactions from %s", len(transactions), json_path)
    return transactions
