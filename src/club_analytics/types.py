"""Input record types for purchase-history analytics.

Records mirror one transaction of the warehouse club receipt export:
a checkout event with its line items and the tenders used to pay for it.
Only the fields the analytics read are kept; ``from_dict`` accepts the
export's camelCase JSON objects and ignores everything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

import pandas as pd

from club_analytics.exceptions import DataQualityError

SALES = "Sales"
REFUND = "Refund"


def _to_float(value: Any, field_name: str) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise DataQualityError(f"Field '{field_name}' is not numeric: {value!r}") from e


def _to_str(value: Any) -> str:
    return "" if value is None else str(value)


def parse_timestamp(value: Any) -> datetime:
    """Parse an export timestamp, keeping its wall-clock value.

    Any UTC offset is dropped without converting, so the hour of day is the
    one printed on the receipt.

    Args:
        value: ISO-8601 string or datetime.

    Returns:
        Naive datetime.

    Raises:
        DataQualityError: If the value is missing or cannot be parsed.

    Examples:
        >>> parse_timestamp("2025-03-01T17:45:00-08:00")
        datetime.datetime(2025, 3, 1, 17, 45)
    """
    if value is None or value == "":
        raise DataQualityError("Transaction has no transactionDateTime")
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        raise DataQualityError(f"Unparseable transactionDateTime: {value!r}") from e
    if pd.isna(ts):
        raise DataQualityError(f"Unparseable transactionDateTime: {value!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.to_pydatetime()


@dataclass(frozen=True)
class LineItem:
    """One product entry within a transaction.

    Attributes:
        item_number: Opaque product identifier, stable across transactions.
            Always stored as text, so a numeric 123 and the string "123" in
            the export name the same product.
        description: Receipt description, also used for classification.
        amount: Signed line amount (negative on refunds).
    """

    item_number: str
    description: str
    amount: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LineItem:
        return cls(
            item_number=_to_str(data.get("itemNumber")),
            description=_to_str(data.get("itemDescription01")),
            amount=_to_float(data.get("amount"), "amount"),
        )


@dataclass(frozen=True)
class TenderUse:
    """One payment-instrument charge within a transaction."""

    description: str
    amount: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TenderUse:
        return cls(
            description=_to_str(data.get("tenderDescription")),
            amount=_to_float(data.get("amountTender"), "amountTender"),
        )


@dataclass(frozen=True)
class Transaction:
    """One checkout event, either a sale or a refund.

    Attributes:
        transaction_type: "Sales" or "Refund". Other values are kept as-is and
            are left out of the sales and refund subsets.
        transaction_datetime: Local (naive) timestamp of the checkout.
        total: Transaction total, negative for refunds.
        instant_savings: Instant savings applied at the register.
        warehouse_name: Warehouse name, the warehouse grouping key.
        warehouse_city: Warehouse city (display only).
        warehouse_state: Warehouse state (display only).
        items: Line items; may be empty.
        tenders: Payment tenders; may be empty.
        membership_number: Member number printed on the receipt.
    """

    transaction_type: str
    transaction_datetime: datetime
    total: float
    instant_savings: float = 0.0
    warehouse_name: str = ""
    warehouse_city: str = ""
    warehouse_state: str = ""
    items: tuple[LineItem, ...] = ()
    tenders: tuple[TenderUse, ...] = ()
    membership_number: str = ""

    @property
    def is_sale(self) -> bool:
        return self.transaction_type == SALES

    @property
    def is_refund(self) -> bool:
        return self.transaction_type == REFUND

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Transaction:
        """Build a Transaction from one object of the receipt export.

        Missing or null item and tender arrays become empty tuples.

        Raises:
            DataQualityError: If the timestamp or a numeric field is invalid.
        """
        items = data.get("itemArray") or []
        tenders = data.get("tenderArray") or []
        return cls(
            transaction_type=_to_str(data.get("transactionType")),
            transaction_datetime=parse_timestamp(data.get("transactionDateTime")),
            total=_to_float(data.get("total"), "total"),
            instant_savings=_to_float(data.get("instantSavings"), "instantSavings"),
            warehouse_name=_to_str(data.get("warehouseName")),
            warehouse_city=_to_str(data.get("warehouseCity")),
            warehouse_state=_to_str(data.get("warehouseState")),
            items=tuple(LineItem.from_dict(item) for item in items),
            tenders=tuple(TenderUse.from_dict(tender) for tender in tenders),
            membership_number=_to_str(data.get("membershipNumber")),
        )
