"""Shared fixtures: small in-memory purchase histories."""

from datetime import datetime

import pytest

from club_analytics.types import LineItem, TenderUse, Transaction


def make_transaction(
    transaction_type: str = "Sales",
    when: datetime = datetime(2025, 1, 15, 10, 30),
    total: float = 0.0,
    instant_savings: float = 0.0,
    warehouse: tuple[str, str, str] = ("SEATTLE", "SEATTLE", "WA"),
    items: list[tuple[str, str, float]] | None = None,
    tenders: list[tuple[str, float]] | None = None,
) -> Transaction:
    """Build a Transaction from compact tuples: items as (number, description, amount)."""
    name, city, state = warehouse
    return Transaction(
        transaction_type=transaction_type,
        transaction_datetime=when,
        total=total,
        instant_savings=instant_savings,
        warehouse_name=name,
        warehouse_city=city,
        warehouse_state=state,
        items=tuple(LineItem(n, d, a) for n, d, a in (items or [])),
        tenders=tuple(TenderUse(d, a) for d, a in (tenders or [])),
        membership_number="111222333",
    )


@pytest.fixture
def two_sales() -> list[Transaction]:
    """Two same-day sales: a Kirkland item and a brand item."""
    day1 = datetime(2025, 1, 15, 10, 30)
    return [
        make_transaction(
            total=100.0,
            instant_savings=5.0,
            when=day1,
            items=[("A", "KS ALMONDS", 100.0)],
            tenders=[("VISA", 100.0)],
        ),
        make_transaction(
            total=50.0,
            when=day1,
            items=[("B", "COCA COLA", 50.0)],
            tenders=[("VISA", 50.0)],
        ),
    ]


@pytest.fixture
def mixed_history() -> list[Transaction]:
    """Sales at two warehouses across three months plus one refund.

    No sales in February 2025.
    """
    return [
        make_transaction(
            when=datetime(2025, 1, 5, 9, 15),
            total=200.0,
            instant_savings=10.0,
            warehouse=("ISSAQUAH", "ISSAQUAH", "WA"),
            items=[
                ("1001", "KIRKLAND SIGNATURE OLIVE OIL", 20.0),
                ("1002", "ORGANIC BANANAS", 2.0),
                ("1003", "SAMSUNG 65 TV", 178.0),
            ],
            tenders=[("VISA", 150.0), ("COSTCO CASH CARD", 50.0)],
        ),
        make_transaction(
            when=datetime(2025, 1, 20, 17, 45),
            total=60.0,
            warehouse=("SEATTLE", "SEATTLE", "WA"),
            items=[
                ("1001", "KS OLIVE OIL 2L", 20.0),
                ("1004", "CHICKEN THIGHS", 40.0),
            ],
            tenders=[("VISA", 60.0)],
        ),
        make_transaction(
            "Refund",
            when=datetime(2025, 2, 2, 12, 0),
            total=-178.0,
            warehouse=("ISSAQUAH", "ISSAQUAH", "WA"),
            items=[("1003", "SAMSUNG 65 TV", -178.0)],
            tenders=[("VISA", -178.0)],
        ),
        make_transaction(
            when=datetime(2025, 3, 10, 17, 5),
            total=90.0,
            instant_savings=4.0,
            warehouse=("ISSAQUAH", "KIRKLAND", "WA"),
            items=[
                ("1005", "POPPI SODA 12PK", 30.0),
                ("1002", "BANANAS", 60.0),
            ],
            tenders=[("Visa", 90.0)],
        ),
    ]
