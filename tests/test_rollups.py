"""Tests for per-entity rollups: warehouses, products, payment methods, hours."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from club_analytics import PurchaseAnalytics
from club_analytics.analytics.patterns import find_highest_spend_hour, find_peak_hour
from club_analytics.analytics.types import ShoppingPattern
from conftest import make_transaction


class TestWarehouseRollup:
    """Sales grouped by warehouse name."""

    def test_groups_and_sorts_by_spend(self, mixed_history) -> None:
        warehouses = PurchaseAnalytics(mixed_history).get_warehouse_metrics()

        assert [w.name for w in warehouses] == ["ISSAQUAH", "SEATTLE"]
        issaquah = warehouses[0]
        assert issaquah.visits == 2
        assert issaquah.total_spent == pytest.approx(290.0)
        assert issaquah.avg_transaction == pytest.approx(145.0)
        assert issaquah.share_of_wallet == pytest.approx(290.0 / 350.0 * 100)
        assert issaquah.visit_share == pytest.approx(200.0 / 3)

    def test_keeps_first_seen_city(self, mixed_history) -> None:
        """A later sale with a different city does not update the stored city."""
        warehouses = PurchaseAnalytics(mixed_history).get_warehouse_metrics()

        assert warehouses[0].city == "ISSAQUAH"
        assert warehouses[0].state == "WA"

    def test_refunds_are_excluded(self, mixed_history) -> None:
        analytics = PurchaseAnalytics(mixed_history)
        warehouses = analytics.get_warehouse_metrics()
        overview = analytics.get_overview_metrics()

        assert sum(w.visits for w in warehouses) == overview.sales_count
        assert sum(w.total_spent for w in warehouses) == pytest.approx(overview.total_spent)

    def test_no_sales_gives_empty_list(self) -> None:
        refund = make_transaction("Refund", total=-5.0)
        assert PurchaseAnalytics([refund]).get_warehouse_metrics() == []


class TestProductRollup:
    """Line items grouped by item number."""

    def test_ranking_and_tie_order(self, mixed_history) -> None:
        products = PurchaseAnalytics(mixed_history).get_top_products()

        # 1001 and 1004 tie at 40; 1001 was seen first
        assert [p.item_number for p in products] == ["1002", "1001", "1004", "1005", "1003"]

    def test_refunds_subtract_but_still_count(self, mixed_history) -> None:
        products = {p.item_number: p for p in PurchaseAnalytics(mixed_history).get_top_products()}

        tv = products["1003"]
        assert tv.total_spent == 0.0
        assert tv.purchase_count == 2
        assert tv.avg_price == 0.0

    def test_first_seen_description_and_kirkland_flag(self, mixed_history) -> None:
        products = {p.item_number: p for p in PurchaseAnalytics(mixed_history).get_top_products()}

        oil = products["1001"]
        assert oil.description == "KIRKLAND SIGNATURE OLIVE OIL"
        assert oil.is_kirkland is True
        assert oil.purchase_count == 2
        assert oil.avg_price == pytest.approx(20.0)

        # First seen as "ORGANIC BANANAS", later as "BANANAS"
        assert products["1002"].description == "ORGANIC BANANAS"

    def test_kirkland_flag_not_reevaluated(self) -> None:
        transactions = [
            make_transaction(total=5.0, items=[("X", "ALMONDS", 5.0)]),
            make_transaction(total=5.0, items=[("X", "KS ALMONDS", 5.0)]),
        ]
        product = PurchaseAnalytics(transactions).get_top_products()[0]

        assert product.description == "ALMONDS"
        assert product.is_kirkland is False

    def test_limit(self, mixed_history) -> None:
        analytics = PurchaseAnalytics(mixed_history)

        assert len(analytics.get_top_products(2)) == 2
        assert analytics.get_top_products(0) == []
        with pytest.raises(ValueError, match="limit must not be negative"):
            analytics.get_top_products(-1)

    def test_default_limit_is_twenty(self) -> None:
        transactions = [
            make_transaction(total=float(i), items=[(f"I{i}", f"ITEM {i}", float(i))])
            for i in range(1, 26)
        ]
        products = PurchaseAnalytics(transactions).get_top_products()

        assert len(products) == 20
        assert products[0].item_number == "I25"


class TestPaymentMethodRollup:
    """Tender uses grouped by description."""

    def test_groups_verbatim_and_sorts(self, mixed_history) -> None:
        methods = PurchaseAnalytics(mixed_history).get_payment_method_metrics()

        # "VISA" and "Visa" are distinct methods
        assert [m.method for m in methods] == ["Visa", "COSTCO CASH CARD", "VISA"]
        visa = methods[2]
        assert visa.count == 3
        assert visa.total_amount == pytest.approx(32.0)

    def test_percentage_uses_all_tenders(self, mixed_history) -> None:
        methods = PurchaseAnalytics(mixed_history).get_payment_method_metrics()

        # Grand total is 172 (includes the negative refund tender)
        assert methods[0].percentage == pytest.approx(90.0 / 172.0 * 100)
        assert sum(m.percentage for m in methods) == pytest.approx(100.0)

    def test_split_tender_counts_each_entry(self) -> None:
        sale = make_transaction(
            total=100.0, tenders=[("VISA", 60.0), ("COSTCO CASH CARD", 40.0)]
        )
        methods = PurchaseAnalytics([sale]).get_payment_method_metrics()

        assert {m.method: m.count for m in methods} == {"VISA": 1, "COSTCO CASH CARD": 1}

    def test_zero_grand_total_does_not_raise(self) -> None:
        transactions = [
            make_transaction(total=10.0, tenders=[("VISA", 10.0)]),
            make_transaction("Refund", total=-10.0, tenders=[("VISA", -10.0)]),
        ]
        methods = PurchaseAnalytics(transactions).get_payment_method_metrics()

        assert len(methods) == 1
        assert methods[0].total_amount == 0.0
        assert not math.isfinite(methods[0].percentage)

    def test_no_tenders(self) -> None:
        assert PurchaseAnalytics([make_transaction(total=1.0)]).get_payment_method_metrics() == []


class TestShoppingPatterns:
    """Sales grouped by hour of day."""

    def test_hours_ascending_without_zero_fill(self, mixed_history) -> None:
        patterns = PurchaseAnalytics(mixed_history).get_shopping_patterns()

        # The refund at 12:00 is not a sale
        assert [p.hour for p in patterns] == [9, 17]
        assert patterns[0].count == 1
        assert patterns[0].avg_spend == pytest.approx(200.0)
        assert patterns[1].count == 2
        assert patterns[1].avg_spend == pytest.approx(75.0)

    def test_uses_local_hour(self) -> None:
        sale = make_transaction(total=10.0, when=datetime(2025, 6, 1, 23, 59))
        patterns = PurchaseAnalytics([sale]).get_shopping_patterns()

        assert patterns[0].hour == 23

    def test_offset_timestamps_use_local_hour(self) -> None:
        pacific = timezone(timedelta(hours=-8))
        transactions = [
            make_transaction(total=10.0, when=datetime(2025, 6, 1, 18, 0, tzinfo=pacific)),
            make_transaction(total=30.0, when=datetime(2025, 6, 2, 18, 30)),
        ]
        patterns = PurchaseAnalytics(transactions).get_shopping_patterns()

        assert [(p.hour, p.count) for p in patterns] == [(18, 2)]

    def test_no_sales(self) -> None:
        assert PurchaseAnalytics([]).get_shopping_patterns() == []


class TestShoppingInsights:
    """Busiest hour and largest-basket hour derived from the hour rollup."""

    def test_peak_and_highest_spend_hours(self, mixed_history) -> None:
        insights = PurchaseAnalytics(mixed_history).get_shopping_insights()

        assert insights.peak_hour.hour == 17
        assert insights.peak_hour.count == 2
        assert insights.highest_spend_hour.hour == 9
        assert insights.highest_spend_hour.avg_spend == pytest.approx(200.0)

    def test_ties_go_to_earliest_hour(self) -> None:
        patterns = [
            ShoppingPattern(hour=8, count=3, avg_spend=50.0),
            ShoppingPattern(hour=12, count=3, avg_spend=80.0),
            ShoppingPattern(hour=19, count=1, avg_spend=80.0),
        ]

        assert find_peak_hour(patterns).hour == 8
        assert find_highest_spend_hour(patterns).hour == 12

    def test_no_sales(self) -> None:
        insights = PurchaseAnalytics([make_transaction("Refund", total=-5.0)]).get_shopping_insights()

        assert insights.peak_hour is None
        assert insights.highest_spend_hour is None
        assert find_peak_hour([]) is None
        assert find_highest_spend_hour([]) is None
