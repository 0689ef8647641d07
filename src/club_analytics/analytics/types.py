"""Result types returned by the analytics queries.

Every query builds these fresh from the source frames; none of them is
cached or shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OverviewMetrics:
    """Headline totals over the whole purchase history.

    Attributes:
        total_transactions: All transactions, whatever their type.
        sales_count: Transactions of type "Sales".
        refund_count: Transactions of type "Refund".
        total_spent: Sum of sale totals.
        total_refunded: Absolute value of the sum of refund totals.
        net_spend: total_spent - total_refunded.
        total_savings: Instant savings over all transactions.
        avg_transaction: total_spent / sales_count, 0 without sales.
        avg_basket_size: total_items / sales_count, 0 without sales. The item
            count includes refund line items while the divisor counts sales only.
        total_items: Line items over all transactions.
        unique_products: Distinct item numbers over all line items.
        savings_rate: total_savings as a percentage of total_spent, 0 without spend.
    """

    total_transactions: int
    sales_count: int
    refund_count: int
    total_spent: float
    total_refunded: float
    net_spend: float
    total_savings: float
    avg_transaction: float
    avg_basket_size: float
    total_items: int
    unique_products: int
    savings_rate: float


@dataclass(frozen=True)
class WarehouseMetrics:
    name: str
    city: str
    state: str
    visits: int
    total_spent: float
    avg_transaction: float
    share_of_wallet: float
    visit_share: float


@dataclass(frozen=True)
class ProductMetrics:
    item_number: str
    description: str
    total_spent: float
    purchase_count: int
    avg_price: float
    is_kirkland: bool


@dataclass(frozen=True)
class CategorySpend:
    """Spend for one category label.

    ``percentage`` is not finite when all line amounts sum to zero.
    """

    category: str
    amount: float
    count: int
    percentage: float


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Sales of one calendar month; ``date`` is the "YYYY-MM" key."""

    date: str
    amount: float
    transaction_count: int
    savings: float


@dataclass(frozen=True)
class ShoppingPattern:
    hour: int
    count: int
    avg_spend: float


@dataclass(frozen=True)
class ShoppingInsights:
    """Busiest hour and largest-basket hour; both None without sales."""

    peak_hour: ShoppingPattern | None
    highest_spend_hour: ShoppingPattern | None


@dataclass(frozen=True)
class PaymentMethodMetrics:
    method: str
    count: int
    total_amount: float
    percentage: float


@dataclass(frozen=True)
class KirklandSplit:
    kirkland: float
    brand: float
    kirkland_percentage: float


@dataclass(frozen=True)
class RefundedProduct:
    item_number: str
    description: str
    count: int
    amount: float


@dataclass(frozen=True)
class RefundAnalysis:
    """Refund totals plus the per-product breakdown.

    ``total_refund_amount`` comes from refund transaction totals and
    ``refunded_products`` from refund line items; the two are not reconciled.
    """

    total_refunds: int
    total_refund_amount: float
    refunded_products: list[RefundedProduct] = field(default_factory=list)


@dataclass(frozen=True)
class ExecutiveMembershipAnalysis:
    """Projected value of upgrading to the executive membership.

    All amounts are annualized estimates extrapolated from the observed date
    range, not a forecast.
    """

    day_span: int
    annualization_factor: float
    annualized_spend: float
    estimated_rebate: float
    annual_fee: float
    net_benefit: float
    break_even_spend: float
    recommend_upgrade: bool
    is_estimate: bool = True


@dataclass(frozen=True)
class CardRewardsEstimate:
    method: str | None
    card_spend: float
    estimated_rewards: float
    total_annual_benefit: float


@dataclass(frozen=True)
class AnalyticsReport:
    """All query results for one purchase history."""

    overview: OverviewMetrics
    warehouses: list[WarehouseMetrics]
    top_products: list[ProductMetrics]
    categories: list[CategorySpend]
    time_series: list[TimeSeriesPoint]
    shopping_patterns: list[ShoppingPattern]
    shopping_insights: ShoppingInsights
    payment_methods: list[PaymentMethodMetrics]
    kirkland_split: KirklandSplit
    refunds: RefundAnalysis
    membership: ExecutiveMembershipAnalysis
    card_rewards: CardRewardsEstimate
