"""Console output formatting utilities."""

from __future__ import annotations

import math
import re

from club_analytics.analytics.types import AnalyticsReport


def sanitize_for_console(text: str) -> str:
    """Remove non-ASCII characters so the report prints on any console encoding."""
    return re.sub(r"[^\x00-\x7F]+", "", text)


def _money(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _pct(value: float) -> str:
    if not math.isfinite(value):
        return "n/a"
    return f"{value:.1f}%"


def _hour_label(hour: int) -> str:
    start = hour % 12 or 12
    end = (hour + 1) % 12 or 12
    suffix = "AM" if (hour + 1) % 24 < 12 else "PM"
    return f"{start}-{end} {suffix}"


def format_report_for_console(report: AnalyticsReport) -> str:
    """Build a human-readable text version of an analytics report.

    Args:
        report: AnalyticsReport from PurchaseAnalytics.build_report().

    Returns:
        Multi-line text for console output.
    """
    overview = report.overview
    if overview.total_transactions == 0:
        return "No transactions available."

    lines = []
    lines.append(f"Purchase History - {overview.total_transactions} transactions")
    lines.append("=" * 60)
    lines.append(f"Total spent:       {_money(overview.total_spent)}")
    lines.append(f"Total refunded:    {_money(overview.total_refunded)}")
    lines.append(f"Net spend:         {_money(overview.net_spend)}")
    lines.append(
        f"Instant savings:   {_money(overview.total_savings)}"
        f" ({_pct(overview.savings_rate)} savings rate)"
    )
    lines.append(f"Avg transaction:   {_money(overview.avg_transaction)}")
    lines.append(f"Avg basket size:   {overview.avg_basket_size:.1f} items per trip")
    lines.append(f"Unique products:   {overview.unique_products}")
    lines.append("")

    if report.time_series:
        lines.append("Monthly Spending:")
        lines.append("-" * 60)
        for point in report.time_series:
            lines.append(
                f"  {point.date}: {_money(point.amount)}"
                f" ({point.transaction_count} trips, {_money(point.savings)} saved)"
            )
        lines.append("")

    if report.categories:
        lines.append("Spending by Category:")
        lines.append("-" * 60)
        for cat in report.categories:
            lines.append(
                f"  {cat.category}: {_money(cat.amount)} ({_pct(cat.percentage)}, {cat.count} items)"
            )
        lines.append("")

    if report.top_products:
        lines.append("Top Products:")
        lines.append("-" * 60)
        for rank, product in enumerate(report.top_products, start=1):
            brand = " [KS]" if product.is_kirkland else ""
            lines.append(
                f"  {rank}. {product.description}{brand}: {_money(product.total_spent)}"
                f" ({product.purchase_count}x, avg {_money(product.avg_price)})"
            )
        lines.append("")

    split = report.kirkland_split
    lines.append(
        f"Kirkland Signature: {_money(split.kirkland)} ({_pct(split.kirkland_percentage)})"
        f" vs. other brands {_money(split.brand)}"
    )
    lines.append("")

    if report.warehouses:
        lines.append("Warehouses:")
        lines.append("-" * 60)
        for warehouse in report.warehouses:
            lines.append(
                f"  {warehouse.name} ({warehouse.city}, {warehouse.state}):"
                f" {warehouse.visits} visits, {_money(warehouse.total_spent)}"
                f" ({_pct(warehouse.share_of_wallet)} of spend)"
            )
        lines.append("")

    if report.shopping_patterns:
        lines.append("Shopping Hours:")
        lines.append("-" * 60)
        for pattern in report.shopping_patterns:
            lines.append(
                f"  {_hour_label(pattern.hour)}: {pattern.count} visits,"
                f" avg {_money(pattern.avg_spend)}"
            )
        insights = report.shopping_insights
        if insights.peak_hour is not None:
            lines.append(f"  Peak shopping hour:   {_hour_label(insights.peak_hour.hour)}")
        if insights.highest_spend_hour is not None:
            lines.append(
                f"  Highest spend period: {_hour_label(insights.highest_spend_hour.hour)}"
            )
        lines.append("")

    if report.payment_methods:
        lines.append("Payment Methods:")
        lines.append("-" * 60)
        for method in report.payment_methods:
            lines.append(
                f"  {method.method}: {_money(method.total_amount)}"
                f" ({_pct(method.percentage)}, {method.count} uses)"
            )
        lines.append("")

    refunds = report.refunds
    if refunds.total_refunds:
        lines.append(
            f"Refunds: {refunds.total_refunds} totaling {_money(refunds.total_refund_amount)}"
        )
        for product in refunds.refunded_products:
            lines.append(f"  {product.description}: {_money(product.amount)} ({product.count}x)")
        lines.append("")

    membership = report.membership
    lines.append("Executive Membership (estimate):")
    lines.append("-" * 60)
    lines.append(f"  Annualized spend:  {_money(membership.annualized_spend)}")
    lines.append(f"  Estimated rebate:  {_money(membership.estimated_rebate)}")
    lines.append(f"  Upgrade fee:       {_money(membership.annual_fee)}")
    lines.append(f"  Net benefit:       {_money(membership.net_benefit)}")
    lines.append(f"  Break-even spend:  {_money(membership.break_even_spend)}")
    verdict = "Upgrade recommended" if membership.recommend_upgrade else "Upgrade not recommended"
    lines.append(f"  {verdict}")

    card = report.card_rewards
    if card.method is not None:
        lines.append(f"  {card.method} rewards:  {_money(card.estimated_rewards)}")
        lines.append(f"  Total annual benefit: {_money(card.total_annual_benefit)}")

    return "\n".join(lines)
