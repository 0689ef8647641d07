"""Example: Purchase history overview and executive membership value

This example loads a receipt export and prints the headline metrics, the
monthly spending series and the executive membership break-even estimate.

Prerequisites:
- A receipt export JSON file (list of transactions with itemArray/tenderArray)
"""

from pathlib import Path

from club_analytics import PurchaseAnalytics

# Modify this path to point to your export
export_file = Path("data/costco-export.json")

print("=" * 80)
print("Purchase History Overview")
print("=" * 80)

if export_file.exists():
    analytics = PurchaseAnalytics.from_file(export_file)

    overview = analytics.get_overview_metrics()
    print(f"\nTransactions: {overview.total_transactions}")
    print(f"Total spent: ${overview.total_spent:,.2f}")
    print(f"Net spend: ${overview.net_spend:,.2f}")
    print(f"Average basket: {overview.avg_basket_size:.1f} items")

    print("\nMonthly spending:")
    for point in analytics.get_time_series_data():
        print(f"  {point.date}: ${point.amount:,.2f} ({point.transaction_count} trips)")

    print("\nTop 5 products:")
    for product in analytics.get_top_products(5):
        print(f"  {product.description}: ${product.total_spent:,.2f}")

    membership = analytics.get_executive_membership_analysis()
    print("\nExecutive membership (estimate):")
    print(f"  Annualized spend: ${membership.annualized_spend:,.2f}")
    print(f"  Estimated rebate: ${membership.estimated_rebate:,.2f}")
    print(f"  Break-even spend: ${membership.break_even_spend:,.2f}")
    print(f"  Recommend upgrade: {membership.recommend_upgrade}")
else:
    print(f"\nExport file not found: {export_file}")
    print("Download your receipts export and update export_file above.")
