"""Product classification: category buckets and Kirkland Signature detection.

Category bucketing
------------------
Descriptions are upper-cased and checked against an ordered rule table.
The first category with a keyword contained in the description wins, so a
description matching several rules gets the earliest one:

- "SONY BATH TOWEL"     -> Electronics (SONY before BATH)
- "ORGANIC MILK"        -> Produce (ORGANIC before MILK)
- "ICE CREAM BARS"      -> Dairy & Eggs (CREAM before ICE CREAM)
- anything unmatched    -> Other

Keywords are plain substring matches: "TV" also matches inside longer words.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from club_analytics.analytics.types import CategorySpend, KirklandSplit

logger = logging.getLogger(__name__)

OTHER_CATEGORY = "Other"

# (category, keywords) in match order
CATEGORY_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Electronics",
        ("TV", "SONY", "LG", "SAMSUNG", "PS5", "XBOX", "LAPTOP", "IPAD", "MACBOOK"),
    ),
    ("Appliances", ("MWO", "MICROWAVE", "DISHWASHER", "WASHER", "DRYER", "FRIDGE")),
    (
        "Fresh Meat & Seafood",
        ("CHICKEN", "BEEF", "PORK", "SALMON", "STEAK", "GRND", "THIGHS", "BREAST"),
    ),
    ("Produce", ("ORGANIC", "BANANA", "APPLE", "BERRY", "SALAD", "LETTUCE")),
    ("Bakery", ("BREAD", "BAGEL", "MUFFIN", "CAKE", "PIE", "CROISSANT")),
    ("Dairy & Eggs", ("MILK", "CHEESE", "YOGURT", "BUTTER", "CREAM", "ROMANO")),
    ("Beverages", ("WATER", "JUICE", "SODA", "COFFEE", "TEA", "POPPI", "SPARKLING")),
    ("Snacks", ("CHIPS", "COOKIE", "CRACKER", "NUTS", "CANDY", "POPCORN", "THAT'S IT")),
    ("Health & Supplements", ("VITAMIN", "PROTEIN", "SUPPLEMENT", "VITAL")),
    ("Household Essentials", ("BATH", "TOWEL", "TISSUE", "PAPER", "DETERGENT", "CLEAN")),
    ("Frozen Foods", ("FROZEN", "ICE CREAM", "PIZZA")),
    ("Pantry & Dry Goods", ("RICE", "PASTA", "SAUCE", "OIL", "FLOUR", "BRKFST")),
)

CATEGORY_ORDER = [category for category, _ in CATEGORY_RULES] + [OTHER_CATEGORY]

KIRKLAND_MARKERS = ("KS ", "KIRKLAND")


def categorize_product(description: str, item_number: str | None = None) -> str:
    """Map a line-item description to one category label.

    Args:
        description: Receipt description of the item.
        item_number: Accepted for item-number based rules; no current rule uses it.

    Returns:
        Category label from CATEGORY_ORDER.
    """
    desc = description.upper()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in desc for keyword in keywords):
            return category
    return OTHER_CATEGORY


def is_kirkland_signature(description: str) -> bool:
    """True if the description marks a Kirkland Signature (store brand) item.

    Examples:
        >>> is_kirkland_signature("KS ALMONDS")
        True
        >>> is_kirkland_signature("COCA COLA")
        False
    """
    desc = description.upper()
    return any(marker in desc for marker in KIRKLAND_MARKERS)


def compute_category_spend(items_df: pd.DataFrame) -> list[CategorySpend]:
    """Spend per category over all line items, sorted by amount descending.

    Args:
        items_df: Line-item frame (all transactions).

    Returns:
        One CategorySpend per category seen. Percentages are relative to the
        sum of all line amounts and are not finite when that sum is zero.
    """
    if items_df.empty:
        return []

    categories = [
        categorize_product(desc, item_number)
        for desc, item_number in zip(items_df["description"], items_df["item_number"])
    ]
    categorized = items_df.assign(category=categories)
    total_spend = categorized["amount"].sum()

    grouped = categorized.groupby("category", sort=False).agg(
        amount=("amount", "sum"),
        count=("amount", "size"),
    )
    with np.errstate(divide="ignore", invalid="ignore"):
        grouped["percentage"] = grouped["amount"] / total_spend * 100

    if total_spend == 0:
        logger.debug("Line amounts sum to zero; category percentages are not finite")

    grouped = grouped.sort_values("amount", ascending=False, kind="stable")

    return [
        CategorySpend(
            category=str(category),
            amount=float(row["amount"]),
            count=int(row["count"]),
            percentage=float(row["percentage"]),
        )
        for category, row in grouped.iterrows()
    ]


def compute_kirkland_split(items_df: pd.DataFrame) -> KirklandSplit:
    """Store-brand vs. other-brand spend over all line items."""
    mask = items_df["description"].map(is_kirkland_signature).astype(bool)
    kirkland = float(items_df.loc[mask, "amount"].sum())
    brand = float(items_df.loc[~mask, "amount"].sum())

    total = kirkland + brand
    return KirklandSplit(
        kirkland=kirkland,
        brand=brand,
        kirkland_percentage=kirkland / total * 100 if total > 0 else 0.0,
    )
