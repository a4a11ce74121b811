"""
Monthly sales aggregations.

Every function takes the loaded list of SaleRecord objects and recomputes
from scratch; nothing is cached between calls. Monthly results come back in
chronological order, one row per (year, month) bucket.
"""

import logging
from typing import Iterable

import pandas as pd

from .schemas import (
    MonthKey,
    MonthlyOrderStats,
    MonthlyPopularItem,
    MonthlyRevenueItem,
    SaleRecord,
)

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["sku", "sale_date", "unit_price", "quantity", "total_price"]


def to_frame(records: Iterable[SaleRecord]) -> pd.DataFrame:
    """
    Builds a DataFrame from sale records, adding integer 'year' and 'month' columns.
    Row order (and the default RangeIndex) follows the source order of the records.
    """
    df = pd.DataFrame(
        [record.model_dump() for record in records], columns=FRAME_COLUMNS
    )
    dates = pd.to_datetime(df["sale_date"])
    df["year"] = dates.dt.year.astype(int)
    df["month"] = dates.dt.month.astype(int)
    return df


def total_sale(records: Iterable[SaleRecord]) -> float:
    """Sum of totalPrice over every record. An empty collection totals 0."""
    df = to_frame(records)
    return float(df["total_price"].sum())


def monthly_sale(records: Iterable[SaleRecord], year: int, month: int) -> float:
    """Sum of totalPrice over records dated in the given year and 1-based month."""
    df = to_frame(records)
    in_month = (df["year"] == year) & (df["month"] == month)
    return float(df.loc[in_month, "total_price"].sum())


def group_by_month(records: Iterable[SaleRecord]) -> dict[MonthKey, pd.DataFrame]:
    """
    Partitions records into (year, month) buckets.
    Buckets are ordered chronologically; rows inside a bucket keep source order.
    """
    df = to_frame(records)
    return {
        MonthKey(int(year), int(month)): bucket
        for (year, month), bucket in df.groupby(["year", "month"], sort=True)
    }


def popular_items(records: Iterable[SaleRecord]) -> list[MonthlyPopularItem]:
    """
    For each month, the sale with the largest quantity.
    Ties go to the earliest of the tied sales in source order (stable sort).
    """
    results = []
    for key, bucket in group_by_month(records).items():
        ranked = bucket.sort_values("quantity", ascending=False, kind="stable")
        top = ranked.iloc[0]
        results.append(
            MonthlyPopularItem(
                year=key.year,
                month=key.month,
                item=top["sku"],
                quantity_sold=int(top["quantity"]),
            )
        )
    return results


def revenue_items(records: Iterable[SaleRecord]) -> list[MonthlyRevenueItem]:
    """
    For each month, the SKU whose summed totalPrice is highest.

    Items are scanned in first-seen order against a running maximum that
    starts at 0, so an equal later revenue never replaces the current
    winner. Months where no item earns more than 0 produce no row.
    """
    results = []
    for key, bucket in group_by_month(records).items():
        revenue_by_item = bucket.groupby("sku", sort=False)["total_price"].sum()

        max_revenue = 0.0
        max_revenue_item = None
        for item, revenue in revenue_by_item.items():
            if revenue > max_revenue:
                max_revenue = float(revenue)
                max_revenue_item = item

        if max_revenue_item is None:
            logger.debug(f"No revenue item for {key.year}-{key.month:02d}, skipping.")
            continue

        results.append(
            MonthlyRevenueItem(
                year=key.year,
                month=key.month,
                item=max_revenue_item,
                revenue=max_revenue,
            )
        )
    return results


def order_stats(records: Iterable[SaleRecord], item: str) -> list[MonthlyOrderStats]:
    """
    For each month, min / max / average quantity per sale of `item` (exact SKU match).

    Every month present in the data gets a row. Months without a matching
    sale report 0 for min, max and average, with order_count 0.
    """
    results = []
    for key, bucket in group_by_month(records).items():
        quantities = bucket.loc[bucket["sku"] == item, "quantity"]

        if quantities.empty:
            stats = MonthlyOrderStats(year=key.year, month=key.month)
        else:
            stats = MonthlyOrderStats(
                year=key.year,
                month=key.month,
                min_orders=int(quantities.min()),
                max_orders=int(quantities.max()),
                avg_orders=float(quantities.sum()) / len(quantities),
                order_count=len(quantities),
            )
        results.append(stats)
    return results
