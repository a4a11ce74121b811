from datetime import date
from typing import NamedTuple, Optional

import pandas as pd
from pydantic import BaseModel, Field, field_validator


RELATIVE_DATE_WORDS = {"now", "today", "tomorrow", "yesterday"}


class MonthKey(NamedTuple):
    """Calendar bucket for monthly aggregation. `month` is 1-based (1 = January)."""

    year: int
    month: int


class SaleRecord(BaseModel):
    """
    Defines the data contract for a single sale as it is stored in the JSON data file.
    The aliases match the camel-cased headers produced by the text converter.
    """

    sku: str = Field(..., alias="sKU")
    sale_date: date = Field(..., alias="date")
    unit_price: float = Field(..., alias="unitPrice")
    quantity: int = Field(..., ge=0, alias="quantity")
    total_price: float = Field(..., alias="totalPrice")

    class Config:
        # Records are read-only once loaded, and can be built from either
        # the stored (aliased) keys or the Python field names.
        populate_by_name = True
        frozen = True

    @field_validator("sku", mode="before")
    @classmethod
    def _coerce_numeric_sku(cls, value):
        # The converter turns numeric-looking SKUs (e.g. "1001") into numbers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("sale_date", mode="before")
    @classmethod
    def _parse_date_string(cls, value):
        if isinstance(value, str):
            # pandas resolves these against the clock at parse time
            if value.strip().lower() in RELATIVE_DATE_WORDS:
                raise ValueError(f"'{value}' is not a calendar date")
            timestamp = pd.Timestamp(value.strip())
            if pd.isna(timestamp):
                raise ValueError(f"'{value}' is not a calendar date")
            return timestamp.date()
        return value


class MonthlyPopularItem(BaseModel):
    """The item with the largest single-sale quantity in a month."""

    year: int
    month: int = Field(..., ge=1, le=12)
    item: str
    quantity_sold: int = Field(..., alias="quantitySold")

    class Config:
        populate_by_name = True
        frozen = True


class MonthlyRevenueItem(BaseModel):
    """The item with the highest summed revenue in a month."""

    year: int
    month: int = Field(..., ge=1, le=12)
    item: str
    revenue: float

    class Config:
        populate_by_name = True
        frozen = True


class MonthlyOrderStats(BaseModel):
    """
    Min / max / average quantity per sale of one item in a month.
    Months where the item was not sold report zeros with order_count == 0.
    """

    year: int
    month: int = Field(..., ge=1, le=12)
    min_orders: int = Field(default=0, ge=0, alias="minOrders")
    max_orders: int = Field(default=0, ge=0, alias="maxOrders")
    avg_orders: float = Field(default=0.0, ge=0, alias="avgOrders")
    order_count: int = Field(default=0, ge=0, alias="orderCount")

    class Config:
        populate_by_name = True
        frozen = True


class SalesTotal(BaseModel):
    """Scalar sales total, optionally scoped to a single month."""

    total: float
    year: Optional[int] = None
    month: Optional[int] = Field(default=None, ge=1, le=12)

    class Config:
        populate_by_name = True
        frozen = True
