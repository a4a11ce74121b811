import logging
from pathlib import Path
from typing import Any, Optional

from store_sales import analytics
from store_sales.pipeline import ReportPipeline
from store_sales.schemas import (
    MonthlyOrderStats,
    MonthlyPopularItem,
    MonthlyRevenueItem,
    SaleRecord,
    SalesTotal,
)

logger = logging.getLogger(__name__)


class TotalSaleReport(ReportPipeline):
    def __init__(self, source: Optional[Path] = None, test_mode: bool = False):
        super().__init__("total_sale", source=source, test_mode=test_mode)

    def transform(self, records: list[SaleRecord]) -> list[SalesTotal]:
        return [SalesTotal(total=analytics.total_sale(records))]


class MonthlySaleReport(ReportPipeline):
    def __init__(
        self,
        year: int,
        month: int,
        source: Optional[Path] = None,
        test_mode: bool = False,
    ):
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        super().__init__("monthly_sale", source=source, test_mode=test_mode)
        self.year = year
        self.month = month

    def transform(self, records: list[SaleRecord]) -> list[SalesTotal]:
        total = analytics.monthly_sale(records, self.year, self.month)
        return [SalesTotal(total=total, year=self.year, month=self.month)]

    def metadata(self) -> dict[str, Any]:
        return {**super().metadata(), "year": self.year, "month": self.month}


class PopularItemsReport(ReportPipeline):
    def __init__(self, source: Optional[Path] = None, test_mode: bool = False):
        super().__init__("popular_items", source=source, test_mode=test_mode)

    def transform(self, records: list[SaleRecord]) -> list[MonthlyPopularItem]:
        return analytics.popular_items(records)


class RevenueItemsReport(ReportPipeline):
    def __init__(self, source: Optional[Path] = None, test_mode: bool = False):
        super().__init__("revenue_items", source=source, test_mode=test_mode)

    def transform(self, records: list[SaleRecord]) -> list[MonthlyRevenueItem]:
        return analytics.revenue_items(records)


class OrderStatsReport(ReportPipeline):
    def __init__(
        self, item: str, source: Optional[Path] = None, test_mode: bool = False
    ):
        super().__init__("order_stats", source=source, test_mode=test_mode)
        self.item = item

    def transform(self, records: list[SaleRecord]) -> list[MonthlyOrderStats]:
        logger.info(f"Order statistics for item: {self.item}")
        return analytics.order_stats(records, self.item)

    def metadata(self) -> dict[str, Any]:
        return {**super().metadata(), "item": self.item}
