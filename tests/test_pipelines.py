from unittest.mock import patch

import pytest

from store_sales import settings
from store_sales.exceptions import LoadError, ParseError
from store_sales.pipelines.reports import (
    MonthlySaleReport,
    OrderStatsReport,
    PopularItemsReport,
    RevenueItemsReport,
    TotalSaleReport,
)
from store_sales.schemas import SalesTotal


def test_total_sale_report(sales_file):
    results = TotalSaleReport(source=sales_file, test_mode=True).run()
    assert results == [SalesTotal(total=4440)]


def test_monthly_sale_report(sales_file):
    results = MonthlySaleReport(2019, 3, source=sales_file, test_mode=True).run()
    assert results == [SalesTotal(total=1980, year=2019, month=3)]


def test_monthly_sale_report_rejects_invalid_month(sales_file):
    with pytest.raises(ValueError):
        MonthlySaleReport(2019, 13, source=sales_file)


def test_popular_and_revenue_reports(sales_file):
    popular = PopularItemsReport(source=sales_file, test_mode=True).run()
    revenue = RevenueItemsReport(source=sales_file, test_mode=True).run()
    assert [row.item for row in popular] == [
        "Death by Chocolate",
        "Pista Cone",
        "Hot Chocolate Fudge",
    ]
    assert [row.revenue for row in revenue] == [1080, 720, 960]


def test_order_stats_report_saves_outputs(sales_file):
    results = OrderStatsReport("Pista Cone", source=sales_file, test_mode=True).run()

    assert [row.order_count for row in results] == [1, 1, 0]
    saved = sorted(p.name for p in settings.OUTPUT_DIR.iterdir())
    assert len(saved) == 2
    assert all(name.startswith(f"{settings.REPORT_FILENAME_BASE}_order_stats_") for name in saved)


def test_report_defaults_to_configured_source(sales_file, monkeypatch):
    monkeypatch.setattr(settings, "SALES_DATA_FILE", sales_file)
    assert TotalSaleReport().source == sales_file


def test_missing_source_aborts_report(tmp_path):
    report = TotalSaleReport(source=tmp_path / "missing.json", test_mode=True)
    with pytest.raises(LoadError):
        report.run()
    assert not settings.OUTPUT_DIR.exists()


def test_malformed_source_aborts_report(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(ParseError):
        PopularItemsReport(source=path, test_mode=True).run()


def test_webhook_receives_report_metadata(sales_file, monkeypatch):
    monkeypatch.setattr(settings, "WEBHOOK_URL", "https://example.test/hook")
    with patch("store_sales.data_handler.requests.post") as post:
        OrderStatsReport("Trilogy", source=sales_file).run()

    payload = post.call_args.kwargs["json"]
    assert payload["reportType"] == "order_stats"
    assert payload["metadata"] == {"source": "data.json", "item": "Trilogy"}
    assert len(payload["reportData"]) == 3


def test_test_mode_skips_webhook(sales_file, monkeypatch):
    monkeypatch.setattr(settings, "WEBHOOK_URL", "https://example.test/hook")
    with patch("store_sales.data_handler.requests.post") as post:
        TotalSaleReport(source=sales_file, test_mode=True).run()
    post.assert_not_called()
