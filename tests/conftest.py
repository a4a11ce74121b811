"""
Shared fixtures for the sales analytics tests.
"""
import json

import pytest

from store_sales import settings
from store_sales.schemas import SaleRecord


def make_sale(sku, date, quantity, total_price, unit_price=None):
    """Builds a SaleRecord from storage-format values."""
    if unit_price is None:
        unit_price = total_price / quantity if quantity else total_price
    return SaleRecord.model_validate(
        {
            "sKU": sku,
            "date": date,
            "unitPrice": unit_price,
            "quantity": quantity,
            "totalPrice": total_price,
        }
    )


@pytest.fixture
def sample_records():
    """Three months of sales, deliberately not in chronological order."""
    return [
        make_sale("Trilogy", "2019-03-01", 3, 480),
        make_sale("Death by Chocolate", "2019-03-01", 3, 540),
        make_sale("Death by Chocolate", "2019-01-01", 5, 900),
        make_sale("Cake Fudge", "2019-01-01", 1, 150),
        make_sale("Pista Cone", "2019-01-02", 3, 360),
        make_sale("Death by Chocolate", "2019-01-02", 1, 180),
        make_sale("Pista Cone", "2019-02-01", 6, 720),
        make_sale("Almond Fudge", "2019-02-03", 1, 150),
        make_sale("Hot Chocolate Fudge", "2019-03-02", 8, 960),
    ]


@pytest.fixture
def sales_file(tmp_path, sample_records):
    """Writes sample_records to a JSON data file in the storage format."""
    path = tmp_path / "data.json"
    rows = [record.model_dump(mode="json", by_alias=True) for record in sample_records]
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keeps outputs and logs inside tmp_path and disables the webhook."""
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "output")
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
    monkeypatch.setattr(settings, "SAVE_CSV_OUTPUT", True)
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", True)
