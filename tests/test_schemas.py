from datetime import date

import pytest
from pydantic import ValidationError

from store_sales.schemas import MonthlyOrderStats, SaleRecord


def test_sale_record_accepts_field_names_and_aliases():
    by_alias = SaleRecord.model_validate(
        {"sKU": "A", "date": "2019-04-02", "unitPrice": 2, "quantity": 3, "totalPrice": 6}
    )
    by_name = SaleRecord(
        sku="A", sale_date=date(2019, 4, 2), unit_price=2, quantity=3, total_price=6
    )
    assert by_alias == by_name


def test_sale_record_keeps_calendar_date_of_timestamp():
    record = SaleRecord.model_validate(
        {
            "sKU": "A",
            "date": "2019-04-30 23:45:00",
            "unitPrice": 1,
            "quantity": 1,
            "totalPrice": 1,
        }
    )
    assert record.sale_date == date(2019, 4, 30)


def test_sale_record_is_immutable():
    record = SaleRecord(
        sku="A", sale_date=date(2019, 4, 2), unit_price=2, quantity=3, total_price=6
    )
    with pytest.raises(ValidationError):
        record.quantity = 10


def test_sale_record_rejects_empty_date():
    with pytest.raises(ValidationError):
        SaleRecord.model_validate(
            {"sKU": "A", "date": "", "unitPrice": 1, "quantity": 1, "totalPrice": 1}
        )


def test_order_stats_dumps_camel_case():
    stats = MonthlyOrderStats(
        year=2019, month=2, min_orders=1, max_orders=4, avg_orders=2.5, order_count=2
    )
    assert stats.model_dump(by_alias=True) == {
        "year": 2019,
        "month": 2,
        "minOrders": 1,
        "maxOrders": 4,
        "avgOrders": 2.5,
        "orderCount": 2,
    }


def test_output_month_must_be_calendar_month():
    with pytest.raises(ValidationError):
        MonthlyOrderStats(year=2019, month=0)
