from unittest import mock

import pytest

from pizza_sales_dashboard.config.dataset_config import SALES_COLUMNS
from pizza_sales_dashboard.data.connectors import DatasetLoadError, JsonFileConnector
from pizza_sales_dashboard.data.repositories.sales_repository import (
    SalesRepository,
    decode_record,
    records_to_dataframe,
)
from tests.conftest import make_raw


def test_decode_record_converts_string_numbers(scenario_raw):
    record = decode_record(scenario_raw[0])
    assert record.quantity == 2
    assert record.price == pytest.approx(9.5)
    assert record.month == 1
    assert record.pizza_type_id == "classic_small"


def test_decode_record_accepts_integral_float_quantity():
    record = decode_record(make_raw("1/1/2015", "a", "A", "S", "Classic", "2.0", 10))
    assert record.quantity == 2


@pytest.mark.parametrize("quantity, price", [
    ("two", "9.50"),
    ("1.5", "9.50"),
    ("-1", "9.50"),
    ("1", "abc"),
    ("1", "-2"),
    ("1", "nan"),
    (True, "9.50"),
])
def test_decode_record_rejects_bad_numbers(quantity, price):
    with pytest.raises(ValueError):
        decode_record(make_raw("1/1/2015", "a", "A", "S", "Classic", quantity, price))


def test_decode_record_rejects_missing_field():
    raw = make_raw("1/1/2015", "a", "A", "S", "Classic", 1, 1.0)
    del raw["size"]
    with pytest.raises(ValueError):
        decode_record(raw)


def test_decode_record_rejects_non_object():
    with pytest.raises(ValueError):
        decode_record(["1/1/2015", "a"])


def test_repository_builds_dataframe(write_dataset, scenario_raw):
    repository = SalesRepository(JsonFileConnector(write_dataset(scenario_raw)))
    df = repository.get_raw_data()

    assert df.columns.tolist() == SALES_COLUMNS
    assert df["MONTH"].tolist() == [1, 1, 2]
    assert df["REVENUE"].tolist() == pytest.approx([19.0, 15.0, 28.5])
    assert repository.rejected_count == 0


def test_repository_skips_invalid_and_keeps_malformed_dates(write_dataset, scenario_raw):
    document = scenario_raw + [
        make_raw("1/9/2023", "bad_qty", "Bad", "S", "Classic", "x", "9.50"),
        make_raw("garbage", "no_month", "No Month", "M", "Supreme", "1", "12.00"),
        "not an object",
    ]
    repository = SalesRepository(JsonFileConnector(write_dataset(document)))
    records = repository.get_all()

    assert [record.pizza_type_id for record in records] == [
        "classic_small", "veggie_large", "classic_small", "no_month"
    ]
    assert repository.rejected_count == 2
    df = repository.get_raw_data()
    assert df["MONTH"].isna().tolist() == [False, False, False, True]


def test_repository_rejects_non_array_document(write_dataset):
    repository = SalesRepository(JsonFileConnector(write_dataset({"records": []})))
    with pytest.raises(DatasetLoadError):
        repository.get_all()


def test_repository_loads_once(scenario_raw):
    connector = mock.MagicMock()
    connector.__enter__.return_value = connector
    connector.load.return_value = scenario_raw
    repository = SalesRepository(connector)

    repository.get_raw_data()
    repository.get_all()
    repository.get_unique_months()

    connector.load.assert_called_once()


def test_repository_filter_options(write_dataset, mixed_raw):
    repository = SalesRepository(JsonFileConnector(write_dataset(mixed_raw)))
    assert repository.get_unique_months() == [1, 2, 3]
    assert repository.get_unique_pizza_types() == [
        "bbq_ckn_m", "bbq_ckn_s", "five_cheese_l", "hawaiian_m", "ital_supr_l", "the_greek_xxl"
    ]
    names = repository.get_pizza_type_names()
    assert names["hawaiian_m"] == "The Hawaiian Pizza"


def test_empty_dataset(write_dataset):
    repository = SalesRepository(JsonFileConnector(write_dataset([])))
    df = repository.get_raw_data()
    assert df.empty
    assert df.columns.tolist() == SALES_COLUMNS
    assert repository.get_unique_months() == []


def test_records_to_dataframe_maps_fields_to_columns():
    record = decode_record(make_raw("3/14/2015", "hawaiian_m", "The Hawaiian Pizza", "M", "Classic", 2, 13.25))
    row = records_to_dataframe([record]).iloc[0]

    assert row["DATE"] == "3/14/2015"
    assert row["MONTH"] == 3
    assert row["PIZZA_TYPE_ID"] == "hawaiian_m"
    assert row["NAME"] == "The Hawaiian Pizza"
    assert row["SIZE"] == "M"
    assert row["CATEGORY"] == "Classic"
    assert row["QUANTITY"] == 2
    assert row["PRICE"] == pytest.approx(13.25)
    assert row["REVENUE"] == pytest.approx(26.5)
