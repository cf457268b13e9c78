import pandas as pd
import pytest

from pizza_sales_dashboard.analysis.filter_engine import filter_records, filter_sales_data
from pizza_sales_dashboard.data.models.sales import FilterCriteria
from pizza_sales_dashboard.data.repositories.sales_repository import decode_record, records_to_dataframe
from tests.conftest import make_raw

CRITERIA = [
    FilterCriteria(),
    FilterCriteria.from_selections([1], []),
    FilterCriteria.from_selections([3, 1], []),
    FilterCriteria.from_selections([], ["bbq_ckn_m"]),
    FilterCriteria.from_selections([2], ["bbq_ckn_m", "hawaiian_m"]),
    FilterCriteria.from_selections([12], []),
]


def test_empty_criteria_is_identity(mixed_data):
    result = filter_sales_data(mixed_data, FilterCriteria())
    pd.testing.assert_frame_equal(result, mixed_data)


@pytest.mark.parametrize("criteria", CRITERIA)
def test_filter_is_idempotent(mixed_data, criteria):
    once = filter_sales_data(mixed_data, criteria)
    twice = filter_sales_data(once, criteria)
    pd.testing.assert_frame_equal(once, twice)


@pytest.mark.parametrize("criteria", CRITERIA)
def test_filter_partitions_dataset(mixed_data, criteria):
    result = filter_sales_data(mixed_data, criteria)

    def matches(row):
        month_ok = not criteria.selected_months or row["MONTH"] in criteria.selected_months
        pizza_ok = not criteria.selected_pizza_type_ids or row["PIZZA_TYPE_ID"] in criteria.selected_pizza_type_ids
        return month_ok and pizza_ok

    for index, row in mixed_data.iterrows():
        assert matches(row) == (index in result.index)


def test_filter_preserves_order(mixed_data):
    result = filter_sales_data(mixed_data, FilterCriteria.from_selections([3, 1], []))
    assert result.index.tolist() == [0, 1, 2, 3, 6, 7]
    assert result["MONTH"].tolist() == [3, 1, 3, 1, 1, 3]


def test_month_and_product_combine_with_and(mixed_data):
    result = filter_sales_data(mixed_data, FilterCriteria.from_selections([2], ["bbq_ckn_m"]))
    assert result["DATE"].tolist() == ["2/14/2015"]


def test_no_match_returns_empty_frame(mixed_data):
    result = filter_sales_data(mixed_data, FilterCriteria.from_selections([12], []))
    assert result.empty
    assert result.columns.tolist() == mixed_data.columns.tolist()


def test_filter_does_not_modify_input(mixed_data):
    before = mixed_data.copy()
    result = filter_sales_data(mixed_data, FilterCriteria.from_selections([1], []))
    result["QUANTITY"] = 0
    pd.testing.assert_frame_equal(mixed_data, before)


def test_malformed_date_never_matches():
    records = [
        decode_record(make_raw("1/1/2015", "a", "A", "S", "Classic", 1, 1.0)),
        decode_record(make_raw("bad", "a", "A", "S", "Classic", 1, 1.0)),
    ]
    data = records_to_dataframe(records)

    assert filter_sales_data(data, FilterCriteria()).index.tolist() == [0]
    assert filter_sales_data(data, FilterCriteria.from_selections([], ["a"])).index.tolist() == [0]
    assert filter_sales_data(data, FilterCriteria.from_selections([1], [])).index.tolist() == [0]
    assert [record.date for record in filter_records(records, FilterCriteria())] == ["1/1/2015"]


def test_filter_records_matches_dataframe_filter(mixed_raw, mixed_data):
    records = [decode_record(raw) for raw in mixed_raw]
    for criteria in CRITERIA:
        kept = filter_records(records, criteria)
        expected = filter_sales_data(mixed_data, criteria)
        assert [record.date for record in kept] == expected["DATE"].tolist()
