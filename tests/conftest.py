import json

import pytest

from pizza_sales_dashboard.data.repositories.sales_repository import decode_record, records_to_dataframe


def make_raw(date, pizza_type_id, name, size, category, quantity, price):
    return {
        "date": date,
        "pizza_type_id": pizza_type_id,
        "name": name,
        "size": size,
        "category": category,
        "quantity": quantity,
        "price": price,
    }


@pytest.fixture
def scenario_raw():
    """Three order lines over January and February."""
    return [
        make_raw("1/5/2023", "classic_small", "Classic", "S", "Classic", "2", "9.50"),
        make_raw("1/7/2023", "veggie_large", "Veggie Deluxe", "L", "Veggie", "1", "15.00"),
        make_raw("2/1/2023", "classic_small", "Classic", "S", "Classic", "3", "9.50"),
    ]


@pytest.fixture
def mixed_raw():
    """Months out of calendar order, every category, an unknown size."""
    return [
        make_raw("3/2/2015", "bbq_ckn_m", "The Barbecue Chicken Pizza", "M", "Chicken", 1, 16.75),
        make_raw("1/1/2015", "hawaiian_m", "The Hawaiian Pizza", "M", "Classic", 1, 13.25),
        make_raw("3/9/2015", "five_cheese_l", "The Five Cheese Pizza", "L", "Veggie", 2, 18.5),
        make_raw("1/4/2015", "ital_supr_l", "The Italian Supreme Pizza", "L", "Supreme", 1, 20.75),
        make_raw("2/14/2015", "bbq_ckn_m", "The Barbecue Chicken Pizza", "M", "Chicken", 3, 16.75),
        make_raw("2/20/2015", "the_greek_xxl", "The Greek Pizza", "XXL", "Classic", 1, 35.95),
        make_raw("1/30/2015", "hawaiian_m", "The Hawaiian Pizza", "M", "Classic", 2, 13.25),
        make_raw("3/31/2015", "bbq_ckn_s", "The Barbecue Chicken Pizza", "S", "Chicken", 1, 12.75),
    ]


@pytest.fixture
def scenario_data(scenario_raw):
    return records_to_dataframe([decode_record(raw) for raw in scenario_raw])


@pytest.fixture
def mixed_data(mixed_raw):
    return records_to_dataframe([decode_record(raw) for raw in mixed_raw])


@pytest.fixture
def write_dataset(tmp_path):
    """Write a JSON document to a temp file and return its path."""
    def _write(document, name="dataset.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)
    return _write
