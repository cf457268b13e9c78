"""
Dataset configuration: the JSON record shape and its column mapping.
"""
from typing import Dict, List

# JSON key -> DataFrame column
FIELD_COLUMN_MAP: Dict[str, str] = {
    "date": "DATE",
    "pizza_type_id": "PIZZA_TYPE_ID",
    "name": "NAME",
    "size": "SIZE",
    "category": "CATEGORY",
    "quantity": "QUANTITY",
    "price": "PRICE",
}

REQUIRED_FIELDS: List[str] = list(FIELD_COLUMN_MAP.keys())

# Columns of the decoded sales DataFrame, in order
SALES_COLUMNS: List[str] = [
    "DATE",
    "MONTH",
    "PIZZA_TYPE_ID",
    "NAME",
    "SIZE",
    "CATEGORY",
    "QUANTITY",
    "PRICE",
    "REVENUE",
]

HTTP_SCHEMES = ("http://", "https://")
