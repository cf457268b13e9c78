"""
Repositories for the pizza sales dataset.
"""
from pizza_sales_dashboard.data.repositories.sales_repository import (
    SalesRepository,
    decode_record,
    records_to_dataframe
)
