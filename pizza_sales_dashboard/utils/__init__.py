"""
Utility package for the pizza sales dashboard.
"""
from pizza_sales_dashboard.utils.validation import (
    validate_month,
    validate_top_n,
    validate_dataframe
)
from pizza_sales_dashboard.utils.date_helpers import (
    extract_month,
    month_label,
    get_timestamp_str
)
from pizza_sales_dashboard.utils.formatting import format_count, format_currency
from pizza_sales_dashboard.utils.logging_config import setup_logging, get_logger
