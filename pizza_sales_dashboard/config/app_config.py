"""
Application-wide configuration settings for the pizza sales dashboard.
"""
import os
from typing import Dict, List

# Dataset location: a local JSON file path or an http(s) URL
DEFAULT_DATASET_SOURCE = os.environ.get("PIZZA_DASHBOARD_DATASET", "dataset_23.json")

# Number of entries kept by the by-name ranking
DEFAULT_TOP_N = int(os.environ.get("PIZZA_DASHBOARD_TOP_N", "10"))

# Export directory; a timestamped directory is generated when unset
DEFAULT_OUTPUT_DIR = os.environ.get("PIZZA_DASHBOARD_OUTPUT_DIR") or None

MONTH_LABELS: List[str] = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
]

# Fixed display order of the category axis
CATEGORY_LABELS: List[str] = ["Classic", "Supreme", "Veggie", "Chicken"]

# Display titles of the summary metrics, keyed as in SummaryMetrics.to_display()
METRIC_TITLES: Dict[str, str] = {
    "total_orders": "Total Orders",
    "distinct_product_count": "Pizza Types",
    "total_revenue": "Total Revenue",
    "average_revenue": "Average Revenue",
    "total_units_sold": "Pizzas Sold",
}

# Aggregators run on every filter change, in display order
AGGREGATOR_NAMES = ["monthly_revenue", "monthly_orders", "top_names", "size", "category"]

# Visualization settings
DEFAULT_CHART_HEIGHT = 400
SIZE_PIE_COLORS = ['#7FCFFF', '#6AC0FF', '#5AA5E6', '#57A6E6', '#4D93CC']
BAR_COLOR = '#5AA5E6'
