"""
Filtering and aggregation pipeline.
"""
from pizza_sales_dashboard.analysis.filter_engine import filter_sales_data, filter_records
from pizza_sales_dashboard.analysis.aggregator_factory import AggregatorFactory
from pizza_sales_dashboard.analysis.summary_metrics import compute_summary_metrics
