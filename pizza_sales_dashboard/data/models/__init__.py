"""
Data models for the pizza sales dashboard.
"""
from pizza_sales_dashboard.data.models.sales import (
    SalesRecord,
    FilterCriteria,
    ChartSeries,
    SummaryMetrics,
    DashboardSnapshot
)
