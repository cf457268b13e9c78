"""
Pizza Sales Dashboard Package.

This package filters pizza sales records by month and product and derives
the chart series and summary metrics shown on the sales dashboard.
"""
from pizza_sales_dashboard.main import run_dashboard, build_snapshot, PizzaSalesDashboardApp

__version__ = "1.0.0"
