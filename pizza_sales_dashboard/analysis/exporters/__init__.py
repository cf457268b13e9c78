"""
Exporters for dashboard snapshots.
"""
from pizza_sales_dashboard.analysis.exporters.base_exporter import BaseExporter
from pizza_sales_dashboard.analysis.exporters.csv_exporter import CSVExporter
