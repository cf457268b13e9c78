"""
Month-bucketed aggregators.
"""
from typing import Iterator, Tuple
import pandas as pd
from pizza_sales_dashboard.analysis.aggregators.base_aggregator import BaseAggregator
from pizza_sales_dashboard.data.models.sales import ChartSeries
from pizza_sales_dashboard.utils.date_helpers import month_label


def group_by_month(sales_data: pd.DataFrame) -> Iterator[Tuple[int, pd.DataFrame]]:
    """
    Group sales rows by calendar month.
    
    Months are yielded in the order they are first encountered in the data,
    not in calendar order. Rows without a parsable month are skipped.
    
    Args:
        sales_data (pd.DataFrame): The filtered sales data
    
    Yields:
        Tuple[int, pd.DataFrame]: Month number and its rows in input order
    """
    dated = sales_data[sales_data['MONTH'].notna()]
    for month, month_group in dated.groupby('MONTH', sort=False):
        yield int(month), month_group


class MonthlyRevenueAggregator(BaseAggregator):
    """
    Total revenue (quantity x price) per month.
    """
    
    name = "monthly_revenue"
    
    def aggregate(self, sales_data: pd.DataFrame) -> ChartSeries:
        series = ChartSeries()
        for month, month_group in group_by_month(sales_data):
            revenue = (month_group['QUANTITY'] * month_group['PRICE']).sum()
            series.labels.append(month_label(month))
            series.values.append(float(revenue))
        return series


class MonthlyOrderCountAggregator(BaseAggregator):
    """
    Number of order lines per month.
    """
    
    name = "monthly_orders"
    
    def aggregate(self, sales_data: pd.DataFrame) -> ChartSeries:
        series = ChartSeries()
        for month, month_group in group_by_month(sales_data):
            series.labels.append(month_label(month))
            series.values.append(len(month_group))
        return series
