"""
Summary metrics for the KPI row.
"""
from typing import Optional
import pandas as pd
from pizza_sales_dashboard.analysis.aggregators.monthly import MonthlyRevenueAggregator
from pizza_sales_dashboard.data.models.sales import ChartSeries, SummaryMetrics


def compute_summary_metrics(
    sales_data: pd.DataFrame,
    monthly_revenue: Optional[ChartSeries] = None
) -> SummaryMetrics:
    """
    Compute the scalar rollups of a filtered record set.
    
    Total revenue is the sum of the monthly revenue series and the average
    is taken per populated month bucket, not per calendar month.
    
    Args:
        sales_data (pd.DataFrame): The filtered sales data
        monthly_revenue (Optional[ChartSeries]): Precomputed monthly revenue for the same data
    
    Returns:
        SummaryMetrics: The five metrics; all zero for an empty set
    """
    if monthly_revenue is None:
        monthly_revenue = MonthlyRevenueAggregator().aggregate(sales_data)
    
    total_revenue = float(monthly_revenue.total())
    
    return SummaryMetrics(
        total_orders=len(sales_data),
        distinct_product_count=int(sales_data['PIZZA_TYPE_ID'].nunique()),
        total_revenue=total_revenue,
        average_revenue=total_revenue / max(1, len(monthly_revenue)),
        total_units_sold=int(sales_data['QUANTITY'].sum())
    )
