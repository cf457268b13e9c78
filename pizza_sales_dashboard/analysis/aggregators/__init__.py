"""
Chart series aggregators.
"""
from pizza_sales_dashboard.analysis.aggregators.base_aggregator import BaseAggregator
from pizza_sales_dashboard.analysis.aggregators.monthly import (
    group_by_month,
    MonthlyRevenueAggregator,
    MonthlyOrderCountAggregator
)
from pizza_sales_dashboard.analysis.aggregators.distribution import (
    SizeDistributionAggregator,
    CategoryDistributionAggregator,
    align_to_categories
)
from pizza_sales_dashboard.analysis.aggregators.ranking import TopNameAggregator
