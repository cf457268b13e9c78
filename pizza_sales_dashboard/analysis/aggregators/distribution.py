"""
Count distributions by size and by category.
"""
from typing import List, Optional
import pandas as pd
from pizza_sales_dashboard.analysis.aggregators.base_aggregator import BaseAggregator
from pizza_sales_dashboard.config.app_config import CATEGORY_LABELS
from pizza_sales_dashboard.data.models.sales import ChartSeries


class SizeDistributionAggregator(BaseAggregator):
    """
    Order lines per pizza size. Any size label is accepted.
    """
    
    name = "size"
    
    def aggregate(self, sales_data: pd.DataFrame) -> ChartSeries:
        return self.count_by(sales_data, 'SIZE')


class CategoryDistributionAggregator(BaseAggregator):
    """
    Order lines per category, keyed by whatever categories are present.
    
    Use align_to_categories to map the result onto the fixed display axis.
    """
    
    name = "category"
    
    def aggregate(self, sales_data: pd.DataFrame) -> ChartSeries:
        return self.count_by(sales_data, 'CATEGORY')


def align_to_categories(series: ChartSeries, labels: Optional[List[str]] = None) -> ChartSeries:
    """
    Align category counts to a fixed label axis.
    
    Every fixed label appears in order, with 0 when absent from the series.
    Categories outside the fixed set are appended after them in their
    original order.
    
    Args:
        series (ChartSeries): Counts from CategoryDistributionAggregator
        labels (Optional[List[str]]): Fixed axis labels (default: CATEGORY_LABELS)
    
    Returns:
        ChartSeries: Counts aligned to the axis
    """
    labels = CATEGORY_LABELS if labels is None else labels
    counts = dict(series.points())
    
    aligned = ChartSeries(
        labels=list(labels),
        values=[counts.get(label, 0) for label in labels]
    )
    for label, value in series.points():
        if label not in labels:
            aligned.labels.append(label)
            aligned.values.append(value)
    return aligned
