"""
Top-N ranking of pizzas by name.
"""
import pandas as pd
from pizza_sales_dashboard.analysis.aggregators.base_aggregator import BaseAggregator
from pizza_sales_dashboard.config.app_config import DEFAULT_TOP_N
from pizza_sales_dashboard.data.models.sales import ChartSeries
from pizza_sales_dashboard.utils.validation import validate_top_n


class TopNameAggregator(BaseAggregator):
    """
    The most frequently ordered pizza names.
    """
    
    name = "top_names"
    
    def __init__(self, top_n: int = DEFAULT_TOP_N):
        """
        Initialize the ranking aggregator.
        
        Args:
            top_n (int): Maximum number of names to keep
        """
        self.top_n = validate_top_n(top_n)
    
    def aggregate(self, sales_data: pd.DataFrame) -> ChartSeries:
        """
        Rank names by order-line count, descending.
        
        Ties keep the order in which the names were first encountered.
        
        Args:
            sales_data (pd.DataFrame): The filtered sales data
        
        Returns:
            ChartSeries: At most top_n (name, count) pairs
        """
        counts = self.count_by(sales_data, 'NAME')
        if not len(counts):
            return counts
        
        ranked = counts.to_dataframe().sort_values('value', ascending=False, kind='stable')
        ranked = ranked.head(self.top_n)
        return ChartSeries(
            labels=ranked['label'].tolist(),
            values=[int(value) for value in ranked['value']]
        )
