"""
Base aggregator for chart series.
"""
from abc import ABC, abstractmethod
from typing import List
import pandas as pd
from pizza_sales_dashboard.data.models.sales import ChartSeries


class BaseAggregator(ABC):
    """
    Base class for aggregators that reduce filtered sales data to one chart series.
    """
    
    name: str = ""
    
    @abstractmethod
    def aggregate(self, sales_data: pd.DataFrame) -> ChartSeries:
        """
        Reduce the filtered sales data to a chart series.
        
        Args:
            sales_data (pd.DataFrame): The filtered sales data
        
        Returns:
            ChartSeries: Labels and values for one chart
        """
        pass
    
    def count_by(self, sales_data: pd.DataFrame, column: str) -> ChartSeries:
        """
        Count rows per distinct value of a column, in first-encountered order.
        
        Args:
            sales_data (pd.DataFrame): The filtered sales data
            column (str): The grouping column
        
        Returns:
            ChartSeries: One (value, count) pair per distinct value
        """
        if sales_data.empty:
            return ChartSeries()
        
        counts = sales_data.groupby(column, sort=False).size()
        labels: List[str] = [str(label) for label in counts.index]
        return ChartSeries(labels=labels, values=[int(count) for count in counts])
