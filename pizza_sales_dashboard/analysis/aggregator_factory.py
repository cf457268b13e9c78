"""
Factory for creating aggregators.
"""
from typing import Dict, Type, Optional
from pizza_sales_dashboard.analysis.aggregators import (
    BaseAggregator,
    MonthlyRevenueAggregator,
    MonthlyOrderCountAggregator,
    SizeDistributionAggregator,
    CategoryDistributionAggregator,
    TopNameAggregator
)
from pizza_sales_dashboard.config.app_config import AGGREGATOR_NAMES, DEFAULT_TOP_N
from pizza_sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class AggregatorFactory:
    """
    Factory for creating the dashboard's aggregators.
    """
    
    def __init__(self, top_n: int = DEFAULT_TOP_N):
        """
        Initialize the aggregator factory.
        
        Args:
            top_n (int): Ranking size for the by-name aggregator
        """
        self.top_n = top_n
        
        # Register aggregators
        self._aggregators: Dict[str, Type[BaseAggregator]] = {
            'monthly_revenue': MonthlyRevenueAggregator,
            'monthly_orders': MonthlyOrderCountAggregator,
            'top_names': TopNameAggregator,
            'size': SizeDistributionAggregator,
            'category': CategoryDistributionAggregator
        }
    
    def get_aggregator(self, name: str) -> Optional[BaseAggregator]:
        """
        Get an aggregator by name.
        
        Args:
            name (str): One of AGGREGATOR_NAMES
        
        Returns:
            Optional[BaseAggregator]: An aggregator instance, or None if the name is unknown
        """
        if name not in self._aggregators:
            logger.warning(f"Unknown aggregator: {name}")
            return None
        
        aggregator_class = self._aggregators[name]
        if aggregator_class is TopNameAggregator:
            return aggregator_class(top_n=self.top_n)
        return aggregator_class()
    
    def get_all_aggregators(self) -> Dict[str, BaseAggregator]:
        """
        Get the aggregators run on every filter change.
        
        Returns:
            Dict[str, BaseAggregator]: Names to aggregator instances, in AGGREGATOR_NAMES order
        """
        return {name: self.get_aggregator(name) for name in AGGREGATOR_NAMES}
