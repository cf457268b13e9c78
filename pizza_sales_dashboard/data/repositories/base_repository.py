"""
Base repository interface for data access.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Generic, TypeVar
import pandas as pd
from pizza_sales_dashboard.data.connectors.base_connector import BaseConnector
from pizza_sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Generic type for repository entities
T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for repositories that provide data access.
    """
    
    def __init__(self, connector: BaseConnector):
        """
        Initialize the repository with a dataset connector.
        
        Args:
            connector (BaseConnector): The dataset connector to use
        """
        self.connector = connector
    
    @abstractmethod
    def get_all(self, *args, **kwargs) -> List[T]:
        """
        Get all entities from the source.
        
        Returns:
            List[T]: A list of entity objects
        """
        pass
    
    @abstractmethod
    def get_raw_data(self, *args, **kwargs) -> pd.DataFrame:
        """
        Get raw data as a pandas DataFrame.
        
        Returns:
            pd.DataFrame: The raw data as a pandas DataFrame
        """
        pass
    
    def _load_document(self) -> Any:
        """
        Load the source document within the connector's context.
        
        Returns:
            Any: The parsed document
        """
        with self.connector as connector:
            return connector.load()
