"""
Base dataset connector interface.
"""
from abc import ABC, abstractmethod
from typing import Any


class DatasetLoadError(Exception):
    """
    Raised when the dataset cannot be fetched or parsed.
    """


class BaseConnector(ABC):
    """
    Abstract base class for dataset sources.
    """
    
    @abstractmethod
    def connect(self) -> Any:
        """
        Open the dataset source.
        
        Returns:
            Any: The underlying handle (file path, HTTP session)
        """
        pass
    
    @abstractmethod
    def disconnect(self) -> None:
        """
        Release the dataset source.
        """
        pass
    
    @abstractmethod
    def load(self) -> Any:
        """
        Load and parse the JSON document.
        
        Returns:
            Any: The parsed JSON document
        
        Raises:
            DatasetLoadError: If the source cannot be read or parsed
        """
        pass
    
    def __enter__(self):
        """
        Context manager entry point.
        
        Returns:
            BaseConnector: The connector instance
        """
        self.connect()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Context manager exit point.
        
        Args:
            exc_type: Exception type if an exception was raised in the context
            exc_val: Exception value if an exception was raised
            exc_tb: Exception traceback if an exception was raised
        """
        self.disconnect()
