"""
Local JSON file connector implementation.
"""
import json
import os
from typing import Any, Optional
from pizza_sales_dashboard.data.connectors.base_connector import BaseConnector, DatasetLoadError
from pizza_sales_dashboard.config.app_config import DEFAULT_DATASET_SOURCE
from pizza_sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class JsonFileConnector(BaseConnector):
    """
    Connector for a dataset stored as a JSON file on disk.
    """
    
    def __init__(self, path: Optional[str] = None):
        """
        Initialize the file connector.
        
        Args:
            path (Optional[str]): Path to the JSON file.
                                  If None, uses the default from app_config.py
        """
        self.path = path if path is not None else DEFAULT_DATASET_SOURCE
        self.connected = False
    
    def connect(self) -> str:
        if not os.path.isfile(self.path):
            logger.error(f"Dataset file not found: {self.path}")
            raise DatasetLoadError(f"Dataset file not found: {self.path}")
        self.connected = True
        return self.path
    
    def disconnect(self) -> None:
        self.connected = False
    
    def load(self) -> Any:
        """
        Read and parse the JSON file.
        
        Returns:
            Any: The parsed JSON document
        """
        if not self.connected:
            self.connect()
        
        try:
            with open(self.path, 'r', encoding='utf-8') as fh:
                document = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading dataset from {self.path}: {str(e)}")
            raise DatasetLoadError(f"Failed to read dataset from {self.path}: {e}") from e
        
        logger.info(f"Loaded dataset document from {self.path}")
        return document
