"""
HTTP connector implementation.
"""
from typing import Any, Optional
import requests
from pizza_sales_dashboard.data.connectors.base_connector import BaseConnector, DatasetLoadError
from pizza_sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class HttpJsonConnector(BaseConnector):
    """
    Connector for a dataset served as a JSON resource over HTTP.
    
    The document is fetched with a single GET; there is no retry.
    """
    
    def __init__(self, url: str, session: Optional[requests.Session] = None):
        """
        Initialize the HTTP connector.
        
        Args:
            url (str): URL of the JSON document
            session (Optional[requests.Session]): Session to reuse; one is created if None
        """
        self.url = url
        self.session = session
        self._owns_session = session is None
    
    def connect(self) -> requests.Session:
        """
        Open an HTTP session.
        
        Returns:
            requests.Session: The session used for the fetch
        """
        if self.session is None:
            self.session = requests.Session()
            self._owns_session = True
        return self.session
    
    def disconnect(self) -> None:
        if self.session is not None and self._owns_session:
            self.session.close()
            self.session = None
    
    def load(self) -> Any:
        """
        Fetch and parse the JSON document.
        
        Returns:
            Any: The parsed JSON document
        """
        session = self.connect()
        
        try:
            response = session.get(self.url)
            response.raise_for_status()
            document = response.json()
        except requests.RequestException as e:
            logger.error(f"Error fetching dataset from {self.url}: {str(e)}")
            raise DatasetLoadError(f"Failed to fetch dataset from {self.url}: {e}") from e
        except ValueError as e:
            logger.error(f"Dataset at {self.url} is not valid JSON: {str(e)}")
            raise DatasetLoadError(f"Dataset at {self.url} is not valid JSON: {e}") from e
        
        logger.info(f"Fetched dataset document from {self.url}")
        return document
