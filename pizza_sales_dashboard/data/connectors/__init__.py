"""
Dataset connectors.
"""
from pizza_sales_dashboard.data.connectors.base_connector import BaseConnector, DatasetLoadError
from pizza_sales_dashboard.data.connectors.json_file_connector import JsonFileConnector
from pizza_sales_dashboard.data.connectors.http_connector import HttpJsonConnector
from pizza_sales_dashboard.config.dataset_config import HTTP_SCHEMES


def create_connector(source: str) -> BaseConnector:
    """
    Pick a connector for a dataset source.
    
    Args:
        source (str): Local file path or http(s) URL
    
    Returns:
        BaseConnector: HttpJsonConnector for URLs, JsonFileConnector otherwise
    """
    if source.lower().startswith(HTTP_SCHEMES):
        return HttpJsonConnector(source)
    return JsonFileConnector(source)
