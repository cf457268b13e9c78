"""
Validation utilities for dashboard inputs.
"""
from typing import Any, List, Optional
import pandas as pd

from pizza_sales_dashboard.config.app_config import DEFAULT_TOP_N


def validate_month(value: Any) -> Optional[int]:
    """
    Validate and convert a single month value.
    
    Args:
        value (Any): Month value, e.g. 3 or "3"
    
    Returns:
        Optional[int]: Month in 1..12, or None if the value is invalid
    """
    if isinstance(value, bool):
        return None
    try:
        month = int(str(value).strip())
    except (ValueError, TypeError):
        return None
    return month if 1 <= month <= 12 else None


def validate_top_n(top_n: Any) -> int:
    """
    Validate and convert the ranking size.
    
    Args:
        top_n (Any): The top-N value to validate
    
    Returns:
        int: A positive ranking size, DEFAULT_TOP_N if conversion fails
    """
    try:
        return max(1, int(top_n))
    except (ValueError, TypeError):
        return DEFAULT_TOP_N


def validate_dataframe(df: pd.DataFrame, required_columns: List[str]) -> bool:
    """
    Validate that a DataFrame contains the required columns.
    
    Args:
        df (pd.DataFrame): The DataFrame to validate
        required_columns (List[str]): List of required column names
        
    Returns:
        bool: True if all required columns exist, False otherwise
    """
    if df is None:
        return False
    
    missing_columns = [col for col in required_columns if col not in df.columns]
    return len(missing_columns) == 0
