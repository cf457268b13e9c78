"""
Date helper utilities for the pizza sales dataset.
"""
from datetime import datetime
from typing import Optional

from pizza_sales_dashboard.config.app_config import MONTH_LABELS


def extract_month(date_str: object) -> Optional[int]:
    """
    Extract the month from a ``month/day/year`` date string.
    
    Only the leading month component is inspected; the day and year are
    not validated.
    
    Args:
        date_str (object): Raw date value from the dataset
    
    Returns:
        Optional[int]: Month in 1..12, or None if it cannot be parsed
    """
    if not isinstance(date_str, str):
        return None
    
    head = date_str.strip().split('/')[0].strip()
    if not head.isdigit():
        return None
    
    month = int(head)
    if 1 <= month <= 12:
        return month
    return None


def month_label(month: int) -> str:
    """
    Get the short display label for a month number.
    
    Args:
        month (int): Month in 1..12
    
    Returns:
        str: Three-letter month label (e.g. "Jan")
    """
    return MONTH_LABELS[month - 1]


def get_timestamp_str() -> str:
    """
    Get a timestamp string for export directory and log file names.
    
    Returns:
        str: Timestamp string (YYYYMMDD_HHMMSS)
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
