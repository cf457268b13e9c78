"""
Filter engine: selects the records matching a month and product selection.
"""
from typing import Iterable, List
import pandas as pd
from pizza_sales_dashboard.data.models.sales import FilterCriteria, SalesRecord


def filter_sales_data(sales_data: pd.DataFrame, criteria: FilterCriteria) -> pd.DataFrame:
    """
    Apply the filter criteria to the sales data.
    
    A row is kept when its month is selected (or no month is selected) and
    its pizza type id is selected (or no product is selected). Rows keep
    their original relative order. Rows with a malformed date have no month
    and never match, whatever the month selection.
    
    Args:
        sales_data (pd.DataFrame): The full sales data
        criteria (FilterCriteria): The filter criteria to apply
    
    Returns:
        pd.DataFrame: A filtered copy of the sales data
    """
    mask = sales_data['MONTH'].notna().astype(bool)
    
    if criteria.selected_months:
        month_mask = sales_data['MONTH'].isin(sorted(criteria.selected_months))
        mask &= month_mask.fillna(False).astype(bool)
    
    if criteria.selected_pizza_type_ids:
        mask &= sales_data['PIZZA_TYPE_ID'].isin(sorted(criteria.selected_pizza_type_ids))
    
    return sales_data[mask].copy()


def filter_records(records: Iterable[SalesRecord], criteria: FilterCriteria) -> List[SalesRecord]:
    """
    Apply the filter criteria to a sequence of SalesRecord objects.
    
    Args:
        records (Iterable[SalesRecord]): The records to filter
        criteria (FilterCriteria): The filter criteria to apply
    
    Returns:
        List[SalesRecord]: Matching records in input order
    """
    return [
        record for record in records
        if record.month is not None
        and (not criteria.selected_months or record.month in criteria.selected_months)
        and (not criteria.selected_pizza_type_ids or record.pizza_type_id in criteria.selected_pizza_type_ids)
    ]
