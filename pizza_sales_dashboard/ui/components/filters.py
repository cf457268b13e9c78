"""
Filter components for Streamlit UI.
"""
from typing import Dict, List, Optional
import streamlit as st
from pizza_sales_dashboard.data.models.sales import FilterCriteria
from pizza_sales_dashboard.utils.date_helpers import month_label


def create_month_filter(months: List[int]) -> List[int]:
    """
    Create a month multi-select widget.
    
    Args:
        months (List[int]): Months present in the dataset
    
    Returns:
        List[int]: Selected months (empty means all months)
    """
    return st.sidebar.multiselect(
        "Months",
        options=months,
        format_func=month_label
    )


def create_pizza_filter(pizza_types: List[str], names: Optional[Dict[str, str]] = None) -> List[str]:
    """
    Create a pizza type multi-select widget.
    
    Args:
        pizza_types (List[str]): Pizza type ids present in the dataset
        names (Optional[Dict[str, str]]): Display names by pizza type id
    
    Returns:
        List[str]: Selected pizza type ids (empty means all pizzas)
    """
    names = names or {}
    return st.sidebar.multiselect(
        "Pizzas",
        options=pizza_types,
        format_func=lambda pizza_id: f"{names[pizza_id]} ({pizza_id})" if pizza_id in names else pizza_id
    )


def create_all_filters(
    months: List[int],
    pizza_types: List[str],
    names: Optional[Dict[str, str]] = None
) -> FilterCriteria:
    """
    Create all filter widgets and return filter criteria.
    
    Args:
        months (List[int]): Months present in the dataset
        pizza_types (List[str]): Pizza type ids present in the dataset
        names (Optional[Dict[str, str]]): Display names by pizza type id
    
    Returns:
        FilterCriteria: A fresh criteria value for this rerun
    """
    st.sidebar.header("Filters")
    
    selected_months = create_month_filter(months)
    selected_pizzas = create_pizza_filter(pizza_types, names)
    
    return FilterCriteria.from_selections(selected_months, selected_pizzas)
