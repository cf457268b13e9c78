"""
Streamlit web interface for the pizza sales dashboard.
"""
import streamlit as st
import logging
import sys
import os

# Add the parent directory to the path so we can import the package
# This is only needed when running the script directly
parent_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from pizza_sales_dashboard.main import PizzaSalesDashboardApp
from pizza_sales_dashboard.data.connectors.base_connector import DatasetLoadError
from pizza_sales_dashboard.config.app_config import DEFAULT_DATASET_SOURCE
from pizza_sales_dashboard.ui.components.filters import create_all_filters
from pizza_sales_dashboard.ui.components.visualizations import create_charts, create_metrics
from pizza_sales_dashboard.utils.logging_config import setup_logging


# Set page configuration
st.set_page_config(
    page_title="Pizza Sales Dashboard",
    page_icon="🍕",
    layout="wide"
)

st.title("Pizza Sales Dashboard")
st.markdown("Revenue, orders and product mix from pizza sales records. Leave a filter empty to include everything.")


@st.cache_resource
def load_app(source: str) -> PizzaSalesDashboardApp:
    """Load the dataset once per session."""
    setup_logging(log_level=logging.INFO)
    app = PizzaSalesDashboardApp()
    app.load_dataset(source)
    return app


try:
    app = load_app(DEFAULT_DATASET_SOURCE)
except DatasetLoadError as e:
    st.error(f"Failed to fetch dataset. Please try again later. ({str(e)})")
    st.stop()

# Every rerun builds fresh criteria and recomputes from the loaded data
criteria = create_all_filters(
    app.available_months(),
    app.available_pizza_types(),
    app.sales_repository.get_pizza_type_names()
)
snapshot = app.update(criteria)

create_metrics(snapshot.summary)

if snapshot.record_count == 0:
    st.info("No sales match the selected months and pizzas.")
else:
    create_charts(snapshot)

# Footer
st.markdown("---")
