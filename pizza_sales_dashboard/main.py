"""
Main entry point for the pizza sales dashboard pipeline.
"""
import logging
from typing import Iterable, List, Optional
import pandas as pd

from pizza_sales_dashboard.config.app_config import DEFAULT_DATASET_SOURCE, DEFAULT_OUTPUT_DIR, DEFAULT_TOP_N
from pizza_sales_dashboard.config.dataset_config import SALES_COLUMNS
from pizza_sales_dashboard.data.connectors import create_connector, DatasetLoadError
from pizza_sales_dashboard.data.repositories.sales_repository import SalesRepository
from pizza_sales_dashboard.data.models.sales import DashboardSnapshot, FilterCriteria
from pizza_sales_dashboard.analysis.aggregator_factory import AggregatorFactory
from pizza_sales_dashboard.analysis.aggregators.distribution import align_to_categories
from pizza_sales_dashboard.analysis.filter_engine import filter_sales_data
from pizza_sales_dashboard.analysis.summary_metrics import compute_summary_metrics
from pizza_sales_dashboard.analysis.exporters.csv_exporter import CSVExporter
from pizza_sales_dashboard.utils.date_helpers import get_timestamp_str
from pizza_sales_dashboard.utils.validation import validate_dataframe
from pizza_sales_dashboard.utils.logging_config import get_logger, setup_logging

# Set up logging
logger = get_logger(__name__)


def build_snapshot(
    sales_data: pd.DataFrame,
    criteria: FilterCriteria,
    top_n: int = DEFAULT_TOP_N
) -> DashboardSnapshot:
    """
    Run filter, aggregators and summary metrics for one selection.

    Nothing is cached between calls; every series is computed from the
    base data and the given criteria.

    Args:
        sales_data (pd.DataFrame): The full, unfiltered sales data
        criteria (FilterCriteria): The user's selection
        top_n (int): Ranking size for the by-name series

    Returns:
        DashboardSnapshot: All series and metrics for the selection

    Raises:
        ValueError: If sales_data lacks any of SALES_COLUMNS
    """
    if not validate_dataframe(sales_data, SALES_COLUMNS):
        logger.error("Sales data is missing required columns")
        raise ValueError(f"Sales data must have the columns {SALES_COLUMNS}")

    filtered_data = filter_sales_data(sales_data, criteria)

    factory = AggregatorFactory(top_n=top_n)
    series = {
        name: aggregator.aggregate(filtered_data)
        for name, aggregator in factory.get_all_aggregators().items()
    }

    summary = compute_summary_metrics(filtered_data, monthly_revenue=series['monthly_revenue'])

    logger.debug(
        f"Computed snapshot for months={sorted(criteria.selected_months)} "
        f"pizzas={sorted(criteria.selected_pizza_type_ids)}: {len(filtered_data)} records"
    )

    return DashboardSnapshot(
        criteria=criteria,
        record_count=len(filtered_data),
        monthly_revenue=series['monthly_revenue'],
        monthly_orders=series['monthly_orders'],
        by_size=series['size'],
        by_category=align_to_categories(series['category']),
        top_names=series['top_names'],
        summary=summary
    )


class PizzaSalesDashboardApp:
    """
    Main application class for the pizza sales dashboard.
    """

    def __init__(self, top_n: int = DEFAULT_TOP_N):
        """
        Initialize the application.

        Args:
            top_n (int): Ranking size for the by-name series
        """
        self.top_n = top_n
        self.sales_repository: Optional[SalesRepository] = None
        self.sales_data: Optional[pd.DataFrame] = None

    @property
    def is_loaded(self) -> bool:
        return self.sales_data is not None

    def load_dataset(self, source: Optional[str] = None) -> pd.DataFrame:
        """
        Load the dataset once for the session.

        Args:
            source (Optional[str]): File path or URL (default: DEFAULT_DATASET_SOURCE)

        Returns:
            pd.DataFrame: The decoded sales data

        Raises:
            DatasetLoadError: If the dataset cannot be fetched or parsed
        """
        source = source or DEFAULT_DATASET_SOURCE
        logger.info(f"Loading sales dataset from {source}")

        repository = SalesRepository(create_connector(source))
        try:
            sales_data = repository.get_raw_data()
        except DatasetLoadError as e:
            logger.error(f"Failed to load dataset: {str(e)}")
            raise

        self.sales_repository = repository
        self.sales_data = sales_data
        logger.info(f"Loaded {len(sales_data)} sales records.")
        return sales_data

    def update(self, criteria: Optional[FilterCriteria] = None) -> DashboardSnapshot:
        """
        Recompute every series for a new selection.

        Args:
            criteria (Optional[FilterCriteria]): The selection (default: unfiltered)

        Returns:
            DashboardSnapshot: All series and metrics for the selection
        """
        if self.sales_data is None:
            raise RuntimeError("Dataset has not been loaded; call load_dataset() first")

        return build_snapshot(self.sales_data, criteria or FilterCriteria(), top_n=self.top_n)

    def available_months(self) -> List[int]:
        return self.sales_repository.get_unique_months() if self.sales_repository else []

    def available_pizza_types(self) -> List[str]:
        return self.sales_repository.get_unique_pizza_types() if self.sales_repository else []

    def export(self, snapshot: DashboardSnapshot, output_dir: Optional[str] = None) -> str:
        """
        Export a snapshot to CSV files.

        Args:
            snapshot (DashboardSnapshot): The snapshot to export
            output_dir (Optional[str]): Output directory (default: DEFAULT_OUTPUT_DIR, else timestamped)

        Returns:
            str: Path to the output directory
        """
        output_dir = output_dir or DEFAULT_OUTPUT_DIR or f"pizza_dashboard_{get_timestamp_str()}"
        return CSVExporter().export(snapshot, output_dir)


def run_dashboard(
    source: Optional[str] = None,
    months: Optional[Iterable[object]] = None,
    pizza_type_ids: Optional[Iterable[object]] = None,
    output_dir: Optional[str] = None,
    top_n: int = DEFAULT_TOP_N,
    log_level: int = logging.INFO
) -> DashboardSnapshot:
    """
    Load the dataset and compute the dashboard for one selection.

    Args:
        source (Optional[str]): File path or URL of the dataset
        months (Optional[Iterable[object]]): Selected months (empty = all)
        pizza_type_ids (Optional[Iterable[object]]): Selected pizza type ids (empty = all)
        output_dir (Optional[str]): If given, the snapshot is exported there as CSV
        top_n (int): Ranking size for the by-name series
        log_level (int): Logging level

    Returns:
        DashboardSnapshot: All series and metrics for the selection
    """
    setup_logging(log_level=log_level)

    app = PizzaSalesDashboardApp(top_n=top_n)
    app.load_dataset(source)

    snapshot = app.update(FilterCriteria.from_selections(months, pizza_type_ids))

    if output_dir:
        app.export(snapshot, output_dir)

    return snapshot


if __name__ == "__main__":
    # This allows the module to be run directly for testing
    result = run_dashboard()
    print(result.summary.to_display())
