"""
CSV exporter for dashboard series.
"""
import os
from pizza_sales_dashboard.analysis.exporters.base_exporter import BaseExporter
from pizza_sales_dashboard.data.models.sales import DashboardSnapshot
from pizza_sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

SERIES_FILE_NAMES = {
    'monthly_revenue': "monthly_revenue.csv",
    'monthly_orders': "monthly_orders.csv",
    'top_names': "top_pizzas.csv",
    'size': "orders_by_size.csv",
    'category': "orders_by_category.csv",
}


class CSVExporter(BaseExporter):
    """
    Exporter for dashboard series to CSV files.
    """
    
    def export(self, snapshot: DashboardSnapshot, output_dir: str) -> str:
        """
        Export every series and the summary metrics to CSV files.
        
        Args:
            snapshot (DashboardSnapshot): The computed series and metrics
            output_dir (str): Directory for output files (created if missing)
        
        Returns:
            str: Path to the output directory
        """
        os.makedirs(output_dir, exist_ok=True)
        
        for name, series in snapshot.series().items():
            output_path = os.path.join(output_dir, SERIES_FILE_NAMES[name])
            series.to_dataframe().to_csv(output_path, index=False)
            logger.debug(f"Exported {name} series ({len(series)} points) to {output_path}")
        
        summary_path = os.path.join(output_dir, "summary_metrics.csv")
        self.prepare_summary_dataframe(snapshot.summary).to_csv(summary_path, index=False)
        
        logger.info(f"Exported dashboard snapshot to {output_dir}")
        return output_dir
