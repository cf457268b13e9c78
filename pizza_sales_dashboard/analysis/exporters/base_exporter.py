"""
Base exporter interface for exporting dashboard series.
"""
from abc import ABC, abstractmethod
import pandas as pd
from pizza_sales_dashboard.data.models.sales import DashboardSnapshot, SummaryMetrics


class BaseExporter(ABC):
    """
    Abstract base class for exporters that write a dashboard snapshot.
    """
    
    @abstractmethod
    def export(self, snapshot: DashboardSnapshot, output_dir: str) -> str:
        """
        Export a snapshot to a specified format.
        
        Args:
            snapshot (DashboardSnapshot): The computed series and metrics
            output_dir (str): Base directory for output files
        
        Returns:
            str: Path to the exported data
        """
        pass
    
    def prepare_summary_dataframe(self, summary: SummaryMetrics) -> pd.DataFrame:
        """
        Prepare a DataFrame of the summary metrics.
        
        Args:
            summary (SummaryMetrics): The metrics to convert
        
        Returns:
            pd.DataFrame: One row per metric with raw and display values
        """
        display = summary.to_display()
        data = [
            {'metric': metric, 'value': getattr(summary, metric), 'display': text}
            for metric, text in display.items()
        ]
        return pd.DataFrame(data, columns=['metric', 'value', 'display'])
