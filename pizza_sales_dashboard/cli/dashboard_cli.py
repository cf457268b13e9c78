"""
Command-line interface for the pizza sales dashboard.
"""
import argparse
import logging
import sys
from typing import List, Optional
from pizza_sales_dashboard.main import run_dashboard
from pizza_sales_dashboard.data.connectors.base_connector import DatasetLoadError
from pizza_sales_dashboard.data.models.sales import ChartSeries, DashboardSnapshot
from pizza_sales_dashboard.utils.validation import validate_month
from pizza_sales_dashboard.config.app_config import DEFAULT_DATASET_SOURCE, DEFAULT_TOP_N, METRIC_TITLES

SERIES_TITLES = {
    'monthly_revenue': "Revenue MoM",
    'monthly_orders': "Sales Per Month",
    'top_names': "Top Pizza Sales",
    'size': "Order by Pizza Size",
    'category': "Order by Category",
}


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.
    
    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)
    
    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Pizza Sales Dashboard - Filter and aggregate pizza sales records"
    )
    
    parser.add_argument(
        "--dataset",
        type=str,
        default=DEFAULT_DATASET_SOURCE,
        help=f"Dataset JSON file path or URL (default: {DEFAULT_DATASET_SOURCE})"
    )
    
    parser.add_argument(
        "--months",
        type=str,
        help="Comma-separated list of months 1-12 to include (default: all months)"
    )
    
    parser.add_argument(
        "--pizzas",
        type=str,
        help="Comma-separated list of pizza type ids to include (default: all pizzas)"
    )
    
    parser.add_argument(
        "--top-n",
        type=int,
        default=DEFAULT_TOP_N,
        help=f"Number of pizzas in the by-name ranking (default: {DEFAULT_TOP_N})"
    )
    
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Export the computed series as CSV files to this directory"
    )
    
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    
    return parser.parse_args(args)


def format_series(title: str, series: ChartSeries) -> str:
    """
    Render a series as indented text lines.
    
    Args:
        title (str): Series heading
        series (ChartSeries): The series to render
    
    Returns:
        str: Multi-line text
    """
    lines = [f"{title}:"]
    if not len(series):
        lines.append("  (no data)")
    for label, value in series.points():
        text = f"{value:,.2f}" if isinstance(value, float) else f"{value:,}"
        lines.append(f"  {label}: {text}")
    return "\n".join(lines)


def format_snapshot(snapshot: DashboardSnapshot) -> str:
    """
    Render the summary metrics and every series as text.
    
    Args:
        snapshot (DashboardSnapshot): The computed dashboard
    
    Returns:
        str: Multi-line report
    """
    display = snapshot.summary.to_display()
    blocks = ["\n".join(f"{METRIC_TITLES[key]}: {text}" for key, text in display.items())]
    for name, series in snapshot.series().items():
        blocks.append(format_series(SERIES_TITLES[name], series))
    return "\n\n".join(blocks)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.
    
    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)
    
    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    parsed_args = parse_args(args)
    
    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
    
    months = []
    if parsed_args.months:
        for value in parsed_args.months.split(','):
            month = validate_month(value)
            if month is None:
                print(f"Error: Invalid month: {value.strip()!r}. Use numbers 1-12.")
                return 1
            months.append(month)
    
    pizza_type_ids = []
    if parsed_args.pizzas:
        pizza_type_ids = [pizza.strip() for pizza in parsed_args.pizzas.split(',') if pizza.strip()]
    
    try:
        snapshot = run_dashboard(
            source=parsed_args.dataset,
            months=months,
            pizza_type_ids=pizza_type_ids,
            output_dir=parsed_args.output_dir,
            top_n=parsed_args.top_n,
            log_level=log_level
        )
    except DatasetLoadError as e:
        print(f"\nFailed to load dataset: {str(e)}")
        return 1
    except Exception as e:
        print(f"\nError computing dashboard: {str(e)}")
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1
    
    print(format_snapshot(snapshot))
    if parsed_args.output_dir:
        print(f"\nResults saved in {parsed_args.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
