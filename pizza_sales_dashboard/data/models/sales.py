"""
Sales data models.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple
import pandas as pd

from pizza_sales_dashboard.utils.date_helpers import extract_month
from pizza_sales_dashboard.utils.formatting import format_count, format_currency
from pizza_sales_dashboard.utils.validation import validate_month
from pizza_sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


@dataclass(frozen=True)
class SalesRecord:
    """
    Represents one transaction line for a single pizza line item.
    """
    date: str  # month/day/year
    pizza_type_id: str
    name: str
    size: str
    category: str
    quantity: int
    price: float

    @property
    def month(self) -> Optional[int]:
        """Calendar month of the sale, or None when the date is malformed."""
        return extract_month(self.date)

    @property
    def revenue(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class FilterCriteria:
    """
    Represents the user's month and product selection.

    An empty set means "no restriction" on that dimension.
    """
    selected_months: FrozenSet[int] = frozenset()
    selected_pizza_type_ids: FrozenSet[str] = frozenset()

    @classmethod
    def from_selections(
        cls,
        months: Optional[Iterable[object]] = None,
        pizza_type_ids: Optional[Iterable[object]] = None
    ) -> "FilterCriteria":
        """
        Build criteria from raw multi-select values.

        Args:
            months (Optional[Iterable[object]]): Selected months, as ints or numeric strings
            pizza_type_ids (Optional[Iterable[object]]): Selected pizza type ids

        Returns:
            FilterCriteria: The criteria; invalid month values are dropped
        """
        valid_months = set()
        for value in months or []:
            month = validate_month(value)
            if month is None:
                logger.warning(f"Ignoring invalid month selection: {value!r}")
                continue
            valid_months.add(month)

        pizza_ids = {str(pizza_id) for pizza_id in pizza_type_ids or [] if pizza_id is not None}

        return cls(
            selected_months=frozenset(valid_months),
            selected_pizza_type_ids=frozenset(pizza_ids)
        )

    @property
    def is_unfiltered(self) -> bool:
        return not self.selected_months and not self.selected_pizza_type_ids


@dataclass
class ChartSeries:
    """
    Ordered (label, value) pairs feeding one chart.
    """
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    def __post_init__(self):
        if len(self.labels) != len(self.values):
            raise ValueError(
                f"Series labels and values differ in length: {len(self.labels)} != {len(self.values)}"
            )

    def __len__(self) -> int:
        return len(self.values)

    def points(self) -> List[Tuple[str, float]]:
        return list(zip(self.labels, self.values))

    def total(self) -> float:
        return sum(self.values)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({'label': self.labels, 'value': self.values})


@dataclass(frozen=True)
class SummaryMetrics:
    """
    Scalar rollups of a filtered record set.
    """
    total_orders: int = 0
    distinct_product_count: int = 0
    total_revenue: float = 0.0
    average_revenue: float = 0.0
    total_units_sold: int = 0

    def to_display(self) -> Dict[str, str]:
        """
        Format the metrics as display strings.

        Returns:
            Dict[str, str]: Metric name to display text
        """
        return {
            'total_orders': format_count(self.total_orders),
            'distinct_product_count': str(self.distinct_product_count),
            'total_revenue': format_currency(self.total_revenue),
            'average_revenue': format_currency(self.average_revenue),
            'total_units_sold': format_count(self.total_units_sold),
        }


@dataclass
class DashboardSnapshot:
    """
    Everything derived from the base dataset for one filter selection.
    """
    criteria: FilterCriteria
    record_count: int
    monthly_revenue: ChartSeries
    monthly_orders: ChartSeries
    by_size: ChartSeries
    by_category: ChartSeries  # aligned to the fixed category axis
    top_names: ChartSeries
    summary: SummaryMetrics

    def series(self) -> Dict[str, ChartSeries]:
        """
        Get the chart series keyed by aggregator name.

        Returns:
            Dict[str, ChartSeries]: Series in display order
        """
        return {
            'monthly_revenue': self.monthly_revenue,
            'monthly_orders': self.monthly_orders,
            'top_names': self.top_names,
            'size': self.by_size,
            'category': self.by_category,
        }
