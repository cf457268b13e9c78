"""
Display formatting for KPI values.
"""


def format_count(value: int) -> str:
    """Format an integer count with thousands separators, e.g. "1,234"."""
    return f"{int(value):,}"


def format_currency(value: float) -> str:
    """Format a dollar amount with two decimals, e.g. "$1,234.56"."""
    return f"${float(value):,.2f}"
