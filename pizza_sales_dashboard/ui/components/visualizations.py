"""
Visualization components for the pizza sales dashboard.
"""
import plotly.graph_objects as go
import streamlit as st
from typing import Dict
from pizza_sales_dashboard.config.app_config import BAR_COLOR, DEFAULT_CHART_HEIGHT, METRIC_TITLES, SIZE_PIE_COLORS
from pizza_sales_dashboard.data.models.sales import ChartSeries, DashboardSnapshot, SummaryMetrics


def create_metrics(summary: SummaryMetrics) -> None:
    """
    Display the summary metrics as a KPI row.
    
    Args:
        summary (SummaryMetrics): Metrics for the current selection
    """
    display = summary.to_display()
    columns = st.container().columns(len(display))
    for column, (key, text) in zip(columns, display.items()):
        column.metric(METRIC_TITLES[key], text)


def _hide_grid(fig: go.Figure) -> go.Figure:
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=False)
    fig.update_layout(height=DEFAULT_CHART_HEIGHT, margin=dict(l=10, r=10, t=40, b=10))
    return fig


def create_revenue_chart(series: ChartSeries) -> go.Figure:
    """
    Line chart of revenue per month.
    
    Args:
        series (ChartSeries): Monthly revenue series
    
    Returns:
        go.Figure: Plotly figure
    """
    fig = go.Figure(go.Scatter(x=series.labels, y=series.values, mode='lines+markers', name="Revenue MoM"))
    fig.update_layout(title="Revenue MoM")
    if series.values:
        fig.update_yaxes(range=[min(series.values), max(series.values)])
    return _hide_grid(fig)


def create_orders_chart(series: ChartSeries) -> go.Figure:
    """
    Bar chart of order lines per month, with value labels.
    
    Args:
        series (ChartSeries): Monthly order count series
    
    Returns:
        go.Figure: Plotly figure
    """
    fig = go.Figure(go.Bar(x=series.labels, y=series.values, text=series.values, name="Sales Per Month"))
    fig.update_layout(title="Sales Per Month")
    return _hide_grid(fig)


def create_top_names_chart(series: ChartSeries) -> go.Figure:
    """
    Horizontal bar chart of the best-selling pizzas, best first.
    
    Args:
        series (ChartSeries): Top-N by-name series
    
    Returns:
        go.Figure: Plotly figure
    """
    fig = go.Figure(go.Bar(
        x=series.values,
        y=series.labels,
        orientation='h',
        marker_color=BAR_COLOR
    ))
    fig.update_layout(title=f"Top {len(series)} Pizza Sales", showlegend=False)
    fig.update_yaxes(autorange='reversed')
    return _hide_grid(fig)


def create_size_chart(series: ChartSeries) -> go.Figure:
    """
    Pie chart of order lines by size with percentage labels.
    
    Args:
        series (ChartSeries): By-size series
    
    Returns:
        go.Figure: Plotly figure
    """
    fig = go.Figure(go.Pie(
        labels=series.labels,
        values=series.values,
        marker=dict(colors=SIZE_PIE_COLORS),
        texttemplate='%{percent:.1%}',
        sort=False
    ))
    fig.update_layout(title="Order by Pizza Size", legend=dict(x=1.0, y=0.5))
    return _hide_grid(fig)


def create_category_chart(series: ChartSeries) -> go.Figure:
    """
    Bar chart of order lines by category on the fixed category axis.
    
    Args:
        series (ChartSeries): By-category series aligned to the category labels
    
    Returns:
        go.Figure: Plotly figure
    """
    fig = go.Figure(go.Bar(x=series.labels, y=series.values, text=series.values, name="Order by Category"))
    fig.update_layout(title="Order by Category")
    return _hide_grid(fig)


def build_figures(snapshot: DashboardSnapshot) -> Dict[str, go.Figure]:
    """
    Build one figure per series of the snapshot.
    
    Args:
        snapshot (DashboardSnapshot): The computed dashboard
    
    Returns:
        Dict[str, go.Figure]: Figures keyed by series name, in display order
    """
    return {
        'monthly_revenue': create_revenue_chart(snapshot.monthly_revenue),
        'monthly_orders': create_orders_chart(snapshot.monthly_orders),
        'top_names': create_top_names_chart(snapshot.top_names),
        'size': create_size_chart(snapshot.by_size),
        'category': create_category_chart(snapshot.by_category),
    }


def create_charts(snapshot: DashboardSnapshot) -> None:
    """
    Display every chart of the snapshot in a two-column grid.
    
    Args:
        snapshot (DashboardSnapshot): The computed dashboard
    """
    figures = list(build_figures(snapshot).values())
    for start in range(0, len(figures), 2):
        columns = st.columns(2)
        for column, fig in zip(columns, figures[start:start + 2]):
            column.plotly_chart(fig, use_container_width=True)
