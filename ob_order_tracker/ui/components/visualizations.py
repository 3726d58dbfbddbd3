"""
Visualization components for the achievement dashboard.
"""
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ob_order_tracker.config.app_config import DEFAULT_CHART_HEIGHT
from ob_order_tracker.data.models.report import AchievementSummary


def create_metrics(summary: AchievementSummary) -> None:
    """
    Display the headline figures as Streamlit metrics.

    Args:
        summary (AchievementSummary): The global summary
    """
    col1, col2, col3, col4 = st.container().columns(4)

    col1.metric(
        "Today (Ctn)",
        f"{summary.today_achievement:,.2f}",
        delta=f"{summary.daily_percentage:.1f}% of daily target",
        delta_color="off"
    )
    col2.metric(
        "MTD (Ctn)",
        f"{summary.mtd_achievement:,.2f}",
        delta=f"{summary.mtd_percentage:.1f}% of target",
        delta_color="off"
    )
    col3.metric("MTD Target (Ctn)", f"{summary.total_target:,.2f}")
    col4.metric(
        "Needed / Day",
        f"{summary.required_daily_rate:,.2f}",
        delta=f"{summary.remaining_working_days} days left",
        delta_color="off"
    )

    visits = summary.mtd_visits
    col1, col2, col3 = st.container().columns(3)
    col1.metric("Shops Visited", f"{visits.visited_shops:,}")
    col2.metric("Productive Shops", f"{visits.productive_shops:,}")
    col3.metric("Productivity", f"{visits.productivity_pct:.1f}%")


def create_target_chart(summary: AchievementSummary) -> go.Figure:
    """
    Grouped bars of MTD achievement against target per category.

    Args:
        summary (AchievementSummary): The global summary

    Returns:
        go.Figure: Plotly figure
    """
    categories = [row.category for row in summary.month_to_date]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=categories,
            y=[row.target for row in summary.month_to_date],
            name="Target",
            marker_color="lightgray"
        )
    )
    fig.add_trace(
        go.Bar(
            x=categories,
            y=[row.achievement for row in summary.month_to_date],
            name="Achieved",
            text=[f"{row.percentage:.0f}%" for row in summary.month_to_date],
            textposition="outside"
        )
    )

    fig.update_layout(
        title="Month-to-Date Achievement vs Target",
        barmode="group",
        xaxis_title="Category",
        yaxis_title="Equivalent Cartons",
        height=DEFAULT_CHART_HEIGHT,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    return fig


def create_rollup_chart(rollup_df: pd.DataFrame, label_column: str, title: str) -> go.Figure:
    """
    Horizontal bars of total achievement per roll-up row.

    Args:
        rollup_df (pd.DataFrame): Roll-up table with an ACHIEVEMENT column
        label_column (str): Column naming each row
        title (str): Chart title

    Returns:
        go.Figure: Plotly figure
    """
    # Roll-ups arrive best-first; plotly draws horizontal bars bottom-up
    ordered = rollup_df.iloc[::-1]

    fig = go.Figure(
        go.Bar(
            x=ordered['ACHIEVEMENT'],
            y=ordered[label_column].astype(str),
            orientation="h"
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Equivalent Cartons",
        height=max(DEFAULT_CHART_HEIGHT, 28 * len(ordered))
    )
    return fig


def create_results_table(rollup_df: pd.DataFrame, title: str) -> None:
    """
    Display a roll-up table, or a notice when it is empty.

    Args:
        rollup_df (pd.DataFrame): Roll-up table
        title (str): Section heading
    """
    st.write(f"#### {title}")
    if rollup_df.empty:
        st.info("No orders in this period.")
        return
    st.dataframe(rollup_df, hide_index=True, use_container_width=True)
