"""
Dashboard Charts
================

Plotly figure builders for the walkthrough pages.
"""

from typing import Iterable

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

CHURN_COLOR = "#ef4444"
RETAIN_COLOR = "#10b981"
IMPORTANCE_COLOR = "#3b82f6"


def to_frame(rows: Iterable[tuple]) -> pd.DataFrame:
    """Build a DataFrame from content rows."""
    return pd.DataFrame(list(rows))


def contract_churn_chart(df: pd.DataFrame) -> go.Figure:
    """
    Churn vs retention bars per contract type.

    Args:
        df: DataFrame with columns contract, churn, no_churn (percent)

    Returns:
        Plotly figure
    """
    long_df = df.melt(
        id_vars="contract",
        value_vars=["churn", "no_churn"],
        var_name="Outcome",
        value_name="Percent"
    )
    long_df["Outcome"] = long_df["Outcome"].map({"churn": "Churn", "no_churn": "No Churn"})

    fig = px.bar(
        long_df,
        x="contract",
        y="Percent",
        color="Outcome",
        barmode="group",
        color_discrete_map={"Churn": CHURN_COLOR, "No Churn": RETAIN_COLOR},
        labels={"contract": "Contract"},
        title="Churn Distribution by Contract"
    )
    fig.update_layout(height=320)
    return fig


def tenure_churn_chart(df: pd.DataFrame) -> go.Figure:
    """
    Churn rate line across tenure buckets.

    Args:
        df: DataFrame with columns tenure, churn_rate (percent)

    Returns:
        Plotly figure
    """
    fig = px.line(
        df,
        x="tenure",
        y="churn_rate",
        markers=True,
        labels={"tenure": "Tenure (months)", "churn_rate": "Churn Rate (%)"},
        title="Churn vs Tenure"
    )
    fig.update_traces(line={"color": CHURN_COLOR, "width": 3})
    fig.update_layout(height=320)
    return fig


def feature_importance_chart(df: pd.DataFrame) -> go.Figure:
    """
    Horizontal feature importance bars, most important on top.

    Args:
        df: DataFrame with columns feature, importance

    Returns:
        Plotly figure
    """
    ordered = df.sort_values("importance", ascending=True)
    fig = px.bar(
        ordered,
        x="importance",
        y="feature",
        orientation="h",
        labels={"importance": "Importance", "feature": "Feature"},
        title="Feature Importance (XGBoost)"
    )
    fig.update_traces(
        marker_color=IMPORTANCE_COLOR,
        hovertemplate="%{y}: %{x:.1%}<extra></extra>"
    )
    fig.update_layout(height=360)
    return fig
