"""
Model Evaluator Module
======================

Comparison tables and charts over benchmark model results.
"""

from typing import Dict, Mapping

import pandas as pd
import plotly.graph_objects as go
from loguru import logger

from ..utils import format_percentage
from .trainer import METRIC_NAMES, ModelMetrics, SimulatedTrainer

METRIC_LABELS = {
    "accuracy": "Accuracy",
    "precision": "Precision",
    "recall": "Recall",
    "f1": "F1-Score",
    "auc": "AUC",
}


class ModelEvaluator:
    """Compare benchmark results across models."""

    def comparison_table(
        self,
        results: Mapping[str, ModelMetrics],
        sort_by: str = "f1"
    ) -> pd.DataFrame:
        """
        Build a model comparison table.

        Args:
            results: Mapping of model name to metrics
            sort_by: Metric to sort by, descending

        Returns:
            DataFrame indexed by model with one column per metric
        """
        if sort_by not in METRIC_NAMES:
            raise ValueError(f"Unknown metric '{sort_by}'. Available: {list(METRIC_NAMES)}")

        rows = []
        for name, metrics in results.items():
            row = metrics.model_dump()
            row["model"] = name
            rows.append(row)

        df = pd.DataFrame(rows, columns=["model", *METRIC_NAMES])
        df = df.set_index("model")

        # Sort by requested metric
        df = df.sort_values(sort_by, ascending=False)

        return df

    def format_percentages(self, metrics: ModelMetrics, precision: int = 1) -> Dict[str, str]:
        """
        Format metric values as percentages for display.

        Args:
            metrics: Model metrics
            precision: Decimal places

        Returns:
            Mapping of metric label to formatted percentage
        """
        return {
            METRIC_LABELS[name]: format_percentage(value, precision)
            for name, value in metrics.model_dump().items()
        }

    def plot_model_comparison(self, comparison_df: pd.DataFrame) -> go.Figure:
        """
        Plot model comparison bar chart.

        Args:
            comparison_df: DataFrame with model metrics

        Returns:
            Plotly figure
        """
        available_metrics = [m for m in METRIC_NAMES if m in comparison_df.columns]
        labels = [SimulatedTrainer.display_name(name) for name in comparison_df.index]

        fig = go.Figure()
        for metric in available_metrics:
            fig.add_trace(go.Bar(
                name=METRIC_LABELS[metric],
                x=labels,
                y=comparison_df[metric].tolist(),
            ))

        fig.update_layout(
            barmode="group",
            title="Model Performance Comparison",
            xaxis_title="Model",
            yaxis_title="Score",
            yaxis_range=[0, 1.05],
        )

        logger.debug(f"Built comparison chart for {len(labels)} models")
        return fig
