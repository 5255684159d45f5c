"""
Model Trainer Module
====================

Simulated model training for the churn walkthrough. No estimator is fit:
"training" installs a fixed table of benchmark metrics for each model.
"""

from typing import Dict, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

METRIC_NAMES = ("accuracy", "precision", "recall", "f1", "auc")


class ModelMetrics(BaseModel):
    """Benchmark scores reported for one model."""

    model_config = ConfigDict(frozen=True)

    accuracy: float = Field(..., ge=0, le=1)
    precision: float = Field(..., ge=0, le=1)
    recall: float = Field(..., ge=0, le=1)
    f1: float = Field(..., ge=0, le=1)
    auc: float = Field(..., ge=0, le=1)


SIMULATED_RESULTS: Dict[str, ModelMetrics] = {
    "logistic_regression": ModelMetrics(
        accuracy=0.847, precision=0.782, recall=0.698, f1=0.738, auc=0.876
    ),
    "random_forest": ModelMetrics(
        accuracy=0.891, precision=0.823, recall=0.745, f1=0.782, auc=0.913
    ),
    "xgboost": ModelMetrics(
        accuracy=0.903, precision=0.851, recall=0.769, f1=0.808, auc=0.928
    ),
}


class SimulatedTrainer:
    """Hand out pre-computed benchmark results as if models had been trained."""

    MODELS = {
        "logistic_regression": "Logistic Regression",
        "random_forest": "Random Forest",
        "xgboost": "XGBoost",
    }

    def __init__(self):
        """Initialize SimulatedTrainer with no trained models."""
        self.trained_models: Dict[str, ModelMetrics] = {}

    @classmethod
    def display_name(cls, model_name: str) -> str:
        """Human readable label for a model key."""
        return cls.MODELS.get(model_name, model_name)

    def train_model(self, model_name: str) -> ModelMetrics:
        """
        "Train" a single model.

        Args:
            model_name: One of MODELS

        Returns:
            The model's benchmark metrics
        """
        if model_name not in SIMULATED_RESULTS:
            logger.error(f"Unknown model: {model_name}")
            raise ValueError(
                f"Unknown model '{model_name}'. Available: {list(SIMULATED_RESULTS)}"
            )

        metrics = SIMULATED_RESULTS[model_name]
        self.trained_models[model_name] = metrics
        logger.info(f"{model_name} - Accuracy: {metrics.accuracy:.3f}, F1: {metrics.f1:.3f}, AUC: {metrics.auc:.3f}")
        return metrics

    def train_all_models(self) -> Dict[str, ModelMetrics]:
        """
        "Train" every model.

        Returns:
            Mapping of model name to metrics, same values on every call
        """
        logger.info("Training all models...")
        for model_name in self.MODELS:
            self.train_model(model_name)
        return self.get_all_trained_models()

    def get_all_trained_models(self) -> Dict[str, ModelMetrics]:
        """Get all models trained so far."""
        return dict(self.trained_models)

    def get_best_model(self, metric: str = "auc") -> Tuple[str, ModelMetrics, float]:
        """
        Get the best trained model by a metric.

        Args:
            metric: One of METRIC_NAMES

        Returns:
            Tuple of (model name, metrics, score)
        """
        if metric not in METRIC_NAMES:
            raise ValueError(f"Unknown metric '{metric}'. Available: {list(METRIC_NAMES)}")
        if not self.trained_models:
            raise ValueError("No models trained. Call train_all_models first.")

        best_name = max(self.trained_models, key=lambda name: getattr(self.trained_models[name], metric))
        best_metrics = self.trained_models[best_name]
        best_score = getattr(best_metrics, metric)

        logger.info(f"Best model: {best_name} with {metric}={best_score:.4f}")
        return best_name, best_metrics, best_score
