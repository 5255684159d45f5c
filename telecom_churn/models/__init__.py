"""Models module for simulated training and evaluation."""

from .trainer import SimulatedTrainer, ModelMetrics, SIMULATED_RESULTS, METRIC_NAMES
from .evaluator import ModelEvaluator

__all__ = ["SimulatedTrainer", "ModelMetrics", "SIMULATED_RESULTS", "METRIC_NAMES", "ModelEvaluator"]
