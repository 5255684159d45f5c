"""
Pipeline State
==============

Per-session view state of the walkthrough: the generated sample, the
current step and the installed training results.
"""

from typing import Dict, Optional, Tuple

import pandas as pd
from loguru import logger

from ..data import SyntheticDataGenerator, CustomerRecord, to_records
from ..models import ModelMetrics, SimulatedTrainer
from .steps import STEPS, Page


def clamp_step(index: int, n_steps: int = len(STEPS)) -> int:
    """Clamp a step index into [0, n_steps - 1]."""
    return max(0, min(n_steps - 1, index))


class PipelineState:
    """State of one walkthrough session."""

    def __init__(
        self,
        sample: pd.DataFrame,
        steps: Tuple[Page, ...] = STEPS,
        trainer: Optional[SimulatedTrainer] = None
    ):
        """
        Initialize PipelineState.

        Args:
            sample: Generated customer sample, kept read-only for the session
            steps: Walkthrough pages
            trainer: Trainer used by train_models
        """
        if not steps:
            raise ValueError("A pipeline needs at least one step")

        self._sample = sample.copy()
        self.steps = steps
        self.trainer = trainer or SimulatedTrainer()
        self.step = 0
        # Number of step changes so far; keys the step menu widget
        self.moves = 0
        self.results: Optional[Dict[str, ModelMetrics]] = None

    @classmethod
    def initialize(
        cls,
        config: Optional[dict] = None,
        generator: Optional[SyntheticDataGenerator] = None
    ) -> "PipelineState":
        """
        Create a fresh session with a newly generated sample.

        Args:
            config: Configuration dictionary
            generator: Generator to draw the sample from

        Returns:
            New PipelineState on the first step
        """
        generator = generator or SyntheticDataGenerator(config)
        return cls(generator.generate())

    @property
    def sample(self) -> pd.DataFrame:
        """Copy of the session sample."""
        return self._sample.copy()

    @property
    def n_records(self) -> int:
        return len(self._sample)

    def records(self) -> Tuple[CustomerRecord, ...]:
        """The session sample as immutable records."""
        return to_records(self._sample)

    @property
    def n_steps(self) -> int:
        return len(self.steps)

    @property
    def current_page(self) -> Page:
        return self.steps[self.step]

    @property
    def can_go_back(self) -> bool:
        return self.step > 0

    @property
    def can_go_forward(self) -> bool:
        return self.step < self.n_steps - 1

    @property
    def is_trained(self) -> bool:
        return self.results is not None

    @property
    def menu_key(self) -> str:
        """Step menu widget key, renewed after every move."""
        return f"step_menu_{self.moves}"

    def go_to(self, index: int) -> int:
        """
        Jump to a step.

        Args:
            index: Requested step, clamped into range

        Returns:
            The new step index
        """
        step = clamp_step(index, self.n_steps)
        if step != self.step:
            self.step = step
            self.moves += 1
            logger.debug(f"Moved to step {self.step}")
        return self.step

    def next_step(self) -> int:
        """Advance one step, stopping at the last page."""
        return self.go_to(self.step + 1)

    def previous_step(self) -> int:
        """Go back one step, stopping at the first page."""
        return self.go_to(self.step - 1)

    def train_models(self) -> Dict[str, ModelMetrics]:
        """
        Install the benchmark results.

        Calling again once results are installed leaves state untouched.

        Returns:
            Mapping of model name to metrics
        """
        if self.results is None:
            self.results = self.trainer.train_all_models()
        else:
            logger.debug("Models already trained, keeping installed results")
        return dict(self.results)
