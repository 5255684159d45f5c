"""Walkthrough pages and session state."""

from .state import PipelineState, clamp_step
from .steps import STEPS, PageKind, Page, step_titles

__all__ = ["PipelineState", "clamp_step", "STEPS", "PageKind", "Page", "step_titles"]
