"""
Pipeline Steps
==============

The five pages of the walkthrough. Each page kind is its own frozen
dataclass carrying only the content it renders.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple, Union

from .content import (
    CONTRACT_CHURN,
    CORRELATIONS,
    DEPLOYMENT_ACTIONS,
    FEATURE_IMPORTANCE,
    KEY_FINDINGS,
    PREPROCESSING_STAGES,
    PREVENTIVE_ACTIONS,
    ROI_NOTE,
    TENURE_CHURN,
    ContractChurn,
    Correlation,
    FeatureImportance,
    PreprocessingStage,
    TenureChurn,
)


class PageKind(str, Enum):
    """Kinds of walkthrough pages."""

    EXPLORATORY = "exploratory"
    PREPROCESSING = "preprocessing"
    TRAINING = "training"
    FEATURE_IMPORTANCE = "feature_importance"
    CONCLUSIONS = "conclusions"


@dataclass(frozen=True)
class ExploratoryPage:
    title: str
    icon: str
    contract_churn: Tuple[ContractChurn, ...] = CONTRACT_CHURN
    tenure_churn: Tuple[TenureChurn, ...] = TENURE_CHURN

    kind: ClassVar[PageKind] = PageKind.EXPLORATORY


@dataclass(frozen=True)
class PreprocessingPage:
    title: str
    icon: str
    stages: Tuple[PreprocessingStage, ...] = PREPROCESSING_STAGES
    correlations: Tuple[Correlation, ...] = CORRELATIONS

    kind: ClassVar[PageKind] = PageKind.PREPROCESSING


@dataclass(frozen=True)
class TrainingPage:
    title: str
    icon: str
    # Winner is chosen on this metric
    winner_metric: str = "auc"

    kind: ClassVar[PageKind] = PageKind.TRAINING


@dataclass(frozen=True)
class FeatureImportancePage:
    title: str
    icon: str
    importances: Tuple[FeatureImportance, ...] = FEATURE_IMPORTANCE
    top_n: int = 4

    kind: ClassVar[PageKind] = PageKind.FEATURE_IMPORTANCE


@dataclass(frozen=True)
class ConclusionsPage:
    title: str
    icon: str
    findings: Tuple[Tuple[str, str], ...] = KEY_FINDINGS
    preventive_actions: Tuple[str, ...] = PREVENTIVE_ACTIONS
    deployment_actions: Tuple[str, ...] = DEPLOYMENT_ACTIONS
    roi_note: str = ROI_NOTE

    kind: ClassVar[PageKind] = PageKind.CONCLUSIONS


Page = Union[
    ExploratoryPage,
    PreprocessingPage,
    TrainingPage,
    FeatureImportancePage,
    ConclusionsPage,
]

# Icons are Bootstrap icon names understood by streamlit-option-menu
STEPS: Tuple[Page, ...] = (
    ExploratoryPage(title="1. Exploratory Data Analysis", icon="database"),
    PreprocessingPage(title="2. Data Preprocessing", icon="file-text"),
    TrainingPage(title="3. Model Training", icon="cpu"),
    FeatureImportancePage(title="4. Feature Importance", icon="graph-up"),
    ConclusionsPage(title="5. Strategic Conclusions", icon="exclamation-triangle"),
)


def step_titles(steps: Tuple[Page, ...] = STEPS) -> Tuple[str, ...]:
    """Titles of the given steps in order."""
    return tuple(step.title for step in steps)
