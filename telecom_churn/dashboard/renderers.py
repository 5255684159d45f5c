"""
Page Renderers
==============

One Streamlit render function per page kind.
"""

from typing import Callable, Dict

import streamlit as st

from ..data import SampleProfiler
from ..data.schemas import RECORD_COLUMNS
from ..models import ModelEvaluator, SimulatedTrainer
from ..pipeline import PageKind, PipelineState
from ..pipeline.content import correlation_severity
from ..pipeline.steps import (
    ConclusionsPage,
    ExploratoryPage,
    FeatureImportancePage,
    PreprocessingPage,
    TrainingPage,
)
from ..utils import format_percentage
from .charts import (
    contract_churn_chart,
    feature_importance_chart,
    tenure_churn_chart,
    to_frame,
)

SEVERITY_COLORS = {"high": "#b91c1c", "medium": "#a16207", "low": "#15803d"}


def render_exploratory(page: ExploratoryPage, state: PipelineState):
    """Sample overview and churn distribution charts."""
    profiler = SampleProfiler(state.sample)
    summary = profiler.summary()
    n_variables = len(RECORD_COLUMNS) - 2

    st.subheader("Telecom X Dataset")
    st.caption(f"Sample of {summary['n_records']:,} customers with {n_variables} variables")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(label="Churn Rate", value=format_percentage(summary["churn_rate"]))
    with col2:
        st.metric(label="Average Tenure", value=f"{summary['mean_tenure']:.1f} months")
    with col3:
        st.metric(label="Average Monthly Charge", value=f"R$ {summary['mean_monthly_charge']:.2f}")

    observed = st.toggle("Show rates observed in this sample", value=False)
    if observed:
        contract_df = profiler.churn_by_contract()
        tenure_df = profiler.churn_by_tenure()
    else:
        contract_df = to_frame(page.contract_churn)
        tenure_df = to_frame(page.tenure_churn)

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(contract_churn_chart(contract_df), width="stretch")
    with col2:
        st.plotly_chart(tenure_churn_chart(tenure_df), width="stretch")


def render_preprocessing(page: PreprocessingPage, state: PipelineState):
    """Preparation stages and correlation list."""
    st.subheader("Preparation Steps")
    for stage in page.stages:
        st.markdown(f"- **{stage.name}:** {stage.description}")

    st.markdown("---")
    st.subheader("Correlation Analysis")

    for item in page.correlations:
        color = SEVERITY_COLORS[correlation_severity(item.churn)]
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"**{item.variable}**  \n{item.description}")
        with col2:
            st.markdown(
                f"<span style='color:{color}; font-weight:bold'>{item.churn:.3f}</span>",
                unsafe_allow_html=True
            )

    with st.expander("Correlations observed in this sample"):
        st.dataframe(SampleProfiler(state.sample).correlations(), width="stretch")


def render_training(page: TrainingPage, state: PipelineState):
    """Train button, per-model metric cards and the winner banner."""
    label = "Models Trained!" if state.is_trained else "Train Models"
    st.button(
        label,
        key="train_models",
        on_click=state.train_models,
        disabled=state.is_trained,
        width="stretch",
        type="primary"
    )

    if not state.is_trained:
        st.info("Press the button to train Logistic Regression, Random Forest and XGBoost.")
        return

    evaluator = ModelEvaluator()
    columns = st.columns(len(state.results))
    for col, (name, metrics) in zip(columns, state.results.items()):
        with col:
            st.markdown(f"#### {SimulatedTrainer.display_name(name)}")
            for metric_label, value in evaluator.format_percentages(metrics).items():
                st.markdown(f"{metric_label}: **{value}**")

    comparison = evaluator.comparison_table(state.results)
    st.plotly_chart(evaluator.plot_model_comparison(comparison), width="stretch")

    best_name, best_metrics, _ = state.trainer.get_best_model(page.winner_metric)
    best_label = SimulatedTrainer.display_name(best_name)
    st.success(
        f"**Winning model: {best_label}**  \n"
        f"{best_label} delivered the best overall performance with AUC of "
        f"{best_metrics.auc * 100:.1f}% and F1-Score of {best_metrics.f1 * 100:.1f}%, "
        "showing a strong ability to identify customers at risk of churn."
    )
    st.caption("Benchmark figures are pre-computed; no estimator is fit on the session sample.")


def render_feature_importance(page: FeatureImportancePage, state: PipelineState):
    """Importance chart and cards for the leading features."""
    st.plotly_chart(feature_importance_chart(to_frame(page.importances)), width="stretch")

    top = page.importances[:page.top_n]
    columns = st.columns(2)
    for idx, item in enumerate(top):
        with columns[idx % 2]:
            st.markdown(f"**{item.feature}**  \n{item.description}")
            st.progress(item.importance)
            st.caption(f"{item.importance * 100:.1f}% importance")


def render_conclusions(page: ConclusionsPage, state: PipelineState):
    """Churn drivers, recommendations and ROI estimate."""
    st.subheader("🎯 Main Churn Drivers Identified")
    for heading, detail in page.findings:
        st.markdown(f"- **{heading}:** {detail}")

    st.subheader("💡 Strategic Recommendations")
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Preventive actions**")
        st.markdown("\n".join(f"- {action}" for action in page.preventive_actions))
    with col2:
        st.markdown("**Model deployment**")
        st.markdown("\n".join(f"- {action}" for action in page.deployment_actions))

    st.subheader("📈 Estimated ROI")
    st.info(page.roi_note)


RENDERERS: Dict[PageKind, Callable] = {
    PageKind.EXPLORATORY: render_exploratory,
    PageKind.PREPROCESSING: render_preprocessing,
    PageKind.TRAINING: render_training,
    PageKind.FEATURE_IMPORTANCE: render_feature_importance,
    PageKind.CONCLUSIONS: render_conclusions,
}


def render_page(state: PipelineState):
    """Render the current step of a session."""
    page = state.current_page
    RENDERERS[page.kind](page, state)
