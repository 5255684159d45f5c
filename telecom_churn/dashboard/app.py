"""
Streamlit Dashboard Application
===============================

Step-by-step walkthrough of the Telecom X churn prediction pipeline.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st
from loguru import logger
from streamlit_option_menu import option_menu

from config import get_config
from telecom_churn.dashboard.renderers import render_page
from telecom_churn.pipeline import PipelineState, step_titles
from telecom_churn.pipeline.content import NEXT_STEPS_NOTE
from telecom_churn.utils import get_timestamp, sample_to_csv, setup_logging

config = get_config()
dashboard_config = config.get("dashboard", {})

# Page config
st.set_page_config(
    page_title=dashboard_config.get("page_title", "Telecom X - Churn ML Pipeline"),
    page_icon=dashboard_config.get("page_icon", "📡"),
    layout=dashboard_config.get("layout", "wide"),
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: bold;
        color: #1f77b4;
        padding: 0.5rem 0;
    }
    .sub-header {
        color: #6b7280;
        margin-bottom: 1rem;
    }
    .stMetric {
        background-color: #f0f2f6;
        padding: 10px;
        border-radius: 5px;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def configure_logging():
    """Configure loguru once per server process."""
    logging_config = config.get("logging", {})
    setup_logging(
        level=logging_config.get("level", "INFO"),
        log_file=logging_config.get("log_file")
    )
    return True


configure_logging()

# Session state
if "pipeline_state" not in st.session_state:
    st.session_state.pipeline_state = PipelineState.initialize(config)
    logger.info("Started new walkthrough session")

state: PipelineState = st.session_state.pipeline_state


# Sidebar
with st.sidebar:
    st.markdown("## Telecom X Churn Pipeline")
    st.markdown(f"**Sample size:** {state.n_records:,} customers")
    st.markdown(f"**Models trained:** {'Yes' if state.is_trained else 'No'}")

    st.download_button(
        label="Download sample CSV",
        data=sample_to_csv(state.sample),
        file_name=f"telecom_sample_{get_timestamp()}.csv",
        mime="text/csv",
        width="stretch"
    )

    st.markdown("---")
    st.markdown("### About")
    st.markdown("""
    **Churn Prediction Pipeline**

    Guided walkthrough of an ML
    pipeline for telecom churn.

    Built with:
    - Streamlit
    - Plotly
    - Pandas
    """)


# Header
st.markdown('<h1 class="main-header">Telecom X - ML Pipeline for Churn Prediction</h1>', unsafe_allow_html=True)
st.markdown('<p class="sub-header">Junior Machine Learning Analyst | Predictive Intelligence Project</p>', unsafe_allow_html=True)

# Step tabs
titles = list(step_titles(state.steps))
selected = option_menu(
    menu_title=None,
    options=titles,
    icons=[step.icon for step in state.steps],
    default_index=state.step,
    orientation="horizontal",
    # Key changes on every move, so a widget never replays an old tab click
    key=state.menu_key,
)
if selected in titles:
    state.go_to(titles.index(selected))

# Content
st.markdown(f"### {state.current_page.title}")
render_page(state)

# Navigation buttons
st.markdown("---")
col1, _, col2 = st.columns([1, 4, 1])
with col1:
    st.button(
        "← Previous",
        key="previous_step",
        on_click=state.previous_step,
        disabled=not state.can_go_back,
        width="stretch"
    )
with col2:
    st.button(
        "Next →",
        key="next_step",
        on_click=state.next_step,
        disabled=not state.can_go_forward,
        width="stretch",
        type="primary"
    )

st.markdown("---")
st.markdown("#### 💻 Next Steps - Implementation")
st.caption(NEXT_STEPS_NOTE)


# Run with: streamlit run telecom_churn/dashboard/app.py
