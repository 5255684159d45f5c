"""Streamlit dashboard for the churn pipeline walkthrough."""
