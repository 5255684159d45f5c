"""
Telecom Churn Pipeline
======================

An interactive walkthrough of a churn prediction pipeline for a telecom
operator, driven by a synthetic customer sample.

Modules:
    - data: Synthetic sample generation and profiling
    - models: Simulated training and model comparison
    - pipeline: Walkthrough pages and session state
    - dashboard: Streamlit frontend
    - utils: Utility functions
"""

__version__ = "1.0.0"
