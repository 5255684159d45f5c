"""Configuration module for the Telecom Churn pipeline walkthrough."""

from pathlib import Path

import yaml

# Project root directory
ROOT_DIR = Path(__file__).parent.parent.absolute()

# Load configuration
CONFIG_PATH = Path(__file__).parent / "config.yaml"


def load_config(path: Path = CONFIG_PATH) -> dict:
    """Load configuration from YAML file."""
    with open(path, "r") as f:
        config = yaml.safe_load(f)
    return config or {}


def get_config() -> dict:
    """Get configuration dictionary."""
    return load_config()


# Export commonly used paths
LOGS_DIR = ROOT_DIR / "logs"
