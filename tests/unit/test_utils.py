"""Tests for configuration and helper utilities."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
from loguru import logger

import config as config_module
from telecom_churn.utils import format_percentage, get_timestamp, sample_to_csv
from telecom_churn.utils import helpers


def test_config_file_sections(base_config: dict) -> None:
    for section in ["data", "churn_model", "flags", "ranges", "dashboard", "logging"]:
        assert section in base_config
    assert base_config["data"]["n_records"] == 1000
    assert base_config["churn_model"]["base_rate"] == 0.10


def test_load_config_from_custom_path(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("data:\n  n_records: 10\n")
    assert config_module.load_config(path) == {"data": {"n_records": 10}}


def test_load_config_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert config_module.load_config(path) == {}


def test_format_percentage() -> None:
    assert format_percentage(0.928) == "92.8%"
    assert format_percentage(0.5, precision=0) == "50%"


def test_get_timestamp_format() -> None:
    assert len(get_timestamp()) == len("20240101_120000")
    assert get_timestamp("%Y").isdigit()


def test_sample_to_csv(sample: pd.DataFrame) -> None:
    payload = sample_to_csv(sample.head(3))
    lines = payload.decode("utf-8").strip().splitlines()
    assert lines[0].startswith("customer_id,tenure_months,monthly_charge")
    assert len(lines) == 4


def test_setup_logging_writes_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(helpers, "LOGS_DIR", tmp_path)
    try:
        helpers.setup_logging(level="DEBUG", log_file="walkthrough.log")
        logger.debug("hello from the test")
        logger.complete()
        content = (tmp_path / "walkthrough.log").read_text()
        assert "hello from the test" in content
    finally:
        logger.remove()
        logger.add(sys.stderr)
