"""Shared fixtures for the churn pipeline tests."""

from __future__ import annotations

import copy

import pandas as pd
import pytest

from config import load_config
from telecom_churn.data import SyntheticDataGenerator


@pytest.fixture(scope="session")
def base_config() -> dict:
    return load_config()


@pytest.fixture
def config(base_config: dict) -> dict:
    return copy.deepcopy(base_config)


@pytest.fixture
def generator(config: dict) -> SyntheticDataGenerator:
    return SyntheticDataGenerator(config, random_state=7)


@pytest.fixture
def sample(generator: SyntheticDataGenerator) -> pd.DataFrame:
    return generator.generate()


@pytest.fixture(scope="session")
def large_sample(base_config: dict) -> pd.DataFrame:
    return SyntheticDataGenerator(base_config, random_state=2024).generate(100_000)
