"""Tests for the synthetic customer generator."""

from __future__ import annotations

import pandas as pd
import pytest
from pydantic import ValidationError

from telecom_churn.data import (
    ContractType,
    CustomerRecord,
    InternetService,
    PaymentMethod,
    SyntheticDataGenerator,
)
from telecom_churn.data.schemas import RECORD_COLUMNS


def _frame(**overrides) -> pd.DataFrame:
    row = {
        "contract_type": ContractType.TWO_YEAR.value,
        "tenure_months": 30,
        "monthly_charge": 50.0,
        "internet_service": InternetService.DSL.value,
        "payment_method": PaymentMethod.CREDIT_CARD.value,
    }
    row.update(overrides)
    return pd.DataFrame([row])


# ── sample shape ─────────────────────────────────────────────────────────────


def test_default_sample_has_configured_size(sample: pd.DataFrame) -> None:
    assert len(sample) == 1000
    assert list(sample.columns) == RECORD_COLUMNS


def test_customer_ids_are_unique(sample: pd.DataFrame) -> None:
    assert sample["customer_id"].is_unique
    assert sample["customer_id"].iloc[0] == "C1"
    assert sample["customer_id"].iloc[-1] == "C1000"


def test_numeric_fields_within_bounds(large_sample: pd.DataFrame) -> None:
    assert large_sample["tenure_months"].between(1, 72).all()
    assert (large_sample["monthly_charge"] >= 20).all()
    assert (large_sample["monthly_charge"] < 120).all()
    assert (large_sample["total_charge"] >= 0).all()


def test_total_charge_covers_monthly_times_tenure(sample: pd.DataFrame) -> None:
    floor = sample["monthly_charge"] * sample["tenure_months"]
    # Noise is non-negative; allow for rounding of both charges
    assert (sample["total_charge"] >= floor - sample["tenure_months"] * 0.01).all()
    assert (sample["total_charge"] < floor + 500 + sample["tenure_months"] * 0.02).all()


def test_categorical_fields_use_fixed_enumerations(large_sample: pd.DataFrame) -> None:
    assert set(large_sample["internet_service"]) == {s.value for s in InternetService}
    assert set(large_sample["contract_type"]) == {c.value for c in ContractType}
    assert set(large_sample["payment_method"]) == {p.value for p in PaymentMethod}


def test_flag_rates_match_configured_probabilities(large_sample: pd.DataFrame) -> None:
    expected = {
        "senior_citizen": 0.15,
        "has_partner": 0.5,
        "has_dependents": 0.3,
        "has_tech_support": 0.5,
        "has_online_security": 0.5,
    }
    for column, p in expected.items():
        assert large_sample[column].mean() == pytest.approx(p, abs=0.01)


def test_seeded_generators_are_reproducible(config: dict) -> None:
    first = SyntheticDataGenerator(config, random_state=11).generate(200)
    second = SyntheticDataGenerator(config, random_state=11).generate(200)
    pd.testing.assert_frame_equal(first, second)


def test_rounding_keeps_charges_inside_narrow_range(config: dict) -> None:
    config["ranges"]["monthly_charge_min"] = 119.985
    df = SyntheticDataGenerator(config, random_state=3).generate(500)
    assert (df["monthly_charge"] >= 119.985).all()
    assert (df["monthly_charge"] < 120).all()
    assert set(df["monthly_charge"]) == {119.99}


def test_rounding_respects_lower_charge_bound(config: dict) -> None:
    config["ranges"]["monthly_charge_min"] = 50.004
    config["ranges"]["monthly_charge_max"] = 50.03
    df = SyntheticDataGenerator(config, random_state=3).generate(500)
    assert (df["monthly_charge"] >= 50.004).all()
    assert set(df["monthly_charge"]) <= {50.01, 50.02}


def test_custom_ranges_produce_valid_records(config: dict) -> None:
    config["ranges"].update(tenure_min=6, tenure_max=24, monthly_charge_min=30.0, monthly_charge_max=60.0)
    records = SyntheticDataGenerator(config, random_state=9).generate_records(300)
    assert all(6 <= r.tenure_months <= 24 for r in records)
    assert all(30 <= r.monthly_charge < 60 for r in records)


# ── churn heuristic ──────────────────────────────────────────────────────────


def test_probability_base_rate_when_no_predicate_matches(generator: SyntheticDataGenerator) -> None:
    prob = generator.churn_probability(_frame())
    assert prob.iloc[0] == pytest.approx(0.10)


def test_probability_stacks_all_increments(generator: SyntheticDataGenerator) -> None:
    df = _frame(
        contract_type=ContractType.MONTH_TO_MONTH.value,
        tenure_months=5,
        monthly_charge=95.0,
        internet_service=InternetService.FIBER_OPTIC.value,
        payment_method=PaymentMethod.ELECTRONIC_CHECK.value,
    )
    assert generator.churn_probability(df).iloc[0] == pytest.approx(0.95)


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"contract_type": "Month-to-month"}, 0.40),
        ({"tenure_months": 11}, 0.30),
        ({"tenure_months": 12}, 0.10),
        ({"monthly_charge": 80.0}, 0.10),
        ({"monthly_charge": 80.01}, 0.25),
        ({"internet_service": "Fiber optic"}, 0.20),
        ({"payment_method": "Electronic check"}, 0.20),
    ],
)
def test_each_predicate_adds_its_increment(
    generator: SyntheticDataGenerator, overrides: dict, expected: float
) -> None:
    assert generator.churn_probability(_frame(**overrides)).iloc[0] == pytest.approx(expected)


def test_probability_is_clamped_to_one(config: dict) -> None:
    config["churn_model"]["base_rate"] = 0.9
    generator = SyntheticDataGenerator(config, random_state=1)
    prob = generator.churn_probability(_frame(contract_type="Month-to-month", tenure_months=2))
    assert prob.iloc[0] == 1.0


def test_probability_unclamped_when_disabled(config: dict) -> None:
    config["churn_model"]["base_rate"] = 0.9
    config["data"]["clamp_probability"] = False
    generator = SyntheticDataGenerator(config, random_state=1)
    prob = generator.churn_probability(_frame(contract_type="Month-to-month"))
    assert prob.iloc[0] == pytest.approx(1.2)


def test_month_to_month_churns_more_than_two_year(large_sample: pd.DataFrame) -> None:
    rates = large_sample.groupby("contract_type")["churned"].mean()
    gap = rates[ContractType.MONTH_TO_MONTH.value] - rates[ContractType.TWO_YEAR.value]
    assert 0.25 < gap < 0.35


def test_short_tenure_churns_more_than_long_tenure(large_sample: pd.DataFrame) -> None:
    short = large_sample.loc[large_sample["tenure_months"] < 12, "churned"].mean()
    long = large_sample.loc[large_sample["tenure_months"] >= 49, "churned"].mean()
    assert short - long > 0.15


# ── records ──────────────────────────────────────────────────────────────────


def test_generate_records_returns_frozen_models(generator: SyntheticDataGenerator) -> None:
    records = generator.generate_records(25)
    assert len(records) == 25
    assert all(isinstance(r, CustomerRecord) for r in records)
    assert isinstance(records[0].contract_type, ContractType)

    with pytest.raises(ValidationError):
        records[0].churned = not records[0].churned


def test_record_rejects_out_of_range_tenure() -> None:
    with pytest.raises(ValidationError):
        CustomerRecord(
            customer_id="C1",
            tenure_months=73,
            monthly_charge=50.0,
            total_charge=100.0,
            internet_service="DSL",
            contract_type="One year",
            payment_method="Mailed check",
        )


# ── configuration errors ─────────────────────────────────────────────────────


def test_non_positive_record_count_rejected(config: dict) -> None:
    config["data"]["n_records"] = 0
    with pytest.raises(ValueError, match="n_records"):
        SyntheticDataGenerator(config)


def test_flag_probability_out_of_range_rejected(config: dict) -> None:
    config["flags"]["senior_citizen"] = 1.5
    with pytest.raises(ValueError, match="senior_citizen"):
        SyntheticDataGenerator(config)


@pytest.mark.parametrize(
    "overrides",
    [
        {"tenure_max": 96},
        {"tenure_min": 0},
        {"tenure_min": 30, "tenure_max": 20},
    ],
)
def test_tenure_range_outside_record_bounds_rejected(config: dict, overrides: dict) -> None:
    config["ranges"].update(overrides)
    with pytest.raises(ValueError, match="tenure range"):
        SyntheticDataGenerator(config)


@pytest.mark.parametrize(
    "overrides",
    [
        {"monthly_charge_max": 150.0},
        {"monthly_charge_min": 10.0},
        {"monthly_charge_min": 90.0, "monthly_charge_max": 90.0},
    ],
)
def test_monthly_range_outside_record_bounds_rejected(config: dict, overrides: dict) -> None:
    config["ranges"].update(overrides)
    with pytest.raises(ValueError, match="monthly charge range"):
        SyntheticDataGenerator(config)


def test_monthly_range_without_whole_cent_rejected(config: dict) -> None:
    config["ranges"]["monthly_charge_min"] = 119.995
    with pytest.raises(ValueError, match="no whole-cent value"):
        SyntheticDataGenerator(config)


def test_generate_rejects_negative_size(generator: SyntheticDataGenerator) -> None:
    with pytest.raises(ValueError):
        generator.generate(-5)
