"""
Synthetic Data Generator
========================

Generates the in-session telecom customer sample with a hand-tuned,
additive churn heuristic.
"""

from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd
from loguru import logger

from config import get_config
from .schemas import (
    FLAG_COLUMNS,
    MONTHLY_CHARGE_BOUNDS,
    RECORD_COLUMNS,
    TENURE_BOUNDS,
    ContractType,
    CustomerRecord,
    InternetService,
    PaymentMethod,
)

DEFAULT_INCREMENTS = {
    "month_to_month": 0.30,
    "short_tenure": 0.20,
    "high_charge": 0.15,
    "fiber_optic": 0.10,
    "electronic_check": 0.10,
}

DEFAULT_FLAG_PROBABILITIES = {
    "senior_citizen": 0.15,
    "has_partner": 0.5,
    "has_dependents": 0.3,
    "has_tech_support": 0.5,
    "has_online_security": 0.5,
}


def ceil_cents(value: float) -> float:
    """Round a charge up to the next whole cent."""
    # Guard against 20.1 * 100 == 2010.0000000000002
    return float(np.ceil(round(value * 100, 6)) / 100)


class SyntheticDataGenerator:
    """Generate synthetic telecom customers for the churn walkthrough."""

    def __init__(self, config: Optional[dict] = None, random_state: Optional[int] = None):
        """
        Initialize SyntheticDataGenerator.

        Args:
            config: Configuration dictionary. If None, loads from config.yaml
            random_state: Seed overriding ``data.random_state``; None draws unseeded
        """
        self.config = config or get_config()
        self.data_config = self.config.get("data", {})
        churn_config = self.config.get("churn_model", {})
        ranges = self.config.get("ranges", {})

        self.n_records = self.data_config.get("n_records", 1000)
        self.id_prefix = self.data_config.get("id_prefix", "C")
        self.clamp_probability = self.data_config.get("clamp_probability", True)
        if random_state is None:
            random_state = self.data_config.get("random_state")
        self.random_state = random_state

        self.base_rate = churn_config.get("base_rate", 0.10)
        self.increments = {**DEFAULT_INCREMENTS, **churn_config.get("increments", {})}
        self.short_tenure_months = churn_config.get("short_tenure_months", 12)
        self.high_charge_threshold = churn_config.get("high_charge_threshold", 80.0)

        self.flag_probabilities = {**DEFAULT_FLAG_PROBABILITIES, **self.config.get("flags", {})}

        self.tenure_min = ranges.get("tenure_min", 1)
        self.tenure_max = ranges.get("tenure_max", 72)
        self.monthly_charge_min = ranges.get("monthly_charge_min", 20.0)
        self.monthly_charge_max = ranges.get("monthly_charge_max", 120.0)
        self.total_charge_noise = ranges.get("total_charge_noise", 500.0)

        # Smallest and largest two-decimal charges inside [min, max)
        self.charge_floor = ceil_cents(self.monthly_charge_min)
        self.charge_cap = round(ceil_cents(self.monthly_charge_max) - 0.01, 2)

        self._validate()
        self.rng = np.random.default_rng(self.random_state)

    def _validate(self):
        """Reject configurations that cannot produce a valid sample."""
        problems = []

        if not isinstance(self.n_records, int) or self.n_records <= 0:
            problems.append(f"n_records must be a positive integer, got {self.n_records!r}")

        if not 0 <= self.base_rate <= 1:
            problems.append(f"base_rate must be within [0, 1], got {self.base_rate}")

        for name, value in self.increments.items():
            if value < 0:
                problems.append(f"increment '{name}' must be non-negative, got {value}")

        for name, p in self.flag_probabilities.items():
            if not 0 <= p <= 1:
                problems.append(f"flag probability '{name}' must be within [0, 1], got {p}")

        tenure_lo, tenure_hi = TENURE_BOUNDS
        if (
            self.tenure_min < tenure_lo
            or self.tenure_max > tenure_hi
            or self.tenure_max < self.tenure_min
        ):
            problems.append(
                f"invalid tenure range [{self.tenure_min}, {self.tenure_max}], "
                f"must lie within [{tenure_lo}, {tenure_hi}]"
            )

        charge_lo, charge_hi = MONTHLY_CHARGE_BOUNDS
        if (
            self.monthly_charge_min < charge_lo
            or self.monthly_charge_max > charge_hi
            or self.monthly_charge_max <= self.monthly_charge_min
        ):
            problems.append(
                f"invalid monthly charge range [{self.monthly_charge_min}, {self.monthly_charge_max}), "
                f"must lie within [{charge_lo}, {charge_hi})"
            )
        elif self.charge_floor > self.charge_cap:
            problems.append(
                f"monthly charge range [{self.monthly_charge_min}, {self.monthly_charge_max}) "
                "holds no whole-cent value"
            )

        if self.total_charge_noise < 0:
            problems.append(f"total_charge_noise must be non-negative, got {self.total_charge_noise}")

        if problems:
            for problem in problems:
                logger.error(problem)
            raise ValueError("Invalid generator configuration: " + "; ".join(problems))

    def churn_probability(self, df: pd.DataFrame) -> pd.Series:
        """
        Compute the additive churn probability for each customer.

        The comparison on monthly charge uses whatever precision the frame
        carries, so callers pass the raw draw when they have it.

        Args:
            df: DataFrame with contract_type, tenure_months, monthly_charge,
                internet_service and payment_method columns

        Returns:
            Series of churn probabilities aligned with ``df``
        """
        prob = pd.Series(self.base_rate, index=df.index, dtype=float)

        prob += (df["contract_type"] == ContractType.MONTH_TO_MONTH.value) * self.increments["month_to_month"]
        prob += (df["tenure_months"] < self.short_tenure_months) * self.increments["short_tenure"]
        prob += (df["monthly_charge"] > self.high_charge_threshold) * self.increments["high_charge"]
        prob += (df["internet_service"] == InternetService.FIBER_OPTIC.value) * self.increments["fiber_optic"]
        prob += (df["payment_method"] == PaymentMethod.ELECTRONIC_CHECK.value) * self.increments["electronic_check"]

        if self.clamp_probability:
            prob = prob.clip(upper=1.0)

        return prob

    def _draw_flags(self, n: int) -> Dict[str, np.ndarray]:
        """Draw independent Bernoulli flags."""
        return {
            name: self.rng.random(n) < self.flag_probabilities[name]
            for name in FLAG_COLUMNS
        }

    def generate(self, n_records: Optional[int] = None) -> pd.DataFrame:
        """
        Generate a synthetic customer sample.

        Args:
            n_records: Number of customers. Defaults to ``data.n_records``

        Returns:
            DataFrame with one row per customer in RECORD_COLUMNS order
        """
        n = n_records if n_records is not None else self.n_records
        if not isinstance(n, (int, np.integer)) or n <= 0:
            logger.error(f"Cannot generate {n!r} records")
            raise ValueError(f"n_records must be a positive integer, got {n!r}")

        logger.info(f"Generating {n} synthetic customers...")

        tenure = self.rng.integers(self.tenure_min, self.tenure_max + 1, size=n)
        monthly = self.rng.uniform(self.monthly_charge_min, self.monthly_charge_max, size=n)
        total = monthly * tenure + self.rng.uniform(0, self.total_charge_noise, size=n)

        internet = self.rng.choice([s.value for s in InternetService], size=n)
        contract = self.rng.choice([c.value for c in ContractType], size=n)
        payment = self.rng.choice([p.value for p in PaymentMethod], size=n)
        flags = self._draw_flags(n)

        df = pd.DataFrame({
            "customer_id": [f"{self.id_prefix}{i + 1}" for i in range(n)],
            "tenure_months": tenure.astype(int),
            "monthly_charge": monthly,
            "total_charge": np.round(total, 2),
            "internet_service": internet,
            "contract_type": contract,
            "payment_method": payment,
            **flags,
        })

        # Heuristic sees the unrounded charge
        prob = self.churn_probability(df)
        df["churned"] = self.rng.random(n) < prob.to_numpy()

        # Rounding must keep a draw inside [min, max)
        df["monthly_charge"] = np.clip(np.round(monthly, 2), self.charge_floor, self.charge_cap)

        df = df[RECORD_COLUMNS]
        logger.info(f"Generated {len(df)} customers, churn rate {df['churned'].mean():.1%}")
        return df

    def generate_records(self, n_records: Optional[int] = None) -> Tuple[CustomerRecord, ...]:
        """
        Generate a synthetic sample as immutable records.

        Args:
            n_records: Number of customers. Defaults to ``data.n_records``

        Returns:
            Tuple of frozen CustomerRecord models
        """
        return to_records(self.generate(n_records))


def to_records(df: pd.DataFrame) -> Tuple[CustomerRecord, ...]:
    """Convert a generated sample frame into validated records."""
    return tuple(
        CustomerRecord.model_validate(row)
        for row in df[RECORD_COLUMNS].to_dict(orient="records")
    )
