"""
Sample Profiler Module
======================

Descriptive statistics over a generated customer sample.
"""

from typing import Dict, List

import numpy as np
import pandas as pd
from loguru import logger

from .schemas import ContractType, InternetService

TENURE_BINS = [0, 12, 24, 36, 48, float("inf")]
TENURE_LABELS = ["0-12", "13-24", "25-36", "37-48", "49+"]


class SampleProfiler:
    """Summarise churn behaviour of a customer sample."""

    def __init__(self, df: pd.DataFrame):
        """
        Initialize SampleProfiler.

        Args:
            df: Sample produced by SyntheticDataGenerator
        """
        self.df = df

    def summary(self) -> Dict[str, float]:
        """
        Headline numbers for the sample.

        Returns:
            Dictionary with record count, churn rate, mean tenure and mean monthly charge
        """
        if self.df.empty:
            return {
                "n_records": 0,
                "churn_rate": 0.0,
                "mean_tenure": 0.0,
                "mean_monthly_charge": 0.0,
            }

        return {
            "n_records": int(len(self.df)),
            "churn_rate": float(self.df["churned"].mean()),
            "mean_tenure": float(self.df["tenure_months"].mean()),
            "mean_monthly_charge": float(self.df["monthly_charge"].mean()),
        }

    def churn_by_contract(self) -> pd.DataFrame:
        """
        Churn and retention percentages per contract type.

        Returns:
            DataFrame with columns contract, churn, no_churn (percent)
        """
        order = [c.value for c in ContractType]
        rates = (
            self.df.groupby("contract_type")["churned"]
            .mean()
            .reindex(order)
            .fillna(0.0)
            * 100
        )

        return pd.DataFrame({
            "contract": order,
            "churn": rates.round(1).to_numpy(),
            "no_churn": (100 - rates).round(1).to_numpy(),
        })

    def churn_by_tenure(self) -> pd.DataFrame:
        """
        Churn rate per tenure bucket.

        Returns:
            DataFrame with columns tenure, churn_rate (percent)
        """
        buckets = pd.cut(
            self.df["tenure_months"],
            bins=TENURE_BINS,
            labels=TENURE_LABELS
        )
        rates = (
            self.df.groupby(buckets, observed=False)["churned"]
            .mean()
            .reindex(TENURE_LABELS)
            .fillna(0.0)
            * 100
        )

        return pd.DataFrame({
            "tenure": TENURE_LABELS,
            "churn_rate": rates.round(1).to_numpy(),
        })

    def correlations(self) -> pd.DataFrame:
        """
        Pearson correlation of selected variables with churn.

        Returns:
            DataFrame with columns variable, churn
        """
        churned = self.df["churned"].astype(float)
        variables = {
            "Tenure": self.df["tenure_months"].astype(float),
            "Monthly Charges": self.df["monthly_charge"].astype(float),
            "Total Charges": self.df["total_charge"].astype(float),
            "Contract (Month-to-month)": (
                self.df["contract_type"] == ContractType.MONTH_TO_MONTH.value
            ).astype(float),
            "Fiber Optic": (
                self.df["internet_service"] == InternetService.FIBER_OPTIC.value
            ).astype(float),
        }

        rows: List[Dict] = []
        for name, values in variables.items():
            r = values.corr(churned)
            rows.append({"variable": name, "churn": 0.0 if np.isnan(r) else round(float(r), 3)})

        logger.debug(f"Computed {len(rows)} churn correlations")
        return pd.DataFrame(rows)
