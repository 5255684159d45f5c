"""
Customer Record Schemas
=======================

Pydantic models and enumerations for synthetic telecom customers.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InternetService(str, Enum):
    """Internet service subscribed by the customer."""

    DSL = "DSL"
    FIBER_OPTIC = "Fiber optic"
    NONE = "No"


class ContractType(str, Enum):
    """Contract length."""

    MONTH_TO_MONTH = "Month-to-month"
    ONE_YEAR = "One year"
    TWO_YEAR = "Two year"


class PaymentMethod(str, Enum):
    """Billing payment method."""

    ELECTRONIC_CHECK = "Electronic check"
    MAILED_CHECK = "Mailed check"
    BANK_TRANSFER = "Bank transfer"
    CREDIT_CARD = "Credit card"


# Column order of a generated sample
RECORD_COLUMNS = [
    "customer_id",
    "tenure_months",
    "monthly_charge",
    "total_charge",
    "internet_service",
    "contract_type",
    "payment_method",
    "senior_citizen",
    "has_partner",
    "has_dependents",
    "has_tech_support",
    "has_online_security",
    "churned",
]

FLAG_COLUMNS = [
    "senior_citizen",
    "has_partner",
    "has_dependents",
    "has_tech_support",
    "has_online_security",
]

# Bounds every generated record must respect
TENURE_BOUNDS = (1, 72)
MONTHLY_CHARGE_BOUNDS = (20.0, 120.0)


class CustomerRecord(BaseModel):
    """Schema for a single synthetic customer."""

    model_config = ConfigDict(frozen=True)

    customer_id: str = Field(..., min_length=1, description="Opaque customer identifier")
    tenure_months: int = Field(
        ...,
        ge=TENURE_BOUNDS[0],
        le=TENURE_BOUNDS[1],
        description="Months the customer has held service"
    )
    monthly_charge: float = Field(
        ...,
        ge=MONTHLY_CHARGE_BOUNDS[0],
        lt=MONTHLY_CHARGE_BOUNDS[1],
        description="Monthly bill"
    )
    total_charge: float = Field(..., ge=0, description="Accumulated charges")
    internet_service: InternetService
    contract_type: ContractType
    payment_method: PaymentMethod
    senior_citizen: bool = False
    has_partner: bool = False
    has_dependents: bool = False
    has_tech_support: bool = False
    has_online_security: bool = False
    churned: bool = False

    @field_validator("monthly_charge", "total_charge")
    @classmethod
    def validate_two_decimals(cls, v):
        if round(v, 2) != v:
            raise ValueError("Charges must be rounded to 2 decimals")
        return v
