"""Data module for generating and profiling customer samples."""

from .generator import SyntheticDataGenerator, to_records
from .profiler import SampleProfiler
from .schemas import ContractType, CustomerRecord, InternetService, PaymentMethod

__all__ = [
    "SyntheticDataGenerator",
    "SampleProfiler",
    "CustomerRecord",
    "ContractType",
    "InternetService",
    "PaymentMethod",
    "to_records",
]
