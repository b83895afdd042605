"""Salary data sources."""

from .base import SalaryDataSource
from .json_file import JsonFileSalarySource
from .memory import InMemorySalarySource, sample_records

__all__ = [
    "InMemorySalarySource",
    "JsonFileSalarySource",
    "SalaryDataSource",
    "sample_records",
]
