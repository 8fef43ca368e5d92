"""
Contract Validation Module

Модуль для валидации JSON контрактов rangecheck.
"""

from .validators import (
    ContractValidator,
    RangeReportValidator,
    SchemaLoader,
    validate_range_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RangeReportValidator",
    # Functions
    "validate_range_report",
]
