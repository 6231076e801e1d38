"""
Contract Validation Module

JSON Schema contract for application records read from storage.
"""

from .validators import (
    ApplicationValidator,
    ContractViolation,
    SchemaLoader,
)

__all__ = [
    "SchemaLoader",
    "ApplicationValidator",
    "ContractViolation",
]
