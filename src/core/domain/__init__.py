"""
Domain models and value objects.

Contains the numeric value types shared by the engine: DigitString,
the NumericValue/Bound tagged unions and per-call configurations.
"""

from src.core.domain.digit_string import (
    MAX_SAFE_SIGNIFICANT_DIGITS,
    DigitString,
    NumericDomainError,
)
from src.core.domain.values import (
    EMPTY,
    UNBOUNDED,
    Bound,
    DisplayFormat,
    EmptyValue,
    LargeNumberValue,
    NormalizeResult,
    NormalizeStatus,
    NumberValue,
    NumericValue,
    StepConfig,
    StepDirection,
    StepMagnitude,
    Unbounded,
    ValidationResult,
)

__all__ = [
    # Digit string
    "MAX_SAFE_SIGNIFICANT_DIGITS",
    "DigitString",
    "NumericDomainError",
    # Value variants
    "EMPTY",
    "UNBOUNDED",
    "EmptyValue",
    "NumberValue",
    "LargeNumberValue",
    "Unbounded",
    "NumericValue",
    "Bound",
    "StepMagnitude",
    # Configurations
    "DisplayFormat",
    "StepConfig",
    "StepDirection",
    # Results
    "NormalizeResult",
    "NormalizeStatus",
    "ValidationResult",
]
