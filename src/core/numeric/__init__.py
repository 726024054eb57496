"""
Core numeric modules для bounded numeric input

Разбор, сравнение, проверка диапазона, форматирование и шаг значения
с поддержкой больших чисел (строк цифр) без потери точности.
"""

# Normalizer
from src.core.numeric.normalizer import (
    normalize,
    settle_input,
    to_bound,
    to_numeric_value,
)

# Comparator
from src.core.numeric.comparator import compare, is_equal

# Range Validator
from src.core.numeric.range_validator import validate

# Formatter
from src.core.numeric.formatter import format_value, truncate_value

# Step Engine
from src.core.numeric.step_engine import can_add, can_reduce, step

__all__ = [
    # Normalizer
    "normalize",
    "settle_input",
    "to_bound",
    "to_numeric_value",
    # Comparator
    "compare",
    "is_equal",
    # Range Validator
    "validate",
    # Formatter
    "format_value",
    "truncate_value",
    # Step Engine
    "can_add",
    "can_reduce",
    "step",
]
