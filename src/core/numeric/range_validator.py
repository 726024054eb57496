"""
Range Validator — Проверка значения на вхождение в [min, max]

Правила:
- Unbounded граница никогда не нарушается
- Пустое значение всегда OK (решение о пустоте принимает вызывающая сторона)
- При min > max и нарушении обеих границ приоритет у максимума
"""

from typing import Union

from src.core.domain.values import (
    UNBOUNDED,
    EmptyValue,
    LargeNumberValue,
    NumberValue,
    Unbounded,
    ValidationResult,
)
from src.core.numeric.comparator import compare

Value = Union[EmptyValue, NumberValue, LargeNumberValue]
BoundValue = Union[Unbounded, NumberValue, LargeNumberValue]


def validate(
    value: Value,
    min_bound: BoundValue = UNBOUNDED,
    max_bound: BoundValue = UNBOUNDED,
    large_number: bool = False,
) -> ValidationResult:
    """
    Проверка диапазона (обе границы включительно).

    Args:
        value: Проверяемое значение
        min_bound: Минимум
        max_bound: Максимум
        large_number: Сравнивать только по строкам цифр

    Returns:
        ValidationResult.OK / EXCEEDS_MAXIMUM / BELOW_MINIMUM

    Examples:
        >>> validate(NumberValue(value=5), NumberValue(value=10), NumberValue(value=1))
        <ValidationResult.EXCEEDS_MAXIMUM: 'exceed-maximum'>
    """
    if isinstance(value, EmptyValue):
        return ValidationResult.OK

    # Максимум проверяется первым: он побеждает при min > max
    if not isinstance(max_bound, Unbounded) and compare(value, max_bound, large_number) > 0:
        return ValidationResult.EXCEEDS_MAXIMUM

    if not isinstance(min_bound, Unbounded) and compare(value, min_bound, large_number) < 0:
        return ValidationResult.BELOW_MINIMUM

    return ValidationResult.OK
