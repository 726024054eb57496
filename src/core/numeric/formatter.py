"""
Formatter — Отображение значения с фиксированным числом знаков

Лишние дробные знаки отбрасываются (truncation), а не округляются:
1.239 при 2 знаках → "1.23". Нативные числа предварительно переводятся в
кратчайшую десятичную запись, поэтому артефакты binary float не влияют на
усечение. Экспоненциальная запись никогда не выводится.
"""

from typing import Union

from src.core.domain.values import (
    DisplayFormat,
    EmptyValue,
    LargeNumberValue,
    NumberValue,
)

Value = Union[EmptyValue, NumberValue, LargeNumberValue]

_DEFAULT_FORMAT = DisplayFormat()


def format_value(value: Value, fmt: DisplayFormat = _DEFAULT_FORMAT) -> str:
    """
    Текст для отображения.

    Args:
        value: Значение
        fmt: Формат (decimal_places=None — каноническая минимальная запись)

    Returns:
        Строка; "" для пустого значения

    Examples:
        >>> format_value(NumberValue(value=1.239), DisplayFormat(decimal_places=2))
        '1.23'
        >>> format_value(NumberValue(value=-1.999), DisplayFormat(decimal_places=1))
        '-1.9'
        >>> format_value(NumberValue(value=1e21))
        '1000000000000000000000'
    """
    if isinstance(value, EmptyValue):
        return ""

    digits = value.to_digit_string()
    if fmt.decimal_places is None:
        return str(digits)
    return digits.to_fixed(fmt.decimal_places)


def truncate_value(value: Value, fmt: DisplayFormat = _DEFAULT_FORMAT) -> Value:
    """
    Значение, которое фиксируется после форматирования (blur/enter).

    В режиме large_number (или для large number) результат — строка цифр,
    иначе нативное число.
    """
    if isinstance(value, EmptyValue):
        return value

    digits = value.to_digit_string()
    if fmt.decimal_places is not None:
        digits = digits.truncate(fmt.decimal_places)

    if fmt.large_number or isinstance(value, LargeNumberValue):
        return LargeNumberValue(digits=str(digits))
    return NumberValue(value=float(str(digits)))
