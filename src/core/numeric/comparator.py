"""
Comparator — Сравнение чисел без потери точности

Два нативных числа сравниваются как float. Если хотя бы один операнд —
large number (или включён режим large_number), оба операнда приводятся к
DigitString и сравниваются поразрядно после выравнивания по точке.

Для любых значений в пределах точности float результат поразрядного
сравнения совпадает с нативным.

Порядок полный на всём NumericValue: пустое значение равно пустому и
меньше любого числа.
"""

from typing import Union

from src.core.domain.digit_string import NumericDomainError
from src.core.domain.values import EmptyValue, LargeNumberValue, NumberValue

Comparable = Union[EmptyValue, NumberValue, LargeNumberValue]


def compare(a: Comparable, b: Comparable, large_number: bool = False) -> int:
    """
    Сравнение двух значений.

    Args:
        a: Первое значение (EmptyValue, NumberValue или LargeNumberValue)
        b: Второе значение
        large_number: Принудительно сравнивать по строкам цифр

    Returns:
        -1 если a < b, 0 если равны, +1 если a > b

    Raises:
        NumericDomainError: Если операнд не является NumericValue
            (например, Unbounded граница)

    Examples:
        >>> compare(NumberValue(value=1.5), LargeNumberValue(digits="1.50"))
        0
        >>> compare(LargeNumberValue(digits="-10"), LargeNumberValue(digits="-9"))
        -1
        >>> compare(EmptyValue(), NumberValue(value=-1e300))
        -1
    """
    for operand in (a, b):
        if not isinstance(operand, (EmptyValue, NumberValue, LargeNumberValue)):
            raise NumericDomainError(
                f"cannot order {type(operand).__name__}, expected a numeric value"
            )

    a_empty = isinstance(a, EmptyValue)
    b_empty = isinstance(b, EmptyValue)
    if a_empty or b_empty:
        # Пустое значение меньше любого числа
        return b_empty - a_empty

    if not large_number and isinstance(a, NumberValue) and isinstance(b, NumberValue):
        return (a.value > b.value) - (a.value < b.value)

    return a.to_digit_string().compare(b.to_digit_string())


def is_equal(a: Comparable, b: Comparable, large_number: bool = False) -> bool:
    """Равенство по значению независимо от представления ("1.50" == 1.5)."""
    return compare(a, b, large_number) == 0
