"""
Step Engine — Шаг вверх/вниз с ограничением диапазоном

Алгоритм одного шага:
1. Пустое значение: add начинается с min, reduce — с max (если граница
   задана); иначе шаг отсчитывается от нуля
2. candidate = current ± step, всегда точно по строкам цифр DigitString
   - large number: результат — строка цифр
   - иначе: результат — float (0.1 + 0.2 → 0.3), если float хранит его без
     потерь; больше 15 значащих цифр или выход за пределы float
     переводят результат в large number
3. Ограничение [min, max]: результат на границе равен самой границе

Движок не отказывается считать: доступность направления проверяется
предикатами can_add/can_reduce. На границе шаг идемпотентен.
"""

import logging
import math
from typing import Union

from src.core.domain.digit_string import MAX_SAFE_SIGNIFICANT_DIGITS, DigitString
from src.core.domain.values import (
    EmptyValue,
    LargeNumberValue,
    NumberValue,
    StepConfig,
    StepDirection,
    Unbounded,
)
from src.core.numeric.comparator import compare

logger = logging.getLogger(__name__)

Value = Union[EmptyValue, NumberValue, LargeNumberValue]
Number = Union[NumberValue, LargeNumberValue]
BoundValue = Union[Unbounded, NumberValue, LargeNumberValue]


# =============================================================================
# STEP
# =============================================================================


def step(cfg: StepConfig) -> Number:
    """
    Значение после одного шага.

    Args:
        cfg: Параметры шага

    Returns:
        Новое значение (LargeNumberValue в режиме больших чисел, а также
        когда float не может хранить результат без потерь)

    Examples:
        >>> step(StepConfig(
        ...     step=NumberValue(value=1),
        ...     direction=StepDirection.ADD,
        ...     current_value=LargeNumberValue(digits="99999999999999999"),
        ... ))
        LargeNumberValue(kind='large', digits='100000000000000000')
    """
    large = _is_large_mode(cfg)

    if isinstance(cfg.current_value, EmptyValue):
        start = cfg.min_bound if cfg.direction is StepDirection.ADD else cfg.max_bound
        if not isinstance(start, Unbounded):
            return _clamp(_in_mode(start, large), cfg.min_bound, cfg.max_bound, large)
        current = _zero(large)
    else:
        current = _in_mode(cfg.current_value, large)

    if large:
        candidate = _advance_digits(current, cfg.step, cfg.direction)
    else:
        candidate = _advance_native(current, cfg.step, cfg.direction)

    return _clamp(candidate, cfg.min_bound, cfg.max_bound, large)


def can_add(value: Value, max_bound: BoundValue, large_number: bool = False) -> bool:
    """Доступен ли шаг вверх: значение строго меньше максимума."""
    if isinstance(value, EmptyValue) or isinstance(max_bound, Unbounded):
        return True
    return compare(value, max_bound, large_number) < 0


def can_reduce(value: Value, min_bound: BoundValue, large_number: bool = False) -> bool:
    """Доступен ли шаг вниз: значение строго больше минимума."""
    if isinstance(value, EmptyValue) or isinstance(min_bound, Unbounded):
        return True
    return compare(value, min_bound, large_number) > 0


# =============================================================================
# ВНУТРЕННИЕ ФУНКЦИИ
# =============================================================================


def _is_large_mode(cfg: StepConfig) -> bool:
    operands = (cfg.step, cfg.current_value, cfg.min_bound, cfg.max_bound)
    return cfg.large_number or any(isinstance(x, LargeNumberValue) for x in operands)


def _zero(large: bool) -> Number:
    if large:
        return LargeNumberValue(digits="0")
    return NumberValue(value=0.0)


def _in_mode(value: Number, large: bool) -> Number:
    """Приведение к представлению активного режима."""
    if large and isinstance(value, NumberValue):
        return LargeNumberValue(digits=str(value.to_digit_string()))
    return value


def _exact_result(current: Number, step_size: Number, direction: StepDirection) -> DigitString:
    digits = current.to_digit_string()
    delta = step_size.to_digit_string()
    if direction is StepDirection.ADD:
        return digits.add(delta)
    return digits.subtract(delta)


def _advance_digits(current: Number, step_size: Number, direction: StepDirection) -> Number:
    return LargeNumberValue(digits=str(_exact_result(current, step_size, direction)))


def _advance_native(current: NumberValue, step_size: NumberValue, direction: StepDirection) -> Number:
    """
    Нативный шаг: точная сумма по строкам цифр, затем float.

    Результат остаётся NumberValue, только если float воспроизводит сумму
    без потерь (не более MAX_SAFE_SIGNIFICANT_DIGITS значащих цифр,
    finite, обратимая запись). Иначе значение переходит в LargeNumberValue.
    """
    exact = _exact_result(current, step_size, direction)

    if exact.significant_digits <= MAX_SAFE_SIGNIFICANT_DIGITS:
        value = float(str(exact))
        if math.isfinite(value) and DigitString.from_float(value).compare(exact) == 0:
            return NumberValue(value=value)

    logger.debug(
        f"step result {exact} is not representable as float, promoted to large number"
    )
    return LargeNumberValue(digits=str(exact))


def _clamp(candidate: Number, min_bound: BoundValue, max_bound: BoundValue, large: bool) -> Number:
    """Ограничение диапазоном; при min > max побеждает максимум."""
    if not isinstance(max_bound, Unbounded) and compare(candidate, max_bound, large) > 0:
        return _in_mode(max_bound, large)
    if not isinstance(min_bound, Unbounded) and compare(candidate, min_bound, large) < 0:
        return _in_mode(min_bound, large)
    return candidate
