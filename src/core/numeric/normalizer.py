"""
Normalizer — Разбор пользовательского текста в числовое значение

Модуль превращает набранный текст в NumericValue:
- Полное число → NormalizeResult.ok(value)
- Префикс числа ("-", "1.", "2e") → NormalizeResult.incomplete()
- Мусор → NormalizeResult.malformed()

Пользовательский ввод никогда не вызывает исключений. Исключения
(NumericDomainError) возможны только для конфигурации вызывающей стороны
в to_numeric_value/to_bound.
"""

import logging
import math
import re
from typing import Final, Optional, Union

from src.core.domain.digit_string import (
    MAX_SAFE_SIGNIFICANT_DIGITS,
    DigitString,
    NumericDomainError,
)
from src.core.domain.values import (
    EMPTY,
    UNBOUNDED,
    EmptyValue,
    LargeNumberValue,
    NormalizeResult,
    NumberValue,
    Unbounded,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Полное число без экспоненты ("1." считается незавершённым и отсекается раньше)
_PLAIN_NUMBER: Final[re.Pattern[str]] = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")

# Полное число с необязательной экспонентой
_SCIENTIFIC_NUMBER: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
)

# Голый знак и/или голая точка: "-", "+", ".", "-."
_BARE_PREFIX: Final[re.Pattern[str]] = re.compile(r"^[+-]?\.?$")

# Точка в конце: "1.", "-12."
_TRAILING_POINT: Final[re.Pattern[str]] = re.compile(r"^[+-]?[0-9]+\.$")

# Маркер экспоненты без цифр: "2e", "1.5E-"
_TRAILING_EXPONENT: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)[eE][+-]?$"
)

# Хвост незавершённого ввода, отбрасываемый при settle_input
_INCOMPLETE_TAIL: Final[re.Pattern[str]] = re.compile(r"(?:[eE][+-]?|[.+-])$")

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")

RawNumber = Union[int, float, str, None]
Value = Union[EmptyValue, NumberValue, LargeNumberValue]


# =============================================================================
# NORMALIZE
# =============================================================================


def normalize(text: str, large_number: bool = False) -> NormalizeResult:
    """
    Разбор набранного текста.

    Правила:
    - Пустая строка → OK(Empty)
    - Пробелы, две точки, второй знак, буквы кроме одной экспоненты,
      ведущие "00" → MALFORMED
    - Голый знак, голая точка, точка в конце, экспонента без цифр → INCOMPLETE
    - В режиме large_number экспонента запрещена (MALFORMED)
    - Вне large_number простая запись длиннее MAX_SAFE_SIGNIFICANT_DIGITS
      значащих цифр становится LargeNumberValue

    Args:
        text: Набранный текст
        large_number: Режим больших чисел

    Returns:
        NormalizeResult

    Examples:
        >>> normalize("-").is_incomplete
        True
        >>> normalize("1.5").value
        NumberValue(kind='number', value=1.5)
        >>> normalize("1..5").is_malformed
        True
    """
    if text == "":
        return NormalizeResult.ok(EMPTY)

    if _WHITESPACE.search(text):
        return NormalizeResult.malformed()

    # Два нуля подряд в начале целой части не допускаются
    if text.lstrip("+-")[:2] == "00":
        return NormalizeResult.malformed()

    if _BARE_PREFIX.fullmatch(text) or _TRAILING_POINT.fullmatch(text):
        return NormalizeResult.incomplete()

    if large_number:
        if not _PLAIN_NUMBER.fullmatch(text):
            return NormalizeResult.malformed()
        return NormalizeResult.ok(LargeNumberValue(digits=text))

    if _TRAILING_EXPONENT.fullmatch(text):
        return NormalizeResult.incomplete()

    if not _SCIENTIFIC_NUMBER.fullmatch(text):
        return NormalizeResult.malformed()

    if _PLAIN_NUMBER.fullmatch(text):
        digits = DigitString.parse(text)
        if digits.significant_digits > MAX_SAFE_SIGNIFICANT_DIGITS:
            return NormalizeResult.ok(LargeNumberValue(digits=str(digits)))

    value = float(text)
    if not math.isfinite(value):
        return NormalizeResult.malformed()
    return NormalizeResult.ok(NumberValue(value=value))


def settle_input(text: str, large_number: bool = False) -> Optional[Value]:
    """
    Значение, в которое превращается незавершённый ввод при потере фокуса.

    Хвост незавершённого ввода отбрасывается до получения полного числа:
    "1." → 1, "2e-" → 2, "-" → Empty.

    Returns:
        Значение или None для мусорного текста
    """
    candidate = text
    while True:
        result = normalize(candidate, large_number)
        if result.is_ok:
            return result.value
        if result.is_malformed:
            return None

        trimmed = _INCOMPLETE_TAIL.sub("", candidate)
        if trimmed == candidate:
            return EMPTY
        candidate = trimmed


# =============================================================================
# КОНВЕРСИЯ КОНФИГУРАЦИИ
# =============================================================================


def to_numeric_value(raw: RawNumber, large_number: bool = False) -> Value:
    """
    Конверсия значения из конфигурации (число или строка) в NumericValue.

    Args:
        raw: int, float, str или None
        large_number: Режим больших чисел

    Returns:
        EmptyValue для None и "", иначе NumberValue/LargeNumberValue

    Raises:
        NumericDomainError: Для bool, NaN/Inf и неразбираемых строк
    """
    if raw is None or raw == "":
        return EMPTY

    if isinstance(raw, bool):
        raise NumericDomainError(f"boolean is not a numeric value: {raw!r}")

    if isinstance(raw, int):
        digits = DigitString.parse(str(raw))
        if large_number or digits.significant_digits > MAX_SAFE_SIGNIFICANT_DIGITS:
            return LargeNumberValue(digits=str(digits))
        return NumberValue(value=float(raw))

    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise NumericDomainError(f"value must be finite, got {raw}")
        if large_number:
            logger.warning(
                f"large_number value should be a string, got float {raw!r}; "
                f"precision beyond {MAX_SAFE_SIGNIFICANT_DIGITS} digits may already be lost"
            )
            return LargeNumberValue(digits=str(DigitString.from_float(raw)))
        return NumberValue(value=raw)

    if isinstance(raw, str):
        result = normalize(raw, large_number)
        if not result.is_ok:
            raise NumericDomainError(
                f"invalid numeric value {raw!r} ({result.status.value})"
            )
        return result.value

    raise NumericDomainError(f"unsupported numeric type: {type(raw).__name__}")


def to_bound(
    raw: RawNumber, large_number: bool = False
) -> Union[Unbounded, NumberValue, LargeNumberValue]:
    """
    Конверсия границы из конфигурации.

    None, "" и ±inf означают отсутствие границы.

    Raises:
        NumericDomainError: Для NaN и неразбираемых строк
    """
    if isinstance(raw, float) and math.isinf(raw):
        return UNBOUNDED

    value = to_numeric_value(raw, large_number)
    if isinstance(value, EmptyValue):
        return UNBOUNDED
    return value
