"""
DigitString — Десятичное число как строка цифр

Value object для больших чисел (large number), которые нельзя точно
представить через binary float:
- Каноническое представление: знак, целая часть, дробная часть
- Выравнивание по десятичной точке с дополнением нулями
- Лексикографическое сравнение выровненных цифр
- Поразрядное сложение/вычитание с переносом (carry/borrow)
- Усечение дробной части (truncation, без округления)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целая часть без ведущих нулей ("0" для нуля)
2. Дробная часть без хвостовых нулей
3. Ноль всегда неотрицательный ("-0" == "0")
4. Никаких преобразований через float внутри арифметики
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Порог точности double: больше значащих цифр → large number
MAX_SAFE_SIGNIFICANT_DIGITS: Final[int] = 15

# Простая десятичная запись без экспоненты
_PLAIN_DECIMAL: Final[re.Pattern[str]] = re.compile(
    r"^(?P<sign>[+-]?)(?P<integer>[0-9]*)(?:\.(?P<fraction>[0-9]*))?$"
)


class NumericDomainError(ValueError):
    """
    Нарушение domain числового ядра.

    Ошибка программы или конфигурации (не пользовательского ввода):
    невалидная строка large number, не-finite float, сравнение пустого
    значения, нулевой или отрицательный шаг.
    """

    pass


# =============================================================================
# DIGIT STRING
# =============================================================================


@dataclass(frozen=True)
class DigitString:
    """
    Каноническое десятичное число: (negative, integer, fraction).

    Создаётся только через parse/from_float/of, которые гарантируют
    канонический вид. Все операции возвращают новый экземпляр.

    Examples:
        >>> str(DigitString.parse("-007.500"))
        '-7.5'
        >>> str(DigitString.parse("99999999999999999").add(DigitString.parse("1")))
        '100000000000000000'
    """

    negative: bool
    integer: str
    fraction: str

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, negative: bool, integer: str, fraction: str) -> "DigitString":
        """Канонизация произвольной тройки (ведущие/хвостовые нули, знак нуля)."""
        integer = integer.lstrip("0") or "0"
        fraction = fraction.rstrip("0")
        if integer == "0" and not fraction:
            negative = False
        return cls(negative=negative, integer=integer, fraction=fraction)

    @classmethod
    def parse(cls, text: str) -> "DigitString":
        """
        Разбор простой десятичной записи.

        Допускается знак, цифры и не более одной точки. Экспонента не
        допускается: большие числа — только последовательности цифр.

        Args:
            text: Строка вида "-123.45", "+.5", "7."

        Returns:
            Канонический DigitString

        Raises:
            NumericDomainError: Если строка не является десятичным числом
        """
        match = _PLAIN_DECIMAL.fullmatch(text)
        if match is None:
            raise NumericDomainError(f"not a plain decimal number: {text!r}")

        integer = match.group("integer")
        fraction = match.group("fraction") or ""
        if not integer and not fraction:
            raise NumericDomainError(f"no digits in {text!r}")

        return cls.of(match.group("sign") == "-", integer, fraction)

    @classmethod
    def from_float(cls, value: float) -> "DigitString":
        """
        Конверсия float → DigitString через кратчайший round-trip repr.

        repr(float) даёт минимальную запись, однозначно задающую число;
        Decimal раскрывает экспоненту в обычные цифры без потери знаков.

        Raises:
            NumericDomainError: Для NaN/Inf
        """
        if not math.isfinite(value):
            raise NumericDomainError(f"value must be finite, got {value}")
        return cls.parse(format(Decimal(repr(float(value))), "f"))

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        if self.fraction:
            return f"{sign}{self.integer}.{self.fraction}"
        return f"{sign}{self.integer}"

    @property
    def is_zero(self) -> bool:
        return self.integer == "0" and not self.fraction

    @property
    def decimal_places(self) -> int:
        return len(self.fraction)

    @property
    def significant_digits(self) -> int:
        """Количество значащих цифр (без ведущих и хвостовых нулей)."""
        return len((self.integer + self.fraction).strip("0"))

    def negated(self) -> "DigitString":
        return DigitString.of(not self.negative, self.integer, self.fraction)

    def absolute(self) -> "DigitString":
        return DigitString.of(False, self.integer, self.fraction)

    # -------------------------------------------------------------------------
    # Выравнивание и сравнение
    # -------------------------------------------------------------------------

    def aligned_with(self, other: "DigitString") -> tuple[str, str, int]:
        """
        Выравнивание двух чисел по десятичной точке.

        Целые части дополняются нулями слева, дробные — справа, до общей
        длины. Знак не учитывается.

        Returns:
            (digits_self, digits_other, scale), где scale — число дробных
            разрядов в обеих строках
        """
        int_width = max(len(self.integer), len(other.integer))
        scale = max(len(self.fraction), len(other.fraction))

        left = self.integer.rjust(int_width, "0") + self.fraction.ljust(scale, "0")
        right = other.integer.rjust(int_width, "0") + other.fraction.ljust(scale, "0")
        return left, right, scale

    def compare_magnitude(self, other: "DigitString") -> int:
        """Сравнение модулей: -1, 0, +1."""
        left, right, _ = self.aligned_with(other)
        # Строки одинаковой длины: лексикографический порядок == числовой
        return (left > right) - (left < right)

    def compare(self, other: "DigitString") -> int:
        """
        Сравнение с учётом знака.

        Любое неотрицательное число больше любого отрицательного; среди
        отрицательных направление сравнения модулей инвертируется.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        if self.negative != other.negative:
            return -1 if self.negative else 1

        magnitude = self.compare_magnitude(other)
        return -magnitude if self.negative else magnitude

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "DigitString") -> "DigitString":
        """
        Поразрядное сложение с переносом.

        Одинаковые знаки: складываются модули, знак сохраняется.
        Разные знаки: из большего модуля вычитается меньший, знак берётся
        у большего по модулю.
        """
        left, right, scale = self.aligned_with(other)

        if self.negative == other.negative:
            return _split(self.negative, _add_digits(left, right), scale)

        magnitude = self.compare_magnitude(other)
        if magnitude == 0:
            return DigitString.of(False, "0", "")
        if magnitude > 0:
            return _split(self.negative, _subtract_digits(left, right), scale)
        return _split(other.negative, _subtract_digits(right, left), scale)

    def subtract(self, other: "DigitString") -> "DigitString":
        return self.add(other.negated())

    def truncate(self, places: int) -> "DigitString":
        """
        Усечение дробной части до places знаков (без округления).

        Examples:
            >>> str(DigitString.parse("1.239").truncate(2))
            '1.23'
            >>> str(DigitString.parse("-0.001").truncate(2))
            '0'
        """
        if places < 0:
            raise NumericDomainError(f"places must be non-negative, got {places}")
        return DigitString.of(self.negative, self.integer, self.fraction[:places])

    def to_fixed(self, places: int) -> str:
        """
        Запись с ровно places дробными знаками (усечение + дополнение нулями).

        Examples:
            >>> DigitString.parse("1").to_fixed(2)
            '1.00'
            >>> DigitString.parse("-1.999").to_fixed(1)
            '-1.9'
        """
        truncated = self.truncate(places)
        sign = "-" if truncated.negative else ""
        if places == 0:
            return f"{sign}{truncated.integer}"
        return f"{sign}{truncated.integer}.{truncated.fraction.ljust(places, '0')}"


# =============================================================================
# ПОРАЗРЯДНЫЕ ОПЕРАЦИИ
# =============================================================================


def _add_digits(left: str, right: str) -> str:
    """Сложение двух строк цифр одинаковой длины (результат может быть длиннее)."""
    result = []
    carry = 0
    for a, b in zip(reversed(left), reversed(right)):
        total = int(a) + int(b) + carry
        result.append(str(total % 10))
        carry = total // 10
    if carry:
        result.append(str(carry))
    return "".join(reversed(result))


def _subtract_digits(left: str, right: str) -> str:
    """Вычитание строк цифр одинаковой длины, left >= right."""
    result = []
    borrow = 0
    for a, b in zip(reversed(left), reversed(right)):
        diff = int(a) - int(b) - borrow
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result.append(str(diff))
    return "".join(reversed(result))


def _split(negative: bool, digits: str, scale: int) -> DigitString:
    """Обратное разбиение выровненных цифр на целую и дробную части."""
    if scale == 0:
        return DigitString.of(negative, digits, "")
    return DigitString.of(negative, digits[:-scale], digits[-scale:])
