"""
Тесты для Normalizer

Проверяет:
1. Разбор полных чисел (нативный режим и режим больших чисел)
2. Незавершённый ввод (incomplete) не фиксируется
3. Мусорный ввод (malformed) отбрасывается без исключений
4. Автоматический переход в large number по числу значащих цифр
5. settle_input для blur
6. Конверсию конфигурации to_numeric_value/to_bound
"""

import logging

import pytest

from src.core.domain import (
    EMPTY,
    UNBOUNDED,
    LargeNumberValue,
    NormalizeStatus,
    NumberValue,
    NumericDomainError,
)
from src.core.numeric import normalize, settle_input, to_bound, to_numeric_value


class TestNormalizeComplete:
    """Полные числа"""

    def test_empty_text(self) -> None:
        result = normalize("")
        assert result.is_ok
        assert result.value == EMPTY

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0.0),
            ("42", 42.0),
            ("-3.5", -3.5),
            ("+7", 7.0),
            (".5", 0.5),
            ("-.25", -0.25),
            ("1.50", 1.5),
            ("2e3", 2000.0),
            ("2.1E-3", 0.0021),
            ("-1e+2", -100.0),
        ],
    )
    def test_native_numbers(self, text: str, expected: float) -> None:
        result = normalize(text)
        assert result.status is NormalizeStatus.OK
        assert result.value == NumberValue(value=expected)

    def test_large_mode_keeps_digits(self) -> None:
        """В режиме large_number значение — каноническая строка цифр"""
        result = normalize(".5", large_number=True)
        assert result.value == LargeNumberValue(digits="0.5")

        result = normalize("12345678901234567890.123", large_number=True)
        assert result.value == LargeNumberValue(digits="12345678901234567890.123")

    def test_auto_promotion_beyond_precision(self) -> None:
        """Больше 15 значащих цифр → LargeNumberValue даже вне режима"""
        result = normalize("12345678901234567")
        assert isinstance(result.value, LargeNumberValue)
        assert result.value.digits == "12345678901234567"

    def test_fifteen_digits_stay_native(self) -> None:
        result = normalize("123456789012345")
        assert result.value == NumberValue(value=123456789012345.0)

    def test_trailing_zeros_not_significant(self) -> None:
        """1e20 записанное цифрами имеет одну значащую цифру"""
        result = normalize("100000000000000000000")
        assert isinstance(result.value, NumberValue)


class TestNormalizeIncomplete:
    """Незавершённый ввод"""

    @pytest.mark.parametrize("text", ["-", "+", ".", "-.", "1.", "-12.", "2e", "2E", "1.5e-", "3e+"])
    def test_incomplete(self, text: str) -> None:
        result = normalize(text)
        assert result.is_incomplete
        assert result.value is None

    @pytest.mark.parametrize("text", ["-", "1.", "+."])
    def test_incomplete_in_large_mode(self, text: str) -> None:
        assert normalize(text, large_number=True).is_incomplete


class TestNormalizeMalformed:
    """Мусорный ввод"""

    @pytest.mark.parametrize(
        "text",
        ["1..2", "1.2.3", "abc", "1a", "--1", "+-1", "1-", "1 2", " 1", "1\t", "00", "-007", "1e2e3", "e5", "1e400"],
    )
    def test_malformed(self, text: str) -> None:
        result = normalize(text)
        assert result.is_malformed
        assert result.value is None

    @pytest.mark.parametrize("text", ["2e", "1e5", "1.5E-3"])
    def test_exponent_rejected_in_large_mode(self, text: str) -> None:
        """Экспонента в режиме больших чисел запрещена"""
        assert normalize(text, large_number=True).is_malformed

    def test_single_zero_prefix_allowed(self) -> None:
        assert normalize("0.5").is_ok
        assert normalize("-0.5").is_ok


class TestSettleInput:
    """Значение незавершённого ввода при потере фокуса"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.", NumberValue(value=1.0)),
            ("2e", NumberValue(value=2.0)),
            ("2e-", NumberValue(value=2.0)),
            ("1.e", NumberValue(value=1.0)),
            ("-", EMPTY),
            ("-.", EMPTY),
            ("3.25", NumberValue(value=3.25)),
        ],
    )
    def test_settles(self, text: str, expected) -> None:
        assert settle_input(text) == expected

    def test_large_mode(self) -> None:
        assert settle_input("12.", large_number=True) == LargeNumberValue(digits="12")

    def test_malformed_returns_none(self) -> None:
        assert settle_input("1..2") is None


class TestToNumericValue:
    """Конверсия значений конфигурации"""

    def test_none_and_empty(self) -> None:
        assert to_numeric_value(None) == EMPTY
        assert to_numeric_value("") == EMPTY

    def test_int(self) -> None:
        assert to_numeric_value(5) == NumberValue(value=5.0)
        assert to_numeric_value(5, large_number=True) == LargeNumberValue(digits="5")

    def test_huge_int_promoted(self) -> None:
        """int за пределами точности float не теряет цифры"""
        value = to_numeric_value(10**20 + 1)
        assert value == LargeNumberValue(digits="100000000000000000001")

    def test_float(self) -> None:
        assert to_numeric_value(2.5) == NumberValue(value=2.5)

    def test_float_in_large_mode_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        """float в режиме больших чисел конвертируется с предупреждением"""
        with caplog.at_level(logging.WARNING):
            value = to_numeric_value(0.1, large_number=True)
        assert value == LargeNumberValue(digits="0.1")
        assert "should be a string" in caplog.text

    def test_string(self) -> None:
        assert to_numeric_value("1e3") == NumberValue(value=1000.0)
        assert to_numeric_value("99999999999999999", large_number=True) == LargeNumberValue(
            digits="99999999999999999"
        )

    @pytest.mark.parametrize("raw", [True, float("nan"), float("inf"), "1.", "abc", [1]])
    def test_invalid_raises(self, raw) -> None:
        with pytest.raises(NumericDomainError):
            to_numeric_value(raw)


class TestToBound:
    """Конверсия границ"""

    @pytest.mark.parametrize("raw", [None, "", float("inf"), float("-inf")])
    def test_unbounded(self, raw) -> None:
        assert to_bound(raw) == UNBOUNDED

    def test_number_bound(self) -> None:
        assert to_bound(10) == NumberValue(value=10.0)
        assert to_bound("123456789012345678901", large_number=True) == LargeNumberValue(
            digits="123456789012345678901"
        )

    def test_nan_raises(self) -> None:
        with pytest.raises(NumericDomainError):
            to_bound(float("nan"))
