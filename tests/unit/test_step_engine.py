"""
Тесты для Step Engine

Проверяет:
1. Поразрядный шаг больших чисел с переносом
2. Точный нативный шаг для десятичных дробей (0.1 + 0.2 = 0.3)
3. Ограничение диапазоном и идемпотентность на границе
4. Старт с пустого значения
5. Предикаты доступности can_add/can_reduce
6. Валидацию параметров шага
7. Переход в large number, когда float теряет точность
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    EMPTY,
    UNBOUNDED,
    LargeNumberValue,
    NumberValue,
    StepConfig,
    StepDirection,
)
from src.core.numeric import can_add, can_reduce, step

ADD = StepDirection.ADD
REDUCE = StepDirection.REDUCE


def num(value: float) -> NumberValue:
    return NumberValue(value=value)


def big(digits: str) -> LargeNumberValue:
    return LargeNumberValue(digits=digits)


class TestLargeStep:
    """Шаг в режиме больших чисел"""

    def test_carry_beyond_float_precision(self) -> None:
        """99999999999999999 + 1 = 100000000000000000 без потери точности"""
        cfg = StepConfig(step=num(1), direction=ADD, current_value=big("99999999999999999"))
        assert step(cfg) == big("100000000000000000")

    def test_reduce_borrow(self) -> None:
        cfg = StepConfig(step=big("1"), direction=REDUCE, current_value=big("100000000000000000"))
        assert step(cfg) == big("99999999999999999")

    def test_flag_forces_digit_result(self) -> None:
        """large_number=True даёт строку цифр даже для нативных операндов"""
        cfg = StepConfig(step=num(0.1), direction=ADD, current_value=num(0.2), large_number=True)
        assert step(cfg) == big("0.3")

    def test_fractional_step(self) -> None:
        cfg = StepConfig(
            step=big("0.000000000000000001"),
            direction=ADD,
            current_value=big("1"),
        )
        assert step(cfg) == big("1.000000000000000001")


class TestNativeStep:
    """Нативный шаг"""

    def test_decimal_exactness(self) -> None:
        """0.1 + 0.2 даёт 0.3, а не 0.30000000000000004"""
        cfg = StepConfig(step=num(0.1), direction=ADD, current_value=num(0.2))
        assert step(cfg) == num(0.3)

    def test_reduce(self) -> None:
        cfg = StepConfig(step=num(0.1), direction=REDUCE, current_value=num(1.0))
        assert step(cfg) == num(0.9)

    def test_integers(self) -> None:
        cfg = StepConfig(step=num(5), direction=REDUCE, current_value=num(3))
        assert step(cfg) == num(-2)

    def test_precision_overflow_promotes(self) -> None:
        """1e16 + 1 не помещается в float и переходит в строку цифр"""
        cfg = StepConfig(step=num(1), direction=ADD, current_value=num(1e16))
        assert step(cfg) == big("10000000000000001")

        cfg = StepConfig(step=num(1), direction=REDUCE, current_value=num(1e16))
        assert step(cfg) == big("9999999999999999")

    def test_tiny_step_promotes(self) -> None:
        """Шаг за пределами 15 значащих цифр не теряется"""
        cfg = StepConfig(step=num(1e-20), direction=ADD, current_value=num(0.1))
        assert step(cfg) == big("0.10000000000000000001")

    def test_representable_result_stays_native(self) -> None:
        cfg = StepConfig(step=num(1e16), direction=ADD, current_value=num(1e16))
        assert step(cfg) == num(2e16)

    def test_float_overflow_promotes(self) -> None:
        """Выход за пределы float даёт строку цифр, а не бесконечность"""
        cfg = StepConfig(step=num(1e308), direction=ADD, current_value=num(1.7e308))
        assert step(cfg) == big(str(27 * 10**307))

    def test_promoted_value_keeps_stepping_exactly(self) -> None:
        first = step(StepConfig(step=num(1), direction=ADD, current_value=num(1e16)))
        second = step(StepConfig(step=num(1), direction=ADD, current_value=first))
        assert second == big("10000000000000002")


class TestClamping:
    """Ограничение диапазоном"""

    def test_clamped_to_maximum(self) -> None:
        cfg = StepConfig(step=num(5), direction=ADD, current_value=num(8), max_bound=num(10))
        assert step(cfg) == num(10)

    def test_clamped_to_minimum(self) -> None:
        cfg = StepConfig(step=num(5), direction=REDUCE, current_value=num(2), min_bound=num(0))
        assert step(cfg) == num(0)

    def test_idempotent_at_bound(self) -> None:
        """Повторный шаг на границе не меняет значение"""
        cfg = StepConfig(step=num(1), direction=ADD, current_value=num(10), max_bound=num(10))
        first = step(cfg)
        second = step(cfg.model_copy(update={"current_value": first}))
        assert first == second == num(10)

    def test_large_clamp_returns_bound_in_mode(self) -> None:
        """Граница-число приводится к строке цифр в режиме больших чисел"""
        cfg = StepConfig(step=num(1), direction=ADD, current_value=big("9.5"), max_bound=num(10))
        assert step(cfg) == big("10")

    def test_maximum_wins_when_min_exceeds_max(self) -> None:
        cfg = StepConfig(
            step=num(1),
            direction=ADD,
            current_value=num(5),
            min_bound=num(10),
            max_bound=num(1),
        )
        assert step(cfg) == num(1)


class TestStepFromEmpty:
    """Шаг с пустого значения"""

    def test_add_starts_at_minimum(self) -> None:
        cfg = StepConfig(step=num(1), direction=ADD, min_bound=num(5))
        assert step(cfg) == num(5)

    def test_reduce_starts_at_maximum(self) -> None:
        cfg = StepConfig(step=num(1), direction=REDUCE, max_bound=num(10))
        assert step(cfg) == num(10)

    def test_add_from_zero_without_minimum(self) -> None:
        cfg = StepConfig(step=num(2), direction=ADD, max_bound=num(10))
        assert step(cfg) == num(2)

    def test_reduce_from_zero_without_maximum(self) -> None:
        cfg = StepConfig(step=num(2), direction=REDUCE)
        assert step(cfg) == num(-2)

    def test_start_is_clamped(self) -> None:
        """Старт с min при min > max ограничивается максимумом"""
        cfg = StepConfig(step=num(1), direction=ADD, min_bound=num(5), max_bound=num(3))
        assert step(cfg) == num(3)

    def test_large_zero_start(self) -> None:
        cfg = StepConfig(step=big("1"), direction=REDUCE)
        assert step(cfg) == big("-1")


class TestPredicates:
    """Тесты can_add/can_reduce"""

    def test_can_add(self) -> None:
        assert can_add(num(9), num(10))
        assert not can_add(num(10), num(10))
        assert not can_add(num(11), num(10))

    def test_can_reduce(self) -> None:
        assert can_reduce(num(1), num(0))
        assert not can_reduce(num(0), num(0))

    def test_unbounded_and_empty(self) -> None:
        assert can_add(num(1e300), UNBOUNDED)
        assert can_reduce(num(-1e300), UNBOUNDED)
        assert can_add(EMPTY, num(10))
        assert can_reduce(EMPTY, num(0))

    def test_large_precision(self) -> None:
        assert can_add(big("99999999999999998"), big("99999999999999999"))
        assert not can_add(big("99999999999999999"), big("99999999999999999"), large_number=True)


class TestStepConfig:
    """Тесты модели StepConfig"""

    @pytest.mark.parametrize("size", [NumberValue(value=0), NumberValue(value=-1), LargeNumberValue(digits="-0.5")])
    def test_non_positive_step_rejected(self, size) -> None:
        with pytest.raises(ValidationError, match="step must be positive"):
            StepConfig(step=size, direction=ADD)

    def test_accepts_tagged_dicts(self) -> None:
        """Варианты различаются по полю kind"""
        cfg = StepConfig.model_validate(
            {
                "step": {"kind": "large", "digits": "1"},
                "direction": "reduce",
                "current_value": {"kind": "number", "value": 3},
                "max_bound": {"kind": "unbounded"},
            }
        )
        assert isinstance(cfg.step, LargeNumberValue)
        assert cfg.direction is REDUCE
        assert cfg.current_value == num(3)
        assert cfg.min_bound == UNBOUNDED

    def test_frozen(self) -> None:
        cfg = StepConfig(step=num(1), direction=ADD)
        with pytest.raises(ValidationError):
            cfg.large_number = True
