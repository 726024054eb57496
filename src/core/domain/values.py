"""
Numeric Values — Tagged unions числового ядра

Immutable Pydantic модели для значений, границ и конфигураций:
- NumericValue = EmptyValue | NumberValue | LargeNumberValue
- Bound = Unbounded | NumberValue | LargeNumberValue
- StepConfig, DisplayFormat — конфигурации одной операции
- ValidationResult, NormalizeResult — результаты операций

Все модели frozen: значения не имеют identity, создаются на каждый вызов.
Варианты различаются полем kind (discriminator), потребители выполняют
явную диспетчеризацию по типу варианта.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Final, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .digit_string import DigitString


# =============================================================================
# ВАРИАНТЫ ЗНАЧЕНИЙ
# =============================================================================


class EmptyValue(BaseModel):
    """Отсутствие значения (пустое поле ввода)."""

    kind: Literal["empty"] = "empty"

    model_config = {"frozen": True}


class NumberValue(BaseModel):
    """Нативное число (float), только finite."""

    kind: Literal["number"] = "number"
    value: float = Field(..., description="Нативное значение (finite float)")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"value must be finite (not NaN/Inf), got {v}")
        return v

    def to_digit_string(self) -> DigitString:
        return DigitString.from_float(self.value)


class LargeNumberValue(BaseModel):
    """
    Большое число, хранимое как каноническая строка цифр.

    Строка канонизируется при создании: "007.50" → "7.5", "-0" → "0".
    """

    kind: Literal["large"] = "large"
    digits: str = Field(..., min_length=1, description="Каноническая десятичная запись")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def canonicalize_digits(cls, v: str) -> str:
        return str(DigitString.parse(v))

    def to_digit_string(self) -> DigitString:
        return DigitString.parse(self.digits)


class Unbounded(BaseModel):
    """Граница не задана."""

    kind: Literal["unbounded"] = "unbounded"

    model_config = {"frozen": True}


NumericValue = Annotated[
    Union[EmptyValue, NumberValue, LargeNumberValue],
    Field(discriminator="kind"),
]

Bound = Annotated[
    Union[Unbounded, NumberValue, LargeNumberValue],
    Field(discriminator="kind"),
]

StepMagnitude = Annotated[
    Union[NumberValue, LargeNumberValue],
    Field(discriminator="kind"),
]

EMPTY: Final[EmptyValue] = EmptyValue()
UNBOUNDED: Final[Unbounded] = Unbounded()


# =============================================================================
# ENUMS
# =============================================================================


class StepDirection(str, Enum):
    """Направление шага."""

    ADD = "add"
    REDUCE = "reduce"


class ValidationResult(str, Enum):
    """
    Результат проверки диапазона.

    Значения совпадают с именами ошибок, которые получает UI-слой.
    """

    OK = "ok"
    EXCEEDS_MAXIMUM = "exceed-maximum"
    BELOW_MINIMUM = "below-minimum"


class NormalizeStatus(str, Enum):
    """Статус разбора пользовательского текста."""

    OK = "ok"
    INCOMPLETE = "incomplete"  # валидный префикс числа, коммит откладывается
    MALFORMED = "malformed"  # ввод отбрасывается, сохраняется прежний текст


# =============================================================================
# КОНФИГУРАЦИИ
# =============================================================================


class DisplayFormat(BaseModel):
    """Формат отображения значения."""

    decimal_places: Optional[int] = Field(
        None, ge=0, description="Число знаков после точки (None — без усечения)"
    )
    large_number: bool = Field(False, description="Режим больших чисел")

    model_config = {"frozen": True}


class StepConfig(BaseModel):
    """
    Параметры одной операции шага.

    Создаётся на каждый шаг и не сохраняется.
    """

    step: StepMagnitude = Field(..., description="Величина шага (строго положительная)")
    direction: StepDirection = Field(..., description="Направление (add/reduce)")
    current_value: NumericValue = Field(EMPTY, description="Текущее значение")
    min_bound: Bound = Field(UNBOUNDED, description="Минимум (включительно)")
    max_bound: Bound = Field(UNBOUNDED, description="Максимум (включительно)")
    large_number: bool = Field(False, description="Режим больших чисел")

    model_config = {"frozen": True}

    @field_validator("step")
    @classmethod
    def validate_step_positive(
        cls, v: Union[NumberValue, LargeNumberValue]
    ) -> Union[NumberValue, LargeNumberValue]:
        digits = v.to_digit_string()
        if digits.negative or digits.is_zero:
            raise ValueError(f"step must be positive, got {digits}")
        return v


# =============================================================================
# РЕЗУЛЬТАТЫ
# =============================================================================


@dataclass(frozen=True)
class NormalizeResult:
    """Результат разбора текста: статус и значение (только для OK)."""

    status: NormalizeStatus
    value: Optional[Union[EmptyValue, NumberValue, LargeNumberValue]] = None

    @classmethod
    def ok(cls, value: Union[EmptyValue, NumberValue, LargeNumberValue]) -> "NormalizeResult":
        return cls(status=NormalizeStatus.OK, value=value)

    @classmethod
    def incomplete(cls) -> "NormalizeResult":
        return cls(status=NormalizeStatus.INCOMPLETE)

    @classmethod
    def malformed(cls) -> "NormalizeResult":
        return cls(status=NormalizeStatus.MALFORMED)

    @property
    def is_ok(self) -> bool:
        return self.status is NormalizeStatus.OK

    @property
    def is_incomplete(self) -> bool:
        return self.status is NormalizeStatus.INCOMPLETE

    @property
    def is_malformed(self) -> bool:
        return self.status is NormalizeStatus.MALFORMED
