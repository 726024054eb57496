"""
InputNumberConfig — Конфигурация числового поля ввода

Immutable Pydantic модель с параметрами поля: границы, шаг, число знаков,
режим больших чисел, disabled/readonly. Сырые значения (число или строка)
приводятся к Bound/NumericValue через normalizer.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.contracts import validate_input_number_config
from src.core.domain.values import (
    DisplayFormat,
    LargeNumberValue,
    NumberValue,
    Unbounded,
)
from src.core.numeric.normalizer import to_bound, to_numeric_value

RawNumber = Union[int, float, str]


class InputNumberConfig(BaseModel):
    """
    Конфигурация числового поля.

    Границы по умолчанию не заданы (как -inf/+inf), шаг по умолчанию 1.
    """

    min: Optional[RawNumber] = Field(None, description="Минимум (None — без границы)")
    max: Optional[RawNumber] = Field(None, description="Максимум (None — без границы)")
    step: RawNumber = Field(1, description="Шаг (строго положительный)")
    decimal_places: Optional[int] = Field(
        None, ge=0, description="Число знаков после точки при отображении"
    )
    large_number: bool = Field(False, description="Режим больших чисел (значения-строки)")
    disabled: bool = Field(False, description="Поле недоступно")
    readonly: bool = Field(False, description="Только чтение")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_numbers(self) -> "InputNumberConfig":
        """Границы и шаг должны разбираться в текущем режиме, шаг > 0."""
        # NumericDomainError для неразбираемых границ
        for raw in (self.min, self.max):
            to_bound(raw, self.large_number)

        digits = self.step_value.to_digit_string()
        if digits.negative or digits.is_zero:
            raise ValueError(f"step must be positive, got {self.step!r}")
        return self

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "InputNumberConfig":
        """
        Создание из сырого JSON-подобного payload.

        Raises:
            jsonschema.ValidationError: Payload не соответствует контракту
            pydantic.ValidationError: Значения не проходят проверку модели
        """
        data = dict(payload)
        validate_input_number_config(data)
        return cls.model_validate(data)

    @property
    def min_bound(self) -> Union[Unbounded, NumberValue, LargeNumberValue]:
        return to_bound(self.min, self.large_number)

    @property
    def max_bound(self) -> Union[Unbounded, NumberValue, LargeNumberValue]:
        return to_bound(self.max, self.large_number)

    @property
    def step_value(self) -> Union[NumberValue, LargeNumberValue]:
        value = to_numeric_value(self.step, self.large_number)
        if not isinstance(value, (NumberValue, LargeNumberValue)):
            raise ValueError("step must not be empty")
        return value

    @property
    def display_format(self) -> DisplayFormat:
        return DisplayFormat(
            decimal_places=self.decimal_places, large_number=self.large_number
        )
