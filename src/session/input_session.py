"""Input Session — headless логика числового поля ввода.

Чистые переходы над immutable состоянием поля (без DOM, событий и рендеринга):
- Ввод текста: мусор отбрасывается, незавершённый ввод не фиксируется,
  полное число фиксируется и проверяется по диапазону
- Focus: отображается сырое каноническое значение
- Blur/Enter: фиксируется усечённое значение, отображается форматированное
- Add/Reduce (кнопки, ArrowUp/ArrowDown): шаг с ограничением диапазоном

Состояние "текущее значение" принадлежит вызывающей стороне: каждый метод
принимает InputNumberState и возвращает SessionTransition с новым состоянием.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from src.core.domain.values import (
    EMPTY,
    DisplayFormat,
    EmptyValue,
    LargeNumberValue,
    NumberValue,
    StepConfig,
    StepDirection,
    ValidationResult,
)
from src.core.numeric import (
    can_add,
    can_reduce,
    format_value,
    normalize,
    settle_input,
    step,
    truncate_value,
    validate,
)
from src.session.config import InputNumberConfig

logger = logging.getLogger(__name__)

Value = Union[EmptyValue, NumberValue, LargeNumberValue]


class ChangeTrigger(str, Enum):
    """Источник зафиксированного изменения значения."""

    INPUT = "input"
    BLUR = "blur"
    ENTER = "enter"
    ADD = "add"
    REDUCE = "reduce"


@dataclass(frozen=True)
class InputNumberState:
    """Состояние поля: значение, текст в поле, фокус, результат проверки."""

    value: Value
    user_input: str
    focused: bool = False
    error: ValidationResult = ValidationResult.OK


@dataclass(frozen=True)
class SessionTransition:
    """Результат перехода состояния поля."""

    state: InputNumberState
    previous_state: InputNumberState

    # Зафиксировано новое значение (вызывающая сторона эмитит change)
    value_changed: bool
    trigger: Optional[ChangeTrigger]

    # Диагностика
    transition_reason: str
    details: str

    @property
    def value(self) -> Value:
        return self.state.value


class InputNumberSession:
    """Headless числовое поле.

    Не хранит состояние между вызовами: все данные поля передаются в
    InputNumberState и возвращаются в SessionTransition.
    """

    def __init__(self, config: Optional[InputNumberConfig] = None):
        self.config = config or InputNumberConfig()
        self._min_bound = self.config.min_bound
        self._max_bound = self.config.max_bound
        self._step_size = self.config.step_value
        self._display_format = self.config.display_format
        self._raw_format = DisplayFormat(large_number=self.config.large_number)

    # -------------------------------------------------------------------------
    # Состояние
    # -------------------------------------------------------------------------

    def initial_state(self, value: Value = EMPTY) -> InputNumberState:
        """Начальное состояние: поле без фокуса, текст отформатирован."""
        return InputNumberState(
            value=value,
            user_input=self._display_text(value, focused=False),
            focused=False,
            error=self._validate(value),
        )

    def disabled_add(self, state: InputNumberState) -> bool:
        return self.config.disabled or not can_add(
            state.value, self._max_bound, self.config.large_number
        )

    def disabled_reduce(self, state: InputNumberState) -> bool:
        return self.config.disabled or not can_reduce(
            state.value, self._min_bound, self.config.large_number
        )

    # -------------------------------------------------------------------------
    # Переходы
    # -------------------------------------------------------------------------

    def on_input(self, state: InputNumberState, text: str) -> SessionTransition:
        """Набор текста пользователем."""
        result = normalize(text, self.config.large_number)

        if result.is_malformed:
            return self._create_result(
                state, state, trigger=None,
                reason="malformed_input",
                details=f"Rejected {text!r}, kept {state.user_input!r}",
            )

        if result.is_incomplete:
            # Префикс числа: текст обновляется, значение не фиксируется и не проверяется
            return self._create_result(
                state, replace(state, user_input=text), trigger=None,
                reason="incomplete_input",
                details=f"Deferred commit of {text!r}",
            )

        if result.value == state.value:
            return self._create_result(
                state, replace(state, user_input=text), trigger=None,
                reason="same_value",
                details=f"Text {text!r} does not change value",
            )

        return self._commit(state, result.value, ChangeTrigger.INPUT, user_input=text)

    def on_focus(self, state: InputNumberState) -> SessionTransition:
        """Фокус: отображается неформатированное значение."""
        new_state = replace(
            state,
            focused=True,
            user_input=self._display_text(state.value, focused=True),
        )
        return self._create_result(
            state, new_state, trigger=None, reason="focus", details="Raw value shown"
        )

    def on_blur(self, state: InputNumberState) -> SessionTransition:
        """Потеря фокуса: фиксация усечённого значения."""
        return self._finish_editing(state, ChangeTrigger.BLUR, focused=False)

    def on_enter(self, state: InputNumberState) -> SessionTransition:
        """Enter: фиксация усечённого значения, фокус сохраняется."""
        return self._finish_editing(state, ChangeTrigger.ENTER, focused=state.focused)

    def on_add(self, state: InputNumberState) -> SessionTransition:
        return self._step(state, StepDirection.ADD)

    def on_reduce(self, state: InputNumberState) -> SessionTransition:
        return self._step(state, StepDirection.REDUCE)

    def on_key(self, state: InputNumberState, key: str) -> SessionTransition:
        """Клавиши: ArrowUp — шаг вверх, ArrowDown — шаг вниз."""
        if key == "ArrowUp":
            return self.on_add(state)
        if key == "ArrowDown":
            return self.on_reduce(state)
        return self._create_result(
            state, state, trigger=None, reason="key_ignored", details=f"Key {key!r}"
        )

    # -------------------------------------------------------------------------
    # Внутренние методы
    # -------------------------------------------------------------------------

    def _step(self, state: InputNumberState, direction: StepDirection) -> SessionTransition:
        if direction is StepDirection.ADD:
            blocked = self.disabled_add(state)
            trigger = ChangeTrigger.ADD
        else:
            blocked = self.disabled_reduce(state)
            trigger = ChangeTrigger.REDUCE

        if blocked or self.config.readonly:
            return self._create_result(
                state, state, trigger=None,
                reason=f"{direction.value}_disabled",
                details=f"Step {direction.value} unavailable for {format_value(state.value)!r}",
            )

        new_value = step(
            StepConfig(
                step=self._step_size,
                direction=direction,
                current_value=state.value,
                min_bound=self._min_bound,
                max_bound=self._max_bound,
                large_number=self.config.large_number,
            )
        )
        if new_value == state.value:
            return self._create_result(
                state, state, trigger=None,
                reason=f"{direction.value}_at_bound",
                details=f"Value {format_value(state.value)!r} is already at the bound",
            )
        return self._commit(state, new_value, trigger)

    def _finish_editing(
        self, state: InputNumberState, trigger: ChangeTrigger, focused: bool
    ) -> SessionTransition:
        pending = settle_input(state.user_input, self.config.large_number)
        if pending is None:
            pending = state.value

        new_value = truncate_value(pending, self._display_format)
        if new_value == state.value:
            new_state = replace(
                state,
                focused=focused,
                user_input=self._display_text(state.value, focused),
            )
            return self._create_result(
                state, new_state, trigger=None,
                reason=f"{trigger.value}_unchanged",
                details=f"Value {format_value(state.value)!r} already formatted",
            )

        return self._commit(state, new_value, trigger, focused=focused)

    def _commit(
        self,
        state: InputNumberState,
        value: Value,
        trigger: ChangeTrigger,
        user_input: Optional[str] = None,
        focused: Optional[bool] = None,
    ) -> SessionTransition:
        focused = state.focused if focused is None else focused
        if user_input is None:
            user_input = self._display_text(value, focused)

        new_state = InputNumberState(
            value=value,
            user_input=user_input,
            focused=focused,
            error=self._validate(value),
        )
        return self._create_result(
            state, new_state, trigger=trigger,
            reason=f"{trigger.value}_commit",
            details=f"{format_value(state.value)!r} → {format_value(value)!r}, error={new_state.error.value}",
        )

    def _validate(self, value: Value) -> ValidationResult:
        return validate(value, self._min_bound, self._max_bound, self.config.large_number)

    def _display_text(self, value: Value, focused: bool) -> str:
        if focused:
            return format_value(value, self._raw_format)
        return format_value(value, self._display_format)

    def _create_result(
        self,
        previous_state: InputNumberState,
        new_state: InputNumberState,
        trigger: Optional[ChangeTrigger],
        reason: str,
        details: str,
    ) -> SessionTransition:
        logger.debug(f"input_number transition | reason={reason} | {details}")
        return SessionTransition(
            state=new_state,
            previous_state=previous_state,
            value_changed=trigger is not None,
            trigger=trigger,
            transition_reason=reason,
            details=details,
        )
