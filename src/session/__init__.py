"""
Input Session — headless числовое поле поверх numeric core.
"""

from .config import InputNumberConfig
from .input_session import (
    ChangeTrigger,
    InputNumberSession,
    InputNumberState,
    SessionTransition,
)

__all__ = [
    "InputNumberConfig",
    "InputNumberSession",
    "InputNumberState",
    "SessionTransition",
    "ChangeTrigger",
]
