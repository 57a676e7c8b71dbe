from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from .energy import LIFE_STAGES_BY_KEY
from .models import LifeStageFactor

T = TypeVar("T")

MAX_WEIGHT_KG = 20.0


class ValidationReason(str, Enum):
    INVALID_WEIGHT = "invalid_weight"
    IMPLAUSIBLE_WEIGHT = "implausible_weight"
    MISSING_LIFE_STAGE = "missing_life_stage"
    INVALID_LIFE_STAGE = "invalid_life_stage"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ValidationReason.INVALID_WEIGHT: "請輸入有效的體重！",
    ValidationReason.IMPLAUSIBLE_WEIGHT: "體重似乎過大，請確認輸入正確！",
    ValidationReason.MISSING_LIFE_STAGE: "請選擇貓咪的生活階段！",
    ValidationReason.INVALID_LIFE_STAGE: "無法辨識的生活階段，請重新選擇！",
}


class CalorieInputError(ValueError):
    """Raised by the explicit-submit path when an input is rejected."""

    def __init__(self, reason: ValidationReason) -> None:
        super().__init__(reason.message)
        self.reason = reason


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    reason: ValidationReason


Parsed = Union[Valid[T], Invalid]


def _to_float(raw: object) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_weight(raw: object, *, check_ceiling: bool = True) -> Parsed[float]:
    """Parse a weight field into kilograms.

    Missing, non-numeric and non-positive input are all ``INVALID_WEIGHT``;
    anything above ``MAX_WEIGHT_KG`` is ``IMPLAUSIBLE_WEIGHT``.
    """
    weight = _to_float(raw)
    if weight is None or weight <= 0:
        return Invalid(ValidationReason.INVALID_WEIGHT)
    if check_ceiling and weight > MAX_WEIGHT_KG:
        return Invalid(ValidationReason.IMPLAUSIBLE_WEIGHT)
    return Valid(weight)


def parse_life_stage(raw: object) -> Parsed[LifeStageFactor]:
    """Parse a life-stage selection: a catalogue key or a ``"min,max"`` pair."""
    if raw is None:
        return Invalid(ValidationReason.MISSING_LIFE_STAGE)
    if isinstance(raw, LifeStageFactor):
        return Valid(raw)
    text = str(raw).strip()
    if not text:
        return Invalid(ValidationReason.MISSING_LIFE_STAGE)

    stage = LIFE_STAGES_BY_KEY.get(text)
    if stage is not None:
        return Valid(stage.factor)

    parts = text.split(",")
    if len(parts) != 2:
        return Invalid(ValidationReason.INVALID_LIFE_STAGE)
    min_factor, max_factor = (_to_float(part) for part in parts)
    if min_factor is None or max_factor is None or min_factor <= 0 or max_factor <= 0:
        return Invalid(ValidationReason.INVALID_LIFE_STAGE)
    return Valid(LifeStageFactor(min_factor, max_factor))


def parse_grams(raw: object) -> float:
    """Manual-mode mass field; blank or unparsable input counts as 0 g."""
    grams = _to_float(raw)
    if grams is None or grams < 0:
        return 0.0
    return grams
