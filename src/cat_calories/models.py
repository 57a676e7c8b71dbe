from __future__ import annotations

import math
from dataclasses import dataclass


def _format_factor(factor: float) -> str:
    return repr(float(factor)).removesuffix(".0")


@dataclass(frozen=True)
class LifeStageFactor:
    """Activity multiplier range applied to RER."""

    min_factor: float
    max_factor: float

    def __post_init__(self) -> None:
        for factor in (self.min_factor, self.max_factor):
            if not math.isfinite(factor) or factor <= 0:
                raise ValueError("life-stage factors must be positive numbers")

    @property
    def value(self) -> str:
        """Wire form stored by the selector and the preference store, e.g. ``"1,1.2"``."""
        return f"{_format_factor(self.min_factor)},{_format_factor(self.max_factor)}"


@dataclass(frozen=True)
class LifeStage:
    key: str
    label: str
    factor: LifeStageFactor

    @property
    def value(self) -> str:
        return self.factor.value


@dataclass(frozen=True)
class DerRange:
    min: int
    max: int
