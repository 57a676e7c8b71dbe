from __future__ import annotations

import logging
from dataclasses import dataclass

from .energy import calculate_der, calculate_rer
from .foods import FoodPortion, FoodType, portions_for
from .models import DerRange, LifeStageFactor
from .validation import CalorieInputError, Invalid, parse_life_stage, parse_weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalorieResult:
    weight_kg: float
    factor: LifeStageFactor
    rer: int
    der: DerRange
    portions: dict[FoodType, FoodPortion]


def compute(weight_kg: float, factor: LifeStageFactor) -> CalorieResult:
    """Compute RER, DER and food portions for already-validated inputs."""
    rer = calculate_rer(weight_kg)
    der = calculate_der(rer, factor.min_factor, factor.max_factor)
    logger.debug("weight=%s factor=%s rer=%s der=%s", weight_kg, factor.value, rer, der)
    return CalorieResult(
        weight_kg=weight_kg,
        factor=factor,
        rer=rer,
        der=der,
        portions=portions_for(der),
    )


def calculate(raw_weight: object, raw_life_stage: object) -> CalorieResult:
    """Explicit-submit path: validate both inputs and raise on the first failure."""
    weight = parse_weight(raw_weight, check_ceiling=False)
    if isinstance(weight, Invalid):
        raise CalorieInputError(weight.reason)
    stage = parse_life_stage(raw_life_stage)
    if isinstance(stage, Invalid):
        raise CalorieInputError(stage.reason)
    ceiling = parse_weight(weight.value)
    if isinstance(ceiling, Invalid):
        raise CalorieInputError(ceiling.reason)
    return compute(weight.value, stage.value)


def auto_calculate(raw_weight: object, raw_life_stage: object) -> CalorieResult | None:
    """Live-update path: ``None`` means the result display should be hidden."""
    weight = parse_weight(raw_weight, check_ceiling=False)
    stage = parse_life_stage(raw_life_stage)
    if isinstance(weight, Invalid) or isinstance(stage, Invalid):
        return None
    return compute(weight.value, stage.value)
