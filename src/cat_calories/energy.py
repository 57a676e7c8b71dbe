from __future__ import annotations

import logging
import math
from types import MappingProxyType

from .models import DerRange, LifeStage, LifeStageFactor

logger = logging.getLogger(__name__)

# Published weight (kg) -> RER (kcal/day) chart for adult cats.
REFERENCE_RER: MappingProxyType[int, int] = MappingProxyType(
    {
        1: 70,
        2: 118,
        3: 160,
        4: 198,
        5: 234,
        6: 268,
        7: 301,
        8: 333,
        9: 364,
        10: 394,
        11: 423,
        12: 451,
        13: 479,
        14: 507,
        15: 533,
    }
)

# Life-stage multipliers as (min, max) ranges over RER.
# - kitten_young: under 4 months
# - kitten: 4-12 months
# - inactive: indoor / obese-prone adult
LIFE_STAGES: tuple[LifeStage, ...] = (
    LifeStage("kitten_young", "幼貓（4個月以下）", LifeStageFactor(2.5, 3.0)),
    LifeStage("kitten", "幼貓（4-12個月）", LifeStageFactor(2.0, 2.5)),
    LifeStage("intact_adult", "成貓（未結紮）", LifeStageFactor(1.4, 1.6)),
    LifeStage("neutered_adult", "成貓（已結紮）", LifeStageFactor(1.2, 1.4)),
    LifeStage("inactive", "室內/易胖成貓", LifeStageFactor(1.0, 1.2)),
    LifeStage("weight_loss", "減重", LifeStageFactor(0.8, 1.0)),
    LifeStage("weight_gain", "增重", LifeStageFactor(1.2, 1.8)),
    LifeStage("senior", "老年貓", LifeStageFactor(1.1, 1.4)),
    LifeStage("pregnant", "懷孕", LifeStageFactor(1.6, 2.0)),
    LifeStage("lactating", "哺乳", LifeStageFactor(2.0, 6.0)),
)

LIFE_STAGES_BY_KEY: MappingProxyType[str, LifeStage] = MappingProxyType(
    {stage.key: stage for stage in LIFE_STAGES}
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    floor = math.floor(value)
    return int(floor + (value - floor >= 0.5))


def calculate_rer(weight_kg: float) -> int:
    """Calculate Resting Energy Requirement (RER) in kcal/day."""
    return round_half_up(70 * (weight_kg**0.75))


def calculate_der(rer: float, min_factor: float, max_factor: float) -> DerRange:
    """Calculate the Daily Energy Requirement (DER) range.

    The factors are applied as given; an inverted range yields ``min > max``.
    """
    der = DerRange(min=round_half_up(rer * min_factor), max=round_half_up(rer * max_factor))
    if der.min > der.max:
        logger.debug("inverted life-stage range %s..%s passed through", min_factor, max_factor)
    return der
