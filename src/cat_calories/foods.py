from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .energy import round_half_up
from .models import DerRange


class FoodType(str, Enum):
    WET_FOOD = "wetFood"
    RAW_MEAT = "rawMeat"
    FREEZE_DRIED = "freezeDried"


# kcal per gram.
# - wetFood: complete canned food
# - rawMeat: raw meat diet
# - freezeDried: freeze-dried treats/meals
FOOD_RATIOS: Mapping[FoodType, float] = MappingProxyType(
    {
        FoodType.WET_FOOD: 1.0,
        FoodType.RAW_MEAT: 1.5,
        FoodType.FREEZE_DRIED: 4.0,
    }
)


@dataclass(frozen=True)
class FoodPortion:
    food: FoodType
    min_grams: int
    max_grams: int


@dataclass(frozen=True)
class ManualResult:
    kcal_by_food: dict[FoodType, int]
    total_kcal: int


def convert_kcal_to_grams(kcal: float, ratio: float) -> int:
    if ratio <= 0:
        raise ValueError("ratio must be > 0")
    return round_half_up(kcal / ratio)


def convert_grams_to_kcal(grams: float, ratio: float) -> int:
    return round_half_up(grams * ratio)


def portions_for(der: DerRange) -> dict[FoodType, FoodPortion]:
    """Grams of each food type that cover the DER range."""
    return {
        food: FoodPortion(
            food=food,
            min_grams=convert_kcal_to_grams(der.min, ratio),
            max_grams=convert_kcal_to_grams(der.max, ratio),
        )
        for food, ratio in FOOD_RATIOS.items()
    }


def manual_totals(grams_by_food: Mapping[FoodType, float]) -> ManualResult:
    """Sum the calories of user-entered masses; absent food types count as 0 g."""
    kcal_by_food = {
        food: convert_grams_to_kcal(grams_by_food.get(food, 0.0), ratio)
        for food, ratio in FOOD_RATIOS.items()
    }
    return ManualResult(kcal_by_food=kcal_by_food, total_kcal=sum(kcal_by_food.values()))
