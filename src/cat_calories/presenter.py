from __future__ import annotations

from dataclasses import dataclass, field

from .calculator import CalorieResult
from .foods import ManualResult


@dataclass(frozen=True)
class ResultView:
    """Display strings keyed by output region id."""

    visible: bool
    fields: dict[str, str] = field(default_factory=dict)


HIDDEN = ResultView(visible=False)


def present_result(result: CalorieResult | None) -> ResultView:
    if result is None:
        return HIDDEN
    fields = {
        "rerValue": str(result.rer),
        "derMinValue": str(result.der.min),
        "derMaxValue": str(result.der.max),
    }
    for food, portion in result.portions.items():
        fields[f"{food.value}Min"] = str(portion.min_grams)
        fields[f"{food.value}Max"] = str(portion.max_grams)
    return ResultView(visible=True, fields=fields)


def present_manual(result: ManualResult) -> ResultView:
    fields = {f"{food.value}Kcal": str(kcal) for food, kcal in result.kcal_by_food.items()}
    fields["totalKcal"] = str(result.total_kcal)
    return ResultView(visible=True, fields=fields)
