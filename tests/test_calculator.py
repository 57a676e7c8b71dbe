import pytest

from cat_calories.calculator import auto_calculate, calculate, compute
from cat_calories.foods import FoodType
from cat_calories.models import DerRange, LifeStageFactor
from cat_calories.validation import CalorieInputError, ValidationReason


def test_calculate() -> None:
    result = calculate("4", "1,1.2")
    assert result.rer == 198
    assert result.der == DerRange(min=198, max=238)
    assert result.portions[FoodType.RAW_MEAT].min_grams == 132


def test_calculate_accepts_upper_bound() -> None:
    assert calculate("20", "1,1.2").rer == 662


@pytest.mark.parametrize(
    ("weight", "stage", "reason"),
    [
        ("20.01", "1,1.2", ValidationReason.IMPLAUSIBLE_WEIGHT),
        ("0", "1,1.2", ValidationReason.INVALID_WEIGHT),
        ("", "1,1.2", ValidationReason.INVALID_WEIGHT),
        ("4", "", ValidationReason.MISSING_LIFE_STAGE),
        ("0", "", ValidationReason.INVALID_WEIGHT),
        ("25", "", ValidationReason.MISSING_LIFE_STAGE),
    ],
)
def test_calculate_rejects(weight: str, stage: str, reason: ValidationReason) -> None:
    with pytest.raises(CalorieInputError) as exc_info:
        calculate(weight, stage)
    assert exc_info.value.reason is reason


@pytest.mark.parametrize(("weight", "stage"), [("", "1,1.2"), ("0", "1,1.2"), ("4", ""), ("4", None), ("x", "1,1.2")])
def test_auto_calculate_hides_incomplete_input(weight, stage) -> None:
    assert auto_calculate(weight, stage) is None


def test_auto_calculate() -> None:
    assert auto_calculate("4", "1,1.2") == calculate("4", "1,1.2")


def test_compute_is_repeatable() -> None:
    factor = LifeStageFactor(1.2, 1.4)
    assert compute(4.5, factor) == compute(4.5, factor)


def test_auto_calculate_skips_weight_ceiling() -> None:
    result = auto_calculate("25", "1,1.2")
    assert result is not None
    assert result.rer == 783
    with pytest.raises(CalorieInputError) as exc_info:
        calculate("25", "1,1.2")
    assert exc_info.value.reason is ValidationReason.IMPLAUSIBLE_WEIGHT
