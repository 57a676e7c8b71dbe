import pytest

from cat_calories.energy import (
    LIFE_STAGES,
    LIFE_STAGES_BY_KEY,
    REFERENCE_RER,
    calculate_der,
    calculate_rer,
    round_half_up,
)
from cat_calories.models import DerRange, LifeStageFactor


@pytest.mark.parametrize(
    ("weight_kg", "expected_rer"),
    [
        (1.0, 70),
        (4.0, 198),
        (5.0, 234),
        (10.0, 394),
        (20.0, 662),
    ],
)
def test_calculate_rer(weight_kg: float, expected_rer: int) -> None:
    assert calculate_rer(weight_kg) == expected_rer


@pytest.mark.parametrize("weight_kg", range(1, 15))
def test_calculate_rer_matches_chart(weight_kg: int) -> None:
    assert calculate_rer(weight_kg) == REFERENCE_RER[weight_kg]


def test_chart_entry_for_15kg_is_one_below_formula() -> None:
    # 15 ** 0.75 * 70 == 533.54
    assert REFERENCE_RER[15] == 533
    assert calculate_rer(15) == 534


def test_calculate_der() -> None:
    assert calculate_der(198, 1.0, 1.2) == DerRange(min=198, max=238)


def test_calculate_der_passes_inverted_range_through() -> None:
    der = calculate_der(100, 1.4, 1.2)
    assert der == DerRange(min=140, max=120)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.5, 1),
        (2.5, 3),
        (247.5, 248),
        (237.6, 238),
        (-0.5, 0),
        (0.49999999999999994, 0),
    ],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


def test_calculations_are_repeatable() -> None:
    assert calculate_rer(4.5) == calculate_rer(4.5)
    assert calculate_der(213, 1.2, 1.4) == calculate_der(213, 1.2, 1.4)


def test_life_stage_catalogue() -> None:
    assert len(LIFE_STAGES_BY_KEY) == len(LIFE_STAGES)
    assert LIFE_STAGES_BY_KEY["inactive"].value == "1,1.2"
    assert all(stage.factor.min_factor <= stage.factor.max_factor for stage in LIFE_STAGES)


def test_life_stage_factor_rejects_non_positive() -> None:
    with pytest.raises(ValueError):
        LifeStageFactor(0.0, 1.2)


def test_life_stage_factor_value_keeps_full_precision() -> None:
    assert LifeStageFactor(1.2345678, 2.0).value == "1.2345678,2"
    assert LifeStageFactor(2.5, 3.0).value == "2.5,3"
