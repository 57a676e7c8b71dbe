from cat_calories.calculator import auto_calculate, calculate
from cat_calories.foods import FoodType, manual_totals
from cat_calories.presenter import present_manual, present_result


def test_present_result() -> None:
    view = present_result(calculate("4", "1,1.2"))
    assert view.visible
    assert view.fields == {
        "rerValue": "198",
        "derMinValue": "198",
        "derMaxValue": "238",
        "wetFoodMin": "198",
        "wetFoodMax": "238",
        "rawMeatMin": "132",
        "rawMeatMax": "159",
        "freezeDriedMin": "50",
        "freezeDriedMax": "60",
    }


def test_present_hidden() -> None:
    view = present_result(auto_calculate("", "1,1.2"))
    assert not view.visible
    assert view.fields == {}


def test_present_manual() -> None:
    view = present_manual(manual_totals({FoodType.WET_FOOD: 80, FoodType.RAW_MEAT: 20}))
    assert view.fields == {"wetFoodKcal": "80", "rawMeatKcal": "30", "freezeDriedKcal": "0", "totalKcal": "110"}
