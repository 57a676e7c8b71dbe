import streamlit as st

from cat_calories.calculator import auto_calculate, calculate
from cat_calories.config import load_settings
from cat_calories.energy import LIFE_STAGES
from cat_calories.foods import FoodType, manual_totals
from cat_calories.presenter import ResultView, present_manual, present_result
from cat_calories.storage import PreferenceStore, load_user_data, save_user_data
from cat_calories.validation import CalorieInputError, parse_grams

st.set_page_config(page_title="Cat Calorie Calculator", page_icon="🐱")
st.title("🐱 貓咪熱量計算器")

settings = load_settings()
store = PreferenceStore(settings.db_path)

if "loaded" not in st.session_state:
    saved = load_user_data(store)
    st.session_state["weight"] = saved.weight or ""
    st.session_state["life_stage"] = saved.life_stage or ""
    st.session_state["loaded"] = True

stage_values = [""] + [stage.value for stage in LIFE_STAGES]
stage_labels = {stage.value: stage.label for stage in LIFE_STAGES}
if st.session_state["life_stage"] not in stage_values:
    stage_values.append(st.session_state["life_stage"])

FOOD_LABELS = {
    FoodType.WET_FOOD: "主食罐",
    FoodType.RAW_MEAT: "生肉",
    FoodType.FREEZE_DRIED: "凍乾",
}


def _persist() -> None:
    save_user_data(store, st.session_state["weight"].strip(), st.session_state["life_stage"])


def _show(view: ResultView) -> None:
    if not view.visible:
        return
    fields = view.fields
    c1, c2, c3 = st.columns(3)
    c1.metric("RER", f"{fields['rerValue']} kcal")
    c2.metric("DER 最小", f"{fields['derMinValue']} kcal")
    c3.metric("DER 最大", f"{fields['derMaxValue']} kcal")
    st.dataframe(
        [
            {
                "食材": label,
                "最少 (g)": fields[f"{food.value}Min"],
                "最多 (g)": fields[f"{food.value}Max"],
            }
            for food, label in FOOD_LABELS.items()
        ],
        use_container_width=True,
    )


tab_der, tab_manual = st.tabs(["每日熱量", "食材換算"])

with tab_der:
    st.text_input("體重 (kg)", key="weight", on_change=_persist)
    st.selectbox(
        "生活階段",
        stage_values,
        key="life_stage",
        format_func=lambda v: stage_labels.get(v, v or "請選擇"),
        on_change=_persist,
    )

    if st.button("計算"):
        try:
            _show(present_result(calculate(st.session_state["weight"], st.session_state["life_stage"])))
        except CalorieInputError as exc:
            st.error(str(exc))
    else:
        _show(present_result(auto_calculate(st.session_state["weight"], st.session_state["life_stage"])))

with tab_manual:
    grams = {food: parse_grams(st.text_input(f"{label} (g)", key=f"{food.value}Input")) for food, label in FOOD_LABELS.items()}
    if st.button("計算總熱量"):
        fields = present_manual(manual_totals(grams)).fields
        st.dataframe(
            [{"食材": label, "熱量 (kcal)": fields[f"{food.value}Kcal"]} for food, label in FOOD_LABELS.items()],
            use_container_width=True,
        )
        st.metric("總熱量", f"{fields['totalKcal']} kcal")
