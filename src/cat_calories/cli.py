import json
import logging
from typing import Optional

import typer

from .calculator import calculate
from .config import load_settings
from .energy import LIFE_STAGES, REFERENCE_RER, calculate_rer
from .foods import FoodType, manual_totals
from .presenter import present_manual, present_result
from .storage import PreferenceStore, load_user_data, save_user_data
from .validation import CalorieInputError, parse_grams

logger = logging.getLogger(__name__)

app = typer.Typer(help="Cat calorie utilities")


@app.callback()
def main(
    ctx: typer.Context,
    db: Optional[str] = typer.Option(None, help="Preference database path (default: CAT_CALORIES_DB_PATH)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    settings = load_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = PreferenceStore(db or settings.db_path)


@app.command()
def energy(
    ctx: typer.Context,
    weight_kg: Optional[str] = typer.Option(None, help="Cat weight in kg (default: last saved)"),
    life_stage: Optional[str] = typer.Option(
        None,
        help="Life-stage key or 'min,max' factor pair (default: last saved)",
    ),
) -> None:
    """Compute RER, DER and food portions for a cat."""
    store: PreferenceStore = ctx.obj
    saved = load_user_data(store)
    raw_weight = weight_kg if weight_kg is not None else saved.weight
    raw_stage = life_stage if life_stage is not None else saved.life_stage

    try:
        result = calculate(raw_weight, raw_stage)
    except CalorieInputError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    save_user_data(store, str(raw_weight).strip(), result.factor.value)
    view = present_result(result)
    typer.echo(
        json.dumps(
            {
                "weight_kg": result.weight_kg,
                "life_stage": result.factor.value,
                "rer": result.rer,
                "der": {"min": result.der.min, "max": result.der.max},
                "display": view.fields,
            },
            ensure_ascii=False,
        )
    )


@app.command()
def manual(
    wet_food: str = typer.Option("", help="Wet food grams"),
    raw_meat: str = typer.Option("", help="Raw meat grams"),
    freeze_dried: str = typer.Option("", help="Freeze-dried grams"),
) -> None:
    """Total the calories of the given food masses."""
    result = manual_totals(
        {
            FoodType.WET_FOOD: parse_grams(wet_food),
            FoodType.RAW_MEAT: parse_grams(raw_meat),
            FoodType.FREEZE_DRIED: parse_grams(freeze_dried),
        }
    )
    typer.echo(json.dumps(present_manual(result).fields, ensure_ascii=False))


@app.command()
def stages() -> None:
    """List the life-stage options."""
    for stage in LIFE_STAGES:
        typer.echo(f"{stage.key}\t{stage.value}\t{stage.label}")


@app.command()
def reference() -> None:
    """Compare calculated RER against the published chart."""
    mismatches = 0
    for weight, expected in REFERENCE_RER.items():
        actual = calculate_rer(weight)
        flag = "" if actual == expected else "  *"
        if flag:
            mismatches += 1
        typer.echo(f"{weight:>2} kg  chart={expected:>3}  calc={actual:>3}{flag}")
    if mismatches:
        logger.warning("%d chart entries differ from the formula", mismatches)


if __name__ == "__main__":
    app()
