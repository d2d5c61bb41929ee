"""
Glue between stored recipes and the formula engine.
"""
import logging
import math
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from .formula import FormulaEngine, Ingredient as SeriesIngredient, NO_VALUE, UNKNOWN
from .models import Ingredient, IngredientReading, Recipe

logger = logging.getLogger(__name__)


def ingredient_series(ingredient: Ingredient) -> Dict[str, Optional[float]]:
    """
    Build the date-keyed series the formula engine reads for an ingredient.

    Args:
        ingredient: The Ingredient instance

    Returns:
        Mapping of ISO date string to float, or None for readings without a value
    """
    return {
        reading.date.isoformat(): None if reading.value is None else float(reading.value)
        for reading in ingredient.readings.all()
    }


def build_formula_engine(recipe: Recipe, strict: bool = False) -> FormulaEngine:
    """
    Create a FormulaEngine for a stored recipe.

    The recipe's ingredients are passed ordered by name, each with its full
    series of readings.

    Raises:
        FormulaError: if the stored formula no longer parses, or (strict)
            references an ingredient the recipe no longer has
    """
    ingredients = [
        SeriesIngredient(name=ingredient.name, values=ingredient_series(ingredient))
        for ingredient in recipe.ingredients.order_by("name").prefetch_related("readings")
    ]
    return FormulaEngine(recipe.formula, ingredients, strict=strict)


def recipe_dates(recipe: Recipe) -> List[date]:
    """Every date on which at least one of the recipe's ingredients has a reading."""
    return list(
        IngredientReading.objects.filter(ingredient__recipes=recipe)
        .order_by("date")
        .values_list("date", flat=True)
        .distinct()
    )


def evaluate_recipe(recipe: Recipe, on_date: Optional[date] = None):
    """Evaluate a recipe for a single date; returns a float, NO_VALUE or UNKNOWN."""
    return build_formula_engine(recipe, strict=True).evaluate(on_date)


def evaluate_recipe_series(recipe: Recipe, dates: Optional[Iterable[date]] = None) -> Dict[str, Any]:
    """
    Evaluate a recipe for each date, defaulting to every date the recipe's
    ingredients have readings for.

    Returns:
        Mapping of ISO date string to outcome, in date order
    """
    if dates is None:
        dates = recipe_dates(recipe)
    engine = build_formula_engine(recipe, strict=True)
    return {on_date.isoformat(): engine.evaluate(on_date) for on_date in dates}


def serialize_outcome(outcome, on_date=None) -> Dict[str, Any]:
    """
    Convert an evaluation outcome into a JSON-safe payload.

    Non-finite numbers (division by zero) are reported as strings so the
    payload stays valid strict JSON.
    """
    if isinstance(on_date, date):
        on_date = on_date.isoformat()

    if outcome is UNKNOWN:
        return {"date": on_date, "value": None, "status": "unknown"}
    if outcome is NO_VALUE:
        return {"date": on_date, "value": None, "status": "no_value"}
    if not math.isfinite(outcome):
        return {"date": on_date, "value": str(outcome), "status": "non_finite"}
    return {"date": on_date, "value": outcome, "status": "ok"}
