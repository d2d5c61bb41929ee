"""
Celery tasks for recipe evaluation.
"""
import logging
from typing import Any, Dict, List, Optional

from celery import shared_task
from django.core.exceptions import ValidationError

from .formula import FormulaError
from .models import Recipe
from .utils import evaluate_recipe_series, serialize_outcome

logger = logging.getLogger(__name__)


def summarize_series(series: List[Dict[str, Any]]) -> Dict[str, int]:
    """Count serialized outcomes by status."""
    summary: Dict[str, int] = {}
    for point in series:
        summary[point["status"]] = summary.get(point["status"], 0) + 1
    return summary


@shared_task(bind=True, max_retries=3)
def run_recipe_series(self, recipe_id: str) -> Optional[List[Dict[str, Any]]]:
    """
    Celery task to evaluate a recipe for every date its ingredients have readings for.

    Args:
        recipe_id: Primary key of the recipe (UUID string)

    Returns:
        List of serialized outcomes in date order, or None if the recipe
        does not exist or its formula cannot be evaluated
    """
    try:
        recipe = Recipe.objects.get(pk=recipe_id)
    except (Recipe.DoesNotExist, ValidationError):
        logger.error(f"Recipe {recipe_id} not found; skipping series evaluation")
        return None

    try:
        series = evaluate_recipe_series(recipe)
    except FormulaError as e:
        logger.error(f"Formula for recipe {recipe.code} cannot be evaluated: {str(e)}")
        return None
    except Exception as e:
        logger.error(
            f"Error in run_recipe_series task for recipe {recipe.code}: {str(e)}",
            exc_info=True
        )
        raise self.retry(exc=e, countdown=60 * (self.request.retries + 1))

    data = [serialize_outcome(outcome, on_date) for on_date, outcome in series.items()]
    logger.info(f"Evaluated recipe {recipe.code} for {len(data)} dates: {summarize_series(data)}")
    return data
