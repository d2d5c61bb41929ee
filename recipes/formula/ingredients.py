from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Sequence, List

from .steps import NO_VALUE, UNKNOWN, IngredientStep, Outcome


@dataclass(frozen=True)
class Ingredient:
    """A named series of readings keyed by ISO date string.

    A reading of ``None`` means the date was recorded without a value.
    """

    name: str
    values: Mapping[str, Optional[float]] = field(default_factory=dict)

    @classmethod
    def coerce(cls, item: Any) -> "Ingredient":
        """Accept either an ``Ingredient`` or a ``{"name": ..., "values": ...}`` mapping."""
        if isinstance(item, cls):
            return item
        return cls(name=item["name"], values=item.get("values") or {})


def coerce_ingredients(items: Optional[Sequence[Any]]) -> List[Ingredient]:
    return [Ingredient.coerce(item) for item in items or ()]


def date_key(value: Any) -> Any:
    """Normalize a date key; ``date`` objects become ISO strings."""
    if isinstance(value, date):
        return value.isoformat()
    return value


def resolve_ingredient_value(ingredients: Sequence[Ingredient], step: IngredientStep, on_date: Any) -> Outcome:
    """Look up the reading for ``step`` on ``on_date``.

    Returns the reading as a float, ``NO_VALUE`` when the date is recorded
    without a reading, or ``UNKNOWN`` when the date is absent.
    """
    series = ingredients[step.index].values
    key = date_key(on_date)
    if key not in series:
        return UNKNOWN
    value = series[key]
    if value is None:
        return NO_VALUE
    return float(value)
