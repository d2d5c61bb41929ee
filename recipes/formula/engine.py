import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .errors import MissingFormulaError, UnknownIngredientError
from .evaluator import Evaluator
from .grouping import validate_grouping
from .ingredients import Ingredient, coerce_ingredients, resolve_ingredient_value
from .postfix import to_postfix
from .steps import IngredientStep, Outcome, Step
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class FormulaEngine:
    """
    A formula bound to the ingredient series it reads from.

    The formula is tokenized and validated once; every call to ``evaluate``
    converts it to postfix and reads ingredient values for the requested date.

    Example:
        engine = FormulaEngine(
            "[Monthly Recurring Revenue] - [Monthly Expenses]",
            [
                {"name": "Monthly Recurring Revenue", "values": {"2015-02-28": 14257.34}},
                {"name": "Monthly Expenses", "values": {"2015-02-28": 9349.45}},
            ],
        )
        engine.evaluate("2015-02-28")  # 4907.89
    """

    def __init__(self, formula: Optional[str], ingredients: Optional[Sequence[Any]] = None, strict: bool = False):
        """
        Args:
            formula: The formula string. Required.
            ingredients: ``Ingredient`` objects or ``{"name", "values"}`` mappings.
                Their order defines the index stored on ingredient steps.
            strict: Raise ``UnknownIngredientError`` for bracketed names that
                match no ingredient instead of dropping them.

        Raises:
            MissingFormulaError: formula is missing or blank.
            MalformedFormulaError: parentheses do not balance.
            UnknownIngredientError: strict mode only.
        """
        if formula is None or not str(formula).strip():
            raise MissingFormulaError("A formula is required")

        self.formula = formula
        self.ingredients: List[Ingredient] = coerce_ingredients(ingredients)

        tokenizer = Tokenizer(formula, [ingredient.name for ingredient in self.ingredients])
        self.infix: List[Step] = tokenizer.generate_steps()
        validate_grouping(self.infix)

        if tokenizer.unresolved:
            if strict:
                raise UnknownIngredientError(tokenizer.unresolved)
            logger.warning(
                f"Dropping unknown ingredient reference(s) {tokenizer.unresolved} from formula: {formula}"
            )

    def __repr__(self):
        return f"FormulaEngine({self.formula!r})"

    @property
    def ingredient_names(self) -> List[str]:
        """Distinct ingredient names referenced by the formula, in formula order."""
        names: List[str] = []
        for step in self.infix:
            if isinstance(step, IngredientStep) and step.name not in names:
                names.append(step.name)
        return names

    @staticmethod
    def to_postfix(steps: Sequence[Step]) -> List[Step]:
        return to_postfix(steps)

    def ingredient_value(self, step: IngredientStep, on_date: Any) -> Outcome:
        return resolve_ingredient_value(self.ingredients, step, on_date)

    def evaluate(self, on_date: Any = None) -> Outcome:
        """Evaluate the formula for ``on_date``; returns a float, ``NO_VALUE`` or ``UNKNOWN``."""
        result = Evaluator(self.ingredient_value).eval(to_postfix(self.infix), on_date)
        logger.debug(f"{self.formula} @ {on_date} = {result!r}")
        return result

    def evaluate_many(self, dates: Iterable[Any]) -> Dict[Any, Outcome]:
        return {on_date: self.evaluate(on_date) for on_date in dates}
