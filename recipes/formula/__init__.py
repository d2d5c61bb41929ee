"""
Formula engine for recipe evaluation.

A recipe formula is plain arithmetic over numbers and bracketed ingredient
references, e.g. ``([Income] - [Costs]) / [Partners]``. Formulas are
tokenized into steps, reordered to postfix and evaluated on a stack
without using eval().
"""

from .engine import FormulaEngine
from .errors import FormulaError, MalformedFormulaError, MissingFormulaError, UnknownIngredientError
from .evaluator import Evaluator
from .ingredients import Ingredient
from .postfix import to_postfix
from .steps import (
    NO_VALUE, UNKNOWN, Missing, Step,
    NumberStep, IngredientStep, OperatorStep, GrouperStep,
)
from .tokenizer import Tokenizer, tokenize

__all__ = [
    'FormulaEngine', 'Tokenizer', 'Evaluator', 'Ingredient',
    'tokenize', 'to_postfix',
    'Step', 'NumberStep', 'IngredientStep', 'OperatorStep', 'GrouperStep',
    'Missing', 'NO_VALUE', 'UNKNOWN',
    'FormulaError', 'MalformedFormulaError', 'MissingFormulaError', 'UnknownIngredientError',
]
