import logging
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from .steps import NO_VALUE, UNKNOWN, NumberStep, IngredientStep, OperatorStep

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

# enough digits for any finite double plus cents
ROUNDING_PRECISION = 400


def divide(left, right):
    """Float division that follows IEEE 754 for a zero divisor."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def apply_operator(action, left, right):
    if left is UNKNOWN or right is UNKNOWN:
        return UNKNOWN
    if left is NO_VALUE or right is NO_VALUE:
        return NO_VALUE

    if action == "+": return left + right
    if action == "-": return left - right
    if action == "*": return left * right
    if action == "/": return divide(left, right)

    raise ValueError(f"Unsupported operator {action!r}")


def round_outcome(outcome):
    """Round finite numbers half-up to two places; everything else passes through."""
    if not isinstance(outcome, float) or not math.isfinite(outcome):
        return outcome
    with localcontext() as context:
        context.prec = ROUNDING_PRECISION
        return float(Decimal(repr(outcome)).quantize(CENTS, rounding=ROUND_HALF_UP))


class Evaluator:
    def __init__(self, resolve):
        # resolve(step, on_date) -> float | NO_VALUE | UNKNOWN
        self.resolve = resolve

    def eval(self, postfix, on_date=None):
        stack = []

        for step in postfix:
            if isinstance(step, NumberStep):
                stack.append(float(step.number))

            elif isinstance(step, IngredientStep):
                stack.append(self.resolve(step, on_date))

            elif isinstance(step, OperatorStep):
                if len(stack) < 2:
                    logger.warning(f"Operator '{step.action}' is missing an operand; result is unknown")
                    return UNKNOWN
                right = stack.pop()
                left = stack.pop()
                stack.append(apply_operator(step.action, left, right))

        if len(stack) != 1:
            logger.warning(f"Formula left {len(stack)} values on the stack; result is unknown")
            return UNKNOWN

        return round_outcome(stack[0])
