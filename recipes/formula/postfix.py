from typing import List, Sequence

from .steps import Step, NumberStep, IngredientStep, OperatorStep, GrouperStep


def to_postfix(steps: Sequence[Step]) -> List[Step]:
    """
    Reorder infix steps into postfix order (shunting-yard).

    Number and ingredient steps keep their relative order; groupers are
    consumed and never appear in the output. Expects balanced groupers.
    """
    output: List[Step] = []
    stack: List[Step] = []

    for step in steps:
        if isinstance(step, (NumberStep, IngredientStep)):
            output.append(step)

        elif isinstance(step, OperatorStep):
            while (
                stack
                and isinstance(stack[-1], OperatorStep)
                and stack[-1].precedence >= step.precedence
            ):
                output.append(stack.pop())
            stack.append(step)

        elif isinstance(step, GrouperStep):
            if step.is_open:
                stack.append(step)
                continue
            while stack:
                top = stack.pop()
                if isinstance(top, GrouperStep):
                    break
                output.append(top)

    while stack:
        top = stack.pop()
        if isinstance(top, OperatorStep):
            output.append(top)

    return output
