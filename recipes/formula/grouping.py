from .errors import MalformedFormulaError
from .steps import GrouperStep


def validate_grouping(steps):
    """Raise ``MalformedFormulaError`` unless every ``)`` closes an earlier ``(``."""
    depth = 0
    for position, step in enumerate(steps):
        if not isinstance(step, GrouperStep):
            continue
        depth += 1 if step.is_open else -1
        if depth < 0:
            raise MalformedFormulaError(f"Unmatched ')' at step {position}")
    if depth:
        raise MalformedFormulaError(f"{depth} unclosed '(' in formula")
