class FormulaError(Exception):
    """Base class for errors raised while building a formula."""


class MalformedFormulaError(FormulaError):
    """The formula's parentheses do not balance."""


class MissingFormulaError(MalformedFormulaError):
    """No formula string was supplied."""


class UnknownIngredientError(FormulaError):
    """The formula references ingredients that were not supplied (strict mode only)."""

    def __init__(self, names):
        self.names = list(names)
        super().__init__(f"Unknown ingredient(s): {', '.join(self.names)}")
