from .steps import OPERATORS, GROUPERS, NumberStep, IngredientStep, OperatorStep, GrouperStep


def _is_digit(char):
    return "0" <= char <= "9"


class Tokenizer:
    """Turns a formula string into a list of steps.

    Numbers may start with a decimal point (".5"). Unsupported characters
    are skipped. Bracketed names that do not match an ingredient are
    skipped too and collected in ``unresolved``.
    """

    def __init__(self, text, ingredient_names=()):
        self.text = text or ""
        self.pos = 0
        self.current = self.text[0] if self.text else None
        self.ingredient_names = list(ingredient_names)
        self.unresolved = []

    def advance(self):
        self.pos += 1
        self.current = self.text[self.pos] if self.pos < len(self.text) else None

    def skip_spaces(self):
        while self.current and self.current.isspace():
            self.advance()

    def peek(self):
        return self.text[self.pos + 1] if self.pos + 1 < len(self.text) else None

    def starts_number(self):
        if _is_digit(self.current):
            return True
        # ".5" is a number, a lone "." is not
        return self.current == "." and self.peek() is not None and _is_digit(self.peek())

    def number(self):
        start = self.pos
        seen_point = False
        while self.current and (_is_digit(self.current) or (self.current == '.' and not seen_point)):
            if self.current == '.':
                seen_point = True
            self.advance()
        return NumberStep(float(self.text[start:self.pos]))

    def ingredient(self):
        self.advance()  # [
        start = self.pos
        while self.current and self.current != ']':
            self.advance()
        if self.current is None:
            # unterminated reference, nothing left to tokenize
            return None
        name = self.text[start:self.pos]
        self.advance()  # ]

        if name in self.ingredient_names:
            return IngredientStep(self.ingredient_names.index(name), name)
        self.unresolved.append(name)
        return None

    def generate_steps(self):
        steps = []
        while self.current:
            if self.current.isspace():
                self.skip_spaces()
                continue

            if self.starts_number():
                steps.append(self.number())
                continue

            if self.current == '[':
                step = self.ingredient()
                if step is not None:
                    steps.append(step)
                continue

            if self.current in OPERATORS:
                steps.append(OperatorStep(self.current))
            elif self.current in GROUPERS:
                steps.append(GrouperStep(self.current))

            self.advance()

        return steps


def tokenize(formula, ingredient_names=()):
    return Tokenizer(formula, ingredient_names).generate_steps()
