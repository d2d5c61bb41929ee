"""Tests for infix to postfix conversion and grouping validation."""

from __future__ import annotations

from collections import Counter

import pytest

from recipes.formula import (
    FormulaEngine,
    GrouperStep,
    IngredientStep,
    MalformedFormulaError,
    NumberStep,
    OperatorStep,
    to_postfix,
    tokenize,
)
from recipes.formula.grouping import validate_grouping


def n(value: float) -> NumberStep:
    return NumberStep(value)


def op(action: str) -> OperatorStep:
    return OperatorStep(action)


class TestToPostfix:
    """Shunting-yard ordering."""

    def test_precedence(self) -> None:
        assert to_postfix(tokenize("1 / 2 - 3 * 4 + 5")) == [
            n(1), n(2), op("/"), n(3), n(4), op("*"), op("-"), n(5), op("+"),
        ]

    def test_equal_precedence_is_left_associative(self) -> None:
        assert to_postfix(tokenize("1 + 1 + 1")) == [n(1), n(1), op("+"), n(1), op("+")]
        assert to_postfix(tokenize("8 - 4 - 2")) == [n(8), n(4), op("-"), n(2), op("-")]

    def test_ingredient_steps(self) -> None:
        steps = tokenize("[cat] / [dog] / [bird]", ["cat", "bird", "dog"])
        assert to_postfix(steps) == [
            IngredientStep(0, "cat"),
            IngredientStep(2, "dog"),
            op("/"),
            IngredientStep(1, "bird"),
            op("/"),
        ]

    def test_parentheses_override_precedence(self) -> None:
        assert to_postfix(tokenize("(1 + 2) * 3")) == [n(1), n(2), op("+"), n(3), op("*")]

    def test_nested_parentheses(self) -> None:
        assert to_postfix(tokenize("2 * (3 - (4 / 5))")) == [
            n(2), n(3), n(4), n(5), op("/"), op("-"), op("*"),
        ]

    def test_no_groupers_in_output(self) -> None:
        postfix = to_postfix(tokenize("((1 / 4) * 4) + (1 - (1 / (1 / 3)))"))
        assert not any(isinstance(step, GrouperStep) for step in postfix)

    @pytest.mark.parametrize(
        "formula",
        [
            "1 / 2 - 3 * 4 + 5",
            "((1+2)/3)+([c]-[d])",
            "[a] * ([b] + 2.5) / ([c] - [d] - [e])",
            "100 / 100 / (100 / (1/100))",
        ],
    )
    def test_operands_are_preserved(self, formula: str) -> None:
        infix = tokenize(formula, list("abcde"))
        postfix = to_postfix(infix)

        def operands(steps):
            return Counter(step for step in steps if isinstance(step, (NumberStep, IngredientStep)))

        assert operands(postfix) == operands(infix)
        assert Counter(s for s in postfix if isinstance(s, OperatorStep)) == Counter(
            s for s in infix if isinstance(s, OperatorStep)
        )

    def test_does_not_mutate_input(self) -> None:
        infix = tokenize("(1 + 2) * 3")
        snapshot = list(infix)
        to_postfix(infix)
        assert infix == snapshot

    def test_exposed_on_engine(self) -> None:
        steps = tokenize("1 + 2 * 3")
        assert FormulaEngine.to_postfix(steps) == to_postfix(steps)


class TestGrouping:
    """Parenthesis balance."""

    @pytest.mark.parametrize("formula", ["(1 + 1))", "((1 + 1)", ")1 + 1(", "(", "1 + 1)"])
    def test_unbalanced_formulas_are_rejected(self, formula: str) -> None:
        with pytest.raises(MalformedFormulaError):
            FormulaEngine(formula)

    def test_close_before_open_is_rejected_even_when_counts_match(self) -> None:
        with pytest.raises(MalformedFormulaError):
            validate_grouping(tokenize(")1 + 2("))

    def test_balanced_formula_passes(self) -> None:
        validate_grouping(tokenize("((1 + 2) * (3))"))

    def test_parentheses_inside_ingredient_names_are_not_groupers(self) -> None:
        engine = FormulaEngine("[Revenue (net)] * 2", [{"name": "Revenue (net)", "values": {"2015-01-31": 2}}])
        assert engine.evaluate("2015-01-31") == 4.0
