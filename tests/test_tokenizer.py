"""Tests for turning formula strings into steps."""

from __future__ import annotations

from recipes.formula import (
    GrouperStep,
    IngredientStep,
    NumberStep,
    OperatorStep,
    Tokenizer,
    tokenize,
)


def names(ingredients: list[dict]) -> list[str]:
    return [ingredient["name"] for ingredient in ingredients]


class TestNumbers:
    """Numeric literals."""

    def test_integers_become_number_steps(self) -> None:
        steps = tokenize("1 * 10000000000 + 33 / 0")
        assert steps[0] == NumberStep(1)
        assert steps[2] == NumberStep(10000000000)
        assert steps[4] == NumberStep(33)
        assert steps[6] == NumberStep(0)

    def test_decimal_literal(self) -> None:
        assert tokenize("14257.34") == [NumberStep(14257.34)]

    def test_only_one_decimal_point_per_number(self) -> None:
        assert tokenize("1.5.25") == [NumberStep(1.5), NumberStep(0.25)]

    def test_leading_decimal_point(self) -> None:
        assert tokenize(".5 + 1") == [NumberStep(0.5), OperatorStep("+"), NumberStep(1)]

    def test_lone_decimal_point_is_skipped(self) -> None:
        assert tokenize("1 + . 2") == [NumberStep(1), OperatorStep("+"), NumberStep(2)]

    def test_numbers_are_floats(self) -> None:
        (step,) = tokenize("7")
        assert isinstance(step.number, float)


class TestIngredients:
    """Bracketed ingredient references."""

    def test_references_store_index_and_name(self, revenue_ingredients: list[dict]) -> None:
        steps = tokenize("[Monthly Recurring Revenue] - [Monthly Expenses]", names(revenue_ingredients))
        assert steps[0] == IngredientStep(0, "Monthly Recurring Revenue")
        assert steps[2] == IngredientStep(1, "Monthly Expenses")

    def test_index_follows_ingredient_list_not_formula(self) -> None:
        steps = tokenize("[cat] / [dog] / [bird]", ["cat", "bird", "dog"])
        assert [step for step in steps if isinstance(step, IngredientStep)] == [
            IngredientStep(0, "cat"),
            IngredientStep(2, "dog"),
            IngredientStep(1, "bird"),
        ]

    def test_unknown_reference_is_dropped_and_recorded(self, letter_ingredients: list[dict]) -> None:
        tokenizer = Tokenizer("[a] + [not an ingredient]", names(letter_ingredients))
        assert tokenizer.generate_steps() == [IngredientStep(0, "a"), OperatorStep("+")]
        assert tokenizer.unresolved == ["not an ingredient"]

    def test_unknown_reference_does_not_stop_tokenizing(self, letter_ingredients: list[dict]) -> None:
        steps = tokenize("[zzz] * [b]", names(letter_ingredients))
        assert steps == [OperatorStep("*"), IngredientStep(1, "b")]

    def test_names_match_exactly(self) -> None:
        tokenizer = Tokenizer("[ Revenue ]", ["Revenue"])
        assert tokenizer.generate_steps() == []
        assert tokenizer.unresolved == [" Revenue "]

    def test_unterminated_reference_yields_nothing(self) -> None:
        assert tokenize("1 + [Revenue", ["Revenue"]) == [NumberStep(1), OperatorStep("+")]


class TestOperatorsAndGroupers:
    """Operators and parentheses."""

    def test_operators(self, letter_ingredients: list[dict]) -> None:
        steps = tokenize("[a]+[b] * [c] /[d]- [e]", names(letter_ingredients))
        assert steps[1] == OperatorStep("+")
        assert steps[3] == OperatorStep("*")
        assert steps[5] == OperatorStep("/")
        assert steps[7] == OperatorStep("-")

    def test_parentheses(self, letter_ingredients: list[dict]) -> None:
        steps = tokenize("((1+2)/3)+([c]-[d])", names(letter_ingredients))
        assert steps[0] == GrouperStep("(")
        assert steps[1] == GrouperStep("(")
        assert steps[5] == GrouperStep(")")
        assert steps[8] == GrouperStep(")")
        assert steps[10] == GrouperStep("(")
        assert steps[14] == GrouperStep(")")
        assert len(steps) == 15

    def test_unsupported_operators_are_excluded(self, letter_ingredients: list[dict]) -> None:
        steps = tokenize("[a] x [b] dividedBy [c] & [d] % [e]", names(letter_ingredients))
        assert len(steps) == 5
        assert [step.name for step in steps] == ["a", "b", "c", "d", "e"]
        assert not any(isinstance(step, OperatorStep) for step in steps)

    def test_empty_formula(self) -> None:
        assert tokenize("") == []
        assert tokenize(None) == []
