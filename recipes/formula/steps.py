from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

OPERATORS = ("+", "-", "*", "/")
GROUPERS = ("(", ")")

PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


class Missing(Enum):
    """Evaluation outcomes that are not numbers."""

    NO_VALUE = auto()  # date recorded, no reading
    UNKNOWN = auto()  # date never recorded

    def __repr__(self):
        return self.name


NO_VALUE = Missing.NO_VALUE
UNKNOWN = Missing.UNKNOWN

Outcome = Union[float, Missing]


class Step:
    """A single classified token of a formula."""

    __slots__ = ()


@dataclass(frozen=True)
class NumberStep(Step):
    number: float


@dataclass(frozen=True)
class IngredientStep(Step):
    index: int
    name: str


@dataclass(frozen=True)
class OperatorStep(Step):
    action: str

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.action]


@dataclass(frozen=True)
class GrouperStep(Step):
    grouper: str

    @property
    def is_open(self) -> bool:
        return self.grouper == "("
