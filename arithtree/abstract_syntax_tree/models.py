from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from arithtree.abstract_syntax_tree.operators import (
    BinaryOperator,
    apply_binary_operator,
    apply_function,
)
from arithtree.errors import EvaluationError

if TYPE_CHECKING:
    from arithtree.traversal.visitor_pattern import Transformer

# ==================================================
# Base classes
# ==================================================

@dataclass(frozen=True)
class Expression(ABC):
    """
    A generic expression node. All specific node types inherit from this base class.
    Nodes are immutable once constructed.
    """

    @abstractmethod
    def evaluate(self) -> float:
        """
        Returns the numeric value of the subtree rooted at this node.
        """

    @abstractmethod
    def transform(self, transformer: Transformer) -> Expression:
        """
        Dispatches to the transformer method for this node type and returns the new node.
        """


def _require_expression(value: object, field_name: str) -> None:
    if not isinstance(value, Expression):
        raise TypeError(f"{field_name} must be an Expression, got {type(value).__name__}")

# ==================================================
# Leaf nodes
# ==================================================

@dataclass(frozen=True)
class Number(Expression):
    """
    Represents a numeric literal.
    """
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def evaluate(self) -> float:
        return self.value

    def transform(self, transformer: Transformer) -> Expression:
        return transformer.transform_number(self)

@dataclass(frozen=True)
class Variable(Expression):
    """
    Represents a named variable whose value is bound at construction time.
    There is no environment lookup: the binding travels with the node.
    """
    name: str
    value: float

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.isidentifier():
            raise ValueError(f"Variable name must be a non-empty identifier, got {self.name!r}")
        object.__setattr__(self, "value", float(self.value))

    def evaluate(self) -> float:
        return self.value

    def transform(self, transformer: Transformer) -> Expression:
        return transformer.transform_variable(self)

# ==================================================
# Composite nodes
# ==================================================

@dataclass(frozen=True)
class BinaryOperation(Expression):
    """
    Represents a binary arithmetic operation (+, -, *, /).
    """
    left: Expression
    operator: BinaryOperator
    right: Expression

    def __post_init__(self) -> None:
        _require_expression(self.left, "left")
        _require_expression(self.right, "right")
        try:
            operator = BinaryOperator(self.operator)
        except ValueError:
            raise ValueError(
                f"Unsupported binary operator {self.operator!r}; "
                f"expected one of {[op.value for op in BinaryOperator]}"
            ) from None
        object.__setattr__(self, "operator", operator)

    def evaluate(self) -> float:
        left_value = self.left.evaluate()
        right_value = self.right.evaluate()
        try:
            return apply_binary_operator(self.operator, left_value, right_value)
        except EvaluationError as exc:
            return exc.fallback_value

    def transform(self, transformer: Transformer) -> Expression:
        return transformer.transform_binary_operation(self)

@dataclass(frozen=True)
class FunctionCall(Expression):
    """
    Represents a call of a named unary function (e.g., sqrt(x), abs(x)).
    Names outside the function registry are accepted and evaluate to 0.0.
    """
    name: str
    argument: Expression

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"name must be a str, got {type(self.name).__name__}")
        _require_expression(self.argument, "argument")

    def evaluate(self) -> float:
        argument_value = self.argument.evaluate()
        try:
            return apply_function(self.name, argument_value)
        except EvaluationError as exc:
            return exc.fallback_value

    def transform(self, transformer: Transformer) -> Expression:
        return transformer.transform_function_call(self)
