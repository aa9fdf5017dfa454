from __future__ import annotations

from enum import Enum
import math
from typing import Callable

from arithtree.errors import (
    ArithmeticDomainError,
    EvaluationErrorDetails,
    UnknownFunctionError,
    UnknownOperatorError,
)

# ==================================================
# Operator Tags
# ==================================================


class BinaryOperator(str, Enum):
    """
    The closed set of binary operator tags.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value


# ==================================================
# Arithmetic Semantics
# ==================================================


def _divide(left: float, right: float) -> float:
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            ieee_value = math.nan
        else:
            ieee_value = math.copysign(math.inf, left) * math.copysign(1.0, right)
        raise ArithmeticDomainError(
            EvaluationErrorDetails(
                node_type="BinaryOperation",
                operation=BinaryOperator.DIVIDE.name.lower(),
                operands=(left, right),
                message="division by zero",
            ),
            ieee_value,
        )
    return left / right


_BINARY_OPERATIONS: dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: lambda left, right: left + right,
    BinaryOperator.SUBTRACT: lambda left, right: left - right,
    BinaryOperator.MULTIPLY: lambda left, right: left * right,
    BinaryOperator.DIVIDE: _divide,
}


def _sqrt(value: float) -> float:
    if value < 0.0:
        raise ArithmeticDomainError(
            EvaluationErrorDetails(
                node_type="FunctionCall",
                operation="sqrt",
                operands=(value,),
                message="square root of a negative number",
            ),
            math.nan,
        )
    return math.sqrt(value)


# Fixed registry; not meant to be extended by callers.
FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sqrt": _sqrt,
    "abs": abs,
}


def apply_binary_operator(operator: BinaryOperator, left: float, right: float) -> float:
    """
    Applies a binary operator to two evaluated operands.

    Raises UnknownOperatorError for tags outside BinaryOperator and
    ArithmeticDomainError for division by zero.
    """
    operation = _BINARY_OPERATIONS.get(operator)
    if operation is None:
        raise UnknownOperatorError(
            EvaluationErrorDetails(
                node_type="BinaryOperation",
                operation=str(operator),
                operands=(left, right),
                message=f"unknown operator {operator!r}",
            ),
            0.0,
        )
    return operation(left, right)


def apply_function(name: str, argument: float) -> float:
    """
    Applies a registered unary function to an evaluated argument.

    Raises UnknownFunctionError for names outside the registry and
    ArithmeticDomainError for arguments outside the function's domain.
    """
    function = FUNCTIONS.get(name)
    if function is None:
        raise UnknownFunctionError(
            EvaluationErrorDetails(
                node_type="FunctionCall",
                operation=name,
                operands=(argument,),
                message=f"unknown function {name!r}",
            ),
            0.0,
        )
    return float(function(argument))
