from __future__ import annotations

from dataclasses import dataclass


# ==================================================
# Normalized Evaluation Errors
# ==================================================


@dataclass(slots=True)
class EvaluationErrorDetails:
    """
    Structured metadata for evaluation errors.
    """

    node_type: str
    operation: str
    operands: tuple[float, ...]
    message: str


class EvaluationError(Exception):
    """
    Base evaluation error type.

    Every error carries the value the lenient evaluation path returns in its
    place, so callers can collapse an error back to what Expression.evaluate() returns.
    """

    def __init__(self, details: EvaluationErrorDetails, fallback_value: float) -> None:
        self.details = details
        self.fallback_value = fallback_value
        super().__init__(
            f"[{details.node_type}:{details.operation}] {self.__class__.__name__}: {details.message}"
        )


class UnknownOperatorError(EvaluationError):
    pass


class UnknownFunctionError(EvaluationError):
    pass


class ArithmeticDomainError(EvaluationError):
    """
    Raised for division by zero and arguments outside a function's domain.
    """
