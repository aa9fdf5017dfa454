from __future__ import annotations

from dataclasses import dataclass, field
import time
from typing import Any, Callable, Mapping
from uuid import uuid4

from arithtree.abstract_syntax_tree.models import (
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    Variable,
)
from arithtree.abstract_syntax_tree.operators import apply_binary_operator, apply_function
from arithtree.errors import EvaluationError
from arithtree.evaluation.observability import EvaluationEvent, EventObserveHook, _now_iso_utc
from arithtree.traversal.visitor_pattern import Visitor

# ==================================================
# Evaluation Settings & Results
# ==================================================


@dataclass(frozen=True)
class EvaluationSettings:
    """
    Evaluator behaviour settings.

    strict=False matches Expression.evaluate(): domain problems degrade to
    their fallback values. strict=True raises the first EvaluationError instead.
    """

    strict: bool = False
    event_observer: EventObserveHook | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EvaluationResult:
    """
    The outcome of a lenient evaluation together with every degradation it hit.
    """

    value: float
    errors: tuple[EvaluationError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_error(self) -> None:
        if self.errors:
            raise self.errors[0]

# ==================================================
# Evaluator
# ==================================================


class Evaluator(Visitor):
    """
    A visitor that evaluates an expression tree with configurable error handling
    and lifecycle events.

    Per-call state lives on the instance: an event observer may call back into
    the same evaluator only from an evaluate.end event.
    """

    def __init__(self, settings: EvaluationSettings | None = None) -> None:
        self._settings = settings or EvaluationSettings()
        self._errors: list[EvaluationError] = []
        self._strict = self._settings.strict
        self._evaluation_id: str | None = None

    @property
    def settings(self) -> EvaluationSettings:
        return self._settings

    def evaluate(self, node: Expression) -> float:
        """
        The main entry point for evaluating a tree.
        """
        value, _ = self._run(node, strict=self._settings.strict)
        return value

    def try_evaluate(self, node: Expression) -> EvaluationResult:
        """
        Evaluates leniently and reports every degradation instead of raising.
        """
        value, errors = self._run(node, strict=False)
        return EvaluationResult(value=value, errors=errors)

    def _run(self, node: Expression, *, strict: bool) -> tuple[float, tuple[EvaluationError, ...]]:
        self._errors = []  # Reset collected errors for each evaluation
        self._strict = strict
        self._evaluation_id = uuid4().hex
        node_type = node.__class__.__name__
        self._emit("evaluate.start", success=True, node_type=node_type)
        started = time.perf_counter()
        try:
            value = self.visit(node)
        except EvaluationError as exc:
            self._emit(
                "evaluate.end",
                success=False,
                node_type=node_type,
                duration_ms=(time.perf_counter() - started) * 1000,
                error_type=exc.__class__.__name__,
                error_message=str(exc),
            )
            raise
        # observers may re-enter this evaluator
        errors = tuple(self._errors)
        self._emit(
            "evaluate.end",
            success=True,
            node_type=node_type,
            value=value,
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return value, errors

    # --------------------------------------------------
    # Leaf Nodes
    # --------------------------------------------------

    def visit_Number(self, node: Number) -> float:
        return node.value

    def visit_Variable(self, node: Variable) -> float:
        return node.value

    # --------------------------------------------------
    # Composite Nodes
    # --------------------------------------------------

    def visit_BinaryOperation(self, node: BinaryOperation) -> float:
        left_value = self.visit(node.left)
        right_value = self.visit(node.right)
        return self._apply(node, lambda: apply_binary_operator(node.operator, left_value, right_value))

    def visit_FunctionCall(self, node: FunctionCall) -> float:
        argument_value = self.visit(node.argument)
        return self._apply(node, lambda: apply_function(node.name, argument_value))

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------

    def _apply(self, node: Expression, operation: Callable[[], float]) -> float:
        try:
            return operation()
        except EvaluationError as exc:
            if self._strict:
                raise
            self._errors.append(exc)
            self._emit(
                "evaluate.fallback",
                success=False,
                node_type=node.__class__.__name__,
                operation=exc.details.operation,
                error_type=exc.__class__.__name__,
                error_message=str(exc),
                fallback_value=exc.fallback_value,
            )
            return exc.fallback_value

    def _emit(self, event: str, *, success: bool, **fields: Any) -> None:
        observer = self._settings.event_observer
        if observer is None:
            return
        observer(
            EvaluationEvent(
                timestamp=_now_iso_utc(),
                event=event,
                evaluator=self.__class__.__name__,
                success=success,
                metadata=self._settings.metadata,
                evaluation_id=self._evaluation_id,
                **fields,
            )
        )
