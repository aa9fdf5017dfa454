from arithtree.abstract_syntax_tree.models import (
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    Variable,
)
from arithtree.abstract_syntax_tree.operators import FUNCTIONS, BinaryOperator
from arithtree.errors import (
    ArithmeticDomainError,
    EvaluationError,
    EvaluationErrorDetails,
    UnknownFunctionError,
    UnknownOperatorError,
)
from arithtree.traversal.visitor_pattern import Transformer, Visitor
from arithtree.transformers import CopyTransformer
from arithtree.compiler import CompiledExpression, InfixCompiler
from arithtree.evaluation import (
    EvaluationEvent,
    EvaluationResult,
    EvaluationSettings,
    Evaluator,
    InMemoryMetricsAdapter,
    compose_event_observers,
    evaluation_event_to_dict,
    make_json_event_logger,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Expression",
    "Number",
    "Variable",
    "BinaryOperation",
    "FunctionCall",
    "BinaryOperator",
    "FUNCTIONS",
    "Visitor",
    "Transformer",
    "CopyTransformer",
    "InfixCompiler",
    "CompiledExpression",
    "Evaluator",
    "EvaluationSettings",
    "EvaluationResult",
    "EvaluationEvent",
    "InMemoryMetricsAdapter",
    "compose_event_observers",
    "evaluation_event_to_dict",
    "make_json_event_logger",
    "EvaluationError",
    "EvaluationErrorDetails",
    "UnknownOperatorError",
    "UnknownFunctionError",
    "ArithmeticDomainError",
]
