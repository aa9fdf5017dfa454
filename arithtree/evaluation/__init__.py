from arithtree.evaluation.evaluator import Evaluator, EvaluationResult, EvaluationSettings
from arithtree.evaluation.observability import (
    EvaluationEvent,
    InMemoryMetricsAdapter,
    MetricPoint,
    compose_event_observers,
    evaluation_event_to_dict,
    make_json_event_logger,
)

__all__ = [
    "Evaluator",
    "EvaluationResult",
    "EvaluationSettings",
    "EvaluationEvent",
    "InMemoryMetricsAdapter",
    "MetricPoint",
    "compose_event_observers",
    "evaluation_event_to_dict",
    "make_json_event_logger",
]
