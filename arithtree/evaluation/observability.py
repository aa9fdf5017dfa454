from dataclasses import dataclass, field
from datetime import datetime, timezone
import json
import logging
import math
from typing import Any, Callable, Mapping

# ==================================================
# Observability Types
# ==================================================

EventObserveHook = Callable[["EvaluationEvent"], None]
LabelMap = Mapping[str, str]


@dataclass(frozen=True)
class EvaluationEvent:
    """
    Structured evaluator lifecycle event payload.
    """

    timestamp: str
    event: str
    evaluator: str
    success: bool
    metadata: Mapping[str, Any] = field(default_factory=dict)
    evaluation_id: str | None = None
    node_type: str | None = None
    operation: str | None = None
    value: float | None = None
    duration_ms: float | None = None
    error_type: str | None = None
    error_message: str | None = None
    fallback_value: float | None = None


def _json_number(value: float | None) -> float | str | None:
    # JSON has no inf/NaN literals
    if value is None or math.isfinite(value):
        return value
    return repr(value)


def evaluation_event_to_dict(event: EvaluationEvent) -> dict[str, Any]:
    """
    Converts an EvaluationEvent dataclass into a JSON-safe dictionary.
    """

    return {
        "timestamp": event.timestamp,
        "event": event.event,
        "evaluator": event.evaluator,
        "success": event.success,
        "metadata": dict(event.metadata),
        "evaluation_id": event.evaluation_id,
        "node_type": event.node_type,
        "operation": event.operation,
        "value": _json_number(event.value),
        "duration_ms": event.duration_ms,
        "error_type": event.error_type,
        "error_message": event.error_message,
        "fallback_value": _json_number(event.fallback_value),
    }


def make_json_event_logger(
    *,
    logger: logging.Logger,
    level: int = logging.INFO,
) -> EventObserveHook:
    """
    Builds an EventObserveHook that emits one JSON log line per EvaluationEvent.
    """

    def _log_event(event: EvaluationEvent) -> None:
        payload = evaluation_event_to_dict(event)
        logger.log(level, json.dumps(payload, separators=(",", ":"), sort_keys=True))

    return _log_event


def compose_event_observers(*observers: EventObserveHook) -> EventObserveHook:
    """
    Composes multiple event observers into a single observer.
    """

    def _composed(event: EvaluationEvent) -> None:
        for observer in observers:
            observer(event)

    return _composed


def _now_iso_utc() -> str:
    return datetime.now(timezone.utc).isoformat()


def _normalize_label(value: str | None, *, fallback: str) -> str:
    if value is None:
        return fallback
    stripped = value.strip()
    return stripped if stripped else fallback


def _event_labels(event: EvaluationEvent) -> dict[str, str]:
    return {
        "evaluator": _normalize_label(event.evaluator, fallback="unknown"),
        "node_type": _normalize_label(event.node_type, fallback="unknown"),
        "error_type": _normalize_label(event.error_type, fallback="none"),
    }


def _labels_key(labels: LabelMap) -> tuple[tuple[str, str], ...]:
    return tuple(sorted((str(key), str(value)) for key, value in labels.items()))


@dataclass(frozen=True)
class MetricPoint:
    """
    Single metric point lookup result.
    """

    name: str
    labels: Mapping[str, str]
    value: int | float


class InMemoryMetricsAdapter:
    """
    In-memory metrics adapter for EvaluationEvent streams.
    """

    def __init__(self) -> None:
        self._counters: dict[tuple[str, tuple[tuple[str, str], ...]], int] = {}
        self._histograms: dict[tuple[str, tuple[tuple[str, str], ...]], list[float]] = {}

    def __call__(self, event: EvaluationEvent) -> None:
        labels = _event_labels(event)
        if event.event == "evaluate.end":
            self._inc("arithtree_evaluations_total", labels, 1)
            if not event.success:
                self._inc("arithtree_evaluation_failures_total", labels, 1)
            if event.duration_ms is not None:
                self._observe("arithtree_evaluation_duration_ms", labels, event.duration_ms)
            return

        if event.event == "evaluate.fallback":
            self._inc("arithtree_fallbacks_total", labels, 1)

    def _inc(self, metric: str, labels: LabelMap, delta: int) -> None:
        key = (metric, _labels_key(labels))
        self._counters[key] = self._counters.get(key, 0) + delta

    def _observe(self, metric: str, labels: LabelMap, value: float) -> None:
        key = (metric, _labels_key(labels))
        bucket = self._histograms.setdefault(key, [])
        bucket.append(value)

    def counter_value(self, metric: str, labels: LabelMap) -> int:
        return self._counters.get((metric, _labels_key(labels)), 0)

    def histogram_values(self, metric: str, labels: LabelMap) -> list[float]:
        values = self._histograms.get((metric, _labels_key(labels)), [])
        return list(values)

    def counters(self) -> list[MetricPoint]:
        points: list[MetricPoint] = []
        for (name, label_key), value in self._counters.items():
            points.append(MetricPoint(name=name, labels=dict(label_key), value=value))
        return points

    def histograms(self) -> list[MetricPoint]:
        points: list[MetricPoint] = []
        for (name, label_key), values in self._histograms.items():
            for value in values:
                points.append(MetricPoint(name=name, labels=dict(label_key), value=value))
        return points
