import json
import logging
import math

import pytest

from arithtree import (
    BinaryOperation,
    CopyTransformer,
    EvaluationSettings,
    Evaluator,
    FunctionCall,
    InfixCompiler,
    InMemoryMetricsAdapter,
    Number,
    compose_event_observers,
    make_json_event_logger,
)

def test_demo_tree_intermediate_values(demo_tree):
    mult = demo_tree.argument
    call_sqrt = mult.right
    minus = call_sqrt.argument
    assert minus.evaluate() == 16.0
    assert call_sqrt.evaluate() == 4.0
    assert mult.evaluate() == 40.0
    assert demo_tree.evaluate() == 40.0

def test_demo_tree_copy_evaluates_to_same_result(demo_tree):
    copy = demo_tree.transform(CopyTransformer())
    assert copy.evaluate() == 40.0
    assert copy == demo_tree
    assert copy is not demo_tree
    assert copy.argument is not demo_tree.argument
    assert copy.argument.right.argument is not demo_tree.argument.right.argument

def test_copy_survives_release_of_source(demo_tree):
    copy = demo_tree.transform(CopyTransformer())
    del demo_tree
    assert copy.evaluate() == 40.0

def test_demo_tree_strict_evaluation_and_rendering(demo_tree):
    assert Evaluator(EvaluationSettings(strict=True)).evaluate(demo_tree) == 40.0
    compiled = InfixCompiler().compile(demo_tree.transform(CopyTransformer()))
    assert compiled.text == "abs((var * sqrt((32.0 - 16.0))))"
    assert compiled.variables == {"var": 10.0}

def test_division_by_zero_degrades_to_positive_infinity():
    tree = BinaryOperation(Number(1.0), "/", Number(0.0))
    assert tree.evaluate() == math.inf
    result = Evaluator().try_evaluate(tree)
    assert result.value == math.inf
    assert not result.ok

def test_unknown_function_degrades_to_zero():
    assert FunctionCall("bogus", Number(1.0)).evaluate() == 0.0

def test_observed_evaluation_logs_and_counts(demo_tree, caplog):
    logger = logging.getLogger("arithtree.integration")
    metrics = InMemoryMetricsAdapter()
    evaluator = Evaluator(
        EvaluationSettings(
            event_observer=compose_event_observers(make_json_event_logger(logger=logger), metrics),
            metadata={"suite": "integration"},
        )
    )

    with caplog.at_level(logging.INFO, logger="arithtree.integration"):
        assert evaluator.evaluate(demo_tree) == 40.0

    payloads = [json.loads(record.getMessage()) for record in caplog.records]
    assert payloads[-1]["value"] == 40.0
    assert payloads[-1]["metadata"] == {"suite": "integration"}
    labels = {"evaluator": "Evaluator", "node_type": "FunctionCall", "error_type": "none"}
    assert metrics.counter_value("arithtree_evaluations_total", labels) == 1

@pytest.mark.parametrize("depth", [50, 200])
def test_deep_left_leaning_tree(depth):
    tree = Number(0.0)
    for _ in range(depth):
        tree = BinaryOperation(tree, "+", Number(1.0))
    assert tree.evaluate() == float(depth)
    assert tree.transform(CopyTransformer()).evaluate() == float(depth)
