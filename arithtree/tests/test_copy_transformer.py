import math

import pytest

from arithtree.abstract_syntax_tree.models import (
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    Variable,
)
from arithtree.transformers.copy_transformer import CopyTransformer


def _nodes(node: Expression) -> list[Expression]:
    if isinstance(node, BinaryOperation):
        return [node, *_nodes(node.left), *_nodes(node.right)]
    if isinstance(node, FunctionCall):
        return [node, *_nodes(node.argument)]
    return [node]


TREES = [
    Number(3.5),
    Variable("x", -2.0),
    BinaryOperation(Number(1.0), "+", Number(2.0)),
    FunctionCall("sqrt", BinaryOperation(Number(32.0), "-", Number(16.0))),
    FunctionCall(
        "abs",
        BinaryOperation(
            Variable("var", 10.0),
            "*",
            FunctionCall("sqrt", BinaryOperation(Number(32.0), "-", Number(16.0))),
        ),
    ),
    BinaryOperation(
        BinaryOperation(Variable("a", 1.5), "/", Number(4.0)),
        "-",
        FunctionCall("bogus", Number(7.0)),
    ),
]


@pytest.mark.parametrize("tree", TREES)
def test_copy_evaluates_to_same_value(tree: Expression) -> None:
    copy = tree.transform(CopyTransformer())
    assert copy.evaluate() == tree.evaluate()


@pytest.mark.parametrize("tree", TREES)
def test_copy_preserves_structure(tree: Expression) -> None:
    copy = tree.transform(CopyTransformer())
    assert copy == tree
    assert [type(node) for node in _nodes(copy)] == [type(node) for node in _nodes(tree)]


@pytest.mark.parametrize("tree", TREES)
def test_copy_shares_no_nodes_with_source(tree: Expression) -> None:
    copy = tree.transform(CopyTransformer())
    source_ids = {id(node) for node in _nodes(tree)}
    assert all(id(node) not in source_ids for node in _nodes(copy))


def test_copy_preserves_operator_and_function_name() -> None:
    tree = FunctionCall("abs", BinaryOperation(Number(1.0), "/", Number(4.0)))
    copy = CopyTransformer().copy(tree)
    assert isinstance(copy, FunctionCall)
    assert copy.name == "abs"
    assert isinstance(copy.argument, BinaryOperation)
    assert copy.argument.operator is tree.argument.operator


def test_copy_keeps_degraded_values() -> None:
    tree = BinaryOperation(Number(1.0), "/", Number(0.0))
    assert tree.transform(CopyTransformer()).evaluate() == math.inf

    nan_tree = FunctionCall("sqrt", Number(-1.0))
    assert math.isnan(nan_tree.transform(CopyTransformer()).evaluate())


def test_copy_transformer_is_reusable() -> None:
    transformer = CopyTransformer()
    first = transformer.copy(TREES[2])
    second = transformer.copy(TREES[2])
    assert first == second
    assert first is not second


class DoublingTransformer(CopyTransformer):
    def transform_number(self, node: Number) -> Expression:
        return Number(node.value * 2)


def test_subclass_override_reaches_every_leaf() -> None:
    tree = BinaryOperation(Number(1.0), "+", FunctionCall("abs", Number(-3.0)))
    doubled = tree.transform(DoublingTransformer())
    assert doubled == BinaryOperation(Number(2.0), "+", FunctionCall("abs", Number(-6.0)))
