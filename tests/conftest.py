import pytest

from arithtree.abstract_syntax_tree.models import (
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    Variable,
)

@pytest.fixture(scope="function")
def demo_tree() -> Expression:
    """
    Yields abs(var * sqrt(32.0 - 16.0)) with var bound to 10.0.
    Built bottom-up, one node at a time.
    """
    n32 = Number(32.0)
    n16 = Number(16.0)
    minus = BinaryOperation(n32, "-", n16)
    call_sqrt = FunctionCall("sqrt", minus)
    var = Variable("var", 10.0)
    mult = BinaryOperation(var, "*", call_sqrt)
    return FunctionCall("abs", mult)
