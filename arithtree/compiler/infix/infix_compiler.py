import math

from arithtree.abstract_syntax_tree.models import (
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    Variable,
)
from arithtree.compiler.compiled_expression import CompiledExpression
from arithtree.traversal.visitor_pattern import Visitor

# ==================================================
# Infix Compiler
# ==================================================

class InfixCompiler(Visitor):
    """
    A visitor that renders an expression tree as fully parenthesized infix text
    and collects the variable bindings it references.
    """

    def __init__(self) -> None:
        self._variables: dict[str, float] = {}

    def compile(self, node: Expression) -> CompiledExpression:
        """
        The main entry point for compiling an expression tree.
        """
        self._variables = {} # Reset bindings for each compilation
        text = self.visit(node)
        return CompiledExpression(text=text, variables=self._variables)

    # --------------------------------------------------
    # Leaf Nodes
    # --------------------------------------------------

    def visit_Number(self, node: Number) -> str:
        return repr(node.value)

    def visit_Variable(self, node: Variable) -> str:
        """
        Records the binding; one name may not carry two different values in a tree.
        """
        bound = self._variables.get(node.name, node.value)
        if bound != node.value and not (math.isnan(bound) and math.isnan(node.value)):
            raise ValueError(
                f"Variable {node.name!r} is bound to both {bound!r} and {node.value!r}."
            )
        self._variables[node.name] = node.value
        return node.name

    # --------------------------------------------------
    # Composite Nodes
    # --------------------------------------------------

    def visit_BinaryOperation(self, node: BinaryOperation) -> str:
        return f"({self.visit(node.left)} {node.operator.symbol} {self.visit(node.right)})"

    def visit_FunctionCall(self, node: FunctionCall) -> str:
        return f"{node.name}({self.visit(node.argument)})"
