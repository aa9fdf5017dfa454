from abc import ABC, abstractmethod
from typing import Any

from arithtree.abstract_syntax_tree.models import (
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    Variable,
)

class Visitor:
    """
    A base class for read-only traversals of the expression tree.
    """
    def visit(self, node: Expression) -> Any:
        """
        The entry point for visiting a node. Dispatches to the correct visit method.
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: Expression) -> Any:
        """
        Called if no explicit visit method exists for a node type.
        """
        raise NotImplementedError(f"No visit_{node.__class__.__name__} method defined in {self.__class__.__name__}")

class Transformer(ABC):
    """
    The rebuilding side of double dispatch: one method per node type, each
    returning a newly constructed Expression.

    Nodes pick the method via Expression.transform, so a transformer never
    inspects node types itself.
    """
    def visit(self, node: Expression) -> Expression:
        """
        Convenience entry point, equivalent to node.transform(self).
        """
        return node.transform(self)

    @abstractmethod
    def transform_number(self, node: Number) -> Expression:
        pass

    @abstractmethod
    def transform_variable(self, node: Variable) -> Expression:
        pass

    @abstractmethod
    def transform_binary_operation(self, node: BinaryOperation) -> Expression:
        pass

    @abstractmethod
    def transform_function_call(self, node: FunctionCall) -> Expression:
        pass
