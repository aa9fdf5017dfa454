from arithtree.abstract_syntax_tree.models import (
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    Variable,
)
from arithtree.traversal.visitor_pattern import Transformer

# ==================================================
# Copy Transformer
# ==================================================

class CopyTransformer(Transformer):
    """
    A transformer that rebuilds an isomorphic tree sharing no nodes with the source.
    Stateless, so one instance can copy any number of trees.
    """

    def copy(self, node: Expression) -> Expression:
        """
        The main entry point for copying a tree.
        """
        return node.transform(self)

    # --------------------------------------------------
    # Leaf Nodes
    # --------------------------------------------------

    def transform_number(self, node: Number) -> Expression:
        return Number(node.value)

    def transform_variable(self, node: Variable) -> Expression:
        return Variable(node.name, node.value)

    # --------------------------------------------------
    # Composite Nodes
    # --------------------------------------------------

    def transform_binary_operation(self, node: BinaryOperation) -> Expression:
        # children are rebuilt through transform(), never copied field by field
        left = node.left.transform(self)
        right = node.right.transform(self)
        return BinaryOperation(left, node.operator, right)

    def transform_function_call(self, node: FunctionCall) -> Expression:
        argument = node.argument.transform(self)
        return FunctionCall(node.name, argument)
