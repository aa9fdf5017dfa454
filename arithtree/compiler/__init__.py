from arithtree.compiler.infix.infix_compiler import InfixCompiler
from arithtree.compiler.compiled_expression import CompiledExpression

__all__ = [
    "InfixCompiler",
    "CompiledExpression",
]
