from dataclasses import dataclass, field

# ==================================================
# Compiled Output
# ==================================================

@dataclass
class CompiledExpression:
    """
    Represents the result of the compilation process.
    """
    text: str
    variables: dict[str, float] = field(default_factory=dict)
