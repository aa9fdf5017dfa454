from arithtree.transformers.copy_transformer import CopyTransformer

__all__ = [
    "CopyTransformer",
]
