from .balanced import Interleaver, balanced_interleave

__all__ = [
    "Interleaver",
    "balanced_interleave",
]
