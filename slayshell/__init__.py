"""Shell building blocks: quote-aware splitting, syntax checks, variables, expansion and builtins."""

__version__ = "0.1.0"
__all__ = [
    "builtins",
    "environment",
    "expansion",
    "splitter",
    "syntax",
]