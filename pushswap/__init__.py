"""Sort integers with two stacks and a fixed set of stack operations, with small string, memory, list and output helpers."""

__version__ = "1.0.0"
__all__ = ["__version__"]