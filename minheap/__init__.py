"""A binary min-heap of integers with value removal, counting and a demo command."""

__version__ = "0.1.0"
__all__ = ["heap", "demo"]