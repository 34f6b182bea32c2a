"""A paint model: drawing tools, a colour palette, a canvas with undo, and a command-line driver."""

__version__ = "0.1.0"
__all__ = ["__version__"]