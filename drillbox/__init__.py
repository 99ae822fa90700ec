"""Solutions to classic array, string and arithmetic exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "maths", "contest", "text"]