"""A printf-style formatter with C-flavoured string, memory and character helpers."""

__version__ = "0.1.0"
__all__ = ["build", "chars", "conversion", "memory", "output", "printf", "strings"]