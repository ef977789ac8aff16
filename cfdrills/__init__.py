"""Solutions to short programming-contest exercises, with a small command line front end."""

__version__ = "0.1.0"
__all__ = ["cli", "number_problems", "sequence_problems", "text_problems"]