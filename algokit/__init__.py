"""Classic number, sequence, optimisation and graph algorithms with a command line."""

__version__ = "0.1.0"

__all__ = ["cli", "graphs", "numbers", "optimization", "sequences"]