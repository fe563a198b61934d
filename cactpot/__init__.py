"""Mini Cactpot solver: line sums, payouts, cell editing and a command-line view."""

__version__ = "0.1.0"

__all__ = ["__version__"]