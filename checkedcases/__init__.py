"""Small self-verifying computations that answer, explain and check themselves."""

__version__ = "0.1.0"