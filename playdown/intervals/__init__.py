"""Public interface for the intervals module."""

from .processor import complement, minimize

__all__ = ["complement", "minimize"]
