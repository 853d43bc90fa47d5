"""Algorithms over integer sequences and strings: arrays, searches, strings and subarrays."""

__version__ = "0.1.0"
__all__ = ["arrays", "search", "strings", "subarrays"]