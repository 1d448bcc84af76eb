"""Utility modules for hyperc."""
