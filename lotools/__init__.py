"""Helpers for sequences, mappings, conditions, errors, thread channels and concurrency."""

__version__ = "0.1.0"

__all__ = [
    "channel",
    "concurrency",
    "condition",
    "errors",
    "find",
    "functional",
    "intersect",
    "maps",
]