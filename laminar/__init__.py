"""Acknowledgment, fragmentation, ordering and sequencing for a semi-reliable UDP protocol."""

__version__ = "0.1.0"

__all__ = [
    "acknowledgment",
    "arranging",
    "config",
    "errors",
    "fragmentation",
    "ordering",
    "sequencing",
]