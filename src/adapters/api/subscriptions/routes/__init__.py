"""Subpackage aggregating individual subscription route modules."""

__all__ = [
    "confirm",
    "subscribe",
]
