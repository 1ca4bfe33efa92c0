"""Data structures shared by the graph algorithms."""

from .heap import IndexedHeap

__all__ = ["IndexedHeap"]
