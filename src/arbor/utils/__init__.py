"""Utility structures used across the arbor package."""

from .union_find import UnionFind

__all__ = ["UnionFind"]
