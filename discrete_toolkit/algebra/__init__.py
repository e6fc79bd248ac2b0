"""Algebra package: pairs, canonical order, finite-set operations."""

__all__ = ["sets"]
