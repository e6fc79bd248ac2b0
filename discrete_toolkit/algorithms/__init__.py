"""Algorithms package: closures, set/matrix conversion, axiom validators, standard mappings."""

__all__ = ["closure", "validate", "mappings"]
