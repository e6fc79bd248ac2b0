"""Graph package: simple undirected graphs and their generators."""

__all__ = ["graph", "generators"]
