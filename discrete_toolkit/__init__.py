"""discrete_toolkit: finite sets, relations, mappings, orderings and their matrices.

Subpackages: algebra, matrix, relational, algorithms, graph.
"""

__version__ = "0.1.0"

__all__ = [
    "algebra",
    "matrix",
    "relational",
    "algorithms",
    "graph",
    "exceptions",
]
