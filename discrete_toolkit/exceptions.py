"""Named failure kinds for discrete structures.

Every construction- or usage-time invariant violation raises one of the
classes below. They all derive from DiscreteToolkitError, which is itself a
ValueError, so callers can discriminate on the exact kind or catch the whole
family at once.

Warnings (non-fatal conditions) use the categories at the bottom of this
module and go through the standard `warnings` machinery.
"""


class DiscreteToolkitError(ValueError):
    """Base class for all invariant violations raised by this package."""


class InvalidEdgeError(DiscreteToolkitError):
    """Undirected edge with equal endpoints, or an endpoint outside the vertex set."""


class InvalidCodomainError(DiscreteToolkitError):
    """Codomain does not contain the image of a function."""


class NotAMappingError(DiscreteToolkitError):
    """Relation is not total and single-valued over its domain."""


class NotASubsetError(DiscreteToolkitError):
    """A set (or element) is not contained where it is required to be."""


class InvalidComparatorError(DiscreteToolkitError):
    """Comparator is not consistent with a linear order."""


class NotASquareMatrixError(DiscreteToolkitError):
    """Operation requires rows == columns."""


class InconsistentMatrixShapeError(DiscreteToolkitError):
    """Matrix input is empty, ragged, or does not match the expected shape."""


class InvalidChooseError(DiscreteToolkitError):
    """k is out of range for a k-combination."""


class NotAnOrderingError(DiscreteToolkitError):
    """Relation is not reflexive, antisymmetric and transitive."""


class OrderingWarning(UserWarning):
    """An ordering was built from data that does not describe a partial order."""


class MatrixWarning(UserWarning):
    """A matrix was used in a way its entries do not fully support."""
