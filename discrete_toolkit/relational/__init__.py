"""Relational package: Relation, Mapping and Ordering over finite sets.

RelationalKind is the closed union of the three realizations of Relational.
"""

from typing import Union

from discrete_toolkit.relational.base import Relational
from discrete_toolkit.relational.mapping import Mapping
from discrete_toolkit.relational.ordering import Ordering
from discrete_toolkit.relational.relation import Relation

RelationalKind = Union[Relation, Mapping, Ordering]

__all__ = ["Relational", "Relation", "Mapping", "Ordering", "RelationalKind"]
