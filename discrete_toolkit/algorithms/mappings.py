"""Standard mappings: identity, constants, projections and swap."""

from typing import Any, Iterable, Tuple, TypeVar

from discrete_toolkit.algebra.sets import Pair, as_pairs
from discrete_toolkit.relational.mapping import Mapping


A = TypeVar("A")
B = TypeVar("B")


def identity(domain: Iterable[A]) -> Mapping[A, A]:
    """id_D: x ↦ x."""
    return Mapping(domain, lambda x: x)


def constant(domain: Iterable[A], value: B) -> Mapping[A, B]:
    """x ↦ value for every x ∈ D."""
    return Mapping(domain, lambda x: value)


def project_left(pairs: Iterable[Tuple[Any, Any]]) -> Mapping[Pair, Any]:
    """π₁: (a, b) ↦ a."""
    return Mapping(as_pairs(pairs), lambda p: p.a)


def project_right(pairs: Iterable[Tuple[Any, Any]]) -> Mapping[Pair, Any]:
    """π₂: (a, b) ↦ b."""
    return Mapping(as_pairs(pairs), lambda p: p.b)


def swap(pairs: Iterable[Tuple[Any, Any]]) -> Mapping[Pair, Pair]:
    """(a, b) ↦ (b, a)."""
    return Mapping(as_pairs(pairs), lambda p: Pair(p.b, p.a))
