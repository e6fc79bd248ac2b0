"""Finite-set primitives: pairs, canonical order, and set algebra.

Sets are modelled as Python frozensets so that every result is an immutable,
hashable value that can itself be a member of another set (power sets,
k-combinations).

Canonical order:
    Python sets have no defined iteration order. Whenever a set must become an
    indexable sequence (rows of an adjacency matrix, labels, sorted output) the
    library goes through canonical_order(), which sorts by a stable string
    projection of each element (canonical_str). Sets and tuples are rendered
    member by member, with set members in canonical order, so nested values
    such as the output of power_set() print the same under every hash seed.
    Two logically equal sets therefore always linearize to the same list.

    Element requirement: str(x) must be deterministic for every non-container
    element x.
"""

from enum import Enum
from itertools import chain, combinations
from itertools import product as _cartesian
from typing import (
    Any,
    Callable,
    FrozenSet,
    Hashable,
    Iterable,
    List,
    NamedTuple,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from discrete_toolkit.exceptions import InvalidChooseError


T = TypeVar("T", bound=Hashable)


class Pair(NamedTuple):
    """Ordered pair (a, b).

    A NamedTuple, so Pair(1, 2) == (1, 2) and pairs unpack like tuples.
    Used as the element type of every relation set.
    """

    a: Any
    b: Any

    def __str__(self) -> str:
        return canonical_str(self)


def _render(element: Any, leaf: Callable[[Any], str]) -> str:
    if isinstance(element, (set, frozenset)):
        members = sorted(element, key=canonical_key)
        return "{" + ", ".join(_render(x, leaf) for x in members) + "}"
    if isinstance(element, tuple):
        return "(" + ", ".join(_render(x, leaf) for x in element) + ")"
    return leaf(element)


def canonical_str(element: Any) -> str:
    """String projection of an element, stable for nested sets and tuples.

    Example:
        canonical_str(frozenset({"b", "a"})) == "{a, b}"
        canonical_str(Pair(1, frozenset())) == "(1, {})"
    """
    return _render(element, str)


def canonical_key(element: Any) -> Tuple[str, str, str]:
    """Deterministic sort key for a set element.

    Primary key is canonical_str(element). The type name and a repr-based
    rendering break ties between distinct elements that print identically
    (1 and "1").
    """
    return (canonical_str(element), type(element).__name__, _render(element, repr))


def canonical_order(
    elements: Iterable[T], key: Optional[Callable[[Any], Any]] = None
) -> List[T]:
    """Linearize a finite set into its canonical list.

    Parameters:
        elements: Any finite iterable (duplicates are collapsed)
        key: Override for the sort key (default: canonical_key)

    Returns:
        Sorted list of the distinct elements

    Invariant:
        canonical_order(S) == canonical_order(S') whenever S == S' as sets.
    """
    return sorted(set(elements), key=key or canonical_key)


def union(a: Iterable[T], b: Iterable[T]) -> FrozenSet[T]:
    """A ∪ B."""
    return frozenset(a) | frozenset(b)


def intersection(a: Iterable[T], b: Iterable[T]) -> FrozenSet[T]:
    """A ∩ B."""
    return frozenset(a) & frozenset(b)


def difference(a: Iterable[T], b: Iterable[T]) -> FrozenSet[T]:
    """A \\ B."""
    return frozenset(a) - frozenset(b)


def is_subset(subset: Iterable[Any], superset: Iterable[Any]) -> bool:
    return frozenset(subset) <= frozenset(superset)


def as_pairs(pairs: Iterable[Tuple[Any, Any]]) -> FrozenSet[Pair]:
    """Normalize any iterable of 2-tuples into a frozenset of Pairs."""
    return frozenset(Pair(a, b) for a, b in pairs)


def product(a: Iterable[Any], b: Iterable[Any]) -> FrozenSet[Pair]:
    """Cartesian product A × B as a set of Pairs.

    Complexity:
        Time and space: O(|A|·|B|)
    """
    return frozenset(Pair(x, y) for x, y in _cartesian(frozenset(a), frozenset(b)))


def power_set(s: Iterable[T]) -> FrozenSet[FrozenSet[T]]:
    """All subsets of S, including ∅ and S itself.

    |P(S)| = 2^|S|, so this is only practical for small sets.
    """
    items = canonical_order(s)
    return frozenset(
        frozenset(subset)
        for subset in chain.from_iterable(
            combinations(items, r) for r in range(len(items) + 1)
        )
    )


def choose(s: Iterable[T], k: int) -> FrozenSet[FrozenSet[T]]:
    """All k-element subsets of S ("S choose k").

    Parameters:
        s: Finite set
        k: Subset size, 0 <= k <= |S|

    Returns:
        Set of frozensets, C(|S|, k) of them

    Raises:
        InvalidChooseError: If k < 0 or k > |S|
    """
    items = canonical_order(s)
    if k < 0 or k > len(items):
        raise InvalidChooseError(
            f"k must be between 0 and the size of the set ({len(items)}), got {k}"
        )
    return frozenset(frozenset(c) for c in combinations(items, k))


def integers(start: int, stop: int) -> FrozenSet[int]:
    """{start, start + 1, ..., stop - 1}."""
    return frozenset(range(start, stop))


def naturals(stop: int) -> FrozenSet[int]:
    """{0, 1, ..., stop - 1}."""
    return integers(0, stop)


def singleton(element: T) -> FrozenSet[T]:
    return frozenset((element,))


def booleans() -> FrozenSet[bool]:
    return frozenset((True, False))


def integer_pairs(n: int, m: int) -> FrozenSet[Pair]:
    """naturals(n) × naturals(m)."""
    return product(naturals(n), naturals(m))


def identity_pairs(s: Iterable[T]) -> FrozenSet[Pair]:
    """Diagonal {(x, x) : x ∈ S}."""
    return frozenset(Pair(x, x) for x in s)


def lowercase_alphabet() -> FrozenSet[str]:
    return frozenset(chr(c) for c in range(ord("a"), ord("z") + 1))


def enum_values(enum_cls: Type[Enum]) -> FrozenSet[Enum]:
    return frozenset(enum_cls)
