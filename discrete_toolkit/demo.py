"""Demonstration of the core modules.

Shows how to use relations, mappings, orderings, closures and graphs, and
prints the results (a walkthrough, not a test suite).

Run with: python -m discrete_toolkit.demo
"""

import sys

from discrete_toolkit.algebra import sets
from discrete_toolkit.algorithms import closure, mappings, validate
from discrete_toolkit.graph import generators
from discrete_toolkit.relational import Mapping, Ordering, Relation


def demo_closures():
    """Transitive closure through the adjacency matrix."""
    print("\n" + "=" * 60)
    print("Closures (algorithms/closure.py)")
    print("=" * 60)

    domain = {"a", "b", "c", "d"}
    base = {("a", "b"), ("b", "c"), ("c", "d")}

    print(closure.adjacency_matrix(domain, domain, base))
    closed = closure.transitive_closure(domain, base)
    print(closure.adjacency_matrix(domain, domain, closed))
    print(f"✓ |R| = {len(base)}, |R⁺| = {len(closed)}")


def demo_relations():
    """Predicate relations and axiom audit."""
    print("\n" + "=" * 60)
    print("Relations (relational/relation.py)")
    print("=" * 60)

    divides = Relation.from_predicate(
        sets.integers(1, 7), sets.integers(1, 7), lambda a, b: b % a == 0
    )
    print(divides)
    for axiom, ok in validate.audit(divides.domain, divides.relation_set).items():
        print(f"  {axiom.value:<13} {ok}")


def demo_mappings():
    """Mapping construction and composition."""
    print("\n" + "=" * 60)
    print("Mappings (relational/mapping.py)")
    print("=" * 60)

    f = Mapping({1, 2, 3}, lambda x: x + 1, codomain={2, 3, 4})
    g = Mapping.from_dict({2: "x", 3: "y", 4: "z", 5: "w"})
    print(f)
    print(f"✓ g ∘ f = {f.compose(g)}")
    print(f"✓ identity on {{1, 2}}: {mappings.identity({1, 2})}")


def demo_orderings():
    """Posets from a Hasse diagram and from a comparator."""
    print("\n" + "=" * 60)
    print("Orderings (relational/ordering.py)")
    print("=" * 60)

    subsets = Ordering.from_hasse(
        {
            "∅": {"{1}", "{2}"},
            "{1}": {"{1,2}"},
            "{2}": {"{1,2}"},
        }
    )
    print(subsets)
    print(f"  minimal: {sorted(subsets.minimal_elements())}")
    print(f"  linear: {subsets.is_linear()}")

    chain = Ordering.from_comparator({3, 1, 2}, lambda a, b: a - b)
    print(chain)
    print(chain.adjacency_matrix())


def demo_graphs():
    """Graph generators."""
    print("\n" + "=" * 60)
    print("Graphs (graph/generators.py)")
    print("=" * 60)

    k4 = generators.complete(sets.integers(1, 5))
    p5 = generators.path([1, 2, 3, 4, 5])
    print(k4)
    print(f"✓ K4 degree sequence: {k4.degree_sequence()}")
    print(f"✓ P5 degree sequence: {p5.degree_sequence()}")


def main():
    """Run all demonstrations."""
    print("\n" + "#" * 60)
    print("# Discrete toolkit - core module demonstrations")
    print("#" * 60)

    try:
        demo_closures()
        demo_relations()
        demo_mappings()
        demo_orderings()
        demo_graphs()
    except Exception as e:
        print("\n❌ Demo failed with error:")
        print(f"   {type(e).__name__}: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
