"""
Tests for Mapping and standard mappings

Checks:
1. Codomain inference and validation
2. Reinterpreting relations as mappings
3. Images of elements and subsets
4. Composition (domain inclusion, associativity)
5. Injective / surjective / bijective
6. identity, constant, projections, swap
"""

import pytest

from discrete_toolkit.algebra.sets import Pair
from discrete_toolkit.algorithms import mappings
from discrete_toolkit.exceptions import (
    InvalidCodomainError,
    NotAMappingError,
    NotASubsetError,
)
from discrete_toolkit.relational import Mapping, Relation


class TestConstruction:
    """Tests for Mapping constructors"""

    def test_codomain_accepted(self) -> None:
        f = Mapping({1, 2, 3}, lambda x: x + 1, codomain={2, 3, 4})
        assert f.relation_set == {(1, 2), (2, 3), (3, 4)}

    def test_codomain_missing_image_rejected(self) -> None:
        """f(3) = 4 is not in {2, 3}"""
        with pytest.raises(InvalidCodomainError):
            Mapping({1, 2, 3}, lambda x: x + 1, codomain={2, 3})

    def test_codomain_inferred_as_image(self) -> None:
        f = Mapping({1, 2, 3}, lambda x: x % 2)
        assert f.codomain == {0, 1}
        assert f.is_surjective()

    def test_larger_codomain(self) -> None:
        f = Mapping({1, 2}, lambda x: x, codomain={1, 2, 3})
        assert not f.is_surjective()

    def test_from_dict(self) -> None:
        f = Mapping.from_dict({1: "a", 2: "b"})
        assert f.domain == {1, 2}
        assert f.codomain == {"a", "b"}
        assert f.image_of(2) == "b"

    def test_equality_ignores_function_object(self) -> None:
        f = Mapping({1, 2}, lambda x: x * 2)
        g = Mapping.from_dict({1: 2, 2: 4})
        assert f == g


class TestFromRelation:
    """Tests for Mapping.from_relation"""

    def test_functional_relation(self) -> None:
        r = Relation({1, 2}, {"a", "b"}, {(1, "a"), (2, "a")})
        f = Mapping.from_relation(r)
        assert f.image_of(1) == "a"
        assert f.codomain == {"a", "b"}
        assert f.to_relation() == r

    def test_multi_valued_rejected(self) -> None:
        r = Relation({1, 2}, {"a", "b"}, {(1, "a"), (1, "b"), (2, "a")})
        with pytest.raises(NotAMappingError):
            Mapping.from_relation(r)

    def test_partial_rejected(self) -> None:
        r = Relation({1, 2}, {"a"}, {(1, "a")})
        with pytest.raises(NotAMappingError):
            Mapping.from_relation(r)


class TestImages:
    """Tests for image_of, image_of_set, maps"""

    def test_image_of_set(self) -> None:
        f = Mapping({1, 2, 3}, lambda x: x * 10)
        assert f.image_of_set({1, 3}) == {10, 30}
        assert f.image_of_set(set()) == frozenset()

    def test_image_of_set_outside_domain(self) -> None:
        f = Mapping({1, 2, 3}, lambda x: x * 10)
        with pytest.raises(NotASubsetError):
            f.image_of_set({1, 4})

    def test_image_of_outside_domain(self) -> None:
        f = Mapping({1}, lambda x: x)
        with pytest.raises(NotASubsetError):
            f.image_of(2)

    def test_maps(self) -> None:
        f = Mapping({1, 2}, lambda x: -x)
        assert f.maps(1, -1)
        assert not f.maps(1, 1)


class TestComposition:
    """Tests for Mapping.compose"""

    def test_codomain_subset_of_domain(self) -> None:
        """g is defined on a strictly larger set than f's codomain"""
        f = Mapping.from_dict({1: "a", 2: "b"})
        g = Mapping.from_dict({"a": "x", "b": "y", "c": "x"})
        gf = f.compose(g)
        assert gf.relation_set == {(1, "x"), (2, "y")}
        assert gf.codomain == g.codomain

    def test_codomain_not_subset_rejected(self) -> None:
        f = Mapping.from_dict({1: "a", 2: "b"})
        h = Mapping.from_dict({"b": "x", "c": "y"})
        with pytest.raises(InvalidCodomainError):
            f.compose(h)

    def test_associative(self) -> None:
        f = Mapping({1, 2, 3}, lambda x: x + 1)
        g = Mapping({2, 3, 4}, lambda x: x * 2)
        h = Mapping({4, 6, 8}, str)
        assert f.compose(g).compose(h) == f.compose(g.compose(h))

    def test_identity_is_neutral(self) -> None:
        f = Mapping({1, 2, 3}, lambda x: x + 1)
        assert mappings.identity(f.domain).compose(f) == f
        assert f.compose(mappings.identity(f.codomain)) == f


class TestProperties:
    """Tests for injective / surjective / bijective"""

    def test_bijection(self) -> None:
        f = Mapping({1, 2, 3}, lambda x: 4 - x)
        assert f.is_injective()
        assert f.is_surjective()
        assert f.is_bijective()

    def test_not_injective(self) -> None:
        f = Mapping({1, 2, 3}, lambda x: 0)
        assert not f.is_injective()
        assert f.image() == {0}

    def test_inverse_of_bijection_is_mapping(self) -> None:
        f = Mapping.from_dict({1: "a", 2: "b"})
        g = Mapping.from_relation(f.inverse())
        assert g.image_of("b") == 2


class TestStandardMappings:
    """Tests for algorithms.mappings"""

    def test_identity(self) -> None:
        assert mappings.identity({1, 2}).relation_set == {(1, 1), (2, 2)}

    def test_constant(self) -> None:
        c = mappings.constant({1, 2, 3}, "k")
        assert c.codomain == {"k"}
        assert not c.is_injective()

    def test_projections(self) -> None:
        pairs = {(1, "a"), (2, "b"), (2, "c")}
        assert mappings.project_left(pairs).image() == {1, 2}
        assert mappings.project_right(pairs).image() == {"a", "b", "c"}

    def test_swap_is_involution(self) -> None:
        pairs = {(1, "a"), (2, "b")}
        s = mappings.swap(pairs)
        assert s.image_of(Pair(1, "a")) == Pair("a", 1)
        assert s.compose(mappings.swap(s.codomain)) == mappings.identity(s.domain)
