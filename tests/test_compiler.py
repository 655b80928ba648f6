"""Tests for the selection-to-spec compiler and spec matching."""

import pytest

from molselect.core.constants import SPEC_ATTRIBUTES
from molselect.selection.compiler import to_spec
from molselect.selection.evaluator import evaluate
from molselect.selection.matching import (
    SPEC_MATCHERS,
    filter_by_spec,
    glob_to_regex,
    is_glob,
    matches_any,
    spec_matches,
)
from molselect.selection.nodes import And, Chain, Comparison, Index, Resi
from molselect.selection.parser import parse


def spec_of(text):
    return to_spec(parse(text))


class TestToSpec:
    """Convertible and non-convertible ASTs."""

    def test_all(self):
        assert spec_of("all") == {}

    def test_name(self):
        assert spec_of("name CA") == {"name": ["CA"]}

    def test_name_multi(self):
        assert spec_of("name CA+CB") == {"name": ["CA", "CB"]}

    def test_name_glob(self):
        assert spec_of("name C*") == {"name": ["C*"]}

    def test_resn(self):
        assert spec_of("resn ALA+GLY") == {"resn": ["ALA", "GLY"]}

    def test_chain(self):
        assert spec_of("chain A") == {"chain": "A"}

    def test_elem(self):
        assert spec_of("elem Fe") == {"elem": "Fe"}

    def test_model(self):
        assert spec_of("model 1abc") == {"model": "1abc"}

    def test_resi_exact(self):
        assert spec_of("resi 42") == {"resi": 42}

    def test_and(self):
        assert spec_of("name CA and chain A") == {"name": ["CA"], "chain": "A"}

    def test_nested_and(self):
        spec = spec_of("(chain A and name CA) and resn ALA")
        assert spec == {"chain": "A", "name": ["CA"], "resn": ["ALA"]}

    def test_macro(self):
        assert spec_of("//A/42/CA") == {"chain": "A", "resi": 42, "name": ["CA"]}

    def test_macro_with_model(self):
        assert spec_of("/1abc/A/7/") == {"model": "1abc", "chain": "A", "resi": 7}

    @pytest.mark.parametrize("text", [
        "none",
        "protein",
        "water",
        "hydrogen",
        "resi 1-10",
        "resi >= 5",
        "index 0",
        "not chain A",
        "chain A or chain B",
        "chain A xor chain B",
        "around 5 ligand",
        "byres name CA",
        "bychain chain A",
        "chain A and protein",
        "name CA and not chain B",
    ])
    def test_not_convertible(self, text):
        assert spec_of(text) is None

    def test_index_node(self):
        assert to_spec(Index(Comparison.equal(3))) is None

    def test_unknown_node(self):
        assert to_spec(object()) is None


class TestRepeatedAttributes:
    """Conjunctions that constrain the same attribute twice."""

    def test_same_chain(self):
        assert spec_of("chain A and chain A") == {"chain": "A"}

    def test_conflicting_chain(self):
        assert spec_of("chain A and chain B") == {"chain": []}

    def test_conflicting_resi(self):
        assert spec_of("resi 1 and resi 2") == {"resi": []}

    def test_name_intersection(self):
        assert spec_of("name CA+CB and name CB+N") == {"name": ["CB"]}

    def test_name_case_insensitive_intersection(self):
        assert spec_of("name CA and name ca") == {"name": ["CA"]}

    def test_name_glob_and_literal(self):
        assert spec_of("name C* and name CA+N") == {"name": ["CA"]}
        assert spec_of("name CA+N and name C*") == {"name": ["CA"]}

    def test_name_globs_on_both_sides(self):
        # Every node is convertible, but no single value list selects the
        # same atoms as two intersected globs; the evaluator takes over.
        assert spec_of("name C* and name *A") is None

    def test_name_globs_on_both_sides_evaluated(self, atoms):
        result = evaluate(parse("name C* and name *A"), atoms)
        assert [a.serial for a in result] == [1, 7, 11]

    def test_elem_case(self):
        assert spec_of("elem C and elem c") == {"elem": "C"}

    def test_built_ast(self):
        node = And((Chain("A"), Resi(Comparison.equal(1)), Chain("A")))
        assert to_spec(node) == {"chain": "A", "resi": 1}


class TestMatching:
    """Glob compilation and value matching."""

    def test_is_glob(self):
        assert is_glob("C*")
        assert is_glob("C?")
        assert not is_glob("CA")

    def test_glob_anchored(self):
        regex = glob_to_regex("C*")
        assert regex.fullmatch("CA")
        assert not regex.fullmatch("NC")

    def test_glob_escapes_literals(self):
        regex = glob_to_regex("C.1*")
        assert regex.fullmatch("C.12")
        assert not regex.fullmatch("CX12")

    def test_glob_question(self):
        regex = glob_to_regex("?A")
        assert regex.fullmatch("CA")
        assert not regex.fullmatch("A")
        assert not regex.fullmatch("CCA")

    def test_glob_cached(self):
        assert glob_to_regex("O*") is glob_to_regex("O*")

    def test_matches_any(self):
        assert matches_any("CA", ["N", "CA"])
        assert matches_any("ca", ["CA"])
        assert matches_any("OXT", ["O*"])
        assert not matches_any("CA", [])

    def test_spec_matches_empty(self, atoms):
        assert spec_matches({}, atoms[0])

    def test_spec_matches_empty_list(self, atoms):
        assert not spec_matches({"chain": []}, atoms[0])

    def test_spec_scalar_and_list(self, atoms):
        assert spec_matches({"chain": "A"}, atoms[0])
        assert spec_matches({"chain": ["B", "A"]}, atoms[0])
        assert not spec_matches({"chain": "B"}, atoms[0])

    def test_matcher_per_spec_attribute(self):
        assert set(SPEC_MATCHERS) == set(SPEC_ATTRIBUTES)

    def test_spec_unknown_attribute(self, atoms):
        with pytest.raises(KeyError):
            spec_matches({"bfactor": 1.0}, atoms[0])

    def test_filter_by_spec(self, atoms):
        result = filter_by_spec(atoms, {"name": ["CA"], "chain": "A"})
        assert [a.serial for a in result] == [1, 7]

    def test_filter_by_spec_resi(self, atoms):
        result = filter_by_spec(atoms, {"resi": 100})
        assert [a.serial for a in result] == [12]
