"""
Relation derivation tests.
"""
import pytest
from hypothesis import given, settings, strategies as st
from pydantic import ValidationError

from landscape.core import taxonomy
from landscape.schemas.relation import Relation, RelationType
from landscape.services.entry_store import EntryStore
from landscape.schemas.entry import EntryCreate
from landscape.services.relation_service import (
    DEFAULT_VISIBLE_TYPES,
    derive_relations,
    derive_relations_bucketed,
    filter_relations,
    parse_relation_type,
    relation_counts,
)

from conftest import make_entry


def as_triples(relations):
    return {(r.source_id, r.target_id, r.type.value) for r in relations}


@st.composite
def entry_subsets(draw):
    """Entries with unique ids drawn from small attribute pools so collisions happen."""
    count = draw(st.integers(min_value=0, max_value=9))
    ids = draw(st.lists(st.integers(min_value=1, max_value=40), min_size=count,
                        max_size=count, unique=True))
    entries = []
    for entry_id in ids:
        entries.append(make_entry(
            entry_id,
            category=draw(st.sampled_from(["GEO", "BIO", "HYD"])),
            sphere_interface=draw(st.sampled_from(taxonomy.SPHERE_INTERFACES[:3])),
            element_function=draw(st.sampled_from(taxonomy.ELEMENT_FUNCTIONS[:3])),
            indeterminacy=draw(st.sampled_from(list(taxonomy.INDETERMINACY_POSITIONS)[:2])),
            connections=draw(st.lists(st.integers(min_value=1, max_value=45), max_size=4)),
        ))
    return entries


def test_scenario_relations(scenario_entries):
    relations = derive_relations(scenario_entries)

    assert as_triples(relations) == {
        (1, 2, "citation"),
        (1, 2, "thematic"),
        (3, 4, "sphere"),
    }


def test_result_order_is_pair_then_type(scenario_entries):
    relations = derive_relations(list(reversed(scenario_entries)))

    assert [(r.source_id, r.target_id, r.type) for r in relations] == [
        (1, 2, RelationType.CITATION),
        (1, 2, RelationType.THEMATIC),
        (3, 4, RelationType.SPHERE),
    ]


def test_citation_in_either_direction_collapses_to_one():
    entries = [make_entry(5, category="GEO", connections=[9]),
               make_entry(9, category="BIO", sphere_interface="bio-hydro",
                          element_function="signal", indeterminacy="open", connections=[5])]

    relations = derive_relations(entries)

    assert as_triples(relations) == {(5, 9, "citation")}


def test_dangling_connections_are_ignored():
    entries = [make_entry(1, category="GEO", connections=[2, 77]),
               make_entry(3, category="BIO", sphere_interface="bio-hydro",
                          element_function="signal", indeterminacy="open", connections=[1000])]

    assert derive_relations(entries) == []


def test_connection_to_entry_outside_subset_is_ignored(scenario_entries):
    subset = [e for e in scenario_entries if e.id != 2]

    relations = derive_relations(subset)

    assert RelationType.CITATION not in {r.type for r in relations}


def test_empty_and_single_subsets():
    assert derive_relations([]) == []
    assert derive_relations([make_entry(1, connections=[1])]) == []


def test_cross_category_types_all_fire_together():
    a = make_entry(1, category="GEO")
    b = make_entry(2, category="BIO")

    assert as_triples(derive_relations([a, b])) == {
        (1, 2, "sphere"),
        (1, 2, "element"),
        (1, 2, "indeterminacy"),
    }


def test_same_category_suppresses_structural_types():
    a = make_entry(1, category="GEO")
    b = make_entry(2, category="GEO")

    assert as_triples(derive_relations([a, b])) == {(1, 2, "thematic")}


@given(entry_subsets())
@settings(max_examples=60, deadline=None)
def test_invariants_hold_for_any_subset(entries):
    relations = derive_relations(entries)
    triples = [(r.source_id, r.target_id, r.type) for r in relations]

    # Canonical orientation, and at most one relation per (pair, type)
    assert all(r.source_id < r.target_id for r in relations)
    assert len(triples) == len(set(triples))

    # Thematic never coexists with a structural type on the same pair
    by_pair = {}
    for source_id, target_id, relation_type in triples:
        by_pair.setdefault((source_id, target_id), set()).add(relation_type)
    structural = {RelationType.SPHERE, RelationType.ELEMENT, RelationType.INDETERMINACY}
    for types in by_pair.values():
        assert not (RelationType.THEMATIC in types and types & structural)

    # Only ids from the subset appear
    ids = {e.id for e in entries}
    assert all(r.source_id in ids and r.target_id in ids for r in relations)

    # Deterministic
    assert derive_relations(entries) == relations


@given(entry_subsets())
@settings(max_examples=60, deadline=None)
def test_bucketed_derivation_matches_pairwise(entries):
    assert derive_relations_bucketed(entries) == derive_relations(entries)


def test_append_does_not_disturb_existing_relations(scenario_entries):
    store = EntryStore(scenario_entries)
    before = derive_relations(store.all())

    new_entry = store.append(EntryCreate(title="New", category="TEC", sortKey="10"))
    after = derive_relations(store.all())

    untouched = [r for r in after if new_entry.id not in (r.source_id, r.target_id)]
    assert untouched == before


def test_relation_requires_canonical_orientation():
    with pytest.raises(ValidationError):
        Relation(source_id=4, target_id=2, type=RelationType.THEMATIC)
    with pytest.raises(ValidationError):
        Relation(source_id=3, target_id=3, type=RelationType.THEMATIC)


def test_relations_are_hashable_set_members():
    a = Relation(source_id=1, target_id=2, type=RelationType.CITATION)
    b = Relation(source_id=1, target_id=2, type=RelationType.CITATION)
    c = Relation(source_id=1, target_id=2, type=RelationType.THEMATIC)

    assert len({a, b, c}) == 2


def test_filter_relations_by_visible_types(scenario_entries):
    relations = derive_relations(scenario_entries)

    shown = filter_relations(relations, DEFAULT_VISIBLE_TYPES)

    assert as_triples(shown) == {(1, 2, "citation"), (1, 2, "thematic")}
    assert filter_relations(relations, None) == relations
    assert filter_relations(relations, []) == []


def test_relation_counts_include_every_type(scenario_entries):
    counts = relation_counts(derive_relations(scenario_entries))

    assert counts == {
        "citation": 1,
        "thematic": 1,
        "sphere": 1,
        "element": 0,
        "indeterminacy": 0,
    }


def test_parse_relation_type():
    assert parse_relation_type("sphere") == RelationType.SPHERE
    with pytest.raises(ValueError):
        parse_relation_type("gravity")
