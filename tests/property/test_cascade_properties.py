"""Property tests for deletion order and self-referential collection."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from cascade.graph import CascadeEdge, SchemaGraph, get_schema_graph
from cascade.services import collect
from tests.fixtures.stores import InMemoryDataAccess

# Each entry k gives the parent of node k + 1 as an index into the nodes before it
parent_choices = st.lists(st.integers(min_value=0, max_value=10_000), max_size=60)


def _tree_store(choices: list[int]) -> tuple[InMemoryDataAccess, dict[int, list[int]]]:
    store = InMemoryDataAccess()
    children: dict[int, list[int]] = {0: []}
    store.insert("indicators", id="n-0", system_id="is-001", parent_id=None)

    for offset, choice in enumerate(choices):
        node = offset + 1
        parent = choice % node
        children[node] = []
        children[parent].append(node)
        store.insert("indicators", id=f"n-{node}", system_id="is-001", parent_id=f"n-{parent}")

    return store, children


def _descendants(children: dict[int, list[int]], root: int) -> set[int]:
    found = {root}
    pending = [root]
    while pending:
        for child in children[pending.pop()]:
            found.add(child)
            pending.append(child)
    return found


@given(choices=parent_choices, data=st.data())
@settings(max_examples=75, deadline=None)
def test_subtree_is_collected_and_each_node_visited_once(choices: list[int], data: st.DataObject) -> None:
    store, children = _tree_store(choices)
    root = data.draw(st.integers(min_value=0, max_value=len(choices)), label="root")

    plan = collect(get_schema_graph(), store, "indicators", f"n-{root}")

    expected = {f"n-{node}" for node in _descendants(children, root)}
    assert plan["indicators"] == expected

    lookups = [call[3] for call in store.calls if call[1:3] == ("indicators", "parent_id")]
    assert sorted(lookups) == sorted(expected)


@given(choices=parent_choices)
@settings(max_examples=50, deadline=None)
def test_indicator_system_collects_whole_forest(choices: list[int]) -> None:
    store, _ = _tree_store(choices)
    store.insert("indicator_systems", id="is-001", name="체계")

    plan = collect(get_schema_graph(), store, "indicator_systems", "is-001")

    assert plan["indicators"] == store.ids("indicators")


# Edges only point from a lower-numbered table to a higher-numbered one, so the graph is acyclic
acyclic_edges = st.lists(
    st.tuples(st.integers(0, 11), st.integers(0, 11), st.booleans()).filter(lambda edge: edge[0] <= edge[1]),
    min_size=1,
    max_size=30,
)


@given(edges=acyclic_edges)
@settings(max_examples=100, deadline=None)
def test_deletion_order_places_children_before_parents(edges: list[tuple[int, int, bool]]) -> None:
    cascade_edges = [
        CascadeEdge(parent_table=f"t{parent:02d}", child_table=f"t{child:02d}", foreign_key=f"t{parent:02d}_id", transitive=transitive)
        for parent, child, transitive in edges
    ]

    graph = SchemaGraph(cascade_edges)
    position = {table: index for index, table in enumerate(graph.deletion_order)}

    assert set(position) == graph.tables
    for edge in cascade_edges:
        if not edge.is_self_referential:
            assert position[edge.child_table] < position[edge.parent_table]
