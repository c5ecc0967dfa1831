"""Unit tests for the depth-first cascade collector."""

from __future__ import annotations

import pytest

from cascade.exceptions import DataAccessError, UnknownTableError
from cascade.graph import CascadeEdge, SchemaGraph
from cascade.services import DeletionPlan, collect
from tests.fixtures.stores import InMemoryDataAccess


def _edge(parent: str, child: str, field: str, transitive: bool = True) -> CascadeEdge:
    return CascadeEdge(parent_table=parent, child_table=child, foreign_key=field, transitive=transitive)


class TestCollect:
    def test_indicator_system_plan(self, graph: SchemaGraph, scenario_a: InMemoryDataAccess) -> None:
        plan = collect(graph, scenario_a, "indicator_systems", "is-001")

        assert plan == {
            "indicator_systems": {"is-001"},
            "indicators": {"ind-001", "ind-002"},
            "data_indicators": {"di-001"},
            "supporting_materials": {"sm-001"},
        }
        assert plan.total == 5
        assert plan.counts() == {
            "indicator_systems": 1,
            "indicators": 2,
            "data_indicators": 1,
            "supporting_materials": 1,
        }

    def test_root_without_children_is_singleton(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        store.insert("projects", id="p-001", name="2024 의무교육 평가")

        plan = collect(graph, store, "projects", "p-001")

        assert plan == {"projects": {"p-001"}}

    def test_missing_root_still_plans_root_id(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        assert collect(graph, store, "schools", "missing") == {"schools": {"missing"}}

    def test_leaf_table_issues_no_queries(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        collect(graph, store, "rule_actions", "ra-001")

        assert store.calls == []

    def test_unknown_root_fails_before_data_access(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        with pytest.raises(UnknownTableError):
            collect(graph, store, "memberships", "m-001")

        assert store.calls == []

    def test_self_referential_tree_is_collected(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        store.insert("indicators", id="ind-001", system_id="is-001", parent_id=None)
        store.insert("indicators", id="ind-002", system_id="is-001", parent_id="ind-001")
        store.insert("indicators", id="ind-003", system_id="is-001", parent_id="ind-002")
        store.insert("indicators", id="ind-004", system_id="is-001", parent_id="ind-001")
        store.insert("indicators", id="ind-009", system_id="is-001", parent_id=None)

        plan = collect(graph, store, "indicators", "ind-001")

        assert plan["indicators"] == {"ind-001", "ind-002", "ind-003", "ind-004"}

    def test_deep_tree_exceeds_recursion_limit(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        depth = 1500
        store.insert("indicators", id="n-0", parent_id=None)
        for level in range(1, depth):
            store.insert("indicators", id=f"n-{level}", parent_id=f"n-{level - 1}")

        plan = collect(graph, store, "indicators", "n-0")

        assert len(plan["indicators"]) == depth

    def test_each_self_referential_node_is_queried_once(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        store.insert("indicators", id="ind-001", parent_id=None)
        store.insert("indicators", id="ind-002", parent_id="ind-001")
        store.insert("indicators", id="ind-003", parent_id="ind-001")

        collect(graph, store, "indicators", "ind-001")

        parent_lookups = [call for call in store.calls_for("rows_where") if call[1:3] == ("indicators", "parent_id")]
        assert sorted(call[3] for call in parent_lookups) == ["ind-001", "ind-002", "ind-003"]

    def test_corrupt_parent_cycle_terminates(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        store.insert("indicators", id="ind-001", parent_id="ind-002")
        store.insert("indicators", id="ind-002", parent_id="ind-001")

        plan = collect(graph, store, "indicators", "ind-001")

        assert plan["indicators"] == {"ind-001", "ind-002"}

    def test_diamond_child_is_visited_once(self, store: InMemoryDataAccess) -> None:
        graph = SchemaGraph([
            _edge("a", "b", "a_id"),
            _edge("a", "c", "a_id"),
            _edge("b", "d", "b_id"),
            _edge("c", "d", "c_id"),
            _edge("d", "e", "d_id"),
        ])
        store.insert("b", id="b1", a_id="a1")
        store.insert("c", id="c1", a_id="a1")
        store.insert("d", id="d1", b_id="b1", c_id="c1")
        store.insert("e", id="e1", d_id="d1")

        plan = collect(graph, store, "a", "a1")

        assert plan == {"a": {"a1"}, "b": {"b1"}, "c": {"c1"}, "d": {"d1"}, "e": {"e1"}}
        assert [call for call in store.calls if call[1] == "e"] == [("rows_where", "e", "d_id", "d1")]

    def test_non_transitive_children_are_not_followed(self, store: InMemoryDataAccess) -> None:
        graph = SchemaGraph([_edge("a", "b", "a_id", transitive=False), _edge("b", "c", "b_id")])
        store.insert("b", id="b1", a_id="a1")
        store.insert("c", id="c1", b_id="b1")

        plan = collect(graph, store, "a", "a1")

        assert plan == {"a": {"a1"}, "b": {"b1"}}
        assert all(call[1] != "c" for call in store.calls)

    def test_data_tool_plan_includes_project_links(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        store.insert("data_tools", id="dt-001", name="학교 기본 정보")
        store.insert("project_tools", id="pt-001", project_id="p-001", tool_id="dt-001")
        store.insert("field_mappings", id="fm-001", tool_id="dt-001")

        plan = collect(graph, store, "data_tools", "dt-001")

        assert plan == {"data_tools": {"dt-001"}, "project_tools": {"pt-001"}, "field_mappings": {"fm-001"}}

    def test_collection_is_idempotent(self, graph: SchemaGraph, scenario_a: InMemoryDataAccess) -> None:
        first = collect(graph, scenario_a, "indicator_systems", "is-001")
        second = collect(graph, scenario_a, "indicator_systems", "is-001")

        assert first == second

    def test_collection_performs_no_writes(self, graph: SchemaGraph, scenario_a: InMemoryDataAccess) -> None:
        collect(graph, scenario_a, "indicator_systems", "is-001")

        assert scenario_a.calls_for("delete_rows") == []
        assert scenario_a.calls_for("update_field") == []

    def test_data_access_failure_aborts_collection(self, graph: SchemaGraph, scenario_a: InMemoryDataAccess) -> None:
        scenario_a.fail_on.add(("rows_where", "data_indicators"))

        with pytest.raises(DataAccessError) as exc_info:
            collect(graph, scenario_a, "indicator_systems", "is-001")

        assert exc_info.value.table == "data_indicators"
        assert exc_info.value.operation == "rows_where"


class TestDeletionPlan:
    def test_add_deduplicates(self) -> None:
        plan = DeletionPlan()
        plan.add("schools", "s-001")
        plan.add("schools", "s-001")
        plan.add("schools", "s-002")

        assert plan == {"schools": {"s-001", "s-002"}}
        assert plan.total == 2

    def test_empty_plan(self) -> None:
        plan = DeletionPlan()

        assert plan.counts() == {}
        assert plan.total == 0
