"""Unit tests for set-null handling of rows that outlive a deletion."""

from __future__ import annotations

import pytest

from cascade.exceptions import DataAccessError
from cascade.graph import SchemaGraph
from cascade.services import DeletionPlan, apply_nulls
from tests.fixtures.stores import InMemoryDataAccess


def _plan(**tables: set) -> DeletionPlan:
    plan = DeletionPlan()
    for table, ids in tables.items():
        for row_id in ids:
            plan.add(table, row_id)
    return plan


class TestApplyNulls:
    def test_compliance_rule_indicator_is_unlinked(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        store.insert("compliance_rules", id="r-001", name="교사 비율", indicator_id="di-001", element_id=None)
        store.insert("compliance_rules", id="r-002", name="면적", indicator_id="di-002", element_id=None)

        unlinked = apply_nulls(graph, store, _plan(data_indicators={"di-001"}))

        assert store.get("compliance_rules", "r-001")["indicator_id"] is None
        assert store.get("compliance_rules", "r-002")["indicator_id"] == "di-002"
        assert unlinked == {"compliance_rules.indicator_id": 1, "submission_materials.indicator_id": 0}

    def test_every_planned_row_is_unlinked(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        store.insert("submission_materials", id="mat-001", submission_id="sub-001", material_config_id="sm-001")
        store.insert("submission_materials", id="mat-002", submission_id="sub-001", material_config_id="sm-002")

        unlinked = apply_nulls(
            graph, store, _plan(indicators={"ind-001"}, supporting_materials={"sm-001", "sm-002"})
        )

        assert store.get("submission_materials", "mat-001")["material_config_id"] is None
        assert store.get("submission_materials", "mat-002")["material_config_id"] is None
        assert unlinked == {"submission_materials.material_config_id": 2}

    def test_tables_without_set_null_edges_are_skipped(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        unlinked = apply_nulls(graph, store, _plan(projects={"p-001"}, submissions={"sub-001"}))

        assert unlinked == {}
        assert store.calls == []

    def test_update_calls_set_null_on_matching_field(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        apply_nulls(graph, store, _plan(elements={"el-001"}))

        assert store.calls == [("update_field", "compliance_rules", "element_id", None, "element_id", "el-001")]

    def test_failure_propagates(self, graph: SchemaGraph, store: InMemoryDataAccess) -> None:
        store.fail_on.add(("update_field", "compliance_rules"))

        with pytest.raises(DataAccessError):
            apply_nulls(graph, store, _plan(elements={"el-001"}))
