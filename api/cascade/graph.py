"""
    스키마 그래프

    relations.py 의 선언을 간선(edge) 레코드로 변환하고, 테이블별 연쇄 삭제 / SET NULL 간선 조회와
    삭제 순서(자식 → 부모) 계산을 담당합니다. 그래프는 기동 시 한 번 생성되며 이후 변경되지 않습니다.
"""

from collections import defaultdict
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx
import structlog
from pydantic import BaseModel, Field

from cascade import config
from cascade.exceptions import SchemaGraphError, UnknownTableError
from cascade.relations import CASCADE_RELATIONS, SET_NULL_RELATIONS

logger = structlog.get_logger(__name__)


class CascadeEdge(BaseModel):
    """부모 레코드 삭제 시 자식 레코드를 함께 삭제하는 관계"""
    parent_table: str = Field(..., description="부모 테이블")
    child_table: str = Field(..., description="자식 테이블")
    foreign_key: str = Field(..., description="자식 테이블의 외래키 필드")
    transitive: bool = Field(True, description="자식 테이블의 연쇄 관계까지 따라갈지 여부")

    class Config:
        frozen = True

    @property
    def is_self_referential(self) -> bool:
        return self.parent_table == self.child_table


class SetNullEdge(BaseModel):
    """대상 레코드 삭제 시 참조 레코드의 외래키를 NULL 로 바꾸는 관계"""
    target_table: str = Field(..., description="삭제되는 테이블")
    referencing_table: str = Field(..., description="참조하는 테이블")
    foreign_key: str = Field(..., description="참조 테이블의 외래키 필드")

    class Config:
        frozen = True


class SchemaGraph:
    """
    연쇄 삭제 관계 그래프

    - cascade_edges(table): table 을 부모로 하는 연쇄 삭제 간선
    - set_null_edges(table): table 을 대상으로 하는 SET NULL 간선
    - deletion_order: 모든 테이블의 삭제 순서 (자식이 항상 부모보다 앞)

    자기 참조 간선(indicators.parent_id 등)은 일반 간선과 동일하게 취급되며,
    삭제 순서 계산에서만 제외됩니다. 서로 다른 테이블 사이의 순환은 스키마 설계 오류이므로 생성 시 실패합니다.
    """

    def __init__(
        self,
        cascade_edges: Iterable[CascadeEdge],
        set_null_edges: Iterable[SetNullEdge] = (),
        strict: bool = False,
    ):
        self._cascade: Dict[str, List[CascadeEdge]] = defaultdict(list)
        self._set_null: Dict[str, List[SetNullEdge]] = defaultdict(list)
        self._graph = nx.DiGraph()

        for edge in cascade_edges:
            self._cascade[edge.parent_table].append(edge)
            self._graph.add_node(edge.parent_table)
            self._graph.add_node(edge.child_table)
            if not edge.is_self_referential:
                self._graph.add_edge(edge.parent_table, edge.child_table)

        for edge in set_null_edges:
            self._set_null[edge.target_table].append(edge)
            self._graph.add_node(edge.target_table)
            self._graph.add_node(edge.referencing_table)

        self._check_non_transitive_children(strict)
        self._order = self._derive_deletion_order()

    @classmethod
    def from_relations(
        cls,
        cascade_relations: Dict[str, List[Tuple[str, str, bool]]],
        set_null_relations: Optional[Dict[str, List[Tuple[str, str]]]] = None,
        strict: bool = False,
    ) -> "SchemaGraph":
        """relations.py 형식의 선언으로 그래프 생성"""
        cascade_edges = [
            CascadeEdge(parent_table=parent, child_table=child, foreign_key=field, transitive=transitive)
            for parent, children in cascade_relations.items()
            for child, field, transitive in children
        ]
        set_null_edges = [
            SetNullEdge(target_table=target, referencing_table=referencing, foreign_key=field)
            for target, referencing_list in (set_null_relations or {}).items()
            for referencing, field in referencing_list
        ]
        return cls(cascade_edges, set_null_edges, strict=strict)

    # ------------------------------------------------------------------ #
    # 조회
    # ------------------------------------------------------------------ #

    @property
    def tables(self) -> frozenset:
        return frozenset(self._graph.nodes)

    @property
    def deletion_order(self) -> Tuple[str, ...]:
        return self._order

    def has_table(self, table: str) -> bool:
        return table in self._graph

    def require_table(self, table: str) -> None:
        if table not in self._graph:
            raise UnknownTableError(table)

    def cascade_edges(self, table: str) -> Tuple[CascadeEdge, ...]:
        return tuple(self._cascade.get(table, ()))

    def set_null_edges(self, table: str) -> Tuple[SetNullEdge, ...]:
        return tuple(self._set_null.get(table, ()))

    def all_cascade_edges(self) -> List[CascadeEdge]:
        return [edge for edges in self._cascade.values() for edge in edges]

    # ------------------------------------------------------------------ #
    # 검증 / 삭제 순서
    # ------------------------------------------------------------------ #

    def _derive_deletion_order(self) -> Tuple[str, ...]:
        # 위상 정렬은 부모 → 자식 순서이므로 뒤집어서 자식이 먼저 오도록 함
        try:
            parents_first = list(nx.lexicographical_topological_sort(self._graph))
        except nx.NetworkXUnfeasible as e:
            cycle = nx.find_cycle(self._graph)
            path = " -> ".join([cycle[0][0], *(child for _, child in cycle)])
            raise SchemaGraphError(f"연쇄 삭제 관계에 순환이 있습니다: {path}") from e

        return tuple(reversed(parents_first))

    def _check_non_transitive_children(self, strict: bool) -> None:
        """
        비전이 간선의 자식 테이블이 자체 연쇄 관계를 가지면, 그 하위 레코드는 삭제되지 않고 남습니다.
        기본은 경고, strict 모드에서는 그래프 생성 실패.
        """
        for edge in self.all_cascade_edges():
            if edge.transitive:
                continue

            dangling = [
                child_edge.child_table
                for child_edge in self._cascade.get(edge.child_table, ())
            ]
            if not dangling:
                continue

            message = (
                f"{edge.parent_table} -> {edge.child_table} 는 비전이 관계이지만 "
                f"{edge.child_table} 에 연쇄 관계({', '.join(dangling)})가 선언되어 있어 하위 레코드가 남을 수 있습니다."
            )
            if strict:
                raise SchemaGraphError(message)

            logger.warning(
                "non_transitive_child_has_dependents",
                parent_table=edge.parent_table,
                child_table=edge.child_table,
                dependents=dangling,
            )


@lru_cache(maxsize=1)
def get_schema_graph() -> SchemaGraph:
    """프로세스 전역 스키마 그래프 (최초 호출 시 생성)"""
    return SchemaGraph.from_relations(
        CASCADE_RELATIONS,
        SET_NULL_RELATIONS,
        strict=config.CASCADE_STRICT_SCHEMA,
    )
