"""
    연쇄 수집기 (Cascade Collector)

    루트 레코드에서 시작해 스키마 그래프를 깊이 우선으로 따라가며, 테이블별로 삭제해야 할 레코드 ID를 모읍니다.
    수집 단계는 읽기만 하며, 조회 실패 시 부분 결과를 돌려주지 않고 예외를 그대로 전달합니다.
"""

from typing import Any, Dict, List, Set, Tuple

import structlog

from cascade.graph import SchemaGraph
from cascade.ports import BaseDataAccess

logger = structlog.get_logger(__name__)


class DeletionPlan(Dict[str, Set[Any]]):
    """테이블 이름 -> 삭제할 ID 집합"""

    def add(self, table: str, row_id: Any) -> None:
        self.setdefault(table, set()).add(row_id)

    def counts(self) -> Dict[str, int]:
        return {table: len(ids) for table, ids in self.items()}

    @property
    def total(self) -> int:
        return sum(len(ids) for ids in self.values())


def collect(graph: SchemaGraph, access: BaseDataAccess, root_table: str, root_id: Any) -> DeletionPlan:
    """
    삭제 계획 수집

    Args:
        graph: 스키마 그래프
        access: 데이터 접근 포트
        root_table: 삭제를 시작할 테이블
        root_id: 삭제를 시작할 레코드 ID

    Returns:
        DeletionPlan: 테이블별 삭제 대상 ID 집합 (루트 포함)

    Raises:
        UnknownTableError: 루트 테이블이 스키마 그래프에 없는 경우
        DataAccessError: 자식 레코드 조회 실패
    """
    graph.require_table(root_table)

    # (테이블, ID) 방문 기록: 자기 참조 / 다이아몬드 구조에서 같은 레코드를 두 번 방문하지 않음
    visited: Set[Tuple[str, Any]] = set()
    plan = DeletionPlan()

    # 재귀 대신 명시적 스택 사용 (지표 트리 깊이에 제한 없음)
    stack: List[Tuple[str, Any]] = [(root_table, root_id)]

    while stack:
        table, row_id = stack.pop()

        if (table, row_id) in visited:
            continue

        visited.add((table, row_id))
        plan.add(table, row_id)

        for edge in graph.cascade_edges(table):
            children = access.rows_where(edge.child_table, edge.foreign_key, row_id)

            for child in children:
                if edge.transitive:
                    stack.append((edge.child_table, child["id"]))
                else:
                    # 비전이 관계: 직계 자식만 삭제하고 더 따라가지 않음
                    plan.add(edge.child_table, child["id"])

    logger.debug(
        "cascade_plan_collected",
        root_table=root_table,
        root_id=root_id,
        visited=len(visited),
        planned=plan.counts(),
    )

    return plan
