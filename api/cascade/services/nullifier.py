"""
    SET NULL 처리기 (Nullifier)

    삭제 계획에 포함된 레코드를 참조하지만 함께 삭제되지 않는 레코드의 외래키를 NULL 로 변경합니다.
    반드시 삭제 실행 전에 호출되어야 합니다.
"""

from typing import Dict

import structlog

from cascade.graph import SchemaGraph
from cascade.ports import BaseDataAccess
from cascade.services.collector import DeletionPlan

logger = structlog.get_logger(__name__)


def apply_nulls(graph: SchemaGraph, access: BaseDataAccess, plan: DeletionPlan) -> Dict[str, int]:
    """
    SET NULL 관계 적용

    Args:
        graph: 스키마 그래프
        access: 데이터 접근 포트
        plan: 삭제 계획

    Returns:
        Dict[str, int]: "참조테이블.외래키" -> NULL 로 변경된 행 수

    Raises:
        DataAccessError: 변경 실패
    """
    unlinked: Dict[str, int] = {}

    for table, ids in plan.items():
        edges = graph.set_null_edges(table)
        if not edges:
            continue

        for edge in edges:
            key = f"{edge.referencing_table}.{edge.foreign_key}"

            for row_id in sorted(ids, key=str):
                count = access.update_field(
                    edge.referencing_table,
                    edge.foreign_key,
                    None,
                    edge.foreign_key,
                    row_id,
                )
                unlinked[key] = unlinked.get(key, 0) + count

    if unlinked:
        logger.debug("cascade_references_unlinked", unlinked=unlinked)

    return unlinked
