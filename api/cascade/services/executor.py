"""
    삭제 실행기 (Delete Executor)

    삭제 순서(자식 → 부모)를 따라 테이블마다 한 번씩 delete_rows 를 호출합니다.
"""

from typing import Dict, Sequence

import structlog

from cascade.exceptions import DataAccessError, UnknownTableInOrderError
from cascade.ports import BaseDataAccess
from cascade.services.collector import DeletionPlan

logger = structlog.get_logger(__name__)


def ensure_ordered(plan: DeletionPlan, order: Sequence[str]) -> None:
    """
    삭제 계획의 모든 테이블이 삭제 순서에 포함되어 있는지 확인

    누락된 테이블을 건너뛰면 부모 없는 자식 레코드가 남으므로, 조용히 넘어가지 않고 실패합니다.

    Raises:
        UnknownTableInOrderError: 삭제 순서에 없는 테이블이 있는 경우
    """
    unknown = set(plan) - set(order)
    if unknown:
        raise UnknownTableInOrderError(unknown)


def execute(plan: DeletionPlan, order: Sequence[str], access: BaseDataAccess) -> Dict[str, int]:
    """
    삭제 실행

    Args:
        plan: 삭제 계획
        order: 삭제 순서 (자식 테이블이 부모 테이블보다 앞)
        access: 데이터 접근 포트

    Returns:
        Dict[str, int]: 테이블별 실제 삭제 건수 (삭제 순서대로)

    Raises:
        UnknownTableInOrderError: 삭제 순서에 없는 테이블이 있는 경우 (아무것도 삭제하지 않음)
        DataAccessError: 삭제 실패. 실패 이전까지의 삭제 건수는 예외의 deleted 속성에 담김
    """
    ensure_ordered(plan, order)

    deleted: Dict[str, int] = {}

    for table in order:
        ids = plan.get(table)
        if not ids:
            continue

        try:
            deleted[table] = access.delete_rows(table, sorted(ids, key=str))

        except DataAccessError as e:
            e.deleted = dict(deleted)
            raise

        logger.debug("cascade_table_deleted", table=table, requested=len(ids), deleted=deleted[table])

    return deleted
