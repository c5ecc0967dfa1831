"""
    연쇄 삭제 서비스 (Cascade Facade)

    수집 → SET NULL → 삭제 실행 순서로 연쇄 삭제를 수행하는 공개 진입점입니다.
    SET NULL 과 삭제는 데이터 접근 포트의 트랜잭션 안에서 실행되며,
    트랜잭션을 지원하지 않는 포트에서 실패하면 예외의 partial 속성으로 부분 반영 여부를 알립니다.
"""

from typing import Any, Dict, Iterable, Optional

import structlog

from cascade.exceptions import DataAccessError
from cascade.graph import SchemaGraph, get_schema_graph
from cascade.ports import BaseDataAccess
from cascade.schema import CascadeDeleteResult, DeletionPreview, DeletionSeverity
from cascade.services.collector import DeletionPlan, collect
from cascade.services.executor import ensure_ordered, execute
from cascade.services.nullifier import apply_nulls
from cascade.utils.message_utils import generate_preview_message

logger = structlog.get_logger(__name__)


def _merge_counts(total: Dict[str, int], counts: Dict[str, int]) -> None:
    for key, count in counts.items():
        total[key] = total.get(key, 0) + count


class CascadeService:
    """연쇄 삭제 서비스"""

    def __init__(self, access: BaseDataAccess, graph: Optional[SchemaGraph] = None):
        self.access = access
        self.graph = graph or get_schema_graph()

    # ------------------------------------------------------------------ #
    # 공통 진입점
    # ------------------------------------------------------------------ #

    def collect(self, table: str, item_id: Any) -> DeletionPlan:
        """삭제 계획만 수집 (쓰기 없음)"""
        return collect(self.graph, self.access, table, item_id)

    def cascade_delete(self, table: str, item_id: Any) -> CascadeDeleteResult:
        """
        연쇄 삭제 실행

        Args:
            table: 루트 테이블
            item_id: 루트 레코드 ID

        Returns:
            CascadeDeleteResult: 테이블별 삭제 건수 및 참조 해제 건수

        Raises:
            UnknownTableError: 스키마 그래프에 없는 테이블
            UnknownTableInOrderError: 삭제 순서 설정 결함 (쓰기 전에 실패)
            DataAccessError: 데이터 접근 실패
        """
        # 1. 삭제 대상 수집 (실패 시 아무것도 변경되지 않음)
        plan = self.collect(table, item_id)

        # 2. 삭제 순서 검증: SET NULL 이 반영되기 전에 설정 결함을 확인
        order = self.graph.deletion_order
        ensure_ordered(plan, order)

        # 3. SET NULL → 삭제
        try:
            with self.access.transaction():
                nullified = apply_nulls(self.graph, self.access, plan)
                deleted = execute(plan, order, self.access)

        except DataAccessError as e:
            # 트랜잭션이 없는 포트에서는 이미 반영된 변경이 남음
            e.partial = not self.access.atomic
            if self.access.atomic:
                # 롤백되었으므로 실행기가 기록한 삭제 건수는 반영되지 않음
                e.deleted = {}
            logger.warning(
                "cascade_delete_failed",
                table=table,
                item_id=item_id,
                failed_table=e.table,
                operation=e.operation,
                partial=e.partial,
            )
            raise

        logger.info(
            "cascade_delete_completed",
            table=table,
            item_id=item_id,
            deleted=deleted,
            nullified=nullified,
        )

        return CascadeDeleteResult(success=True, deleted=deleted, nullified=nullified)

    def batch_cascade_delete(self, table: str, ids: Iterable[Any]) -> CascadeDeleteResult:
        """
        일괄 연쇄 삭제

        ID마다 독립적인 연쇄 삭제를 반복하고 테이블별 건수를 합산합니다.
        ID 사이에는 원자성이 없습니다: k번째 ID에서 실패해도 앞선 ID의 삭제는 되돌리지 않습니다.
        존재하지 않는 ID는 삭제 건수에 반영되지 않을 뿐 오류가 아닙니다.

        Raises:
            DataAccessError: 실패 시 deleted 속성에 실패 시점까지의 합산 건수,
                partial 속성에 저장소 변경이 남았는지 여부가 담김
        """
        deleted: Dict[str, int] = {}
        nullified: Dict[str, int] = {}

        for item_id in ids:
            try:
                result = self.cascade_delete(table, item_id)

            except DataAccessError as e:
                committed = dict(deleted)
                _merge_counts(committed, e.deleted)
                e.partial = e.partial or any(deleted.values()) or any(nullified.values())
                e.deleted = committed
                raise

            _merge_counts(deleted, result.deleted)
            _merge_counts(nullified, result.nullified)

        return CascadeDeleteResult(success=True, deleted=deleted, nullified=nullified)

    def preview(self, table: str, item_id: Any) -> DeletionPreview:
        """
        삭제 미리보기 (dry run)

        수집 단계만 실행하여 삭제될 레코드 수와 참조 해제될 레코드 수를 계산합니다. 저장소는 변경하지 않습니다.
        """
        plan = self.collect(table, item_id)
        exists = bool(self.access.rows_where(table, "id", item_id))

        counts = plan.counts()
        planned = {t: counts[t] for t in self.graph.deletion_order if t in counts}

        nullified: Dict[str, int] = {}
        for planned_table, row_ids in plan.items():
            for edge in self.graph.set_null_edges(planned_table):
                key = f"{edge.referencing_table}.{edge.foreign_key}"
                for row_id in row_ids:
                    rows = self.access.rows_where(edge.referencing_table, edge.foreign_key, row_id)
                    if rows:
                        nullified[key] = nullified.get(key, 0) + len(rows)

        severity = DeletionSeverity.SAFE
        if plan.total > 1 or nullified:
            severity = DeletionSeverity.WARNING

        return DeletionPreview(
            table=table,
            item_id=item_id,
            exists=exists,
            planned=planned,
            total=plan.total,
            nullified=nullified,
            severity=severity,
            message=generate_preview_message(table, planned, nullified, exists),
        )

    # ------------------------------------------------------------------ #
    # 명명된 진입점
    # ------------------------------------------------------------------ #

    def delete_project(self, project_id: Any) -> CascadeDeleteResult:
        """평가 프로젝트와 제출 / 심사 / 통계 / 복사본 데이터 삭제"""
        return self.cascade_delete("projects", project_id)

    def delete_indicator_system(self, system_id: Any) -> CascadeDeleteResult:
        """지표 체계와 모든 지표 트리 삭제"""
        return self.cascade_delete("indicator_systems", system_id)

    def delete_indicator(self, indicator_id: Any) -> CascadeDeleteResult:
        """지표와 하위 지표 / 데이터 지표 / 증빙 자료 설정 삭제"""
        return self.cascade_delete("indicators", indicator_id)

    def delete_school(self, school_id: Any) -> CascadeDeleteResult:
        return self.cascade_delete("schools", school_id)

    def delete_district(self, district_id: Any) -> CascadeDeleteResult:
        """구역과 소속 학교 삭제"""
        return self.cascade_delete("districts", district_id)

    def delete_data_tool(self, tool_id: Any) -> CascadeDeleteResult:
        return self.cascade_delete("data_tools", tool_id)

    def delete_element_library(self, library_id: Any) -> CascadeDeleteResult:
        """요소 라이브러리와 소속 요소 삭제"""
        return self.cascade_delete("element_libraries", library_id)

    def delete_compliance_rule(self, rule_id: Any) -> CascadeDeleteResult:
        """달성 규칙과 조건 / 동작 / 판정 결과 삭제"""
        return self.cascade_delete("compliance_rules", rule_id)
