"""
    연쇄 삭제 엔진 예외 정의

    엔진은 재시도나 보상 처리를 하지 않습니다. 모든 예외는 원래 타입 그대로 호출자에게 전달됩니다.
"""

from typing import Dict, Iterable, List, Optional


class CascadeError(Exception):
    """연쇄 삭제 엔진 예외의 기본 클래스"""


class DataAccessError(CascadeError):
    """
    데이터 접근 포트 호출 실패 (네트워크, 권한, 잘못된 쿼리 등)

    Attributes:
        table: 실패한 호출의 대상 테이블
        operation: 실패한 호출 (rows_where, delete_rows, update_field)
        partial: 트랜잭션 없이 이미 일부 쓰기가 반영된 상태에서 실패했는지 여부
        deleted: 실패 이전까지 반영된 테이블별 삭제 건수
    """

    def __init__(self, message: str, table: Optional[str] = None, operation: Optional[str] = None):
        super().__init__(message)
        self.table = table
        self.operation = operation
        self.partial = False
        self.deleted: Dict[str, int] = {}


class UnknownTableError(CascadeError):
    """스키마 그래프에 선언되지 않은 테이블"""

    def __init__(self, table: str):
        super().__init__(f"스키마 그래프에 등록되지 않은 테이블입니다: {table}")
        self.table = table


class UnknownTableInOrderError(CascadeError):
    """삭제 계획에 삭제 순서(DeletionOrder)에 없는 테이블이 포함됨 (설정 결함)"""

    def __init__(self, tables: Iterable[str]):
        self.tables: List[str] = sorted(tables)
        super().__init__(
            f"삭제 순서에 없는 테이블이 삭제 계획에 포함되어 있습니다: {', '.join(self.tables)}"
        )


class SchemaGraphError(CascadeError):
    """스키마 그래프 선언 오류 (서로 다른 테이블 간 순환, 엄격 모드 위반 등)"""
