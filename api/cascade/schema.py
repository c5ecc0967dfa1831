"""
    연쇄 삭제 관련 Pydantic 스키마
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, validator


class DeletionSeverity(str, Enum):
    """삭제 영향 수준"""
    SAFE = "safe"         # 루트 레코드만 삭제됨
    WARNING = "warning"   # 하위 레코드가 함께 삭제되거나 참조가 해제됨


# 연쇄 삭제 결과
class CascadeDeleteResult(BaseModel):

    success: bool = Field(..., description="삭제 성공 여부")
    deleted: Dict[str, int] = Field(default_factory=dict, description="테이블별 삭제 건수")
    nullified: Dict[str, int] = Field(default_factory=dict, description="참조테이블.외래키 별 NULL 처리 건수")

    @property
    def total_deleted(self) -> int:
        return sum(self.deleted.values())


# 삭제 미리보기 (dry run) 결과
class DeletionPreview(BaseModel):

    table: str = Field(..., description="루트 테이블")
    item_id: Any = Field(..., description="루트 레코드 ID")
    exists: bool = Field(..., description="루트 레코드 존재 여부")
    planned: Dict[str, int] = Field(default_factory=dict, description="테이블별 삭제 예정 건수 (삭제 순서대로)")
    total: int = Field(0, description="삭제 예정 전체 건수")
    nullified: Dict[str, int] = Field(default_factory=dict, description="참조테이블.외래키 별 NULL 처리 예정 건수")
    severity: DeletionSeverity = Field(DeletionSeverity.SAFE, description="삭제 영향 수준")
    message: str = Field(..., description="사용자 메시지")


# 일괄 삭제 요청 스키마
class BatchDeleteRequest(BaseModel):

    ids: List[str] = Field(..., description="삭제할 레코드 ID 목록")

    @validator('ids')
    def validate_ids(cls, v):
        if not v:
            raise ValueError('삭제할 ID 목록은 비어있을 수 없습니다.')
        if any(not item or not item.strip() for item in v):
            raise ValueError('빈 ID는 삭제할 수 없습니다.')
        # 순서를 유지하며 중복 제거
        return list(dict.fromkeys(item.strip() for item in v))


# 연쇄 삭제 API 응답
class CascadeDeleteResponse(BaseModel):

    status: str = Field(..., description="응답 상태")
    message: str = Field(..., description="응답 메시지")
    data: CascadeDeleteResult


# 삭제 미리보기 API 응답
class DeletionPreviewResponse(BaseModel):

    status: str = Field(..., description="응답 상태")
    message: str = Field(..., description="응답 메시지")
    data: DeletionPreview


# 스키마 그래프 정보 응답
class CascadeTablesResponse(BaseModel):

    deletion_order: List[str] = Field(..., description="삭제 순서 (자식 테이블 우선)")
    root_tables: List[str] = Field(..., description="명명된 삭제 진입점이 있는 테이블")
    display_names: Optional[Dict[str, str]] = Field(None, description="테이블 표시 이름")
