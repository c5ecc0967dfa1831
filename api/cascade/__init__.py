"""
    연쇄 삭제 엔진 패키지

    저장소가 외래키 연쇄 삭제를 지원하지 않으므로, 애플리케이션 계층에서 참조 무결성을 유지합니다.

    - graph: 연쇄 삭제 / SET NULL 관계와 삭제 순서
    - ports: 데이터 접근 포트 (rows_where, delete_rows, update_field)
    - services: 수집기, SET NULL 처리기, 삭제 실행기, 서비스(Facade)
"""

from .exceptions import (
    CascadeError,
    DataAccessError,
    SchemaGraphError,
    UnknownTableError,
    UnknownTableInOrderError
)
from .graph import CascadeEdge, SetNullEdge, SchemaGraph, get_schema_graph
from .ports import BaseDataAccess
from .schema import CascadeDeleteResult, DeletionPreview, DeletionSeverity

__all__ = [
    "CascadeError",
    "DataAccessError",
    "SchemaGraphError",
    "UnknownTableError",
    "UnknownTableInOrderError",
    "CascadeEdge",
    "SetNullEdge",
    "SchemaGraph",
    "get_schema_graph",
    "BaseDataAccess",
    "CascadeDeleteResult",
    "DeletionPreview",
    "DeletionSeverity",
]
