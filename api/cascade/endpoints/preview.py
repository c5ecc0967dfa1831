"""
    삭제 미리보기 / 스키마 그래프 조회 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException

from cascade.dependencies import get_cascade_service
from cascade.exceptions import CascadeError, UnknownTableError
from cascade.graph import get_schema_graph
from cascade.relations import ROOT_TABLES, get_table_display_name
from cascade.schema import CascadeTablesResponse, DeletionPreviewResponse
from cascade.services import CascadeService

# 라우터 생성
preview_router = APIRouter()


# 삭제 순서 및 진입점 테이블 조회 API
@preview_router.get("/tables", response_model=CascadeTablesResponse)
def get_cascade_tables():

    graph = get_schema_graph()

    return CascadeTablesResponse(
        deletion_order=list(graph.deletion_order),
        root_tables=list(ROOT_TABLES),
        display_names={table: get_table_display_name(table) for table in graph.deletion_order}
    )


# 삭제 미리보기 API (실제 삭제 없음)
@preview_router.get("/{table}/{item_id}/preview", response_model=DeletionPreviewResponse)
def preview_cascade_delete(
    table: str,
    item_id: str,
    service: CascadeService = Depends(get_cascade_service)
):

    try:
        preview = service.preview(table, item_id)

    except UnknownTableError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except CascadeError as e:
        raise HTTPException(
            status_code=500,
            detail=f"삭제 미리보기 중 오류가 발생했습니다: {str(e)}"
        )

    if not preview.exists:
        raise HTTPException(status_code=404, detail=preview.message)

    return DeletionPreviewResponse(
        status="success",
        message=preview.message,
        data=preview
    )
