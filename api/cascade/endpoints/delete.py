"""
    연쇄 삭제 엔드포인트
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from cascade.dependencies import get_cascade_service
from cascade.exceptions import CascadeError, DataAccessError, UnknownTableError
from cascade.schema import BatchDeleteRequest, CascadeDeleteResponse
from cascade.services import CascadeService
from cascade.utils.message_utils import generate_delete_message

logger = structlog.get_logger(__name__)

# 라우터 생성
delete_router = APIRouter()


# 단건 연쇄 삭제 API
@delete_router.delete("/{table}/{item_id}", response_model=CascadeDeleteResponse)
def cascade_delete_item(
    table: str,
    item_id: str,
    service: CascadeService = Depends(get_cascade_service)
):

    try:
        result = service.cascade_delete(table, item_id)

        return CascadeDeleteResponse(
            status="success",
            message=generate_delete_message(table, result.deleted),
            data=result
        )

    except HTTPException:
        raise

    except UnknownTableError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except DataAccessError as e:
        logger.error("cascade_delete_request_failed", table=table, item_id=item_id, partial=e.partial, error=str(e))

        raise HTTPException(
            status_code=500,
            detail=f"연쇄 삭제 중 오류가 발생했습니다: {str(e)}"
        )

    except CascadeError as e:
        logger.error("cascade_delete_request_failed", table=table, item_id=item_id, error=str(e))

        raise HTTPException(
            status_code=500,
            detail=f"연쇄 삭제 설정 오류입니다: {str(e)}"
        )


# 일괄 연쇄 삭제 API
@delete_router.post("/{table}/batch-delete", response_model=CascadeDeleteResponse)
def batch_cascade_delete_items(
    table: str,
    request: BatchDeleteRequest,
    service: CascadeService = Depends(get_cascade_service)
):

    try:
        result = service.batch_cascade_delete(table, request.ids)

        return CascadeDeleteResponse(
            status="success",
            message=f"{len(request.ids)}건 일괄 삭제 완료: " + generate_delete_message(table, result.deleted),
            data=result
        )

    except HTTPException:
        raise

    except UnknownTableError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except DataAccessError as e:
        logger.error(
            "batch_cascade_delete_request_failed",
            table=table,
            ids=request.ids,
            partial=e.partial,
            deleted=e.deleted,
            error=str(e),
        )

        detail = f"일괄 삭제 중 오류가 발생했습니다: {str(e)}"
        if e.partial:
            detail += f" (일부 삭제가 이미 반영되었습니다: {e.deleted})"

        raise HTTPException(status_code=500, detail=detail)

    except CascadeError as e:
        raise HTTPException(
            status_code=500,
            detail=f"연쇄 삭제 설정 오류입니다: {str(e)}"
        )
