"""
    연쇄 삭제 관련 라우터
"""

from fastapi import APIRouter
from cascade.endpoints.preview import preview_router
from cascade.endpoints.delete import delete_router

# 연쇄 삭제 라우터를 메인 라우터에 포함 (prefix와 tags 설정)
cascade_router = APIRouter(
    prefix="/admin/cascade",
    tags=["Cascade Delete"]
)

# 엔드포인트 라우터 포함 (구체적인 경로가 먼저)
cascade_router.include_router(preview_router)
cascade_router.include_router(delete_router)
