"""
    Supervision Evaluation API 메인 애플리케이션

    FastAPI 애플리케이션의 진입점입니다.
    모든 라우터를 등록하고 기본 설정을 관리합니다.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.health import health_router
from cascade import config
from cascade.graph import get_schema_graph
from cascade.router import cascade_router
from cascade.utils.logging_utils import configure_logging

# 로그 설정
configure_logging(json_output=config.LOG_JSON, level=config.LOG_LEVEL)

# 스키마 그래프 검증: 순환 등 선언 오류가 있으면 기동 시점에 실패
get_schema_graph()

app = FastAPI(
    title="Supervision Evaluation API",
    description="교육 감독 평가 프로젝트 데이터 관리 API",
    version="1.0.0"
)

# CORS 설정 추가
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True, # 쿠키 전달 허용
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# 라우터 등록
app.include_router(health_router)
app.include_router(cascade_router)

@app.get("/")
def root():
    """API 루트 엔드포인트"""
    return {
        "message": "Supervision Evaluation API Server",
        "version": "1.0.0",
        "description": "교육 감독 평가 프로젝트 데이터 관리 API",
        "endpoints": {
            "health": "/health",
            "cascade": "/admin/cascade",
            "docs": "/docs",
            "redoc": "/redoc"
        }
    }
