"""
    헬스체크 및 시스템 상태 확인 API
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db.session import get_db
from db.models.project import Project

health_router = APIRouter(
    prefix="/health",
    tags=["Health Check"]
)

@health_router.get("/")
def health_check():
    """기본 헬스체크"""
    return {
        "status": "healthy", 
        "message": "Supervision Evaluation API server is running properly"
    }

@health_router.get("/db")
def test_database_connection(db: Session = Depends(get_db)):
    """데이터베이스 연결 테스트"""
    try:
        # 프로젝트 테이블에서 레코드 수 조회
        project_count = db.query(Project).count()
        return {
            "status": "success",
            "message": "Database connection successful",
            "project_count": project_count
        }
    except Exception as e:
        return {
            "status": "error", 
            "message": f"Database connection failed: {str(e)}"
        }
