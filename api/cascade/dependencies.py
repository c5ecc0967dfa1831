"""
    연쇄 삭제 API 의존성
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from db.session import get_db
from cascade.adapters import SqlAlchemyDataAccess
from cascade.services import CascadeService


def get_cascade_service(db: Session = Depends(get_db)) -> CascadeService:
    """ 요청 세션에 바인딩된 연쇄 삭제 서비스 """
    return CascadeService(SqlAlchemyDataAccess(db))
