"""
    데이터 접근 포트 구현체
"""

from .sqlalchemy_access import SqlAlchemyDataAccess

__all__ = [
    "SqlAlchemyDataAccess",
]
