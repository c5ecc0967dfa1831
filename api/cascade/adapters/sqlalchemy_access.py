"""
    SQLAlchemy 데이터 접근 포트

    ORM 모델에 의존하지 않도록 호출마다 table() / column() 경량 구문을 만들어 사용합니다.
    엔진이 테이블 이름과 필드 이름만 알고 있으면 어떤 테이블이든 다룰 수 있습니다.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Sequence

from sqlalchemy import column, delete, select, table, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cascade.exceptions import DataAccessError
from cascade.ports import BaseDataAccess, Row


class SqlAlchemyDataAccess(BaseDataAccess):
    """Session 기반 데이터 접근 포트 (commit / rollback 으로 트랜잭션 보장)"""

    atomic = True

    def __init__(self, db: Session, id_field: str = "id"):
        self.db = db
        self.id_field = id_field

    def _table(self, table_name: str, *fields: str):
        # 같은 이름의 컬럼이 두 번 선언되지 않도록 중복 제거 (순서 유지)
        names = list(dict.fromkeys((self.id_field, *fields)))
        return table(table_name, *(column(name) for name in names))

    def rows_where(self, table_name: str, field: str, value: Any) -> List[Row]:
        target = self._table(table_name, field)
        query = select(target.c[self.id_field]).where(target.c[field] == value)

        try:
            result = self.db.execute(query)
        except SQLAlchemyError as e:
            raise DataAccessError(
                f"{table_name} 조회 중 오류가 발생했습니다: {str(e)}",
                table=table_name,
                operation="rows_where",
            ) from e

        return [dict(row._mapping) for row in result]

    def delete_rows(self, table_name: str, ids: Sequence[Any]) -> int:
        if not ids:
            return 0

        target = self._table(table_name)
        query = delete(target).where(target.c[self.id_field].in_(list(ids)))

        try:
            result = self.db.execute(query)
        except SQLAlchemyError as e:
            raise DataAccessError(
                f"{table_name} 삭제 중 오류가 발생했습니다: {str(e)}",
                table=table_name,
                operation="delete_rows",
            ) from e

        return result.rowcount

    def update_field(self, table_name: str, field: str, value: Any, where_field: str, where_value: Any) -> int:
        target = self._table(table_name, field, where_field)
        query = (
            update(target)
            .where(target.c[where_field] == where_value)
            .values({target.c[field]: value})
        )

        try:
            result = self.db.execute(query)
        except SQLAlchemyError as e:
            raise DataAccessError(
                f"{table_name}.{field} 변경 중 오류가 발생했습니다: {str(e)}",
                table=table_name,
                operation="update_field",
            ) from e

        return result.rowcount

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """블록이 정상 종료되면 commit, 예외가 발생하면 rollback 후 예외 전달"""
        try:
            yield
            self.db.commit()

        except SQLAlchemyError as e:
            self.db.rollback()
            raise DataAccessError(
                f"트랜잭션 커밋 중 오류가 발생했습니다: {str(e)}",
                operation="commit",
            ) from e

        except Exception:
            self.db.rollback()
            raise
