"""
    데이터 접근 포트

    연쇄 삭제 엔진이 저장소에 접근하는 유일한 경로입니다.
    엔진은 조인이나 트랜잭션을 직접 다루지 않고 아래 세 가지 행 단위 연산만 사용합니다.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Sequence

# 행은 최소한 "id" 키를 가진 매핑
Row = Mapping[str, Any]


class BaseDataAccess(ABC):
    """데이터 접근 포트 기본 클래스"""

    # transaction() 이 실제로 롤백을 보장하는지 여부
    atomic = False

    @abstractmethod
    def rows_where(self, table: str, field: str, value: Any) -> List[Row]:
        """
        field == value 인 행 조회

        Raises:
            DataAccessError: 조회 실패
        """
        pass

    @abstractmethod
    def delete_rows(self, table: str, ids: Sequence[Any]) -> int:
        """
        id 목록으로 행 삭제 (존재하지 않는 id 는 무시)

        Returns:
            int: 실제 삭제된 행 수

        Raises:
            DataAccessError: 삭제 실패
        """
        pass

    @abstractmethod
    def update_field(self, table: str, field: str, value: Any, where_field: str, where_value: Any) -> int:
        """
        where_field == where_value 인 모든 행의 field 를 value 로 변경

        Returns:
            int: 변경된 행 수

        Raises:
            DataAccessError: 변경 실패
        """
        pass

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """트랜잭션 경계. 기본 구현은 아무것도 하지 않음 (atomic = False)"""
        yield
