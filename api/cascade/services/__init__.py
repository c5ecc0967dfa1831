"""
    연쇄 삭제 서비스 패키지

    수집기 → SET NULL 처리기 → 삭제 실행기 → 서비스(Facade) 순으로 구성됩니다.
"""

from .collector import DeletionPlan, collect
from .nullifier import apply_nulls
from .executor import ensure_ordered, execute
from .cascade_service import CascadeService

__all__ = [
    "DeletionPlan",
    "collect",
    "apply_nulls",
    "ensure_ordered",
    "execute",
    "CascadeService",
]
