"""
    삭제 메시지 유틸리티

    삭제 계획 / 결과를 사용자 친화적인 문자열로 변환합니다.
"""

from typing import Dict

from cascade.relations import get_table_display_name


def format_table_counts(counts: Dict[str, int]) -> str:
    """
    테이블별 건수를 사용자 친화적인 문자열로 포맷팅

    Args:
        counts: 테이블명 -> 건수

    Returns:
        str: "지표: 2개, 데이터 지표: 1개" 형식의 문자열
    """
    parts = [
        f"{get_table_display_name(table)}: {count}개"
        for table, count in counts.items()
        if count > 0
    ]

    if not parts:
        return "삭제된 항목이 없습니다."

    return ", ".join(parts)


def generate_preview_message(table: str, planned: Dict[str, int], nullified: Dict[str, int], exists: bool) -> str:
    """
    삭제 미리보기 메시지 생성

    Args:
        table: 루트 테이블
        planned: 테이블별 삭제 예정 건수
        nullified: 참조 해제 예정 건수
        exists: 루트 레코드 존재 여부

    Returns:
        str: 안내 메시지
    """
    item_type = get_table_display_name(table)

    if not exists:
        return f"삭제할 {item_type}를 찾을 수 없습니다."

    dependents = sum(planned.values()) - 1
    unlinked = sum(nullified.values())

    if dependents <= 0 and unlinked == 0:
        return f"이 {item_type}는 안전하게 삭제할 수 있습니다."

    message = f"⚠️ 주의: 이 {item_type}를 삭제하면 하위 항목 {dependents}개가 함께 삭제됩니다."
    if unlinked:
        message += f" {unlinked}개 항목의 참조가 해제됩니다."

    return message


def generate_delete_message(table: str, deleted: Dict[str, int]) -> str:
    """연쇄 삭제 완료 메시지 생성"""
    item_type = get_table_display_name(table)
    return f"{item_type} 연쇄 삭제 완료 ({format_table_counts(deleted)})"
